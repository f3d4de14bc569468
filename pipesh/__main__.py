"""Allow ``python -m pipesh``."""

import sys

from pipesh.main import main

sys.exit(main())
