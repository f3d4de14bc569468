"""
Pipeline Module

The built pipeline and the runner that drives it.

Author: pipesh developers
Version: 1.0.0
"""

from typing import Callable, Iterator, List, Tuple

from .items import Item
from .stages import Stage, Empty
from pipesh.logger import get_logger


class Pipeline:
    """
    An ordered chain of stages built from one command line.

    ``stages[0]`` is always an Empty source; every later stage pulls
    from the stage right before it. The pipeline owns all of its stages
    and is discarded once it has been run.
    """

    def __init__(self, stages: List[Stage]):
        if not stages or not isinstance(stages[0], Empty):
            raise ValueError("A pipeline must start with an Empty stage")
        for index in range(1, len(stages)):
            if stages[index].previous is not stages[index - 1]:
                raise ValueError(f"Stage {index} is not linked to stage {index - 1}")

        self._stages: Tuple[Stage, ...] = tuple(stages)

    @property
    def stages(self) -> Tuple[Stage, ...]:
        return self._stages

    @property
    def last(self) -> Stage:
        """The stage whose output is the pipeline's output."""
        return self._stages[-1]

    @property
    def is_trivial(self) -> bool:
        """True when the command line contained no commands."""
        return len(self._stages) == 1

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self._stages)

    def __repr__(self) -> str:
        names = " | ".join(stage.name for stage in self._stages[1:])
        return f"Pipeline({names!r})"


class PipelineRunner:
    """
    Drives a pipeline to completion.

    Pulls the last stage until it returns something other than DATA and
    hands every DATA line to ``output``. The terminal item (EOF, ERROR or
    EXIT) is returned for the caller to act on.

    Example:
        >>> runner = PipelineRunner(output=print)
        >>> item = runner.run(pipeline)
    """

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output
        self._logger = get_logger('runner')

    def run(self, pipeline: Pipeline) -> Item:
        """
        Run a pipeline.

        Args:
            pipeline: A built pipeline

        Returns:
            The item that ended the run
        """
        stage = pipeline.last
        emitted = 0

        while True:
            item = stage.pull()
            if not item.is_data:
                break
            self._output(item.text)
            emitted += 1

        self._logger.debug(
            "Pipeline finished",
            context={'pipeline': pipeline, 'lines': emitted, 'end': item.kind.name}
        )
        return item
