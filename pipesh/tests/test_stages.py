"""
Pipeline Stage Tests

Run with: python -m pytest pipesh/tests -v
"""

import os
import unittest

from pipesh.exceptions import (
    UsageError,
    InvalidPatternError,
    DirectoryReadError,
    ChangeDirectoryError,
)
from pipesh.shell.items import Item, ItemKind
from pipesh.shell.stages import Empty, Cat, Ls, Grep, Sort, Uniq, Cd, Exit
from pipesh.tests.helpers import (
    FeedStage,
    feed_lines,
    drain,
    texts,
    WorkingDirectoryMixin,
)


class TestItems(unittest.TestCase):
    """Test pipeline items."""

    def test_kinds(self):
        """Each constructor yields its own kind."""
        self.assertEqual(Item.data("x").kind, ItemKind.DATA)
        self.assertEqual(Item.error("boom").kind, ItemKind.ERROR)
        self.assertTrue(Item.eof().is_eof)
        self.assertTrue(Item.exit().is_exit)

    def test_items_are_immutable(self):
        """Items cannot be modified after creation."""
        item = Item.data("x")
        with self.assertRaises(AttributeError):
            item.text = "y"


class TestEmpty(unittest.TestCase):

    def test_always_eof(self):
        stage = Empty()
        for _ in range(3):
            self.assertTrue(stage.pull().is_eof)
        self.assertIsNone(stage.previous)


class TestCat(WorkingDirectoryMixin, unittest.TestCase):
    """Test the cat source."""

    def test_concatenates_files_in_argument_order(self):
        """Lines of all files come out file after file."""
        first = self.write_file('first.txt', ['one', 'two'])
        second = self.write_file('second.txt', ['three'])

        stage = Cat([first, second], Empty())

        self.assertEqual(texts(drain(stage)), ['one', 'two', 'three'])

    def test_eof_is_latched(self):
        """After EOF, pull keeps returning EOF."""
        path = self.write_file('a.txt', ['x'])
        stage = Cat([path], Empty())

        drain(stage)
        for _ in range(3):
            self.assertTrue(stage.pull().is_eof)

    def test_no_arguments(self):
        self.assertTrue(Cat([], Empty()).pull().is_eof)

    def test_empty_lines_are_data(self):
        path = self.write_file('blank.txt', ['', 'x', ''])
        self.assertEqual(texts(drain(Cat([path], Empty()))), ['', 'x', ''])

    def test_missing_file_becomes_error_item(self):
        """With the error policy, an unreadable file yields one ERROR in place."""
        first = self.write_file('first.txt', ['one'])
        missing = os.path.join(self.tmpdir, 'missing.txt')
        second = self.write_file('second.txt', ['two'])

        stage = Cat([first, missing, second], Empty(), missing_file_policy='error')

        self.assertEqual(stage.pull(), Item.data('one'))
        error = stage.pull()
        self.assertTrue(error.is_error)
        self.assertIn('missing.txt', error.text)
        self.assertEqual(stage.pull(), Item.data('two'))
        self.assertTrue(stage.pull().is_eof)

    def test_missing_file_skipped(self):
        """With the skip policy, an unreadable file yields nothing."""
        missing = os.path.join(self.tmpdir, 'missing.txt')
        path = self.write_file('a.txt', ['x'])

        stage = Cat([missing, path], Empty(), missing_file_policy='skip')

        self.assertEqual(drain(stage), [Item.data('x'), Item.eof()])

    def test_unrepresentable_path_becomes_error_item(self):
        """A path with a NUL byte is reported like any unreadable file."""
        stage = Cat(['a\x00b'], Empty(), missing_file_policy='error')

        error = stage.pull()
        self.assertTrue(error.is_error)
        self.assertTrue(error.text.startswith('cat: a\x00b:'))
        self.assertTrue(stage.pull().is_eof)

    def test_does_not_pull_predecessor(self):
        feed = feed_lines('ignored')
        drain(Cat([], feed))
        self.assertEqual(feed.pulls, 0)


class TestLs(WorkingDirectoryMixin, unittest.TestCase):
    """Test the ls source."""

    def test_sorted_entries(self):
        for name in ('banana', 'apple', 'ant'):
            self.write_file(name, [])
        os.mkdir(os.path.join(self.tmpdir, 'bin'))

        stage = Ls([self.tmpdir], Empty())

        self.assertEqual(texts(drain(stage)), ['ant', 'apple', 'banana', 'bin'])
        self.assertTrue(stage.pull().is_eof)

    def test_current_directory_by_default(self):
        self.write_file('only', [])
        os.chdir(self.tmpdir)

        self.assertEqual(texts(drain(Ls([], Empty()))), ['only'])

    def test_missing_directory_fails_at_construction(self):
        with self.assertRaises(DirectoryReadError) as ctx:
            Ls([os.path.join(self.tmpdir, 'nope')], Empty())
        self.assertEqual(ctx.exception.error_code, 2004)

    def test_unrepresentable_path_fails_at_construction(self):
        with self.assertRaises(DirectoryReadError) as ctx:
            Ls(['a\x00b'], Empty())
        self.assertEqual(ctx.exception.path, 'a\x00b')

    def test_too_many_arguments(self):
        with self.assertRaises(UsageError):
            Ls(['a', 'b'], Empty())


class TestGrep(unittest.TestCase):
    """Test the grep filter."""

    def test_keeps_matching_lines_in_order(self):
        stage = Grep(['an'], feed_lines('banana', 'apple', 'ant', 'cherry', 'pecan'))
        self.assertEqual(texts(drain(stage)), ['banana', 'ant', 'pecan'])

    def test_regular_expression(self):
        stage = Grep(['^a.*e$'], feed_lines('apple', 'ant', 'axe', 'bae'))
        self.assertEqual(texts(drain(stage)), ['apple', 'axe'])

    def test_forwards_error_unchanged(self):
        error = Item.error('upstream failed')
        stage = Grep(['zzz'], FeedStage([Item.data('a'), error, Item.data('zzz')]))

        self.assertIs(stage.pull(), error)
        self.assertEqual(stage.pull(), Item.data('zzz'))

    def test_forwards_exit(self):
        stage = Grep(['a'], Exit([], Empty()))
        self.assertTrue(stage.pull().is_exit)

    def test_invalid_pattern(self):
        with self.assertRaises(InvalidPatternError) as ctx:
            Grep(['a('], Empty())
        self.assertEqual(ctx.exception.pattern, 'a(')

    def test_argument_count(self):
        with self.assertRaises(UsageError):
            Grep([], Empty())
        with self.assertRaises(UsageError):
            Grep(['a', 'b'], Empty())


class TestSort(unittest.TestCase):
    """Test the sort aggregator."""

    def test_sorts_lines(self):
        stage = Sort([], feed_lines('pear', 'apple', 'fig', 'apple'))
        self.assertEqual(texts(drain(stage)), ['apple', 'apple', 'fig', 'pear'])
        self.assertTrue(stage.pull().is_eof)

    def test_drains_input_before_first_output(self):
        """The first output appears only after upstream EOF."""
        feed = feed_lines('b', 'c', 'a')
        stage = Sort([], feed)

        self.assertEqual(stage.pull(), Item.data('a'))
        self.assertEqual(feed.pulls, 4)

    def test_empty_input(self):
        self.assertTrue(Sort([], Empty()).pull().is_eof)

    def test_error_before_eof_is_forwarded_and_buffer_kept(self):
        """An ERROR interrupts collection; lines already read survive."""
        error = Item.error('bad')
        feed = FeedStage([Item.data('b'), error, Item.data('a')])
        stage = Sort([], feed)

        self.assertIs(stage.pull(), error)
        self.assertEqual(texts(drain(stage)), ['a', 'b'])

    def test_rejects_arguments(self):
        with self.assertRaises(UsageError):
            Sort(['-r'], Empty())


class TestUniq(unittest.TestCase):
    """Test the uniq filter."""

    def test_drops_adjacent_duplicates_only(self):
        stage = Uniq([], feed_lines('a', 'a', 'b', 'a', 'a', 'a', 'c', 'c'))
        self.assertEqual(texts(drain(stage)), ['a', 'b', 'a', 'c'])

    def test_first_empty_line_is_kept(self):
        stage = Uniq([], feed_lines('', '', 'x'))
        self.assertEqual(texts(drain(stage)), ['', 'x'])

    def test_forwards_error_unchanged(self):
        error = Item.error('bad')
        stage = Uniq([], FeedStage([Item.data('a'), error, Item.data('a')]))

        self.assertEqual(stage.pull(), Item.data('a'))
        self.assertIs(stage.pull(), error)
        # The error does not reset the comparison.
        self.assertTrue(stage.pull().is_eof)

    def test_rejects_arguments(self):
        with self.assertRaises(UsageError):
            Uniq(['-c'], Empty())


class TestCd(WorkingDirectoryMixin, unittest.TestCase):
    """Test the cd command."""

    def test_changes_directory_once(self):
        stage = Cd([self.tmpdir], Empty())

        self.assertTrue(stage.pull().is_eof)
        self.assertEqual(os.path.realpath(os.getcwd()), self.tmpdir)

        os.chdir(self._saved_cwd)
        self.assertTrue(stage.pull().is_eof)
        self.assertEqual(os.getcwd(), self._saved_cwd)

    def test_failure_raises_then_latches(self):
        missing = os.path.join(self.tmpdir, 'nope')
        stage = Cd([missing], Empty())

        with self.assertRaises(ChangeDirectoryError) as ctx:
            stage.pull()
        self.assertEqual(ctx.exception.path, missing)
        self.assertTrue(stage.pull().is_eof)
        self.assertEqual(os.getcwd(), self._saved_cwd)

    def test_unrepresentable_path_raises(self):
        stage = Cd(['a\x00b'], Empty())

        with self.assertRaises(ChangeDirectoryError):
            stage.pull()
        self.assertTrue(stage.pull().is_eof)
        self.assertEqual(os.getcwd(), self._saved_cwd)

    def test_requires_one_argument(self):
        with self.assertRaises(UsageError):
            Cd([], Empty())
        with self.assertRaises(UsageError):
            Cd(['a', 'b'], Empty())


class TestExit(unittest.TestCase):

    def test_every_pull_requests_exit(self):
        stage = Exit([], Empty())
        self.assertTrue(stage.pull().is_exit)
        self.assertTrue(stage.pull().is_exit)

    def test_rejects_arguments(self):
        with self.assertRaises(UsageError):
            Exit(['now'], Empty())


if __name__ == '__main__':
    unittest.main()
