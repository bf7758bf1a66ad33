import contextlib
import io
import unittest

import rdparse
from rdparse import Cursor, Pattern, Sequence


class TestCursor(unittest.TestCase):
    def test_save_discard_restore(self):
        cursor = Cursor("abcdef")
        cursor.save()
        cursor.advance(2)
        cursor.save()
        cursor.advance(3)
        self.assertEqual(cursor.depth, 2)
        cursor.restore()
        self.assertEqual(cursor.position, 2)
        cursor.discard()
        self.assertEqual(cursor.position, 2)
        self.assertEqual(cursor.depth, 0)

    def test_frame_commit(self):
        cursor = Cursor("abc")
        with cursor.frame() as frame:
            cursor.advance(2)
            frame.commit()
        self.assertEqual(cursor.position, 2)
        self.assertEqual(cursor.depth, 0)

    def test_frame_rollback(self):
        cursor = Cursor("abc")
        with cursor.frame():
            cursor.advance(2)
        self.assertEqual(cursor.position, 0)
        self.assertEqual(cursor.depth, 0)

    def test_frame_rollback_on_exception(self):
        cursor = Cursor("abc")
        with self.assertRaises(RuntimeError):
            with cursor.frame():
                cursor.advance(1)
                raise RuntimeError("boom")
        self.assertEqual(cursor.position, 0)
        self.assertEqual(cursor.depth, 0)

    def test_furthest(self):
        cursor = Cursor("abcdef")
        with cursor.frame():
            cursor.advance(4)
        cursor.advance(1)
        self.assertEqual(cursor.position, 1)
        self.assertEqual(cursor.furthest, 4)

    def test_ignored_scopes(self):
        spaces = Pattern(r" +")
        tabs = Pattern(r"\t+")
        cursor = Cursor("")
        self.assertEqual(cursor.ignored_rules, ())
        cursor.push_ignored(spaces)
        cursor.push_ignored(tabs)
        self.assertEqual(cursor.ignored_rules, (spaces, tabs))
        cursor.push_ignored(None, inherit=False)
        self.assertEqual(cursor.ignored_rules, ())
        cursor.pop_ignored()
        cursor.pop_ignored()
        self.assertEqual(cursor.ignored_rules, (spaces,))
        with cursor.ignoring(tabs, inherit=False):
            self.assertEqual(cursor.ignored_rules, (tabs,))
        self.assertEqual(cursor.ignored_rules, (spaces,))

    def test_skip_ignored(self):
        cursor = Cursor("   x")
        cursor.push_ignored(Pattern(r"\s+"))
        cursor.skip_ignored()
        self.assertEqual(cursor.position, 3)
        cursor.skip_ignored()
        self.assertEqual(cursor.position, 3)
        self.assertEqual(cursor.depth, 0)

    def test_skip_ignored_alternates_until_stable(self):
        # The comment matcher is a rule built from other rules; its own
        # entry must not start another skipping pass.
        cursor = Cursor("  # c\n  x")
        cursor.push_ignored(Pattern(r"\s+"))
        cursor.push_ignored(Sequence("#", Pattern(r"[^\n]*")))
        cursor.skip_ignored()
        self.assertEqual(cursor.position, 8)
        self.assertEqual(cursor.remaining, "x")

    def test_skip_ignored_zero_width(self):
        cursor = Cursor("x")
        cursor.push_ignored(Pattern(r"\s*"))
        cursor.skip_ignored()
        self.assertEqual(cursor.position, 0)

    def test_verbose(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            rdparse.parse(rdparse.Literal("a"), "a", verbose=True)
        self.assertIn(
            "Literal('a') at 0 --> Success([], [0, 1))", out.getvalue()
        )

    def test_quiet(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            rdparse.parse(rdparse.Literal("a"), "a")
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
