"""
The Cursor holds all mutable state of one parse: the input text, the
current position, a stack of saved positions used for backtracking, and the
stack of ignored matchers (whitespace, comments) that are skipped before
each match attempt.

Rules never touch the position stack directly.  They acquire a Frame with
`Cursor.frame()`, which saves the position on entry and, on exit, either
discards the saved position (the frame was committed) or restores it.  The
ignored-matcher stack is scoped the same way through `Cursor.ignoring()`.
Both are context managers, so the stacks stay balanced on every exit path,
including exceptions raised by user callbacks.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

import contextlib

if TYPE_CHECKING:
    from rdparse.interfaces import Rule


class Frame:
    """A saved cursor position; see Cursor.frame()."""

    __slots__ = ("committed",)

    def __init__(self) -> None:
        self.committed = False

    def commit(self) -> None:
        self.committed = True


class Cursor:
    """
    Parse state shared by reference by every rule evaluated during one
    top-level parse.  A Cursor must not be shared between threads; separate
    parses each get their own Cursor and can then run in parallel.
    """

    input: str
    position: int
    furthest: int
    track_spans: bool
    tag_types: bool
    verbose: bool

    _stack: List[int]
    _ignored: List[Tuple[Rule, ...]]
    _skipping: bool

    def __init__(
        self,
        input: str,
        track_spans: bool = True,
        tag_types: bool = False,
        verbose: bool = False,
    ) -> None:
        """
        input : The text to parse.

        track_spans : If true, successful matches carry the [start, end)
                      span of input they consumed, and TagNode attaches
                      that span to the values it constructs.

        tag_types : If true, TagNode attaches the name of the constructor
                    to the values it constructs, as their `kind`.

        verbose : If true, print a trace line for every rule invocation."""
        self.input = input
        self.position = 0
        self.furthest = 0
        self.track_spans = track_spans
        self.tag_types = tag_types
        self.verbose = verbose
        self._stack = []
        self._ignored = [()]
        self._skipping = False

    def __repr__(self) -> str:
        return "<Cursor at %d of %d, depth %d>" % (
            self.position,
            len(self.input),
            len(self._stack),
        )

    @property
    def depth(self) -> int:
        """Number of positions currently saved."""
        return len(self._stack)

    @property
    def remaining(self) -> str:
        return self.input[self.position :]

    def at_end(self) -> bool:
        return self.position == len(self.input)

    #
    # Position stack.
    #
    def save(self) -> None:
        self._stack.append(self.position)

    def discard(self) -> None:
        self._stack.pop()

    def restore(self) -> None:
        self.position = self._stack.pop()

    @contextlib.contextmanager
    def frame(self) -> Iterator[Frame]:
        """
        Save the position for the extent of the with-block.  Unless the
        block calls `commit()` on the yielded Frame, the position is
        restored on exit.
        """
        self.save()
        frame = Frame()
        try:
            yield frame
        finally:
            if frame.committed:
                self.discard()
            else:
                self.restore()

    def advance(self, count: int) -> None:
        assert count >= 0
        assert self.position + count <= len(self.input)
        self.position += count
        self.reached(self.position)

    def reached(self, position: int) -> None:
        """Record that a matcher examined input up to `position`."""
        if position > self.furthest:
            self.furthest = position

    #
    # Ignored matchers.
    #
    @property
    def ignored_rules(self) -> Tuple[Rule, ...]:
        """The matchers currently skipped, in registration order."""
        return self._ignored[-1]

    def push_ignored(
        self, rule: Optional[Rule], inherit: bool = True
    ) -> None:
        """
        Make `rule` an ignored matcher until the matching pop_ignored().
        With `inherit` false, the matchers of enclosing scopes are
        suspended; a None rule with `inherit` false disables skipping.
        """
        active: Tuple[Rule, ...] = self._ignored[-1] if inherit else ()
        if rule is not None:
            active = active + (rule,)
        self._ignored.append(active)

    def pop_ignored(self) -> None:
        assert len(self._ignored) > 1
        self._ignored.pop()

    @contextlib.contextmanager
    def ignoring(
        self, rule: Optional[Rule], inherit: bool = True
    ) -> Iterator[None]:
        self.push_ignored(rule, inherit)
        try:
            yield
        finally:
            self.pop_ignored()

    def skip_ignored(self) -> None:
        """
        Apply every ignored matcher in order, over and over, until a whole
        pass leaves the position where it was.  Ignored matchers are rules
        themselves and would skip again on entry; that nested skipping is
        turned off while a pass runs.
        """
        rules = self._ignored[-1]
        if self._skipping or not rules:
            return
        self._skipping = True
        try:
            while True:
                start = self.position
                for rule in rules:
                    rule(self)
                if self.position == start:
                    break
        finally:
            self._skipping = False

    #
    # Tracing.
    #
    def trace(self, message: str) -> None:
        if self.verbose:
            print("rdparse:%s %s" % ("  " * len(self._stack), message))
