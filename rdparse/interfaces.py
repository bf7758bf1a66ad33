"""
This module declares the Rule base class that every matcher, combinator
and modifier in the package derives from.
"""

from __future__ import annotations
from typing import Any

import abc

from mypy_extensions import mypyc_attr

from rdparse.cursor import Cursor
from rdparse.result import Failure, MatchResult, Span, Success


@mypyc_attr(allow_interpreted_subclasses=True)
class Rule(abc.ABC):
    """
    A rule is a function of a Cursor to a MatchResult.  Subclasses
    implement match(); calling the rule wraps match() in the entry protocol
    shared by all rules:

      1. save the cursor position,
      2. if the rule is an atomic matcher (`skips_ignored` is true), skip
         ignored input (whitespace, comments),
      3. run match(),
      4. on success, commit and attach the span [start, end) of the match,
         start being the position match() began at; on failure, restore
         the position saved in step 1.

    A failed rule therefore never moves the cursor, and a rule that wraps
    other rules needs no position bookkeeping of its own.  Rules that wrap
    others do not skip: their span starts where they were entered, and one
    that matches nothing leaves the cursor where it was.
    """

    skips_ignored = False

    def __call__(self, cursor: Cursor) -> MatchResult:
        with cursor.frame() as frame:
            if self.skips_ignored:
                cursor.skip_ignored()
            start = cursor.position
            result = self.match(cursor)
            if isinstance(result, Success):
                frame.commit()
                result = Success(
                    result.values,
                    Span(start, cursor.position)
                    if cursor.track_spans
                    else None,
                )
            else:
                result = Failure(start, cursor.furthest)
        if cursor.verbose:
            cursor.trace("%r at %d --> %r" % (self, start, result))
        return result

    @abc.abstractmethod
    def match(self, cursor: Cursor) -> MatchResult:
        raise NotImplementedError

    def parse(self, text: str, **flags: Any) -> MatchResult:
        """Shorthand for rdparse.parse(self, text, **flags)."""
        from rdparse.parser import parse

        return parse(self, text, **flags)
