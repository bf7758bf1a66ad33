"""
Atomic matchers: the only rules that consume input directly.
"""

from __future__ import annotations
from typing import Any, Callable, Tuple, Union

import re

from rdparse.cursor import Cursor
from rdparse.errors import GrammarError
from rdparse.interfaces import Rule
from rdparse.result import Failure, MatchResult, Success

RuleLike = Union[
    Rule, str, "re.Pattern[str]", Callable[[Cursor], MatchResult]
]


class Literal(Rule):
    """
    Matches `text` exactly.  Produces no values, or the matched text when
    `capture` is true.
    """

    skips_ignored = True

    def __init__(self, text: str, capture: bool = False) -> None:
        if not isinstance(text, str):
            raise GrammarError("Literal text must be a string: %r" % (text,))
        self.text = text
        self.capture = capture

    def __repr__(self) -> str:
        return "Literal(%r)" % self.text

    def match(self, cursor: Cursor) -> MatchResult:
        if cursor.input.startswith(self.text, cursor.position):
            cursor.advance(len(self.text))
            return Success([self.text] if self.capture else [])
        cursor.reached(cursor.position)
        return Failure(cursor.position)


class Pattern(Rule):
    """
    Matches a regular expression at the cursor position, never scanning
    ahead.  The values are the expression's capture groups, in group order;
    a group that did not take part in the match yields None.

    `expr` is either a string, compiled with `flags`, or a compiled
    expression whose own flags are kept.  Matching is always anchored at
    the cursor position, so a leading "^" is redundant and is dropped (it
    would otherwise only match at offset 0).

    Only that one leading "^" is dropped.  The text before the cursor stays
    visible to the expression, so any other "^" (in a later alternative,
    or under re.MULTILINE) keeps its usual meaning of start of input (or
    of line), and lookbehinds and \\b see the preceding characters.
    Write "a|b" rather than "^a|^b".
    """

    skips_ignored = True

    regex: re.Pattern[str]

    def __init__(
        self, expr: Union[str, re.Pattern[str]], flags: int = 0
    ) -> None:
        if isinstance(expr, re.Pattern):
            source = expr.pattern
            flags |= expr.flags
        else:
            source = expr
        if not isinstance(source, str):
            raise GrammarError(
                "Pattern must be a text pattern: %r" % (expr,)
            )
        if source.startswith("^"):
            source = source[1:]
        try:
            self.regex = re.compile(source, flags)
        except re.error as e:
            raise GrammarError(
                "Invalid regular expression %r: %s" % (source, e)
            ) from e

    def __repr__(self) -> str:
        return "Pattern(%r)" % self.regex.pattern

    def match(self, cursor: Cursor) -> MatchResult:
        m = self.regex.match(cursor.input, cursor.position)
        if m is None:
            cursor.reached(cursor.position)
            return Failure(cursor.position)
        cursor.advance(m.end() - cursor.position)
        return Success(list(m.groups()))


class EndOfInput(Rule):
    """Matches, without values, only when no input is left."""

    skips_ignored = True

    def __repr__(self) -> str:
        return "EndOfInput()"

    def match(self, cursor: Cursor) -> MatchResult:
        if cursor.at_end():
            return Success([])
        cursor.reached(cursor.position)
        return Failure(cursor.position)


class Action(Rule):
    """
    Turns a plain function of a Cursor into a rule.  The function may move
    the cursor with `advance()` and must return a Success or a Failure; it
    runs inside the usual entry protocol, so a failure is rolled back for
    it.  Ignored input is not skipped for it; a function that wants that
    calls `cursor.skip_ignored()` itself.
    """

    def __init__(self, fn: Callable[[Cursor], MatchResult]) -> None:
        if not callable(fn):
            raise GrammarError("Action needs a callable: %r" % (fn,))
        self.fn = fn

    def __repr__(self) -> str:
        return "Action(%s)" % getattr(self.fn, "__name__", repr(self.fn))

    def match(self, cursor: Cursor) -> MatchResult:
        result = self.fn(cursor)
        if not isinstance(result, (Success, Failure)):
            raise GrammarError(
                "%r returned %r instead of a match result" % (self, result)
            )
        return result


def make_rule(operand: Any) -> Rule:
    """
    Normalize a combinator operand: strings become Literals, compiled
    regular expressions become Patterns, other callables become Actions and
    rules are returned as they are.
    """
    if isinstance(operand, Rule):
        return operand
    elif isinstance(operand, str):
        return Literal(operand)
    elif isinstance(operand, re.Pattern):
        return Pattern(operand)
    elif callable(operand):
        return Action(operand)
    else:
        raise GrammarError("Cannot make a rule from %r" % (operand,))


def make_rules(operands: Tuple[Any, ...]) -> Tuple[Rule, ...]:
    return tuple(make_rule(operand) for operand in operands)
