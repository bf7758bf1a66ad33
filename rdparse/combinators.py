"""
Combinators compose rules into larger rules.  Every combinator accepts
rules or raw operands (see atoms.make_rule).  Optional, Repeat and
AtLeastOnce treat several operands as one Sequence.

None of the combinators save or restore the cursor position themselves:
each rule they call does that on entry, so an alternative that fails has
already been rolled back by the time OrderedChoice tries the next one.
"""

from __future__ import annotations
from typing import Any, List, Tuple

from rdparse.atoms import RuleLike, make_rules
from rdparse.cursor import Cursor
from rdparse.errors import GrammarError
from rdparse.interfaces import Rule
from rdparse.result import Failure, MatchResult, Success


def _format_rules(rules: Tuple[Rule, ...]) -> str:
    return ", ".join(repr(rule) for rule in rules)


def sequence_of(operands: Tuple[Any, ...]) -> Rule:
    """One rule for `operands`, without wrapping a lone rule."""
    rules = make_rules(operands)
    if len(rules) == 1:
        return rules[0]
    return Sequence(*rules)


class Sequence(Rule):
    """
    Matches every rule in turn, each from where the previous one stopped,
    and concatenates their values.  If one of them fails, the whole
    sequence fails and the cursor is back where the sequence started.
    """

    rules: Tuple[Rule, ...]

    def __init__(self, *rules: RuleLike) -> None:
        self.rules = make_rules(rules)

    def __repr__(self) -> str:
        return "Sequence(%s)" % _format_rules(self.rules)

    def match(self, cursor: Cursor) -> MatchResult:
        values: List[Any] = []
        for rule in self.rules:
            result = rule(cursor)
            if isinstance(result, Failure):
                return result
            values.extend(result.values)
        return Success(values)


class OrderedChoice(Rule):
    """
    Tries the alternatives in order and commits to the first one that
    matches; later alternatives are not attempted.  This is a PEG choice:
    OrderedChoice("a", "ab") matches only "a" of "ab".
    """

    rules: Tuple[Rule, ...]

    def __init__(self, *rules: RuleLike) -> None:
        if not rules:
            raise GrammarError("OrderedChoice needs at least one alternative")
        self.rules = make_rules(rules)

    def __repr__(self) -> str:
        return "OrderedChoice(%s)" % _format_rules(self.rules)

    def match(self, cursor: Cursor) -> MatchResult:
        for rule in self.rules:
            result = rule(cursor)
            if isinstance(result, Success):
                return result
        return Failure(cursor.position)


class Optional(Rule):
    """Matches the sequence of `rules`, or nothing; never fails."""

    rule: Rule

    def __init__(self, *rules: RuleLike) -> None:
        self.rule = sequence_of(rules)

    def __repr__(self) -> str:
        return "Optional(%r)" % self.rule

    def match(self, cursor: Cursor) -> MatchResult:
        result = self.rule(cursor)
        if isinstance(result, Success):
            return result
        return Success([])


class Repeat(Rule):
    """
    Matches the sequence of `rules` as many times as possible and
    concatenates the values of all repetitions.  Zero repetitions is a
    match.

    A repetition that matches without consuming input ends the loop (its
    values are kept), since repeating it would never make progress.
    """

    minimum = 0

    rule: Rule

    def __init__(self, *rules: RuleLike) -> None:
        self.rule = sequence_of(rules)

    def __repr__(self) -> str:
        return "%s(%r)" % (type(self).__name__, self.rule)

    def match(self, cursor: Cursor) -> MatchResult:
        values: List[Any] = []
        count = 0
        while True:
            start = cursor.position
            result = self.rule(cursor)
            if isinstance(result, Failure):
                break
            count += 1
            values.extend(result.values)
            if cursor.position == start:
                break
        if count < self.minimum:
            return Failure(cursor.position)
        return Success(values)


class AtLeastOnce(Repeat):
    """Like Repeat, but fails unless there is at least one repetition."""

    minimum = 1
