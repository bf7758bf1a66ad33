"""
Modifiers wrap the sequence of their rules and change what a match
produces, or the context it runs in, without changing whether it matches.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional

from rdparse.atoms import Pattern, RuleLike, make_rule
from rdparse.combinators import sequence_of
from rdparse.cursor import Cursor
from rdparse.errors import GrammarError
from rdparse.interfaces import Rule
from rdparse.result import Failure, MatchResult, Success


def make_ignored(operand: Optional[RuleLike]) -> Optional[Rule]:
    """
    Like make_rule, except that a string is taken as a regular expression,
    which is what whitespace and comment matchers usually are.
    """
    if operand is None:
        return None
    elif isinstance(operand, str):
        return Pattern(operand)
    else:
        return make_rule(operand)


class Reduce(Rule):
    """
    Replaces the values of a match with `transform(values)`.  If the
    transform returns a list, that list becomes the new values; any other
    result becomes the single value of the match.  The span of the match is
    unchanged.
    """

    def __init__(
        self, transform: Callable[[List[Any]], Any], *rules: RuleLike
    ) -> None:
        if not callable(transform):
            raise GrammarError("Reduce needs a callable: %r" % (transform,))
        self.transform = transform
        self.rule = sequence_of(rules)

    def __repr__(self) -> str:
        return "Reduce(%s, %r)" % (
            getattr(self.transform, "__name__", repr(self.transform)),
            self.rule,
        )

    def match(self, cursor: Cursor) -> MatchResult:
        result = self.rule(cursor)
        if isinstance(result, Failure):
            return result
        reduced = self.transform(result.values)
        if isinstance(reduced, list):
            return Success(reduced)
        return Success([reduced])


class TagNode(Rule):
    """
    Builds one value per match by calling `constructor(*values)`.  The
    constructed value receives the span of the match as `span` when the
    cursor tracks spans, and the constructor's name as `kind` when the
    cursor tags types.  See rdparse.ast.Node.
    """

    def __init__(
        self, constructor: Callable[..., Any], *rules: RuleLike
    ) -> None:
        if not callable(constructor):
            raise GrammarError(
                "TagNode needs a callable: %r" % (constructor,)
            )
        self.constructor = constructor
        self.kind = getattr(constructor, "__name__", None)
        self.rule = sequence_of(rules)

    def __repr__(self) -> str:
        return "TagNode(%s, %r)" % (self.kind, self.rule)

    def match(self, cursor: Cursor) -> MatchResult:
        result = self.rule(cursor)
        if isinstance(result, Failure):
            return result
        node = self.constructor(*result.values)
        if hasattr(node, "__dict__"):
            if cursor.track_spans:
                node.span = result.span
            if cursor.tag_types:
                node.kind = self.kind or type(node).__name__
        return Success([node])


class ScopeIgnored(Rule):
    """
    Makes `ignored` an ignored matcher while the sequence of `rules` runs,
    on top of the matchers already in effect.  With `inherit` false the
    enclosing matchers are suspended instead, and an `ignored` of None then
    turns skipping off altogether, e.g. inside string literals.  A string
    `ignored` is a regular expression (see make_ignored).

    The scope is in effect for the atomic matches inside it, so in

        Sequence('"', ScopeIgnored(None, Pattern('([^"]*)'), inherit=False),
                 '"')

    the opening quote may follow whitespace while the text after it is kept
    as it is.

    The scope ends when the sequence returns, matched or not.
    """

    ignored: Optional[Rule]

    def __init__(
        self,
        ignored: Optional[RuleLike],
        *rules: RuleLike,
        inherit: bool = True,
    ) -> None:
        self.ignored = make_ignored(ignored)
        self.inherit = inherit
        self.rule = sequence_of(rules)

    def __repr__(self) -> str:
        return "ScopeIgnored(%r, %r%s)" % (
            self.ignored,
            self.rule,
            "" if self.inherit else ", inherit=False",
        )

    def match(self, cursor: Cursor) -> MatchResult:
        with cursor.ignoring(self.ignored, self.inherit):
            return self.rule(cursor)
