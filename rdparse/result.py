"""
Match results exchanged between rules.

Every rule returns exactly one of two values: a Success, carrying the list
of values the rule captured and the span of input it consumed, or a Failure.
A Success with an empty value list is still a success; both classes define
`matched` and `__bool__` so that callers never have to guess from the shape
of the values.
"""

from __future__ import annotations
from typing import Any, ClassVar, List, NamedTuple, Optional, Union

from rdparse.errors import UnexpectedInput


class Span(NamedTuple):
    """Half-open [start, end) range of input offsets."""

    start: int
    end: int

    def __repr__(self) -> str:
        return "[%d, %d)" % (self.start, self.end)

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


class Success:
    __slots__ = ("values", "span")

    matched: ClassVar[bool] = True

    values: List[Any]
    span: Optional[Span]

    def __init__(
        self, values: List[Any], span: Optional[Span] = None
    ) -> None:
        self.values = values
        self.span = span

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Success):
            return self.values == other.values and self.span == other.span
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return "Success(%r, %r)" % (self.values, self.span)

    def unwrap(self) -> List[Any]:
        return self.values


class Failure:
    """
    A rule did not match.  `position` is the offset at which the failing
    rule was attempted; `furthest` is the furthest offset any atomic matcher
    examined during the same parse, which is usually the better place to
    point at when reporting an error.
    """

    __slots__ = ("position", "furthest")

    matched: ClassVar[bool] = False

    position: int
    furthest: int

    def __init__(self, position: int, furthest: Optional[int] = None) -> None:
        self.position = position
        self.furthest = position if furthest is None else furthest

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Failure):
            return (
                self.position == other.position
                and self.furthest == other.furthest
            )
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return "Failure(%d, furthest=%d)" % (self.position, self.furthest)

    def unwrap(self) -> List[Any]:
        raise UnexpectedInput(
            "No match at position %d (furthest reached: %d)"
            % (self.position, self.furthest),
            self.position,
            self.furthest,
        )


MatchResult = Union[Success, Failure]
