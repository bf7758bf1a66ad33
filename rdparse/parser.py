from __future__ import annotations
from typing import Union

from rdparse.atoms import RuleLike, make_rule
from rdparse.cursor import Cursor
from rdparse.result import MatchResult


def parse(
    rule: RuleLike,
    text: Union[str, Cursor],
    *,
    track_spans: bool = True,
    tag_types: bool = False,
    verbose: bool = False,
) -> MatchResult:
    """
    Match `rule` against `text`, starting at offset 0.  Returns a Success
    with the values and span of the match, which need not cover the whole
    text (end a rule with EndOfInput for that), or a Failure whose
    `furthest` tells how far the parse got.

    `text` may also be a Cursor, which is used as it is, flags included.
    """
    rule = make_rule(rule)
    if isinstance(text, Cursor):
        cursor = text
    else:
        cursor = Cursor(
            text,
            track_spans=track_spans,
            tag_types=tag_types,
            verbose=verbose,
        )
    if cursor.verbose:
        cursor.trace("parse %r at %d" % (rule, cursor.position))
    return rule(cursor)
