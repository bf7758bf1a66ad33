# ============================================================================
# Copyright (c) 2026 The rdparse authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ============================================================================
#
# Release history:
#
# 0.3 : Named rule registry (Grammar, Reference) replaces the fixed-point
#       helper for recursive rules.
#
#       Explicit Success/Failure results; an empty match is no longer
#       mistaken for a failed one.
#
#       Scoped cursor frames and ignored-matcher scopes.
#
#       Only atomic matchers skip ignored input.
#
# 0.2 : Ignored matchers may be stacked; ScopeIgnored(inherit=False) keeps
#       the replacing behaviour of the old Whitespace modifier.
#
# 0.1 : Initial release.
#
# ============================================================================
"""
The rdparse package is a backtracking parser-combinator engine.  Parsers
are written as compositions of rules rather than generated from a grammar
file: a few atomic matchers consume input, combinators put rules together,
and modifiers turn what was matched into values.

    Atomic matchers : Literal Pattern EndOfInput Action
        Combinators : Sequence OrderedChoice Optional Repeat AtLeastOnce
          Modifiers : Reduce TagNode ScopeIgnored
          Recursion : Grammar Reference

Combinators accept raw operands as well as rules: a string stands for a
Literal and a compiled regular expression for a Pattern.

Every rule returns a Success, holding a list of values and the span of
input it consumed, or a Failure.  Failure is an ordinary return value:
OrderedChoice, Optional and the repetitions rely on it to backtrack, and the
cursor position is always rolled back when a rule fails.  Choice is
ordered, in the manner of parsing expression grammars: the first
alternative that matches wins, even where a later one would match more.

Ignored input (see ScopeIgnored and the `ignored` argument of Grammar) is
skipped by the atomic matchers alone, just before they match.  The span of
any other rule starts at the position it was entered, and an Optional or
Repeat that matches nothing leaves the cursor where it found it.

Example, a calculator:

    import operator
    import rdparse

    ops = {"+": operator.add, "-": operator.sub}

    def fold(values):
        result = values[0]
        for op, operand in zip(values[1::2], values[2::2]):
            result = ops[op](result, operand)
        return result

    g = rdparse.Grammar(ignored=r"\\s+")
    number = rdparse.Reduce(
        lambda values: int(values[0]), rdparse.Pattern(r"([0-9]+)")
    )
    g.define("expr", rdparse.Reduce(
        fold,
        g.ref("term"),
        rdparse.Repeat(rdparse.Pattern(r"([-+])"), g.ref("term")),
    ))
    g.define("term", rdparse.OrderedChoice(
        number, rdparse.Sequence("(", g.ref("expr"), ")")
    ))
    g.parse("1 + (2 - 3)").values  # [0]

Options are given as keyword arguments to parse() or Grammar:

    track_spans : Attach [start, end) spans to matches and tagged nodes.
      tag_types : Attach the constructor name to nodes built by TagNode.
        verbose : Print a trace line for every rule invocation.
"""

from __future__ import annotations


__all__ = (
    "Action",
    "AnyException",
    "AtLeastOnce",
    "Cursor",
    "EndOfInput",
    "Failure",
    "Grammar",
    "GrammarError",
    "Literal",
    "MatchResult",
    "Node",
    "Optional",
    "OrderedChoice",
    "ParsingError",
    "Pattern",
    "Reduce",
    "Reference",
    "Repeat",
    "Rule",
    "ScopeIgnored",
    "Sequence",
    "Span",
    "Success",
    "TagNode",
    "UnexpectedInput",
    "__version__",
    "make_rule",
    "parse",
)

from rdparse._version import __version__
from rdparse.ast import Node
from rdparse.atoms import Action, EndOfInput, Literal, Pattern, make_rule
from rdparse.combinators import (
    AtLeastOnce,
    Optional,
    OrderedChoice,
    Repeat,
    Sequence,
)
from rdparse.cursor import Cursor
from rdparse.errors import (
    AnyException,
    GrammarError,
    ParsingError,
    UnexpectedInput,
)
from rdparse.grammar import Grammar, Reference
from rdparse.interfaces import Rule
from rdparse.modifiers import Reduce, ScopeIgnored, TagNode
from rdparse.parser import parse
from rdparse.result import Failure, MatchResult, Span, Success
