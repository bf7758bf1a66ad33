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
"""
This module contains the named rule registry used to write recursive
grammars.

Rules are built bottom-up from their operands, so a rule cannot contain
itself directly.  A Grammar maps names to rules, and a Reference is a rule
that looks its name up in the grammar each time it is called.  References
may therefore be created before the rule they name is defined, which
resolves both self-recursion and mutual recursion:

    g = rdparse.Grammar()
    g.define("expr", rdparse.OrderedChoice(
        rdparse.Sequence("(", g.ref("expr"), ")"),
        rdparse.Pattern(r"([0-9]+)"),
    ))
    g.parse("((1))")

The engine does not detect left recursion.  Every recursive path through a
grammar must consume input before it reaches the rule it started from;
a rule such as `expr := expr "+" term` recurses forever.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from rdparse.atoms import RuleLike
from rdparse.combinators import sequence_of
from rdparse.cursor import Cursor
from rdparse.errors import GrammarError
from rdparse.interfaces import Rule
from rdparse.modifiers import make_ignored
from rdparse.parser import parse
from rdparse.result import MatchResult


class Reference(Rule):
    """
    A rule that stands for the rule named `name` in `grammar`.  The lookup
    happens when the reference is called, not when it is built.
    """

    def __init__(self, name: str, grammar: Grammar) -> None:
        self.name = name
        self.grammar = grammar

    def __repr__(self) -> str:
        return "Reference(%r)" % self.name

    def resolve(self) -> Rule:
        return self.grammar.resolve(self.name)

    def __call__(self, cursor: Cursor) -> MatchResult:
        # The target runs the entry protocol itself.
        return self.match(cursor)

    def match(self, cursor: Cursor) -> MatchResult:
        return self.resolve()(cursor)


class Grammar:
    """
    A mutable mapping from rule names to rules while the grammar is being
    built.  The first parse() freezes it, after which rules can no longer
    be defined.
    """

    _rules: Dict[str, Rule]
    _refs: Dict[str, Reference]

    def __init__(
        self,
        start: Optional[str] = None,
        ignored: Optional[RuleLike] = None,
        track_spans: bool = True,
        tag_types: bool = False,
        verbose: bool = False,
    ) -> None:
        """
        start : The name of the rule parse() starts from.  Defaults to the
                first rule defined.

        ignored : A matcher for whitespace and comments, skipped before
                  every atomic match throughout the grammar.

        track_spans, tag_types, verbose : Passed on to the Cursor of every
                                          parse; see rdparse.Cursor."""
        self.start = start
        self.ignored = make_ignored(ignored)
        self.track_spans = track_spans
        self.tag_types = tag_types
        self.verbose = verbose
        self._rules = {}
        self._refs = {}
        self._frozen = False

    def __repr__(self) -> str:
        return "<Grammar %s>" % " ".join(self._rules)

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __getitem__(self, name: str) -> Rule:
        return self.resolve(name)

    def __setitem__(self, name: str, rule: RuleLike) -> None:
        self.define(name, rule)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> List[str]:
        return list(self._rules)

    def define(self, name: str, *rules: RuleLike) -> Reference:
        """
        Register the sequence of `rules` under `name`, and return a
        reference to it.
        """
        if self._frozen:
            raise GrammarError(
                "Cannot define %r: grammar is frozen" % (name,)
            )
        if name in self._rules:
            raise GrammarError("Duplicate rule definition: %r" % (name,))
        self._rules[name] = sequence_of(rules)
        if self.start is None:
            self.start = name
        return self.ref(name)

    def ref(self, name: str) -> Reference:
        try:
            return self._refs[name]
        except KeyError:
            ref = self._refs[name] = Reference(name, self)
            return ref

    def resolve(self, name: str) -> Rule:
        try:
            return self._rules[name]
        except KeyError:
            raise GrammarError("Undefined rule: %r" % (name,)) from None

    def check(self) -> None:
        """Raise GrammarError if a reference names an undefined rule."""
        missing = sorted(name for name in self._refs if name not in self)
        if missing:
            raise GrammarError(
                "Undefined rule%s: %s"
                % ("s" if len(missing) > 1 else "", ", ".join(missing))
            )

    def freeze(self) -> None:
        self.check()
        self._frozen = True

    def parse(self, text: str, start: Optional[str] = None) -> MatchResult:
        if not self._frozen:
            self.freeze()
        if start is None:
            start = self.start
        if start is None:
            raise GrammarError("Grammar has no rules")
        if start not in self:
            raise GrammarError("Undefined start rule: %r" % (start,))
        cursor = Cursor(
            text,
            track_spans=self.track_spans,
            tag_types=self.tag_types,
            verbose=self.verbose,
        )
        if self.ignored is not None:
            cursor.push_ignored(self.ignored)
        return parse(self.ref(start), cursor)
