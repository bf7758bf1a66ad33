"""
The rdparse package implements the following exception classes:

  * AnyException
  * GrammarError
  * ParsingError
  * UnexpectedInput

A rule that does not match is not an error: it returns a Failure.  The
exceptions below are raised only for mistakes made while building a grammar,
or when a caller explicitly asks for a failed parse to be turned into one.
"""

from __future__ import annotations


# ============================================================================
# Begin exceptions.
#
class AnyException(Exception):
    """
    Top-level class for all exceptions thrown within the rdparse package.
    """


class GrammarError(AnyException):
    """
    Grammar construction error.  GrammarError arises when an operand cannot
    be turned into a rule, a regular expression does not compile, or a named
    rule is missing, duplicated or redefined after the grammar was frozen.
    """


class ParsingError(AnyException):
    """
    Top level parsing exception class, from which we derive all exceptions
    that describe a problem with the input text rather than the grammar.
    """


class UnexpectedInput(ParsingError):
    """
    Syntax error.  UnexpectedInput is raised by Failure.unwrap() when the
    caller prefers an exception over inspecting the Failure.  `position` is
    where the failing rule was attempted, `furthest` the furthest offset any
    matcher reached during the parse.
    """

    def __init__(self, message: str, position: int, furthest: int) -> None:
        super().__init__(message)
        self.position = position
        self.furthest = furthest


#
# End exceptions.
# ============================================================================
