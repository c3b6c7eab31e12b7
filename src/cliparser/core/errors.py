from __future__ import annotations

"""Syntax errors raised while classifying argument tokens.

Every error is a root cause: it carries the offending token verbatim and
never wraps another exception. Each kind has its own subclass so callers
can catch one kind, or catch `ParseError` for all of them.
"""

import enum
from typing import Optional

from cliparser.constants import DEFAULT_PROG, FLAG_SYNTAX, PAIR_SYNTAX


class ErrorKind(str, enum.Enum):
    FLAG_WITH_SIGN = 'FlagWithSign'
    FLAG_MALFORMED = 'FlagMalformed'
    PAIR_MISSING_SIGN = 'PairMissingSign'
    PAIR_BAD_SIGN = 'PairBadSign'
    PAIR_MALFORMED = 'PairMalformed'
    DASHES_MALFORMED = 'DashesMalformed'


class ParseError(ValueError):
    """Base class for malformed argument tokens."""

    kind: ErrorKind
    template: str = ''
    syntax: Optional[str] = None

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    @property
    def headline(self) -> str:
        """First message line, embedding the offending token."""
        return self.template.format(token=self.token)

    def describe(self, prog: str = DEFAULT_PROG) -> str:
        """Return the full message with *prog* used in the syntax hint."""
        if self.syntax is None:
            return self.headline
        return f'{self.headline}\nProper syntax: `{prog} {self.syntax}`'

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.token!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind and self.token == other.token

    def __hash__(self) -> int:
        return hash((self.kind, self.token))


class FlagWithSign(ParseError):
    kind = ErrorKind.FLAG_WITH_SIGN
    template = 'Equal signs not allowed in flags: `{token}`'
    syntax = FLAG_SYNTAX


class FlagMalformed(ParseError):
    kind = ErrorKind.FLAG_MALFORMED
    template = 'Malformed flag: `{token}`'
    syntax = FLAG_SYNTAX


class PairMissingSign(ParseError):
    kind = ErrorKind.PAIR_MISSING_SIGN
    template = 'Key-value pair arguments need an equal sign: `{token}`'
    syntax = PAIR_SYNTAX


class PairBadSign(ParseError):
    kind = ErrorKind.PAIR_BAD_SIGN
    template = 'Improper use of equal sign in key-value pair: `{token}`'
    syntax = PAIR_SYNTAX


class PairMalformed(ParseError):
    kind = ErrorKind.PAIR_MALFORMED
    template = 'Malformed key-value pair: `{token}`'
    syntax = PAIR_SYNTAX


class DashesMalformed(ParseError):
    kind = ErrorKind.DASHES_MALFORMED
    template = 'Arguments cannot start with 3 or more dash lines: `{token}`'

