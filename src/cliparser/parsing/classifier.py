from __future__ import annotations

"""
classifier – single-pass tokenizer/classifier for argument lists.

Each token is routed by its dash prefix:

    * no dash            → positional (kept verbatim)
    * one dash           → flag ("-name")
    * two dashes         → key-value pair ("--key=value", split at the first '=')
    * three or more      → rejected

The first malformed token aborts the whole parse; no partial result is
returned. The module holds no state between calls, so every invocation
works on its own containers.

Note on flags: a bare '-' has an empty name, yet it is reported as
FlagWithSign, the same kind used for '-a=b'. `ParserOptions.strict_flags`
switches that case to FlagMalformed.

Note on pairs: the '=' position is checked before the length, so "--=",
"--=x" and "--k=" all report PairBadSign. Any token passing the position
checks is at least "--k=v" long, which leaves the PairMalformed branch as a
structural guard only.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from cliparser.constants import (
    FLAG_PREFIX,
    INVALID_PREFIX,
    MIN_FLAG_LENGTH,
    MIN_PAIR_LENGTH,
    PAIR_PREFIX,
    PAIR_SEPARATOR,
)
from cliparser.core.errors import (
    DashesMalformed,
    FlagMalformed,
    FlagWithSign,
    PairBadSign,
    PairMalformed,
    PairMissingSign,
    ParseError,
)
from cliparser.core.models import ParsedArguments, TokenKind
from cliparser.parsing.options import ParserOptions


def classify_token(token: str) -> TokenKind:
    """Return the category implied by the dash prefix of *token*."""
    if not token.startswith(FLAG_PREFIX):
        return TokenKind.POSITIONAL
    if not token.startswith(PAIR_PREFIX):
        return TokenKind.FLAG
    if not token.startswith(INVALID_PREFIX):
        return TokenKind.PAIR
    return TokenKind.INVALID


class ArgumentClassifier:
    """Split a token sequence into positionals, flags and key-value pairs."""

    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self._options = options or ParserOptions()

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, tokens: Iterable[str]) -> ParsedArguments:
        """Classify *tokens* in order.

        Raises:
            ParseError: subclass matching the first malformed token.
            TypeError: if an element is not a string.
        """
        positionals: List[str] = []
        flags: Set[str] = set()
        pairs: Dict[str, str] = {}

        for tok in tokens:
            if not isinstance(tok, str):
                raise TypeError(f'argument tokens must be str, got {type(tok).__name__}')
            kind = classify_token(tok)
            if kind is TokenKind.POSITIONAL:
                positionals.append(tok)
            elif kind is TokenKind.FLAG:
                flags.add(self._flag_name(tok))
            elif kind is TokenKind.PAIR:
                key, value = self._split_pair(tok)
                pairs[key] = value
            else:
                raise DashesMalformed(tok)

        return ParsedArguments(positionals=positionals, flags=flags, pairs=pairs)

    def try_parse(
        self, tokens: Iterable[str]
    ) -> Tuple[Optional[ParsedArguments], Optional[ParseError]]:
        """Like `parse`, but return ``(result, None)`` or ``(None, error)``."""
        try:
            return (self.parse(tokens), None)
        except ParseError as exc:
            return (None, exc)

    def _flag_name(self, tok: str) -> str:
        if PAIR_SEPARATOR in tok:
            raise FlagWithSign(tok)
        if len(tok) < MIN_FLAG_LENGTH:
            if self._options.strict_flags:
                raise FlagMalformed(tok)
            raise FlagWithSign(tok)
        return tok[len(FLAG_PREFIX):]

    @staticmethod
    def _split_pair(tok: str) -> Tuple[str, str]:
        pos = tok.find(PAIR_SEPARATOR)
        if pos == -1:
            raise PairMissingSign(tok)
        # Empty key ("--=v") or empty value ("--k=").
        if pos == len(PAIR_PREFIX) or pos == len(tok) - 1:
            raise PairBadSign(tok)
        if len(tok) < MIN_PAIR_LENGTH:
            raise PairMalformed(tok)
        return (tok[len(PAIR_PREFIX):pos], tok[pos + 1:])


def parse(tokens: Iterable[str], *, options: Optional[ParserOptions] = None) -> ParsedArguments:
    """Classify *tokens*; see `ArgumentClassifier.parse`."""
    return ArgumentClassifier(options).parse(tokens)


def try_parse(
    tokens: Iterable[str], *, options: Optional[ParserOptions] = None
) -> Tuple[Optional[ParsedArguments], Optional[ParseError]]:
    """Classify *tokens* without raising on syntax errors."""
    return ArgumentClassifier(options).try_parse(tokens)
