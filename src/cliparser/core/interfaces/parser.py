from __future__ import annotations
from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable

from cliparser.core.errors import ParseError
from cliparser.core.models import ParsedArguments


@runtime_checkable
class ArgumentParserProtocol(Protocol):
    """Protocol for components that classify raw argument tokens.

    Implementations route every token to exactly one of:
      * positionals
      * flags
      * pairs
    or raise a `ParseError` for the first malformed token.
    """

    def parse(self, tokens: Iterable[str]) -> ParsedArguments:
        """Return the classified arguments or raise `ParseError`."""
        ...

    def try_parse(self, tokens: Iterable[str]) -> Tuple[Optional[ParsedArguments], Optional[ParseError]]:
        """Return ``(result, None)`` on success and ``(None, error)`` on failure."""
        ...
