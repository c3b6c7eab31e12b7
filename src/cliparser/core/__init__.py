from cliparser.core.errors import (
    DashesMalformed,
    ErrorKind,
    FlagMalformed,
    FlagWithSign,
    PairBadSign,
    PairMalformed,
    PairMissingSign,
    ParseError,
)
from cliparser.core.models import ParsedArguments, TokenKind

__all__ = [
    'DashesMalformed',
    'ErrorKind',
    'FlagMalformed',
    'FlagWithSign',
    'PairBadSign',
    'PairMalformed',
    'PairMissingSign',
    'ParseError',
    'ParsedArguments',
    'TokenKind',
]
