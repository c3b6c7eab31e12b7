"""cliparser – strict classification of argument tokens.

    >>> from cliparser import parse
    >>> parsed = parse(["prog", "-verbose", "--level=3", "file.txt"])
    >>> parsed.positionals, sorted(parsed.flags), dict(parsed.pairs)
    (('prog', 'file.txt'), ['verbose'], {'level': '3'})
"""

__version__ = '0.1.0'

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
from cliparser.parsing.classifier import ArgumentClassifier, classify_token, parse, try_parse
from cliparser.parsing.options import ParserOptions
from cliparser.runtime.argv import parse_process_args, read_process_args
from cliparser.cli import CliParser, main

__all__ = [
    'ArgumentClassifier',
    'CliParser',
    'DashesMalformed',
    'ErrorKind',
    'FlagMalformed',
    'FlagWithSign',
    'PairBadSign',
    'PairMalformed',
    'PairMissingSign',
    'ParseError',
    'ParsedArguments',
    'ParserOptions',
    'TokenKind',
    'classify_token',
    'main',
    'parse',
    'parse_process_args',
    'read_process_args',
    'try_parse',
]
