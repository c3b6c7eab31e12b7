from cliparser.parsing.classifier import ArgumentClassifier, classify_token, parse, try_parse
from cliparser.parsing.options import ParserOptions
from cliparser.parsing.parser import PROG, _build_parser

__all__ = ['ArgumentClassifier', 'ParserOptions', 'PROG', '_build_parser', 'classify_token', 'parse', 'try_parse']
