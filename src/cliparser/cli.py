from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional, Sequence, Tuple

from cliparser.constants import ENV_DEBUG
from cliparser.core.errors import ParseError
from cliparser.core.interfaces import ArgumentParserProtocol, LoggerFactoryProtocol, LoggerLikeProtocol
from cliparser.logging.factory import DefaultLoggerFactory
from cliparser.logging.helpers import get_logger, json_logs_requested
from cliparser.parsing.classifier import ArgumentClassifier
from cliparser.parsing.options import ParserOptions
from cliparser.parsing.parser import PROG, _build_parser
from cliparser.rendering.formatters import render

_LOGGERS: LoggerFactoryProtocol = DefaultLoggerFactory(level=logging.INFO)
logger: LoggerLikeProtocol = get_logger('cli')

# argparse exits with 2 on usage errors; malformed tokens get their own status.
EXIT_SYNTAX = 3


def _configure_logging(enable_json: bool) -> None:
    """Select plain or JSON log output for the 'cliparser' logger."""
    global logger
    _LOGGERS.configure(json_logs=enable_json)
    logger = _LOGGERS.get_logger('cli')


def _split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split *argv* at the first '--' into (options, verbatim tokens)."""
    args = list(argv)
    try:
        idx = args.index('--')
    except ValueError:
        return (args, [])
    return (args[:idx], args[idx + 1:])


def _make_classifier(ns: argparse.Namespace) -> ArgumentParserProtocol:
    """Build the classifier from CLI flags, falling back to CLIPARSER_STRICT_FLAGS."""
    env_opts = ParserOptions.from_env()
    return ArgumentClassifier(ParserOptions(strict_flags=bool(ns.strict_flags) or env_opts.strict_flags))


class CliParser:
    """Top-level façade for command-style execution."""

    @staticmethod
    def collect_tokens(argv: Sequence[str]) -> Tuple[argparse.Namespace, List[str]]:
        """Parse the command's own options and return them with the tokens to classify.

        Options and bare tokens may be interleaved before '--'.
        """
        head, tail = _split_argv(argv)
        ns = _build_parser().parse_intermixed_args(head)
        tokens = list(ns.tokens or []) + tail
        if ns.with_program:
            tokens.insert(0, PROG)
        return (ns, tokens)

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Classify the tokens carried by *argv* and return the rendered result.

        Raises:
            ParseError: for the first malformed token.
        """
        ns, tokens = CliParser.collect_tokens(argv)
        _configure_logging(bool(ns.json_logs) or json_logs_requested())

        classifier = _make_classifier(ns)
        logger.debug('classifying %d token(s)', len(tokens))
        parsed = classifier.parse(tokens)
        return render(parsed, ns.fmt)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `cliparser` console script and `python -m cliparser`."""
    try:
        out = CliParser.run(sys.argv[1:] if argv is None else argv)
        sys.stdout.write(out)
        sys.stdout.flush()
        raise SystemExit(0)
    except ParseError as exc:
        logger.error('%s', exc, extra={'context': {'kind': exc.kind.value, 'token': exc.token}})
        raise SystemExit(EXIT_SYNTAX)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv(ENV_DEBUG) == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
