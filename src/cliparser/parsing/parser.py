# cliparser/parsing/parser.py
from __future__ import annotations

import argparse

PROG = "cliparser"


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the option parser of the `cliparser` command itself.

    Notes:
        - Only the part of argv before the first '--' is handed to this parser.
          Everything after '--' is classified verbatim, so tokens starting with
          dashes must be placed there.
    """
    p = argparse.ArgumentParser(
        prog=PROG,
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] [TOKEN ...] [-- TOKEN ...]",
        description=(
            "cliparser – classify argument tokens into positionals, flags and pairs\n"
            "  word        positional\n"
            "  -flag       flag\n"
            "  --key=value key-value pair"
        ),
    )

    g_out = p.add_argument_group("Output")
    g_cls = p.add_argument_group("Classification")
    g_misc = p.add_argument_group("Miscellaneous")

    g_out.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        dest="fmt",
        help="Render the result as three text lines (default) or as JSON.",
    )
    g_cls.add_argument(
        "--strict-flags",
        action="store_true",
        dest="strict_flags",
        help=(
            "Report a bare '-' as a malformed flag instead of an equal-sign error.\n"
            "Also enabled by CLIPARSER_STRICT_FLAGS=1."
        ),
    )
    g_cls.add_argument(
        "--with-program",
        action="store_true",
        dest="with_program",
        help="Prepend the program name as the first token, as a real argv would.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log records as JSON (also CLIPARSER_JSON_LOGS=1).",
    )
    p.add_argument(
        "tokens",
        nargs="*",
        metavar="TOKEN",
        help="Tokens to classify. Tokens that start with '-' must follow '--'.",
    )
    return p
