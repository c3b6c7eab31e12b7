from __future__ import annotations

"""Process-argument collaborator.

The classifier never touches `sys.argv`; this module performs the single
read of the invocation arguments and passes them in.
"""

import sys
from typing import List, Optional

from cliparser.core.models import ParsedArguments
from cliparser.parsing.classifier import ArgumentClassifier
from cliparser.parsing.options import ParserOptions


def read_process_args(*, include_program: bool = True) -> List[str]:
    """Return a copy of `sys.argv`, optionally without the program name."""
    args = list(sys.argv)
    return args if include_program else args[1:]


def parse_process_args(
    *, include_program: bool = True, options: Optional[ParserOptions] = None
) -> ParsedArguments:
    """Read the process arguments once and classify them.

    The program name is kept by default and lands among the positionals,
    since it carries no leading dash.
    """
    return ArgumentClassifier(options).parse(read_process_args(include_program=include_program))
