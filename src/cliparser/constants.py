from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

FLAG_PREFIX: str = '-'
PAIR_PREFIX: str = '--'
INVALID_PREFIX: str = '---'
PAIR_SEPARATOR: str = '='

# Shortest well-formed pair is "--k=v".
MIN_PAIR_LENGTH: int = 5
MIN_FLAG_LENGTH: int = 2

# Program name shown in the "Proper syntax" hint of error messages.
DEFAULT_PROG: str = './my_program'
FLAG_SYNTAX: str = '-flag'
PAIR_SYNTAX: str = '--key=value'

ENV_JSON_LOGS: str = 'CLIPARSER_JSON_LOGS'
ENV_STRICT_FLAGS: str = 'CLIPARSER_STRICT_FLAGS'
ENV_VERSION: str = 'CLIPARSER_VERSION'
ENV_DEBUG: str = 'DEBUG'
