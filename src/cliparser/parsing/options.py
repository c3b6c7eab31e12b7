from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from cliparser.constants import ENV_STRICT_FLAGS


@dataclass(frozen=True)
class ParserOptions:
    """Tunables for `ArgumentClassifier`.

    Attributes:
        strict_flags: Report a bare '-' as FlagMalformed instead of the
            historical FlagWithSign.
    """

    strict_flags: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ParserOptions':
        env = os.environ if environ is None else environ
        return cls(strict_flags=env.get(ENV_STRICT_FLAGS) == '1')
