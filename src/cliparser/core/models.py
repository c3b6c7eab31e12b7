from __future__ import annotations

"""
Result containers for argument classification.

`ParsedArguments` is built once per parse and frozen on construction: the
positional list becomes a tuple, the flag set a frozenset and the pair
mapping a read-only view over a private dict.
"""

import enum
import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from cliparser.constants import FLAG_PREFIX, PAIR_PREFIX, PAIR_SEPARATOR


class TokenKind(str, enum.Enum):
    """Category of a raw token, decided by its dash prefix only."""

    POSITIONAL = 'positional'
    FLAG = 'flag'
    PAIR = 'pair'
    INVALID = 'invalid'


@dataclass(frozen=True)
class ParsedArguments:
    """Positionals, flags and key-value pairs collected from one token list.

    Attributes:
        positionals: Tokens without a leading dash, in argument order.
        flags: Names of single-dash tokens; repeats collapse.
        pairs: Double-dash ``key=value`` tokens; the last value for a key wins.
    """

    positionals: Tuple[str, ...] = ()
    flags: FrozenSet[str] = frozenset()
    pairs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'positionals', tuple(self.positionals))
        object.__setattr__(self, 'flags', frozenset(self.flags))
        object.__setattr__(self, 'pairs', MappingProxyType(dict(self.pairs)))

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.pairs.get(key, default)

    def to_tokens(self) -> List[str]:
        """Re-serialize into tokens that parse back to an equal result.

        Positionals come first in their original order, then flags in sorted
        order, then pairs in insertion order.
        """
        out: List[str] = list(self.positionals)
        out.extend(f'{FLAG_PREFIX}{name}' for name in sorted(self.flags))
        out.extend(f'{PAIR_PREFIX}{k}{PAIR_SEPARATOR}{v}' for k, v in self.pairs.items())
        return out

    def as_dict(self) -> Dict[str, Any]:
        return {
            'positionals': list(self.positionals),
            'flags': sorted(self.flags),
            'pairs': dict(self.pairs),
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.as_dict(), indent=indent, ensure_ascii=False)
