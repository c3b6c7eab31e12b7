from __future__ import annotations

from typing import Callable, Dict

from cliparser.core.models import ParsedArguments

_EMPTY = '-'


def render_text(parsed: ParsedArguments) -> str:
    """Three labelled lines; flags sorted, pairs in insertion order."""
    posits = ' '.join(parsed.positionals) or _EMPTY
    flags = ' '.join(sorted(parsed.flags)) or _EMPTY
    pairs = ' '.join(f'{k}={v}' for k, v in parsed.pairs.items()) or _EMPTY
    return f'positionals: {posits}\nflags: {flags}\npairs: {pairs}\n'


def render_json(parsed: ParsedArguments, *, indent: int | None = 2) -> str:
    return parsed.to_json(indent=indent) + '\n'


RENDERERS: Dict[str, Callable[[ParsedArguments], str]] = {
    'text': render_text,
    'json': render_json,
}


def render(parsed: ParsedArguments, fmt: str = 'text') -> str:
    try:
        fn = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f'unknown output format {fmt!r}; expected one of {sorted(RENDERERS)}') from None
    return fn(parsed)
