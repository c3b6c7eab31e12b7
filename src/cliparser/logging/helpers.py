from __future__ import annotations

"""Logging helpers for the cliparser command-line front end.

This module provides:
    - JsonLogFormatter: one JSON object per record.
    - setup_base_logger: installs (or swaps) the stderr handler of 'cliparser'.
    - get_logger: namespaced logger lookup ('cliparser.*').
    - json_logs_requested: reads CLIPARSER_JSON_LOGS.

The classifier itself never logs; only the command-line front end does.
Handlers owned by this module are tagged with `_BaseHandler`, so a
reconfiguration replaces them and leaves any foreign handler alone.
"""

import logging
import os
from typing import Mapping, Optional, TextIO

from cliparser.constants import ENV_JSON_LOGS, ENV_VERSION

BASE_LOGGER = "cliparser"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """Emit records as compact JSON.

    Fields: ts (UTC, milliseconds), level, logger, msg, version, and ctx when
    the record carries a non-empty 'context' dict. A failing token attached
    as ``extra={"context": {"token": ...}}`` therefore ends up under ctx.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Imported lazily: cliparser/__init__ imports this module.
            from cliparser import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv(ENV_VERSION, "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False)


class _BaseHandler(logging.StreamHandler):
    """Stream handler installed by `setup_base_logger`."""


def _owned_handlers(base: logging.Logger) -> list:
    return [h for h in base.handlers if isinstance(h, _BaseHandler)]


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    replace: bool = False,
) -> logging.Logger:
    """Configure the base 'cliparser' logger and return it.

    Args:
        json_logs: JSON formatter when True, plain "LEVEL: message" otherwise.
        level: Level of the base logger.
        stream: Target stream (stderr by default).
        replace: Swap an already installed handler for a new one. Without it,
            an existing handler is kept and only the level is updated.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    owned = _owned_handlers(base)
    if owned and not replace:
        return base
    for old in owned:
        base.removeHandler(old)

    import sys as _sys

    base.propagate = False
    handler = _BaseHandler(stream or _sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'cliparser'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def json_logs_requested(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(ENV_JSON_LOGS) == "1"
