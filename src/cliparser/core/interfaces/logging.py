from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the command-line front end relies on."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers scoped under the 'cliparser' namespace."""

    def configure(self, *, json_logs: bool) -> None:
        """Select plain or JSON output for every scoped logger."""
        ...

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger registered for `name`."""
        ...
