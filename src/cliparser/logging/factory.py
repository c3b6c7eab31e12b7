from __future__ import annotations

import logging
from typing import Optional, TextIO

from cliparser.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Owns the output mode of the 'cliparser' logger.

    `configure` switches between plain and JSON output; calling it again
    with the current mode is a no-op. `get_logger` falls back to plain output
    when nothing was configured yet.
    """

    def __init__(self, *, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._mode: Optional[bool] = None

    def configure(self, *, json_logs: bool) -> None:
        mode = bool(json_logs)
        if self._mode == mode:
            return
        setup_base_logger(
            json_logs=mode,
            level=self._level,
            stream=self._stream,
            replace=True,
        )
        self._mode = mode

    def get_logger(self, name: str) -> logging.Logger:
        if self._mode is None:
            self.configure(json_logs=False)
        return get_logger(name)
