# src/parse_kit/client/_logging.py

import logging
from typing import Any

PLACEHOLDER = "?"


def sanitize(message: Any) -> str:
    """Render a log message as valid UTF-8.

    Undecodable bytes and unencodable characters (lone surrogates from
    badly decoded documents) become PLACEHOLDER.
    """
    if isinstance(message, (bytes, bytearray)):
        text = bytes(message).decode("utf-8", errors="replace").replace("\ufffd", PLACEHOLDER)
    else:
        text = str(message)
    return text.encode("utf-8", errors="replace").decode("utf-8")


class ProgressLogger:
    """Progress and failure messages for one client.

    Internal only. Every line is formatted eagerly and sanitized, and nothing
    is emitted when the client is not verbose.
    """

    def __init__(self, logger: logging.Logger, verbose: bool = True) -> None:
        self._logger = logger
        self._verbose = verbose

    def debug(self, message: str, *args: Any) -> None:
        self._emit(logging.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._emit(logging.INFO, message, args)

    def warning(self, message: str, *args: Any) -> None:
        self._emit(logging.WARNING, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit(logging.ERROR, message, args)

    def _emit(self, level: int, message: str, args: tuple[Any, ...]) -> None:
        if not self._verbose or not self._logger.isEnabledFor(level):
            return
        if args:
            message = message % tuple(
                sanitize(a) if isinstance(a, (bytes, bytearray)) else a for a in args
            )
        self._logger.log(level, sanitize(message))
