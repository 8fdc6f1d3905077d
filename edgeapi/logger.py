"""Process-wide logging setup for the service."""

from __future__ import annotations

import logging
import sys

log = logging.getLogger("edgeapi")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "ERROR": logging.ERROR,
}

_FORMAT = "%(asctime)s %(levelname)s %(funcName)s %(filename)s:%(lineno)d %(message)s"

_handler: logging.Handler | None = None


def init_logger(log_level: str) -> int:
    """Configure the service logger for the named level and return that level.

    "DEBUG" and "ERROR" are recognised; anything else means INFO.
    Output goes to standard output.
    """
    global _handler
    level = _LEVELS.get(log_level, logging.INFO)
    if _handler is not None:
        log.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    log.addHandler(_handler)
    log.setLevel(level)
    return level


def flush_logger() -> None:
    """Flush any buffered log messages."""
    for handler in list(log.handlers):
        try:
            handler.flush()
        except (OSError, ValueError) as exc:
            log.error(
                "Error flushing batched logging messages", extra={"error": str(exc)}
            )


def log_error_and_panic(msg: str, err: object) -> None:
    """Log the error, flush the buffers, then raise it."""
    log.error(msg, extra={"error": str(err)})
    flush_logger()
    if isinstance(err, BaseException):
        raise err
    raise RuntimeError(f"{msg}: {err}")