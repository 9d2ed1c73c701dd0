"""Logging for domwait: root handler setup and per-wait context.

The library itself only ever logs at DEBUG (wait lifecycle) and ERROR
(an observer callback that raised).  Handlers are left to the host test
runner unless :func:`setup_logging` is called.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_FILE_NAME = "domwait.log"


def _build_handlers(
    log_dir: str | None,
    max_bytes: int,
    backup_count: int,
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                directory / _LOG_FILE_NAME,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )
    return handlers


def setup_logging(
    log_level: str = "WARNING",
    log_dir: str | None = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Replace the root logger's handlers with a console handler and, when
    *log_dir* is given, a rotating ``domwait.log`` in that directory.

    Calling it again swaps the handlers rather than stacking them.  Unknown
    level names fall back to WARNING.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()

    root.setLevel(level)
    for handler in _build_handlers(log_dir, max_bytes, backup_count):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib Logger for *name* (typically ``__name__``)."""
    return logging.getLogger(name)


class ContextualLogger(logging.LoggerAdapter):
    """Adapter that tags every message with ``[key=value]`` context.

    The context is also attached to each record as attributes, so a
    handler or filter can select on e.g. ``record.wait``::

        log = ContextualLogger(get_logger(__name__), wait="3f2a9c", kind="removal")
        log.debug("Observing 1 root")  # "[wait=3f2a9c] [kind=removal] Observing 1 root"
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        super().__init__(logger, context)
        self._prefix = " ".join(f"[{key}={value}]" for key, value in context.items())

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        if self._prefix:
            msg = f"{self._prefix} {msg}"
        return msg, kwargs
