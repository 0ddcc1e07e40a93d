"""Logging configuration shared by the CLI and the HTTP server.

Provides helpers:
* ``setup_logging`` – idempotent configuration with a console handler and
    optional daily rotating files (``app.log`` / ``app-debug.log``).
* ``log_call`` – lightweight decorator for entry/exit tracing.

Library modules only call :func:`logging.getLogger`; handlers are installed
by the entry points (``lingproxy.cli``) so importing the package never
touches the filesystem.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from functools import wraps
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, ParamSpec, TypeVar

# ----- Custom TRACE level -------------------------------------------------
TRACE_LEVEL = 5
if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")


def _trace(
    self: logging.Logger,
    msg: str,
    *args: object,
    **kwargs: object,
) -> None:  # pragma: no cover - simple passthrough
    if self.isEnabledFor(TRACE_LEVEL):  # pragma: no branch
        self._log(TRACE_LEVEL, msg, args, **kwargs)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]

# ----- Formatter -----------------------------------------------------------
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(module)s | %(funcName)s | %(message)s"


class MinLevelFilter(logging.Filter):
    """Filter allowing only records >= a minimum level."""

    def __init__(self, min_level: int) -> None:
        super().__init__()
        self._min_level = min_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self._min_level


def resolve_level(level_name: str | None = None) -> int:
    """Map a level name (``TRACE``, ``DEBUG`` ...) to its numeric value.

    Falls back to ``LOG_LEVEL`` from the environment, then INFO.
    """
    name = (level_name or os.getenv("LOG_LEVEL", "INFO")).upper()
    if name == "TRACE":
        return TRACE_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    level: str | None = None,
    log_dir: str | Path | None = None,
    force: bool = False,
) -> None:
    """Configure root logging for the application.

    A console handler is always installed. When ``log_dir`` (or
    ``LINGPROXY_LOG_DIR``) is non-empty, two daily rotating file handlers
    keeping 7 backups are added: ``app.log`` (INFO+) and ``app-debug.log``
    (everything down to TRACE).
    """
    if getattr(setup_logging, "_configured", False) and not force:
        return

    root = logging.getLogger()
    if force:
        for h in list(root.handlers):
            root.removeHandler(h)

    resolved = resolve_level(level)
    root.setLevel(resolved)
    fmt = logging.Formatter(DEFAULT_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    console.addFilter(MinLevelFilter(resolved))
    root.addHandler(console)

    if log_dir is None:
        log_dir = os.getenv("LINGPROXY_LOG_DIR", "logs")
    if str(log_dir):
        target = Path(log_dir)
        target.mkdir(parents=True, exist_ok=True)
        for filename, handler_level in (("app.log", logging.INFO), ("app-debug.log", TRACE_LEVEL)):
            handler = TimedRotatingFileHandler(
                target / filename,
                when="midnight",
                backupCount=7,
                encoding="utf-8",
            )
            handler.setFormatter(fmt)
            handler.setLevel(handler_level)
            root.addHandler(handler)

    setup_logging._configured = True  # type: ignore[attr-defined]


P = ParamSpec("P")
R = TypeVar("R")


def log_call(
    level: int = logging.DEBUG,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return decorator logging entry/exit of target function.

    Decorating does not configure logging; records go wherever the
    entry point sent them.

    Example::

        @log_call()
        def write_artifacts(registry, out_dir): ...
    """

    def _decorator(fn: Callable[P, R]) -> Callable[P, R]:
        logger = logging.getLogger(fn.__module__)

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            _enter(logger, level, fn, args, kwargs)
            try:
                result = fn(*args, **kwargs)
            except Exception as e:  # noqa: BLE001
                logger.error("ERROR in %s: %s", fn.__qualname__, e)
                raise
            _exit(logger, level, fn, result)
            return result

        return wrapper

    return _decorator


def _enter(logger: logging.Logger, level: int, fn: Callable[..., Any], args: object, kwargs: object) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, "ENTER %s args=%s kwargs=%s", fn.__qualname__, _shorten(args), _shorten(kwargs))


def _exit(logger: logging.Logger, level: int, fn: Callable[..., Any], result: object) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, "EXIT %s -> %s", fn.__qualname__, _shorten(result))


def _shorten(obj: object, limit: int = 120) -> str:
    """Return a truncated repr for logging (never raises)."""
    try:
        s = repr(obj)
        if len(s) > limit:
            return s[: limit - 3] + "..."
        return s
    except Exception:  # noqa: BLE001
        return type(obj).__name__
