# src/mockwriter/logs.py
"""Logger used by the mockwriter CLI and library.

`AppLogger` is a `logging.Logger` with two extra levels:

- TRACE (below DEBUG) for step-by-step generator internals,
- SILENT (above CRITICAL) to switch output off entirely.

Records below WARNING go to stdout, everything else to stderr. Streams are
looked up per record, so redirecting `sys.stdout`/`sys.stderr` (pytest's
capture, `contextlib.redirect_stdout`) just works.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Generator
from contextlib import contextmanager, suppress
from typing import Any, TextIO, cast

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE


# --- Levels and styling ------------------------------------------------------

TRACE_LEVEL = logging.DEBUG - 5
SILENT_LEVEL = logging.CRITICAL + 1

# names accepted by --log-level and the config file, most verbose first
LEVEL_ORDER = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",
]

# first match wins
LOG_LEVEL_ENV_VARS: list[str] = [
    f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}",
    DEFAULT_ENV_LOG_LEVEL,
]

RESET = "\033[0m"
GRAY = "\033[90m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[36m"

# levelname -> (color, prefix); levels not listed are printed bare
_PREFIXES: dict[str, tuple[str, str]] = {
    "TRACE": (GRAY, "[TRACE]"),
    "DEBUG": (CYAN, "[DEBUG]"),
    "WARNING": (YELLOW, "⚠️ "),
    "ERROR": (RED, "❌ "),
    "CRITICAL": (RED, "💥 "),
}


def _register_levels() -> None:
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.addLevelName(SILENT_LEVEL, "SILENT")


_register_levels()


# --- Last-resort output ------------------------------------------------------


def safe_log(msg: str) -> None:
    """Write `msg` to the interpreter's original stderr; never raises.

    Used when the logger itself failed while reporting another error.
    """
    stream = cast("TextIO | None", sys.__stderr__)
    if stream is None:
        return
    try:
        print(msg, file=stream)
    except Exception:  # noqa: BLE001
        with suppress(Exception):
            stream.write(f"[INTERNAL] {msg}\n")


# --- Formatting and routing --------------------------------------------------


class TagFormatter(logging.Formatter):
    """Prefix messages with their level tag, colored when enabled."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color, prefix = _PREFIXES.get(record.levelname, ("", ""))
        if not prefix:
            return text
        if getattr(record, "enable_color", False):
            prefix = f"{color}{prefix}{RESET}"
        return f"{prefix} {text}"


class DualStreamHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Route records below WARNING to stdout and the rest to stderr.

    The color flag is read from `owner` for every record, so toggling
    `AppLogger.enable_color` needs no handler rebuild.
    """

    def __init__(self, owner: AppLogger | None = None) -> None:
        super().__init__()  # pyright: ignore[reportUnknownMemberType]
        self.owner = owner

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout if record.levelno < logging.WARNING else sys.stderr
        record.enable_color = bool(self.owner and self.owner.enable_color)
        super().emit(record)


# --- App logger --------------------------------------------------------------


class AppLogger(logging.Logger):
    """Logger with TRACE/SILENT levels, tags and stdout/stderr routing."""

    enable_color: bool = False

    def __init__(
        self,
        name: str,
        level: int = logging.NOTSET,
        *,
        enable_color: bool | None = None,
    ) -> None:
        super().__init__(name, level)
        if level == logging.NOTSET:
            self.setLevel(self.determine_log_level())
        if enable_color is None:
            enable_color = self.determine_color_enabled()
        self.enable_color = enable_color
        # records stop here; root handlers never see them
        self.propagate = False

    # --- setup ---

    def _ensure_handler(self) -> None:
        if not any(isinstance(h, DualStreamHandler) for h in self.handlers):
            handler = DualStreamHandler(self)
            handler.setFormatter(TagFormatter("%(message)s"))
            self.addHandler(handler)

    def _log(  # type: ignore[override]
        self, level: int, msg: str, args: tuple[Any, ...], **kwargs: Any
    ) -> None:
        self._ensure_handler()
        super()._log(level, msg, args, **kwargs)

    def setLevel(self, level: int | str) -> None:  # noqa: N802
        """Same as `logging.Logger.setLevel`, but level names are case-blind."""
        super().setLevel(level.upper() if isinstance(level, str) else level)

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.getEffectiveLevel())

    @staticmethod
    def determine_color_enabled() -> bool:
        """NO_COLOR beats FORCE_COLOR, which beats TTY detection."""
        if "NO_COLOR" in os.environ:
            return False
        if os.getenv("FORCE_COLOR", "").lower() in {"1", "true", "yes"}:
            return True
        return sys.stdout.isatty()

    def determine_log_level(
        self,
        *,
        args: argparse.Namespace | None = None,
        root_log_level: str | None = None,
    ) -> str:
        """Pick the level name to use, upper-cased.

        Order: ``--log-level``/``-q``/``-v``, then the environment
        (`LOG_LEVEL_ENV_VARS`), then the config file, then the default.
        """
        candidates = [
            getattr(args, "log_level", None),
            *(os.getenv(var) for var in LOG_LEVEL_ENV_VARS),
            root_log_level,
        ]
        chosen = next((c for c in candidates if c), DEFAULT_LOG_LEVEL)
        return str(chosen).upper()

    def level_number(self, level: str | int) -> int | None:
        """Return the numeric value of `level`, or None if it is unknown."""
        if isinstance(level, int):
            return level
        number = logging.getLevelName(level.upper())
        return number if isinstance(number, int) else None

    # --- emitting ---

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)

    def log_dynamic(
        self, level: str | int, msg: str, *args: Any, **kwargs: Any
    ) -> None:
        """Log at a level chosen at runtime (name or number)."""
        number = self.level_number(level)
        if number is None:
            self.error("Unknown log level: %r", level)
            return
        if self.isEnabledFor(number):
            self._log(number, msg, args, **kwargs)

    def _report(self, level: int, msg: str, args: tuple[Any, ...]) -> None:
        # traceback only at DEBUG, and only while handling an exception
        verbose = self.isEnabledFor(logging.DEBUG) and sys.exc_info()[0] is not None
        if self.isEnabledFor(level):
            self._log(level, msg, args, exc_info=verbose, stacklevel=3)

    def error_if_not_debug(self, msg: str, *args: Any) -> None:
        """Log an error, with the active traceback only at DEBUG or below."""
        self._report(logging.ERROR, msg, args)

    def critical_if_not_debug(self, msg: str, *args: Any) -> None:
        """Like `error_if_not_debug`, at CRITICAL."""
        self._report(logging.CRITICAL, msg, args)

    def colorize(
        self, text: str, color: str, *, enable_color: bool | None = None
    ) -> str:
        use = self.enable_color if enable_color is None else enable_color
        return f"{color}{text}{RESET}" if use else text

    @contextmanager
    def use_level(
        self, level: str | int, *, minimum: bool = False
    ) -> Generator[None, None, None]:
        """Temporarily switch to `level`, restoring the previous one on exit.

        With ``minimum=True`` the level is only lowered, never raised, so an
        already more verbose setting is kept.
        """
        previous = self.level
        number = self.level_number(level)
        if number is None:
            self.error("Unknown log level: %r", level)
        elif not minimum or number < previous:
            self.setLevel(number)
        try:
            yield
        finally:
            self.setLevel(previous)


# --- The app logger ----------------------------------------------------------


def _create_app_logger() -> AppLogger:
    # swap the logger class only for our own logger; other libraries keep theirs
    previous = logging.getLoggerClass()
    logging.setLoggerClass(AppLogger)
    try:
        return cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))
    finally:
        logging.setLoggerClass(previous)


_APP_LOGGER = _create_app_logger()


def get_app_logger() -> AppLogger:
    """Return the shared mockwriter logger."""
    return _APP_LOGGER
