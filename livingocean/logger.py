"""Levelled logging to the console and to an optional log file."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional, TextIO

DEFAULT_LOG_FILE = "simulation.log"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Severity of a log message, in increasing order."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_LABELS = {
    LogLevel.DEBUG: "[DEBUG]",
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARN] ",
    LogLevel.ERROR: "[ERROR]",
}


def level_label(level) -> str:
    """Return the fixed-width label printed for a level."""
    return _LABELS.get(level, "[UNKNW]")


class Logger:
    """Writes messages at or above a threshold to the console and a file."""

    def __init__(
        self,
        console: Optional[TextIO] = None,
        console_level: LogLevel = LogLevel.WARNING,
        file_level: LogLevel = LogLevel.INFO,
    ) -> None:
        self._console = console
        self.console_level = console_level
        self.file_level = file_level
        self._file: Optional[TextIO] = None
        self.path: Optional[str] = None

    @property
    def is_open(self) -> bool:
        """Whether a log file is currently attached."""
        return self._file is not None

    def open(self, path) -> None:
        """Append to the log file at ``path``; report on stderr if it cannot be opened."""
        if self._file is not None:
            self.close()
        try:
            self._file = open(path, "a", encoding="utf-8")
        except OSError:
            print(f"Failed to open log file: {path}", file=sys.stderr)
            return
        self.path = str(path)
        self.info("Logger initialized. Logging to file: ", path)

    def close(self) -> None:
        """Write a closing message and detach the log file, if one is open."""
        if self._file is None:
            return
        self.info("Logger shutting down.")
        self._file.close()
        self._file = None
        self.path = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def log(self, level: LogLevel, *args) -> None:
        """Join ``args`` into one message and emit it at ``level``."""
        message = "".join(str(arg) for arg in args)
        line = f"{datetime.now().strftime(TIME_FORMAT)} {level_label(level)} {message}"
        if level >= self.console_level:
            print(line, file=self._console if self._console is not None else sys.stdout)
        if self._file is not None and level >= self.file_level:
            self._file.write(line + "\n")
            self._file.flush()

    def debug(self, *args) -> None:
        self.log(LogLevel.DEBUG, *args)

    def info(self, *args) -> None:
        self.log(LogLevel.INFO, *args)

    def warn(self, *args) -> None:
        self.log(LogLevel.WARNING, *args)

    def error(self, *args) -> None:
        self.log(LogLevel.ERROR, *args)


_default = Logger()


def init(path=DEFAULT_LOG_FILE) -> None:
    """Attach the shared logger to ``path`` and announce it."""
    _default.open(path)
    _default.info("Logger initialized for console output.")


def shutdown() -> None:
    """Close the shared logger's file."""
    _default.close()


def debug(*args) -> None:
    _default.debug(*args)


def info(*args) -> None:
    _default.info(*args)


def warn(*args) -> None:
    _default.warn(*args)


def error(*args) -> None:
    _default.error(*args)