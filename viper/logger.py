"""Level-filtered, colourised console logging."""

from __future__ import annotations

import enum
import sys
from typing import ClassVar


class LogLevel(enum.IntFlag):
    NONE = 0
    INFO = 1 << 0
    WARNING = 1 << 1
    ERROR = 1 << 2
    DEBUG = 1 << 3
    ALL = INFO | WARNING | ERROR | DEBUG


_RESET = "\033[0m"
_STYLES = {
    LogLevel.INFO: ("[INFO] ", "\033[31m"),
    LogLevel.WARNING: ("[WARNING] ", "\033[33m"),
    LogLevel.ERROR: ("[ERROR] ", "\033[31m"),
    LogLevel.DEBUG: ("[DEBUG] ", "\033[36m"),
}
_UNKNOWN = ("[UNKNOWN] ", _RESET)


class Logger:
    """Process-wide logger writing to standard output."""

    _enabled_levels: ClassVar[LogLevel] = LogLevel.ALL

    @classmethod
    def set_enabled_levels(cls, levels: LogLevel) -> None:
        cls._enabled_levels = LogLevel(levels)

    @classmethod
    def log(cls, level: LogLevel, message: str) -> None:
        """Write ``message`` with the level's prefix and colour, if enabled."""
        if not (cls._enabled_levels & level):
            return
        prefix, color = _STYLES.get(level, _UNKNOWN)
        cls._write(f"{color}{prefix}{message}{_RESET}\n")

    @staticmethod
    def _write(text: str) -> None:
        sys.stdout.write(text)

    @classmethod
    def info(cls, fmt: str, *args) -> None:
        """Log at INFO level; with no arguments the text is written as is."""
        if not args:
            cls._write(fmt)
            return
        cls.log(LogLevel.INFO, fmt.format(*args))

    @classmethod
    def warning(cls, fmt: str, *args) -> None:
        cls.log(LogLevel.WARNING, fmt.format(*args))

    @classmethod
    def error(cls, fmt: str, *args) -> None:
        cls.log(LogLevel.ERROR, fmt.format(*args))

    @classmethod
    def debug(cls, fmt: str, *args) -> None:
        cls.log(LogLevel.DEBUG, fmt.format(*args))