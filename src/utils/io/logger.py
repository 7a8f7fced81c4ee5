"""Minimal console logger shared across the project.

Messages are written to the *current* ``sys.stdout`` so that callers (and tests)
can redirect or capture them. The threshold comes from the ``LOG_LEVEL``
environment variable and is read on every call.
"""

import os
import sys
from typing import Dict


class Logger:
    """Static logging facade with level filtering."""

    _LEVELS: Dict[str, int] = {
        "DEBUG": 10,
        "INFO": 20,
        "SUCCESS": 25,
        "WARNING": 30,
        "ERROR": 40,
    }
    _DEFAULT_LEVEL = "INFO"

    @staticmethod
    def _threshold() -> int:
        """Return the numeric threshold configured through ``LOG_LEVEL``."""
        name = os.getenv("LOG_LEVEL", Logger._DEFAULT_LEVEL).strip().upper()
        return Logger._LEVELS.get(name, Logger._LEVELS[Logger._DEFAULT_LEVEL])

    @staticmethod
    def _emit(level: str, message: str) -> None:
        if Logger._LEVELS[level] < Logger._threshold():
            return
        print(f"{level} {message}", file=sys.stdout, flush=True)

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._emit("DEBUG", message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._emit("INFO", message)

    @staticmethod
    def success(message: str) -> None:
        """Log a success message."""
        Logger._emit("SUCCESS", message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._emit("WARNING", message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._emit("ERROR", message)
