# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Structured logging for typed-env.

The store reports resolution events at three levels: ``debug`` for each
resolved name and write, ``warning`` for an ignored live value, ``error``
for a failed batch. Two backends record them:

- ``StdoutLogger`` writes one JSON object per line and mirrors each record to
  the stdlib ``logging`` module so test harnesses (caplog) can capture it.
- ``SilentLogger`` keeps records in memory for assertions in tests.
"""

import json
import logging
import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class Logger(ABC):
    """Abstract base class for loggers.

    Subclasses implement ``_log``; the level methods take a message plus
    keyword fields that are recorded as structured data.
    """

    @abstractmethod
    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        raise NotImplementedError

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)


class StdoutLogger(Logger):
    """Logger that outputs structured JSON logs to stdout."""

    def __init__(self, level: str = "WARNING", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Minimum level written to stdout (DEBUG, WARNING, ERROR)
            name: Optional logger name for identification

        Raises:
            ValueError: If level is not a known level name
        """
        self.level = level.upper()
        self.name = name or "typed_env"

        if self.level not in _LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(_LEVELS)}")

        self._stdlib_logger = logging.getLogger(self.name)
        # NOTSET inherits the root level; stdout filtering uses self.level
        self._stdlib_logger.setLevel(logging.NOTSET)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < _LEVELS[self.level]:
            return

        record = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            record["extra"] = kwargs

        print(json.dumps(record, default=str), file=sys.stdout, flush=True)
        self._stdlib_logger.log(_LEVELS[level], message, extra={"extra": kwargs} if kwargs else None)


class SilentLogger(Logger):
    """Logger that keeps every record in memory, regardless of level."""

    def __init__(self, level: str = "DEBUG", name: str | None = None):
        self.level = level.upper()
        self.name = name or "typed_env"
        self.logs: list[dict[str, Any]] = []

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            entry["extra"] = kwargs
        self.logs.append(entry)

    def clear_logs(self) -> None:
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Get stored records, optionally filtered by level."""
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether any stored message contains ``message``."""
        return any(message in log["message"] for log in self.get_logs(level))


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Pick an explicit value, then env var, then fallback."""
    return value or os.getenv(env_var) or fallback


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        logger_type: "stdout" or "silent". Defaults to LOG_TYPE env or "stdout".
        level: DEBUG, WARNING or ERROR. Defaults to LOG_LEVEL env or "WARNING".
        name: Logger name. Defaults to LOG_NAME env or "typed_env".

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type or level is not recognized

    Example:
        >>> store = EnvStore(logger=create_logger(level="DEBUG"))
    """
    logger_type = _default(logger_type, "LOG_TYPE", "stdout").lower()
    level = _default(level, "LOG_LEVEL", "WARNING").upper()
    name = _default(name, "LOG_NAME", "typed_env")

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    if logger_type == "silent":
        return SilentLogger(level=level, name=name)
    raise ValueError(
        f"Unknown logger_type: {logger_type}. "
        f"Must be one of: stdout, silent"
    )
