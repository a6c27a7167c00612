# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Environment sources: where raw variable text is read from and written to."""

import os
from abc import ABC, abstractmethod
from typing import Dict, MutableMapping, Optional


class EnvironmentSource(ABC):
    """Abstract base class for raw environment access."""

    @abstractmethod
    def read_raw(self, name: str) -> Optional[str]:
        """Return the current raw value of a variable, or None if unset.

        Must not have side effects.
        """
        raise NotImplementedError

    @abstractmethod
    def write_raw(self, name: str, value: str, overwrite: bool = True) -> None:
        """Set a variable.

        When ``overwrite`` is False and the variable already has a value
        (even an empty one), the value is left unchanged.

        Raises:
            OSError, ValueError: If the underlying environment rejects the write
        """
        raise NotImplementedError


class OsEnvironment(EnvironmentSource):
    """Environment source backed by the process environment."""

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def read_raw(self, name: str) -> Optional[str]:
        return self._environ.get(name)

    def write_raw(self, name: str, value: str, overwrite: bool = True) -> None:
        if not overwrite and name in self._environ:
            return
        # os.environ rejects illegal names with ValueError
        self._environ[name] = value


class StaticEnvironment(EnvironmentSource):
    """In-memory environment source (useful for tests)."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values = dict(values) if values is not None else {}

    def read_raw(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def write_raw(self, name: str, value: str, overwrite: bool = True) -> None:
        if not isinstance(name, str) or not isinstance(value, str):
            raise ValueError("environment names and values must be str")
        if not name or "=" in name:
            raise ValueError(f"illegal environment variable name {name!r}")
        if not overwrite and name in self._values:
            return
        self._values[name] = value

    def unset(self, name: str) -> None:
        self._values.pop(name, None)


def create_environment_source(source_type: Optional[str] = None, **kwargs) -> EnvironmentSource:
    """Create an environment source by type.

    Args:
        source_type: Type of source (required).
                     Options: "os"/"env", "static"
        **kwargs: Passed to the source constructor
                  (``environ`` for "os", ``values`` for "static")

    Returns:
        EnvironmentSource instance

    Raises:
        ValueError: If source_type is missing or unknown
    """
    if not source_type:
        raise ValueError(
            "source_type parameter is required. "
            "Must be one of: os, static"
        )

    source_type = source_type.lower()

    if source_type in ("os", "env"):
        return OsEnvironment(**kwargs)
    if source_type == "static":
        return StaticEnvironment(**kwargs)

    raise ValueError(
        f"Unknown source_type: {source_type}. "
        f"Must be one of: os, static"
    )
