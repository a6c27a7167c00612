# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Typed configuration values resolved from environment variables.

Declare the variables a program expects once, with either a required kind
or a default value, then read validated, typed values from the store.

Example:
    >>> from typed_env import EnvStore, ScalarKind, resolve
    >>> store = EnvStore()
    >>> store.initialize({"PORT": ScalarKind.INT32, "DEBUG": False})
    >>> port = store.get("PORT", ScalarKind.INT32)
    >>> debug = store.get_optional("DEBUG", ScalarKind.BOOL)
    >>> workers = resolve("WORKERS", ScalarKind.INT32).value_or(4)
"""

__version__ = "0.1.0"

from .deferred import Deferred, resolve
from .exceptions import (
    EnvAccessError,
    EnvError,
    EnvWriteError,
    InitializationError,
    InvalidFormatError,
    InvalidNameError,
    NoValueError,
    NotFoundError,
    ParseError,
    TypeMismatchError,
    ValueOverflowError,
    WriteFailedError,
)
from .log import Logger, SilentLogger, StdoutLogger, create_logger
from .scalar import ScalarKind, ScalarValue, format_scalar, parse_scalar
from .source import (
    EnvironmentSource,
    OsEnvironment,
    StaticEnvironment,
    create_environment_source,
)
from .store import Declaration, EnvStore, EnvStoreView

__all__ = [
    # Version
    "__version__",
    # Scalars
    "ScalarKind",
    "ScalarValue",
    "parse_scalar",
    "format_scalar",
    # Store
    "Declaration",
    "EnvStore",
    "EnvStoreView",
    "Deferred",
    "resolve",
    # Environment sources
    "EnvironmentSource",
    "OsEnvironment",
    "StaticEnvironment",
    "create_environment_source",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    # Errors
    "EnvError",
    "ParseError",
    "InvalidFormatError",
    "ValueOverflowError",
    "EnvAccessError",
    "NotFoundError",
    "NoValueError",
    "TypeMismatchError",
    "InitializationError",
    "EnvWriteError",
    "InvalidNameError",
    "WriteFailedError",
]
