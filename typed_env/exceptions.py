# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Exceptions for typed environment configuration."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .scalar import ScalarKind


class EnvError(Exception):
    """Base exception for typed environment errors."""
    pass


class ParseError(EnvError):
    """Raised when raw environment text cannot be parsed to the requested kind.

    Attributes:
        raw: The offending raw text
        kind: The kind the text was parsed as
    """

    def __init__(self, message: str, raw: str, kind: "ScalarKind"):
        super().__init__(f"Error while getting environment value: {message}")
        self.raw = raw
        self.kind = kind


class InvalidFormatError(ParseError):
    """Raised when raw text does not match the grammar of the target kind."""
    pass


class ValueOverflowError(ParseError):
    """Raised when numeric text exceeds the range of the target kind."""
    pass


class EnvAccessError(EnvError):
    """Base exception for reads from an initialized store."""

    def __init__(self, message: str, name: str):
        super().__init__(f"Error while getting environment value: {message}")
        self.name = name


class NotFoundError(EnvAccessError):
    """Raised when a name was never declared to the store."""

    def __init__(self, name: str):
        super().__init__(f"{name} not found", name)


class NoValueError(EnvAccessError):
    """Raised when a name was declared but resolved to no value."""

    def __init__(self, name: str):
        super().__init__(f"no value for {name}", name)


class TypeMismatchError(EnvAccessError):
    """Raised when a resolved value exists under a different kind."""

    def __init__(self, name: str, expected: "ScalarKind", actual: "ScalarKind"):
        super().__init__(
            f"invalid type for {name}: expected {expected.label}, got {actual.label}",
            name,
        )
        self.expected = expected
        self.actual = actual


class InitializationError(EnvError):
    """Raised when a declaration batch cannot be resolved.

    Attributes:
        name: Declared name that failed
        cause: Underlying error (usually a ParseError)
    """

    def __init__(self, name: str, cause: Optional[Exception] = None):
        detail = f"{name}: {cause}" if cause is not None else name
        super().__init__(f"Error while getting environment value: failed to initialize {detail}")
        self.name = name
        self.cause = cause


class EnvWriteError(EnvError):
    """Base exception for writes to the live environment."""

    def __init__(self, message: str):
        super().__init__(f"Error while setting environment value: {message}")


class InvalidNameError(EnvWriteError):
    """Raised when a variable name is empty or contains '='."""

    def __init__(self, name: str):
        super().__init__(f"invalid environment variable name {name!r}")
        self.name = name


class WriteFailedError(EnvWriteError):
    """Raised when the environment source rejects a write."""

    def __init__(self, name: str, value: str, reason: Optional[str] = None):
        message = f"setenv failed for variable {name} with value {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.name = name
        self.value = value
