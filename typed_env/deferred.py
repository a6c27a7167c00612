# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""One-off resolution of a single variable with deferred error signaling."""

from dataclasses import dataclass
from typing import Optional, TypeVar, Union

from .exceptions import NoValueError, ParseError
from .scalar import Payload, ScalarKind, parse_scalar
from .source import EnvironmentSource, OsEnvironment

T = TypeVar("T")


@dataclass(frozen=True)
class Deferred:
    """Outcome of resolving one variable: either a value or a captured error.

    ``get()`` raises the captured error; ``value_or()`` never raises and does
    not distinguish an absent variable from one that failed to parse.

    Example:
        >>> port = resolve("PORT", ScalarKind.INT32).value_or(8080)
        >>> debug = resolve("DEBUG", ScalarKind.BOOL).get()  # raises if unset
    """

    name: str
    kind: ScalarKind
    value: Optional[Payload] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    def get(self) -> Payload:
        """Return the resolved value.

        Raises:
            ParseError: If the live value failed to parse
            NoValueError: If the variable was unset or empty
        """
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise NoValueError(self.name if self.name else "unknown environment")
        return self.value

    def value_or(self, fallback: T) -> Union[Payload, T]:
        """Return the resolved value, or ``fallback`` on any failure."""
        if self.ok:
            return self.value
        return fallback


def resolve(
    name: str,
    kind: ScalarKind,
    source: Optional[EnvironmentSource] = None,
) -> Deferred:
    """Read and parse one variable without going through a store.

    Args:
        name: Variable name
        kind: Kind to parse the live value as
        source: Environment source (defaults to the process environment)

    Returns:
        Deferred holding the parsed value or the captured parse error
    """
    kind = ScalarKind(kind)
    source = source if source is not None else OsEnvironment()
    raw = source.read_raw(name)
    if not raw:
        return Deferred(name=name, kind=kind)
    try:
        parsed = parse_scalar(raw, kind)
    except ParseError as e:
        return Deferred(name=name, kind=kind, error=e)
    return Deferred(name=name, kind=kind, value=parsed.payload)
