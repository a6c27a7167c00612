# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Typed scalar values and the parser that produces them from raw text.

Every environment variable is a string. This module turns that string into
one of five scalar kinds with strict, ASCII-only validation:

- ``int32`` / ``int64``: optionally signed decimal digits, range checked
- ``float64``: decimal or scientific notation
- ``bool``: ``true`` or ``false`` in any letter case
- ``text``: the raw string, unchanged
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .exceptions import InvalidFormatError, ValueOverflowError

Payload = Union[int, float, bool, str]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ScalarKind(str, Enum):
    """The closed set of kinds a resolved value can have."""

    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    BOOL = "bool"
    TEXT = "text"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ScalarKind":
        """Look up a kind by its name or a common alias.

        Args:
            name: Kind name such as ``int32``, ``int`` or ``string`` (case-insensitive)

        Returns:
            Matching ScalarKind

        Raises:
            ValueError: If the name is not a known kind or alias
        """
        key = name.strip().lower()
        if key in _KIND_ALIASES:
            return _KIND_ALIASES[key]
        raise ValueError(
            f"Unknown kind: {name}. "
            f"Must be one of: {', '.join(sorted(_KIND_ALIASES))}"
        )


_KIND_ALIASES: Dict[str, ScalarKind] = {
    "int32": ScalarKind.INT32,
    "int": ScalarKind.INT32,
    "int64": ScalarKind.INT64,
    "long": ScalarKind.INT64,
    "float64": ScalarKind.FLOAT64,
    "float": ScalarKind.FLOAT64,
    "double": ScalarKind.FLOAT64,
    "bool": ScalarKind.BOOL,
    "boolean": ScalarKind.BOOL,
    "text": ScalarKind.TEXT,
    "str": ScalarKind.TEXT,
    "string": ScalarKind.TEXT,
}

_INT_BOUNDS: Dict[ScalarKind, Tuple[int, int]] = {
    ScalarKind.INT32: (INT32_MIN, INT32_MAX),
    ScalarKind.INT64: (INT64_MIN, INT64_MAX),
}


@dataclass(frozen=True)
class ScalarValue:
    """An immutable value tagged with exactly one ScalarKind.

    The payload is validated against the kind on construction, so a
    ``ScalarValue`` of kind ``INT32`` always holds an in-range ``int``.
    """

    kind: ScalarKind
    payload: Payload

    def __post_init__(self) -> None:
        kind = ScalarKind(self.kind)
        object.__setattr__(self, "kind", kind)
        payload = self.payload

        if kind in _INT_BOUNDS:
            if isinstance(payload, bool) or not isinstance(payload, int):
                raise TypeError(f"{kind.label} payload must be int, got {type(payload).__name__}")
            low, high = _INT_BOUNDS[kind]
            if not low <= payload <= high:
                raise ValueOverflowError(f"{kind.label} overflow {payload}", str(payload), kind)
        elif kind is ScalarKind.FLOAT64:
            if isinstance(payload, bool) or not isinstance(payload, (int, float)):
                raise TypeError(f"float64 payload must be float, got {type(payload).__name__}")
            if not math.isfinite(payload):
                raise ValueError(f"float64 payload must be finite, got {payload}")
            object.__setattr__(self, "payload", float(payload))
        elif kind is ScalarKind.BOOL:
            if not isinstance(payload, bool):
                raise TypeError(f"bool payload must be bool, got {type(payload).__name__}")
        elif not isinstance(payload, str):
            raise TypeError(f"text payload must be str, got {type(payload).__name__}")

    @classmethod
    def int32(cls, value: int) -> "ScalarValue":
        return cls(ScalarKind.INT32, value)

    @classmethod
    def int64(cls, value: int) -> "ScalarValue":
        return cls(ScalarKind.INT64, value)

    @classmethod
    def float64(cls, value: float) -> "ScalarValue":
        return cls(ScalarKind.FLOAT64, value)

    @classmethod
    def boolean(cls, value: bool) -> "ScalarValue":
        return cls(ScalarKind.BOOL, value)

    @classmethod
    def text(cls, value: str) -> "ScalarValue":
        return cls(ScalarKind.TEXT, value)

    @classmethod
    def of(cls, value: Any) -> "ScalarValue":
        """Promote a plain Python value to a ScalarValue.

        Integers become ``int32`` when they fit and ``int64`` otherwise, so a
        wide default is promoted rather than truncated.

        Args:
            value: A bool, int, float or str (an existing ScalarValue is returned as-is)

        Returns:
            ScalarValue of the inferred kind

        Raises:
            ValueOverflowError: If an int does not fit in 64 bits
            TypeError: If the value has no matching kind
        """
        if isinstance(value, ScalarValue):
            return value
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            if INT32_MIN <= value <= INT32_MAX:
                return cls.int32(value)
            return cls.int64(value)
        if isinstance(value, float):
            return cls.float64(value)
        if isinstance(value, str):
            return cls.text(value)
        raise TypeError(f"Unsupported value type for a scalar: {type(value).__name__}")

    def __str__(self) -> str:
        return format_scalar(self)


def _abbreviate(raw: str, limit: int = 40) -> str:
    return raw if len(raw) <= limit else f"{raw[:limit]}... ({len(raw)} chars)"


def _parse_int(raw: str, kind: ScalarKind) -> ScalarValue:
    if not _INT_PATTERN.fullmatch(raw):
        raise InvalidFormatError(f"expected {kind.label} {raw}", raw, kind)
    low, high = _INT_BOUNDS[kind]
    digits = raw.lstrip("+-").lstrip("0") or "0"
    # int() refuses very long digit strings; anything past the bound's width overflows
    if len(digits) > len(str(low)) - 1:
        raise ValueOverflowError(f"{kind.label} overflow {_abbreviate(raw)}", raw, kind)
    value = -int(digits) if raw.startswith("-") else int(digits)
    if not low <= value <= high:
        raise ValueOverflowError(f"{kind.label} overflow {_abbreviate(raw)}", raw, kind)
    return ScalarValue(kind, value)


def _parse_float(raw: str) -> ScalarValue:
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise InvalidFormatError(f"expected float64 {raw}", raw, ScalarKind.FLOAT64)
    value = float(raw)
    if math.isinf(value):
        raise ValueOverflowError(f"float64 overflow {raw}", raw, ScalarKind.FLOAT64)
    return ScalarValue.float64(value)


def _parse_bool(raw: str) -> ScalarValue:
    lowered = raw.lower()
    if lowered == "true":
        return ScalarValue.boolean(True)
    if lowered == "false":
        return ScalarValue.boolean(False)
    raise InvalidFormatError(f"expected bool {raw}", raw, ScalarKind.BOOL)


def parse_scalar(raw: str, kind: ScalarKind) -> ScalarValue:
    """Parse raw environment text as the given kind.

    Args:
        raw: Raw text (empty text is treated as absent by callers and never parsed)
        kind: Target kind

    Returns:
        ScalarValue of exactly ``kind``

    Raises:
        InvalidFormatError: If the text does not match the kind's grammar
        ValueOverflowError: If a numeric value exceeds the kind's range
    """
    kind = ScalarKind(kind)
    if kind is ScalarKind.TEXT:
        return ScalarValue.text(raw)
    if kind is ScalarKind.BOOL:
        return _parse_bool(raw)
    if kind is ScalarKind.FLOAT64:
        return _parse_float(raw)
    return _parse_int(raw, kind)


def format_scalar(value: Optional[ScalarValue]) -> str:
    """Render a resolved entry as display text.

    ``None`` renders as ``nullopt``; booleans as ``true``/``false``; floats use
    the shortest text that parses back to the same double.
    """
    if value is None:
        return "nullopt"
    if value.kind is ScalarKind.BOOL:
        return "true" if value.payload else "false"
    if value.kind is ScalarKind.FLOAT64:
        return repr(value.payload)
    return str(value.payload)
