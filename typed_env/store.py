# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Store of typed values resolved once from the environment.

Callers declare each expected variable with either a kind (the environment
must supply it) or a default value (used when the variable is unset or empty):

    >>> store = EnvStore()
    >>> store.initialize({
    ...     "PORT": ScalarKind.INT32,
    ...     "DEBUG": False,
    ...     "TIMEOUT": ScalarValue.float64(2.5),
    ... })
    >>> store.get("PORT", ScalarKind.INT32)
    8080

Reads never touch the live environment again.
"""

from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from .deferred import Deferred, resolve
from .exceptions import (
    EnvError,
    InitializationError,
    InvalidNameError,
    NoValueError,
    NotFoundError,
    ParseError,
    TypeMismatchError,
    WriteFailedError,
)
from .log import Logger, create_logger
from .scalar import Payload, ScalarKind, ScalarValue, format_scalar, parse_scalar
from .source import EnvironmentSource, OsEnvironment

Declaration = Union[ScalarKind, ScalarValue, bool, int, float, str]

# Explicit settings, independent of LOG_* variables
default_logger = create_logger(logger_type="stdout", level="WARNING", name="typed_env.store")


class EnvStoreView:
    """Read-only, restartable view of ``(name, display_text)`` pairs.

    The view holds a snapshot taken when it was created; later changes to the
    store are not reflected.
    """

    def __init__(self, entries: Mapping[str, Optional[ScalarValue]]):
        self._pairs: Tuple[Tuple[str, str], ...] = tuple(
            (name, format_scalar(value)) for name, value in entries.items()
        )

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"EnvStoreView({list(self._pairs)!r})"


class EnvStore:
    """Typed values resolved from environment variables.

    Attributes:
        source: Environment source used by initialize, resolve and write
    """

    def __init__(
        self,
        source: Optional[EnvironmentSource] = None,
        logger: Optional[Logger] = None,
    ):
        """Create an empty store.

        Args:
            source: Environment source (defaults to the process environment)
            logger: Logger for resolution events (defaults to the module logger)
        """
        self.source = source if source is not None else OsEnvironment()
        self._logger = logger if logger is not None else default_logger
        self._entries: Dict[str, Optional[ScalarValue]] = {}

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self, declarations: Mapping[str, Declaration]) -> None:
        """Resolve a batch of declarations against the live environment.

        A non-empty live value always wins. With a kind declaration it must
        parse or the whole batch fails; with a default declaration a value
        that does not parse as the default's kind leaves the entry unset.
        An unset or empty variable resolves to the default, or to no value.

        The batch is atomic: if any name fails, no entry from the batch is
        stored and earlier entries are left untouched.

        Args:
            declarations: Mapping of variable name to kind or default value

        Raises:
            InitializationError: If a kind-declared value fails to parse, or a
                declaration is malformed
        """
        staged: Dict[str, Optional[ScalarValue]] = {}
        for name, declaration in declarations.items():
            try:
                staged[name] = self._resolve_entry(name, declaration)
            except (ParseError, InvalidNameError, TypeError, ValueError) as e:
                self._logger.error(
                    "Environment initialization failed",
                    name=name,
                    error=str(e),
                )
                raise InitializationError(name, e) from e

        self._entries.update(staged)
        self._logger.debug("Environment initialized", count=len(staged))

    def _resolve_entry(self, name: str, declaration: Declaration) -> Optional[ScalarValue]:
        if not isinstance(name, str) or not name:
            raise InvalidNameError(str(name))

        if isinstance(declaration, ScalarKind):
            kind = declaration
            default = None
        else:
            default = ScalarValue.of(declaration)
            kind = default.kind

        raw = self.source.read_raw(name)

        if raw:
            if default is None:
                value = parse_scalar(raw, kind)
            else:
                try:
                    value = parse_scalar(raw, kind)
                except ParseError as e:
                    self._logger.warning(
                        "Ignoring environment value that does not match default type",
                        name=name,
                        kind=kind.label,
                        error=str(e),
                    )
                    return None
            self._logger.debug("Resolved environment value", name=name, kind=kind.label, origin="environment")
            return value

        if default is not None:
            self._logger.debug("Resolved environment value", name=name, kind=kind.label, origin="default")
            return default

        self._logger.debug("Resolved environment value", name=name, kind=kind.label, origin="unset")
        return None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_value(self, name: str) -> Optional[ScalarValue]:
        """Return the resolved entry for a declared name.

        Raises:
            NotFoundError: If the name was never declared
        """
        if name not in self._entries:
            raise NotFoundError(name)
        return self._entries[name]

    def get(self, name: str, kind: ScalarKind) -> Payload:
        """Get a resolved value of exactly the given kind.

        Args:
            name: Declared variable name
            kind: Expected kind

        Returns:
            The value's payload (int, float, bool or str)

        Raises:
            NotFoundError: If the name was never declared
            NoValueError: If the name resolved to no value
            TypeMismatchError: If the value has a different kind
        """
        kind = ScalarKind(kind)
        value = self.get_value(name)
        if value is None:
            raise NoValueError(name)
        if value.kind is not kind:
            raise TypeMismatchError(name, kind, value.kind)
        return value.payload

    def get_optional(self, name: str, kind: ScalarKind) -> Optional[Payload]:
        """Get a resolved value, or None if undeclared, unset or of another kind."""
        value = self._entries.get(name)
        # str-valued enum: an unknown kind compares unequal instead of raising
        if value is None or value.kind != kind:
            return None
        return value.payload

    def get_int(self, name: str) -> int:
        return self.get(name, ScalarKind.INT32)

    def get_int64(self, name: str) -> int:
        return self.get(name, ScalarKind.INT64)

    def get_float(self, name: str) -> float:
        return self.get(name, ScalarKind.FLOAT64)

    def get_bool(self, name: str) -> bool:
        return self.get(name, ScalarKind.BOOL)

    def get_str(self, name: str) -> str:
        return self.get(name, ScalarKind.TEXT)

    def has_value(self, name: str) -> bool:
        """Check whether a name is declared and resolved to a value of any kind."""
        return self._entries.get(name) is not None

    def is_type(self, name: str, kind: ScalarKind) -> bool:
        """Check whether a name resolved to a value of exactly ``kind``."""
        value = self._entries.get(name)
        return value is not None and value.kind == kind

    def empty(self) -> bool:
        return not self._entries

    def items(self) -> EnvStoreView:
        """Return a snapshot view of ``(name, display_text)`` pairs."""
        return EnvStoreView(self._entries)

    def as_dict(self) -> Dict[str, Optional[Payload]]:
        """Return a snapshot of resolved payloads keyed by name."""
        return {
            name: (value.payload if value is not None else None)
            for name, value in self._entries.items()
        }

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: Any) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"EnvStore({dict(self.items())!r})"

    # ------------------------------------------------------------------
    # Environment access that bypasses resolved entries
    # ------------------------------------------------------------------

    def resolve(self, name: str, kind: ScalarKind) -> Deferred:
        """Resolve one variable from this store's source without storing it."""
        return resolve(name, kind, source=self.source)

    def write(self, name: str, value: str, overwrite: bool = True) -> None:
        """Set a variable in the live environment.

        Resolved entries are not touched; the change is seen by later
        initialize and resolve calls.

        Args:
            name: Variable name (non-empty, no '=')
            value: Raw text to store
            overwrite: If False, an existing variable keeps its value

        Raises:
            InvalidNameError: If the name is empty or contains '='
            WriteFailedError: If the environment rejects the write
        """
        if not name or "=" in name:
            raise InvalidNameError(name)
        try:
            self.source.write_raw(name, value, overwrite)
        except (OSError, ValueError, TypeError) as e:
            raise WriteFailedError(name, str(value), str(e)) from e
        self._logger.debug("Environment variable written", name=name, overwrite=overwrite)

    def try_write(self, name: str, value: str, overwrite: bool = True) -> bool:
        """Set a variable without validating the name.

        Returns:
            True if the write succeeded, False otherwise
        """
        try:
            self.source.write_raw(name, value, overwrite)
        except (OSError, ValueError, TypeError, EnvError):
            return False
        return True
