"""
FlagRegistry - the owner and lookup table for all defined flags.

Flags are declared anywhere in a program, typically at module import time:

    flags = default_registry()
    verbose = flags.define_bool("verbose", False, "Print progress information")
    workers = flags.define_int("workers", 4, "Number of worker processes")
    flags.register_range_validator("workers", 1, 64)

and are later filled in from the command line by FlagParser. Every access
goes through the registry by name; FlagHandle objects returned by the define
methods are thin name-bound views and never hold the Flag itself.
"""

import logging
import math
import os
import sys
import threading
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from .errors import (
    DuplicateFlagError,
    InvalidFlagNameError,
    ReservedNameError,
    UnknownFlagError,
)
from .flag import Flag
from .validators import (
    AllowedValuesValidator,
    CustomValidator,
    DisallowedValuesValidator,
    FlagValidator,
    RangeValidator,
)
from .values import FlagType

logger = logging.getLogger(__name__)

UNKNOWN_SITE = "<unknown>"

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _display_path(filename: str) -> str:
    try:
        return os.path.relpath(filename)
    except ValueError:
        # Different drive on Windows.
        return filename


def _caller_site() -> str:
    """
    Return the file of the nearest calling frame outside this package.

    Falls back to UNKNOWN_SITE on interpreters without frame introspection.
    """
    getframe = getattr(sys, "_getframe", None)
    if getframe is None:
        return UNKNOWN_SITE
    frame = getframe(1)
    while frame is not None:
        filename = frame.f_code.co_filename
        if os.path.dirname(os.path.abspath(filename)) != _PACKAGE_DIR:
            return _display_path(filename)
        frame = frame.f_back
    return UNKNOWN_SITE


class FlagHandle:
    """A name-bound view of a flag in a registry."""

    __slots__ = ("_registry", "name")

    def __init__(self, registry: "FlagRegistry", name: str) -> None:
        self._registry = registry
        self.name = name

    @property
    def value(self) -> Any:
        return self._registry.get(self.name)

    @value.setter
    def value(self, new_value: Any) -> None:
        self._registry.set(self.name, new_value)

    def is_default(self) -> bool:
        return self._registry.is_default(self.name)

    def restore_default(self) -> None:
        self._registry.restore_default(self.name)

    def __repr__(self) -> str:
        return f"FlagHandle({self.name!r})"


class FlagRegistry:
    """
    A mapping from flag name to Flag with validated get/set access.

    All operations are serialized by a single re-entrant lock. Defining and
    undefining flags while other threads read them is still the caller's
    responsibility; the usual pattern is to define during single-threaded
    startup and only undefine in test teardown.
    """

    def __init__(self) -> None:
        self._flags: dict[str, Flag] = {}
        self._lock = threading.RLock()

    # -- definition -----------------------------------------------------

    def define(
        self,
        name: str,
        default_value: Any,
        description: str,
        flag_type: FlagType,
        definition_site: Optional[str] = None,
    ) -> FlagHandle:
        """
        Define a new flag.

        Args:
            name: Identifier of the flag; "-<name>" is its command-line form.
            default_value: The default, either native or text to be converted.
            description: Text shown in the help listing.
            flag_type: The FlagType of the flag.
            definition_site: Label used to group help output. Defaults to the
                calling file.

        Returns:
            FlagHandle: A handle bound to the new flag.

        Raises:
            InvalidFlagNameError: If `name` is not an identifier string.
            ReservedNameError: If `name` collides with a registry method.
            DuplicateFlagError: If a flag with this name already exists.
            InvalidFlagValueError: If the default fails type validation.
        """
        self._check_name(name)
        if definition_site is None:
            definition_site = _caller_site()
        with self._lock:
            if name in self._flags:
                raise DuplicateFlagError(name)
            if name.startswith("_") or hasattr(type(self), name):
                raise ReservedNameError(name)
            flag = Flag(FlagType(flag_type), name, default_value, description, definition_site)
            self._flags[name] = flag
        logger.debug("Defined %s flag -%s (default %r) at %s", flag.flag_type, name, flag.default_value, definition_site)
        return FlagHandle(self, name)

    def define_string(self, name: str, default_value: Any, description: str, definition_site: Optional[str] = None) -> FlagHandle:
        return self.define(name, default_value, description, FlagType.STRING, definition_site)

    def define_symbol(self, name: str, default_value: Any, description: str, definition_site: Optional[str] = None) -> FlagHandle:
        return self.define(name, default_value, description, FlagType.SYMBOL, definition_site)

    def define_int(self, name: str, default_value: Any, description: str, definition_site: Optional[str] = None) -> FlagHandle:
        return self.define(name, default_value, description, FlagType.INT, definition_site)

    def define_float(self, name: str, default_value: Any, description: str, definition_site: Optional[str] = None) -> FlagHandle:
        return self.define(name, default_value, description, FlagType.FLOAT, definition_site)

    def define_bool(self, name: str, default_value: Any, description: str, definition_site: Optional[str] = None) -> FlagHandle:
        return self.define(name, default_value, description, FlagType.BOOL, definition_site)

    def undefine(self, name: str) -> None:
        """Remove a flag so its name can be defined again."""
        with self._lock:
            self._flag(name)
            del self._flags[name]
        logger.debug("Undefined flag -%s", name)

    def clear(self) -> None:
        """Undefine every flag."""
        with self._lock:
            self._flags.clear()

    # -- value access ---------------------------------------------------

    def get(self, name: str) -> Any:
        with self._lock:
            return self._flag(name).get()

    def set(self, name: str, value: Any) -> None:
        """
        Assign a flag value, converting text to the flag's type.

        Raises:
            UnknownFlagError: If the flag is not defined.
            InvalidFlagValueError: If the value is rejected; the flag keeps
                its previous value.
        """
        with self._lock:
            self._flag(name).set(value)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def set_if_default(self, name: str, value: Any) -> bool:
        """
        Set a flag only if it still holds its default.

        A flag stops being default once it is given a value on the command
        line, assigned in code, or loaded through set_multiple_if_default.

        Returns:
            bool: True if the value was changed, False if the flag had already
            been set explicitly.
        """
        with self._lock:
            flag = self._flag(name)
            if not flag.is_default():
                return False
            flag.set(value)
            return True

    def set_multiple_if_default(self, values: Mapping[str, Any]) -> None:
        """Call set_if_default for each name/value pair."""
        with self._lock:
            for name, value in values.items():
                self.set_if_default(name, value)

    def restore_default(self, name: str) -> None:
        with self._lock:
            self._flag(name).restore_default()
        logger.debug("Restored default of flag -%s", name)

    def restore_multiple_defaults(self, names: Iterable[str]) -> None:
        with self._lock:
            for name in names:
                self.restore_default(name)

    def restore_all_defaults(self) -> None:
        with self._lock:
            for flag in self._flags.values():
                flag.restore_default()
        logger.debug("Restored defaults of all flags")

    # -- validators -----------------------------------------------------

    def register_validator(self, name: str, validator: FlagValidator) -> None:
        """
        Add a validator to a flag, checking the current value against it.

        Raises:
            UnknownFlagError: If the flag is not defined.
            InvalidFlagValueError: If the current value is rejected. The
                validator is not added.
        """
        with self._lock:
            self._flag(name).add_validator(validator)

    def register_range_validator(self, name: str, low: Any = -math.inf, high: Any = math.inf) -> None:
        self.register_validator(name, RangeValidator(low, high))

    def register_allowed_values_validator(self, name: str, *allowed_values: Any) -> None:
        self.register_validator(name, AllowedValuesValidator(*allowed_values))

    def register_disallowed_values_validator(self, name: str, *disallowed_values: Any) -> None:
        self.register_validator(name, DisallowedValuesValidator(*disallowed_values))

    def register_custom_validator(self, name: str, predicate: Callable[[Any], bool], message: str) -> None:
        self.register_validator(name, CustomValidator(predicate, message))

    # -- metadata -------------------------------------------------------

    def comment(self, name: str) -> Optional[str]:
        """Return the description of a flag, or None if it is not defined."""
        self._check_name(name)
        with self._lock:
            flag = self._flags.get(name)
            return flag.description if flag is not None else None

    def default_value(self, name: str) -> Any:
        with self._lock:
            return self._flag(name).default_value

    def is_default(self, name: str) -> bool:
        with self._lock:
            return self._flag(name).is_default()

    def flag_type(self, name: str) -> FlagType:
        with self._lock:
            return self._flag(name).flag_type

    def definition_site(self, name: str) -> str:
        with self._lock:
            return self._flag(name).definition_site

    def names(self) -> list[str]:
        """Return all defined flag names, sorted."""
        with self._lock:
            return sorted(self._flags)

    def flags(self) -> list[Flag]:
        """Return the defined flags in definition order."""
        with self._lock:
            return list(self._flags.values())

    def to_dict(self) -> dict[str, Any]:
        """Return a {name: value} snapshot of all flags."""
        with self._lock:
            return {name: flag.get() for name, flag in self._flags.items()}

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"FlagRegistry({self.names()!r})"

    # -- internals ------------------------------------------------------

    def _flag(self, name: str) -> Flag:
        self._check_name(name)
        flag = self._flags.get(name)
        if flag is None:
            raise UnknownFlagError(name)
        return flag

    @staticmethod
    def _check_name(name: Any) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidFlagNameError(name)


_default_registry: Optional[FlagRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> FlagRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = FlagRegistry()
        return _default_registry
