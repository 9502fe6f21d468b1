"""
Flag validators.

A validator pairs a predicate with the message reported when the predicate
rejects a value. Validators hold no mutable state, so one instance can be
shared between flags.
"""

import math
from typing import Any, Callable, Iterable

from .errors import InvalidFlagValueError
from .values import FlagType, is_native


def _flatten(values: Iterable[Any]) -> tuple[Any, ...]:
    """Flatten one level of list/tuple/set arguments into a single tuple."""
    flat = []
    for value in values:
        if isinstance(value, (list, tuple, set, frozenset)):
            flat.extend(value)
        else:
            flat.append(value)
    return tuple(flat)


def _join(values: Iterable[Any]) -> str:
    return ",".join(repr(value) for value in values)


class FlagValidator:
    """
    Check a flag value with an arbitrary predicate.

    Example:
        even = FlagValidator(lambda v: v % 2 == 0, "Flag value must be an even integer")
        even.validate("count", 3)  # raises InvalidFlagValueError
    """

    def __init__(self, predicate: Callable[[Any], bool], message: str) -> None:
        self.predicate = predicate
        self.message = message

    def is_valid(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def validate(self, flag_name: str, value: Any) -> None:
        """Raise InvalidFlagValueError if `value` is rejected."""
        if not self.is_valid(value):
            raise InvalidFlagValueError(flag_name, value, self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class CustomValidator(FlagValidator):
    """A caller-supplied predicate and failure message."""


class TypeValidator(FlagValidator):
    """Reject values whose runtime type is not exactly the flag type's native type."""

    def __init__(self, flag_type: FlagType) -> None:
        self.flag_type = flag_type
        super().__init__(
            lambda value: is_native(flag_type, value),
            f"unexpected value class, expecting {flag_type.native_type.__name__}",
        )


class RangeValidator(FlagValidator):
    """
    Reject values outside the inclusive range [low, high].

    Either end may be left open with -math.inf / math.inf, which are the
    defaults. No type checking is done here; values that cannot be compared
    with the bounds are treated as out of range.
    """

    def __init__(self, low: Any = -math.inf, high: Any = math.inf) -> None:
        self.low = low
        self.high = high
        super().__init__(self._in_range, f"value out of range! Valid range is {low!r}..{high!r}")

    def _in_range(self, value: Any) -> bool:
        try:
            return self.low <= value <= self.high
        except TypeError:
            return False


class AllowedValuesValidator(FlagValidator):
    """
    Reject values that are not one of the allowed values.

    Membership uses ==, and a Token equals the plain string with the same
    text, so Token("a") also allows "a" on a string flag.
    """

    def __init__(self, *allowed_values: Any) -> None:
        self.allowed_values = _flatten(allowed_values)
        super().__init__(
            lambda value: value in self.allowed_values,
            f"illegal value, expecting one of [{_join(self.allowed_values)}]",
        )


class DisallowedValuesValidator(FlagValidator):
    """
    Reject values that are one of the disallowed values.

    As with AllowedValuesValidator, a Token and the plain string with the
    same text are treated as the same value.
    """

    def __init__(self, *disallowed_values: Any) -> None:
        self.disallowed_values = _flatten(disallowed_values)
        super().__init__(
            lambda value: value not in self.disallowed_values,
            f"illegal value, may not be one of [{_join(self.disallowed_values)}]",
        )
