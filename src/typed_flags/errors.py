"""
Exceptions raised by the flag registry.

Every error derives from FlagError so callers can catch the whole family at
once, and each one also derives from the closest builtin exception so code
that already handles ValueError or LookupError keeps working.
"""

from typing import Any


class FlagError(Exception):
    """Base class for all flag errors."""


class DuplicateFlagError(FlagError, ValueError):
    """Raised when a flag name is defined twice."""

    def __init__(self, flag_name: str) -> None:
        self.flag_name = flag_name
        super().__init__(f"Flag {flag_name} already defined")


class ReservedNameError(FlagError, ValueError):
    """Raised when a flag name collides with a registry operation."""

    def __init__(self, flag_name: str) -> None:
        self.flag_name = flag_name
        super().__init__(f"Flag {flag_name} conflicts with an internal registry method")


class UnknownFlagError(FlagError, LookupError):
    """Raised when an operation addresses a flag that is not defined."""

    def __init__(self, flag_name: Any) -> None:
        self.flag_name = flag_name
        super().__init__(f"Flag {flag_name} not defined")


class InvalidFlagNameError(FlagError, TypeError):
    """Raised when a flag name is not an identifier string."""

    def __init__(self, flag_name: Any) -> None:
        self.flag_name = flag_name
        super().__init__(
            f"Flag name must be an identifier string, got {type(flag_name).__name__}: {flag_name!r}"
        )


class InvalidFlagValueError(FlagError, ValueError):
    """
    Raised when a value fails type conversion or one of the flag's validators.

    Attributes:
        flag_name: Name of the flag the value was assigned to.
        value: The rejected value.
        reason: Failure message of the validator that rejected it.
    """

    def __init__(self, flag_name: str, value: Any, reason: str) -> None:
        self.flag_name = flag_name
        self.value = value
        self.reason = reason
        super().__init__(f"Flag value {value!r} for flag -{flag_name} is invalid: {reason}")
