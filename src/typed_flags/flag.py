"""
A single typed, validated flag.
"""

from typing import Any

from .validators import FlagValidator, TypeValidator
from .values import FlagType, convert


class Flag:
    """
    Everything known about one flag.

    The current value always satisfies every registered validator: it is
    checked when the flag is built, on every assignment and whenever a new
    validator is added. The type validator is always first in the chain.

    Attributes:
        name: The flag name.
        flag_type: The FlagType of the flag's values.
        default_value: The converted default, fixed at construction.
        description: Human-readable description shown in help output.
        definition_site: Where the flag was defined, used to group help output.
        is_explicit: False until the value is assigned; True after any
            assignment, even one that assigns the default again.
    """

    def __init__(
        self,
        flag_type: FlagType,
        name: str,
        default_value: Any,
        description: str,
        definition_site: str,
    ) -> None:
        self.flag_type = flag_type
        self.name = name
        self.description = description
        self.definition_site = definition_site
        self._validators: list[FlagValidator] = [TypeValidator(flag_type)]
        self.set(default_value)
        self.default_value = self._value
        # Defining a flag is never an explicit assignment.
        self.is_explicit = False

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self.set(new_value)

    @property
    def validators(self) -> tuple[FlagValidator, ...]:
        return tuple(self._validators)

    def get(self) -> Any:
        return self._value

    def set(self, new_value: Any) -> None:
        """
        Assign a new value, converting it from text if necessary.

        Raises:
            InvalidFlagValueError: If the converted value fails any validator.
                The previous value is kept.
        """
        new_value = convert(self.flag_type, new_value)
        self.validate(new_value)
        self._value = new_value
        self.is_explicit = True

    def validate(self, value: Any) -> None:
        """Run every validator in order; the first failure is raised."""
        for validator in self._validators:
            validator.validate(self.name, value)

    def add_validator(self, validator: FlagValidator) -> None:
        """
        Append a validator after checking that the current value satisfies it.

        Raises:
            InvalidFlagValueError: If the current value is rejected. The
                validator is not added in that case.
        """
        for existing in (*self._validators, validator):
            existing.validate(self.name, self._value)
        self._validators.append(validator)

    def restore_default(self) -> None:
        self._value = self.default_value
        self.is_explicit = False

    def is_default(self) -> bool:
        return not self.is_explicit

    def __repr__(self) -> str:
        return (
            f"Flag(name={self.name!r}, type={self.flag_type}, value={self._value!r}, "
            f"default={self.default_value!r}, explicit={self.is_explicit})"
        )
