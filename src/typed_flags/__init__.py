"""
typed_flags - a registry of typed, validated command-line flags.

Flags are declared anywhere in a program against a FlagRegistry and filled in
later from the command line by FlagParser, which consumes "-<name> <value>"
pairs from the argument list in place. Values are converted from text to the
flag's type, checked by the flag's validators, and can be serialized back to
an argument list or YAML.
"""

from .errors import (
    DuplicateFlagError,
    FlagError,
    InvalidFlagNameError,
    InvalidFlagValueError,
    ReservedNameError,
    UnknownFlagError,
)
from .flag import Flag
from .parser import FlagParser, init
from .registry import FlagHandle, FlagRegistry, default_registry
from .serialization import args_from_yaml, to_argument_list, to_display_string, to_yaml
from .validators import (
    AllowedValuesValidator,
    CustomValidator,
    DisallowedValuesValidator,
    FlagValidator,
    RangeValidator,
    TypeValidator,
)
from .values import FlagType, Token

__version__ = "1.0.0"
__all__ = [
    "AllowedValuesValidator",
    "CustomValidator",
    "DisallowedValuesValidator",
    "DuplicateFlagError",
    "Flag",
    "FlagError",
    "FlagHandle",
    "FlagParser",
    "FlagRegistry",
    "FlagType",
    "FlagValidator",
    "InvalidFlagNameError",
    "InvalidFlagValueError",
    "RangeValidator",
    "ReservedNameError",
    "Token",
    "TypeValidator",
    "UnknownFlagError",
    "args_from_yaml",
    "default_registry",
    "init",
    "to_argument_list",
    "to_display_string",
    "to_yaml",
]
