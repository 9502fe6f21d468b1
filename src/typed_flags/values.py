"""
Typed flag values.

Each FlagType knows the native Python type its values must have and how to
convert command-line text into that type. Conversion never raises: text that
cannot be converted is handed back unchanged so the type validator reports
the failure the same way for every type.
"""

import enum
import json
import math
import threading
from typing import Any, Callable


class Token(str):
    """
    An interned symbol, used as the value of symbol flags.

    Tokens compare equal to the plain string with the same text, but their
    runtime type differs so a string flag rejects a Token and a symbol flag
    rejects a plain str that bypassed conversion.
    """

    __slots__ = ()

    _interned: dict[str, "Token"] = {}
    _lock = threading.Lock()

    def __new__(cls, text: str) -> "Token":
        text = str(text)
        with cls._lock:
            token = cls._interned.get(text)
            if token is None:
                token = super().__new__(cls, text)
                cls._interned[text] = token
            return token

    def __repr__(self) -> str:
        return f":{str.__str__(self)}"

    def __reduce__(self):
        return (Token, (str.__str__(self),))


def _to_string(text: str) -> Any:
    return text


def _to_token(text: str) -> Any:
    return Token(text)


def _to_int(text: str) -> Any:
    # Prefixed literals (0x1A, 0o17, 0b101) first, then zero-padded decimals.
    for base in (0, 10):
        try:
            return int(text, base)
        except ValueError:
            pass
    return text


def _to_float(text: str) -> Any:
    try:
        value = float(text)
    except ValueError:
        return text
    # inf and nan are not accepted from text.
    return value if math.isfinite(value) else text


_BOOL_WORDS = {"true": True, "false": False}


def _to_bool(text: str) -> Any:
    return _BOOL_WORDS.get(text.lower(), text)


class FlagType(enum.Enum):
    """The closed set of flag value types."""

    STRING = "string"
    SYMBOL = "symbol"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value

    @property
    def native_type(self) -> type:
        """The exact runtime type a value of this flag type must have."""
        return _NATIVE_TYPES[self]

    def convert(self, value: Any) -> Any:
        """Convert text to this type; non-text values are returned as they are."""
        return convert(self, value)


_NATIVE_TYPES: dict[FlagType, type] = {
    FlagType.STRING: str,
    FlagType.SYMBOL: Token,
    FlagType.INT: int,
    FlagType.FLOAT: float,
    FlagType.BOOL: bool,
}

_CONVERTERS: dict[FlagType, Callable[[str], Any]] = {
    FlagType.STRING: _to_string,
    FlagType.SYMBOL: _to_token,
    FlagType.INT: _to_int,
    FlagType.FLOAT: _to_float,
    FlagType.BOOL: _to_bool,
}


def convert(flag_type: FlagType, value: Any) -> Any:
    """
    Convert a command-line value into the native type of `flag_type`.

    Only plain strings are converted. Values of any other type, Tokens
    included, are assumed to be native already and pass through untouched.

    Args:
        flag_type: The target flag type.
        value: The raw value.

    Returns:
        Any: The converted value, or `value` itself when it is not text or
        cannot be converted.
    """
    if type(value) is not str:
        return value
    return _CONVERTERS[flag_type](value)


def is_native(flag_type: FlagType, value: Any) -> bool:
    """Return True if `value` has exactly the runtime type of `flag_type`."""
    return type(value) is _NATIVE_TYPES[flag_type]


def format_value(value: Any) -> str:
    """
    Return the natural textual form of a flag value.

    The result converts back to the same value through `convert` for every
    flag type (floats use repr so they round-trip exactly). Non-finite floats
    are the exception, since `convert` does not accept them from text.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def quote_value(value: Any) -> str:
    """
    Return a display form of a flag value with strings quoted and escaped.

    Embedded quotes, spaces and control characters in strings stay readable
    in log lines; other values use `format_value`.
    """
    if type(value) is str:
        return json.dumps(value, ensure_ascii=False)
    return format_value(value)
