"""
Serialization of flag values to argument lists, display strings and YAML.

The argument-list forms produced here can be handed straight back to
FlagParser.parse, e.g. to pass the current configuration on to a child
process or to persist it:

    text = to_yaml(flags)
    ...
    FlagParser(other_flags).parse(args_from_yaml(text))
"""

from typing import IO, Any, Optional

import yaml

from .registry import FlagRegistry
from .values import Token, format_value, quote_value

TOKEN_TAG = "!token"


class _FlagDumper(yaml.SafeDumper):
    pass


class _FlagLoader(yaml.SafeLoader):
    pass


def _represent_token(dumper: yaml.SafeDumper, token: Token) -> yaml.Node:
    return dumper.represent_scalar(TOKEN_TAG, str(token))


def _construct_token(loader: yaml.SafeLoader, node: yaml.Node) -> Token:
    return Token(loader.construct_scalar(node))


_FlagDumper.add_representer(Token, _represent_token)
_FlagLoader.add_constructor(TOKEN_TAG, _construct_token)


def _sorted_values(registry: FlagRegistry) -> list[tuple[str, Any]]:
    values = registry.to_dict()
    return [(name, values[name]) for name in sorted(values)]


def to_argument_list(registry: FlagRegistry) -> list[str]:
    """
    Return ["-<name>", "<value>", ...] for every flag, sorted by name.

    Each value is its own list element, so strings are emitted verbatim and
    other values in their natural text form; parsing the list back yields
    the same values.
    """
    args: list[str] = []
    for name, value in _sorted_values(registry):
        args += [f"-{name}", format_value(value)]
    return args


def to_display_string(registry: FlagRegistry) -> str:
    """
    Return the flags as one line for logging, e.g. '-count 3 -name "you rock"'.

    String values are double-quoted with embedded quotes escaped.
    """
    return " ".join(f"-{name} {quote_value(value)}" for name, value in _sorted_values(registry))


def to_yaml(registry: FlagRegistry, stream: Optional[IO[str]] = None) -> Optional[str]:
    """
    Dump the flags as a YAML list of alternating names and native values.

    Args:
        registry: The registry to serialize.
        stream: Where to write the YAML. If None, the YAML is returned.

    Returns:
        Optional[str]: The YAML text when `stream` is None, otherwise None.
    """
    args: list[Any] = []
    for name, value in _sorted_values(registry):
        args += [f"-{name}", value]
    return yaml.dump(args, stream, Dumper=_FlagDumper)


def args_from_yaml(text: Any) -> list[Any]:
    """
    Load an argument list written by `to_yaml`.

    Raises:
        ValueError: If the YAML is invalid or does not hold a list.
    """
    try:
        args = yaml.load(text, Loader=_FlagLoader)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML flag list: {e}")
    if not isinstance(args, list):
        raise ValueError(f"Expected a YAML list of flag arguments, got {type(args).__name__}")
    return args
