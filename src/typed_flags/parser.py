"""
FlagParser - fills registered flags from a command-line argument list.

Arguments of the form "-<flag_name> <value>" are consumed from the list in
place and assigned through the registry's validated setters. Everything else
is left in the list, in its original order, for the program to handle.
"""

import logging
import sys
from typing import Any, Iterable, Optional, Sequence

from result import Err, Ok, Result

from .errors import FlagError, InvalidFlagValueError
from .registry import FlagRegistry, default_registry
from .values import quote_value

logger = logging.getLogger(__name__)

DEFAULT_HELP_FLAGS: tuple[str, ...] = ("--help", "-help")


def extract_flag_values(
    args: list[Any], flag_names: Iterable[str], help_flags: Sequence[str] = ()
) -> Optional[dict[str, list[Any]]]:
    """
    Remove every "-<flag_name> <value>" pair from `args` in one left-to-right pass.

    A token taken as a value is never matched as a flag name or help flag, so
    a string value such as "-count" or "--help" survives a round trip.

    Args:
        args: The argument list, modified in place.
        flag_names: Names of the defined flags.
        help_flags: Tokens that request the help listing.

    Returns:
        Optional[dict[str, list]]: The values of each flag found, in argument
        order, or None if a help flag was found. `args` is left unchanged
        when None is returned.

    Raises:
        InvalidFlagValueError: If a flag is the last element, so no value
            follows it. `args` is left unchanged.
    """
    names = set(flag_names)
    values: dict[str, list[Any]] = {}
    remaining: list[Any] = []
    index = 0
    while index < len(args):
        token = args[index]
        if isinstance(token, str):
            if token in help_flags:
                return None
            if token.startswith("-") and token[1:] in names:
                if index + 1 >= len(args):
                    raise InvalidFlagValueError(token[1:], None, "missing value")
                values.setdefault(token[1:], []).append(args[index + 1])
                index += 2
                continue
        remaining.append(token)
        index += 1
    args[:] = remaining
    return values


class FlagParser:
    """
    Parse command-line arguments into the flags of a registry.

    Example:
        flags = FlagRegistry()
        flags.define_int("meaning_of_life", 41, "The answer")

        args = ["-meaning_of_life", "42", "path/to/output/file"]
        FlagParser(flags).parse(args)
        # flags.get("meaning_of_life") == 42
        # args == ["path/to/output/file"]
    """

    def __init__(
        self,
        registry: Optional[FlagRegistry] = None,
        help_flags: Sequence[str] = DEFAULT_HELP_FLAGS,
    ) -> None:
        """
        Initialize the parser.

        Args:
            registry: The registry to fill. Defaults to the process-wide one.
            help_flags: Tokens that print the help listing and exit.
        """
        self.registry: FlagRegistry = registry if registry is not None else default_registry()
        self.help_flags: tuple[str, ...] = tuple(help_flags)

    def parse(self, args: Optional[list[Any]] = None) -> list[Any]:
        """
        Consume every defined flag from `args` and assign its value.

        NOTE: `args` is modified in place. When a flag occurs more than once
        every occurrence is removed and the last value wins.

        Args:
            args (Optional[list]): The argument list. If None, uses sys.argv.

        Returns:
            list: `args` itself, now holding only the unconsumed arguments.

        Raises:
            InvalidFlagValueError: If a value fails conversion or validation.
            SystemExit: With status 0 after printing help if a help flag is present.
        """
        if args is None:
            args = sys.argv

        flags = self.registry.flags()
        values = extract_flag_values(args, (flag.name for flag in flags), self.help_flags)
        if values is None:
            sys.stdout.write(self.help_message())
            sys.exit(0)

        for flag in flags:
            for value in values.get(flag.name, ()):
                self.registry.set(flag.name, value)
                logger.debug("Parsed -%s = %r", flag.name, self.registry.get(flag.name))
        return args

    def safe_parse(self, args: Optional[list[Any]] = None) -> Result[list[Any], str]:
        """
        Parse like `parse`, returning the outcome instead of raising.

        Args:
            args (Optional[list]): The argument list. If None, uses sys.argv.

        Returns:
            Result[list, str]:
                - Ok with the unconsumed arguments,
                - Err with the error message if a flag could not be set.
        """
        try:
            return Ok(self.parse(args))
        except FlagError as e:
            return Err(str(e))

    def help_message(self) -> str:
        """
        Build the help listing.

        Flags are grouped by definition site (sorted), then sorted by name.
        """
        help_text = "Known command line flags:\n\n"
        flags = self.registry.flags()
        if not flags:
            return help_text

        width = max(len(flag.name) for flag in flags) + 1
        by_site: dict[str, list] = {}
        for flag in flags:
            by_site.setdefault(flag.definition_site, []).append(flag)

        for site in sorted(by_site):
            help_text += f"Defined in {site}:\n"
            for flag in sorted(by_site[site], key=lambda f: f.name):
                help_text += (
                    f"  -{flag.name.ljust(width)} ({flag.flag_type}) {flag.description} "
                    f"(Default: {quote_value(flag.default_value)})\n"
                )
            help_text += "\n"
        return help_text


def init(args: Optional[list[Any]] = None, registry: Optional[FlagRegistry] = None) -> list[Any]:
    """Parse `args` (default sys.argv) into `registry` (default: the process-wide one)."""
    return FlagParser(registry).parse(args)
