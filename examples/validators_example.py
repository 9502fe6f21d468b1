#!/usr/bin/env python3
"""
Example script showing flag validators and error handling.

    python validators_example.py -workers 8 -direction south
    python validators_example.py -workers 0        # rejected by the range validator
"""

import sys

from typed_flags import FlagParser, FlagRegistry

flags = FlagRegistry()

flags.define_int("workers", 4, "Number of worker processes")
flags.register_range_validator("workers", 1, 64)

flags.define_symbol("direction", "north", "One of north, south, east, west")
flags.register_allowed_values_validator("direction", "north", "south", "east", "west")

flags.define_int("batch_size", 32, "Batch size, must be a power of two")
flags.register_custom_validator(
    "batch_size", lambda value: value > 0 and value & (value - 1) == 0, "must be a power of two"
)


def main() -> None:
    result = FlagParser(flags).safe_parse()
    if result.is_err():
        print(f"error: {result.err_value}", file=sys.stderr)
        sys.exit(2)

    for name, value in sorted(flags.to_dict().items()):
        source = "default" if flags.is_default(name) else "command line"
        print(f"{name} = {value!r} ({source})")


if __name__ == "__main__":
    main()
