#!/usr/bin/env python3
"""
Example script demonstrating the usage of typed_flags.

Flags are defined at module level, then filled in from the command line:

    python basic_example.py -name run42 -temperature 31.5 -verbose true output.csv
"""

import logging

from typed_flags import FlagParser, default_registry, to_display_string

flags = default_registry()

flags.define_string("name", "simulation", "Name of the simulation")
flags.define_float("temperature", 27.0, "Temperature in Celsius")
flags.define_int("num_simulations", 100, "Number of simulations to run")
flags.define_symbol("mode", "fast", "Processing mode")
flags.define_bool("verbose", False, "Enable verbose output")


def main() -> None:
    """Main function demonstrating the parser."""
    remaining = FlagParser(flags).parse()

    logging.basicConfig(level=logging.DEBUG if flags.get("verbose") else logging.INFO)

    print("typed_flags Example")
    print("=" * 50)
    print()
    print(f"Simulation Name: {flags.get('name')}")
    print(f"Temperature: {flags.get('temperature')}°C")
    print(f"Number of Simulations: {flags.get('num_simulations')}")
    print(f"Mode: {flags.get('mode')}")
    print(f"Verbose: {flags.get('verbose')}")
    print()
    print(f"Unconsumed arguments: {remaining[1:]}")
    print(f"Effective flags: {to_display_string(flags)}")


if __name__ == "__main__":
    main()
