#!/usr/bin/env python3
"""
Example script showing how flags are passed on to a child process.

The parent serializes its effective flags to an argument list (or YAML) and
the child parses them back into an identically defined registry.
"""

from typed_flags import FlagParser, FlagRegistry, args_from_yaml, to_argument_list, to_yaml


def define_flags(registry: FlagRegistry) -> None:
    registry.define_string("output_dir", "/tmp/output", "Output directory path")
    registry.define_float("timeout", 300.0, "Timeout in seconds")
    registry.define_bool("dry_run", False, "Do not write any output")


def main() -> None:
    parent = FlagRegistry()
    define_flags(parent)
    FlagParser(parent).parse(["-timeout", "12.5", "-output_dir", "/data/run 7"])

    child_args = to_argument_list(parent)
    print(f"Child command line: {child_args}")

    child = FlagRegistry()
    define_flags(child)
    FlagParser(child).parse(child_args)
    print(f"Child flags: {child.to_dict()}")

    text = to_yaml(parent)
    print("YAML form:")
    print(text)
    print(f"Loaded back: {args_from_yaml(text)}")


if __name__ == "__main__":
    main()
