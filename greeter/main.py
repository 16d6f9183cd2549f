"""Command line greeting for a single name."""

from __future__ import annotations

import sys

# Printed whenever the invocation does not carry exactly one name.
USAGE_TEMPLATE = "Usage: {program} <name>"


def greeting(name: str) -> str:
    """Return a friendly greeting for the given ``name``."""
    return f"Hello, {name}!"


def usage(program: str) -> str:
    """Return the usage line shown for ``program``."""
    return USAGE_TEMPLATE.format(program=program)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the greeter script.

    ``argv`` is the full invocation, program name first, and defaults to
    :data:`sys.argv`.  Anything other than exactly one name prints the usage
    line instead of a greeting; both paths return normally.
    """

    if argv is None:
        argv = sys.argv
    if len(argv) != 2:
        print(usage(argv[0]))
        return

    print(greeting(argv[1]))


if __name__ == "__main__":
    main()
