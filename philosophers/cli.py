"""Command that runs the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosophers.settings import ArgumentError, parse_arguments
from philosophers.simulation import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run a simulation; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Argument error\n")
        return 1
    table = Table(settings, output=print)
    print(
        f"Num philos:{settings.number}, start time:{table.start}, "
        f"time to die:{settings.time_to_die}"
    )
    table.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())