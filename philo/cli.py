"""Command that runs the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philo.parsing import ArgumentError, parse_args
from philo.simulation import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    Table(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())