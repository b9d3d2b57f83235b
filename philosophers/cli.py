"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from .args import ArgumentError, check_args, check_not_blank
from .simulation import Table, run_single


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        check_not_blank(args)
        rules = check_args(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1
    if rules.nb_philo == 1:
        run_single(rules, sys.stdout)
        return 0
    try:
        Table(rules, sys.stdout).run()
    except RuntimeError as exc:
        print(f"Error: failed to create a thread: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())