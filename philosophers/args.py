"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

INT_MAX = 2_147_483_647
INT_MIN = -2_147_483_648


class ArgumentError(ValueError):
    """Raised when the simulation's arguments are invalid."""


@dataclass(frozen=True)
class Rules:
    """Parameters of one simulation run; times are in milliseconds."""

    nb_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int | None = None


def parse_int(text: str) -> int:
    """Parse an optionally signed decimal integer that fits in 32 bits.

    Leading whitespace, trailing characters and an empty digit part are
    all rejected.
    """
    sign = 1
    digits = text
    if digits[:1] in ("-", "+"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ArgumentError("Error: alpha forbidden")
    result = 0
    for ch in digits:
        result = result * 10 + (ord(ch) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            raise ArgumentError("Error: int overflow")
    return result * sign


def check_not_blank(args: Sequence[str]) -> None:
    """Reject any argument that is empty or made only of spaces."""
    for arg in args:
        if arg.count(" ") == len(arg):
            raise ArgumentError("Error")


def check_args(args: Sequence[str]) -> Rules:
    """Build the simulation rules from the four or five arguments given."""
    if len(args) not in (4, 5):
        raise ArgumentError(
            "Error: wrong number of arguments (should be 4 or 5 params)"
        )
    nb_philo, time_to_die, time_to_eat, time_to_sleep = (
        parse_int(arg) for arg in args[:4]
    )
    if min(nb_philo, time_to_die, time_to_eat, time_to_sleep) <= 0:
        raise ArgumentError(
            "Error: All values must be greater than 0 and positive integers"
        )
    must_eat_count = None
    if len(args) == 5:
        must_eat_count = parse_int(args[4])
        if must_eat_count < 0:
            raise ArgumentError("Error: must_eat_count must be >= 0")
    return Rules(
        nb_philo=nb_philo,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat_count=must_eat_count,
    )