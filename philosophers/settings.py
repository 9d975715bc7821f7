"""Command-line arguments of a simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from philosophers.basics import parse_int


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    number: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def parse_arguments(argv: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Expects: number_of_philosophers time_to_die time_to_eat time_to_sleep
    and optionally number_of_meals.
    """
    if len(argv) not in (4, 5):
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(argv)}")
    number, die, eat, sleep = (parse_int(arg) for arg in argv[:4])
    meals = parse_int(argv[4]) if len(argv) == 5 else None
    if number < 1:
        raise ArgumentError("there must be at least one philosopher")
    if die < 1:
        raise ArgumentError("time to die must be positive")
    if meals is not None and meals < 1:
        raise ArgumentError("number of meals must be positive")
    return Settings(number, die, eat, sleep, meals)