"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

INT_MAX = 2_147_483_647

WRONG_ARG_COUNT = (
    "Error ! You must to provide the number "
    "of philosophers, time to die, eat, and sleep ! "
    "No more or less arguments !"
)
INVALID_ARG = "All values must contain only positive digits !"
OVERFLOW_ERROR = "You reached the INT MAX or more !"
MIN_PHILO = "You must provide a minimum of 1 philosopher "
MIN_NB_MEAL = "At least one meal please !"

_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    nb_philo: int
    die: int
    eat: int
    sleep: int
    meal_goal: Optional[int] = None


def is_digits(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit.

    An empty string counts as digits, as nothing in it is rejected.
    """
    return all(char in _DIGITS for char in text)


def parse_number(text: str) -> int:
    """Convert a string of ASCII digits to an int below ``INT_MAX``.

    An empty string gives 0. Raises ArgumentError when the string holds
    something other than digits or the value reaches ``INT_MAX``.
    """
    if not is_digits(text):
        raise ArgumentError(INVALID_ARG)
    value = int(text) if text else 0
    if value >= INT_MAX:
        raise ArgumentError(OVERFLOW_ERROR)
    return value


def parse_args(args: Sequence[str]) -> Settings:
    """Build Settings from the arguments that follow the program name.

    Expects the number of philosophers, time to die, time to eat, time to
    sleep and, optionally, the number of meals each philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentError(WRONG_ARG_COUNT)
    if not all(is_digits(arg) for arg in args):
        raise ArgumentError(INVALID_ARG)

    nb_philo, die, eat, sleep = (parse_number(arg) for arg in args[:4])
    meal_goal: Optional[int] = None
    if len(args) == 5:
        meal_goal = parse_number(args[4])
        if meal_goal == 0:
            raise ArgumentError(MIN_NB_MEAL)
    if nb_philo == 0:
        raise ArgumentError(MIN_PHILO)
    return Settings(nb_philo, die, eat, sleep, meal_goal)