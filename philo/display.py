"""Text of the lines the simulation prints."""

from __future__ import annotations

import enum

DECIMAL = "0123456789"


class Action(enum.IntEnum):
    """What a philosopher is doing when a line is printed."""

    FORK = 1
    EATING = 2
    SLEEPING = 3
    DEATH = 4
    THINKING = 5
    ENOUGH_MEAL = 6


_TEMPLATES = {
    Action.FORK: "\x1b[38;5;159m{time} {id} has taken a fork ❪🍴❫\n",
    Action.EATING: "\x1b[38;5;212m{time} {id} is eating        [🍝]\n",
    Action.SLEEPING: "\x1b[38;5;122m{time} {id} is sleeping     【🧸💤】\n",
    Action.THINKING: "\x1b[38;5;229m{time} {id} is thinking      [💭] \n",
}

_DEATH_TEMPLATE = "\x1b[41m\x1b[30m{time} {id} died      𓆩🖤𓆪 ☠️  𓆩🖤𓆪 \n"


def format_number(number: int, base: int, digits: str) -> str:
    """Write ``number`` in ``base`` using the characters of ``digits``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if len(digits) < base:
        raise ValueError("not enough digit characters for the base")
    sign = "-" if number < 0 else ""
    number = abs(number)
    chars = []
    while True:
        number, remainder = divmod(number, base)
        chars.append(digits[remainder])
        if number == 0:
            break
    return sign + "".join(reversed(chars))


def format_action(action: Action, timestamp: int, philo_id: int) -> str:
    """Return the line, newline included, announcing a philosopher's action.

    Only forks, eating, sleeping and thinking have a line; other actions
    raise ValueError.
    """
    try:
        template = _TEMPLATES[Action(action)]
    except (KeyError, ValueError):
        raise ValueError(f"no line is printed for action {action!r}") from None
    return template.format(
        time=format_number(timestamp, 10, DECIMAL),
        id=format_number(philo_id, 10, DECIMAL),
    )


def format_death(timestamp: int, philo_id: int) -> str:
    """Return the line, newline included, announcing a philosopher's death."""
    return _DEATH_TEMPLATE.format(
        time=format_number(timestamp, 10, DECIMAL),
        id=format_number(philo_id, 10, DECIMAL),
    )