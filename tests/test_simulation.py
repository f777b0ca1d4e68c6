import io
import re

import pytest

from philo.display import Action, format_action, format_death
from philo.parsing import Settings
from philo.simulation import Philosopher, Table, assign_forks

LINE = re.compile(r"^(?:\x1b\[[0-9;]+m)+(\d+) (\d+) (.+)$")


def parse_lines(text):
    parsed = []
    for line in text.splitlines():
        match = LINE.match(line)
        assert match is not None, line
        parsed.append((int(match.group(1)), int(match.group(2)), match.group(3)))
    return parsed


def test_assign_forks_three():
    assert assign_forks(3) == [(0, 1), (1, 2), (2, 0)]


def test_assign_forks_single_shares_one_fork():
    assert assign_forks(1) == [(0, 0)]


@pytest.mark.parametrize("count", [2, 4, 5, 10])
def test_assign_forks_every_fork_used_twice(count):
    pairs = assign_forks(count)
    assert len(pairs) == count
    used = [fork for pair in pairs for fork in pair]
    assert sorted(used) == sorted(list(range(count)) * 2)
    for index, (right, left) in enumerate(pairs):
        assert right == index
        assert left == pairs[(index + 1) % count][0]


def test_table_seats_philosophers_from_one():
    table = Table(Settings(4, 100, 10, 10), io.StringIO())
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]
    assert [(p.right_fork, p.left_fork) for p in table.philosophers] == assign_forks(4)
    assert all(p.meals == 0 for p in table.philosophers)


def test_announce_writes_formatted_line():
    out = io.StringIO()
    table = Table(Settings(2, 100, 10, 10), out)
    philosopher = table.philosophers[1]
    table.announce(philosopher, Action.EATING)
    ((timestamp, philo_id, _),) = parse_lines(out.getvalue())
    assert philo_id == 2
    assert out.getvalue() == format_action(Action.EATING, timestamp, 2)


def test_announce_death_action_prints_nothing():
    out = io.StringIO()
    table = Table(Settings(2, 100, 10, 10), out)
    table.announce(table.philosophers[0], Action.DEATH)
    assert out.getvalue() == ""


def test_meal_goal_ends_without_death():
    out = io.StringIO()
    settings = Settings(3, 800, 50, 50, 2)
    table = Table(settings, out)
    assert table.run() is None
    assert table.dead is None
    assert table.stopped
    lines = parse_lines(out.getvalue())
    timestamps = [timestamp for timestamp, _, _ in lines]
    assert timestamps == sorted(timestamps)
    for philosopher in table.philosophers:
        eaten = [l for l in lines if l[1] == philosopher.id and "is eating" in l[2]]
        forks = [l for l in lines if l[1] == philosopher.id and "has taken a fork" in l[2]]
        assert settings.meal_goal <= len(eaten) <= philosopher.meals
        assert len(forks) >= 2 * len(eaten)
    assert not any("died" in text for _, _, text in lines)


def test_single_philosopher_dies():
    out = io.StringIO()
    table = Table(Settings(1, 100, 50, 50), out)
    dead = table.run()
    assert dead is table.philosophers[0]
    lines = parse_lines(out.getvalue())
    assert len(lines) == 2
    assert lines[0][1] == 1 and "has taken a fork" in lines[0][2]
    timestamp, philo_id, _ = lines[-1]
    assert philo_id == 1
    assert timestamp >= 100
    assert out.getvalue().splitlines(keepends=True)[-1] == format_death(timestamp, 1)


def test_starvation_stops_everything_and_death_is_last():
    out = io.StringIO()
    settings = Settings(2, 60, 200, 50)
    table = Table(settings, out)
    dead = table.run()
    assert dead in table.philosophers
    lines = parse_lines(out.getvalue())
    died = [line for line in lines if "died" in line[2]]
    assert len(died) == 1
    assert lines[-1] == died[0]
    assert died[0][1] == dead.id
    assert died[0][0] >= settings.die