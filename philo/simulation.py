"""The dining philosophers: one thread per philosopher and a watcher."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from philo.display import Action, format_action, format_death
from philo.parsing import Settings
from philo.timing import current_time_ms, precise_sleep

_PRINTED_ACTIONS = frozenset(
    {Action.FORK, Action.EATING, Action.SLEEPING, Action.THINKING}
)
_WATCH_POLL_SECONDS = 0.0002


def assign_forks(count: int) -> List[Tuple[int, int]]:
    """Return the ``(right_fork, left_fork)`` indices of each philosopher.

    Philosopher ``i`` holds fork ``i`` on the right and fork ``i + 1`` on
    the left; the last one wraps round to fork 0.
    """
    return [(index, (index + 1) % count) for index in range(count)]


@dataclass(eq=False)
class Philosopher:
    """A seat at the table and what its occupant has done so far."""

    id: int
    right_fork: int
    left_fork: int
    meals: int = 0
    last_meal: int = 0


class Table:
    """Runs one simulation and writes what happens to ``out``."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.philosophers = [
            Philosopher(index + 1, right, left)
            for index, (right, left) in enumerate(assign_forks(settings.nb_philo))
        ]
        self.start = current_time_ms()
        self.dead: Optional[Philosopher] = None
        self._forks = [threading.Lock() for _ in range(settings.nb_philo)]
        self._display = threading.Lock()
        self._death = threading.Lock()
        self._stop = threading.Event()

    @property
    def stopped(self) -> bool:
        """True once someone has died or everyone has eaten enough."""
        return self._stop.is_set()

    def _write(self, line: str) -> None:
        self.out.write(line)
        self.out.flush()

    def announce(self, philosopher: Philosopher, action: Action) -> None:
        """Print the line for ``action`` unless the simulation has stopped.

        Actions without a line of their own print nothing.
        """
        with self._display:
            timestamp = current_time_ms() - self.start
            if not self.stopped and action in _PRINTED_ACTIONS:
                self._write(format_action(action, timestamp, philosopher.id))

    def _die(self, philosopher: Philosopher) -> None:
        with self._death, self._display:
            if self.stopped:
                return
            self._stop.set()
            self.dead = philosopher
            self._write(format_death(current_time_ms() - self.start, philosopher.id))

    def watch(self) -> None:
        """Check for starvation and full bellies until the simulation stops."""
        settings = self.settings
        while not self.stopped:
            eat_enough = 0
            for philosopher in self.philosophers:
                if self.stopped:
                    break
                if current_time_ms() - philosopher.last_meal >= settings.die:
                    self._die(philosopher)
                if settings.meal_goal is not None:
                    if philosopher.meals >= settings.meal_goal:
                        eat_enough += 1
                    if eat_enough == settings.nb_philo:
                        self._stop.set()
            time.sleep(_WATCH_POLL_SECONDS)

    def _eat(self, philosopher: Philosopher) -> bool:
        settings = self.settings
        right = self._forks[philosopher.right_fork]
        left = self._forks[philosopher.left_fork]
        if settings.nb_philo == 1:
            with right:
                self.announce(philosopher, Action.FORK)
            precise_sleep(settings.die)
            self._die(philosopher)
            return False
        with right:
            self.announce(philosopher, Action.FORK)
            with left:
                self.announce(philosopher, Action.FORK)
                self.announce(philosopher, Action.EATING)
                philosopher.meals += 1
                precise_sleep(settings.eat)
        return True

    def _dine(self, philosopher: Philosopher) -> None:
        settings = self.settings
        philosopher.meals = 0
        if philosopher.id % 2 == 0:
            precise_sleep(settings.eat // 2)
        while not self.stopped:
            if not self._eat(philosopher):
                break
            philosopher.last_meal = current_time_ms()
            self.announce(philosopher, Action.SLEEPING)
            precise_sleep(settings.sleep)
            self.announce(philosopher, Action.THINKING)

    def run(self) -> Optional[Philosopher]:
        """Run the simulation to its end; return who died, if anyone did."""
        self.start = current_time_ms()
        started: List[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                philosopher.last_meal = current_time_ms()
                thread = threading.Thread(
                    target=self._dine,
                    args=(philosopher,),
                    name=f"philosopher-{philosopher.id}",
                    daemon=True,
                )
                thread.start()
                started.append(thread)
            self.watch()
        finally:
            self._stop.set()
            for thread in started:
                thread.join()
        return self.dead