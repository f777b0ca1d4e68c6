# philo

A simulation of the dining philosophers problem. Philosophers sit around a
table, with one fork between each pair. Each philosopher runs in its own thread
and repeats the same cycle: take the right fork, take the left fork, eat,
sleep, think. Philosophers with an even number wait half the eating time before
they start. A watcher thread stops the simulation when a philosopher goes too
long without eating. It also stops the simulation when a meal count is given
and every philosopher has eaten at least that many meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_each]
```

The same command can be started with `python -m philo.cli`.

All times are in milliseconds. Every argument must contain only the digits
0-9, so signs and spaces are rejected. Every value must be below 2147483647.
There must be at least one philosopher. When `meals_each` is given, it must be
at least 1.

Example:

```
philo 5 800 200 200 7
```

Each event is printed on its own line to standard output. A line gives the
milliseconds since the start, then the philosopher's number, then the action.
Each line is coloured with ANSI escape codes. Without the colours, the lines
look like this:

```
0 1 has taken a fork ❪🍴❫
0 1 has taken a fork ❪🍴❫
0 1 is eating        [🍝]
200 1 is sleeping     【🧸💤】
400 1 is thinking      [💭]
```

A death is printed once, with a red background, and it ends the simulation.
Nothing more is printed after the simulation stops. A lone philosopher takes
its only fork, waits `time_to_die` milliseconds, and then dies.

On invalid arguments, the command writes one message to standard error and
exits with status 1. Otherwise it exits with status 0 when the simulation ends.

## Using it from Python

```python
import sys

from philo.parsing import parse_args
from philo.simulation import Table

settings = parse_args(["4", "410", "200", "200", "3"])
dead = Table(settings, sys.stdout).run()
print("died:", dead.id if dead else None)
```

- `philo.parsing.parse_args(args)` takes the arguments that follow the program
  name and returns a frozen `Settings` with the fields `nb_philo`, `die`,
  `eat`, `sleep` and `meal_goal`. `meal_goal` is `None` when no meal count is
  given. For input the command would reject, it raises `ArgumentError`, which
  is a subclass of `ValueError`. `is_digits` and `parse_number` check and
  convert one argument.
- `philo.simulation.Table(settings, out=None)` writes to `out`, or to standard
  output when `out` is `None`. `run()` returns the `Philosopher` who died, or
  `None` if the run stopped because everyone had eaten enough. Each
  `Philosopher` records its `id`, its fork indices, its meal count and the time
  of its last meal. `assign_forks(count)` gives the `(right, left)` fork
  indices for each seat.
- `philo.display` builds the printed lines: `format_action`, `format_death`
  and `format_number`, together with the `Action` enum.
- `philo.timing` provides `current_time_ms()` and `precise_sleep(milliseconds)`.

## Running the tests

```
pip install .[test]
pytest
```