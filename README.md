# philosophers

A small simulation of the dining philosophers problem. Each philosopher runs
in its own thread and shares a fork with each neighbour. A philosopher takes
the two forks next to them, eats, sleeps and thinks, and dies if more than the
time to die passes since their last meal. A monitor watches the table and
stops the simulation at the first death.

## Running

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same command is available as `python -m philosophers.cli`.

All times are in milliseconds. The number of philosophers and the time to die
must be at least 1; if the optional meal count is given, it must be at least 1.
Arguments are read leniently: leading whitespace and one sign are accepted,
reading stops at the first character that is not a digit, and text without
digits counts as 0.

With the wrong number of arguments, or with values out of range, the command
writes `Argument error` to standard error and exits with status 1. Otherwise
it prints a header line, runs until a philosopher dies, and exits with 0.

Example:

```
philo 2 800 200 200
```

The first line reports the setup, for instance
`Num philos:2, start time:1718000000000, time to die:800` (the start time is
the wall-clock time in milliseconds). Each event then follows on its own line:
milliseconds since the start, the philosopher's number (counting from 1) and
what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
201 1 is sleeping
...
```

Even-numbered seats (counting from 0) start by thinking and reach for their
left fork first; odd-numbered seats start by sleeping and reach for their
right fork first. Exact times vary from run to run.

## Using it from Python

```python
from philosophers.settings import parse_arguments
from philosophers.simulation import Table

settings = parse_arguments(["2", "800", "200", "200"])
table = Table(settings, output=print)
dead = table.run()
print("first to die:", dead.index + 1)
```

- `philosophers.basics.parse_int(text)` reads a leading integer the lenient
  way described above, wrapping like a 32-bit signed integer;
  `now_ms()` returns the wall-clock time in milliseconds.
- `philosophers.settings.parse_arguments(argv)` takes the arguments that follow
  the program name and returns a frozen `Settings` (`number`, `time_to_die`,
  `time_to_eat`, `time_to_sleep`, `meals`, the last `None` when not given).
  It raises `ArgumentError`, a `ValueError`, when they are not usable.
- `philosophers.simulation.Table(settings, clock=None, output=None)` seats the
  philosophers. `clock` is a callable returning milliseconds (default
  `now_ms`); `output` is a callable that receives each line of text (default
  `print`). `Table.run()` starts one thread per philosopher, watches them with
  `Table.monitor()` and returns the first `Philosopher` to die, then closes the
  table. `Table.close()` marks everyone dead and joins the threads; a `Table`
  can also be used as a context manager.
- `Philosopher` holds a philosopher's `state` (a `State`), `meals_had` and
  timings, with `message`, `try_to_eat` and `life_cycle`.

## What it does not do

The simulation always ends at the first death. The optional meal count is
checked and kept in `Settings.meals`, and each philosopher counts
`meals_had`, but the simulation does not stop when everyone has eaten that
many times.

## Tests

```
pip install -e ".[test]"
pytest
```