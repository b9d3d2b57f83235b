# philosophers

This package simulates the dining philosophers problem. Each philosopher
runs in its own thread. The forks between neighbours are locks. A monitor
thread checks for starvation and, when a meal count is given, for every
philosopher having eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

You can also run it with `python -m philosophers.cli` and the same
arguments.

All times are in milliseconds. The first four values must be integers
greater than 0. The optional meal count must be 0 or greater. An argument
may start with a single `+` or `-` sign, followed only by digits. It must
fit in a 32-bit signed integer. The program rejects an argument that is
empty or made only of spaces.

Example:

```
philo 5 800 200 200 7
```

### Output

While the simulation runs, each status line has the form

```
<ms since start> <philosopher> <status>
```

The status is one of `is thinking`, `has taken a fork`, `is eating` or
`is sleeping`. In each cycle a philosopher thinks and takes both forks,
even-numbered seats taking the right fork first. It then prints
`has taken a fork` once, eats for `time_to_eat` and sleeps for
`time_to_sleep`.

The simulation ends in one of two ways:

- A philosopher goes longer than `time_to_die` without starting a meal. The
  program prints `<ms since that philosopher's last meal> <philosopher> died`.
- A meal count was given and every philosopher has eaten at least that many
  times. The program prints `all philosophers have finished their meals`.

No status lines are printed after the end.

With a single philosopher there is only one fork. The program prints
`0 1 is thinking`, waits `time_to_die` milliseconds and then prints
`<time_to_die> 1 died`.

If the arguments are invalid, the program writes an error message to
standard error and exits with status 1.

## Library use

```python
import sys
from philosophers.args import check_args
from philosophers.simulation import Table, run_single

rules = check_args(["4", "410", "200", "200", "3"])
if rules.nb_philo == 1:
    run_single(rules, sys.stdout)
else:
    Table(rules, sys.stdout).run()
```

- `philosophers.args.check_args` turns the four or five argument strings
  into a frozen `Rules` value. It raises `ArgumentError`, a subclass of
  `ValueError`, on bad input.
- `philosophers.args.parse_int` parses one signed 32-bit integer.
- `philosophers.args.check_not_blank` rejects empty or all-space arguments.
- `philosophers.simulation.Table` holds the forks and philosophers.
  `Table.run()` starts all threads and waits for them to finish. Output
  goes to the stream passed as `out`, which defaults to standard output.
- `philosophers.timing.now_ms` returns a monotonic clock in milliseconds.
- `philosophers.timing.precise_sleep` sleeps for a number of milliseconds
  and stops early when its stop callback returns true.

## Running the tests

```
pip install .[test]
pytest
```