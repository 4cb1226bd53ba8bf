# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. A philosopher takes the two forks next to them, eats, sleeps
and then thinks. Even-numbered philosophers pick up their left fork first.
Odd-numbered philosophers pick up their right fork first. A monitor thread
watches for starvation. When a philosopher has gone `TIME_TO_DIE`
milliseconds without starting a meal, the monitor reports the death and stops
the simulation. If a meal count was given, the monitor also stops the
simulation once every philosopher has eaten at least that many meals.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

You can also run it as `python -m philo.cli ...`.

Times are in milliseconds. Every argument must be made of decimal digits
only, so signs are rejected. The number of philosophers and the three times
must be greater than zero.

If the arguments are invalid, the program prints a usage message and exits
with status 1. If a thread cannot be started, it prints the error followed by
the usage message and also exits with status 1. Otherwise it exits with
status 0 when the simulation ends.

Each event is printed on its own line, in this form:

```
000200 3 is eating
```

The line has three fields:

- the milliseconds since the start, padded to six digits;
- the philosopher's number, counted from 1;
- the event: `has taken a fork`, `is eating`, `is sleeping`, `is thinking` or `died`.

Once the simulation has stopped, no further lines are printed. With a single
philosopher there is only one fork. That philosopher takes it, waits
`TIME_TO_DIE` milliseconds and dies.

### Examples

```
philo 5 800 200 200        # no one should die
philo 4 410 200 200        # no one should die
philo 1 800 200 200        # the single philosopher dies
philo 4 310 200 100        # a philosopher dies
philo 5 800 200 200 7      # stops once everyone has eaten 7 times
```

## Library use

```python
import sys
from philo.simulation import SimulationConfig, start_simulation

config = SimulationConfig(
    num_philo=5, time_to_die=800, time_to_eat=200, time_to_sleep=200, num_meals=3
)
simulation = start_simulation(config, sys.stdout)
print([p.meal_count for p in simulation.philosophers])
```

`SimulationConfig` raises `ValueError` when the philosopher count or any of
the three times is not positive. Set `num_meals=None`, which is the default,
to run until a philosopher dies.

`start_simulation` runs the simulation to its end and then returns the
`Simulation`. It writes its output to the given text stream, or to standard
output if you pass none.

`philo.cli.parse_config` builds a `SimulationConfig` from a list of argument
strings, not including the program name. It raises `philo.cli.ArgumentError`,
a subclass of `ValueError`, when the arguments are invalid.

`philo.timing` provides the helpers:

- `get_timestamp()` returns the time in milliseconds.
- `precise_sleep(ms)` sleeps for at least the given number of milliseconds.
- `atoi_philo(text)` parses a leading integer in the manner of `atoi`, wrapping to 32 bits.