"""Command-line entry point: validate the arguments and run the simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.simulation import SimulationConfig, start_simulation
from philo.timing import atoi_philo

_USAGE = (
    "\nError. Invalid arguments:  ./philo [#1] [#2] [#3] [#4]\n"
    "\n#1: [Number of philosophers]\n#2: [Time to die] (ms)"
    "\n#3: [Time to eat] (ms)\n#4: [Time to sleep] (ms)\n\n"
)

_NO_MEAL_LIMIT = -1


class ArgumentError(ValueError):
    """Raised when the command-line arguments do not describe a valid run."""


def parse_config(args: Sequence[str]) -> SimulationConfig:
    """Build a configuration from the arguments that follow the program name.

    Four or five arguments are accepted, each made of decimal digits only:
    philosopher count, time to die, time to eat, time to sleep and an optional
    number of meals. The first four must be positive.
    """
    if len(args) not in (4, 5):
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(args)}")
    for arg in args:
        if not all("0" <= char <= "9" for char in arg):
            raise ArgumentError(f"not a non-negative number: {arg!r}")
    num_philo, time_to_die, time_to_eat, time_to_sleep = (
        atoi_philo(arg) for arg in args[:4]
    )
    num_meals: int | None = None
    if len(args) == 5:
        meals = atoi_philo(args[4])
        num_meals = None if meals == _NO_MEAL_LIMIT else meals
    values = {
        "num_philo": num_philo,
        "time_to_die": time_to_die,
        "time_to_eat": time_to_eat,
        "time_to_sleep": time_to_sleep,
    }
    for name, value in values.items():
        if value <= 0:
            raise ArgumentError(f"{name} must be positive")
    return SimulationConfig(num_meals=num_meals, **values)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return 0 on success and 1 on invalid input or failure."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_config(args)
        start_simulation(config, sys.stdout)
    except ArgumentError:
        sys.stdout.write(_USAGE)
        return 1
    except RuntimeError as exc:
        sys.stdout.write(f"{exc}\n")
        sys.stdout.write(_USAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())