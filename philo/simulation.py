"""The dining philosophers simulation: forks, philosophers and a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philo.timing import get_timestamp, precise_sleep

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

_THINK_PAUSE = 0.00075
_MONITOR_POLL = 0.0002


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one run; times are in milliseconds.

    ``num_meals`` is the number of meals every philosopher must eat before the
    simulation stops, or ``None`` to run until someone dies.
    """

    num_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    num_meals: int | None = None

    def __post_init__(self) -> None:
        for name in ("num_philo", "time_to_die", "time_to_eat", "time_to_sleep"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")


@dataclass
class Philosopher:
    """One diner: its id, the indices of its forks and its eating record."""

    id: int
    left_fork: int
    right_fork: int
    last_meal: int = field(default_factory=get_timestamp)
    meal_count: int = 0


class Simulation:
    """Runs philosopher threads around a table and a monitor watching them."""

    def __init__(self, config: SimulationConfig, output: TextIO | None = None) -> None:
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.start_time = get_timestamp()
        count = config.num_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(id=i + 1, left_fork=i, right_fork=(i + 1) % count)
            for i in range(count)
        ]
        self._print_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self.is_running = True

    def _write(self, timestamp: int, philo_id: int, state: str) -> None:
        self.output.write(f"{timestamp:06d} {philo_id} {state}\n")
        self.output.flush()

    def print_state(self, philo_id: int, state: str) -> None:
        """Print a state line unless the simulation has already stopped."""
        timestamp = get_timestamp() - self.start_time
        with self._state_lock, self._print_lock:
            if self.is_running:
                self._write(timestamp, philo_id, state)

    def _report_death(self, philo_id: int) -> None:
        timestamp = get_timestamp() - self.start_time
        with self._state_lock, self._print_lock:
            if self.is_running:
                self._write(timestamp, philo_id, DIED)
            self.is_running = False

    def _stop(self) -> None:
        with self._state_lock:
            self.is_running = False

    def take_forks(self, philo: Philosopher) -> None:
        """Pick up both forks; even ids start left, odd ids start right."""
        if philo.id % 2 == 0:
            order = (philo.left_fork, philo.right_fork)
        else:
            order = (philo.right_fork, philo.left_fork)
        for fork in order:
            self.forks[fork].acquire()
            self.print_state(philo.id, TAKEN_FORK)

    def lifecycle(self, philo: Philosopher) -> None:
        """Eat, sleep and think until the simulation stops."""
        config = self.config
        while self.is_running:
            self.take_forks(philo)
            self.print_state(philo.id, EATING)
            with self._state_lock:
                philo.last_meal = get_timestamp()
                philo.meal_count += 1
            precise_sleep(config.time_to_eat)
            self.forks[philo.left_fork].release()
            self.forks[philo.right_fork].release()
            self.print_state(philo.id, SLEEPING)
            precise_sleep(config.time_to_sleep)
            self.print_state(philo.id, THINKING)
            time.sleep(_THINK_PAUSE)

    def run_philosopher(self, philo: Philosopher) -> None:
        """Thread body; a lone philosopher holds its one fork until it dies."""
        if self.config.num_philo == 1:
            fork = self.forks[philo.left_fork]
            with fork:
                self.print_state(philo.id, TAKEN_FORK)
                precise_sleep(self.config.time_to_die)
                self.print_state(philo.id, DIED)
            return
        self.lifecycle(philo)

    def check_philosopher_death(self) -> bool:
        """Report and stop on the first philosopher who starved; True if so."""
        for philo in self.philosophers:
            with self._state_lock:
                since_last_meal = get_timestamp() - philo.last_meal
            if since_last_meal >= self.config.time_to_die:
                self._report_death(philo.id)
                return True
        return False

    def check_all_meals_eaten(self) -> bool:
        """Stop once every philosopher ate the required meals; True if so."""
        target = self.config.num_meals
        if target is None:
            return False
        with self._state_lock:
            done = all(philo.meal_count >= target for philo in self.philosophers)
        if done:
            self._stop()
        return done

    def monitor(self) -> None:
        """Watch for deaths and for the meal target until the run ends."""
        while self.is_running:
            if self.check_philosopher_death() or self.check_all_meals_eaten():
                return
            time.sleep(_MONITOR_POLL)

    def run(self) -> None:
        """Start every thread and wait until they have all finished."""
        self.start_time = get_timestamp()
        self.is_running = True
        for philo in self.philosophers:
            philo.last_meal = get_timestamp()
            philo.meal_count = 0
        threads: list[threading.Thread] = []
        for philo in self.philosophers:
            thread = threading.Thread(target=self.run_philosopher, args=(philo,), daemon=True)
            try:
                thread.start()
            except RuntimeError as exc:
                self._stop()
                for started in threads:
                    started.join()
                raise RuntimeError(f"Error creating the thread{philo.id}") from exc
            threads.append(thread)
        watcher = threading.Thread(target=self.monitor, daemon=True)
        try:
            watcher.start()
        except RuntimeError as exc:
            self._stop()
            for started in threads:
                started.join()
            raise RuntimeError("Error: Could not create monitoring thread") from exc
        for thread in threads:
            thread.join()
        watcher.join()


def start_simulation(config: SimulationConfig, output: TextIO | None = None) -> Simulation:
    """Build a simulation for ``config``, run it to the end and return it."""
    simulation = Simulation(config, output)
    simulation.run()
    return simulation