"""The dining philosophers: philosopher threads, shared table and monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from .args import Rules
from .timing import now_ms, precise_sleep

_ODD_DELAY_SECONDS = 100e-6
_EVEN_RELEASE_DELAY_SECONDS = 200e-6
_MONITOR_STEP_SECONDS = 1e-3


class Philosopher:
    """One diner seated at a table, identified from 1."""

    def __init__(self, table: Table, ident: int) -> None:
        self.table = table
        self.id = ident
        self.meals_eaten = 0
        self.last_meal = table.start_time
        self.meal_lock = threading.Lock()

    @property
    def left_fork(self) -> int:
        """Index of the fork on this philosopher's left."""
        return self.id - 1

    @property
    def right_fork(self) -> int:
        """Index of the fork on this philosopher's right."""
        return self.id % self.table.rules.nb_philo

    def _fork_order(self) -> tuple[int, int]:
        if self.id % 2 == 0:
            return self.right_fork, self.left_fork
        return self.left_fork, self.right_fork

    def take_forks(self) -> None:
        """Pick up both forks, even seats right first, odd seats left first."""
        if self.id % 2 != 0:
            time.sleep(_ODD_DELAY_SECONDS)
        for index in self._fork_order():
            self.table.forks[index].acquire()

    def release_forks(self) -> None:
        """Put both forks down in the order they were taken."""
        for index in self._fork_order():
            self.table.forks[index].release()
        if self.id % 2 == 0:
            time.sleep(_EVEN_RELEASE_DELAY_SECONDS)

    def routine(self) -> None:
        """Think, eat and sleep until the simulation is over."""
        table = self.table
        rules = table.rules
        while True:
            if table.is_over():
                return
            table.print_status(self, "is thinking")
            self.take_forks()
            with self.meal_lock:
                self.last_meal = now_ms()
            table.print_status(self, "has taken a fork")
            table.print_status(self, "is eating")
            precise_sleep(rules.time_to_eat, table.is_over)
            with self.meal_lock:
                self.meals_eaten += 1
            self.release_forks()
            if table.is_over():
                return
            table.print_status(self, "is sleeping")
            precise_sleep(rules.time_to_sleep, table.is_over)


class Table:
    """Shared state of a simulation: forks, philosophers and the end flag."""

    def __init__(self, rules: Rules, out: TextIO | None = None) -> None:
        self.rules = rules
        self.out = out if out is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(rules.nb_philo)]
        self.print_lock = threading.Lock()
        self.death_lock = threading.Lock()
        self.someone_died = False
        self.start_time = now_ms()
        self.philosophers = [
            Philosopher(self, ident) for ident in range(1, rules.nb_philo + 1)
        ]

    def is_over(self) -> bool:
        """Return True once a philosopher died or everyone has eaten enough."""
        with self.death_lock:
            return self.someone_died

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Log a status line unless the simulation has already ended."""
        with self.print_lock:
            if self.is_over():
                return
            elapsed = now_ms() - self.start_time
            self.out.write(f"{elapsed} {philosopher.id} {status}\n")

    def check_meals(self) -> bool:
        """End the simulation when every philosopher ate the required meals."""
        required = self.rules.must_eat_count
        if required is None:
            return False
        finished = 0
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.meals_eaten >= required:
                    finished += 1
        if finished != len(self.philosophers):
            return False
        with self.print_lock, self.death_lock:
            self.someone_died = True
            self.out.write("all philosophers have finished their meals\n")
        return True

    def check_death(self, philosopher: Philosopher) -> bool:
        """End the simulation if ``philosopher`` has starved; report the end."""
        with philosopher.meal_lock:
            last_meal = philosopher.last_meal
        current = now_ms()
        if current - last_meal <= self.rules.time_to_die:
            return False
        with self.print_lock, self.death_lock:
            if self.someone_died:
                return True
            self.someone_died = True
            self.out.write(f"{current - last_meal} {philosopher.id} died\n")
        return True

    def monitor(self) -> None:
        """Watch meals and starvation until the simulation ends."""
        while True:
            if self.check_meals():
                return
            for philosopher in self.philosophers:
                if self.check_death(philosopher):
                    return
                time.sleep(_MONITOR_STEP_SECONDS)

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        threads = [
            threading.Thread(target=p.routine, name=f"philosopher-{p.id}")
            for p in self.philosophers
        ]
        threads.append(threading.Thread(target=self.monitor, name="monitor"))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


def run_single(rules: Rules, out: TextIO | None = None) -> None:
    """Run the one-philosopher case: a single fork, so the diner starves."""
    out = out if out is not None else sys.stdout
    out.write("0 1 is thinking\n")
    out.flush()
    time.sleep(rules.time_to_die / 1000)
    out.write(f"{rules.time_to_die} 1 died\n")