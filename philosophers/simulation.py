"""The dining philosophers: threads that share forks, and a monitor."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from philosophers.basics import now_ms
from philosophers.settings import Settings

_TICK = 0.001

Clock = Callable[[], int]
Output = Callable[[str], None]


class State(Enum):
    """What a philosopher is doing; the value is the text that reports it."""

    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    FORK = "has taken a fork"
    DEAD = "is dead"


@dataclass(eq=False)
class Philosopher:
    """One philosopher seated between two forks."""

    index: int
    settings: Settings
    start: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    clock: Clock
    emit: Output
    state: State = State.THINK
    meals_had: int = 0
    eat_t: int = field(init=False)
    sleep_t: int = field(init=False)
    think_t: int = field(init=False)
    die_t: int = field(init=False)

    def __post_init__(self) -> None:
        self._schedule(self.start)

    def _schedule(self, eat_time: int) -> None:
        self.eat_t = eat_time
        self.die_t = eat_time + self.settings.time_to_die
        self.sleep_t = eat_time + self.settings.time_to_eat
        self.think_t = self.sleep_t + self.settings.time_to_sleep

    def message(self, new_state: State) -> None:
        """Report a change and take on the new state (a fork changes none)."""
        elapsed = self.clock() - self.start
        self.emit(f"{elapsed} {self.index + 1} {new_state.value}")
        if new_state is not State.FORK and self.state is not State.DEAD:
            self.state = new_state

    def _take(self, fork: threading.Lock) -> bool:
        while not fork.acquire(timeout=_TICK):
            if self.state is State.DEAD:
                return False
        return True

    def try_to_eat(self) -> bool:
        """Pick up both forks and start eating.

        Even seats reach left first, odd seats right first. Gives up and
        puts back any fork held if the philosopher dies while waiting.
        """
        if self.index % 2 == 0:
            order = (self.left_fork, self.right_fork)
        else:
            order = (self.right_fork, self.left_fork)
        held: list[threading.Lock] = []
        for fork in order:
            if not self._take(fork):
                for taken in held:
                    taken.release()
                return False
            held.append(fork)
            self.message(State.FORK)
        self.message(State.EAT)
        self._schedule(self.clock())
        self.meals_had += 1
        return True

    def life_cycle(self) -> None:
        """Think, eat and sleep until dead."""
        while self.state is not State.DEAD:
            if self.clock() > self.die_t:
                self.message(State.DEAD)
            if self.state is State.THINK:
                self.try_to_eat()
            if self.state is State.EAT and self.clock() > self.sleep_t:
                self.message(State.SLEEP)
                self.right_fork.release()
                self.left_fork.release()
            if self.state is State.SLEEP and self.clock() > self.think_t:
                self.message(State.THINK)
            time.sleep(_TICK)


class Table:
    """Philosophers around a table, a fork between each pair of neighbours."""

    def __init__(
        self,
        settings: Settings,
        clock: Clock | None = None,
        output: Output | None = None,
    ) -> None:
        self.settings = settings
        self.clock: Clock = now_ms if clock is None else clock
        self._output: Output = print if output is None else output
        self._output_lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self.all_alive = True
        count = settings.number
        self.forks = [threading.Lock() for _ in range(count)]
        self.start = self.clock()
        self.philosophers = [
            Philosopher(
                index=seat,
                settings=settings,
                start=self.start,
                left_fork=self.forks[seat],
                right_fork=self.forks[(seat + 1) % count],
                clock=self.clock,
                emit=self._emit,
                state=State.SLEEP if seat % 2 == 1 else State.THINK,
            )
            for seat in range(count)
        ]

    def _emit(self, line: str) -> None:
        with self._output_lock:
            self._output(line)

    def monitor(self) -> Philosopher | None:
        """Watch until someone starves; return that philosopher.

        Returns None if the table was closed before anyone died.
        """
        while self.all_alive:
            for philosopher in self.philosophers:
                if self.clock() > philosopher.die_t:
                    philosopher.message(State.DEAD)
                    self.all_alive = False
                    for other in self.philosophers:
                        other.state = State.DEAD
                    return philosopher
            time.sleep(_TICK)
        return None

    def run(self) -> Philosopher | None:
        """Start every philosopher, monitor them and return who died."""
        self._threads = [
            threading.Thread(
                target=philosopher.life_cycle,
                name=f"philosopher-{philosopher.index + 1}",
                daemon=True,
            )
            for philosopher in self.philosophers
        ]
        for thread in self._threads:
            thread.start()
        try:
            return self.monitor()
        finally:
            self.close()

    def close(self) -> None:
        """Stop the simulation and wait for every philosopher to leave."""
        self.all_alive = False
        for philosopher in self.philosophers:
            philosopher.state = State.DEAD
        for thread in self._threads:
            thread.join()
        self._threads = []

    def __enter__(self) -> Table:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()