import time
from typing import Callable, List, Optional, Tuple


class Stopwatch:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._started: Optional[float] = None
        self._elapsed = 0.0

    def start(self):
        if self._started is None:
            self._started = self.clock()

    def stop(self):
        if self._started is not None:
            self._elapsed += self.clock() - self._started
            self._started = None

    def reset(self):
        self._started = None
        self._elapsed = 0.0

    def restart(self):
        self.reset()
        self.start()

    @property
    def elapsed(self) -> float:
        if self._started is None:
            return self._elapsed
        return self._elapsed + self.clock() - self._started


class Scheduler:
    """One-shot timers fired from the host loop.

    Nothing runs on its own: the owner calls ``run_pending`` once per frame
    and every callback whose deadline has passed fires, earliest first.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._timers: List[Tuple[float, int, Callable[[], None]]] = []
        self._seq = 0

    def schedule_once(self, delay: float, callback: Callable[[], None]):
        self._seq += 1
        self._timers.append((self.clock() + delay, self._seq, callback))
        self._timers.sort(key=lambda t: (t[0], t[1]))

    def run_pending(self) -> int:
        fired = 0
        now = self.clock()
        while self._timers and self._timers[0][0] <= now:
            _, _, callback = self._timers.pop(0)
            callback()
            fired += 1
        return fired

    def clear(self):
        self._timers.clear()
