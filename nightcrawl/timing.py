"""Time spans, the game clock and stopwatches."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional


@dataclass(frozen=True)
class TimeSpan:
    """A duration counted in 100-nanosecond ticks."""

    ticks: int = 0

    TICKS_PER_SECOND: ClassVar[int] = 10_000_000
    TICKS_PER_MILLISECOND: ClassVar[int] = 10_000

    def milliseconds(self) -> float:
        return self.ticks / self.TICKS_PER_MILLISECOND

    def __add__(self, other) -> TimeSpan:
        if isinstance(other, TimeSpan):
            return TimeSpan(self.ticks + other.ticks)
        if isinstance(other, (int, float)):
            return TimeSpan(self.ticks + int(other))
        return NotImplemented


class GameTime:
    """Tracks elapsed and total game time from a nanosecond clock.

    Updates closer together than 16 ms are ignored.
    """

    _shared: ClassVar[Optional[GameTime]] = None
    _MIN_STEP_TICKS: ClassVar[int] = TimeSpan.TICKS_PER_MILLISECOND * 16
    _NS_PER_TICK: ClassVar[int] = 100

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._elapsed = TimeSpan(0)
        self._total = TimeSpan(0)
        self._start_ticks = 0
        self._last_ticks = 0
        self._cur_ticks = 0

    @classmethod
    def shared(cls) -> GameTime:
        """Return the process-wide game clock, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def start(self) -> None:
        now = self._clock()
        self._start_ticks = self._last_ticks = now
        self._total = TimeSpan(0)

    def reset_last_tick(self) -> None:
        self._last_ticks = 0
        self._cur_ticks = 0
        self._total = TimeSpan(0)

    def update(self) -> None:
        self._cur_ticks = self._clock()
        gt = (self._cur_ticks - self._last_ticks) / self._NS_PER_TICK
        if int(gt) < self._MIN_STEP_TICKS:
            return
        self._total = self._total + gt
        self._elapsed = TimeSpan(int(gt))
        self._last_ticks = self._cur_ticks

    def elapsed_ms(self) -> float:
        return self._elapsed.milliseconds()

    def total_ms(self) -> float:
        return self._total.milliseconds()


class StopWatch:
    """Fires once after a delay, or repeatedly at an interval, in game milliseconds."""

    def __init__(self, game_time: Optional[GameTime] = None) -> None:
        self._game_time = game_time
        self._deadline = 0.0
        self._started = False
        self._finished = False

    def _now(self) -> float:
        clock = self._game_time if self._game_time is not None else GameTime.shared()
        return clock.total_ms()

    def is_finished(self) -> bool:
        return self._finished

    def is_time_loop(self, time: float) -> bool:
        total = self._now()
        if not self._started:
            self._deadline = time + total
            self._started = True
            return False
        delta = self._deadline - total
        if delta <= 0:
            self._deadline = time + delta + total
            return True
        return False

    def is_stop_watch(self, time: float) -> bool:
        if self._finished:
            return False
        total = self._now()
        if not self._started:
            self._deadline = time + total
            self._started = True
            return False
        if self._deadline - total <= 0:
            self._finished = True
            return True
        return False

    def time_loop_action(self, milliseconds: float, action: Callable[[], object]) -> None:
        if self.is_time_loop(milliseconds):
            action()

    def restart(self) -> None:
        self._started = False
        self._finished = False