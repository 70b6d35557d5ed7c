"""Frame timers driven by elapsed seconds."""

from __future__ import annotations

from enum import Enum


class TimerMode(Enum):
    """Whether a timer stops after finishing or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A countdown measured in seconds that is advanced by explicit ticks."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative, got {duration}")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self._finished = False
        self._times_finished_this_tick = 0

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode = TimerMode.ONCE) -> Timer:
        """Create a timer lasting ``seconds``."""
        return cls(seconds, mode)

    @property
    def finished(self) -> bool:
        """True if the timer reached its duration on the last tick (or earlier, for one-shot timers)."""
        return self._finished

    @property
    def just_finished(self) -> bool:
        """True only on the tick in which the timer reached its duration."""
        return self._times_finished_this_tick > 0

    @property
    def times_finished_this_tick(self) -> int:
        """How many times the timer completed during the last tick."""
        return self._times_finished_this_tick

    @property
    def fraction(self) -> float:
        """Progress from 0.0 to 1.0."""
        if self.duration == 0:
            return 1.0
        return self.elapsed / self.duration

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"tick delta must not be negative, got {delta}")
        if self._finished and self.mode is TimerMode.ONCE:
            self._times_finished_this_tick = 0
            return self

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration
        if not self._finished:
            self._times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration == 0:
                self._times_finished_this_tick = 1
                self.elapsed = 0.0
            else:
                self._times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
        else:
            self._times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        """Return the timer to its initial, unfinished state."""
        self.elapsed = 0.0
        self._finished = False
        self._times_finished_this_tick = 0

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration!r}, mode={self.mode.name}, "
            f"elapsed={self.elapsed!r}, finished={self._finished!r})"
        )