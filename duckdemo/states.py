"""Screen, menu and system-set states, and a queued state machine."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Callable, Generic, Hashable, TypeVar

S = TypeVar("S", bound=Hashable)


class Screen(Enum):
    """The game's main screens."""

    SPLASH = auto()
    TITLE = auto()
    LOADING = auto()
    GAMEPLAY = auto()

    @classmethod
    def default(cls) -> Screen:
        return cls.SPLASH


class Menu(Enum):
    """The menus that can be shown over a screen."""

    NONE = auto()
    MAIN = auto()
    CREDITS = auto()
    SETTINGS = auto()
    PAUSE = auto()

    @classmethod
    def default(cls) -> Menu:
        return cls.NONE


class AppSystems(IntEnum):
    """Per-frame update phases, in the order they run."""

    TICK_TIMERS = auto()
    RECORD_INPUT = auto()
    UPDATE = auto()


@dataclass(frozen=True)
class Transition(Generic[S]):
    """A completed change from one state to another."""

    exited: S
    entered: S


class StateMachine(Generic[S]):
    """Holds a current state; changes requested with ``set`` take effect on ``apply``."""

    def __init__(self, initial: S) -> None:
        self._current = initial
        self._pending: S | None = None
        self._has_pending = False
        self._on_enter: dict[S, list[Callable[[], None]]] = defaultdict(list)
        self._on_exit: dict[S, list[Callable[[], None]]] = defaultdict(list)

    @property
    def current(self) -> S:
        return self._current

    @property
    def pending(self) -> S | None:
        """The queued next state, if any."""
        return self._pending if self._has_pending else None

    def set(self, state: S) -> None:
        """Queue ``state``; the most recent request wins."""
        self._pending = state
        self._has_pending = True

    def on_enter(self, state: S, callback: Callable[[], None]) -> None:
        """Run ``callback`` whenever ``state`` is entered."""
        self._on_enter[state].append(callback)

    def on_exit(self, state: S, callback: Callable[[], None]) -> None:
        """Run ``callback`` whenever ``state`` is left."""
        self._on_exit[state].append(callback)

    def apply(self) -> Transition[S] | None:
        """Perform the queued change, running exit then enter callbacks.

        Returns the transition, or None when nothing was queued or the
        queued state equals the current one.
        """
        if not self._has_pending:
            return None
        state = self._pending
        self._pending = None
        self._has_pending = False
        if state == self._current:
            return None
        previous = self._current
        for callback in list(self._on_exit[previous]):
            callback()
        self._current = state
        for callback in list(self._on_enter[state]):
            callback()
        return Transition(previous, state)