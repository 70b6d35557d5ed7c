"""Player sprite animation: idle and walking cycles over a texture atlas."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from duckdemo.timing import Timer, TimerMode


class PlayerAnimationState(Enum):
    IDLING = "idling"
    WALKING = "walking"


class PlayerAnimation:
    """Tracks the current animation cycle and frame of the player sprite."""

    IDLE_FRAMES = 2
    IDLE_INTERVAL = 0.5
    WALKING_FRAMES = 6
    WALKING_INTERVAL = 0.05
    WALKING_ATLAS_OFFSET = 6
    STEP_FRAMES = (2, 5)

    def __init__(self, state: PlayerAnimationState = PlayerAnimationState.IDLING) -> None:
        self._start(state)

    def _start(self, state: PlayerAnimationState) -> None:
        interval = (
            self.WALKING_INTERVAL
            if state is PlayerAnimationState.WALKING
            else self.IDLE_INTERVAL
        )
        self.timer = Timer(interval, TimerMode.REPEATING)
        self.frame = 0
        self.state = state

    @property
    def frame_count(self) -> int:
        if self.state is PlayerAnimationState.WALKING:
            return self.WALKING_FRAMES
        return self.IDLE_FRAMES

    def update_timer(self, delta: float) -> None:
        """Advance the timer and step to the next frame when it fires."""
        self.timer.tick(delta)
        if self.timer.finished:
            self.frame = (self.frame + 1) % self.frame_count

    def update_state(self, state: PlayerAnimationState) -> None:
        """Restart the animation in ``state`` if it differs from the current one."""
        if state is not self.state:
            self._start(state)

    def changed(self) -> bool:
        """Whether the frame advanced on the last tick."""
        return self.timer.finished

    def atlas_index(self) -> int:
        """Index of the current frame in the sprite atlas."""
        if self.state is PlayerAnimationState.WALKING:
            return self.WALKING_ATLAS_OFFSET + self.frame
        return self.frame

    def is_step_frame(self) -> bool:
        """Whether a footstep sound belongs to the frame just reached."""
        return (
            self.state is PlayerAnimationState.WALKING
            and self.changed()
            and self.frame in self.STEP_FRAMES
        )

    def __repr__(self) -> str:
        return f"PlayerAnimation(state={self.state.name}, frame={self.frame})"


def animation_state_for(intent: Sequence[float]) -> PlayerAnimationState:
    """Idle when there is no movement intent, walking otherwise."""
    x, y = intent
    if x == 0.0 and y == 0.0:
        return PlayerAnimationState.IDLING
    return PlayerAnimationState.WALKING


def facing_left(intent: Sequence[float], current: bool) -> bool:
    """Sprite flip after ``intent``: horizontal input decides, otherwise keep ``current``."""
    dx = intent[0]
    if dx != 0.0:
        return dx < 0.0
    return current