"""The player character, its assets, and the level's assets."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from duckdemo.animation import PlayerAnimation, animation_state_for, facing_left
from duckdemo.audio import AudioInstance, sound_effect
from duckdemo.movement import MovementController, apply_movement, screen_wrap

ATLAS_TILE_SIZE = 32
ATLAS_COLUMNS = 6
ATLAS_ROWS = 2
ATLAS_PADDING = 1
PLAYER_SCALE = 8.0

UP_KEYS = frozenset({"w", "up"})
DOWN_KEYS = frozenset({"s", "down"})
LEFT_KEYS = frozenset({"a", "left"})
RIGHT_KEYS = frozenset({"d", "right"})


@dataclass(frozen=True)
class PlayerAssets:
    """Sprite sheet and footstep sounds for the player."""

    ducky: Any = "images/ducky.png"
    steps: tuple[Any, ...] = (
        "audio/sound_effects/step1.ogg",
        "audio/sound_effects/step2.ogg",
        "audio/sound_effects/step3.ogg",
        "audio/sound_effects/step4.ogg",
    )
    # Nearest-neighbour sampling keeps the pixel-art look.
    smooth: bool = False


@dataclass(frozen=True)
class LevelAssets:
    """Assets needed by the main level."""

    music: Any = "audio/music/Fluffing A Duck.ogg"


def directional_intent(pressed: Iterable[str]) -> tuple[float, float]:
    """Unit movement direction from the names of held keys, or zero."""
    keys = {key.lower() for key in pressed}
    x = 0.0
    y = 0.0
    if keys & UP_KEYS:
        y += 1.0
    if keys & DOWN_KEYS:
        y -= 1.0
    if keys & LEFT_KEYS:
        x -= 1.0
    if keys & RIGHT_KEYS:
        x += 1.0
    length = math.hypot(x, y)
    if length == 0.0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (x / length, y / length)


@dataclass
class Player:
    """The controllable duck."""

    assets: PlayerAssets
    controller: MovementController = field(default_factory=MovementController)
    animation: PlayerAnimation = field(default_factory=PlayerAnimation)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    flip_x: bool = False
    scale: float = PLAYER_SCALE
    atlas_index: int = 0

    @property
    def atlas_rect(self) -> tuple[int, int, int, int]:
        """Pixel rectangle ``(x, y, w, h)`` of the current frame in the sprite sheet."""
        column = self.atlas_index % ATLAS_COLUMNS
        row = self.atlas_index // ATLAS_COLUMNS
        step = ATLAS_TILE_SIZE + ATLAS_PADDING
        return (column * step, row * step, ATLAS_TILE_SIZE, ATLAS_TILE_SIZE)

    def record_input(self, pressed: Iterable[str]) -> None:
        """Set the movement intent from the held keys."""
        self.controller.intent = directional_intent(pressed)

    def update(self, dt: float, window_size: Sequence[float]) -> None:
        """Advance animation and movement by ``dt`` seconds."""
        self.animation.update_timer(dt)

        self.position = screen_wrap(
            apply_movement(self.controller, self.position, dt), window_size
        )

        intent = self.controller.intent
        self.flip_x = facing_left(intent, self.flip_x)
        self.animation.update_state(animation_state_for(intent))
        if self.animation.changed():
            self.atlas_index = self.animation.atlas_index()

    def step_sound(self, rng: random.Random | None = None) -> AudioInstance | None:
        """A random footstep sound if the walk cycle just reached a step frame."""
        if not self.animation.is_step_frame() or not self.assets.steps:
            return None
        chooser = rng if rng is not None else random
        return sound_effect(chooser.choice(self.assets.steps))


def spawn_player(max_speed: float, assets: PlayerAssets) -> Player:
    """A new player at the origin, idle and facing right."""
    animation = PlayerAnimation()
    return Player(
        assets=assets,
        controller=MovementController(max_speed=max_speed),
        animation=animation,
        atlas_index=animation.atlas_index(),
    )