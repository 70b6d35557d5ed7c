"""Character controller: intent-driven movement and wrapping around the window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DEFAULT_MAX_SPEED = 400.0
WRAP_MARGIN = 256.0


@dataclass
class MovementController:
    """Movement parameters for a character.

    ``intent`` is the direction the character wants to move in and
    ``max_speed`` is in world units (pixels) per second.
    """

    intent: tuple[float, float] = (0.0, 0.0)
    max_speed: float = DEFAULT_MAX_SPEED


def apply_movement(
    controller: MovementController, position: Sequence[float], dt: float
) -> tuple[float, ...]:
    """Return ``position`` moved by the controller's velocity over ``dt`` seconds.

    Only the first two components move; any further ones (such as depth)
    are carried over unchanged.
    """
    x, y, *rest = position
    ix, iy = controller.intent
    return (
        x + controller.max_speed * ix * dt,
        y + controller.max_speed * iy * dt,
        *rest,
    )


def screen_wrap(
    position: Sequence[float], window_size: Sequence[float]
) -> tuple[float, ...]:
    """Wrap ``position`` into a box centred on the origin slightly larger than the window."""
    x, y, *rest = position
    width, height = window_size
    size_x = width + WRAP_MARGIN
    size_y = height + WRAP_MARGIN
    return (
        (x + size_x / 2.0) % size_x - size_x / 2.0,
        (y + size_y / 2.0) % size_y - size_y / 2.0,
        *rest,
    )