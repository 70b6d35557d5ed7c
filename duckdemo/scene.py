"""A small 3D scene: a plane, a cube, a light and a perspective camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from duckdemo.theme import Color

Vec3 = tuple[float, float, float]

CLEAR_COLOR = Color(0.2, 0.2, 0.2)
DEFAULT_FOV = math.pi / 4
NEAR_PLANE = 0.1


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


@dataclass(frozen=True)
class SceneObject:
    """A shape or light in the scene."""

    name: str
    kind: str
    position: Vec3 = (0.0, 0.0, 0.0)
    size: Vec3 = (1.0, 1.0, 1.0)
    color: Color = Color(1.0, 1.0, 1.0)
    illuminance: float = 0.0


@dataclass
class Camera:
    """A perspective camera with an orthonormal view basis."""

    position: Vec3
    fov: float = DEFAULT_FOV
    forward: Vec3 = (0.0, 0.0, -1.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    right: Vec3 = field(default=(1.0, 0.0, 0.0))

    def look_at(self, target: Sequence[float], up: Sequence[float]) -> Camera:
        """Turn to face ``target`` keeping ``up`` as close to vertical as possible."""
        forward = _normalize(_sub(target, self.position))
        right = _normalize(_cross(forward, up))
        self.forward = forward
        self.right = right
        self.up = _cross(right, forward)
        return self

    def project(
        self, point: Sequence[float], width: float, height: float
    ) -> tuple[float, float] | None:
        """Screen coordinates of ``point``, or None if it is behind the near plane."""
        offset = _sub(point, self.position)
        depth = _dot(offset, self.forward)
        if depth <= NEAR_PLANE:
            return None
        focal = 1.0 / math.tan(self.fov / 2.0)
        aspect = width / height
        ndc_x = _dot(offset, self.right) * focal / (aspect * depth)
        ndc_y = _dot(offset, self.up) * focal / depth
        return ((ndc_x + 1.0) / 2.0 * width, (1.0 - ndc_y) / 2.0 * height)


def basic_scene() -> tuple[list[SceneObject], Camera]:
    """The startup scene: a 5x5 plane, a unit cube resting on it, a light and the camera."""
    objects = [
        SceneObject("Plane", "plane", size=(5.0, 0.0, 5.0), color=Color(0.67, 0.84, 0.92)),
        SceneObject("Cube", "cuboid", position=(0.0, 0.5, 0.0), color=Color(0.3, 0.5, 0.3)),
        SceneObject("Light", "light", position=(50.0, 50.0, 50.0), illuminance=1500.0),
    ]
    camera = Camera(position=(-2.0, 2.5, 5.0)).look_at((0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    return objects, camera