import math
import random

import pytest

from duckdemo.animation import PlayerAnimationState
from duckdemo.audio import AudioCategory, PlaybackMode
from duckdemo.player import (
    LevelAssets,
    PlayerAssets,
    directional_intent,
    spawn_player,
)

WINDOW = (800.0, 600.0)


def test_asset_paths():
    assets = PlayerAssets()
    assert assets.ducky == "images/ducky.png"
    assert len(assets.steps) == 4
    assert "audio/sound_effects/step1.ogg" in assets.steps
    assert LevelAssets().music == "audio/music/Fluffing A Duck.ogg"


@pytest.mark.parametrize(
    "keys, expected",
    [
        (set(), (0.0, 0.0)),
        ({"w"}, (0.0, 1.0)),
        ({"up"}, (0.0, 1.0)),
        ({"s"}, (0.0, -1.0)),
        ({"left"}, (-1.0, 0.0)),
        ({"d"}, (1.0, 0.0)),
        ({"a", "d"}, (0.0, 0.0)),
        ({"w", "down"}, (0.0, 0.0)),
    ],
)
def test_directional_intent(keys, expected):
    assert directional_intent(keys) == expected


def test_diagonal_is_normalised():
    x, y = directional_intent({"w", "d"})
    assert math.hypot(x, y) == pytest.approx(1.0)
    assert x == pytest.approx(y)


def test_spawn_player():
    player = spawn_player(123.0, PlayerAssets())
    assert player.controller.max_speed == 123.0
    assert player.controller.intent == (0.0, 0.0)
    assert player.position == (0.0, 0.0, 0.0)
    assert player.atlas_index == 0
    assert player.animation.state is PlayerAnimationState.IDLING
    assert player.atlas_rect[2:] == (32, 32)


def test_idle_player_stays_put():
    player = spawn_player(400.0, PlayerAssets())
    player.update(0.1, WINDOW)
    assert player.position == pytest.approx((0.0, 0.0, 0.0))


def test_moving_left_flips_and_keeps_flip():
    player = spawn_player(100.0, PlayerAssets())
    player.record_input({"a"})
    player.update(0.1, WINDOW)
    assert player.position[0] < 0.0
    assert player.flip_x is True
    assert player.animation.state is PlayerAnimationState.WALKING
    player.record_input({"w"})
    player.update(0.1, WINDOW)
    assert player.flip_x is True


def test_player_wraps_around_window():
    player = spawn_player(400.0, PlayerAssets())
    player.record_input({"d"})
    for _ in range(100):
        player.update(0.05, WINDOW)
        assert -(800.0 + 256.0) / 2 <= player.position[0] < (800.0 + 256.0) / 2


def test_step_sound_on_step_frame():
    assets = PlayerAssets()
    player = spawn_player(400.0, assets)
    player.record_input({"d"})
    player.update(0.05, WINDOW)
    assert player.step_sound(random.Random(0)) is None
    player.update(0.05, WINDOW)
    assert player.step_sound(random.Random(0)) is None
    player.update(0.05, WINDOW)
    sound = player.step_sound(random.Random(0))
    assert sound is not None
    assert sound.handle in assets.steps
    assert sound.category is AudioCategory.SOUND_EFFECT
    assert sound.mode is PlaybackMode.DESPAWN
    assert player.atlas_index == player.animation.atlas_index()


def test_atlas_rect_matches_index():
    player = spawn_player(400.0, PlayerAssets())
    player.record_input({"d"})
    player.update(0.05, WINDOW)
    player.update(0.05, WINDOW)
    x, y, w, h = player.atlas_rect
    assert player.atlas_index >= 6
    assert y > 0
    assert x == (player.atlas_index - 6) * (w + 1)