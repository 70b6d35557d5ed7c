import pytest

from duckdemo.movement import MovementController, apply_movement, screen_wrap


def test_default_controller():
    controller = MovementController()
    assert controller.intent == (0.0, 0.0)
    assert controller.max_speed == 400.0


def test_zero_intent_does_not_move():
    controller = MovementController()
    assert apply_movement(controller, (3.0, -4.0, 1.0), 1.0) == (3.0, -4.0, 1.0)


def test_movement_along_x():
    controller = MovementController(intent=(1.0, 0.0), max_speed=400.0)
    assert apply_movement(controller, (0.0, 0.0, 0.0), 0.5) == pytest.approx((200.0, 0.0, 0.0))


def test_movement_keeps_depth():
    controller = MovementController(intent=(0.0, -1.0), max_speed=10.0)
    moved = apply_movement(controller, (0.0, 0.0, 7.0), 1.0)
    assert moved[2] == 7.0
    assert moved[1] < 0.0


def test_movement_two_dimensional_position():
    controller = MovementController(intent=(0.0, 1.0), max_speed=10.0)
    moved = apply_movement(controller, (1.0, 2.0), 0.0)
    assert moved == (1.0, 2.0)


def test_wrap_leaves_inside_point():
    assert screen_wrap((10.0, -20.0, 1.0), (800.0, 600.0)) == pytest.approx((10.0, -20.0, 1.0))


def test_wrap_moves_outside_point_back_in():
    wrapped = screen_wrap((1056.0 + 5.0, 0.0, 1.0), (800.0, 600.0))
    assert wrapped == pytest.approx((5.0, 0.0, 1.0))


@pytest.mark.parametrize("x", [-2000.0, -600.0, 0.0, 527.0, 900.0, 3000.0])
def test_wrap_is_periodic_and_bounded(x):
    window = (800.0, 600.0)
    size_x = 800.0 + 256.0
    a = screen_wrap((x, x), window)
    b = screen_wrap((x + size_x, x), window)
    assert a[0] == pytest.approx(b[0])
    assert -size_x / 2 <= a[0] < size_x / 2
    assert -(600.0 + 256.0) / 2 <= a[1] < (600.0 + 256.0) / 2