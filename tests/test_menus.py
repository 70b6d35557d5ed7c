import pytest

from duckdemo.menus import (
    MAX_VOLUME,
    MIN_VOLUME,
    VOLUME_LABEL_NAME,
    GridCell,
    MenuAction,
    credits_grid,
    credits_menu,
    lower_volume,
    main_menu,
    pause_menu,
    raise_volume,
    settings_menu,
    volume_label,
)
from duckdemo.theme import WidgetKind


def _buttons(root):
    return [w for w in root.walk() if w.kind is WidgetKind.BUTTON]


def test_volume_clamped_at_limits():
    assert lower_volume(MIN_VOLUME) == MIN_VOLUME
    assert raise_volume(MAX_VOLUME) == MAX_VOLUME


@pytest.mark.parametrize("volume", [0.5, 1.0, 2.0])
def test_volume_steps_round_trip(volume):
    assert raise_volume(lower_volume(volume)) == pytest.approx(volume)
    assert lower_volume(volume) < volume < raise_volume(volume)


def test_volume_label_format():
    assert volume_label(1.0) == "100%"
    assert volume_label(0.0) == "  0%"


def test_credits_grid_alternates_alignment():
    cells = credits_grid([("a", "b"), ("c", "d")])
    assert [c.text for c in cells] == ["a", "b", "c", "d"]
    assert cells[0] == GridCell("a", "end")
    assert all(c.justify_self == ("end" if i % 2 == 0 else "start") for i, c in enumerate(cells))


def test_main_menu_buttons():
    assert [b.text for b in _buttons(main_menu(True))] == ["Play", "Settings", "Credits", "Exit"]
    assert [b.action for b in _buttons(main_menu(False))] == [
        MenuAction.PLAY,
        MenuAction.SETTINGS,
        MenuAction.CREDITS,
    ]


def test_pause_menu_contents():
    root = pause_menu()
    assert root.children[0].text == "Game paused"
    assert [b.action for b in _buttons(root)] == [
        MenuAction.CONTINUE,
        MenuAction.SETTINGS,
        MenuAction.QUIT_TO_TITLE,
    ]


def test_settings_menu_has_volume_controls():
    root = settings_menu()
    actions = [b.action for b in _buttons(root)]
    assert actions == [MenuAction.VOLUME_DOWN, MenuAction.VOLUME_UP, MenuAction.BACK]
    assert sum(1 for w in root.walk() if w.name == VOLUME_LABEL_NAME) == 1


def test_credits_menu_structure():
    root = credits_menu()
    texts = [w.text for w in root.children if w.kind is WidgetKind.TEXT]
    assert texts == ["Created by", "Assets"]
    assert _buttons(root)[-1].action is MenuAction.BACK