"""The game's menus: main, pause, settings and credits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from duckdemo.theme import Widget, WidgetKind, button, button_small, header, label, ui_root

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1
VOLUME_LABEL_NAME = "Volume Label"

CREATED_BY = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)

CREDITED_ASSETS = (
    ("Ducky sprite", "CC0 by Caz Creates Games"),
    ("Button SFX", "CC0 by Jaszunio15"),
    ("Music", "CC BY 3.0 by Kevin MacLeod"),
    ("Engine logo", "Shown unmodified on the splash screen with permission"),
)


class MenuAction(Enum):
    """What a menu button does when clicked."""

    PLAY = "play"
    SETTINGS = "settings"
    CREDITS = "credits"
    EXIT = "exit"
    BACK = "back"
    CONTINUE = "continue"
    QUIT_TO_TITLE = "quit_to_title"
    VOLUME_DOWN = "volume_down"
    VOLUME_UP = "volume_up"


@dataclass(frozen=True)
class CreditsAssets:
    """Music played while the credits are shown."""

    music: Any = "audio/music/Monkeys Spinning Monkeys.ogg"


@dataclass(frozen=True)
class GridCell:
    """One text cell of a two-column grid."""

    text: str
    justify_self: str


def lower_volume(volume: float) -> float:
    """Global volume one step quieter, not below the minimum."""
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_volume(volume: float) -> float:
    """Global volume one step louder, not above the maximum."""
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """Volume as a percentage, right-aligned in three characters."""
    return f"{100.0 * volume:3.0f}%"


def credits_grid(rows: Iterable[Sequence[str]]) -> list[GridCell]:
    """Flatten rows into cells; left column aligned to the end, right to the start."""
    texts = [text for row in rows for text in row]
    return [
        GridCell(text, "end" if position % 2 == 0 else "start")
        for position, text in enumerate(texts)
    ]


def _grid_widget(cells: Iterable[GridCell], name: str = "Grid") -> Widget:
    grid = Widget(name=name, kind=WidgetKind.CONTAINER)
    for cell in cells:
        item = label(cell.text)
        item.justify_self = cell.justify_self
        grid.add(item)
    return grid


def _menu_root(name: str) -> Widget:
    return ui_root(name)


def main_menu(include_exit: bool = True) -> Widget:
    """The title-screen menu; the exit button is left out where quitting is impossible."""
    root = _menu_root("Main Menu").add(
        button("Play", MenuAction.PLAY),
        button("Settings", MenuAction.SETTINGS),
        button("Credits", MenuAction.CREDITS),
    )
    if include_exit:
        root.add(button("Exit", MenuAction.EXIT))
    return root


def pause_menu() -> Widget:
    """The menu shown while gameplay is paused."""
    return _menu_root("Pause Menu").add(
        header("Game paused"),
        button("Continue", MenuAction.CONTINUE),
        button("Settings", MenuAction.SETTINGS),
        button("Quit to title", MenuAction.QUIT_TO_TITLE),
    )


def settings_menu() -> Widget:
    """The settings menu with the master volume control."""
    volume_text = label("")
    volume_text.name = VOLUME_LABEL_NAME
    current = Widget(name="Current Volume", kind=WidgetKind.CONTAINER).add(volume_text)
    volume_widget = Widget(
        name="Global Volume Widget", kind=WidgetKind.CONTAINER, justify_self="start"
    ).add(
        button_small("-", MenuAction.VOLUME_DOWN),
        current,
        button_small("+", MenuAction.VOLUME_UP),
    )
    master = label("Master Volume")
    master.justify_self = "end"
    grid = Widget(name="Settings Grid", kind=WidgetKind.CONTAINER).add(master, volume_widget)
    return _menu_root("Settings Menu").add(
        header("Settings"),
        grid,
        button("Back", MenuAction.BACK),
    )


def credits_menu() -> Widget:
    """The credits menu."""
    return _menu_root("Credits Menu").add(
        header("Created by"),
        _grid_widget(credits_grid(CREATED_BY)),
        header("Assets"),
        _grid_widget(credits_grid(CREDITED_ASSETS)),
        button("Back", MenuAction.BACK),
    )