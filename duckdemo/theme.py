"""UI palette, reusable widgets and interaction colouring."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, NamedTuple

from duckdemo.audio import AudioInstance, sound_effect


class Color(NamedTuple):
    """A colour with float channels in 0.0..1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Channels as 0..255 integers."""
        return tuple(max(0, min(255, round(c * 255))) for c in self)  # type: ignore[return-value]

    def with_alpha(self, alpha: float) -> Color:
        return self._replace(a=alpha)


# #ddd369
LABEL_TEXT = Color(0.867, 0.827, 0.412)
# #fcfbcc
HEADER_TEXT = Color(0.988, 0.984, 0.800)
# #ececec
BUTTON_TEXT = Color(0.925, 0.925, 0.925)
# #4666bf
BUTTON_BACKGROUND = Color(0.275, 0.400, 0.750)
# #6299d1
BUTTON_HOVERED_BACKGROUND = Color(0.384, 0.600, 0.820)
# #3d4999
BUTTON_PRESSED_BACKGROUND = Color(0.239, 0.286, 0.600)

HEADER_FONT_SIZE = 40.0
LABEL_FONT_SIZE = 24.0
BUTTON_FONT_SIZE = 40.0

BUTTON_HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
BUTTON_CLICK_SOUND = "audio/sound_effects/button_click.ogg"


class Interaction(Enum):
    """Pointer interaction state of a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)


class WidgetKind(Enum):
    ROOT = "root"
    TEXT = "text"
    BUTTON = "button"
    CONTAINER = "container"


@dataclass
class Widget:
    """A node in the UI tree."""

    name: str
    kind: WidgetKind
    text: str = ""
    font_size: float = 0.0
    text_color: Color | None = None
    width: float | None = None
    height: float | None = None
    background: Color | None = None
    palette: InteractionPalette | None = None
    action: Callable[..., Any] | None = None
    rounded: bool = False
    pickable: bool = True
    justify_self: str | None = None
    interaction: Interaction = Interaction.NONE
    children: list[Widget] = field(default_factory=list)

    def add(self, *children: Widget) -> Widget:
        """Append children and return this widget."""
        self.children.extend(children)
        return self

    def walk(self) -> Iterator[Widget]:
        """This widget and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def set_interaction(self, interaction: Interaction) -> bool:
        """Update the interaction state; recolour from the palette on change."""
        if interaction is self.interaction:
            return False
        self.interaction = interaction
        if self.palette is not None:
            self.background = self.palette.color_for(interaction)
        return True


@dataclass(frozen=True)
class InteractionAssets:
    """Sounds played when buttons are hovered or clicked."""

    hover: Any = BUTTON_HOVER_SOUND
    click: Any = BUTTON_CLICK_SOUND


def pointer_sound(
    widget: Widget, interaction: Interaction, assets: InteractionAssets | None
) -> AudioInstance | None:
    """The sound effect for a pointer event on ``widget``, if any."""
    if assets is None or widget.kind is not WidgetKind.BUTTON:
        return None
    if interaction is Interaction.HOVERED:
        return sound_effect(assets.hover)
    if interaction is Interaction.PRESSED:
        return sound_effect(assets.click)
    return None


def ui_root(name: str) -> Widget:
    """A full-window root that centres its children in a column."""
    return Widget(name=name, kind=WidgetKind.ROOT, pickable=False)


def header(text: str) -> Widget:
    """A large header label."""
    return Widget(
        name="Header",
        kind=WidgetKind.TEXT,
        text=text,
        font_size=HEADER_FONT_SIZE,
        text_color=HEADER_TEXT,
    )


def label(text: str) -> Widget:
    """A plain text label."""
    return Widget(
        name="Label",
        kind=WidgetKind.TEXT,
        text=text,
        font_size=LABEL_FONT_SIZE,
        text_color=LABEL_TEXT,
    )


def _button_base(text: str, action: Callable[..., Any], width: float, height: float, rounded: bool) -> Widget:
    return Widget(
        name="Button",
        kind=WidgetKind.BUTTON,
        text=text,
        font_size=BUTTON_FONT_SIZE,
        text_color=BUTTON_TEXT,
        width=width,
        height=height,
        background=BUTTON_BACKGROUND,
        palette=BUTTON_PALETTE,
        action=action,
        rounded=rounded,
    )


def button(text: str, action: Callable[..., Any]) -> Widget:
    """A large rounded button."""
    return _button_base(text, action, 380.0, 80.0, rounded=True)


def button_small(text: str, action: Callable[..., Any]) -> Widget:
    """A small square button."""
    return _button_base(text, action, 30.0, 30.0, rounded=False)