"""The pygame application window: input, drawing, audio and the main loop."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

import pygame

from duckdemo.audio import AudioInstance, PlaybackMode
from duckdemo.flow import GameFlow
from duckdemo.player import ATLAS_TILE_SIZE
from duckdemo.scene import CLEAR_COLOR, Camera, SceneObject, basic_scene
from duckdemo.states import Screen
from duckdemo.theme import Interaction, Widget, WidgetKind, pointer_sound

log = logging.getLogger(__name__)

TITLE = "Bevy Test"
FPS = 60
GRID_COLUMN_WIDTH = 400.0
GRID_COLUMN_GAP = 30.0
GRID_ROW_GAP = 10.0
ROOT_ROW_GAP = 20.0
PAUSE_OVERLAY = (0, 0, 0, 204)

_KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_ESCAPE: "escape",
    pygame.K_p: "p",
}


def _is_grid(widget: Widget) -> bool:
    return widget.kind is WidgetKind.CONTAINER and widget.name.endswith("Grid")


def _measure(widget: Widget) -> tuple[float, float]:
    if widget.kind is WidgetKind.TEXT:
        return (max(len(widget.text), 1) * widget.font_size * 0.5, widget.font_size * 1.2)
    if widget.kind is WidgetKind.BUTTON:
        return (widget.width or 0.0, widget.height or 0.0)
    sizes = [_measure(child) for child in widget.children]
    if not sizes:
        return (0.0, 0.0)
    if _is_grid(widget):
        rows = [sizes[i : i + 2] for i in range(0, len(sizes), 2)]
        height = sum(max(h for _, h in row) for row in rows) + GRID_ROW_GAP * (len(rows) - 1)
        return (2 * GRID_COLUMN_WIDTH + GRID_COLUMN_GAP, height)
    if widget.kind is WidgetKind.ROOT:
        return (
            max(w for w, _ in sizes),
            sum(h for _, h in sizes) + ROOT_ROW_GAP * (len(sizes) - 1),
        )
    padding = 20.0 if widget.name == "Current Volume" else 0.0
    return (sum(w for w, _ in sizes) + padding, max(h for _, h in sizes))


def _place(widget: Widget, x: float, y: float, out: list[tuple[Widget, pygame.Rect]]) -> None:
    """Lay ``widget`` out with its top-left at (x, y)."""
    width, height = _measure(widget)
    if widget.kind in (WidgetKind.TEXT, WidgetKind.BUTTON):
        out.append((widget, pygame.Rect(round(x), round(y), round(width), round(height))))
        if widget.kind is WidgetKind.BUTTON:
            return
    if _is_grid(widget):
        row_y = y
        children = widget.children
        for start in range(0, len(children), 2):
            row = children[start : start + 2]
            row_height = max(_measure(c)[1] for c in row)
            for column, child in enumerate(row):
                cw, _ = _measure(child)
                cell_x = x + column * (GRID_COLUMN_WIDTH + GRID_COLUMN_GAP)
                if child.justify_self == "end":
                    cell_x += GRID_COLUMN_WIDTH - cw
                _place(child, cell_x, row_y, out)
            row_y += row_height + GRID_ROW_GAP
    elif widget.kind is WidgetKind.ROOT:
        child_y = y
        for child in widget.children:
            cw, ch = _measure(child)
            _place(child, x + (width - cw) / 2.0, child_y, out)
            child_y += ch + ROOT_ROW_GAP
    elif widget.kind is WidgetKind.CONTAINER:
        child_x = x + (10.0 if widget.name == "Current Volume" else 0.0)
        for child in widget.children:
            cw, ch = _measure(child)
            _place(child, child_x, y + (height - ch) / 2.0, out)
            child_x += cw


def layout(root: Widget, window_size: Sequence[float]) -> list[tuple[Widget, pygame.Rect]]:
    """Rectangles of the text and buttons of ``root`` centred in the window."""
    width, height = _measure(root)
    out: list[tuple[Widget, pygame.Rect]] = []
    _place(root, (window_size[0] - width) / 2.0, (window_size[1] - height) / 2.0, out)
    return out


def _box_corners(obj: SceneObject) -> list[tuple[float, float, float]]:
    cx, cy, cz = obj.position
    hx, hy, hz = (s / 2.0 for s in obj.size)
    return [
        (cx + sx * hx, cy + sy * hy, cz + sz * hz)
        for sx in (-1, 1)
        for sy in (-1, 1)
        for sz in (-1, 1)
    ]


_BOX_EDGES = [
    (a, b)
    for a in range(8)
    for b in range(a + 1, 8)
    if bin(a ^ b).count("1") == 1
]


def _rgb(color) -> tuple[int, int, int]:
    return color.to_rgba8()[:3]


class App:
    """The game window and its main loop."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        dev: bool = False,
        asset_dir: str = "assets",
    ) -> None:
        self.size = (width, height)
        self.dev = dev
        self.asset_dir = asset_dir
        self.flow = GameFlow(window_size=self.size)
        self.scene_objects, self.camera = basic_scene()
        self.running = True
        self.debug_ui = False
        self._pressed: Widget | None = None
        self._logged = 0
        self._channels: dict[int, tuple[AudioInstance, object]] = {}
        self._images: dict[str, pygame.Surface | None] = {}
        self._sounds: dict[str, object] = {}

    def _buttons(self) -> list[tuple[Widget, pygame.Rect]]:
        if self.flow.menu_widget is None:
            return []
        return [
            (w, r)
            for w, r in layout(self.flow.menu_widget, self.size)
            if w.kind is WidgetKind.BUTTON
        ]

    def _button_at(self, pos) -> Widget | None:
        for widget, rect in self._buttons():
            if rect.collidepoint(pos):
                return widget
        return None

    def _play_pointer_sound(self, widget: Widget, interaction: Interaction) -> None:
        sound = pointer_sound(widget, interaction, self.flow.resources.get("interaction"))
        if sound is not None:
            self.flow.audio.append(sound)

    def handle_event(self, event) -> None:
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if self.dev and event.key == pygame.K_BACKQUOTE:
                self.debug_ui = not self.debug_ui
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                self.flow.held.add(name)
                self.flow.press_key(name)
        elif event.type == pygame.KEYUP:
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                self.flow.held.discard(name)
        elif event.type == pygame.MOUSEMOTION:
            target = self._button_at(event.pos)
            for widget, _ in self._buttons():
                if widget is target:
                    wanted = Interaction.PRESSED if widget is self._pressed else Interaction.HOVERED
                else:
                    wanted = Interaction.NONE
                if widget.set_interaction(wanted) and wanted is Interaction.HOVERED:
                    self._play_pointer_sound(widget, wanted)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            target = self._button_at(event.pos)
            if target is not None:
                self._pressed = target
                target.set_interaction(Interaction.PRESSED)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            target = self._button_at(event.pos)
            pressed, self._pressed = self._pressed, None
            if target is not None and target is pressed:
                target.set_interaction(Interaction.HOVERED)
                self._play_pointer_sound(target, Interaction.PRESSED)
                self.flow.click(target.action)
        if self.flow.exit_requested:
            self.running = False

    def step(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        self.flow.update(dt)
        if self.dev:
            for change in self.flow.screen_log[self._logged :]:
                log.info("Screen transition: %s -> %s", change.exited.name, change.entered.name)
            self._logged = len(self.flow.screen_log)
        if self.flow.exit_requested:
            self.running = False

    # Resources

    def _image(self, path: str) -> pygame.Surface | None:
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(os.path.join(self.asset_dir, path)).convert_alpha()
            except (pygame.error, FileNotFoundError):
                self._images[path] = None
        return self._images[path]

    def _sound(self, path: str):
        if path not in self._sounds:
            try:
                self._sounds[path] = pygame.mixer.Sound(os.path.join(self.asset_dir, path))
            except (pygame.error, FileNotFoundError):
                self._sounds[path] = None
        return self._sounds[path]

    def _sync_audio(self, mixer_ready: bool) -> None:
        live = {id(inst) for inst in self.flow.audio}
        for key in [k for k in self._channels if k not in live]:
            _, channel = self._channels.pop(key)
            if channel is not None:
                channel.stop()
        finished = []
        for inst in self.flow.audio:
            if not inst.playing:
                inst.sink_volume = self.flow.global_volume * inst.volume
                sound = self._sound(str(inst.handle)) if mixer_ready else None
                channel = None
                if sound is not None:
                    channel = sound.play(loops=-1 if inst.mode is PlaybackMode.LOOP else 0)
                self._channels[id(inst)] = (inst, channel)
            _, channel = self._channels.get(id(inst), (inst, None))
            if channel is not None:
                channel.set_volume(min(inst.sink_volume or 0.0, 1.0))
            if inst.mode is PlaybackMode.DESPAWN and (channel is None or not channel.get_busy()):
                finished.append(inst)
        if finished:
            self.flow.audio = [a for a in self.flow.audio if not any(a is f for f in finished)]

    # Drawing

    def _draw_scene(self, surface: pygame.Surface, camera: Camera) -> None:
        w, h = self.size
        for obj in self.scene_objects:
            if obj.kind == "light":
                continue
            points = [camera.project(c, w, h) for c in _box_corners(obj)]
            for a, b in _BOX_EDGES:
                if points[a] is not None and points[b] is not None:
                    pygame.draw.line(surface, _rgb(obj.color), points[a], points[b], 2)

    def _draw_player(self, surface: pygame.Surface) -> None:
        player = self.flow.player
        if player is None:
            return
        size = round(ATLAS_TILE_SIZE * player.scale)
        x, y = player.position[0], player.position[1]
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (round(self.size[0] / 2 + x), round(self.size[1] / 2 - y))
        sheet = self._image(str(player.assets.ducky))
        if sheet is None:
            pygame.draw.rect(surface, (240, 220, 60), rect)
            return
        frame = sheet.subsurface(pygame.Rect(player.atlas_rect))
        frame = pygame.transform.scale(frame, (size, size))
        if player.flip_x:
            frame = pygame.transform.flip(frame, True, False)
        surface.blit(frame, rect)

    def _draw_splash(self, surface: pygame.Surface) -> None:
        splash = self.flow.splash
        if splash is None:
            return
        surface.fill(_rgb(splash.background))
        image = self._image(splash.image)
        if image is None:
            return
        width = round(self.size[0] * 0.7)
        height = round(image.get_height() * width / max(image.get_width(), 1))
        scaled = pygame.transform.smoothscale(image, (width, height))
        scaled.set_alpha(round(255 * max(0.0, min(1.0, splash.image_alpha))))
        surface.blit(scaled, scaled.get_rect(center=(self.size[0] // 2, self.size[1] // 2)))

    def _draw_menu(self, surface: pygame.Surface, fonts: dict[float, pygame.font.Font]) -> None:
        if self.flow.menu_widget is None:
            return
        for widget, rect in layout(self.flow.menu_widget, self.size):
            font = fonts.setdefault(widget.font_size, pygame.font.Font(None, round(widget.font_size)))
            if widget.kind is WidgetKind.BUTTON:
                radius = rect.height // 2 if widget.rounded else 0
                pygame.draw.rect(surface, _rgb(widget.background), rect, border_radius=radius)
            text = font.render(widget.text, True, _rgb(widget.text_color))
            surface.blit(text, text.get_rect(center=rect.center))
            if self.debug_ui:
                pygame.draw.rect(surface, (255, 0, 0), rect, 1)

    def _draw(self, surface: pygame.Surface, fonts: dict[float, pygame.font.Font]) -> None:
        surface.fill(_rgb(CLEAR_COLOR))
        if self.flow.screen.current is Screen.SPLASH:
            self._draw_splash(surface)
        else:
            self._draw_scene(surface, self.camera)
            self._draw_player(surface)
        if self.flow.is_paused():
            overlay = pygame.Surface(self.size, pygame.SRCALPHA)
            overlay.fill(PAUSE_OVERLAY)
            surface.blit(overlay, (0, 0))
        if self.flow.screen.current is Screen.LOADING:
            font = fonts.setdefault(24.0, pygame.font.Font(None, 24))
            text = font.render("Loading...", True, (221, 211, 105))
            surface.blit(text, text.get_rect(center=(self.size[0] // 2, self.size[1] // 2)))
        self._draw_menu(surface, fonts)

    def run(self) -> int:
        """Open the window and run until the game exits."""
        pygame.init()
        try:
            pygame.mixer.init()
            mixer_ready = True
        except pygame.error:
            mixer_ready = False
        try:
            surface = pygame.display.set_mode(self.size, pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            fonts: dict[float, pygame.font.Font] = {}
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.VIDEORESIZE:
                        self.size = (event.w, event.h)
                        self.flow.window_size = self.size
                    self.handle_event(event)
                self.step(clock.tick(FPS) / 1000.0)
                self._sync_audio(mixer_ready)
                self._draw(surface, fonts)
                pygame.display.flip()
        finally:
            pygame.quit()
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="A small duck demo game.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--assets", default="assets", help="directory holding game assets")
    parser.add_argument("--dev", action="store_true", help="enable development tools")
    args = parser.parse_args(argv)
    if args.dev:
        logging.basicConfig(level=logging.INFO)
    return App(args.width, args.height, dev=args.dev, asset_dir=args.assets).run()