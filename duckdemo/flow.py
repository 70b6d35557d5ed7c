"""Screen and menu flow: splash, title, loading, gameplay, pause."""

from __future__ import annotations

import random
from typing import Any, Callable, Hashable, Sequence

from duckdemo.asset_tracking import ResourceHandles
from duckdemo.audio import AudioInstance, apply_global_volume, music
from duckdemo.menus import (
    VOLUME_LABEL_NAME,
    CreditsAssets,
    MenuAction,
    credits_menu,
    lower_volume,
    main_menu,
    pause_menu,
    raise_volume,
    settings_menu,
    volume_label,
)
from duckdemo.player import LevelAssets, Player, PlayerAssets, spawn_player
from duckdemo.splash import SplashScreen
from duckdemo.states import Menu, Screen, StateMachine, Transition
from duckdemo.theme import InteractionAssets, Widget

PLAYER_MAX_SPEED = 400.0
_MAX_TRANSITION_ROUNDS = 16


class GameFlow:
    """Owns the game's states and reacts to keys, clicks and elapsed time."""

    def __init__(
        self,
        is_loaded: Callable[[Any], bool] | None = None,
        window_size: Sequence[float] = (1280.0, 720.0),
        include_exit: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.screen: StateMachine[Screen] = StateMachine(Screen.default())
        self.menu: StateMachine[Menu] = StateMachine(Menu.default())
        self.pause: StateMachine[bool] = StateMachine(False)
        self.handles = ResourceHandles()
        self.resources: dict[str, Any] = {}
        self._is_loaded = is_loaded or (lambda value: True)
        self.window_size = tuple(window_size)
        self.include_exit = include_exit
        self.rng = rng or random.Random()
        self.global_volume = 1.0
        self.exit_requested = False
        self.held: set[str] = set()
        self.player: Player | None = None
        self.splash: SplashScreen | None = None
        self.menu_widget: Widget | None = None
        self.audio: list[AudioInstance] = []
        self.screen_log: list[Transition[Screen]] = []
        self._scoped: list[tuple[Hashable, AudioInstance]] = []

        (
            self.handles.load_resource("level", LevelAssets)
            .load_resource("player", PlayerAssets)
            .load_resource("credits", CreditsAssets)
            .load_resource("interaction", InteractionAssets)
        )
        self._register_callbacks()
        self.splash = SplashScreen()

    def _register_callbacks(self) -> None:
        screen, menu = self.screen, self.menu
        screen.on_enter(Screen.SPLASH, self._enter_splash)
        screen.on_exit(Screen.SPLASH, self._exit_splash)
        screen.on_enter(Screen.TITLE, lambda: menu.set(Menu.MAIN))
        screen.on_exit(Screen.TITLE, lambda: menu.set(Menu.NONE))
        screen.on_enter(Screen.GAMEPLAY, self._spawn_level)
        screen.on_exit(Screen.GAMEPLAY, self._leave_gameplay)

        builders = {
            Menu.MAIN: lambda: main_menu(self.include_exit),
            Menu.PAUSE: pause_menu,
            Menu.SETTINGS: settings_menu,
            Menu.CREDITS: credits_menu,
        }
        for state, build in builders.items():
            menu.on_enter(state, self._show_menu(build))
            menu.on_exit(state, self._hide_menu)
        menu.on_enter(Menu.CREDITS, self._start_credits_music)
        menu.on_exit(Menu.CREDITS, lambda: self._drop_scope(Menu.CREDITS))
        menu.on_enter(Menu.NONE, self._unpause_in_gameplay)

    # State callbacks

    def _enter_splash(self) -> None:
        self.splash = SplashScreen()

    def _exit_splash(self) -> None:
        self.splash = None

    def _show_menu(self, build: Callable[[], Widget]) -> Callable[[], None]:
        def show() -> None:
            self.menu_widget = build()
            self._refresh_volume_label()

        return show

    def _hide_menu(self) -> None:
        self.menu_widget = None

    def _start_credits_music(self) -> None:
        assets = self.resources.get("credits", CreditsAssets())
        self._spawn_audio(music(assets.music), Menu.CREDITS)

    def _unpause_in_gameplay(self) -> None:
        if self.screen.current is Screen.GAMEPLAY:
            self.pause.set(False)

    def _spawn_level(self) -> None:
        level = self.resources.get("level", LevelAssets())
        assets = self.resources.get("player", PlayerAssets())
        self.player = spawn_player(PLAYER_MAX_SPEED, assets)
        self._spawn_audio(music(level.music), Screen.GAMEPLAY)

    def _leave_gameplay(self) -> None:
        self.menu.set(Menu.NONE)
        self.pause.set(False)
        self.player = None
        self._drop_scope(Screen.GAMEPLAY)

    # Audio bookkeeping

    def _spawn_audio(self, instance: AudioInstance, scope: Hashable | None = None) -> None:
        self.audio.append(instance)
        if scope is not None:
            self._scoped.append((scope, instance))

    def _drop_scope(self, scope: Hashable) -> None:
        removed = [inst for owner, inst in self._scoped if owner == scope]
        self._scoped = [(owner, inst) for owner, inst in self._scoped if owner != scope]
        self.audio = [a for a in self.audio if not any(a is r for r in removed)]

    # Transitions

    def _apply(self) -> None:
        for _ in range(_MAX_TRANSITION_ROUNDS):
            screen_change = self.screen.apply()
            if screen_change is not None:
                self.screen_log.append(screen_change)
            menu_change = self.menu.apply()
            pause_change = self.pause.apply()
            if screen_change is None and menu_change is None and pause_change is None:
                break
        if self.exit_requested:
            return

    def _back_from_settings(self) -> None:
        self.menu.set(Menu.MAIN if self.screen.current is Screen.TITLE else Menu.PAUSE)

    def _refresh_volume_label(self) -> None:
        if self.menu_widget is None:
            return
        for widget in self.menu_widget.walk():
            if widget.name == VOLUME_LABEL_NAME:
                widget.text = volume_label(self.global_volume)

    # Public interface

    def is_paused(self) -> bool:
        """Whether gameplay is paused."""
        return self.pause.current

    def press_key(self, key: str) -> None:
        """React to a key being pressed this frame (``"escape"``, ``"p"`` ...)."""
        key = key.lower()
        screen, menu = self.screen.current, self.menu.current
        if key == "escape":
            if screen is Screen.SPLASH:
                self.screen.set(Screen.TITLE)
            if menu is Menu.CREDITS:
                self.menu.set(Menu.MAIN)
            elif menu is Menu.PAUSE:
                self.menu.set(Menu.NONE)
            elif menu is Menu.SETTINGS:
                self._back_from_settings()
        if screen is Screen.GAMEPLAY and key in ("p", "escape"):
            if menu is Menu.NONE:
                self.pause.set(True)
                self.menu.set(Menu.PAUSE)
            elif key == "p":
                self.menu.set(Menu.NONE)
        self._apply()

    def click(self, action: MenuAction | None) -> None:
        """Perform the action of a clicked menu button."""
        if action is MenuAction.PLAY:
            done = self.handles.is_all_done()
            self.screen.set(Screen.GAMEPLAY if done else Screen.LOADING)
        elif action is MenuAction.SETTINGS:
            self.menu.set(Menu.SETTINGS)
        elif action is MenuAction.CREDITS:
            self.menu.set(Menu.CREDITS)
        elif action is MenuAction.EXIT:
            self.exit_requested = True
        elif action is MenuAction.BACK:
            if self.menu.current is Menu.SETTINGS:
                self._back_from_settings()
            else:
                self.menu.set(Menu.MAIN)
        elif action is MenuAction.CONTINUE:
            self.menu.set(Menu.NONE)
        elif action is MenuAction.QUIT_TO_TITLE:
            self.screen.set(Screen.TITLE)
        elif action is MenuAction.VOLUME_DOWN:
            self.global_volume = lower_volume(self.global_volume)
        elif action is MenuAction.VOLUME_UP:
            self.global_volume = raise_volume(self.global_volume)
        self._apply()

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        self.handles.update(self.resources, self._is_loaded)
        screen = self.screen.current
        if screen is Screen.SPLASH and self.splash is not None:
            next_screen = self.splash.update(dt)
            if next_screen is not None:
                self.screen.set(next_screen)
        elif screen is Screen.LOADING and self.handles.is_all_done():
            self.screen.set(Screen.GAMEPLAY)
        elif screen is Screen.GAMEPLAY and self.player is not None and not self.is_paused():
            self.player.record_input(self.held)
            self.player.update(dt, self.window_size)
            if "player" in self.resources:
                step = self.player.step_sound(self.rng)
                if step is not None:
                    self._spawn_audio(step)
        apply_global_volume(self.global_volume, self.audio)
        if self.menu.current is Menu.SETTINGS:
            self._refresh_volume_label()
        self._apply()