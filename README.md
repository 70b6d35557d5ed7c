# duckdemo

A small arcade demo built on pygame. A splash screen fades in and out, a
title menu leads to the game, and in the game you walk a pixel-art duck
over a simple wireframe 3D scene in a window that wraps at its edges.
Footsteps play in time with the walking animation, and there are pause,
settings (master volume) and credits menus.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
duckdemo
```

Options:

- `--width` and `--height` set the window size (default 1280 x 720); the
  window can also be resized while running.
- `--assets DIR` sets the directory assets are read from (default `assets`).
- `--dev` turns on development tools: screen transitions are logged, and
  `` ` `` (backquote) toggles an outline around every menu element.

Controls:

- `W` `A` `S` `D` or the arrow keys move the duck; diagonal movement is
  normalised so it is no faster than straight movement.
- During play, `P` or `Escape` pauses the game and opens the pause menu.
  `P` or `Escape` closes it again, as does its Continue button.
- `Escape` skips the splash screen, goes back from the credits menu to the
  main menu, and goes back from the settings menu to the menu it was opened
  from.
- Menu buttons are clicked with the left mouse button; hovering and
  clicking play button sounds.
- In the settings menu, `-` and `+` change the master volume in steps of
  10%, between 0% and 300%.

Assets are read from the asset directory: `images/ducky.png`,
`images/splash.png`, `audio/sound_effects/step1.ogg` to `step4.ogg`,
`audio/sound_effects/button_hover.ogg` and `button_click.ogg`, and
`audio/music/Fluffing A Duck.ogg` and `Monkeys Spinning Monkeys.ogg`.
Missing files are tolerated: the duck is drawn as a yellow square, the
splash screen shows only its background, and sounds are silent.

## Using the pieces

The game logic is kept apart from drawing, so it can be used and tested on
its own:

- `duckdemo.timing` – `Timer` with `TimerMode.ONCE` or `REPEATING`,
  advanced by `tick(seconds)`.
- `duckdemo.states` – `StateMachine`, whose `set` queues a state that
  `apply` enters, running exit and enter callbacks; `Screen`, `Menu` and
  `AppSystems`.
- `duckdemo.asset_tracking.ResourceHandles` – `load_resource`, `update`
  and `is_all_done`.
- `duckdemo.audio` – `music`, `sound_effect`, `AudioInstance` and
  `apply_global_volume`.
- `duckdemo.theme` – the colour palette, `InteractionPalette` and the
  widget builders `ui_root`, `header`, `label`, `button` and `button_small`.
- `duckdemo.movement` – `MovementController`, `apply_movement` and
  `screen_wrap`.
- `duckdemo.animation` – `PlayerAnimation` with its idle and walking frames
  and atlas indices, `animation_state_for` and `facing_left`.
- `duckdemo.player` – `Player`, `spawn_player`, `directional_intent`,
  `PlayerAssets` and `LevelAssets`.
- `duckdemo.splash` – `ImageFadeInOut` and `SplashScreen`.
- `duckdemo.menus` – `main_menu`, `pause_menu`, `settings_menu`,
  `credits_menu`, `credits_grid` and the volume helpers `lower_volume`,
  `raise_volume` and `volume_label`.
- `duckdemo.flow.GameFlow` – the rules for moving between screens, menus
  and pause, driven by `press_key`, `click` and `update`.
- `duckdemo.scene` – `basic_scene`, `SceneObject` and a perspective
  `Camera` with `look_at` and `project`.
- `duckdemo.app` – `App` (the window and main loop) and `main`.

## What it does not do

- No assets are included; supply them in the asset directory.
- The game window does not track asset loading: it treats every resource as
  ready at once, so the loading screen only appears when a `GameFlow` is
  given an `is_loaded` check that reports something still loading.
- The 3D scene is drawn as coloured wireframe boxes; there is no lighting
  or shading, and the light in the scene is not drawn.