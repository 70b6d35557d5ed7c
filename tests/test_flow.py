from duckdemo.audio import AudioCategory
from duckdemo.flow import GameFlow
from duckdemo.menus import VOLUME_LABEL_NAME, MenuAction
from duckdemo.splash import SPLASH_DURATION_SECS
from duckdemo.states import Menu, Screen


def _at_title(**kwargs):
    flow = GameFlow(**kwargs)
    flow.press_key("escape")
    return flow


def _in_gameplay():
    flow = _at_title()
    flow.update(0.01)
    flow.click(MenuAction.PLAY)
    return flow


def test_splash_times_out_to_title():
    flow = GameFlow()
    flow.update(0.1)
    assert flow.screen.current is Screen.SPLASH
    flow.update(SPLASH_DURATION_SECS)
    assert flow.screen.current is Screen.TITLE
    assert flow.menu.current is Menu.MAIN


def test_escape_skips_splash_and_opens_main_menu():
    flow = _at_title()
    assert flow.screen.current is Screen.TITLE
    assert flow.menu_widget.name == "Main Menu"


def test_play_goes_to_loading_until_assets_ready():
    flow = _at_title(is_loaded=lambda value: False)
    flow.click(MenuAction.PLAY)
    assert flow.screen.current is Screen.LOADING
    assert flow.menu.current is Menu.NONE
    flow.update(0.1)
    assert flow.screen.current is Screen.LOADING


def test_play_enters_gameplay_with_music():
    flow = _in_gameplay()
    assert flow.screen.current is Screen.GAMEPLAY
    assert flow.player is not None
    assert [a.category for a in flow.audio] == [AudioCategory.MUSIC]


def test_pause_toggle_with_p():
    flow = _in_gameplay()
    flow.press_key("p")
    assert flow.is_paused() and flow.menu.current is Menu.PAUSE
    flow.press_key("p")
    assert not flow.is_paused() and flow.menu.current is Menu.NONE


def test_settings_back_returns_to_pause_in_gameplay():
    flow = _in_gameplay()
    flow.press_key("escape")
    flow.click(MenuAction.SETTINGS)
    assert flow.menu.current is Menu.SETTINGS
    flow.click(MenuAction.BACK)
    assert flow.menu.current is Menu.PAUSE
    assert flow.is_paused()


def test_settings_back_returns_to_main_on_title():
    flow = _at_title()
    flow.click(MenuAction.SETTINGS)
    flow.press_key("escape")
    assert flow.menu.current is Menu.MAIN


def test_quit_to_title_cleans_up():
    flow = _in_gameplay()
    flow.press_key("escape")
    flow.click(MenuAction.QUIT_TO_TITLE)
    assert flow.screen.current is Screen.TITLE
    assert flow.menu.current is Menu.MAIN
    assert not flow.is_paused()
    assert flow.player is None and flow.audio == []


def test_volume_buttons_update_label():
    flow = _at_title()
    flow.click(MenuAction.SETTINGS)
    flow.click(MenuAction.VOLUME_DOWN)
    assert flow.global_volume < 1.0
    flow.update(0.01)
    text = next(w.text for w in flow.menu_widget.walk() if w.name == VOLUME_LABEL_NAME)
    assert text.strip() == "90%"


def test_credits_music_scoped_to_menu():
    flow = _at_title()
    flow.click(MenuAction.CREDITS)
    assert len(flow.audio) == 1
    flow.press_key("escape")
    assert flow.menu.current is Menu.MAIN and flow.audio == []


def test_exit_requested():
    flow = _at_title()
    flow.click(MenuAction.EXIT)
    assert flow.exit_requested


def test_player_moves_while_unpaused_only():
    flow = _in_gameplay()
    flow.held = {"d"}
    flow.update(0.1)
    x = flow.player.position[0]
    assert x > 0
    flow.press_key("p")
    flow.update(0.1)
    assert flow.player.position[0] == x