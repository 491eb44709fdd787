import pytest

from handmenu.hotkeys import (
    CommonAction,
    backlight_step,
    classify,
    menu_combo,
    volume_step,
)
from handmenu.inputmanager import Action


@pytest.mark.parametrize(
    "pressed, expected",
    [
        ({Action.SETTINGS}, Action.POWER),
        ({Action.SECTION_NEXT}, Action.BACKLIGHT),
        ({Action.SECTION_PREV}, Action.VOLUP),
        ({Action.POWER}, Action.UDC_CONNECT),
        ({Action.CONFIRM}, Action.WAKE_UP),
        ({Action.CANCEL}, Action.WAKE_UP),
        (set(), Action.MENU),
        ({Action.UP}, Action.MENU),
    ],
)
def test_menu_combo(pressed, expected):
    assert menu_combo(pressed | {Action.MENU}) == expected


def test_menu_combo_settings_wins_over_others():
    assert menu_combo({Action.MENU, Action.SETTINGS, Action.CONFIRM}) == Action.POWER


@pytest.mark.parametrize(
    "active, expected",
    [
        ({Action.POWER}, CommonAction.POWEROFF_DIALOG),
        ({Action.SCREENSHOT}, CommonAction.SCREENSHOT),
        ({Action.VOLUP}, CommonAction.VOLUME),
        ({Action.VOLDOWN}, CommonAction.VOLUME),
        ({Action.BACKLIGHT}, CommonAction.BACKLIGHT),
        ({Action.UDC_CONNECT}, CommonAction.USB_CONNECT),
        ({Action.UDC_REMOVE}, CommonAction.USB_REMOVE),
        ({Action.TV_CONNECT}, CommonAction.TV_CONNECT),
        ({Action.TV_REMOVE}, CommonAction.TV_OFF),
        ({Action.JOYSTICK_CONNECT}, CommonAction.JOYSTICKS),
        ({Action.MMC_INSERT}, CommonAction.RELOAD_MENU),
        ({Action.MMC_REMOVE}, CommonAction.RELOAD_MENU),
    ],
)
def test_classify(active, expected):
    assert classify(active) == expected


def test_classify_nothing():
    assert classify({Action.UP, Action.CONFIRM}) is None


def test_classify_power_first():
    assert classify({Action.POWER, Action.VOLUP}) == CommonAction.POWEROFF_DIALOG


@pytest.mark.parametrize("key", [Action.SETTINGS, Action.CONFIRM, Action.CANCEL])
def test_volume_closes(key):
    assert volume_step(60, {key}) == (60, True)


def test_volume_up_down_round_trip():
    up, done = volume_step(60, {Action.RIGHT})
    assert not done
    assert up > 60
    assert volume_step(up, {Action.LEFT}) == (60, False)


def test_volume_limits():
    assert volume_step(100, {Action.VOLUP}) == (100, False)
    assert volume_step(0, {Action.VOLDOWN}) == (0, False)


def test_volume_clamps_input():
    assert volume_step(250, set()) == (100, False)


def test_backlight_limits():
    assert backlight_step(5, {Action.LEFT}) == (5, False)
    assert backlight_step(100, {Action.SECTION_NEXT}) == (100, False)
    assert backlight_step(0, set()) == (5, False)


def test_backlight_round_trip():
    up, _ = backlight_step(70, {Action.INC})
    assert up > 70
    assert backlight_step(up, {Action.DEC}) == (70, False)


def test_backlight_key_leaves_value():
    assert backlight_step(70, {Action.BACKLIGHT}) == (70, False)


def test_backlight_closes():
    assert backlight_step(70, {Action.CANCEL}) == (70, True)