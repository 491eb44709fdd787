"""Global hotkeys: button combinations and the volume and backlight popups."""

from __future__ import annotations

import enum
from collections.abc import Collection

from handmenu.inputmanager import BACKLIGHT_HOTKEY, VOLUME_HOTKEY, Action

VOLUME_STEP = 10
BACKLIGHT_STEP = 10
VOLUME_MIN, VOLUME_MAX = 0, 100
BACKLIGHT_MIN, BACKLIGHT_MAX = 5, 100

_CLOSE_POPUP = (Action.SETTINGS, Action.CONFIRM, Action.CANCEL)


class CommonAction(enum.Enum):
    """What the menu does in reaction to a global hotkey."""

    POWEROFF_DIALOG = "poweroff_dialog"
    SCREENSHOT = "screenshot"
    VOLUME = "volume"
    BACKLIGHT = "backlight"
    USB_CONNECT = "usb_connect"
    USB_REMOVE = "usb_remove"
    TV_CONNECT = "tv_connect"
    TV_OFF = "tv_off"
    JOYSTICKS = "joysticks"
    RELOAD_MENU = "reload_menu"


def _any(active: Collection[int], *actions: Action) -> bool:
    return any(action in active for action in actions)


def menu_combo(active: Collection[int]) -> Action:
    """The action a combination pressed while MENU is held stands for.

    MENU with SETTINGS means power, with the backlight hotkey the
    backlight popup, with the volume hotkey the volume popup and with
    POWER the USB connection. CONFIRM or CANCEL abandon the combination
    (WAKE_UP); MENU alone stays MENU.
    """
    if Action.SETTINGS in active:
        return Action.POWER
    if BACKLIGHT_HOTKEY in active:
        return Action.BACKLIGHT
    if VOLUME_HOTKEY in active:
        return Action.VOLUP
    if Action.POWER in active:
        return Action.UDC_CONNECT
    if _any(active, Action.CONFIRM, Action.CANCEL):
        return Action.WAKE_UP
    return Action.MENU


def classify(active: Collection[int]) -> CommonAction | None:
    """The common reaction to the active actions, or None if there is none."""
    if Action.POWER in active:
        return CommonAction.POWEROFF_DIALOG
    if Action.SCREENSHOT in active:
        return CommonAction.SCREENSHOT
    if _any(active, Action.VOLUP, Action.VOLDOWN):
        return CommonAction.VOLUME
    if Action.BACKLIGHT in active:
        return CommonAction.BACKLIGHT
    if Action.UDC_CONNECT in active:
        return CommonAction.USB_CONNECT
    if Action.UDC_REMOVE in active:
        return CommonAction.USB_REMOVE
    if Action.TV_CONNECT in active:
        return CommonAction.TV_CONNECT
    if Action.TV_REMOVE in active:
        return CommonAction.TV_OFF
    if Action.JOYSTICK_CONNECT in active:
        return CommonAction.JOYSTICKS
    if _any(active, Action.MMC_INSERT, Action.MMC_REMOVE):
        return CommonAction.RELOAD_MENU
    return None


def _clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def volume_step(value: int, active: Collection[int]) -> tuple[int, bool]:
    """One round of the volume popup.

    Returns the new volume and whether the popup is closed.
    """
    value = _clamp(value, VOLUME_MIN, VOLUME_MAX)
    if _any(active, *_CLOSE_POPUP):
        return value, True
    if _any(active, Action.LEFT, Action.DEC, Action.VOLDOWN, Action.SECTION_PREV):
        value = max(VOLUME_MIN, value - VOLUME_STEP)
    elif _any(active, Action.RIGHT, Action.INC, Action.VOLUP, Action.SECTION_NEXT):
        value = min(VOLUME_MAX, value + VOLUME_STEP)
    return _clamp(value, VOLUME_MIN, VOLUME_MAX), False


def backlight_step(value: int, active: Collection[int]) -> tuple[int, bool]:
    """One round of the backlight popup.

    Returns the new backlight level and whether the popup is closed.
    The BACKLIGHT key leaves the level as it is; the caller rereads it
    from the hardware.
    """
    value = _clamp(value, BACKLIGHT_MIN, BACKLIGHT_MAX)
    if _any(active, *_CLOSE_POPUP):
        return value, True
    if _any(active, Action.LEFT, Action.DEC, Action.SECTION_PREV):
        value = max(BACKLIGHT_MIN, value - BACKLIGHT_STEP)
    elif _any(active, Action.RIGHT, Action.INC, Action.SECTION_NEXT):
        value = min(BACKLIGHT_MAX, value + BACKLIGHT_STEP)
    return _clamp(value, BACKLIGHT_MIN, BACKLIGHT_MAX), False