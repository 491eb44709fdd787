"""Input actions: mapping keyboard keys and joysticks to menu actions."""

from __future__ import annotations

import enum
import logging
import os
import re
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

log = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class Action(enum.IntEnum):
    """Menu actions, including virtual actions raised by hardware changes."""

    WAKE_UP = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    CONFIRM = 5
    CANCEL = 6
    MANUAL = 7
    MODIFIER = 8
    SECTION_PREV = 9
    SECTION_NEXT = 10
    INC = 11
    DEC = 12
    PAGEUP = 13
    PAGEDOWN = 14
    SETTINGS = 15
    MENU = 16
    VOLUP = 17
    VOLDOWN = 18
    BACKLIGHT = 19
    POWER = 20
    UDC_CONNECT = 21
    UDC_REMOVE = 22
    MMC_INSERT = 23
    MMC_REMOVE = 24
    TV_CONNECT = 25
    TV_REMOVE = 26
    PHONES_CONNECT = 27
    PHONES_REMOVE = 28
    JOYSTICK_CONNECT = 29
    JOYSTICK_REMOVE = 30
    SCREENSHOT = 31


NUM_ACTIONS = len(Action)
VOLUME_HOTKEY = Action.SECTION_PREV
BACKLIGHT_HOTKEY = Action.SECTION_NEXT

# First key code of the range used for virtual hardware keys.
SDLK_WORLD_0 = 160
DEFAULT_INTERVAL = 150
COMBO_LENGTH = 10

_KONAMI = (
    Action.UP, Action.UP, Action.DOWN, Action.DOWN,
    Action.LEFT, Action.RIGHT, Action.LEFT, Action.RIGHT,
    Action.CANCEL, Action.CONFIRM,
)

_NAMES = {
    "up": Action.UP,
    "down": Action.DOWN,
    "left": Action.LEFT,
    "right": Action.RIGHT,
    "modifier": Action.MODIFIER,
    "confirm": Action.CONFIRM,
    "cancel": Action.CANCEL,
    "manual": Action.MANUAL,
    "dec": Action.DEC,
    "inc": Action.INC,
    "section_prev": Action.SECTION_PREV,
    "section_next": Action.SECTION_NEXT,
    "pageup": Action.PAGEUP,
    "pagedown": Action.PAGEDOWN,
    "settings": Action.SETTINGS,
    "volup": Action.VOLUP,
    "voldown": Action.VOLDOWN,
    "backlight": Action.BACKLIGHT,
    "power": Action.POWER,
    "menu": Action.MENU,
}


class MappingType(enum.IntEnum):
    """Kind of physical input an action is bound to."""

    BUTTON = 0
    AXIS = 1
    KEYPRESS = 2


@dataclass(frozen=True)
class InputMap:
    """One binding of an action to a button, an axis or a key."""

    type: MappingType
    value: int
    num: int = 0
    threshold: int = 0


@dataclass(frozen=True)
class KeyEvent:
    """An input event: a key press or release, a wake-up or joystick motion."""

    key: int = 0
    pressed: bool = True
    wake: bool = False
    motion: bool = False


@dataclass
class HardwareState:
    """A reading of the device's hardware status."""

    battery: int = 3
    devices: int = 0
    udc: int = Action.UDC_REMOVE
    volume_mode: int = 0
    tvout: int = Action.TV_REMOVE
    mmc: int = Action.MMC_REMOVE


class _Joystick(Protocol):
    def get_button(self, button: int) -> bool: ...

    def get_axis(self, axis: int) -> int: ...


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _virtual_key(action: int) -> int:
    return action - Action.UDC_CONNECT + SDLK_WORLD_0


def parse_input_config(lines: Iterable[str]) -> dict[Action, list[InputMap]]:
    """Read 'name=type,values' lines into the bindings of each action.

    Lines naming an unknown action or holding an invalid binding are
    logged and skipped.
    """
    mappings: dict[Action, list[InputMap]] = {}
    for linenum, line in enumerate(lines, 1):
        name, _, value = line.partition("=")
        name = name.strip()
        value = value.strip() if "=" in line else line.strip()

        action = _NAMES.get(name)
        if action is None:
            log.error("line %d: unknown action %r", linenum, name)
            continue

        values = [part.strip() for part in value.split(",")]
        if len(values) < 2:
            log.error("line %d: every definition needs at least 2 values (%s)", linenum, value)
            continue

        kind = values[0]
        if kind == "joystickbutton" and len(values) == 3:
            binding = InputMap(MappingType.BUTTON, _atoi(values[2]), num=_atoi(values[1]))
        elif kind == "joystickaxis" and len(values) == 4:
            binding = InputMap(
                MappingType.AXIS,
                _atoi(values[2]),
                num=_atoi(values[1]),
                threshold=_atoi(values[3]),
            )
        elif kind == "keyboard":
            binding = InputMap(MappingType.KEYPRESS, _atoi(values[1]))
        else:
            log.error("line %d: invalid syntax or unsupported mapping %r", linenum, value)
            continue
        mappings.setdefault(action, []).append(binding)
    return mappings


class InputManager:
    """Tracks which actions are active from key and joystick state."""

    def __init__(
        self,
        mappings: Mapping[int, Sequence[InputMap]] | None = None,
        joysticks: Sequence[_Joystick] = (),
    ) -> None:
        self.joysticks = list(joysticks)
        self._maps: dict[Action, list[InputMap]] = {action: [] for action in Action}
        for action in Action:
            if action >= Action.UDC_CONNECT:
                self._maps[action].append(
                    InputMap(MappingType.KEYPRESS, _virtual_key(action))
                )
        for action, bindings in (mappings or {}).items():
            self._maps[Action(action)].extend(bindings)

        self._intervals = [DEFAULT_INTERVAL] * NUM_ACTIONS
        self._active = [False] * NUM_ACTIONS
        self._keys: set[int] = set()
        self._combo: deque[int] = deque(
            [Action.POWER] + [0] * (COMBO_LENGTH - 1), maxlen=COMBO_LENGTH
        )
        self.repeat_interval: int | None = None
        self.battery = 3
        self.ticks = 0
        self._hardware: HardwareState | None = None

    @classmethod
    def from_file(
        cls, path: str | os.PathLike, joysticks: Sequence[_Joystick] = ()
    ) -> "InputManager":
        """Build a manager from an input configuration file."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls(parse_input_config(lines), joysticks)

    def set_interval(self, ms: int, action: int = -1) -> None:
        """Set the repeat interval of one action, or of all when action is negative."""
        if action < 0:
            self._intervals = [ms] * NUM_ACTIONS
        elif action < NUM_ACTIONS:
            self._intervals[action] = ms

    def interval(self, action: int) -> int:
        return self._intervals[action]

    def is_active(self, action: int) -> bool:
        return self._active[action]

    def set_active(self, action: int) -> None:
        self._active[action] = True

    def _clear(self, drop_timer: bool) -> None:
        if drop_timer:
            self.repeat_interval = None
        self._active = [False] * NUM_ACTIONS

    def drop_events(self) -> None:
        """Deactivate every action and cancel the pending repeat."""
        self._clear(drop_timer=True)

    def scan_action(self, action: int) -> bool:
        """Whether any binding of the action is currently held."""
        for binding in self._maps[Action(action)]:
            if binding.type == MappingType.BUTTON:
                if any(joy.get_button(binding.value) for joy in self.joysticks):
                    return True
            elif binding.type == MappingType.AXIS:
                if binding.num < len(self.joysticks):
                    position = self.joysticks[binding.num].get_axis(binding.value)
                    if binding.threshold < 0 and position < binding.threshold:
                        return True
                    if binding.threshold > 0 and position > binding.threshold:
                        return True
            elif binding.value in self._keys:
                return True
        return False

    def process(self, event: KeyEvent) -> bool:
        """Apply one event and rescan all actions; True if any action fired."""
        if event.motion and self.repeat_interval is not None:
            self._clear(drop_timer=False)
            return False

        self._clear(drop_timer=True)

        any_actions = event.wake
        if not event.wake and not event.motion:
            if event.pressed:
                self._keys.add(event.key)
            else:
                self._keys.discard(event.key)

        last_active: int | None = None
        for action in Action:
            self._active[action] = self.scan_action(action)
            if self._active[action]:
                self._combo.append(action)
                any_actions = True
                last_active = action

        if last_active is not None:
            self.repeat_interval = self._intervals[last_active]
        return any_actions

    def combo(self) -> bool:
        """Whether the last ten actions form the secret sequence."""
        return tuple(self._combo) == _KONAMI

    def hardware_monitor(self, state: HardwareState) -> tuple[int, Action | None]:
        """Compare a hardware reading with the last one.

        Returns the delay in milliseconds until the next check and the
        virtual action to raise, if something changed.
        """
        if self._hardware is None:
            self.battery = state.battery
            self._hardware = HardwareState(
                battery=state.battery,
                devices=state.devices,
                volume_mode=state.volume_mode,
                mmc=state.mmc,
            )
        previous = self._hardware

        self.ticks += 1
        if self.ticks > 30:
            self.ticks = 0
            self.battery = state.battery

        if self.ticks > 3:
            if previous.devices != state.devices:
                previous.devices = state.devices
                return 200, Action.JOYSTICK_CONNECT
            if previous.udc != state.udc:
                previous.udc = state.udc
                return 200, Action(state.udc)
            if previous.volume_mode != state.volume_mode:
                previous.volume_mode = state.volume_mode
                return 200, Action.PHONES_CONNECT
            if previous.tvout != state.tvout:
                previous.tvout = state.tvout
                return 200, Action(state.tvout)
            if previous.mmc != state.mmc:
                previous.mmc = state.mmc
                return 200, Action(state.mmc)
        return 1000, None