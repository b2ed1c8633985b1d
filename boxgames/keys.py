"""Edge-detecting keyboard state tracker."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

KEY_COUNT = 256


class KeyState(Enum):
    """Where a key is in its press/release cycle."""

    RELEASE = 0
    DOWN = 1
    UP = 2
    HELD = 3


_WHEN_PRESSED = {
    KeyState.UP: KeyState.DOWN,
    KeyState.RELEASE: KeyState.DOWN,
    KeyState.DOWN: KeyState.HELD,
    KeyState.HELD: KeyState.HELD,
}

_WHEN_NOT_PRESSED = {
    KeyState.DOWN: KeyState.UP,
    KeyState.HELD: KeyState.UP,
    KeyState.UP: KeyState.RELEASE,
    KeyState.RELEASE: KeyState.RELEASE,
}


class KeyManager:
    """Tracks the state of 256 key codes from frame to frame."""

    def __init__(self) -> None:
        self._states = [KeyState.RELEASE] * KEY_COUNT

    def reset(self) -> None:
        """Mark every key as released."""
        self._states = [KeyState.RELEASE] * KEY_COUNT

    def update(self, pressed: Iterable[int]) -> None:
        """Advance every key given the set of key codes held down right now."""
        held = set(pressed)
        self._states = [
            (_WHEN_PRESSED if code in held else _WHEN_NOT_PRESSED)[state]
            for code, state in enumerate(self._states)
        ]

    def state(self, key: int) -> KeyState:
        """Return the current state of ``key``."""
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"key code out of range: {key}")
        return self._states[key]

    def is_released(self, key: int) -> bool:
        return self.state(key) is KeyState.RELEASE

    def is_down(self, key: int) -> bool:
        return self.state(key) is KeyState.DOWN

    def is_up(self, key: int) -> bool:
        return self.state(key) is KeyState.UP

    def is_held(self, key: int) -> bool:
        return self.state(key) is KeyState.HELD