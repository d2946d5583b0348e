"""Debounced push button that distinguishes normal, long and double presses."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

DEBOUNCE_INTERVAL_MS = 50
LONG_PRESS_MS = 500
DOUBLE_TAP_INTERVAL_MS = 150


class ButtonPressType(Enum):
    """Kind of press last detected."""

    NONE = auto()
    NORMAL = auto()
    LONG = auto()
    DOUBLE = auto()


class PushButton:
    """Button on an active-low input, polled with update().

    ``read_pin`` returns the pin level (falsy while the button is held down);
    ``clock`` returns the current time in milliseconds.
    """

    def __init__(self, read_pin: Callable[[], int], clock: Callable[[], int]) -> None:
        self._read_pin = read_pin
        self._clock = clock
        self._is_down = False
        self._last_down_time = 0
        self._last_up_time = 0
        self._last_transition_time = 0
        self._in_delay_interval = False
        self._was_pressed = False
        self._consecutive_count = 0
        self._last_press_type = ButtonPressType.NONE

    def was_pressed(self) -> bool:
        """Whether a completed press is waiting to be handled."""
        return self._was_pressed

    def last_press_type(self) -> ButtonPressType:
        """The kind of the last completed press."""
        return self._last_press_type

    def raw_pin_status(self) -> int:
        """The pin level as read right now."""
        return self._read_pin()

    def clear_press(self) -> None:
        """Forget the pending press."""
        self._was_pressed = False
        self._last_press_type = ButtonPressType.NONE

    def update(self) -> None:
        """Sample the pin and advance the press detection."""
        now = self._clock()
        if not self._read_pin():
            if not self._is_down:
                if now > self._last_transition_time + DEBOUNCE_INTERVAL_MS:
                    self._last_down_time = now
                    self._last_transition_time = now
                    self._is_down = True
                if now > self._last_up_time + DOUBLE_TAP_INTERVAL_MS:
                    self._consecutive_count = 1
                else:
                    self._consecutive_count += 1
        elif self._is_down:
            if now > self._last_transition_time + DEBOUNCE_INTERVAL_MS:
                self._last_up_time = now
                self._last_transition_time = now
                self._is_down = False
                self._in_delay_interval = True
        elif self._in_delay_interval and now > self._last_up_time + DOUBLE_TAP_INTERVAL_MS:
            # The double-tap window has closed, so the press is complete.
            self._in_delay_interval = False
            self._was_pressed = True
            self._set_press_type(self._last_up_time - self._last_down_time)

    def _set_press_type(self, press_time: int) -> None:
        if press_time > LONG_PRESS_MS:
            self._last_press_type = ButtonPressType.LONG
        elif self._consecutive_count > 1:
            self._last_press_type = ButtonPressType.DOUBLE
        else:
            self._last_press_type = ButtonPressType.NORMAL