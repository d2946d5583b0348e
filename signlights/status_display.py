"""Priority-driven text output to a four-digit seven-segment display."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Callable, Iterable, Protocol, Sequence

DOT = 0b10000000
_DASH = 0b01000000
_EQUALS = 0b01001000
DIGIT_COUNT = 4

_DIGIT_SEGMENTS = (
    0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07,
    0x7F, 0x6F, 0x77, 0x7C, 0x39, 0x5E, 0x79, 0x71,
)


class DisplayPriority(IntEnum):
    """What currently owns the display; higher values win."""

    NONE = 1
    EPHEMERAL = 2
    SEQUENCE = 3
    AD_HOC = 4


class SegmentDevice(Protocol):
    def clear(self) -> None: ...
    def set_brightness(self, brightness: int) -> None: ...
    def set_segments(self, segments: Sequence[int]) -> None: ...
    def encode_digit(self, digit: int) -> int: ...


class MemorySegmentDevice:
    """Four-digit seven-segment display kept in memory."""

    def __init__(self) -> None:
        self.segments: list[int] = [0] * DIGIT_COUNT
        self.brightness = 0

    def clear(self) -> None:
        """Blank every digit."""
        self.segments = [0] * DIGIT_COUNT

    def set_brightness(self, brightness: int) -> None:
        """Set the brightness, 0 (off) to 7 (max)."""
        if not 0 <= brightness <= 7:
            raise ValueError(f"brightness out of range 0-7: {brightness}")
        self.brightness = brightness

    def set_segments(self, segments: Sequence[int]) -> None:
        """Show the raw segment bytes, one per digit."""
        self.segments = list(segments)

    def encode_digit(self, digit: int) -> int:
        """Segment pattern of a hexadecimal digit."""
        return _DIGIT_SEGMENTS[digit & 0x0F]


class StatusDisplay:
    """Shows short status strings, temporary messages and timed sequences.

    ``clock`` returns the current time in milliseconds.
    """

    def __init__(self, device: SegmentDevice, brightness: int, clock: Callable[[], int]) -> None:
        self._device = device
        self._clock = clock
        self._last_text = ""
        self._next_update = 0
        self._sequence_duration = 0
        self.priority = DisplayPriority.NONE
        self._queue: deque[str] = deque()
        device.clear()
        device.set_brightness(brightness)

    def update(self) -> None:
        """Expire temporary text or advance a running sequence when due."""
        if self.priority in (DisplayPriority.NONE, DisplayPriority.AD_HOC):
            return
        now = self._clock()
        if now <= self._next_update:
            return
        if self.priority == DisplayPriority.EPHEMERAL:
            self.clear()
        elif self.priority == DisplayPriority.SEQUENCE:
            if self._queue:
                self._show(self._queue.popleft())
                self._next_update = self._clock() + self._sequence_duration
            else:
                self.clear()

    def clear(self) -> None:
        """Blank the display and release it."""
        self._device.clear()
        self._last_text = ""
        self.priority = DisplayPriority.NONE

    def set_display(self, text: str) -> None:
        """Show text until cleared or replaced; overrides everything else.

        Up to four characters are shown; a '.' lights the dot of the
        character before it. Unknown characters show as blanks.
        """
        self._show(text)
        self.priority = DisplayPriority.AD_HOC

    def display_temporary(self, text: str, duration_msec: int) -> None:
        """Show text for a while, unless something more important is showing."""
        if self.priority > DisplayPriority.EPHEMERAL:
            return
        self._show(text)
        self._next_update = self._clock() + duration_msec
        self.priority = DisplayPriority.EPHEMERAL

    def display_sequence(self, texts: Iterable[str], duration_msec: int) -> None:
        """Show each text in turn for the given time, then clear."""
        if self.priority > DisplayPriority.SEQUENCE:
            return
        self._queue.clear()
        texts = list(texts)
        if not texts:
            return
        first, *rest = texts
        self._show(first)
        self._sequence_duration = duration_msec
        self._next_update = self._clock() + duration_msec
        self._queue.extend(rest)
        self.priority = DisplayPriority.SEQUENCE

    def _show(self, text: str) -> None:
        if text == self._last_text:
            return
        segments: list[int] = []
        chars = iter(text)
        pending = next(chars, None)
        while pending is not None and len(segments) < DIGIT_COUNT:
            segments.append(self._encode(pending))
            pending = next(chars, None)
            if pending == ".":
                segments[-1] |= DOT
                pending = next(chars, None)
        segments.extend([0] * (DIGIT_COUNT - len(segments)))
        self._device.set_segments(segments)
        self._last_text = text

    def _encode(self, char: str) -> int:
        if char == "-":
            return _DASH
        if char == "=":
            return _EQUALS
        if char in "0123456789abcdefABCDEF":
            return self._device.encode_digit(int(char, 16))
        return 0