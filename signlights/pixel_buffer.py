"""In-memory pixel buffer for a sign, addressed by raw index, row, column or digit."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence

MINIMUM_PIXELS = 360
NO_PIXEL = -1

Block = tuple[int, ...]


def _as_blocks(blocks: Iterable[Iterable[int]]) -> tuple[Block, ...]:
    return tuple(tuple(block) for block in blocks)


@dataclass(frozen=True)
class PixelLayout:
    """Physical arrangement of a sign's pixels.

    ``rows`` run from the top of the sign, ``columns`` and ``digits`` from the
    left. Each holds the strip indices of the pixels it contains.
    ``buffer_size`` is the length of the LED strip buffer; when omitted it is
    the pixel count, but at least :data:`MINIMUM_PIXELS`.
    """

    pixel_count: int
    rows: tuple[Block, ...] = ()
    columns: tuple[Block, ...] = ()
    digits: tuple[Block, ...] = ()
    buffer_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.pixel_count < 0:
            raise ValueError(f"pixel count must not be negative: {self.pixel_count}")
        size = self.buffer_size
        if size is None:
            size = max(MINIMUM_PIXELS, self.pixel_count)
        if size < self.pixel_count:
            raise ValueError(
                f"buffer size {size} is smaller than pixel count {self.pixel_count}"
            )
        object.__setattr__(self, "buffer_size", size)
        for name in ("rows", "columns", "digits"):
            blocks = _as_blocks(getattr(self, name))
            for block in blocks:
                for pixel in block:
                    if not 0 <= pixel < size:
                        raise ValueError(f"{name} refers to pixel {pixel} outside the buffer")
            object.__setattr__(self, name, blocks)


class Strip(Protocol):
    def set_pixel_color(self, index: int, color: int) -> None: ...
    def set_brightness(self, brightness: int) -> None: ...
    def show(self) -> None: ...
    def clear(self) -> None: ...


class MemoryStrip:
    """LED strip kept in memory; ``shown`` holds the colours of the last show()."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.colors: list[int] = [0] * size
        self.shown: list[int] = [0] * size
        self.brightness = 255
        self.show_count = 0

    def set_pixel_color(self, index: int, color: int) -> None:
        """Set one LED's colour; indices outside the strip are ignored."""
        if 0 <= index < self.size:
            self.colors[index] = color

    def set_brightness(self, brightness: int) -> None:
        """Set the overall brightness, 0-255."""
        if not 0 <= brightness <= 255:
            raise ValueError(f"brightness out of range 0-255: {brightness}")
        self.brightness = brightness

    def show(self) -> None:
        """Latch the current colours onto the LEDs."""
        self.shown = list(self.colors)
        self.show_count += 1

    def clear(self) -> None:
        """Set every LED's colour to black."""
        self.colors = [0] * self.size


class PixelBuffer:
    """Colours for every pixel of a sign, written to a strip by display_pixels()."""

    def __init__(
        self,
        layout: PixelLayout,
        strip: Optional[Strip] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._layout = layout
        self._buffer_size: int = layout.buffer_size  # type: ignore[assignment]
        self._rng = rng if rng is not None else random.Random()
        self._stopped = False
        self.digits_to_left = 0
        self.digits_to_right = 0
        self.cols_to_left = 0
        self.cols_to_right = 0

        row_count = len(layout.rows)
        column_count = len(layout.columns)
        self._pixel_map: list[list[int]] = [[NO_PIXEL] * column_count for _ in range(row_count)]
        self._color_map: list[list[int]] = [[0] * column_count for _ in range(row_count)]
        self._build_pixel_map()

        self._colors: list[int] = [0] * self._buffer_size
        self._strip: Strip = strip if strip is not None else MemoryStrip(self._buffer_size)
        self._strip.clear()

    def _build_pixel_map(self) -> None:
        first_row: dict[int, int] = {}
        for row, pixels in enumerate(self._layout.rows):
            for pixel in pixels:
                first_row.setdefault(pixel, row)
        first_column: dict[int, int] = {}
        for column, pixels in enumerate(self._layout.columns):
            for pixel in pixels:
                first_column.setdefault(pixel, column)
        for pixel in range(self._layout.pixel_count):
            if pixel in first_row and pixel in first_column:
                self.set_row_and_column_for_pixel(pixel, first_row[pixel], first_column[pixel])

    def set_row_and_column_for_pixel(self, pixel: int, row: int, column: int) -> None:
        """Place a pixel at a row and column of the map; positions off the map are ignored."""
        if 0 <= row < len(self._pixel_map) and 0 <= column < len(self._pixel_map[row]):
            self._pixel_map[row][column] = pixel

    def clear_buffer(self) -> None:
        """Set every buffered colour to black without touching the strip."""
        self._colors = [0] * self._buffer_size

    def stop(self) -> None:
        """Stop sending the buffer to the strip."""
        self._stopped = True

    def resume(self) -> None:
        """Resume sending the buffer to the strip."""
        self._stopped = False

    def display_pixels(self) -> None:
        """Send the buffer to the strip and show it, unless stopped."""
        if self._stopped:
            return
        for index, value in enumerate(self._colors):
            self._strip.set_pixel_color(index, value)
        self._strip.show()

    def column_count(self) -> int:
        """Number of columns in the layout."""
        return len(self._layout.columns)

    def row_count(self) -> int:
        """Number of rows in the layout."""
        return len(self._layout.rows)

    def digit_count(self) -> int:
        """Number of digits in the layout."""
        return len(self._layout.digits)

    def pixel_count(self) -> int:
        """Number of real pixels on the sign."""
        return self._layout.pixel_count

    def set_brightness(self, brightness: int) -> None:
        """Set the strip's brightness."""
        self._strip.set_brightness(brightness)

    def set_pixel(self, pixel: int, color: int) -> None:
        """Set one buffered pixel; indices outside the buffer are ignored."""
        if 0 <= pixel < self._buffer_size:
            self._colors[pixel] = color

    def pixel_color(self, pixel: int) -> int:
        """Buffered colour of one pixel."""
        if not 0 <= pixel < self._buffer_size:
            raise IndexError(f"pixel {pixel} outside buffer of {self._buffer_size}")
        return self._colors[pixel]

    def set_row_color(self, row: int, new_color: int) -> None:
        """Colour every mapped pixel in a row."""
        if not 0 <= row < self.row_count():
            return
        for column in range(self.column_count()):
            self.set_color_in_pixel_map(row, column, new_color)

    def set_column_color(self, column: int, new_color: int) -> None:
        """Colour every mapped pixel in a column."""
        if not 0 <= column < self.column_count():
            return
        for row in range(self.row_count()):
            self.set_color_in_pixel_map(row, column, new_color)

    def fill(self, new_color: int) -> None:
        """Colour the whole buffer."""
        self._colors = [new_color] * self._buffer_size

    def fill_randomly(self, new_color: int, number_of_pixels: int) -> None:
        """Colour randomly chosen real pixels, one draw per requested pixel."""
        if self._layout.pixel_count == 0:
            return
        for _ in range(number_of_pixels):
            self._colors[self._rng.randrange(self._layout.pixel_count)] = new_color

    def shift_pixels_right(self, new_color: int) -> None:
        """Move every buffered colour one place up and put the new colour first."""
        if not self._colors:
            return
        self._colors[1:] = self._colors[:-1]
        self._colors[0] = new_color

    def shift_pixels_left(self, new_color: int) -> None:
        """Move every buffered colour one place down and put the new colour on the last real pixel."""
        if not self._colors:
            return
        self._colors[:-1] = self._colors[1:]
        if self._layout.pixel_count:
            self._colors[self._layout.pixel_count - 1] = new_color

    def shift_columns_right(self, new_color: int, starting_column: Optional[int] = None) -> None:
        """Shift columns one place right, filling the first (or starting) column with the new colour."""
        if starting_column is not None:
            self._shift_blocks_right(self._layout.columns, new_color, starting_column)
            return
        columns = self.column_count()
        if not columns:
            return
        for row, colors in enumerate(self._color_map):
            for column in range(columns - 1, 0, -1):
                self.set_color_in_pixel_map(row, column, colors[column - 1])
            self.set_color_in_pixel_map(row, 0, new_color)

    def shift_columns_left(self, new_color: int, starting_column: Optional[int] = None) -> None:
        """Shift columns one place left, filling the last (or starting) column with the new colour."""
        if starting_column is not None:
            self._shift_blocks_left(self._layout.columns, new_color, starting_column)
            return
        columns = self.column_count()
        if not columns:
            return
        for row, colors in enumerate(self._color_map):
            for column in range(columns - 1):
                self.set_color_in_pixel_map(row, column, colors[column + 1])
            self.set_color_in_pixel_map(row, columns - 1, new_color)

    def shift_rows_up(self, new_color: int, starting_row: Optional[int] = None) -> None:
        """Shift rows one place up, filling the bottom (or starting) row with the new colour."""
        if starting_row is not None:
            self._shift_blocks_left(self._layout.rows, new_color, starting_row)
            return
        rows = self.row_count()
        if not rows:
            return
        for column in range(self.column_count()):
            for row in range(rows - 1):
                self.set_color_in_pixel_map(row, column, self._color_map[row + 1][column])
            self.set_color_in_pixel_map(rows - 1, column, new_color)

    def shift_rows_down(self, new_color: int, starting_row: Optional[int] = None) -> None:
        """Shift rows one place down, filling the top (or starting) row with the new colour."""
        if starting_row is not None:
            self._shift_blocks_right(self._layout.rows, new_color, starting_row)
            return
        rows = self.row_count()
        if not rows:
            return
        for column in range(self.column_count()):
            for row in range(rows - 1, 0, -1):
                self.set_color_in_pixel_map(row, column, self._color_map[row - 1][column])
            self.set_color_in_pixel_map(0, column, new_color)

    def shift_digits_right(self, new_color: int) -> None:
        """Shift digit colours one place right, filling the leftmost digit with the new colour."""
        self._shift_blocks_right(self._layout.digits, new_color, 0)

    def _shift_blocks_right(self, blocks: Sequence[Block], new_color: int, start: int) -> None:
        for index in range(len(blocks) - 1, start, -1):
            source, destination = blocks[index - 1], blocks[index]
            if not source or not destination:
                continue
            self._color_block(destination, self._colors[source[0]])
        if 0 <= start < len(blocks):
            self._color_block(blocks[start], new_color)

    def _shift_blocks_left(self, blocks: Sequence[Block], new_color: int, start: int) -> None:
        for index in range(start):
            source, destination = blocks[index + 1], blocks[index]
            self._color_block(destination, self._colors[source[0]])
        if 0 <= start < len(blocks):
            self._color_block(blocks[start], new_color)

    def _color_block(self, pixels: Iterable[int], new_color: int) -> None:
        for pixel in pixels:
            self._colors[pixel] = new_color

    def set_color_in_pixel_map(self, row: int, column: int, color: int) -> None:
        """Colour the map cell at a row and column, and the pixel placed there if any."""
        if not 0 <= row < len(self._color_map) or not 0 <= column < len(self._color_map[row]):
            return
        self._color_map[row][column] = color
        pixel = self._pixel_map[row][column]
        if pixel != NO_PIXEL:
            self._colors[pixel] = color

    def rows(self) -> tuple[Block, ...]:
        """Pixels of every row, top first."""
        return self._layout.rows

    def columns(self) -> tuple[Block, ...]:
        """Pixels of every column, left first."""
        return self._layout.columns

    def rows_for_digit(self, digit: int) -> list[list[int]]:
        """For each row, the pixels of that row that belong to the digit."""
        if not 0 <= digit < self.digit_count():
            return []
        in_digit = set(self._layout.digits[digit])
        return [[pixel for pixel in row if pixel in in_digit] for row in self._layout.rows]