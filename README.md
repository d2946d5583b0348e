# signlights

Building blocks for driving an addressable LED sign, with no hardware access built in:

- **Pixel buffers** (`signlights.pixel_buffer`). `PixelLayout` describes which strip indices form each row, column and digit of a sign. `PixelBuffer` holds a colour for every pixel. It can fill the whole buffer, colour rows and columns, shift pixels, rows, columns and digits, and colour random pixels. `display_pixels()` writes the buffer to a strip, unless the buffer has been stopped. `MemoryStrip` is an in-memory strip. Any object with `set_pixel_color`, `set_brightness`, `show` and `clear` can take its place.
- **Pit sign layout** (`signlights.pit_layout.pit_sign_layout`). This is the `PixelLayout` of a four-digit sign with 272 pixels in 17 rows and 54 columns.
- **Predefined styles** (`signlights.predefined_style`):
  - `get_predefined_style` turns a `PredefinedStyles` member into a `PredefinedStyle`. That is a name, a speed and a `PatternData` of colours and parameters.
  - `color(red, green, blue)` packs a 24-bit colour.
  - `PredefinedStyleList` keeps a number of style lists. `get_style` cycles through a list by sequence number. It falls back to solid pink when the list is missing or empty.
- **Push buttons** (`signlights.push_button.PushButton`). This is a debounced, active-low button. It tells apart `NORMAL`, `LONG` and `DOUBLE` presses (`ButtonPressType`). It is driven by a pin-reading callable and a millisecond clock, and you poll it with `update()`.
- **Status display** (`signlights.status_display.StatusDisplay`). It shows text on a four-digit seven-segment display. A dot lights the decimal point of the character before it. Text can be shown in three ways, each with a priority (`DisplayPriority`):
  - `set_display` shows it until cleared.
  - `display_temporary` shows it for a given time.
  - `display_sequence` shows several texts one after another.

  `MemorySegmentDevice` is an in-memory display device.

## Installation

```
pip install .
```

## Example

```python
from signlights.pit_layout import pit_sign_layout
from signlights.pixel_buffer import MemoryStrip, PixelBuffer
from signlights.predefined_style import PredefinedStyles, get_predefined_style

style = get_predefined_style(PredefinedStyles.RED_PINK_RIGHT)
strip = MemoryStrip(272)
buffer = PixelBuffer(pit_sign_layout(), strip)
buffer.fill(style.pattern_data.color1)
buffer.shift_digits_right(style.pattern_data.color2)
buffer.display_pixels()
print(hex(strip.shown[0]))
```

```python
from signlights.status_display import MemorySegmentDevice, StatusDisplay

now = 0
device = MemorySegmentDevice()
display = StatusDisplay(device, 7, lambda: now)
display.display_temporary("A=1.2", 1000)
print(device.segments)
now = 1001
display.update()   # the temporary text has expired and the display is blank
```

## What it does not do

- Only the pit sign has a ready-made layout. For any other sign, build a `PixelLayout` from its rows, columns and digits yourself.
- There is no lookup from a numeric sign type to a layout.
- The package has no records for sign configuration or sign status.
- There is no command-line program. The package is used as a library.
- It does not talk to real LEDs, buttons or displays. Pass your own strip, pin-reading and segment-device objects.

## Tests

```
pip install .[test]
pytest
```