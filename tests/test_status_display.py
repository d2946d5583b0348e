import pytest

from signlights.status_display import DOT, DisplayPriority, MemorySegmentDevice, StatusDisplay


class Clock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def setup():
    device = MemorySegmentDevice()
    clock = Clock()
    display = StatusDisplay(device, 5, clock)
    return device, clock, display


def test_init_sets_brightness_and_blank(setup):
    device, _, display = setup
    assert device.brightness == 5
    assert device.segments == [0, 0, 0, 0]
    assert display.priority == DisplayPriority.NONE


def test_brightness_out_of_range():
    with pytest.raises(ValueError):
        MemorySegmentDevice().set_brightness(8)


def test_encode_digit_eight():
    assert MemorySegmentDevice().encode_digit(8) == 0x7F


def test_set_display_with_dot_and_equals(setup):
    device, _, display = setup
    display.set_display("A=1.2")
    enc = device.encode_digit
    assert device.segments == [enc(10), 0b01001000, enc(1) | DOT, enc(2)]
    assert display.priority == DisplayPriority.AD_HOC


def test_dots_on_blank_digits(setup):
    device, _, display = setup
    display.set_display(" . . . .")
    assert device.segments == [DOT] * 4


def test_extra_characters_ignored_and_unknown_blank(setup):
    device, _, display = setup
    display.set_display("-x9f77")
    enc = device.encode_digit
    assert device.segments == [0b01000000, 0, enc(9), enc(15)]


def test_short_text_padded(setup):
    device, _, display = setup
    display.set_display("c")
    assert device.segments == [device.encode_digit(12), 0, 0, 0]


def test_temporary_clears_after_duration(setup):
    device, clock, display = setup
    display.display_temporary("12", 100)
    assert display.priority == DisplayPriority.EPHEMERAL
    clock.now = 100
    display.update()
    assert device.segments[0] == device.encode_digit(1)
    clock.now = 101
    display.update()
    assert device.segments == [0, 0, 0, 0]
    assert display.priority == DisplayPriority.NONE


def test_ad_hoc_blocks_temporary_and_sequence(setup):
    device, clock, display = setup
    display.set_display("1")
    display.display_temporary("2", 10)
    display.display_sequence(["3"], 10)
    clock.now = 1000
    display.update()
    assert device.segments[0] == device.encode_digit(1)
    assert display.priority == DisplayPriority.AD_HOC


def test_sequence_advances_then_clears(setup):
    device, clock, display = setup
    display.display_sequence(["1", "2", "3"], 50)
    enc = device.encode_digit
    assert device.segments[0] == enc(1)
    clock.now = 51
    display.update()
    assert device.segments[0] == enc(2)
    clock.now = 80
    display.update()
    assert device.segments[0] == enc(2)
    clock.now = 102
    display.update()
    assert device.segments[0] == enc(3)
    clock.now = 153
    display.update()
    assert device.segments == [0, 0, 0, 0]
    assert display.priority == DisplayPriority.NONE


def test_sequence_blocks_temporary(setup):
    device, _, display = setup
    display.display_sequence(["1", "2"], 50)
    display.display_temporary("8", 10)
    assert device.segments[0] == device.encode_digit(1)
    assert display.priority == DisplayPriority.SEQUENCE


def test_empty_sequence_leaves_state(setup):
    device, _, display = setup
    display.display_temporary("4", 10)
    display.display_sequence([], 10)
    assert display.priority == DisplayPriority.EPHEMERAL
    assert device.segments[0] == device.encode_digit(4)


def test_clear_releases_ad_hoc(setup):
    device, _, display = setup
    display.set_display("5")
    display.clear()
    assert display.priority == DisplayPriority.NONE
    display.display_temporary("6", 10)
    assert device.segments[0] == device.encode_digit(6)