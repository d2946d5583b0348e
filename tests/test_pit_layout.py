import pytest

from signlights.pit_layout import pit_sign_layout
from signlights.pixel_buffer import PixelBuffer


@pytest.fixture
def layout():
    return pit_sign_layout()


def test_pixel_count_and_exact_buffer(layout):
    assert layout.pixel_count == 272
    assert layout.buffer_size == layout.pixel_count


def test_row_and_column_counts(layout):
    assert len(layout.rows) == 17
    assert len(layout.columns) == 54


def test_digits_partition_all_pixels(layout):
    assert len(layout.digits) == 4
    flattened = [pixel for digit in layout.digits for pixel in digit]
    assert flattened == list(range(layout.pixel_count))


def test_digit_boundaries(layout):
    assert [digit[0] for digit in layout.digits] == [0, 81, 131, 222]


def test_every_mapped_pixel_is_real(layout):
    for block in layout.rows + layout.columns:
        assert all(0 <= pixel < layout.pixel_count for pixel in block)


def test_rows_for_digit_only_hold_that_digit(layout):
    buffer = PixelBuffer(layout)
    for digit_index, digit in enumerate(layout.digits):
        rows = buffer.rows_for_digit(digit_index)
        assert len(rows) == len(layout.rows)
        members = set(digit)
        assert all(pixel in members for row in rows for pixel in row)


def test_layout_is_repeatable(layout):
    assert pit_sign_layout() == layout