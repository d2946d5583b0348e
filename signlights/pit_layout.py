"""Pixel layout of the four-digit pit sign."""

from __future__ import annotations

from signlights.pixel_buffer import PixelLayout

_PIT_PIXEL_COUNT = 272

_PIT_COLUMNS = (
    (3, 75),
    (0, 6, 72, 78),
    (4, 9, 69, 76),
    (1, 7, 12, 66, 73, 79),
    (5, 10, 70, 77),
    (2, 8, 13, 67, 74, 80),
    (11, 39, 71),
    (14, 68),
    (40,),
    (15, 63),
    (18, 36, 41, 42, 60),
    (16, 21, 27, 33, 45, 51, 57, 64),
    (19, 24, 30, 37, 43, 48, 54, 61),
    (17, 22, 28, 34, 46, 52, 58, 65),
    (20, 25, 31, 38, 44, 49, 55, 62),
    (23, 29, 35, 47, 53, 59),
    (26, 32, 50, 56),
    (114,),
    (115,),
    (120,),
    (116,),
    (121,),
    (117, 125),
    (81, 86, 91, 96, 101, 106, 111, 122, 128),
    (84, 89, 94, 99, 104, 109, 118, 126),
    (82, 87, 92, 97, 102, 107, 112, 123, 129),
    (85, 90, 95, 100, 105, 110, 119, 127),
    (83, 88, 93, 98, 103, 108, 113, 124, 130),
    (133, 139, 144, 161, 166, 171),
    (137, 142, 147, 158, 164, 169),
    (134, 140, 145, 150, 155, 162, 167, 172),
    (131, 138, 143, 148, 159, 165, 170, 175),
    (135, 141, 146, 151, 156, 163, 168, 173),
    (149, 153, 160),
    (132, 136, 152, 157, 174, 176),
    (154,),
    (177, 179, 196, 200, 216, 221),
    (193, 199, 203),
    (180, 185, 190, 197, 201, 206, 211, 217),
    (178, 183, 188, 194, 204, 209, 214, 220),
    (181, 186, 191, 198, 202, 207, 212, 218),
    (184, 189, 195, 205, 210, 215),
    (182, 187, 192, 208, 213, 219),
    (255,),
    (256,),
    (261,),
    (257,),
    (262,),
    (258, 266),
    (222, 227, 232, 237, 242, 247, 252, 263, 269),
    (225, 230, 235, 240, 245, 250, 259, 267),
    (223, 228, 233, 238, 243, 248, 253, 264, 270),
    (226, 231, 236, 241, 246, 251, 260, 268),
    (224, 229, 234, 239, 244, 249, 254, 265, 271),
)

_PIT_ROWS = (
    (63, 64, 65, 66, 67, 68, 128, 129, 130, 131, 132, 220, 221, 269, 270, 271),
    (60, 61, 62, 69, 70, 71, 125, 126, 127, 133, 134, 135, 136, 216, 217, 218, 219, 266, 267,
     268),
    (57, 58, 59, 72, 73, 74, 120, 121, 122, 123, 124, 137, 138, 214, 215, 261, 262, 263, 264,
     265),
    (54, 55, 56, 75, 76, 77, 114, 115, 116, 117, 118, 119, 139, 140, 141, 211, 212, 213, 255,
     256, 257, 258, 259, 260),
    (51, 52, 53, 78, 79, 80, 111, 112, 113, 142, 143, 209, 210, 252, 253, 254),
    (48, 49, 50, 109, 110, 144, 145, 146, 206, 207, 208, 250, 251),
    (45, 46, 47, 106, 107, 108, 147, 148, 149, 203, 204, 205, 247, 248, 249),
    (42, 43, 44, 104, 105, 150, 151, 152, 200, 201, 202, 245, 246),
    (39, 40, 41, 101, 102, 103, 153, 154, 199, 242, 243, 244),
    (36, 37, 38, 99, 100, 155, 156, 157, 196, 197, 198, 240, 241),
    (33, 34, 35, 96, 97, 98, 158, 159, 160, 193, 194, 195, 237, 238, 239),
    (30, 31, 32, 94, 95, 161, 162, 163, 190, 191, 192, 235, 236),
    (0, 1, 2, 27, 28, 29, 91, 92, 93, 164, 165, 188, 189, 232, 233, 234),
    (3, 4, 5, 24, 25, 26, 89, 90, 166, 167, 168, 185, 186, 187, 230, 231),
    (6, 7, 8, 21, 22, 23, 86, 87, 88, 169, 170, 183, 184, 227, 228, 229),
    (9, 10, 11, 18, 19, 20, 84, 85, 171, 172, 173, 174, 179, 180, 181, 182, 225, 226),
    (12, 13, 14, 15, 16, 17, 81, 82, 83, 175, 176, 177, 178, 222, 223, 224),
)

# Digits left to right: "3", "1", "8", "1".
_PIT_DIGIT_STARTS = (0, 81, 131, 222, _PIT_PIXEL_COUNT)


def pit_sign_layout() -> PixelLayout:
    """Layout of the pit sign: 272 pixels in 17 rows, 54 columns and 4 digits."""
    digits = tuple(
        tuple(range(start, end))
        for start, end in zip(_PIT_DIGIT_STARTS, _PIT_DIGIT_STARTS[1:])
    )
    return PixelLayout(
        pixel_count=_PIT_PIXEL_COUNT,
        rows=_PIT_ROWS,
        columns=_PIT_COLUMNS,
        digits=digits,
        buffer_size=_PIT_PIXEL_COUNT,
    )