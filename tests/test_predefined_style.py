import pytest

from signlights.predefined_style import (
    ColorPatternType,
    DisplayPatternType,
    PatternData,
    PredefinedStyle,
    PredefinedStyleList,
    PredefinedStyles,
    color,
    get_predefined_style,
)


def test_color_pink_matches_documented_hex():
    assert color(230, 22, 161) == 0xE616A1


@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (12, 200, 7), (255, 180, 0)])
def test_color_components_round_trip(rgb):
    packed = color(*rgb)
    assert ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF) == rgb


@pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_color_rejects_out_of_range(rgb):
    with pytest.raises(ValueError):
        color(*rgb)


def test_pink_solid_style():
    style = get_predefined_style(PredefinedStyles.PINK_SOLID)
    assert style.name == "Solid Pink"
    assert style.speed == 1
    assert style.pattern_data.color_pattern is ColorPatternType.SINGLE_COLOR
    assert style.pattern_data.display_pattern is DisplayPatternType.SOLID
    assert style.pattern_data.color1 == color(230, 22, 161)


def test_red_pink_right_style():
    style = get_predefined_style(PredefinedStyles.RED_PINK_RIGHT)
    assert style.name == "Red-Pink"
    assert style.speed == 220
    data = style.pattern_data
    assert data.color1 == color(255, 0, 0)
    assert data.color2 == color(230, 22, 161)
    assert (data.param1, data.param2) == (70, 75)


def test_playoff_blue_uses_four_colors():
    data = get_predefined_style(PredefinedStyles.PLAYOFF_BLUE).pattern_data
    assert data.color_pattern is ColorPatternType.BACKGROUND_PLUS_THREE
    assert data.color4 == color(0, 200, 0)
    assert (data.param1, data.param2, data.param3, data.param4) == (255, 80, 80, 80)


def test_fire_style():
    style = get_predefined_style(PredefinedStyles.FIRE)
    assert style.name == "Fire"
    assert style.speed == 200
    assert style.pattern_data.display_pattern is DisplayPatternType.FIRE
    assert (style.pattern_data.param1, style.pattern_data.param2) == (75, 100)


def test_playoff_red_falls_back_to_default():
    assert get_predefined_style(PredefinedStyles.PLAYOFF_RED) == get_predefined_style(
        PredefinedStyles.PINK_SOLID
    )


def test_red_pink_variants_keep_their_names():
    assert get_predefined_style(PredefinedStyles.RED_PINK_CENTER_OUT).name == "Blue-Pink Center-Out"
    assert get_predefined_style(PredefinedStyles.RED_PINK_6INCH).name == "Blue-Pink 6inch"


@pytest.mark.parametrize("style_id", list(PredefinedStyles))
def test_every_style_is_valid(style_id):
    style = get_predefined_style(style_id)
    assert 0 <= style.speed <= 255
    assert style.name
    assert isinstance(style.pattern_data, PatternData)


def test_styles_are_independent_copies():
    first = get_predefined_style(PredefinedStyles.RAINBOW_RIGHT)
    first.pattern_data.param1 = 1
    second = get_predefined_style(PredefinedStyles.RAINBOW_RIGHT)
    assert second.pattern_data.param1 == 120


def test_style_equality():
    data = PatternData(color1=5)
    assert PredefinedStyle("x", 3, data) == PredefinedStyle("x", 3, PatternData(color1=5))


def test_list_wraps_sequence_number():
    styles = PredefinedStyleList(2)
    styles.add_style_to_list(0, PredefinedStyles.FIRE)
    styles.add_style_to_list(0, PredefinedStyles.RED_SOLID)
    assert styles.get_style(0, 0).name == "Fire"
    assert styles.get_style(0, 1).name == "Solid Red"
    assert styles.get_style(0, 2).name == "Fire"
    assert styles.get_style(0, 5).name == "Solid Red"


def test_empty_or_missing_list_gives_default():
    styles = PredefinedStyleList(1)
    default = get_predefined_style(PredefinedStyles.PINK_SOLID)
    assert styles.get_style(0, 3) == default
    assert styles.get_style(4, 0) == default


def test_adding_to_missing_list_is_ignored():
    styles = PredefinedStyleList(1)
    styles.add_style_to_list(1, PredefinedStyles.FIRE)
    assert styles.get_style(1, 0) == get_predefined_style(PredefinedStyles.PINK_SOLID)
    assert styles.get_style(0, 0) == get_predefined_style(PredefinedStyles.PINK_SOLID)