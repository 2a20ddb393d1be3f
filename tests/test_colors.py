import pytest

from solong.colors import ChannelLayout, lookup_color, parse_color, pack_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("GhostWhite") == 0xF8F8FF


def test_lookup_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_with_suffix_joins_with_space():
    assert lookup_color("ghost", "white") == lookup_color("ghost white")
    assert lookup_color("medium", "blue") == 0xCD


def test_lookup_unknown_gives_none():
    assert lookup_color("no such colour") is None


def test_none_name_is_transparent_marker():
    assert parse_color("None") == -1
    assert parse_color("none") == -1


def test_parse_hex_spec():
    assert parse_color("#FF00FF") == 0xFF00FF
    assert parse_color("#00ff00") == 0xFF00
    assert parse_color("#000000") == 0


def test_parse_hex_ignores_trailing_garbage():
    assert parse_color("#ff00zz") == 0xFF00


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hex_ignores_suffix():
    assert parse_color("#0000ff", "white") == 0xFF


def test_parse_unknown_name_is_zero():
    assert parse_color("definitely-not-a-colour") == 0


def test_parse_name_matches_lookup():
    for name in ("tomato", "orchid4", "grey100", "dodgerblue3"):
        assert parse_color(name) == lookup_color(name)


def test_parse_name_with_suffix():
    assert parse_color("sky", "blue") == 0x87CEEB


def test_overlong_name_is_not_found():
    assert parse_color("red" + "x" * 100, "blue") == 0


def test_deep_visual_keeps_colour():
    assert pack_color(0x123456, 24) == 0x123456
    assert pack_color(0xABCDEF, 32, None) == 0xABCDEF


def test_narrow_visual_needs_layout():
    with pytest.raises(ValueError):
        pack_color(0xFF0000, 16)


def test_layout_from_24_bit_masks():
    layout = ChannelLayout.from_masks(0xFF0000, 0xFF00, 0xFF)
    assert layout == ChannelLayout(16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize("color", [0x0, 0xFFFFFF, 0x123456, 0xFF0000, 0xFF, 0xA0522D])
def test_full_width_layout_round_trips(color):
    layout = ChannelLayout.from_masks(0xFF0000, 0xFF00, 0xFF)
    assert pack_color(color, 16, layout) == color


def test_rgb565_white_fills_all_bits():
    layout = ChannelLayout.from_masks(0xF800, 0x07E0, 0x001F)
    assert pack_color(0xFFFFFF, 16, layout) == 0xF800 | 0x07E0 | 0x001F
    assert pack_color(0x0, 16, layout) == 0


def test_rgb565_channels_stay_in_their_masks():
    red_mask, green_mask, blue_mask = 0xF800, 0x07E0, 0x001F
    layout = ChannelLayout.from_masks(red_mask, green_mask, blue_mask)
    assert pack_color(0xFF0000, 16, layout) == red_mask
    assert pack_color(0x00FF00, 16, layout) == green_mask
    assert pack_color(0x0000FF, 16, layout) == blue_mask


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_empty_mask_rejected(masks):
    with pytest.raises(ValueError):
        ChannelLayout.from_masks(*masks)


def test_layout_shifts_and_widths_cover_mask():
    layout = ChannelLayout.from_masks(0xF800, 0x07E0, 0x001F)
    assert layout.red_shift + layout.red_bits == 16
    assert layout.green_shift + layout.green_bits == layout.red_shift
    assert layout.blue_shift + layout.blue_bits == layout.green_shift
    assert layout.blue_shift == 0