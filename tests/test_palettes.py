import pytest

from picogb.palettes import (
    DMG_PALETTE,
    Palette,
    get_colour_palette,
    known_palette_keys,
)

DMG_ROW = (0xDFEA, 0xAE68, 0x74E6, 0x4388)


def test_dmg_palette_is_four_greens_on_every_row():
    palette = get_colour_palette(0xFF, 0xFF)
    assert palette.rows() == (DMG_ROW, DMG_ROW, DMG_ROW)


def test_unknown_key_falls_back_to_dmg():
    assert get_colour_palette(0x1D, 0x00) == DMG_PALETTE
    assert get_colour_palette(0x00, 0x00) == DMG_PALETTE


def test_pinned_entry_from_table():
    palette = get_colour_palette(0x01, 0x05)
    assert palette.obj0 == (0xFE28, 0xFEA0, 0x91C0, 0x4800)
    assert palette.obj1 == (0xFFFF, 0xFC30, 0x91C7, 0x0000)
    assert palette.bg == (0xFFF3, 0x95BF, 0x64AE, 0x01C7)


@pytest.mark.parametrize("key", known_palette_keys())
def test_every_known_palette_is_well_formed(key):
    palette = get_colour_palette(*key)
    rows = palette.rows()
    assert len(rows) == 3
    for row in rows:
        assert len(row) == 4
        assert all(0 <= value <= 0xFFFF for value in row)


@pytest.mark.parametrize("key", [k for k in known_palette_keys() if k[1] == 0x00])
def test_flags_zero_use_one_row_everywhere(key):
    palette = get_colour_palette(*key)
    assert palette.obj0 == palette.obj1 == palette.bg


@pytest.mark.parametrize("key", [k for k in known_palette_keys() if k[1] == 0x03])
def test_flags_three_share_object_rows(key):
    palette = get_colour_palette(*key)
    assert palette.obj0 == palette.obj1


@pytest.mark.parametrize("key", [k for k in known_palette_keys() if k[1] == 0x01])
def test_flags_one_share_obj1_with_background(key):
    palette = get_colour_palette(*key)
    assert palette.obj1 == palette.bg


@pytest.mark.parametrize(
    "key", [k for k in known_palette_keys() if k[1] in (0x02, 0x04)]
)
def test_flags_two_and_four_share_obj0_with_background(key):
    palette = get_colour_palette(*key)
    assert palette.obj0 == palette.bg


def test_colour_matches_rows():
    palette = get_colour_palette(0x09, 0x05)
    for index, row in enumerate(palette.rows()):
        for shade, value in enumerate(row):
            assert palette.colour(index, shade) == value


def test_colour_picks_background_row():
    palette = get_colour_palette(0x0A, 0x03)
    assert palette.colour(2, 0) == 0xB5BF
    assert palette.colour(0, 3) == 0x91C7


@pytest.mark.parametrize("index, shade", [(3, 0), (-1, 0), (0, 4), (0, -1)])
def test_colour_out_of_range_raises(index, shade):
    palette = get_colour_palette(0x05, 0x00)
    with pytest.raises(IndexError):
        palette.colour(index, shade)


def test_palette_is_immutable():
    palette = Palette(DMG_ROW, DMG_ROW, DMG_ROW)
    with pytest.raises(AttributeError):
        palette.bg = (0, 0, 0, 0)
    assert palette == DMG_PALETTE