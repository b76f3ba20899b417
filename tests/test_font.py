import string

import pytest

from picogb.font import glyph, render_letter


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_letters_are_case_insensitive(letter):
    assert glyph(letter) == glyph(letter.upper())


def test_glyph_a_rows():
    assert glyph("A") == (
        0b00111100, 0b01100110, 0b01100110, 0b01111110,
        0b01100110, 0b01100110, 0b01100110, 0b00000000,
    )


def test_glyph_comma_descends_to_last_row():
    assert glyph(",")[7] == 0b00110000


def test_brackets_share_glyphs():
    assert glyph("(") == glyph("[") == glyph("{")
    assert glyph(")") == glyph("]") == glyph("}")
    assert glyph("(") != glyph(")")


@pytest.mark.parametrize("char", ["?", " ", "@", "#", "\u00e9"])
def test_unknown_characters_are_blank(char):
    assert glyph(char) == (0,) * 8


@pytest.mark.parametrize("char", list(string.ascii_letters + string.digits))
def test_known_glyphs_are_not_blank(char):
    assert any(glyph(char))
    assert len(glyph(char)) == 8
    assert all(0 <= row <= 0xFF for row in glyph(char))


@pytest.mark.parametrize("bad", ["", "ab"])
def test_glyph_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        glyph(bad)


def test_render_letter_first_row_of_a():
    pixels = render_letter("A", 0xFFFF, 0x0000)
    assert pixels[:8] == [0x0000, 0x0000, 0xFFFF, 0xFFFF,
                          0xFFFF, 0xFFFF, 0x0000, 0x0000]


@pytest.mark.parametrize("char", list("AbK&9-.!'x"))
def test_render_counts_match_glyph_bits(char):
    pixels = render_letter(char, 0xF800, 0x001F)
    assert len(pixels) == 64
    assert set(pixels) <= {0xF800, 0x001F}
    lit = sum(bin(row).count("1") for row in glyph(char))
    assert pixels.count(0xF800) == lit


def test_render_round_trips_to_glyph():
    pixels = render_letter("W", 0xFFFF, 0x0000)
    rows = tuple(
        int("".join("1" if p == 0xFFFF else "0" for p in pixels[y * 8:y * 8 + 8]), 2)
        for y in range(8)
    )
    assert rows == glyph("W")


def test_render_unknown_is_all_background():
    assert render_letter("?", 0xFFFF, 0xF800) == [0xF800] * 64


def test_render_last_row_of_letters_is_background():
    pixels = render_letter("Z", 0xFFFF, 0x0000)
    assert pixels[56:] == [0x0000] * 8