"""RGB565 colour palettes assigned to monochrome Game Boy games.

A palette is a triplet of four-shade rows: OBJ0, OBJ1 and BG. Palettes are
looked up by a table entry ID and a set of shuffling flags, the same pair the
Game Boy Color boot ROM uses to colour original Game Boy titles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Row = tuple[int, int, int, int]

NUMBER_OF_MANUAL_PALETTES = 13


@dataclass(frozen=True)
class Palette:
    """Three rows of four RGB565 shades: OBJ0, OBJ1 and BG."""

    obj0: Row
    obj1: Row
    bg: Row

    def rows(self) -> tuple[Row, Row, Row]:
        """Return the rows in order OBJ0, OBJ1, BG."""
        return (self.obj0, self.obj1, self.bg)

    def colour(self, index: int, shade: int) -> int:
        """Return the RGB565 colour of a shade (0-3) in a row (0-2)."""
        if not 0 <= index < 3:
            raise IndexError(f"palette row {index} out of range 0..2")
        if not 0 <= shade < 4:
            raise IndexError(f"palette shade {shade} out of range 0..3")
        return self.rows()[index][shade]


# Rows shared between several palette configurations.
_FB80: Row = (0xFFFF, 0xFB80, 0x9200, 0x0000)
_AD70: Row = (0xFFFF, 0xAD70, 0x438F, 0x0000)
_5DFF: Row = (0xFFFF, 0x5DFF, 0xF800, 0x001F)
_FE28: Row = (0xFE28, 0xFEA0, 0x91C0, 0x4800)
_FC30: Row = (0xFFFF, 0xFC30, 0x91C7, 0x0000)
_653F_TOP: Row = (0xFFFF, 0xFFFF, 0x653F, 0x001F)
_FD6C: Row = (0xFFFF, 0xFD6C, 0x8180, 0x0000)
_57E0: Row = (0xFFFF, 0x57E0, 0xFA00, 0x0000)
_FCE0: Row = (0xFFFF, 0xFCE0, 0xF800, 0x0000)
_FFE0: Row = (0xFFFF, 0xFFE0, 0xF800, 0x0000)
_A4FF: Row = (0xA4FF, 0xFFE0, 0x0300, 0x0000)
_FB0A: Row = (0xFB0A, 0xD000, 0x6000, 0x0000)
_653F: Row = (0xFFFF, 0x653F, 0x001F, 0x0000)
_0000_FC30: Row = (0x0000, 0xFFFF, 0xFC30, 0x91C7)
_8C7B: Row = (0xFFFF, 0x8C7B, 0x5291, 0x0000)
_7FE6: Row = (0xFFFF, 0x7FE6, 0x0420, 0x0000)
_0318: Row = (0xFFFF, 0x7FE6, 0x0318, 0x0000)
_DMG: Row = (0xDFEA, 0xAE68, 0x74E6, 0x4388)

DMG_PALETTE = Palette(_DMG, _DMG, _DMG)
"""The original Game Boy palette: four shades of green."""


def _same(row: Row) -> Palette:
    return Palette(row, row, row)


_PALETTES: dict[tuple[int, int], Palette] = {
    (0x00, 0x01): Palette(_FB80, _AD70, _AD70),
    (0x00, 0x03): Palette(_FB80, _FB80, _AD70),
    (0x00, 0x05): Palette(_FB80, _5DFF, _AD70),
    (0x01, 0x05): Palette(_FE28, _FC30, (0xFFF3, 0x95BF, 0x64AE, 0x01C7)),
    (0x02, 0x05): Palette(_653F_TOP, _FD6C, (0x6FE0, 0xFFFF, 0xFA89, 0x0000)),
    (0x03, 0x05): Palette(_653F_TOP, _FC30, (0x56E0, 0xFC20, 0xFFE0, 0xFFFF)),
    (0x04, 0x03): Palette(_FC30, _FC30, (0xFFFF, 0x7FE0, 0xB380, 0x0000)),
    (0x05, 0x00): _same(_57E0),
    (0x05, 0x03): Palette(_FC30, _FC30, _57E0),
    (0x05, 0x04): Palette(_57E0, _5DFF, _57E0),
    (0x06, 0x00): _same(_FCE0),
    (0x06, 0x03): Palette(_FC30, _FC30, _FCE0),
    (0x06, 0x04): Palette(_FCE0, _5DFF, _FCE0),
    (0x07, 0x00): _same(_FFE0),
    (0x07, 0x04): Palette(_FFE0, _5DFF, _FFE0),
    (0x08, 0x00): _same(_A4FF),
    (0x08, 0x03): Palette(_FB0A, _FB0A, _A4FF),
    (0x08, 0x05): Palette(_FB0A, (0x001F, 0xFFFF, 0xFFEF, 0x043F), _A4FF),
    (0x09, 0x05): Palette(_FB80, _653F, (0xFFF9, 0x677D, 0x9C26, 0x5ACB)),
    (0x0A, 0x03): Palette(_0000_FC30, _0000_FC30, (0xB5BF, 0xFFF2, 0xAAC8, 0x0000)),
    (0x0B, 0x01): Palette(_FC30, _653F, _653F),
    (0x0B, 0x02): Palette(_653F, _FC30, _653F),
    (0x0B, 0x05): Palette(_FC30, (0xFFFF, 0xFFEF, 0x043F, 0xF800), _653F),
    (0x0C, 0x02): Palette(_8C7B, _FE28, _8C7B),
    (0x0C, 0x03): Palette(_FE28, _FE28, _8C7B),
    (0x0C, 0x05): Palette(_FE28, _5DFF, _8C7B),
    (0x0D, 0x01): Palette(_FC30, _8C7B, _8C7B),
    (0x0D, 0x03): Palette(_FC30, _FC30, _8C7B),
    (0x0D, 0x05): Palette(_FC30, _FD6C, _8C7B),
    (0x0E, 0x03): Palette(_FC30, _FC30, _7FE6),
    (0x0E, 0x05): Palette(_FC30, _653F, _7FE6),
    (0x0F, 0x03): Palette(_653F, _653F, _FD6C),
    (0x0F, 0x05): Palette(_653F, _7FE6, _FD6C),
    (0x10, 0x01): Palette(_7FE6, _FC30, _FC30),
    (0x10, 0x05): Palette(_7FE6, _653F, _FC30),
    (0x11, 0x05): Palette((0xFFFF, 0x07E0, 0x3420, 0x0240), _653F, _FC30),
    (0x12, 0x00): _same(_FD6C),
    (0x12, 0x03): Palette(_7FE6, _7FE6, _FD6C),
    (0x12, 0x05): Palette(_7FE6, _653F, _FD6C),
    (0x13, 0x00): _same((0x0000, 0x0430, 0xFEE0, 0xFFFF)),
    (0x14, 0x05): Palette((0xFFE0, 0xF800, 0x6000, 0x0000), _7FE6, _653F),
    (0x15, 0x05): Palette(_FD6C, _653F, _AD70),
    (0x16, 0x00): _same((0xB634, 0x8CCF, 0x63AA, 0x31C4)),
    (0x17, 0x00): _same((0xFFF4, 0xFCB2, 0x94BF, 0x0000)),
    (0x18, 0x05): Palette(_FC30, _7FE6, _653F),
    (0x19, 0x03): Palette(_FD6C, _FD6C, (0xFF38, 0xCCF0, 0x8345, 0x5981)),
    (0x1A, 0x05): Palette(_653F, _7FE6, (0xFFFF, 0xFFE0, 0x7A40, 0x0000)),
    (0x1B, 0x00): _same((0xFFFF, 0xFE60, 0x9B00, 0x0000)),
    (0x1C, 0x01): Palette(_FC30, _0318, _0318),
    (0x1C, 0x03): Palette(_FC30, _FC30, _0318),
    (0x1C, 0x05): Palette(_FC30, _653F, _0318),
    (0xFF, 0xFF): DMG_PALETTE,
}


def get_colour_palette(table_entry: int, shuffling_flags: int) -> Palette:
    """Return the palette for an entry ID and shuffling flags.

    Unknown combinations fall back to the original green DMG palette.
    """
    logger.info(
        "get_colour_palette(table_entry=0x%02X, shuffling_flags=0x%02X)",
        table_entry,
        shuffling_flags,
    )
    try:
        return _PALETTES[(table_entry, shuffling_flags)]
    except KeyError:
        logger.error(
            "no palette found for table_entry=0x%02X shuffling_flags=0x%02X",
            table_entry,
            shuffling_flags,
        )
        return DMG_PALETTE


def known_palette_keys() -> tuple[tuple[int, int], ...]:
    """Return every (table_entry, shuffling_flags) pair with its own palette."""
    return tuple(_PALETTES)