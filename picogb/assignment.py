"""Pick a colour palette for a monochrome Game Boy game.

Automatic assignment follows the Game Boy Color boot ROM. It hashes the
cartridge title into a checksum, and the 4th character of the title
separates games that share a checksum. The hash gives an entry ID and
shuffling flags, and those select the palette. Manual assignment lets the
user step through the palettes that the boot ROM offers through button
combinations.
"""

from __future__ import annotations

import logging

from picogb.palettes import Palette, get_colour_palette

logger = logging.getLogger(__name__)

_Key = tuple[int, int]
_Rule = tuple["str | None", _Key]

_DMG_KEY: _Key = (0xFF, 0xFF)

# Each checksum maps to rules tried in order. A rule holds a disambiguation
# character, or None for the rule that applies when no character matches.
_AUTO: dict[int, tuple[_Rule, ...]] = {
    0x00: ((None, (0x1C, 0x03)),),
    0x01: ((None, (0x0F, 0x05)),),
    0x0C: ((None, (0x12, 0x00)),),
    0x0D: (("E", (0x0C, 0x03)), (None, (0x07, 0x04))),
    0x10: ((None, (0x0F, 0x05)),),
    0x14: ((None, (0x10, 0x01)),),
    0x15: ((None, (0x07, 0x00)),),
    0x16: (("M", (0x0D, 0x05)), (None, (0x0C, 0x05))),
    0x17: ((None, (0x0E, 0x05)),),
    0x18: (("I", (0x1C, 0x03)), (None, (0x0C, 0x05))),
    0x19: ((None, (0x06, 0x03)),),
    0x1D: ((None, (0x08, 0x03)),),
    0x27: (("B", (0x08, 0x05)), (None, (0x0E, 0x05))),
    0x28: (("A", (0x13, 0x00)), (None, (0x0E, 0x03))),
    0x29: ((None, (0x0F, 0x05)),),
    0x2B: ((None, (0x0F, 0x05)),),
    0x34: ((None, (0x04, 0x03)),),
    0x35: ((None, (0x12, 0x00)),),
    0x36: ((None, (0x03, 0x05)),),
    0x39: ((None, (0x0F, 0x03)),),
    0x3C: ((None, (0x0B, 0x02)),),
    0x3D: ((None, (0x05, 0x03)),),
    0x3E: ((None, (0x06, 0x04)),),
    0x3F: ((None, (0x1C, 0x03)),),
    0x43: ((None, (0x0F, 0x03)),),
    0x46: (("E", (0x0A, 0x03)), (None, (0x14, 0x05))),
    0x49: ((None, (0x08, 0x05)),),
    0x4B: ((None, (0x0E, 0x03)),),
    0x4E: ((None, (0x0B, 0x05)),),
    0x50: ((None, (0x0C, 0x05)),),
    0x52: ((None, (0x0F, 0x05)),),
    0x58: ((None, (0x16, 0x00)),),
    0x59: ((None, (0x00, 0x05)),),
    0x5C: ((None, (0x08, 0x05)),),
    0x5D: ((None, (0x0F, 0x05)),),
    0x61: (("A", (0x0E, 0x05)), (None, (0x0B, 0x01))),
    0x66: (("E", (0x04, 0x03)), (None, (0x1C, 0x03))),
    0x67: ((None, (0x12, 0x00)),),
    0x68: ((None, (0x0F, 0x05)),),
    0x69: ((None, (0x07, 0x04)),),
    0x6A: (("K", (0x0C, 0x05)), (None, (0x05, 0x03))),
    0x6B: ((None, (0x0C, 0x05)),),
    0x6D: ((None, (0x0F, 0x05)),),
    0x6F: ((None, (0x1B, 0x00)),),
    0x70: ((None, (0x11, 0x05)),),
    0x71: ((None, (0x06, 0x00)),),
    0x75: ((None, (0x12, 0x00)),),
    0x86: ((None, (0x01, 0x05)),),
    0x88: ((None, (0x08, 0x00)),),
    0x8B: ((None, (0x0E, 0x05)),),
    0x8C: ((None, (0x00, 0x01)),),
    0x90: ((None, (0x0E, 0x03)),),
    0x92: ((None, (0x12, 0x00)),),
    0x95: ((None, (0x05, 0x04)),),
    0x97: ((None, (0x0F, 0x03)),),
    0x99: ((None, (0x12, 0x00)),),
    0x9A: ((None, (0x0E, 0x03)),),
    0x9C: ((None, (0x0C, 0x02)),),
    0x9D: ((None, (0x0D, 0x05)),),
    0xA2: ((None, (0x12, 0x05)),),
    0xA5: (("R", (0x12, 0x03)), (None, (0x13, 0x00))),
    0xA8: ((None, (0x01, 0x05)),),
    0xAA: ((None, (0x1C, 0x01)),),
    0xB3: (("U", (0x00, 0x03)), ("R", (0x05, 0x04)), (None, (0x08, 0x05))),
    0xB7: ((None, (0x12, 0x00)),),
    0xBD: ((None, (0x0E, 0x03)),),
    0xBF: (("C", (0x02, 0x05)), (None, (0x0D, 0x03))),
    0xC6: ((" ", (0x1C, 0x03)), (None, (0x00, 0x05))),
    0xC9: ((None, (0x09, 0x05)),),
    0xCE: ((None, (0x02, 0x05)),),
    0xD1: ((None, (0x02, 0x05)),),
    0xD3: (("R", (0x0D, 0x01)), (None, (0x15, 0x05))),
    0xDB: ((None, (0x07, 0x00)),),
    0xE0: ((None, (0x06, 0x04)),),
    0xE8: ((None, (0x13, 0x00)),),
    0xF0: ((None, (0x02, 0x05)),),
    0xF2: ((None, (0x07, 0x04)),),
    0xF4: ((" ", (0x04, 0x03)), (None, (0x1C, 0x05))),
    0xF6: ((None, (0x0F, 0x05)),),
    0xF7: ((None, (0x12, 0x05)),),
    0xFF: ((None, (0x06, 0x00)),),
}

# Manual selections in the order the boot ROM stores them, each with the
# button combination that picks it.
_MANUAL: tuple[_Key, ...] = (
    (0x05, 0x00),  # Right
    (0x07, 0x00),  # A + Down
    (0x12, 0x00),  # Up
    (0x13, 0x00),  # B + Right
    (0x16, 0x00),  # B + Left: Game Boy Pocket greys
    (0x17, 0x00),  # Down
    (0x19, 0x03),  # B + Up
    (0x1C, 0x03),  # A + Right
    (0x0D, 0x05),  # A + Left
    (0x10, 0x05),  # A + Up
    (0x18, 0x05),  # Left
    (0x1A, 0x05),  # B + Down
    _DMG_KEY,  # A + B: original green DMG palette
)


def auto_assign_palette(game_checksum: int, game_title: str) -> Palette:
    """Return the palette for a game, chosen by title checksum and title.

    The 4th character of the title separates games that share a checksum.
    Unknown checksums get the original green DMG palette.
    """
    disambiguation = game_title[3] if len(game_title) > 3 else None
    logger.info("auto_assign_palette(0x%02X, %s)", game_checksum, game_title)
    rules = _AUTO.get(game_checksum)
    if rules is None:
        logger.error(
            "no palette found for checksum 0x%02X", game_checksum
        )
        return get_colour_palette(*_DMG_KEY)
    for character, key in rules:
        if character is None or character == disambiguation:
            return get_colour_palette(*key)
    # Every rule list ends with a catch-all entry.
    return get_colour_palette(*rules[-1][1])


def manual_assign_palette(selection: int) -> Palette:
    """Return the manually selected palette.

    Selections run from 0 to 12; any other value gives the DMG palette.
    """
    logger.info("manual_assign_palette(%d)", selection)
    if 0 <= selection < len(_MANUAL):
        return get_colour_palette(*_MANUAL[selection])
    return get_colour_palette(*_DMG_KEY)