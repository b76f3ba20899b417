# picogb

Building blocks for the front end of a Game Boy emulator on a small
handheld: colour palettes, palette assignment, an 8x8 bitmap font, save
and ROM file handling, and the logic of the ROM selector and hotkeys.

## Modules

- **`picogb.palettes`**: the RGB565 palette triplets used by the Game Boy
  Color boot ROM. `get_colour_palette(table_entry, shuffling_flags)` returns
  a `Palette`, which holds three rows (`obj0`, `obj1`, `bg`) of four shades.
  `Palette.rows()` returns the three rows and `Palette.colour(index, shade)`
  picks one colour, raising `IndexError` outside rows 0-2 or shades 0-3.
  An unknown pair falls back to `DMG_PALETTE`, four shades of green.
  `known_palette_keys()` lists every `(table_entry, shuffling_flags)` pair
  in the table.
- **`picogb.assignment`**: `auto_assign_palette(game_checksum, game_title)`
  chooses a palette from the title checksum, using the fourth character of
  the title to tell apart games that share a checksum; unknown checksums get
  the DMG palette. `manual_assign_palette(selection)` returns one of the
  thirteen manual palettes (selections 0 to 12); any other value gives the
  DMG palette.
- **`picogb.font`**: an 8x8 bitmap font covering letters (either case),
  digits and a few punctuation marks. `glyph(char)` returns eight row
  bitmasks, blank for characters without a glyph, and raises `ValueError`
  unless given exactly one character. `render_letter(char, color, bgcolor)`
  returns the 64 pixels of a glyph row by row.
- **`picogb.storage`**: files in a directory.
  - `read_cart_ram(directory, rom_name, ram)` copies a save file into the
    start of `ram` and returns the byte count.
  - `write_cart_ram(directory, rom_name, ram, save_size)` writes the first
    `save_size` bytes; it writes nothing and returns 0 when `save_size` is 0.
  - `list_rom_page(directory, page, page_size=22)` returns one page of the
    sorted `.gb` file names (the extension matched in any case).
  - `load_cart_rom(path, sector_size=4096)` returns the file as a flash
    image, the last sector padded with `0xFF`.
  - Unreadable or unwritable files, and save files larger than `ram`,
    raise `StorageError`.
- **`picogb.frontend`**:
  - `Joypad` is the state of the eight buttons; `bits` and `Joypad.from_bits`
    convert to and from the joypad byte, where a 0 bit is a held button.
  - `HotkeyHandler(palette).update(previous, current)` returns the `Action`s
    for buttons newly pressed while SELECT is held: volume up and down,
    stepping through the manual palettes (updating `palette` and
    `manual_selection`), save and exit, and fast-forward.
  - `render_line(pixels, palette)` turns a line of emulator pixels into
    RGB565 colours.
  - `RomSelector(directory, display)` shows pages of ROM names on any object
    with `fill(color)` and `text(s, x, y, color, bgcolor)` methods, and moves
    the highlight with `next_file`, `previous_file`, `next_page` and
    `previous_page`; `selected_file()` gives the highlighted name.
  - `serial_command(key, joypad)` applies a console key: it either presses a
    button or returns an `Action` such as `QUIT` or `BENCHMARK`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from picogb.assignment import auto_assign_palette
from picogb.frontend import render_line

palette = auto_assign_palette(0x14, "POKEMON RED")
line = render_line([0] * 160, palette)
```

## What it does not do

The package does not emulate the Game Boy CPU, sound or LCD, and it has no
display driver: it produces colours and pixels and calls a display object
you supply. There is no command-line program; the pieces are meant to be
driven from your own main loop.