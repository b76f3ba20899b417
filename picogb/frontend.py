"""The emulator front end: buttons, hotkeys, line drawing and ROM choice.

Buttons are read each frame. With SELECT held, a newly pressed button
acts as a hotkey: volume, manual palette, fast-forward, or save and
return to the ROM selector. Characters typed on the serial console press
buttons or toggle emulator settings.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, fields, replace
from typing import Protocol

from picogb.assignment import manual_assign_palette
from picogb.palettes import NUMBER_OF_MANUAL_PALETTES, Palette
from picogb.storage import ROM_PAGE_SIZE, list_rom_page

logger = logging.getLogger(__name__)

LCD_PALETTE_ALL = 0x30

TEXT_COLOUR = 0xFFFF
BACKGROUND_COLOUR = 0x0000
HIGHLIGHT_COLOUR = 0xF800
LINE_HEIGHT = 8


@dataclass(frozen=True)
class Joypad:
    """Which of the eight buttons are held down."""

    a: bool = False
    b: bool = False
    select: bool = False
    start: bool = False
    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False

    @property
    def bits(self) -> int:
        """The joypad byte, A in bit 0, a 0 bit for each held button."""
        return sum(
            1 << bit
            for bit, field in enumerate(fields(self))
            if not getattr(self, field.name)
        )

    @classmethod
    def from_bits(cls, bits: int) -> Joypad:
        """Build the state from a joypad byte (0 bits are held buttons)."""
        return cls(**{
            field.name: not bits & (1 << bit)
            for bit, field in enumerate(fields(cls))
        })


class Action(enum.Enum):
    """Something a hotkey or console command asks the emulator to do."""

    VOLUME_UP = enum.auto()
    VOLUME_DOWN = enum.auto()
    PALETTE_CHANGED = enum.auto()
    SAVE_AND_EXIT = enum.auto()
    TOGGLE_FRAME_SKIP = enum.auto()
    TOGGLE_IDLE_MODE = enum.auto()
    TOGGLE_INTERLACE = enum.auto()
    BENCHMARK = enum.auto()
    QUIT = enum.auto()


class HotkeyHandler:
    """Tracks the manual palette and turns SELECT combos into actions."""

    def __init__(self, palette: Palette) -> None:
        self.palette = palette
        self.manual_selection = 0

    def update(self, previous: Joypad, current: Joypad) -> list[Action]:
        """Return the actions of buttons newly pressed while SELECT is held."""
        if not current.select:
            return []

        def pressed(name: str) -> bool:
            return getattr(current, name) and not getattr(previous, name)

        actions: list[Action] = []
        if pressed("up"):
            actions.append(Action.VOLUME_UP)
        if pressed("down"):
            actions.append(Action.VOLUME_DOWN)
        if pressed("right") and self.manual_selection < NUMBER_OF_MANUAL_PALETTES - 1:
            self._select(self.manual_selection + 1)
            actions.append(Action.PALETTE_CHANGED)
        if pressed("left") and self.manual_selection > 0:
            self._select(self.manual_selection - 1)
            actions.append(Action.PALETTE_CHANGED)
        if pressed("start"):
            actions.append(Action.SAVE_AND_EXIT)
            return actions
        if pressed("a"):
            actions.append(Action.TOGGLE_FRAME_SKIP)
        return actions

    def _select(self, selection: int) -> None:
        self.manual_selection = selection
        self.palette = manual_assign_palette(selection)


def render_line(pixels: Sequence[int], palette: Palette) -> list[int]:
    """Turn one line of emulator pixels into RGB565 colours."""
    return [
        palette.colour((pixel & LCD_PALETTE_ALL) >> 4, pixel & 3)
        for pixel in pixels
    ]


class TextDisplay(Protocol):
    """What the ROM selector needs of a display."""

    def fill(self, color: int) -> None: ...

    def text(self, s: str, x: int, y: int, color: int, bgcolor: int) -> None: ...


class RomSelector:
    """Pages through the ROM files of a directory and highlights one."""

    def __init__(self, directory: str | os.PathLike[str],
                 display: TextDisplay) -> None:
        self.directory = directory
        self.display = display
        self.page = 0
        self.files: list[str] = []
        self.selected = 0

    def show_page(self, page: int) -> int:
        """Show a page of ROM files, select the first, and return the count."""
        self.page = page
        self.files = list_rom_page(self.directory, page, ROM_PAGE_SIZE)
        self.selected = 0
        self.display.fill(BACKGROUND_COLOUR)
        for row, name in enumerate(self.files):
            self._draw(row, BACKGROUND_COLOUR)
        if self.files:
            self._draw(0, HIGHLIGHT_COLOUR)
        return len(self.files)

    def next_file(self) -> None:
        """Move the highlight down, wrapping to the top."""
        self._move((self.selected + 1) % len(self.files) if self.files else 0)

    def previous_file(self) -> None:
        """Move the highlight up, wrapping to the bottom."""
        self._move((self.selected - 1) % len(self.files) if self.files else 0)

    def next_page(self) -> None:
        """Show the next page, staying on this one if the next is empty."""
        if self.show_page(self.page + 1) == 0:
            self.show_page(self.page - 1)

    def previous_page(self) -> None:
        """Show the previous page, if there is one."""
        if self.page > 0:
            self.show_page(self.page - 1)

    def selected_file(self) -> str | None:
        """Return the highlighted file name, or None on an empty page."""
        return self.files[self.selected] if self.files else None

    def _move(self, selection: int) -> None:
        if not self.files:
            return
        self._draw(self.selected, BACKGROUND_COLOUR)
        self.selected = selection
        self._draw(self.selected, HIGHLIGHT_COLOUR)

    def _draw(self, row: int, bgcolor: int) -> None:
        self.display.text(self.files[row], 0, row * LINE_HEIGHT,
                          TEXT_COLOUR, bgcolor)


_KEY_BUTTONS = {
    "\n": "start",
    "\r": "start",
    "\b": "select",
    "8": "up",
    "2": "down",
    "4": "left",
    "6": "right",
    "z": "a",
    "w": "a",
    "x": "b",
}

_KEY_ACTIONS = {
    "c": Action.TOGGLE_IDLE_MODE,
    "i": Action.TOGGLE_INTERLACE,
    "f": Action.TOGGLE_FRAME_SKIP,
    "b": Action.BENCHMARK,
    "q": Action.QUIT,
}


def serial_command(key: str, joypad: Joypad) -> tuple[Joypad, Action | None]:
    """Apply a character typed on the console.

    Returns the joypad with any button the key presses, and the action the
    key asks for, if any.
    """
    button = _KEY_BUTTONS.get(key)
    if button is not None:
        return replace(joypad, **{button: True}), None
    return joypad, _KEY_ACTIONS.get(key)