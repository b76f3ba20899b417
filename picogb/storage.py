"""Save files and ROM images kept on the SD card.

Cartridge RAM is saved to a file named after the game's title. ROMs are
`*.gb` files in one directory, listed a page at a time. A ROM is read
into flash one sector at a time.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

FLASH_SECTOR_SIZE = 4096
ROM_PAGE_SIZE = 22
_ERASED_BYTE = 0xFF


class StorageError(Exception):
    """A save file or ROM file could not be read or written."""


def read_cart_ram(directory: str | os.PathLike[str], rom_name: str,
                  ram: bytearray | memoryview) -> int:
    """Load the save file of a game into cartridge RAM.

    Returns the number of bytes read into the start of ``ram``.
    """
    path = Path(directory) / rom_name
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise StorageError(f"cannot open save file {path}: {exc}") from exc
    if len(data) > len(ram):
        raise StorageError(
            f"save file {path} holds {len(data)} bytes, "
            f"cartridge RAM only {len(ram)}"
        )
    ram[:len(data)] = data
    logger.info("read_cart_ram(%s) complete (%d bytes)", rom_name, len(data))
    return len(data)


def write_cart_ram(directory: str | os.PathLike[str], rom_name: str,
                   ram: bytes | bytearray | memoryview, save_size: int) -> int:
    """Write the first ``save_size`` bytes of cartridge RAM to the save file.

    Nothing is written when the game has no save RAM. Returns the number
    of bytes written.
    """
    if save_size < 0:
        raise ValueError("save_size must not be negative")
    if save_size > len(ram):
        raise ValueError(
            f"save_size {save_size} exceeds cartridge RAM of {len(ram)} bytes"
        )
    if save_size == 0:
        logger.info("write_cart_ram(%s) complete (0 bytes)", rom_name)
        return 0
    path = Path(directory) / rom_name
    try:
        path.write_bytes(bytes(ram[:save_size]))
    except OSError as exc:
        raise StorageError(f"cannot write save file {path}: {exc}") from exc
    logger.info("write_cart_ram(%s) complete (%d bytes)", rom_name, save_size)
    return save_size


def list_rom_page(directory: str | os.PathLike[str], page: int,
                  page_size: int = ROM_PAGE_SIZE) -> list[str]:
    """Return the names of the `*.gb` files on one page of the listing."""
    if page < 0:
        raise ValueError("page must not be negative")
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    root = Path(directory)
    try:
        names = sorted(
            entry.name for entry in root.iterdir()
            if entry.is_file() and entry.name.lower().endswith(".gb")
        )
    except OSError as exc:
        raise StorageError(f"cannot list directory {root}: {exc}") from exc
    start = page * page_size
    return names[start:start + page_size]


def load_cart_rom(path: str | os.PathLike[str],
                  sector_size: int = FLASH_SECTOR_SIZE) -> bytes:
    """Read a ROM file as the flash image it is programmed into.

    The file is taken a sector at a time; the last sector is filled out
    with erased flash bytes.
    """
    if sector_size <= 0:
        raise ValueError("sector_size must be positive")
    image = bytearray()
    try:
        with open(path, "rb") as rom_file:
            while sector := rom_file.read(sector_size):
                image += sector.ljust(sector_size, bytes([_ERASED_BYTE]))
    except OSError as exc:
        raise StorageError(f"cannot open ROM file {path}: {exc}") from exc
    logger.info("load_cart_rom(%s) complete (%d bytes)", path, len(image))
    return bytes(image)