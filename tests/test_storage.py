import pytest

from picogb.storage import (
    FLASH_SECTOR_SIZE,
    StorageError,
    list_rom_page,
    load_cart_rom,
    read_cart_ram,
    write_cart_ram,
)


def test_save_round_trip(tmp_path):
    ram = bytearray(range(256)) * 4
    written = write_cart_ram(tmp_path, "TETRIS", ram, 512)
    assert written == 512
    restored = bytearray(len(ram))
    assert read_cart_ram(tmp_path, "TETRIS", restored) == 512
    assert restored[:512] == ram[:512]
    assert restored[512:] == bytearray(len(ram) - 512)


def test_zero_save_size_writes_nothing(tmp_path):
    assert write_cart_ram(tmp_path, "GAME", bytearray(16), 0) == 0
    assert not (tmp_path / "GAME").exists()


def test_save_size_larger_than_ram_rejected(tmp_path):
    with pytest.raises(ValueError):
        write_cart_ram(tmp_path, "GAME", bytearray(8), 9)


def test_read_missing_save_raises(tmp_path):
    with pytest.raises(StorageError):
        read_cart_ram(tmp_path, "NOSAVE", bytearray(16))


def test_read_save_too_large_raises(tmp_path):
    (tmp_path / "BIG").write_bytes(bytes(32))
    with pytest.raises(StorageError):
        read_cart_ram(tmp_path, "BIG", bytearray(16))


def test_list_rom_page_filters_and_pages(tmp_path):
    names = [f"game{i:02d}.gb" for i in range(25)]
    for name in names:
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "notes.txt").write_bytes(b"x")
    (tmp_path / "UPPER.GB").write_bytes(b"x")
    (tmp_path / "folder.gb").mkdir()
    first = list_rom_page(tmp_path, 0, 22)
    second = list_rom_page(tmp_path, 1, 22)
    assert len(first) == 22
    assert set(first) | set(second) == set(names) | {"UPPER.GB"}
    assert not set(first) & set(second)
    assert list_rom_page(tmp_path, 2, 22) == []


def test_list_rom_page_invalid_arguments(tmp_path):
    with pytest.raises(ValueError):
        list_rom_page(tmp_path, -1, 22)
    with pytest.raises(ValueError):
        list_rom_page(tmp_path, 0, 0)


def test_list_rom_page_missing_directory(tmp_path):
    with pytest.raises(StorageError):
        list_rom_page(tmp_path / "missing", 0, 22)


def test_load_cart_rom_pads_last_sector(tmp_path):
    content = bytes(range(256)) * 20
    rom = tmp_path / "game.gb"
    rom.write_bytes(content)
    image = load_cart_rom(rom, FLASH_SECTOR_SIZE)
    assert len(image) % FLASH_SECTOR_SIZE == 0
    assert len(image) >= len(content)
    assert image[:len(content)] == content
    assert set(image[len(content):]) == {0xFF}


def test_load_cart_rom_exact_sectors(tmp_path):
    content = bytes(64)
    rom = tmp_path / "game.gb"
    rom.write_bytes(content)
    assert load_cart_rom(rom, 32) == content


def test_load_cart_rom_empty_and_missing(tmp_path):
    rom = tmp_path / "empty.gb"
    rom.write_bytes(b"")
    assert load_cart_rom(rom) == b""
    with pytest.raises(StorageError):
        load_cart_rom(tmp_path / "missing.gb")
    with pytest.raises(ValueError):
        load_cart_rom(rom, 0)