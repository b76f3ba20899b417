"""Game Boy palettes, a bitmap font, ROM selection and save handling."""

__version__ = "0.1.0"
__all__ = ["assignment", "font", "frontend", "palettes", "storage"]