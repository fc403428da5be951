"""Read, edit and write 8-bit and 24-bit BMP images, with an interactive editor."""

__version__ = "0.1.0"