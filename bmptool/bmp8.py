"""8-bit palette bitmap images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Sequence, Union

from bmptool.errors import BmpError, UnsupportedDepthError

HEADER_SIZE = 54
COLOR_TABLE_SIZE = 1024

_PathLike = Union[str, "PathLike[str]"]


def _radius(kernel: Sequence[Sequence[float]]) -> int:
    size = len(kernel)
    if size == 0 or size % 2 == 0 or any(len(row) != size for row in kernel):
        raise ValueError("kernel must be a non-empty square of odd size")
    return size // 2


@dataclass
class Bmp8Image:
    """An 8-bit bitmap: raw header, palette and one byte per pixel."""

    header: bytearray
    color_table: bytes
    data: bytearray
    width: int
    height: int
    color_depth: int
    data_size: int

    @classmethod
    def load(cls, path: _PathLike) -> Bmp8Image:
        """Read an 8-bit bitmap; raise UnsupportedDepthError for other depths."""
        with open(path, "rb") as fh:
            header = fh.read(HEADER_SIZE)
            color_table = fh.read(COLOR_TABLE_SIZE)
            if len(header) < HEADER_SIZE:
                raise BmpError(f"{path}: truncated bitmap header")
            width, height = struct.unpack_from("<II", header, 18)
            (depth,) = struct.unpack_from("<H", header, 28)
            (data_size,) = struct.unpack_from("<I", header, 34)
            if depth != 8:
                raise UnsupportedDepthError(8, depth)
            if data_size == 0:
                data_size = (width * height) & 0xFFFFFFFF
            data = fh.read(data_size)
        return cls(
            header=bytearray(header),
            color_table=color_table.ljust(COLOR_TABLE_SIZE, b"\0"),
            data=bytearray(data.ljust(data_size, b"\0")),
            width=width,
            height=height,
            color_depth=depth,
            data_size=data_size,
        )

    def save(self, path: _PathLike) -> None:
        """Write the image, updating the file-size and data-size header fields."""
        if self.data_size == 0:
            self.data_size = (self.width * self.height) & 0xFFFFFFFF
        file_size = (HEADER_SIZE + COLOR_TABLE_SIZE + self.data_size) & 0xFFFFFFFF
        struct.pack_into("<I", self.header, 2, file_size)
        struct.pack_into("<I", self.header, 34, self.data_size)
        with open(path, "wb") as fh:
            fh.write(bytes(self.header))
            fh.write(bytes(self.color_table))
            fh.write(bytes(self.data[: self.data_size]))

    def info(self) -> str:
        """Human-readable summary of the image dimensions."""
        return (
            "Image Info:\n"
            f"Width: {self.width}\n"
            f"Height: {self.height}\n"
            f"Color Depth: {self.color_depth}\n"
            f"Data Size: {self.data_size}"
        )

    def _map(self, func) -> None:
        n = self.data_size
        self.data[:n] = bytes(func(b) for b in self.data[:n])

    def negative(self) -> None:
        """Invert every pixel value."""
        self._map(lambda b: 255 - b)

    def brightness(self, value: int) -> None:
        """Add value to every pixel, clamped to 0..255."""
        self._map(lambda b: min(max(b + value, 0), 255))

    def threshold(self, threshold: int) -> None:
        """Set pixels at or above threshold to 255, the rest to 0."""
        self._map(lambda b: 255 if b >= threshold else 0)

    def apply_filter(self, kernel: Sequence[Sequence[float]]) -> None:
        """Convolve interior pixels with kernel; border pixels are left as they are."""
        offset = _radius(kernel)
        src = bytes(self.data)
        width = self.width
        for y in range(offset, self.height - offset):
            for x in range(offset, width - offset):
                total = sum(
                    coeff * src[(y + i - offset) * width + (x + j - offset)]
                    for i, row in enumerate(kernel)
                    for j, coeff in enumerate(row)
                )
                self.data[y * width + x] = int(min(max(total, 0.0), 255.0))