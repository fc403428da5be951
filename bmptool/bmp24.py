"""24-bit true-colour bitmap images."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import ClassVar, Sequence, Union

from bmptool.errors import BmpError, UnsupportedDepthError

_PathLike = Union[str, "PathLike[str]"]


def clamp(value: int) -> int:
    """Clamp value to the byte range 0..255."""
    return min(max(value, 0), 255)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _row_size(width: int) -> int:
    return (width * 3 + 3) // 4 * 4


def _radius(kernel: Sequence[Sequence[float]]) -> int:
    size = len(kernel)
    if size == 0 or size % 2 == 0 or any(len(row) != size for row in kernel):
        raise ValueError("kernel must be a non-empty square of odd size")
    return size // 2


@dataclass(frozen=True)
class Pixel:
    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class BmpFileHeader:
    """The 14-byte bitmap file header."""

    FORMAT: ClassVar[str] = "<HIHHI"
    SIZE: ClassVar[int] = 14

    type: int = 0x4D42
    size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    offset: int = 54

    @classmethod
    def unpack(cls, raw: bytes) -> BmpFileHeader:
        return cls(*struct.unpack(cls.FORMAT, raw))

    def pack(self) -> bytes:
        return struct.pack(
            self.FORMAT, self.type, self.size, self.reserved1, self.reserved2, self.offset
        )


@dataclass
class BmpInfoHeader:
    """The 40-byte bitmap information header."""

    FORMAT: ClassVar[str] = "<IiiHHIIiiII"
    SIZE: ClassVar[int] = 40

    size: int = 40
    width: int = 0
    height: int = 0
    planes: int = 1
    bits: int = 24
    compression: int = 0
    imagesize: int = 0
    xresolution: int = 0
    yresolution: int = 0
    ncolors: int = 0
    importantcolors: int = 0

    @classmethod
    def unpack(cls, raw: bytes) -> BmpInfoHeader:
        return cls(*struct.unpack(cls.FORMAT, raw))

    def pack(self) -> bytes:
        return struct.pack(
            self.FORMAT,
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bits,
            self.compression,
            self.imagesize,
            self.xresolution,
            self.yresolution,
            self.ncolors,
            self.importantcolors,
        )


_HEADERS_SIZE = BmpFileHeader.SIZE + BmpInfoHeader.SIZE


@dataclass
class Bmp24Image:
    """A 24-bit bitmap; data[y][x] with row 0 at the top."""

    header: BmpFileHeader
    info: BmpInfoHeader
    width: int
    height: int
    color_depth: int = 24
    data: list[list[Pixel]] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> Bmp24Image:
        """A black image with consistent headers."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        image_size = _row_size(width) * height
        header = BmpFileHeader(size=_HEADERS_SIZE + image_size, offset=_HEADERS_SIZE)
        info = BmpInfoHeader(width=width, height=height, imagesize=image_size)
        data = [[Pixel() for _ in range(width)] for _ in range(height)]
        return cls(header=header, info=info, width=width, height=height, data=data)

    @classmethod
    def load(cls, path: _PathLike) -> Bmp24Image:
        """Read a 24-bit bitmap; raise UnsupportedDepthError for other depths."""
        with open(path, "rb") as fh:
            raw = fh.read()
        if len(raw) < _HEADERS_SIZE:
            raise BmpError(f"{path}: truncated bitmap header")
        header = BmpFileHeader.unpack(raw[: BmpFileHeader.SIZE])
        info = BmpInfoHeader.unpack(raw[BmpFileHeader.SIZE : _HEADERS_SIZE])
        if info.bits != 24:
            raise UnsupportedDepthError(24, info.bits)
        width, height = info.width, info.height
        if width < 0 or height < 0:
            raise BmpError(f"{path}: unsupported image dimensions {width}x{height}")

        row_size = _row_size(width)
        pixels = raw[header.offset :]
        rows = []
        for start in range(0, row_size * height, row_size):
            chunk = pixels[start : start + row_size].ljust(row_size, b"\0")
            rows.append(
                [
                    Pixel(red=chunk[k + 2], green=chunk[k + 1], blue=chunk[k])
                    for k in range(0, width * 3, 3)
                ]
            )
        rows.reverse()
        return cls(header=header, info=info, width=width, height=height, color_depth=24, data=rows)

    def _pixel_bytes(self) -> bytes:
        padding = b"\0" * (_row_size(self.width) - self.width * 3)
        return b"".join(
            b"".join(bytes((p.blue, p.green, p.red)) for p in row) + padding
            for row in reversed(self.data)
        )

    def save(self, path: _PathLike) -> None:
        """Write the stored headers, then pixel rows bottom-up from the data offset."""
        buf = bytearray(self.header.pack() + self.info.pack())
        offset = self.header.offset
        if len(buf) < offset:
            buf.extend(b"\0" * (offset - len(buf)))
        pixels = self._pixel_bytes()
        buf[offset : offset + len(pixels)] = pixels
        with open(path, "wb") as fh:
            fh.write(bytes(buf))

    def _map(self, func) -> None:
        self.data = [[func(p) for p in row] for row in self.data]

    def negative(self) -> None:
        """Invert every channel."""
        self._map(lambda p: Pixel(255 - p.red, 255 - p.green, 255 - p.blue))

    def grayscale(self) -> None:
        """Replace each pixel by the integer mean of its channels."""

        def gray(p: Pixel) -> Pixel:
            value = (p.red + p.green + p.blue) // 3
            return Pixel(value, value, value)

        self._map(gray)

    def brightness(self, value: int) -> None:
        """Add value to every channel, clamped to 0..255."""
        self._map(lambda p: Pixel(clamp(p.red + value), clamp(p.green + value), clamp(p.blue + value)))

    def convolution(self, x: int, y: int, kernel: Sequence[Sequence[float]]) -> Pixel:
        """Kernel-weighted sum around (x, y); neighbours outside the image are skipped."""
        offset = _radius(kernel)
        r = g = b = 0.0
        for i, row in enumerate(kernel):
            yi = y + i - offset
            if not 0 <= yi < self.height:
                continue
            for j, coeff in enumerate(row):
                xi = x + j - offset
                if not 0 <= xi < self.width:
                    continue
                p = self.data[yi][xi]
                r += p.red * coeff
                g += p.green * coeff
                b += p.blue * coeff
        return Pixel(
            clamp(_round_half_away(r)), clamp(_round_half_away(g)), clamp(_round_half_away(b))
        )

    def apply_filter(self, kernel: Sequence[Sequence[float]]) -> None:
        """Replace every pixel by its convolution with kernel."""
        _radius(kernel)
        self.data = [
            [self.convolution(x, y, kernel) for x in range(self.width)]
            for y in range(self.height)
        ]