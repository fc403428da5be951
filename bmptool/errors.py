"""Bitmap reading and writing errors."""


class BmpError(Exception):
    """A bitmap file could not be read or is malformed."""


class UnsupportedDepthError(BmpError):
    def __init__(self, expected: int, found: int) -> None:
        super().__init__(f"expected a {expected}-bit image, found {found} bits")
        self.expected = expected
        self.found = found