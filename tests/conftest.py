"""Shared fixtures for font sheet tests."""

from collections.abc import Callable, Iterable
import struct
import zlib
from io import BytesIO

import pytest
from PIL import Image

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def make_sheet(
    dark: Iterable[tuple[int, int]] = (),
    size: tuple[int, int] = (16, 20),
    mode: str = "RGBA",
) -> Image.Image:
    """Create a white sheet with the given pixels painted black."""
    image = Image.new("RGBA", size, WHITE)
    for xy in dark:
        image.putpixel(xy, BLACK)
    return image if mode == "RGBA" else image.convert(mode)


def to_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def sheet_png() -> Callable[..., bytes]:
    """Factory returning PNG bytes for a sheet with given dark pixels."""

    def factory(dark: Iterable[tuple[int, int]] = (), **kwargs) -> bytes:
        return to_png(make_sheet(dark, **kwargs))

    return factory


@pytest.fixture
def digits_png() -> bytes:
    """A sheet with a distinct pattern in every cell.

    Cell ``i`` has ink in row 0 matching the low four bits of ``i`` and a
    full bar on row 4.
    """
    dark = []
    for index in range(16):
        cell_x, cell_y = (index % 4) * 4, (index // 4) * 5
        for column in range(4):
            if index >> (3 - column) & 1:
                dark.append((cell_x + column, cell_y))
            dark.append((cell_x + column, cell_y + 4))
    return to_png(make_sheet(dark))


def _png_chunk(kind: bytes, payload: bytes) -> bytes:
    """Frame one PNG chunk with its length and CRC."""
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def gray16_png(samples: Callable[[int, int], int], size: tuple[int, int] = (16, 20)) -> bytes:
    """Build a 16-bit grayscale PNG with ``samples(x, y)`` at each pixel."""
    width, height = size
    header = struct.pack(">IIBBBBB", width, height, 16, 0, 0, 0, 0)
    raw = b"".join(
        b"\x00" + b"".join(struct.pack(">H", samples(x, y)) for x in range(width))
        for y in range(height)
    )
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(raw))
        + _png_chunk(b"IEND", b"")
    )


@pytest.fixture
def sheet_png16() -> Callable[..., bytes]:
    """Factory returning a 16-bit grayscale sheet from a sample function."""
    return gray16_png
