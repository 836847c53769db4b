"""Shared fixtures for customprint tests."""

from __future__ import annotations

from typing import Iterable, List, Tuple

import pytest
from PIL import Image

from customprint.errors import WriteError


class FakeChannel:
    """In-memory channel that records writes and can be told to fail."""

    def __init__(self) -> None:
        self.writes: List[bytes] = []
        self.fail_next = 0
        self.closed = False

    def write(self, data: bytes) -> None:
        if self.fail_next:
            self.fail_next -= 1
            raise WriteError("device went away")
        self.writes.append(bytes(data))

    def close(self) -> None:
        self.closed = True


def make_bitmap(width: int, height: int, pixels: Iterable[Tuple[int, int]]) -> bytes:
    """Return packed 1bpp data with the given (row, col) pixels set."""
    stride = (width + 7) // 8
    data = bytearray(stride * height)
    for row, col in pixels:
        data[row * stride + col // 8] |= 0x80 >> (col % 8)
    return bytes(data)


def reference_transcode(width: int, height: int, bitmap: bytes, bank: int) -> bytes:
    """Bit-by-bit transcoder used to cross-check the real one."""
    banks = (height + bank - 1) // bank
    step = width // 8
    out = bytearray(banks * (bank // 8) * width)
    for i in range(banks):
        for j in range(width):
            for k in range(bank):
                src = i * step * bank + k * step + j // 8
                dst = i * width * (bank // 8) + j * (bank // 8) + k // 8
                if src < len(bitmap) and bitmap[src] & (0x80 >> (j % 8)):
                    out[dst] |= 0x80 >> (k % 8)
    return bytes(out)


@pytest.fixture
def channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def dot_image(tmp_path):
    """16x9 white PNG with a single black pixel at the top-left corner."""
    img = Image.new("L", (16, 9), 255)
    img.putpixel((0, 0), 0)
    path = tmp_path / "dot.png"
    img.save(path)
    return path
