from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import BitmapError


class BitImageMode(Enum):
    """Bit-image modes accepted by the ESC * command."""

    DOTS8_SINGLE_DENSITY = 0x00
    DOTS8_DOUBLE_DENSITY = 0x01
    DOTS24_SINGLE_DENSITY = 0x20
    DOTS24_DOUBLE_DENSITY = 0x21

    @property
    def mode_byte(self) -> int:
        return self.value

    @property
    def bank(self) -> int:
        """Return the number of dot lines sent per bit-image command."""
        return 24 if self.value & 0x20 else 8

    @property
    def double_density(self) -> bool:
        return bool(self.value & 0x01)

    def bytes_per_call(self, width: int) -> int:
        """Return the number of image bytes carried by one command for `width` columns."""
        return width * (self.bank // 8)


class CutType(Enum):
    TOTAL = "total"
    # Only valid on TL60 and TL80 printers.
    PARTIAL = "partial"


class FeedUnit(Enum):
    INCHES = "inches"
    LINES = "lines"


class Speed(Enum):
    HIGH = 0
    NORMAL = 1
    LOW = 2


class Density(Enum):
    MINUS_50 = 0
    MINUS_25 = 1
    ZERO = 2
    PLUS_25 = 3
    PLUS_50 = 4


@dataclass(frozen=True)
class Bitmap:
    """Row-major 1bpp bitmap, MSB first, rows packed without padding."""

    data: bytes
    width: int
    height: int

    def validate(self) -> None:
        """Validate dimensions for bit-image transcoding."""
        validate_dimensions(self.width, self.height)

    @property
    def row_stride(self) -> int:
        return (self.width + 7) // 8


def validate_dimensions(width: int, height: int) -> None:
    if width <= 0:
        raise BitmapError("Width must be greater than zero")
    if height <= 0:
        raise BitmapError("Height must be greater than zero")
    if width % 8 != 0:
        raise BitmapError(f"Width must be divisible by 8, got {width}")
