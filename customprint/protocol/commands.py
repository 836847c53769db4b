from __future__ import annotations

from .types import BitImageMode, CutType, Density, FeedUnit, Speed

# Printing commands
PRINT = b"\x0a"
PRINT_FEED_INCHES = b"\x1b\x4a"
PRINT_FEED_LINES = b"\x1b\x64"
SPEED_QUALITY = b"\x1b\x78"
DENSITY = b"\x1d\x7c"
# Bit-image commands
BIT_IMAGE = b"\x1b\x2a"
# Mechanism control commands
TOTAL_CUT = b"\x1b\x69"
PARTIAL_CUT = b"\x1b\x6d"


def print_cmd() -> bytes:
    """Build the print and line feed command."""
    return PRINT


def print_and_feed_cmd(unit: FeedUnit, amount: int) -> bytes:
    """Build the print and paper feed command for `amount` of `unit`."""
    if not 0 <= amount <= 0xFF:
        raise ValueError(f"Feed amount must be between 0 and 255, got {amount}")
    prefix = PRINT_FEED_INCHES if unit is FeedUnit.INCHES else PRINT_FEED_LINES
    return prefix + bytes([amount])


def speed_cmd(speed: Speed) -> bytes:
    """Build the speed / quality selection command."""
    return SPEED_QUALITY + bytes([speed.value])


def density_cmd(density: Density) -> bytes:
    """Build the print density command."""
    return DENSITY + bytes([density.value])


def cut_cmd(cut_type: CutType) -> bytes:
    """Build the total or partial cut command."""
    if cut_type is CutType.PARTIAL:
        return PARTIAL_CUT
    return TOTAL_CUT


def bit_image_cmd(mode: BitImageMode, width: int, chunk: bytes) -> bytes:
    """Wrap one bank of column data in the ESC * command."""
    header = bytes(
        [
            mode.mode_byte,
            width & 0xFF,
            (width >> 8) & 0xFF,
        ]
    )
    return BIT_IMAGE + header + bytes(chunk)
