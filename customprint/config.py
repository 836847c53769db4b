from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional, TypeVar

from .printing import CustomPrinter
from .protocol import BitImageMode, CutType, Density, FeedUnit, Speed
from .rendering import ImageSource, image_to_bitmap, load_image

DEVICE_ENV_VAR = "CUSTOMPRINT_DEVICE"
DEFAULT_DEVICE = "/dev/usb/lp0"
DEFAULT_MODE = BitImageMode.DOTS24_DOUBLE_DENSITY

MODE_NAMES: Dict[str, BitImageMode] = {
    "8-single": BitImageMode.DOTS8_SINGLE_DENSITY,
    "8-double": BitImageMode.DOTS8_DOUBLE_DENSITY,
    "24-single": BitImageMode.DOTS24_SINGLE_DENSITY,
    "24-double": BitImageMode.DOTS24_DOUBLE_DENSITY,
}
SPEED_NAMES: Dict[str, Speed] = {
    "high": Speed.HIGH,
    "normal": Speed.NORMAL,
    "low": Speed.LOW,
}
DENSITY_NAMES: Dict[str, Density] = {
    "-50": Density.MINUS_50,
    "-25": Density.MINUS_25,
    "0": Density.ZERO,
    "+25": Density.PLUS_25,
    "+50": Density.PLUS_50,
}
CUT_NAMES: Dict[str, CutType] = {
    "total": CutType.TOTAL,
    "partial": CutType.PARTIAL,
}

T = TypeVar("T")


def resolve_device(explicit: Optional[str] = None) -> str:
    if explicit:
        return explicit
    return os.environ.get(DEVICE_ENV_VAR, DEFAULT_DEVICE)


def _parse(table: Dict[str, T], value: str, what: str) -> T:
    key = value.strip().lower()
    if key not in table:
        raise ValueError(f"Unknown {what} '{value}', expected one of: " + ", ".join(table))
    return table[key]


def parse_mode(value: str) -> BitImageMode:
    return _parse(MODE_NAMES, value, "bit-image mode")


def parse_speed(value: str) -> Speed:
    return _parse(SPEED_NAMES, value, "speed")


def parse_density(value: str) -> Density:
    return _parse(DENSITY_NAMES, value, "density")


def parse_cut(value: str) -> CutType:
    return _parse(CUT_NAMES, value, "cut type")


@dataclass
class PrintSettings:
    mode: BitImageMode = DEFAULT_MODE
    width: Optional[int] = None
    speed: Optional[Speed] = None
    density: Optional[Density] = None
    feed_lines: int = 0
    cut: Optional[CutType] = None

    def __post_init__(self) -> None:
        if not 0 <= self.feed_lines <= 0xFF:
            raise ValueError(f"Feed lines must be between 0 and 255, got {self.feed_lines}")
        if self.width is not None and self.width < 8:
            raise ValueError("Width must be at least 8 dots")

    def apply(self, printer: CustomPrinter, source: ImageSource) -> CustomPrinter:
        """Append the commands that print `source` with these settings.

        The image is decoded before anything is appended.
        """
        bitmap = image_to_bitmap(load_image(source, self.width))
        bitmap.validate()
        if self.speed is not None:
            printer.speed(self.speed)
        if self.density is not None:
            printer.density(self.density)
        printer.bitmap_image(bitmap, self.mode)
        if self.feed_lines:
            printer.print_and_feed_paper(FeedUnit.LINES, self.feed_lines)
        else:
            printer.print_line()
        if self.cut is not None:
            printer.cut_paper(self.cut)
        return printer
