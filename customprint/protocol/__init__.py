from .commands import (
    bit_image_cmd,
    cut_cmd,
    density_cmd,
    print_and_feed_cmd,
    print_cmd,
    speed_cmd,
)
from .encoding import (
    build_bit_image,
    frame_bit_image,
    pack_line,
    pack_pixels,
    transcode,
    transcode_bitmap,
)
from .types import Bitmap, BitImageMode, CutType, Density, FeedUnit, Speed

__all__ = [
    "bit_image_cmd",
    "Bitmap",
    "BitImageMode",
    "build_bit_image",
    "cut_cmd",
    "CutType",
    "Density",
    "density_cmd",
    "FeedUnit",
    "frame_bit_image",
    "pack_line",
    "pack_pixels",
    "print_and_feed_cmd",
    "print_cmd",
    "Speed",
    "speed_cmd",
    "transcode",
    "transcode_bitmap",
]
