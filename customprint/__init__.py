from .errors import BitmapError, ChannelOpenError, CustomPrinterError, DecodeError, WriteError
from .printing import CustomPrinter
from .protocol import Bitmap, BitImageMode, CutType, Density, FeedUnit, Speed, transcode_bitmap

__all__ = [
    "Bitmap",
    "BitImageMode",
    "BitmapError",
    "ChannelOpenError",
    "CustomPrinter",
    "CustomPrinterError",
    "CutType",
    "DecodeError",
    "Density",
    "FeedUnit",
    "Speed",
    "transcode_bitmap",
    "WriteError",
]
