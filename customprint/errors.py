from __future__ import annotations


class CustomPrinterError(RuntimeError):
    """Base class for printer session failures."""


class ChannelOpenError(CustomPrinterError):
    """The device could not be opened for reading and writing."""


class DecodeError(CustomPrinterError):
    """The image could not be opened or parsed."""


class WriteError(CustomPrinterError):
    """Writing the command buffer to the device failed."""


class BitmapError(ValueError):
    """Bitmap dimensions cannot be encoded as a bit image."""
