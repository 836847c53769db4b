from __future__ import annotations

import logging
import threading
from typing import Optional

from ..protocol import (
    Bitmap,
    BitImageMode,
    CutType,
    Density,
    FeedUnit,
    Speed,
    build_bit_image,
    cut_cmd,
    density_cmd,
    print_and_feed_cmd,
    print_cmd,
    speed_cmd,
)
from ..rendering import ImageSource, image_to_bitmap, load_image
from ..transport import Channel, DeviceChannel

logger = logging.getLogger(__name__)


class CustomPrinter:
    """Builds a command stream for one printer and writes it on flush().

    Builder methods return the printer so calls can be chained::

        with CustomPrinter.open("/dev/usb/lp0") as printer:
            (
                printer.bit_image("logo.png", BitImageMode.DOTS24_DOUBLE_DENSITY)
                .print_and_feed_paper(FeedUnit.LINES, 10)
                .cut_paper(CutType.TOTAL)
                .flush()
            )

    The command buffer is only cleared by a successful flush(). A printer
    belongs to the thread that created it.
    """

    def __init__(self, channel: Channel) -> None:
        self._channel = channel
        self._cmd = bytearray()
        self._owner = threading.get_ident()

    @classmethod
    def open(
        cls,
        device: str,
        baud_rate: Optional[int] = None,
        chunk_size: Optional[int] = None,
        interval_ms: int = 0,
    ) -> "CustomPrinter":
        """Open `device` as a raw device node, or as a serial port when `baud_rate` is set.

        `chunk_size` and `interval_ms` only apply to serial ports.
        """
        if baud_rate is None:
            if chunk_size is not None or interval_ms:
                raise ValueError("chunk_size and interval_ms require a serial baud_rate")
            return cls(DeviceChannel.open(device))
        from ..transport.serial import SerialChannel

        return cls(SerialChannel(device, baud_rate, chunk_size, interval_ms))

    @property
    def pending(self) -> bytes:
        """Commands appended since the last successful flush."""
        return bytes(self._cmd)

    def bit_image(
        self,
        source: ImageSource,
        mode: BitImageMode,
        width: Optional[int] = None,
    ) -> "CustomPrinter":
        """Append a bit image decoded from a file path or a PIL image.

        Raises DecodeError if the image cannot be read. Nothing is appended
        unless the whole image was encoded.
        """
        self._check_owner()
        img = load_image(source, width)
        return self.bitmap_image(image_to_bitmap(img), mode)

    def bitmap_image(self, bitmap: Bitmap, mode: BitImageMode) -> "CustomPrinter":
        """Append a bit image from an already packed bitmap."""
        self._check_owner()
        data = build_bit_image(bitmap, mode)
        self._cmd += data
        logger.debug(
            "Appended %dx%d bit image in %s (%d bytes)",
            bitmap.width,
            bitmap.height,
            mode.name,
            len(data),
        )
        return self

    def cut_paper(self, cut_type: CutType) -> "CustomPrinter":
        """Append a total or partial cut."""
        return self._append(cut_cmd(cut_type))

    def print_line(self) -> "CustomPrinter":
        """Append print and line feed.

        Either print_line() or print_and_feed_paper() is needed before
        flush() for the device to actually print buffered data.
        """
        return self._append(print_cmd())

    def print_and_feed_paper(self, unit: FeedUnit, amount: int) -> "CustomPrinter":
        """Append print and feed the paper by `amount` of `unit`."""
        return self._append(print_and_feed_cmd(unit, amount))

    def speed(self, speed: Speed) -> "CustomPrinter":
        return self._append(speed_cmd(speed))

    def density(self, density: Density) -> "CustomPrinter":
        return self._append(density_cmd(density))

    def raw(self, data: bytes) -> "CustomPrinter":
        """Append bytes verbatim."""
        return self._append(bytes(data))

    def flush(self) -> "CustomPrinter":
        """Write the buffered commands in one call and clear them.

        On WriteError the buffer is left as it was, so flush() may be retried.
        """
        self._check_owner()
        self._channel.write(bytes(self._cmd))
        logger.info("Flushed %d bytes", len(self._cmd))
        self._cmd.clear()
        return self

    def close(self) -> None:
        self._check_owner()
        if self._cmd:
            logger.warning("Discarding %d unflushed bytes", len(self._cmd))
            self._cmd.clear()
        self._channel.close()

    def __enter__(self) -> "CustomPrinter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _append(self, data: bytes) -> "CustomPrinter":
        self._check_owner()
        self._cmd += data
        logger.debug("Appended command %s", data.hex(" "))
        return self

    def _check_owner(self) -> None:
        if threading.get_ident() != self._owner:
            raise RuntimeError("CustomPrinter used from a thread other than its owner")
