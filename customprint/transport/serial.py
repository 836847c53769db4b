from __future__ import annotations

import logging
import time
from typing import Optional

import serial

from ..errors import ChannelOpenError, WriteError

logger = logging.getLogger(__name__)

SERIAL_BAUD_RATE = 115200


class SerialChannel:
    """Serial port channel, optionally pacing writes in fixed-size chunks."""

    def __init__(
        self,
        port: str,
        baud_rate: int = SERIAL_BAUD_RATE,
        chunk_size: Optional[int] = None,
        interval_ms: int = 0,
    ) -> None:
        self.name = port
        self._chunk_size = chunk_size
        self._interval = max(0.0, interval_ms / 1000.0)
        try:
            self._serial = serial.Serial(port, baud_rate, timeout=1, write_timeout=5)
        except (serial.SerialException, ValueError) as exc:
            raise ChannelOpenError(f"Cannot open serial port {port}: {exc}") from exc
        logger.info("Opened serial port %s at %d baud", port, baud_rate)

    def write(self, data: bytes) -> None:
        chunk_size = self._chunk_size or len(data) or 1
        try:
            offset = 0
            while offset < len(data):
                chunk = data[offset : offset + chunk_size]
                self._serial.write(chunk)
                offset += len(chunk)
                if self._interval:
                    time.sleep(self._interval)
            self._serial.flush()
        except serial.SerialException as exc:
            raise WriteError(f"Serial write to {self.name} failed: {exc}") from exc

    def close(self) -> None:
        self._serial.close()
        logger.info("Closed serial port %s", self.name)

    def __enter__(self) -> "SerialChannel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
