from __future__ import annotations

import logging
from typing import BinaryIO

from ..errors import ChannelOpenError, WriteError

logger = logging.getLogger(__name__)


class DeviceChannel:
    """Raw device node such as /dev/usb/lp0, opened for reading and writing."""

    def __init__(self, handle: BinaryIO, name: str = "") -> None:
        self._handle = handle
        self.name = name or getattr(handle, "name", "")

    @classmethod
    def open(cls, path: str) -> "DeviceChannel":
        try:
            handle = open(path, "r+b", buffering=0)
        except OSError as exc:
            raise ChannelOpenError(f"Cannot open {path} for reading and writing: {exc}") from exc
        logger.info("Opened device %s", path)
        return cls(handle, path)

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        offset = 0
        try:
            while offset < len(view):
                written = self._handle.write(view[offset:])
                if written is None:
                    raise WriteError(f"Write to {self.name} would block, {offset} of {len(view)} bytes written")
                offset += written
            self._handle.flush()
        except OSError as exc:
            raise WriteError(f"Write to {self.name} failed: {exc}") from exc

    def close(self) -> None:
        self._handle.close()
        logger.info("Closed device %s", self.name)

    def __enter__(self) -> "DeviceChannel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
