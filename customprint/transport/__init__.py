from __future__ import annotations

from typing import Protocol

from .device import DeviceChannel


class Channel(Protocol):
    def write(self, data: bytes) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["Channel", "DeviceChannel"]
