from __future__ import annotations

import os
from typing import Optional

from PIL import Image

from ...errors import BitmapError
from .base import ImageSource, RasterConverter


class ImageConverter(RasterConverter):
    def __init__(self, width: Optional[int] = None) -> None:
        if width is not None and width < 8:
            raise BitmapError(f"Width must be at least 8 dots, got {width}")
        self.width = width

    def load(self, source: ImageSource) -> Image.Image:
        if isinstance(source, Image.Image):
            img = source
        else:
            img = self._load_image(os.fspath(source))
        if self.width is not None:
            img = self._resize_to_width(img, self._normalized_width(self.width))
        return img

    @staticmethod
    def _normalized_width(width: int) -> int:
        if width % 8 == 0:
            return width
        return width - (width % 8)
