from __future__ import annotations

from typing import Optional

from PIL import Image

from .base import ImageSource, RasterConverter
from .image import ImageConverter


def load_image(source: ImageSource, width: Optional[int] = None) -> Image.Image:
    return ImageConverter(width).load(source)


__all__ = ["ImageConverter", "ImageSource", "RasterConverter", "load_image"]
