from __future__ import annotations

import logging
import os
from typing import Union

from PIL import Image, ImageOps

from ...errors import DecodeError

logger = logging.getLogger(__name__)

ImageSource = Union[str, os.PathLike, Image.Image]


class RasterConverter:
    def load(self, source: ImageSource) -> Image.Image:
        raise NotImplementedError

    @staticmethod
    def _load_image(path: str) -> Image.Image:
        try:
            with Image.open(path) as img:
                img = ImageOps.exif_transpose(img)
                img.load()
                return img.copy()
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"Cannot decode image {path}: {exc}") from exc

    @staticmethod
    def _resize_to_width(img: Image.Image, width: int) -> Image.Image:
        if img.width == width:
            return img
        ratio = width / float(img.width)
        height = max(1, int(img.height * ratio))
        logger.debug("Resizing image from %dx%d to %dx%d", img.width, img.height, width, height)
        return img.resize((width, height), Image.LANCZOS)
