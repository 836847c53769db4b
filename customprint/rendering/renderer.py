from __future__ import annotations

from PIL import Image

from ..protocol import Bitmap, pack_pixels


def image_to_bitmap(img: Image.Image) -> Bitmap:
    """Binarise an image: only pure black (grayscale 0) is printed."""
    img = img.convert("L")
    pixels = [1 if p == 0 else 0 for p in img.tobytes()]
    return pack_pixels(pixels, img.width)
