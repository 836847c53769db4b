from .converters import ImageConverter, ImageSource, load_image
from .renderer import image_to_bitmap

__all__ = ["ImageConverter", "ImageSource", "image_to_bitmap", "load_image"]
