from __future__ import annotations

import logging
from typing import List

from .commands import bit_image_cmd
from .types import Bitmap, BitImageMode, validate_dimensions

logger = logging.getLogger(__name__)


def pack_line(line: List[int]) -> bytes:
    """Pack a line of 0/1 pixels into bytes, most significant bit first."""
    out = bytearray()
    for i in range(0, len(line), 8):
        chunk = line[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 0x80 >> bit
        out.append(value)
    return bytes(out)


def pack_pixels(pixels: List[int], width: int) -> Bitmap:
    """Pack a row-major 0/1 pixel list into a Bitmap."""
    if width <= 0:
        raise ValueError("Width must be greater than zero")
    if len(pixels) % width != 0:
        raise ValueError("Pixels length must be a multiple of width")
    height = len(pixels) // width
    data = bytearray()
    for row in range(height):
        data += pack_line(pixels[row * width : (row + 1) * width])
    return Bitmap(bytes(data), width, height)


def transcode_bitmap(width: int, height: int, bitmap: bytes, mode: BitImageMode) -> bytes:
    """Reshape a row-major 1bpp bitmap into banked, column-major bit-image data.

    The output holds ceil(height / bank) banks. Inside a bank every pixel
    column owns bank // 8 bytes, and dot line k of the bank lands on bit
    0x80 >> (k % 8) of byte k // 8. Source bytes past the end of `bitmap`
    read as blank, which is what pads the last bank.
    """
    validate_dimensions(width, height)
    bank = mode.bank
    group = bank // 8
    banks = (height + bank - 1) // bank
    step = width // 8
    size = len(bitmap)
    bitimage = bytearray(banks * group * width)

    for i in range(banks):
        bank_src = i * step * bank
        bank_dst = i * width * group
        for k in range(bank):
            row = bank_src + k * step
            if row >= size:
                break
            dst_bit = 0x80 >> (k % 8)
            dst_row = bank_dst + k // 8
            for col_byte in range(min(step, size - row)):
                value = bitmap[row + col_byte]
                if not value:
                    continue
                for bit in range(8):
                    if value & (0x80 >> bit):
                        j = col_byte * 8 + bit
                        bitimage[dst_row + j * group] |= dst_bit

    logger.debug(
        "Transcoded %dx%d bitmap into %d bank(s) of %d dots (%d bytes)",
        width,
        height,
        banks,
        bank,
        len(bitimage),
    )
    return bytes(bitimage)


def transcode(bitmap: Bitmap, mode: BitImageMode) -> bytes:
    """Transcode a Bitmap helper object."""
    return transcode_bitmap(bitmap.width, bitmap.height, bitmap.data, mode)


def frame_bit_image(bitimage: bytes, width: int, mode: BitImageMode) -> bytes:
    """Split bit-image data into one ESC * command per bank, in bank order."""
    k = mode.bytes_per_call(width)
    out = bytearray()
    for i in range(len(bitimage) // k):
        out += bit_image_cmd(mode, width, bitimage[i * k : (i + 1) * k])
    return bytes(out)


def build_bit_image(bitmap: Bitmap, mode: BitImageMode) -> bytes:
    """Build the full ESC * command stream for a bitmap."""
    bitmap.validate()
    return frame_bit_image(transcode(bitmap, mode), bitmap.width, mode)
