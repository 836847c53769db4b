"""Tests for fixed control commands."""

from __future__ import annotations

import pytest

from customprint.protocol import (
    CutType,
    Density,
    FeedUnit,
    Speed,
    bit_image_cmd,
    cut_cmd,
    density_cmd,
    print_and_feed_cmd,
    print_cmd,
    speed_cmd,
)
from customprint.protocol.types import BitImageMode


class TestControlCommands:
    """Byte sequences for the non-image commands."""

    def test_print(self):
        assert print_cmd() == b"\x0a"

    def test_cuts(self):
        assert cut_cmd(CutType.TOTAL) == b"\x1b\x69"
        assert cut_cmd(CutType.PARTIAL) == b"\x1b\x6d"

    def test_feed(self):
        assert print_and_feed_cmd(FeedUnit.INCHES, 5) == b"\x1b\x4a\x05"
        assert print_and_feed_cmd(FeedUnit.LINES, 10) == b"\x1b\x64\x0a"
        assert print_and_feed_cmd(FeedUnit.LINES, 255) == b"\x1b\x64\xff"

    @pytest.mark.parametrize("amount", [-1, 256])
    def test_feed_amount_out_of_range(self, amount):
        with pytest.raises(ValueError):
            print_and_feed_cmd(FeedUnit.LINES, amount)

    @pytest.mark.parametrize("speed, value", [(Speed.HIGH, 0), (Speed.NORMAL, 1), (Speed.LOW, 2)])
    def test_speed(self, speed, value):
        assert speed_cmd(speed) == b"\x1b\x78" + bytes([value])

    def test_density(self):
        """Density levels run from -50% (0) to +50% (4)."""
        assert [density_cmd(d)[-1] for d in Density] == [0, 1, 2, 3, 4]
        assert density_cmd(Density.ZERO) == b"\x1d\x7c\x02"

    def test_bit_image_cmd(self):
        out = bit_image_cmd(BitImageMode.DOTS24_DOUBLE_DENSITY, 384, b"\xaa\xbb")
        assert out == b"\x1b\x2a\x21\x80\x01\xaa\xbb"
