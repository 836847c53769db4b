from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..config import (
    CUT_NAMES,
    DENSITY_NAMES,
    DEVICE_ENV_VAR,
    DEFAULT_DEVICE,
    MODE_NAMES,
    SPEED_NAMES,
    PrintSettings,
    parse_cut,
    parse_density,
    parse_mode,
    parse_speed,
    resolve_device,
)
from ..errors import CustomPrinterError
from ..printing import CustomPrinter
from ..transport import DeviceChannel
from ..transport.serial import SERIAL_BAUD_RATE


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Print an image on a CUSTOM thermal receipt printer using ESC * bit images. "
            f"Device path comes from --device, ${DEVICE_ENV_VAR} or defaults to {DEFAULT_DEVICE}."
        )
    )
    parser.add_argument("path", help="Image file to print (any format Pillow can open)")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--device", help="Printer device node (e.g. /dev/usb/lp0)")
    target.add_argument("--serial", metavar="PORT", help="Serial port to print through instead of a device node")
    target.add_argument("--output", metavar="FILE", help="Write the command stream to FILE instead of printing")
    parser.add_argument("--baud", type=int, help="Serial baud rate, only with --serial (default: 115200)")
    parser.add_argument("--mode", default="24-double", choices=sorted(MODE_NAMES), help="Bit-image mode")
    parser.add_argument("--width", type=int, help="Resize the image to this many dots wide")
    parser.add_argument("--speed", choices=list(SPEED_NAMES), help="Print speed / quality")
    parser.add_argument("--density", choices=list(DENSITY_NAMES), help="Print density in percent")
    parser.add_argument("--feed-lines", type=int, default=0, help="Lines to feed after the image")
    parser.add_argument("--cut", choices=list(CUT_NAMES), help="Cut the paper after printing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> PrintSettings:
    return PrintSettings(
        mode=parse_mode(args.mode),
        width=args.width,
        speed=parse_speed(args.speed) if args.speed else None,
        density=parse_density(args.density) if args.density else None,
        feed_lines=args.feed_lines,
        cut=parse_cut(args.cut) if args.cut else None,
    )


def open_printer(args: argparse.Namespace) -> CustomPrinter:
    if args.baud is not None and not args.serial:
        raise ValueError("--baud requires --serial")
    if args.output:
        try:
            handle = open(args.output, "wb")
        except OSError as exc:
            raise CustomPrinterError(f"Cannot open {args.output}: {exc}") from exc
        return CustomPrinter(DeviceChannel(handle, args.output))
    if args.serial:
        return CustomPrinter.open(args.serial, baud_rate=args.baud or SERIAL_BAUD_RATE)
    return CustomPrinter.open(resolve_device(args.device))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = build_settings(args)
        with open_printer(args) as printer:
            settings.apply(printer, args.path)
            printer.flush()
    except (CustomPrinterError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
