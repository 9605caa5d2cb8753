"""Command line interface printing information about the operating system."""

from __future__ import annotations

import argparse
import logging

from os_info.detect import get

_VERSION = "2.0.0"

_log = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="os_info",
        description="Detect the operating system type and version.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("--all", action="store_true", help="Show all OS information.")
    parser.add_argument("-t", "--type", dest="os_type", action="store_true", help="Show OS type.")
    parser.add_argument("-v", "--os-version", action="store_true", help="Show OS version.")
    parser.add_argument("-b", "--bitness", action="store_true", help="Show OS bitness.")
    parser.add_argument(
        "-A", "--Arch", dest="architecture", action="store_true", help="Show OS arch."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the requested operating system information."""
    logging.basicConfig(level=logging.WARNING)
    options = _parser().parse_args(argv)
    info = get()
    arch = info.architecture if info.architecture is not None else "unknown"

    selected = options.os_type or options.os_version or options.bitness or options.architecture
    if options.all or not selected:
        if selected:
            _log.warning("--all supersedes all other options")
        print(
            f"OS information:\nType: {info.os_type}\nVersion: {info.version}\n"
            f"Bitness: {info.bitness} \narchitecture:{arch}"
        )
        return 0

    if options.os_type:
        print(f"OS type: {info.os_type}")
    if options.os_version:
        print(f"OS version: {info.version}")
    if options.bitness:
        print(f"OS bitness: {info.bitness}")
    if options.architecture:
        print(f"OS architecture: {arch}")
    return 0