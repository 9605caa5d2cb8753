"""Operating system bitness and its detection."""

from __future__ import annotations

import logging
import subprocess
import sys
from enum import Enum

_log = logging.getLogger(__name__)


class Bitness(Enum):
    """How many bits compose the basic values the operating system deals with."""

    Unknown = "unknown bitness"
    X32 = "32-bit"
    X64 = "64-bit"

    def __str__(self) -> str:
        return self.value


_MACHINE_ARCH_BITNESS = {
    b"amd64\n": Bitness.X64,
    b"x86_64\n": Bitness.X64,
    b"i386\n": Bitness.X32,
    b"aarch64\n": Bitness.X64,
    b"earmv7hf\n": Bitness.X32,
    b"sparc64\n": Bitness.X64,
}

_LONG_BIT_BITNESS = {
    b"32\n": Bitness.X32,
    b"64\n": Bitness.X64,
}

_PRTCONF_BITNESS = {
    b"CPU Type: 64-bit\n": Bitness.X64,
    b"CPU Type: 32-bit\n": Bitness.X32,
}


def _command_output(args: list[str]) -> bytes | None:
    """Run a command and return its standard output, or None if it cannot start."""
    try:
        completed = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        _log.debug("Cannot invoke %r: %r", args, exc)
        return None
    return completed.stdout


def _lookup(args: list[str], table: dict[bytes, Bitness]) -> Bitness:
    output = _command_output(args)
    if output is None:
        return Bitness.Unknown
    return table.get(output, Bitness.Unknown)


def get() -> Bitness:
    """Detect the bitness of the running operating system."""
    platform = sys.platform
    if platform.startswith(("linux", "darwin", "freebsd", "dragonfly")):
        return _lookup(["getconf", "LONG_BIT"], _LONG_BIT_BITNESS)
    if platform.startswith("netbsd"):
        return _lookup(["sysctl", "-n", "hw.machine_arch"], _MACHINE_ARCH_BITNESS)
    if platform.startswith("openbsd"):
        return _lookup(["sysctl", "-n", "hw.machine"], _MACHINE_ARCH_BITNESS)
    if platform.startswith("sunos"):
        return _lookup(["isainfo", "-b"], _LONG_BIT_BITNESS)
    if platform.startswith("aix"):
        return _lookup(["prtconf", "-c"], _PRTCONF_BITNESS)
    return Bitness.Unknown