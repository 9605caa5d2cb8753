"""Detection of the running operating system."""

from __future__ import annotations

import sys

from os_info import linux, macos, unix, windows
from os_info.info import Info

_PLATFORMS = (
    ("aix", unix.aix),
    ("android", unix.android),
    ("dragonfly", unix.dragonfly),
    ("emscripten", unix.emscripten),
    ("freebsd", unix.freebsd),
    ("sunos", unix.illumos),
    ("illumos", unix.illumos),
    ("darwin", macos.current_platform),
    ("netbsd", unix.netbsd),
    ("openbsd", unix.openbsd),
    ("redox", unix.redox),
    ("win32", windows.current_platform),
)


def get() -> Info:
    """Return information about the current operating system."""
    platform = sys.platform
    if platform.startswith("linux"):
        if hasattr(sys, "getandroidapilevel"):
            return unix.android()
        return linux.current_platform()
    for prefix, detect in _PLATFORMS:
        if platform.startswith(prefix):
            return detect()
    return unix.unknown()