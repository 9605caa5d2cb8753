"""Detection of Windows."""

from __future__ import annotations

import logging
import os
import sys

from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.version import Version

try:
    import winreg
except ImportError:  # not running on Windows
    winreg = None

_log = logging.getLogger(__name__)

VER_NT_WORKSTATION = 1
VER_SUITE_WH_SERVER = 0x8000

PROCESSOR_ARCHITECTURE_INTEL = 0
PROCESSOR_ARCHITECTURE_ARM = 5
PROCESSOR_ARCHITECTURE_IA64 = 6
PROCESSOR_ARCHITECTURE_AMD64 = 9
PROCESSOR_ARCHITECTURE_ARM64 = 12
PROCESSOR_ARCHITECTURE_UNKNOWN = 0xFFFF

_ARCHITECTURE_NAMES = {
    PROCESSOR_ARCHITECTURE_AMD64: "x86_64",
    PROCESSOR_ARCHITECTURE_IA64: "ia64",
    PROCESSOR_ARCHITECTURE_ARM: "arm",
    PROCESSOR_ARCHITECTURE_ARM64: "aarch64",
    PROCESSOR_ARCHITECTURE_INTEL: "i386",
}

# Values of the PROCESSOR_ARCHITECTURE environment variables.
_ENV_ARCHITECTURES = {
    "X86": PROCESSOR_ARCHITECTURE_INTEL,
    "AMD64": PROCESSOR_ARCHITECTURE_AMD64,
    "IA64": PROCESSOR_ARCHITECTURE_IA64,
    "ARM": PROCESSOR_ARCHITECTURE_ARM,
    "ARM64": PROCESSOR_ARCHITECTURE_ARM64,
}

_CURRENT_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"

_WORKSTATION_EDITIONS = {
    (6, 3): ("Windows 8.1", "Windows Server 2012 R2"),
    (6, 2): ("Windows 8", "Windows Server 2012"),
    (6, 1): ("Windows 7", "Windows Server 2008 R2"),
    (6, 0): ("Windows Vista", "Windows Server 2008"),
}


def current_platform() -> Info:
    """Return information about the running Windows system."""
    _log.debug("windows.current_platform is called")
    version, edition_name = _version()
    info = Info(
        os_type=Type.Windows,
        version=version,
        edition=edition_name,
        bitness=_bitness(),
        architecture=architecture(_processor_architecture(native=True)),
    )
    _log.debug("Returning %r", info)
    return info


def _version() -> tuple[Version, str | None]:
    getter = getattr(sys, "getwindowsversion", None)
    if getter is None:
        return Version.unknown(), None
    info = getter()
    major, minor, build = getattr(info, "platform_version", None) or (
        info.major,
        info.minor,
        info.build,
    )
    name = product_name(major, build)
    if name is None:
        name = edition(
            major,
            minor,
            build,
            info.product_type,
            info.suite_mask,
            # There is no portable way to query SM_SERVERR2 here.
            False,
            _processor_architecture(native=False),
        )
    return Version.semantic(major, minor, build), name


def _processor_architecture(native: bool) -> int:
    names = ["PROCESSOR_ARCHITECTURE"]
    if native:
        names.insert(0, "PROCESSOR_ARCHITEW6432")
    for name in names:
        value = os.environ.get(name)
        if value:
            return _ENV_ARCHITECTURES.get(value.upper(), PROCESSOR_ARCHITECTURE_UNKNOWN)
    return PROCESSOR_ARCHITECTURE_UNKNOWN


def architecture(processor_architecture: int) -> str | None:
    """Map a processor architecture code to its name, or None if unknown."""
    return _ARCHITECTURE_NAMES.get(processor_architecture)


def _bitness() -> Bitness:
    if sys.maxsize > 2**32:
        # A 64-bit process can only run on 64-bit Windows.
        return Bitness.X64
    if os.environ.get("PROCESSOR_ARCHITEW6432"):
        return Bitness.X64
    return Bitness.X32


def product_name(major: int, build: int) -> str | None:
    """Read the product name from the registry, or None if unavailable."""
    if winreg is None:
        return None
    is_win_11 = major == 10 and build >= 22000
    name = "EditionID" if is_win_11 else "ProductName"
    try:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE, _CURRENT_VERSION_KEY, 0, winreg.KEY_READ
        ) as key:
            value, value_type = winreg.QueryValueEx(key, name)
    except OSError as exc:
        _log.error("Registry query failed: %r", exc)
        return None
    if value_type != winreg.REG_SZ or not isinstance(value, str):
        _log.error("Registry value %s has unexpected type", name)
        return None
    value = value.removesuffix("\0")
    return f"Windows 11 {value}" if is_win_11 else value


def edition(
    major: int,
    minor: int,
    build: int,
    product_type: int,
    suite_mask: int,
    server_r2: bool,
    processor_architecture: int,
) -> str | None:
    """Determine the Windows edition from version information."""
    workstation = product_type == VER_NT_WORKSTATION
    if (major, minor) == (10, 0):
        if workstation:
            return "Windows 11" if build >= 22000 else "Windows 10"
        return "Windows Server 2016"
    if (major, minor) in _WORKSTATION_EDITIONS:
        desktop, server = _WORKSTATION_EDITIONS[(major, minor)]
        return desktop if workstation else server
    if (major, minor) == (5, 1):
        return "Windows XP"
    if (major, minor) == (5, 0):
        return "Windows 2000"
    if (major, minor) == (5, 2) and not server_r2:
        if suite_mask & VER_SUITE_WH_SERVER == VER_SUITE_WH_SERVER:
            return "Windows Home Server"
        if workstation and processor_architecture == PROCESSOR_ARCHITECTURE_AMD64:
            return "Windows XP Professional x64 Edition"
        return "Windows Server 2003"
    return None