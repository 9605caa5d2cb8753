"""Detection of AIX, the BSDs, illumos, Android, Emscripten, Redox and unknown systems."""

from __future__ import annotations

import logging
import subprocess

from os_info import bitness
from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.system import architecture, uname
from os_info.version import Version

_log = logging.getLogger(__name__)

_REDOX_UNAME_FILE = "sys:uname"


def _version_of(value: str | None) -> Version:
    return Version.unknown() if value is None else Version.from_string(value)


def _returning(info: Info) -> Info:
    _log.debug("Returning %r", info)
    return info


def aix() -> Info:
    """Return information about the running AIX system."""
    _log.debug("aix.current_platform is called")
    major = uname("-v")
    version_text = None
    if major is not None:
        minor = uname("-r")
        version_text = f"{major}.{'0' if minor is None else minor}"
    os_type = Type.AIX if uname("-s") == "AIX" else Type.Unknown
    return _returning(
        Info(os_type=os_type, version=_version_of(version_text), bitness=bitness.get())
    )


def android() -> Info:
    """Return information about the running Android system."""
    _log.debug("android.current_platform is called")
    return _returning(Info.with_type(Type.Android))


def dragonfly() -> Info:
    """Return information about the running DragonFly BSD system."""
    _log.debug("dragonfly.current_platform is called")
    return _returning(
        Info(
            os_type=Type.DragonFly,
            version=_version_of(uname("-r")),
            bitness=bitness.get(),
        )
    )


def emscripten() -> Info:
    """Return information about the Emscripten environment."""
    _log.debug("emscripten.current_platform is called")
    return _returning(Info.with_type(Type.Emscripten))


def _freebsd_type() -> Type:
    system = uname("-s")
    if system == "MidnightBSD":
        return Type.MidnightBSD
    if system != "FreeBSD":
        return Type.Unknown
    try:
        completed = subprocess.run(
            ["/sbin/sysctl", "hardening.version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        _log.error("Failed to invoke '/sbin/sysctl': %r", exc)
        return Type.FreeBSD
    try:
        hardening = completed.stderr.decode("utf-8")
    except UnicodeDecodeError:
        return Type.FreeBSD
    return Type.HardenedBSD if hardening == "0\n" else Type.FreeBSD


def freebsd() -> Info:
    """Return information about the running FreeBSD family system."""
    _log.debug("freebsd.current_platform is called")
    version = _version_of(uname("-r"))
    return _returning(
        Info(os_type=_freebsd_type(), version=version, bitness=bitness.get())
    )


def illumos() -> Info:
    """Return information about the running illumos system."""
    _log.debug("illumos.current_platform is called")
    version = _version_of(uname("-v"))
    os_type = Type.Illumos if uname("-o") == "illumos" else Type.Unknown
    return _returning(Info(os_type=os_type, version=version, bitness=bitness.get()))


def netbsd() -> Info:
    """Return information about the running NetBSD system."""
    _log.debug("netbsd.current_platform is called")
    return _returning(
        Info(
            os_type=Type.NetBSD,
            version=_version_of(uname("-s")),
            bitness=bitness.get(),
            architecture=architecture(),
        )
    )


def openbsd() -> Info:
    """Return information about the running OpenBSD system."""
    _log.debug("openbsd.current_platform is called")
    return _returning(
        Info(
            os_type=Type.OpenBSD,
            version=_version_of(uname("-r")),
            bitness=bitness.get(),
            architecture=architecture(),
        )
    )


def _redox_version() -> str | None:
    try:
        with open(_REDOX_UNAME_FILE, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        _log.error("Unable to read %s file: %r", _REDOX_UNAME_FILE, exc)
        return None


def redox() -> Info:
    """Return information about the running Redox system."""
    _log.debug("redox.current_platform is called")
    return _returning(
        Info(
            os_type=Type.Redox,
            version=_version_of(_redox_version()),
            bitness=Bitness.Unknown,
        )
    )


def unknown() -> Info:
    """Return information for a system that cannot be recognised."""
    _log.debug("unknown.current_platform is called")
    return Info.unknown()