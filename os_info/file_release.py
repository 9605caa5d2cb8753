"""Detection of Linux distributions from their release files."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from os_info.bitness import Bitness
from os_info.info import Info
from os_info.matcher import all_trimmed, key_value, prefixed_version
from os_info.os_type import Type
from os_info.version import Version

_log = logging.getLogger(__name__)

# os-release ID values and the types they stand for.
_OS_RELEASE_IDS: dict[str, Type] = {
    "almalinux": Type.AlmaLinux,
    "alpaquita": Type.Alpaquita,
    "alpine": Type.Alpine,
    "amzn": Type.Amazon,
    "aosc": Type.AOSC,
    "arch": Type.Arch,
    "archarm": Type.Arch,
    "artix": Type.Artix,
    "bluefin": Type.Bluefin,
    "cachyos": Type.CachyOS,
    "centos": Type.CentOS,
    "debian": Type.Debian,
    "fedora": Type.Fedora,
    "kali": Type.Kali,
    "manjaro-arm": Type.Manjaro,
    "linuxmint": Type.Mint,
    "mariner": Type.Mariner,
    "nixos": Type.NixOS,
    "nobara": Type.Nobara,
    "Uos": Type.Uos,
    "opencloudos": Type.OpenCloudOS,
    "openEuler": Type.openEuler,
    "ol": Type.OracleLinux,
    "opensuse": Type.openSUSE,
    "opensuse-leap": Type.openSUSE,
    "opensuse-microos": Type.openSUSE,
    "opensuse-tumbleweed": Type.openSUSE,
    "rhel": Type.RedHatEnterprise,
    "rocky": Type.RockyLinux,
    "sled": Type.SUSE,
    "sles": Type.SUSE,
    "sles_sap": Type.SUSE,
    "ubuntu": Type.Ubuntu,
    "ultramarine": Type.Ultramarine,
    "void": Type.Void,
}


@dataclass(frozen=True)
class _ReleaseInfo:
    """How to read the type and version out of one release file."""

    path: str
    os_type: Callable[[str], Type | None]
    version: Callable[[str], Version | None]


def _to_version(value: str | None) -> Version | None:
    return None if value is None else Version.from_string(value)


def _os_release_type(release: str) -> Type | None:
    release_id = key_value(release, "ID")
    return None if release_id is None else _OS_RELEASE_IDS.get(release_id)


def _fixed(os_type: Type) -> Callable[[str], Type | None]:
    return lambda _release: os_type


def _prefixed(prefix: str) -> Callable[[str], Version | None]:
    return lambda release: _to_version(prefixed_version(release, prefix))


_DISTRIBUTIONS: tuple[_ReleaseInfo, ...] = (
    # Keep this first; most modern distributions have this file.
    _ReleaseInfo(
        "etc/os-release",
        _os_release_type,
        lambda release: _to_version(key_value(release, "VERSION_ID")),
    ),
    # Older distributions must have their specific release file parsed.
    _ReleaseInfo("etc/mariner-release", _fixed(Type.Mariner), _prefixed("CBL-Mariner")),
    _ReleaseInfo("etc/centos-release", _fixed(Type.CentOS), _prefixed("release")),
    _ReleaseInfo("etc/fedora-release", _fixed(Type.Fedora), _prefixed("release")),
    _ReleaseInfo(
        "etc/alpine-release",
        _fixed(Type.Alpine),
        lambda release: _to_version(all_trimmed(release)),
    ),
    _ReleaseInfo(
        "etc/redhat-release", _fixed(Type.RedHatEnterprise), _prefixed("release")
    ),
)


def _read(path: Path) -> str | None:
    try:
        with path.open(encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        _log.warning("Unable to read %s file: %r", path, exc)
        return None


def retrieve(root: str | Path) -> Info | None:
    """Determine the distribution from release files below root, or None."""
    for release_info in _DISTRIBUTIONS:
        path = Path(root) / release_info.path
        if not path.exists():
            _log.debug("Path '%s' doesn't exist", release_info.path)
            continue
        content = _read(path)
        if content is None:
            continue
        os_type = release_info.os_type(content)
        if os_type is None:
            continue
        version = release_info.version(content)
        return Info(
            os_type=os_type,
            version=Version.unknown() if version is None else version,
            bitness=Bitness.Unknown,
        )
    return None


def get() -> Info | None:
    """Determine the distribution from the release files of the running system."""
    return retrieve("/")