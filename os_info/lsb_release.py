"""Detection of Linux distributions through the lsb_release command."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from os_info.info import Info
from os_info.matcher import prefixed_version, prefixed_word
from os_info.os_type import Type
from os_info.version import Version

_log = logging.getLogger(__name__)

# Distributor ID values reported by lsb_release and the types they stand for.
_DISTRIBUTOR_IDS: dict[str, Type] = {
    "Alpaquita": Type.Alpaquita,
    "Amazon": Type.Amazon,
    "AmazonAMI": Type.Amazon,
    "AOSC": Type.AOSC,
    "Arch": Type.Arch,
    "Artix": Type.Artix,
    "Bluefin": Type.Bluefin,
    "cachyos": Type.CachyOS,
    "CentOS": Type.CentOS,
    "Debian": Type.Debian,
    "EndeavourOS": Type.EndeavourOS,
    "Fedora": Type.Fedora,
    "Fedora Linux": Type.Fedora,
    "Garuda": Type.Garuda,
    "Gentoo": Type.Gentoo,
    "Kali": Type.Kali,
    "Linuxmint": Type.Mint,
    "MaboxLinux": Type.Mabox,
    "ManjaroLinux": Type.Manjaro,
    "Manjaro-ARM": Type.Manjaro,
    "Mariner": Type.Mariner,
    "NixOS": Type.NixOS,
    "NobaraLinux": Type.Nobara,
    "Uos": Type.Uos,
    "OpenCloudOS": Type.OpenCloudOS,
    "openEuler": Type.openEuler,
    "openSUSE": Type.openSUSE,
    "OracleServer": Type.OracleLinux,
    "Pop": Type.Pop,
    "Raspbian": Type.Raspbian,
    "RedHatEnterprise": Type.RedHatEnterprise,
    "RedHatEnterpriseServer": Type.RedHatEnterprise,
    "Solus": Type.Solus,
    "SUSE": Type.SUSE,
    "Ubuntu": Type.Ubuntu,
    "UltramarineLinux": Type.Ultramarine,
    "VoidLinux": Type.Void,
}


@dataclass(frozen=True)
class LsbRelease:
    """The fields of interest in the output of 'lsb_release -a'."""

    distribution: str | None = None
    version: str | None = None
    codename: str | None = None


def parse(output: str) -> LsbRelease:
    """Parse the output of 'lsb_release -a'."""
    _log.debug("Trying to parse %r", output)
    distribution = prefixed_word(output, "Distributor ID:")
    codename = prefixed_word(output, "Codename:")
    if codename == "n/a":
        codename = None
    version = prefixed_version(output, "Release:")
    _log.debug(
        "Parsed as '%r' distribution and '%r' version", distribution, version
    )
    return LsbRelease(distribution=distribution, version=version, codename=codename)


def retrieve() -> LsbRelease | None:
    """Run 'lsb_release -a' and parse its output, or None if it cannot run."""
    try:
        completed = subprocess.run(
            ["lsb_release", "-a"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        _log.debug("lsb_release command failed with %r", exc)
        return None
    _log.debug("lsb_release command returned %r", completed)
    return parse(completed.stdout.decode("utf-8", errors="replace"))


def info_from_release(release: LsbRelease) -> Info:
    """Turn parsed lsb_release fields into operating system information."""
    if release.version == "rolling":
        version = Version.rolling(None)
    elif release.version is not None:
        version = Version.from_string(release.version)
    else:
        version = Version.unknown()

    os_type = _DISTRIBUTOR_IDS.get(release.distribution, Type.Linux)
    return Info(os_type=os_type, version=version, codename=release.codename)


def get() -> Info | None:
    """Determine the distribution through lsb_release, or None if unavailable."""
    release = retrieve()
    if release is None:
        return None
    return info_from_release(release)