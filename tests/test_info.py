import pytest

from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.version import Version


def test_unknown():
    info = Info.unknown()
    assert info.os_type is Type.Unknown
    assert info.version == Version.unknown()
    assert info.edition is None
    assert info.codename is None
    assert info.bitness is Bitness.Unknown
    assert info.architecture is None


@pytest.mark.parametrize(
    "os_type",
    [
        Type.AIX,
        Type.Redox,
        Type.Alpaquita,
        Type.Alpine,
        Type.Amazon,
        Type.Android,
        Type.AOSC,
        Type.Arch,
        Type.Artix,
        Type.Bluefin,
        Type.CachyOS,
        Type.CentOS,
        Type.Debian,
        Type.Emscripten,
        Type.EndeavourOS,
        Type.Fedora,
        Type.Gentoo,
        Type.Linux,
        Type.Macos,
        Type.Manjaro,
        Type.Mariner,
        Type.NixOS,
        Type.Nobara,
        Type.Uos,
        Type.OpenCloudOS,
        Type.openEuler,
        Type.openSUSE,
        Type.OracleLinux,
        Type.Pop,
        Type.Redhat,
        Type.RedHatEnterprise,
        Type.Solus,
        Type.SUSE,
        Type.Ubuntu,
        Type.Ultramarine,
        Type.Void,
        Type.Mint,
        Type.Unknown,
        Type.Windows,
    ],
)
def test_with_type(os_type):
    info = Info.with_type(os_type)
    assert info.os_type is os_type
    assert info.version == Version.unknown()
    assert info.bitness is Bitness.Unknown


def test_default():
    assert Info() == Info.unknown()


@pytest.mark.parametrize(
    "info, expected",
    [
        (Info.unknown(), "Unknown [unknown bitness]"),
        (Info(os_type=Type.Redox), "Redox [unknown bitness]"),
        (
            Info(os_type=Type.Linux, version=Version.semantic(2, 3, 4)),
            "Linux 2.3.4 [unknown bitness]",
        ),
        (
            Info(os_type=Type.AOSC, version=Version.semantic(12, 1, 3)),
            "AOSC OS 12.1.3 [unknown bitness]",
        ),
        (
            Info(os_type=Type.Arch, version=Version.rolling(None)),
            "Arch Linux Rolling Release [unknown bitness]",
        ),
        (
            Info(os_type=Type.Artix, version=Version.rolling(None)),
            "Artix Linux Rolling Release [unknown bitness]",
        ),
        (
            Info(os_type=Type.Manjaro, version=Version.rolling("2020.05.24")),
            "Manjaro Rolling Release (2020.05.24) [unknown bitness]",
        ),
        (
            Info(os_type=Type.Windows, version=Version.custom("Special Version")),
            "Windows Special Version [unknown bitness]",
        ),
        (Info(bitness=Bitness.X32), "Unknown [32-bit]"),
        (Info(bitness=Bitness.X64), "Unknown [64-bit]"),
        (
            Info(
                os_type=Type.Macos,
                version=Version.semantic(10, 2, 0),
                edition="edition",
                codename="codename",
                bitness=Bitness.X64,
                architecture="architecture",
            ),
            "Mac OS 10.2.0 (edition) (codename) [64-bit]",
        ),
    ],
)
def test_display(info, expected):
    assert str(info) == expected