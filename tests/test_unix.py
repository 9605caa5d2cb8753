import subprocess
import sys
from unittest import mock

import pytest

from os_info import unix
from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.version import Version


def _fake_run(commands):
    def run(args, stdout=None, stderr=None, check=False):
        key = tuple(args)
        if key not in commands:
            raise FileNotFoundError(args[0])
        returncode, out, err = commands[key]
        return subprocess.CompletedProcess(args, returncode, stdout=out, stderr=err)

    return run


def _ok(out):
    return (0, out, b"")


@pytest.fixture
def platform(monkeypatch):
    def set_platform(name):
        monkeypatch.setattr(sys, "platform", name)

    return set_platform


def test_aix(platform):
    platform("aix7")
    commands = {
        ("uname", "-s"): _ok(b"AIX\n"),
        ("uname", "-v"): _ok(b"7\n"),
        ("uname", "-r"): _ok(b"2\n"),
        ("prtconf", "-c"): _ok(b"CPU Type: 64-bit\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.aix()
    assert info.os_type is Type.AIX
    assert info.version == Version.semantic(7, 2, 0)
    assert info.bitness is Bitness.X64


def test_aix_minor_defaults_to_zero(platform):
    platform("aix7")
    commands = {
        ("uname", "-s"): _ok(b"AIX\n"),
        ("uname", "-v"): _ok(b"7\n"),
        ("uname", "-r"): (1, b"", b"error"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.aix()
    assert info.version == Version.semantic(7, 0, 0)
    assert info.bitness is Bitness.Unknown


def test_aix_without_uname(platform):
    platform("aix7")
    with mock.patch("subprocess.run", _fake_run({})):
        info = unix.aix()
    assert info.os_type is Type.Unknown
    assert info.version == Version.unknown()


def test_android():
    info = unix.android()
    assert info == Info.with_type(Type.Android)


def test_emscripten():
    info = unix.emscripten()
    assert info == Info.with_type(Type.Emscripten)


def test_unknown():
    assert unix.unknown() == Info.unknown()
    assert unix.unknown().os_type is Type.Unknown


def test_dragonfly(platform):
    platform("dragonfly6")
    commands = {
        ("uname", "-r"): _ok(b"6.4.0\n"),
        ("getconf", "LONG_BIT"): _ok(b"64\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.dragonfly()
    assert info.os_type is Type.DragonFly
    assert info.version == Version.semantic(6, 4, 0)
    assert info.bitness is Bitness.X64


def test_freebsd(platform):
    platform("freebsd13")
    commands = {
        ("uname", "-s"): _ok(b"FreeBSD\n"),
        ("uname", "-r"): _ok(b"13.2-RELEASE\n"),
        ("/sbin/sysctl", "hardening.version"): (1, b"", b"unknown oid\n"),
        ("getconf", "LONG_BIT"): _ok(b"64\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.freebsd()
    assert info.os_type is Type.FreeBSD
    assert info.version == Version.custom("13.2-RELEASE")
    assert info.bitness is Bitness.X64


def test_hardenedbsd(platform):
    platform("freebsd13")
    commands = {
        ("uname", "-s"): _ok(b"FreeBSD\n"),
        ("/sbin/sysctl", "hardening.version"): (0, b"", b"0\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.freebsd()
    assert info.os_type is Type.HardenedBSD
    assert info.version == Version.unknown()


def test_freebsd_without_sysctl(platform):
    platform("freebsd13")
    commands = {("uname", "-s"): _ok(b"FreeBSD\n")}
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.freebsd()
    assert info.os_type is Type.FreeBSD


def test_midnightbsd(platform):
    platform("freebsd13")
    commands = {("uname", "-s"): _ok(b"MidnightBSD\n")}
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.freebsd()
    assert info.os_type is Type.MidnightBSD


def test_freebsd_other_system_is_unknown(platform):
    platform("freebsd13")
    commands = {("uname", "-s"): _ok(b"Plan9\n")}
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.freebsd()
    assert info.os_type is Type.Unknown


def test_illumos(platform):
    platform("sunos5")
    commands = {
        ("uname", "-o"): _ok(b"illumos\n"),
        ("uname", "-v"): _ok(b"illumos-abc123\n"),
        ("isainfo", "-b"): _ok(b"64\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.illumos()
    assert info.os_type is Type.Illumos
    assert info.version == Version.custom("illumos-abc123")
    assert info.bitness is Bitness.X64


def test_illumos_other_system_is_unknown(platform):
    platform("sunos5")
    commands = {("uname", "-o"): _ok(b"Solaris\n")}
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.illumos()
    assert info.os_type is Type.Unknown


def test_netbsd(platform):
    platform("netbsd10")
    commands = {
        ("uname", "-s"): _ok(b"NetBSD\n"),
        ("uname", "-m"): _ok(b"amd64\n"),
        ("sysctl", "-n", "hw.machine_arch"): _ok(b"amd64\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.netbsd()
    assert info.os_type is Type.NetBSD
    assert info.version == Version.custom("NetBSD")
    assert info.bitness is Bitness.X64
    assert info.architecture == "amd64"


def test_openbsd(platform):
    platform("openbsd7")
    commands = {
        ("uname", "-r"): _ok(b"7.4\n"),
        ("uname", "-m"): _ok(b"i386\n"),
        ("sysctl", "-n", "hw.machine"): _ok(b"i386\n"),
    }
    with mock.patch("subprocess.run", _fake_run(commands)):
        info = unix.openbsd()
    assert info.os_type is Type.OpenBSD
    assert info.version == Version.semantic(7, 4, 0)
    assert info.bitness is Bitness.X32
    assert info.architecture == "i386"


def test_redox_reads_uname_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sys:uname").write_text("0.8.0\n", encoding="utf-8")
    info = unix.redox()
    assert info.os_type is Type.Redox
    assert info.version == Version.semantic(0, 8, 0)
    assert info.bitness is Bitness.Unknown


def test_redox_without_uname_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    info = unix.redox()
    assert info.os_type is Type.Redox
    assert info.version == Version.unknown()