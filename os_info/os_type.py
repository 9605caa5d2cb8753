"""Supported operating system types."""

from enum import Enum


class Type(Enum):
    """An operating system type; its value is the human readable name."""

    AIX = "AIX"
    AlmaLinux = "AlmaLinux"
    Alpaquita = "Alpaquita Linux"
    Alpine = "Alpine Linux"
    Amazon = "Amazon Linux AMI"
    Android = "Android"
    AOSC = "AOSC OS"
    Arch = "Arch Linux"
    Artix = "Artix Linux"
    Bluefin = "Bluefin"
    CachyOS = "CachyOS Linux"
    CentOS = "CentOS"
    Debian = "Debian"
    DragonFly = "DragonFly BSD"
    Emscripten = "Emscripten"
    EndeavourOS = "EndeavourOS"
    Fedora = "Fedora"
    FreeBSD = "FreeBSD"
    Garuda = "Garuda Linux"
    Gentoo = "Gentoo Linux"
    HardenedBSD = "HardenedBSD"
    Illumos = "illumos"
    Kali = "Kali Linux"
    Linux = "Linux"
    Mabox = "Mabox"
    Macos = "Mac OS"
    Manjaro = "Manjaro"
    Mariner = "Mariner"
    MidnightBSD = "Midnight BSD"
    Mint = "Linux Mint"
    NetBSD = "NetBSD"
    NixOS = "NixOS"
    Nobara = "Nobara Linux"
    OpenBSD = "OpenBSD"
    OpenCloudOS = "OpenCloudOS"
    openEuler = "EulerOS"
    openSUSE = "openSUSE"
    OracleLinux = "Oracle Linux"
    Pop = "Pop!_OS"
    Raspbian = "Raspberry Pi OS"
    Redhat = "Red Hat Linux"
    RedHatEnterprise = "Red Hat Enterprise Linux"
    Redox = "Redox"
    RockyLinux = "Rocky Linux"
    Solus = "Solus"
    SUSE = "SUSE Linux Enterprise Server"
    Ubuntu = "Ubuntu"
    Ultramarine = "Ultramarine Linux"
    Uos = "UOS"
    Void = "Void Linux"
    Unknown = "Unknown"
    Windows = "Windows"

    def __str__(self) -> str:
        return self.value