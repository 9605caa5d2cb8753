"""Information about an operating system: type, version, edition and more."""

from __future__ import annotations

from dataclasses import dataclass, field

from os_info.bitness import Bitness
from os_info.os_type import Type
from os_info.version import Version


@dataclass
class Info:
    """Operating system type, version, edition, codename, bitness and architecture."""

    os_type: Type = Type.Unknown
    version: Version = field(default_factory=Version.unknown)
    edition: str | None = None
    codename: str | None = None
    bitness: Bitness = Bitness.Unknown
    architecture: str | None = None

    @classmethod
    def unknown(cls) -> Info:
        """An instance with unknown type, version and bitness."""
        return cls()

    @classmethod
    def with_type(cls, os_type: Type) -> Info:
        """An instance of the given type with everything else unknown."""
        return cls(os_type=os_type)

    def __str__(self) -> str:
        parts = [str(self.os_type)]
        if self.version != Version.unknown():
            parts.append(str(self.version))
        if self.edition is not None:
            parts.append(f"({self.edition})")
        if self.codename is not None:
            parts.append(f"({self.codename})")
        parts.append(f"[{self.bitness}]")
        return " ".join(parts)