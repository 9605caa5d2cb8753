"""Operating system version."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class VersionKind(Enum):
    """The form a version takes."""

    UNKNOWN = "unknown"
    SEMANTIC = "semantic"
    ROLLING = "rolling"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Version:
    """An operating system version: unknown, semantic, rolling or custom."""

    kind: VersionKind = VersionKind.UNKNOWN
    numbers: tuple[int, int, int] | None = None
    text: str | None = None

    @classmethod
    def unknown(cls) -> Version:
        return cls(VersionKind.UNKNOWN)

    @classmethod
    def semantic(cls, major: int, minor: int, patch: int) -> Version:
        numbers = (major, minor, patch)
        if any(n < 0 or n > _U64_MAX for n in numbers):
            raise ValueError(f"version numbers out of range: {numbers}")
        return cls(VersionKind.SEMANTIC, numbers=numbers)

    @classmethod
    def rolling(cls, date: str | None = None) -> Version:
        return cls(VersionKind.ROLLING, text=date)

    @classmethod
    def custom(cls, text: str) -> Version:
        return cls(VersionKind.CUSTOM, text=text)

    @classmethod
    def from_string(cls, s: str) -> Version:
        """Unknown if empty, semantic if it parses as one, custom otherwise."""
        if not s:
            return cls.unknown()
        parsed = parse_version(s)
        if parsed is not None:
            return cls.semantic(*parsed)
        return cls.custom(s)

    def __str__(self) -> str:
        if self.kind is VersionKind.SEMANTIC:
            major, minor, patch = self.numbers
            return f"{major}.{minor}.{patch}"
        if self.kind is VersionKind.ROLLING:
            return "Rolling Release" if self.text is None else f"Rolling Release ({self.text})"
        if self.kind is VersionKind.CUSTOM:
            return self.text
        return "Unknown"


def _parse_unsigned(part: str) -> int | None:
    if not _UNSIGNED.fullmatch(part):
        return None
    value = int(part)
    return value if value <= _U64_MAX else None


def parse_version(s: str) -> tuple[int, int, int] | None:
    """Parse 'major[.minor[.patch]]' with an optional trailing dot."""
    parts = s.strip().split(".")
    if parts[-1] == "":
        parts.pop()
    if not parts or len(parts) > 3:
        return None
    parts += ["0"] * (3 - len(parts))
    numbers = [_parse_unsigned(part) for part in parts]
    if any(n is None for n in numbers):
        return None
    major, minor, patch = numbers
    return major, minor, patch