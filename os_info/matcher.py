"""Simple matchers that pull values out of command output and release files."""

from __future__ import annotations

import re

_QUOTES_AND_SPACE = re.compile(r'^[\s"]+|[\s"]+$')


def all_trimmed(string: str) -> str:
    """Return the whole string with surrounding whitespace removed."""
    return string.strip()


def prefixed_word(string: str, prefix: str) -> str | None:
    """Return the word following the first occurrence of prefix, or None if absent."""
    start = string.find(prefix)
    if start < 0:
        return None
    words = string[start + len(prefix):].split(maxsplit=1)
    return words[0] if words else ""


def _is_valid_version(word: str) -> bool:
    return not word.startswith(".") and not word.endswith(".")


def prefixed_version(string: str, prefix: str) -> str | None:
    """Like prefixed_word, but only if the word neither starts nor ends with a dot."""
    word = prefixed_word(string, prefix)
    if word is None or not _is_valid_version(word):
        return None
    return word


def key_value(string: str, key: str) -> str | None:
    """Return the value of the first 'key=value' line, without quotes and whitespace."""
    marker = key + "="
    for line in string.split("\n"):
        line = line.removesuffix("\r")
        if line.startswith(marker):
            return _QUOTES_AND_SPACE.sub("", line[len(marker):])
    return None