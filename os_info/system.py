"""Helpers that query the system through the uname command."""

from __future__ import annotations

import logging
import subprocess

_log = logging.getLogger(__name__)


def uname(arg: str) -> str | None:
    """Run 'uname <arg>' and return its trimmed output, or None on failure."""
    try:
        completed = subprocess.run(
            ["uname", arg],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        _log.error("Failed to invoke 'uname %s': %r", arg, exc)
        return None
    if completed.returncode != 0:
        _log.error("'uname' invocation error: %r", completed)
        return None
    return completed.stdout.decode("utf-8", errors="replace").rstrip()


def architecture() -> str | None:
    """Return the processor architecture as reported by 'uname -m'."""
    return uname("-m")