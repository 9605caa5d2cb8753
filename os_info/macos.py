"""Detection of macOS."""

from __future__ import annotations

import logging
import subprocess

from os_info import bitness
from os_info.info import Info
from os_info.matcher import prefixed_version
from os_info.os_type import Type
from os_info.system import architecture
from os_info.version import Version

_log = logging.getLogger(__name__)


def current_platform() -> Info:
    """Return information about the running macOS system."""
    _log.debug("macos.current_platform is called")
    info = Info(
        os_type=Type.Macos,
        version=version(),
        bitness=bitness.get(),
        architecture=architecture(),
    )
    _log.debug("Returning %r", info)
    return info


def version() -> Version:
    """Return the product version reported by sw_vers."""
    product = _product_version()
    return Version.unknown() if product is None else Version.from_string(product)


def _product_version() -> str | None:
    try:
        completed = subprocess.run(
            ["sw_vers"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        _log.warning("sw_vers command failed with %r", exc)
        return None
    output = completed.stdout.decode("utf-8", errors="replace")
    _log.debug("sw_vers command returned %r", output)
    return parse(output)


def parse(sw_vers_output: str) -> str | None:
    """Extract the ProductVersion value from sw_vers output."""
    return prefixed_version(sw_vers_output, "ProductVersion:")