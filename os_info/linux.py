"""Detection of Linux distributions."""

from __future__ import annotations

import logging

from os_info import bitness, file_release, lsb_release
from os_info.info import Info
from os_info.os_type import Type
from os_info.system import architecture

_log = logging.getLogger(__name__)


def current_platform() -> Info:
    """Return information about the running Linux system.

    lsb_release is asked first, then the release files. If neither gives an
    answer, the result is plain Linux.
    """
    _log.debug("linux.current_platform is called")
    info = lsb_release.get() or file_release.get() or Info.with_type(Type.Linux)
    info.bitness = bitness.get()
    info.architecture = architecture()
    _log.debug("Returning %r", info)
    return info