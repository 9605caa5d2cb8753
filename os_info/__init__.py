"""Detect the operating system type, version, edition, codename, bitness and architecture.

Call os_info.detect.get() for an os_info.info.Info describing the running system.
"""

__version__ = "3.10.0"