"""
Platform detection helpers for Proglist.

Centralizes host differences (which package database is present, where the
system programs live) so the rest of the codebase does not probe the host on
its own.
"""

import enum
import shutil
from typing import Callable, Optional

Which = Callable[[str], Optional[str]]


class PackageFamily(enum.Enum):
    """Package-management family of the host."""

    DEBIAN = "debian"
    REDHAT = "redhat"
    UNSUPPORTED = "unsupported"


def default_program_dir() -> str:
    """Return the directory listed when none is given."""
    return "/usr/bin"


def detect_package_family(which: Which = shutil.which) -> PackageFamily:
    """
    Probe the host for a known package-database tool.

    Debian is checked first since Debian hosts may also carry ``rpm``.

    Args:
        which: Lookup used to find executables on ``$PATH``

    Returns:
        The detected family, ``PackageFamily.UNSUPPORTED`` if none is found
    """
    if which("dpkg"):
        return PackageFamily.DEBIAN
    if which("rpm"):
        return PackageFamily.REDHAT
    return PackageFamily.UNSUPPORTED
