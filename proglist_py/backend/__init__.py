"""
Package backend package for Proglist.

This module provides the base class for package backends in Proglist.
Interface and implementations for the package databases we know how to query
(dpkg, rpm).
"""

import abc
import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Tuple

from proglist_py.errors import UnsupportedDistribution
from proglist_py.platform import PackageFamily

logger = logging.getLogger("proglist.backend")


class PackageBackend(abc.ABC):
    """Base class for package backends."""

    name: str = ""

    def __init__(self, binary_path: str) -> None:
        self.binary_path = binary_path

    @abc.abstractmethod
    def owner(self, path: Path) -> str:
        """
        Find the installed package that provides *path*.

        Args:
            path: Absolute path of the file to look up

        Returns:
            Package name, or an empty string if no package owns the file
        """
        pass

    def _run_command(self, args: List[str]) -> Tuple[int, str]:
        """
        Run the backend tool and capture its standard output.

        A missing binary is reported as a failed run rather than raised.

        Returns:
            Tuple of (return_code, stdout)
        """
        cmd = [self.binary_path] + args
        cmd_str = " ".join(shlex.quote(str(arg)) for arg in cmd)
        logger.debug(f"Running command: {cmd_str}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug(f"Could not run {cmd_str}: {e}")
            return 127, ""
        return result.returncode, result.stdout or ""


def create_backend(family: PackageFamily) -> PackageBackend:
    """
    Return the backend for the detected package family.

    Raises:
        UnsupportedDistribution: if the family has no backend
    """
    # Imported here, the implementations import this module.
    from proglist_py.backend.dpkg import DpkgBackend
    from proglist_py.backend.rpm import RpmBackend

    if family is PackageFamily.DEBIAN:
        return DpkgBackend()
    if family is PackageFamily.REDHAT:
        return RpmBackend()
    raise UnsupportedDistribution(
        "No supported package manager found (looked for dpkg and rpm)"
    )
