"""
RedHat-family package backend.

Wraps ``rpm -qf`` against the local RPM database.
"""

import logging
from pathlib import Path

from proglist_py.backend import PackageBackend

logger = logging.getLogger("proglist.backend.rpm")


class RpmBackend(PackageBackend):
    """Query the RPM database for file ownership."""

    name = "rpm"

    def __init__(self, binary_path: str = "rpm") -> None:
        super().__init__(binary_path)

    def owner(self, path: Path) -> str:
        # rpm prints "file ... is not owned by any package" and exits 1.
        returncode, stdout = self._run_command(
            ["-qf", "--queryformat", "%{NAME}\n", str(path)]
        )
        if returncode != 0:
            logger.debug(f"{path} is not tracked by rpm")
            return ""
        for line in stdout.splitlines():
            if line.strip():
                return line.strip()
        return ""
