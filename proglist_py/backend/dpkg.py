"""
Debian-family package backend.

Wraps ``dpkg -S``, which answers with lines such as
``coreutils: /usr/bin/ls`` or ``libc-bin:amd64: /usr/bin/ldd``.
"""

import logging
from pathlib import Path
from typing import Optional

from proglist_py.backend import PackageBackend

logger = logging.getLogger("proglist.backend.dpkg")


def parse_dpkg_search(output: str, path: Optional[str] = None) -> str:
    """
    Extract the package name from ``dpkg -S`` output.

    Diversion notices may precede the answer, so the last line wins. Anything
    after the first colon (the path, or an ``:arch`` qualifier) is dropped.

    ``dpkg -S`` treats its argument as a glob, so a name like ``l?`` can match
    other files. When *path* is given, only lines naming exactly that path
    are considered.
    """
    lines = [line for line in output.splitlines() if line.strip()]
    if path is not None:
        lines = [line for line in lines if line.partition(": ")[2].strip() == path]
    if not lines:
        return ""
    return lines[-1].split(":", 1)[0].strip()


class DpkgBackend(PackageBackend):
    """Query the dpkg database for file ownership."""

    name = "dpkg"

    def __init__(self, binary_path: str = "dpkg") -> None:
        super().__init__(binary_path)

    def owner(self, path: Path) -> str:
        returncode, stdout = self._run_command(["-S", str(path)])
        if returncode != 0:
            logger.debug(f"{path} is not tracked by dpkg")
            return ""
        return parse_dpkg_search(stdout, str(path))
