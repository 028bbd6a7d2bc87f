"""
Directory scanning for Proglist.

Finds the executables that live directly inside one directory.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Union

from proglist_py.errors import InvalidDirectory

logger = logging.getLogger("proglist.scanner")


def _validate(directory: Path) -> None:
    if not directory.exists():
        raise InvalidDirectory(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise InvalidDirectory(f"Not a directory: {directory}")
    if not os.access(directory, os.R_OK | os.X_OK):
        raise InvalidDirectory(f"Directory is not readable: {directory}")


def iter_candidates(directory: Union[str, Path]) -> Iterator[str]:
    """
    Yield the names of executable, non-directory children of *directory*.

    Symlinks are followed for both tests. Subdirectories are not entered.
    """
    directory = Path(directory)
    _validate(directory)
    try:
        with os.scandir(directory) as it:
            for entry in it:
                path = Path(entry.path)
                if path.is_dir():
                    continue
                if os.access(path, os.X_OK):
                    yield entry.name
    except OSError as e:
        raise InvalidDirectory(f"Cannot list {directory}: {e}") from e


def scan_directory(directory: Union[str, Path]) -> List[str]:
    """
    Return the sorted, de-duplicated executable names in *directory*.

    Raises:
        InvalidDirectory: if *directory* is missing or unreadable
    """
    names = sorted(set(iter_candidates(directory)))
    logger.debug(f"Found {len(names)} executables in {directory}")
    return names
