"""
Shared fixtures for the unit tests.
"""

from pathlib import Path
from typing import Dict, List, Optional

import pytest

from proglist_py.backend import PackageBackend


class FakeBackend(PackageBackend):
    """Package backend answering from a name -> package mapping."""

    name = "fake"

    def __init__(self, owners: Optional[Dict[str, str]] = None):
        super().__init__("fake")
        self.owners = owners or {}
        self.queries: List[Path] = []

    def owner(self, path: Path) -> str:
        self.queries.append(path)
        return self.owners.get(path.name, "")


def make_program(directory: Path, name: str, mode: int = 0o755) -> Path:
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(mode)
    return path


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """A directory with a few executables, a data file, and a subdirectory."""
    directory = tmp_path / "bin"
    directory.mkdir()
    make_program(directory, "ls")
    make_program(directory, "cat")
    make_program(directory, "zcat")
    make_program(directory, "README", mode=0o644)
    (directory / "lib").mkdir()
    return directory


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Backend that knows ``ls`` and ``cat`` belong to coreutils."""
    return FakeBackend({"ls": "coreutils", "cat": "coreutils"})
