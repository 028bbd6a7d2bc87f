"""
Metadata enrichment for Proglist.

Resolves, for each scanned program name, the package that owns it and its
manual-page summary. The two lookups are independent and neither one fails
the run.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from proglist_py.backend import PackageBackend, create_backend
from proglist_py.errors import UnsupportedDistribution
from proglist_py.manpage import (
    DEFAULT_WHATIS_COMMAND,
    capitalize_first,
    lookup_summary,
    strip_summary,
)
from proglist_py.platform import PackageFamily, Which, detect_package_family

logger = logging.getLogger("proglist.enricher")


@dataclass(frozen=True)
class ProgramEntry:
    """One annotated program."""

    name: str
    package: str = ""
    description: str = ""


@dataclass(frozen=True)
class EnricherConfig:
    """Lookup settings, computed once per run."""

    family: PackageFamily
    backend: Optional[PackageBackend]
    whatis_command: Tuple[str, ...] = DEFAULT_WHATIS_COMMAND

    @property
    def supported(self) -> bool:
        return self.backend is not None


def build_config(
    which: Which = shutil.which,
    whatis_command: Sequence[str] = DEFAULT_WHATIS_COMMAND,
) -> EnricherConfig:
    """
    Probe the host and build the enrichment settings.

    An unsupported host yields a config without a backend; callers decide
    whether that is fatal.
    """
    family = detect_package_family(which)
    try:
        backend: Optional[PackageBackend] = create_backend(family)
        logger.debug(f"Using package backend: {backend.name}")
    except UnsupportedDistribution:
        backend = None
        logger.debug("No package backend available")
    return EnricherConfig(
        family=family, backend=backend, whatis_command=tuple(whatis_command)
    )


class Enricher:
    """Annotates program names with package and description."""

    def __init__(self, config: EnricherConfig):
        self.config = config

    def resolve_package(self, path: Path) -> str:
        if self.config.backend is None:
            return ""
        return self.config.backend.owner(path)

    def resolve_description(self, name: str) -> str:
        summary = lookup_summary(name, self.config.whatis_command)
        if not summary:
            return ""
        return capitalize_first(strip_summary(summary))

    def enrich(self, directory: Union[str, Path], name: str) -> ProgramEntry:
        """Build the entry for *name* found in *directory*."""
        return ProgramEntry(
            name=name,
            package=self.resolve_package(Path(directory) / name),
            description=self.resolve_description(name),
        )

    def enrich_all(
        self, directory: Union[str, Path], names: Iterable[str]
    ) -> List[ProgramEntry]:
        """Enrich every name, keeping the order they were given in."""
        entries = [self.enrich(directory, name) for name in names]
        logger.debug(f"Enriched {len(entries)} entries")
        return entries
