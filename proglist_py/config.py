"""
Configuration file support for Proglist.

Loads settings from ``~/.config/proglist/config.yaml`` (or
``$XDG_CONFIG_HOME/proglist/config.yaml``) and exposes them as a typed
dataclass that the CLI merges with command-line flags.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from proglist_py.manpage import DEFAULT_WHATIS_COMMAND
from proglist_py.render import DEFAULT_WIDTH, OutputFormat

logger = logging.getLogger("proglist.config")


def default_config_path() -> Path:
    """Return the default configuration file path.

    Uses ``$XDG_CONFIG_HOME/proglist/config.yaml`` when set, otherwise
    falls back to ``~/.config/proglist/config.yaml``.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "proglist" / "config.yaml"
    return Path.home() / ".config" / "proglist" / "config.yaml"


@dataclass
class ProglistConfig:
    """Top-level configuration loaded from the YAML file."""

    directory: Optional[str] = None
    format: OutputFormat = OutputFormat.TEXT
    width: int = DEFAULT_WIDTH
    whatis_command: List[str] = field(
        default_factory=lambda: list(DEFAULT_WHATIS_COMMAND)
    )
    require_package_backend: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProglistConfig":
        """Construct a ``ProglistConfig`` from a parsed YAML dictionary."""
        if not isinstance(data, dict):
            return cls()

        config = cls()

        directory = data.get("directory")
        if directory is not None:
            config.directory = str(Path(str(directory)).expanduser())

        fmt = data.get("format")
        if fmt is not None:
            try:
                config.format = OutputFormat(str(fmt).lower())
            except ValueError:
                logger.warning("Ignoring unknown output format: %s", fmt)

        width = data.get("width")
        if width is not None:
            if isinstance(width, int) and not isinstance(width, bool) and width > 0:
                config.width = width
            else:
                logger.warning("Ignoring invalid width: %s", width)

        command = data.get("whatis_command")
        if command is not None:
            if isinstance(command, str):
                command = command.split()
            if isinstance(command, list) and command:
                config.whatis_command = [str(part) for part in command]
            else:
                logger.warning("Ignoring invalid whatis_command: %s", command)

        require = data.get("require_package_backend")
        if require is not None:
            if isinstance(require, bool):
                config.require_package_backend = require
            else:
                logger.warning(
                    "Ignoring invalid require_package_backend: %s", require
                )
        return config

    @classmethod
    def from_file(cls, path: Path) -> "ProglistConfig":
        """Read a YAML file and return a ``ProglistConfig``.

        Returns an empty default config on any error.
        """
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f.read())
            if data is None:
                return cls()
            return cls.from_dict(data)
        except (IOError, yaml.YAMLError) as e:
            logger.error("Failed to load config from %s: %s", path, e)
            return cls()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "ProglistConfig":
        """Load config from *config_path* or the default location.

        Returns an empty config if the file does not exist.
        """
        path = config_path or default_config_path()
        if not path.exists():
            return cls()
        return cls.from_file(path)
