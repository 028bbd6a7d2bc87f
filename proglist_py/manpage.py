"""
Manual-page summary lookup for Proglist.

Runs the summary database lookup (``whatis``) and turns its answer into a
one-line, sentence-cased description.
"""

import logging
import shlex
import subprocess
from typing import Sequence

logger = logging.getLogger("proglist.manpage")

DEFAULT_WHATIS_COMMAND = ("whatis",)

SEPARATOR = " - "


def strip_summary(line: str) -> str:
    """Drop everything up to and including the last `` - `` in *line*."""
    _, sep, description = line.rpartition(SEPARATOR)
    if not sep:
        return line.strip()
    return description.strip()


def capitalize_first(text: str) -> str:
    """Upper-case the first character of *text*, leaving the rest alone."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def lookup_summary(
    name: str, command: Sequence[str] = DEFAULT_WHATIS_COMMAND
) -> str:
    """
    Return the first summary line the lookup prints for *name*.

    Args:
        name: Program name to look up
        command: Lookup command; *name* is appended after a "--" so names
            starting with a dash are not read as options

    Returns:
        The raw summary line, or an empty string if there is none
    """
    cmd = list(command) + ["--", name]
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
        return ""

    # whatis exits 16 when nothing matches.
    if result.returncode != 0:
        logger.debug(f"No manual page summary for {name}")
        return ""

    for line in (result.stdout or "").splitlines():
        if line.strip():
            return line.strip()
    return ""
