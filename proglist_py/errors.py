"""
Exceptions raised by Proglist.

Fatal configuration problems are reported by the CLI and end the run with
exit status 1. Per-entry lookup misses are never exceptions.
"""


class ProglistError(Exception):
    """Base class for all Proglist errors."""


class InvalidDirectory(ProglistError):
    """The target path is missing, not a directory, or not readable."""


class ConflictingMode(ProglistError):
    """More than one output mode was requested."""


class UnsupportedDistribution(ProglistError):
    """Neither a Debian-family nor a RedHat-family package tool was found."""
