"""
Proglist - list the programs in a directory with their package and summary.

Scan, annotate, render.
"""

from importlib.metadata import version as _version

__version__ = _version("proglist")
