"""Recursive directory tree listing with optional metadata and summaries."""

from .config import OutputFlags, TraversalConfig
from .summary import Summary
from .walker import walk_directory
from .report import render_report

__all__ = [
    "OutputFlags",
    "TraversalConfig",
    "Summary",
    "walk_directory",
    "render_report",
]
