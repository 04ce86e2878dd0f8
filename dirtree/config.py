import enum
import logging
import os
from dataclasses import dataclass

MAX_DIR = 64  # paths accepted on the command line
NAME_WIDTH = 54
TRUNCATED_WIDTH = 51
ELLIPSIS = "..."
RULE_WIDTH = 100

LOG_LEVEL_ENV = "DIRTREE_LOG_LEVEL"


class OutputFlags(enum.IntFlag):
    NONE = 0
    TREE = 0x1
    SUMMARY = 0x2
    VERBOSE = 0x4
    GITIGNORE = 0x8


@dataclass(frozen=True)
class TraversalConfig:
    """
    Read-only output settings shared by every recursive walker call.
    Verbose output always renders with tree glyphs.
    """

    tree: bool = False
    summary: bool = False
    verbose: bool = False
    gitignore: bool = False

    @classmethod
    def from_flags(cls, flags: OutputFlags) -> "TraversalConfig":
        verbose = bool(flags & OutputFlags.VERBOSE)
        return cls(
            tree=bool(flags & OutputFlags.TREE) or verbose,
            summary=bool(flags & OutputFlags.SUMMARY),
            verbose=verbose,
            gitignore=bool(flags & OutputFlags.GITIGNORE),
        )


def log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
