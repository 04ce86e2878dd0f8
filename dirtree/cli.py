import logging
import os
import sys

from .config import MAX_DIR, OutputFlags, TraversalConfig, log_level
from .entries import IdentityLookupError
from .report import render_report

logger = logging.getLogger(__name__)

CURDIR = "."

USAGE = (
    "Usage {prog} [-t] [-s] [-v] [-g] [-h] [path...]\n"
    "Gather information about directory trees. If no path is given, the current directory\n"
    "is analyzed.\n"
    "\n"
    "Options:\n"
    " -t        print the directory tree\n"
    " -s        print summary of directories (total number of files, total file size, etc)\n"
    " -v        print detailed information for each file. Turns on tree view.\n"
    " -g        skip hidden entries and entries matched by each path's .gitignore\n"
    " -h        print this help\n"
    " path...   list of space-separated paths (max {max_dir}). Default is the current directory.\n"
)

_OPTIONS = {
    "-t": OutputFlags.TREE,
    "-s": OutputFlags.SUMMARY,
    "-v": OutputFlags.VERBOSE,
    "-g": OutputFlags.GITIGNORE,
}


class UsageError(Exception):
    """Malformed command line. An empty message means help was requested."""


def usage(prog: str) -> str:
    return USAGE.format(prog=os.path.basename(prog), max_dir=MAX_DIR)


def parse_args(argv: list[str]) -> tuple[OutputFlags, list[str]]:
    flags = OutputFlags.NONE
    paths: list[str] = []
    for arg in argv:
        if arg.startswith("-"):
            if arg == "-h":
                raise UsageError("")
            if arg not in _OPTIONS:
                raise UsageError(f"Unrecognized option '{arg}'.")
            flags |= _OPTIONS[arg]
        elif len(paths) < MAX_DIR:
            paths.append(arg)
        else:
            logger.warning(
                "Warning: maximum number of directories exceeded, ignoring '%s'.", arg
            )
    if not paths:
        paths.append(CURDIR)
    return flags, paths


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    logging.basicConfig(level=log_level(), format="%(message)s")

    try:
        flags, paths = parse_args(argv[1:])
    except UsageError as exc:
        if str(exc):
            print(f"{exc}\n", file=sys.stderr)
        sys.stderr.write(usage(argv[0] if argv else "dirtree"))
        return 1

    config = TraversalConfig.from_flags(flags)
    # undecodable file names round-trip to their original bytes
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
    try:
        render_report(paths, config)
    except IdentityLookupError:
        print("\nError on getpwuid /getgrgid.", file=sys.stderr)
        return 1
    except MemoryError:
        print("Out of memory.", file=sys.stderr)
        return 1
    return 0
