from typing import Callable, Sequence

from .config import RULE_WIDTH, TraversalConfig
from .entries import IgnoreRules
from .summary import Summary, summary_line
from .walker import walk_directory

HEADER = f"{'Name':<{RULE_WIDTH}}"
VERBOSE_HEADER = (
    "Name                                                        "
    "User:Group           Size    Blocks Type "
)
RULE = "-" * RULE_WIDTH


def report_path(
    path: str, config: TraversalConfig, emit: Callable[[str], None] = print
) -> Summary:
    """List one root path with its optional header and summary footer."""
    stats = Summary()
    if config.summary:
        emit(VERBOSE_HEADER if config.verbose else HEADER)
        emit(RULE)
    emit(path)

    ignore = IgnoreRules.for_root(path) if config.gitignore else None
    walk_directory(path, "", stats, config, emit, ignore)

    if config.summary:
        emit(RULE)
        emit(summary_line(stats, config.verbose))
        emit("")
    return stats


def grand_total_lines(count: int, total: Summary, verbose: bool) -> list[str]:
    lines = [
        f"Analyzed {count} directories:",
        f"  total # of files:        {total.files:>16}",
        f"  total # of directories:  {total.dirs:>16}",
        f"  total # of links:        {total.links:>16}",
        f"  total # of pipes:        {total.fifos:>16}",
        f"  total # of sockets:      {total.socks:>16}",
    ]
    if verbose:
        lines.append(f"  total file size:         {total.size:>16}")
        lines.append(f"  total # of blocks:       {total.blocks:>16}")
    return lines


def render_report(
    paths: Sequence[str],
    config: TraversalConfig,
    emit: Callable[[str], None] = print,
) -> Summary:
    """
    Report every path in order, then the grand total when more than one
    path was summarised. Returns the grand total.
    """
    total = Summary()
    for path in paths:
        stats = report_path(path, config, emit)
        total.merge(stats)

    if config.summary and len(paths) > 1:
        for line in grand_total_lines(len(paths), total, config.verbose):
            emit(line)
    return total
