import logging
from typing import Callable

from .config import TraversalConfig
from .entries import (
    DirectoryUnreadable,
    EntryKind,
    IgnoreRules,
    open_directory,
    read_entry,
    sort_entries,
)
from .render import format_entry, format_error, next_prefix
from .summary import Summary

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]


def walk_directory(
    path: str,
    prefix: str,
    stats: Summary,
    config: TraversalConfig,
    emit: Emit = print,
    ignore: IgnoreRules | None = None,
) -> None:
    """
    Recursively list 'path', depth first.

    Entries are rendered one line each through 'emit', directories before
    other entries and by name within each group. Every entry is counted in
    'stats' before it is descended into, so an unreadable subdirectory is
    still counted. A directory that cannot be opened is reported inline
    as an ERROR line and its siblings are processed as usual.
    """
    if not path.endswith("/"):
        path += "/"

    try:
        with open_directory(path) as children:
            if ignore is not None:
                children = (
                    c for c in children
                    if not ignore.is_ignored(path + c.name, c.is_dir)
                )
            entries = sort_entries(children)
    except DirectoryUnreadable as exc:
        emit(format_error(prefix, config.tree, exc.description))
        return

    views = []
    for raw in entries:
        try:
            views.append(read_entry(path + raw.name, raw.name, config.verbose))
        except FileNotFoundError:
            # removed after it was listed
            logger.debug("vanished during scan: %s%s", path, raw.name)
        except OSError as exc:
            logger.warning("%s%s: %s", path, raw.name, exc.strerror or exc)

    for i, entry in enumerate(views):
        entry_prefix = next_prefix(i == len(views) - 1, config.tree, prefix)
        emit(format_entry(entry_prefix, entry, config.verbose))
        stats.add(entry)

        if entry.kind is EntryKind.DIRECTORY:
            walk_directory(
                path + entry.name, entry_prefix, stats, config, emit, ignore
            )
