from dataclasses import dataclass, fields

from .entries import DirEntryView, EntryKind

_KIND_COUNTERS = {
    EntryKind.REGULAR: "files",
    EntryKind.DIRECTORY: "dirs",
    EntryKind.SYMLINK: "links",
    EntryKind.FIFO: "fifos",
    EntryKind.SOCKET: "socks",
}


@dataclass
class Summary:
    dirs: int = 0
    files: int = 0
    links: int = 0
    fifos: int = 0
    socks: int = 0
    size: int = 0
    blocks: int = 0

    def add(self, entry: DirEntryView) -> None:
        """
        Count one entry. Devices and unknown kinds bump no counter but
        still add their size and blocks.
        """
        counter = _KIND_COUNTERS.get(entry.kind)
        if counter is not None:
            setattr(self, counter, getattr(self, counter) + 1)
        self.size += entry.size
        self.blocks += entry.blocks

    def merge(self, other: "Summary") -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def summary_sentence(stats: Summary) -> str:
    return (
        f"{_plural(stats.files, 'file', 'files')}, "
        f"{_plural(stats.dirs, 'directory', 'directories')}, "
        f"{_plural(stats.links, 'link', 'links')}, "
        f"{_plural(stats.fifos, 'pipe', 'pipes')}, "
        f"and {_plural(stats.socks, 'socket', 'sockets')}"
    )


def summary_line(stats: Summary, verbose: bool) -> str:
    sentence = summary_sentence(stats)
    if verbose:
        return f"{sentence:<68.68}   {stats.size:>14} {stats.blocks:>9}"
    return sentence
