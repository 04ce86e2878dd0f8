import enum
import errno
import grp
import logging
import os
import pwd
import stat
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, NamedTuple

import pathspec

logger = logging.getLogger(__name__)

_ERROR_DESCRIPTIONS = {
    errno.EACCES: "Permission denied",
    errno.ENOENT: "No such file or directory",
    errno.ENOTDIR: "Not a directory",
}


class EntryKind(enum.Enum):
    REGULAR = " "
    DIRECTORY = "d"
    SYMLINK = "l"
    FIFO = "f"
    CHAR_DEVICE = "c"
    BLOCK_DEVICE = "b"
    SOCKET = "s"
    UNKNOWN = "?"

    @property
    def tag(self) -> str:
        return self.value


class IdentityLookupError(KeyError):
    """A uid or gid has no entry in the system identity database."""


class DirectoryUnreadable(Exception):
    def __init__(self, path: str, code: int | None, strerror: str | None = None):
        super().__init__(path, code, strerror)
        self.path = path
        self.errno = code
        self.strerror = strerror

    @property
    def description(self) -> str:
        if self.errno in _ERROR_DESCRIPTIONS:
            return _ERROR_DESCRIPTIONS[self.errno]
        if self.strerror:
            return self.strerror
        return f"error code {self.errno}"


class RawEntry(NamedTuple):
    name: str
    is_dir: bool


@dataclass(frozen=True)
class DirEntryView:
    name: str
    kind: EntryKind
    size: int
    blocks: int
    owner: str = ""
    group: str = ""


def kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISCHR(mode):
        return EntryKind.CHAR_DEVICE
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISFIFO(mode):
        return EntryKind.FIFO
    if stat.S_ISBLK(mode):
        return EntryKind.BLOCK_DEVICE
    if stat.S_ISSOCK(mode):
        return EntryKind.SOCKET
    return EntryKind.UNKNOWN


def get_owner_name(uid: int) -> str:
    """
    Retrieve the user name for a user ID using pwd.
    Raises IdentityLookupError when the ID is unknown.
    """
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        raise IdentityLookupError(uid) from None


def get_group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        raise IdentityLookupError(gid) from None


def read_entry(path: str, name: str, with_identity: bool = False) -> DirEntryView:
    """
    lstat 'path' and snapshot it as a DirEntryView. Symbolic links are
    described as links, never by their target. Owner and group are only
    resolved when 'with_identity' is set.
    """
    st = os.lstat(path)
    owner = get_owner_name(st.st_uid) if with_identity else ""
    group = get_group_name(st.st_gid) if with_identity else ""
    return DirEntryView(
        name=name,
        kind=kind_from_mode(st.st_mode),
        size=st.st_size,
        blocks=st.st_blocks,
        owner=owner,
        group=group,
    )


def _iter_entries(handle, path: str) -> Iterator[RawEntry]:
    while True:
        try:
            entry = next(handle)
        except StopIteration:
            return
        except OSError as exc:
            logger.warning("%s: %s", path, exc.strerror or exc)
            return
        if entry.name in (".", ".."):
            continue
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        yield RawEntry(entry.name, is_dir)


@contextmanager
def open_directory(path: str) -> Iterator[Iterator[RawEntry]]:
    """
    Open 'path' for enumeration and yield a one-shot iterator over its
    children. The directory handle is closed when the block exits.
    """
    try:
        handle = os.scandir(path)
    except OSError as exc:
        if exc.errno == errno.ENOMEM:
            raise MemoryError("Out of memory.") from exc
        raise DirectoryUnreadable(path, exc.errno, exc.strerror) from exc
    with handle:
        yield _iter_entries(handle, path)


def sort_entries(entries) -> list[RawEntry]:
    # directories first, then by name
    return sorted(entries, key=lambda e: (not e.is_dir, e.name))


def load_gitignore_spec(start_directory: str):
    gitignore_path = os.path.join(start_directory, ".gitignore")
    if not os.path.isfile(gitignore_path):
        return None
    with open(gitignore_path, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


@dataclass(frozen=True)
class IgnoreRules:
    """Hidden entries plus whatever the root's .gitignore matches."""

    root: str
    spec: pathspec.PathSpec | None = None

    @classmethod
    def for_root(cls, root: str) -> "IgnoreRules":
        return cls(root=root, spec=load_gitignore_spec(root))

    def is_ignored(self, full_path: str, is_dir: bool = False) -> bool:
        if os.path.basename(full_path.rstrip("/")).startswith("."):
            return True
        if self.spec is None:
            return False
        rel_path = os.path.relpath(full_path, start=self.root).replace("\\", "/")
        if is_dir:
            rel_path += "/"
        return self.spec.match_file(rel_path)
