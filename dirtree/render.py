from .config import ELLIPSIS, NAME_WIDTH, TRUNCATED_WIDTH
from .entries import DirEntryView

BRANCH = "|-"
LAST_BRANCH = "`-"
INDENT = "  "


def next_prefix(is_last: bool, tree: bool, prefix: str) -> str:
    """
    Derive the prefix shown in front of an entry from its parent's prefix.

    With tree view the parent's own branch is turned into a continuation
    ("|-" -> "| ", "`-" -> "  ") and a new branch is appended:
        ""     -> "|-" or "`-"
        "|-"   -> "| |-"
        "`-"   -> "  `-"
    Without tree view two spaces are appended.
    """
    if not tree:
        return prefix + INDENT
    if len(prefix) > 1:
        trunk = prefix[-2]
        if trunk == "`":
            trunk = " "
        prefix = prefix[:-2] + trunk + " "
    return prefix + (LAST_BRANCH if is_last else BRANCH)


def format_name(label: str, verbose: bool) -> str:
    if verbose and len(label) > NAME_WIDTH:
        return label[:TRUNCATED_WIDTH] + ELLIPSIS
    return f"{label:<{NAME_WIDTH}}"


def format_details(entry: DirEntryView) -> str:
    return (
        f"  {entry.owner:>8}:{entry.group:<8}"
        f"  {entry.size:>10}  {entry.blocks:>8}  {entry.kind.tag}"
    )


def format_entry(prefix: str, entry: DirEntryView, verbose: bool) -> str:
    """Name field, then owner:group, size, blocks and type tag when verbose."""
    line = format_name(prefix + entry.name, verbose)
    if verbose:
        line += format_details(entry)
    return line


def format_error(prefix: str, tree: bool, description: str) -> str:
    return f"{next_prefix(True, tree, prefix)}ERROR: {description}"
