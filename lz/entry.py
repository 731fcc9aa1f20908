"""Display-ready records for listed filesystem objects.

An :class:`Entry` is an immutable value built once from raw metadata. The
display name, size label and relative time are derived on demand from its
fields and never cached.
"""

from __future__ import annotations

import enum
import stat
import time
from dataclasses import dataclass

from .formatting import human_size as format_size
from .formatting import relative_time as format_relative_time
from .metadata import RawMetadata, lookup_owner
from .ui_theme import PLAIN_THEME, UITheme, paint

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class EntryKind(enum.Enum):
    """Display classification of one entry."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    EXECUTABLE = "executable"


KIND_SUFFIXES: dict[EntryKind, str] = {
    EntryKind.REGULAR: "",
    EntryKind.DIRECTORY: "/",
    EntryKind.EXECUTABLE: "*",
}


def classify(mode: int, is_dir: bool) -> EntryKind:
    """Derive the entry kind; directories win over executable bits."""
    if is_dir:
        return EntryKind.DIRECTORY
    if mode & EXECUTABLE_BITS:
        return EntryKind.EXECUTABLE
    return EntryKind.REGULAR


@dataclass(frozen=True)
class Entry:
    """One filesystem object as it will be listed."""

    name: str
    kind: EntryKind
    mod_time: float
    size: int
    owner: str
    mode: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("entry name must not be empty")
        if self.size < 0:
            raise ValueError(f"entry size must be non-negative: {self.size}")


def create_entry(raw: RawMetadata) -> Entry:
    """Build an :class:`Entry` from raw metadata; owner lookup is best-effort."""
    return Entry(
        name=raw.name,
        kind=classify(raw.mode, raw.is_dir),
        mod_time=raw.mod_time,
        size=raw.size,
        owner=lookup_owner(raw.uid),
        mode=raw.mode,
    )


def display_name(entry: Entry) -> str:
    """Return the name with its kind suffix (``bin/``, ``run*``, ``a.txt``)."""
    return entry.name + KIND_SUFFIXES[entry.kind]


def styled_name(entry: Entry, theme: UITheme = PLAIN_THEME) -> str:
    """Return :func:`display_name` with the name part colored by kind."""
    if entry.kind is EntryKind.DIRECTORY:
        color = theme.directory
    elif entry.kind is EntryKind.EXECUTABLE:
        color = theme.executable
    else:
        color = ""
    return paint(entry.name, color, theme) + KIND_SUFFIXES[entry.kind]


def relative_time(entry: Entry, now: float | None = None) -> str:
    if now is None:
        now = time.time()
    return format_relative_time(entry.mod_time, now)


def human_size(entry: Entry) -> str:
    return format_size(entry.size)


def mode_string(entry: Entry) -> str:
    """Return an ``ls``-style permission string such as ``drwxr-xr-x``."""
    return stat.filemode(entry.mode)
