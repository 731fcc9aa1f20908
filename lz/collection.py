"""Ordered entry collections and their sort policy.

A collection is built once per invocation, sorted and optionally reversed in
place, then handed to the renderer. Entries are never added or removed after
construction.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence

from .entry import Entry, create_entry, human_size, relative_time
from .metadata import is_directory, scan_directory, stat_path

DEFAULT_PATH = "."


class SortKey(enum.Enum):
    """Attribute a collection is ordered by."""

    NONE = "none"
    MODIFICATION_TIME = "time"
    SIZE = "size"


def sort_property(entry: Entry, key: SortKey, now: float | None = None) -> str:
    """Return the rendered value of the attribute ``key`` sorts by."""
    if key is SortKey.MODIFICATION_TIME:
        return relative_time(entry, now)
    if key is SortKey.SIZE:
        return human_size(entry)
    return ""


class EntryCollection:
    """Mutable ordering over a fixed set of entries."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: list[Entry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __repr__(self) -> str:
        names = ", ".join(entry.name for entry in self._entries)
        return f"EntryCollection([{names}])"

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def sort(self, key: SortKey) -> None:
        """Order entries newest-first or largest-first; ``NONE`` keeps order.

        ``list.sort`` is stable, so equal keys keep their prior relative order.
        """
        if key is SortKey.MODIFICATION_TIME:
            self._entries.sort(key=lambda entry: entry.mod_time, reverse=True)
        elif key is SortKey.SIZE:
            self._entries.sort(key=lambda entry: entry.size, reverse=True)

    def reverse(self) -> None:
        self._entries.reverse()


def collect_entries(paths: Sequence[str] = ()) -> EntryCollection:
    """Gather entries for ``paths``.

    No paths means the current directory. A single directory argument is
    expanded to its children; otherwise each argument becomes one entry, in
    argument order. Raises :class:`~lz.errors.MetadataError` on the first
    unreadable path.
    """
    targets = list(paths) or [DEFAULT_PATH]
    if len(targets) == 1 and is_directory(targets[0]):
        records = scan_directory(targets[0])
    else:
        records = [stat_path(path) for path in targets]
    return EntryCollection(create_entry(record) for record in records)
