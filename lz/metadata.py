"""Filesystem metadata source for listing targets.

Reads ``lstat`` records for explicit paths and for the children of a single
directory. Any ``OSError`` is re-raised as :class:`MetadataError`; there is
no partial result.
"""

from __future__ import annotations

import os
import pwd
import stat
from dataclasses import dataclass
from pathlib import Path

from .errors import MetadataError


@dataclass(frozen=True)
class RawMetadata:
    """Attributes of one filesystem object, as read from ``stat``."""

    name: str
    mode: int
    is_dir: bool
    mod_time: float
    size: int
    uid: int


def _from_stat(name: str, st: os.stat_result) -> RawMetadata:
    return RawMetadata(
        name=name,
        mode=st.st_mode,
        is_dir=stat.S_ISDIR(st.st_mode),
        mod_time=st.st_mtime,
        size=max(0, int(st.st_size)),
        uid=st.st_uid,
    )


def display_name_for_path(path: str) -> str:
    """Return bare filename for ``path``, or the path itself when it has none (``/``, ``.``)."""
    name = Path(path).name
    return name or path


def stat_path(path: str) -> RawMetadata:
    """Return metadata for one explicit path argument."""
    try:
        st = os.lstat(path)
    except OSError as exc:
        raise MetadataError.from_os_error(path, exc) from exc
    return _from_stat(display_name_for_path(path), st)


def is_directory(path: str) -> bool:
    """Return whether ``path`` names a directory (following symlinks)."""
    return os.path.isdir(path)


def scan_directory(path: str) -> list[RawMetadata]:
    """Return metadata for every child of ``path`` sorted by name.

    Hidden entries are included. A child vanishing between enumeration and
    ``stat`` is treated like any other read failure.
    """
    records: list[RawMetadata] = []
    try:
        with os.scandir(path) as entries:
            for child in entries:
                st = child.stat(follow_symlinks=False)
                records.append(_from_stat(child.name, st))
    except OSError as exc:
        raise MetadataError.from_os_error(exc.filename or path, exc) from exc
    records.sort(key=lambda record: record.name)
    return records


def lookup_owner(uid: int) -> str:
    """Return the user name owning ``uid``, or ``""`` when it cannot be resolved."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return ""
