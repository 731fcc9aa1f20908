"""Error types raised by the listing pipeline.

Library modules raise these; ``lz.cli`` turns them into exit diagnostics.
"""

from __future__ import annotations


class LzError(Exception):
    """Base class for fatal listing errors."""


class ConfigurationError(LzError, ValueError):
    """Raised when command-line options contradict each other."""


class MetadataError(LzError):
    """Raised when a target path cannot be stat'ed or scanned."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> MetadataError:
        return cls(path, exc.strerror or str(exc))
