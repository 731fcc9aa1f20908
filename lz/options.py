"""Immutable per-invocation listing configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .collection import SortKey
from .columns import DEFAULT_COLUMN_PADDING, DEFAULT_GRID_WIDTH
from .errors import ConfigurationError
from .ui_theme import PLAIN_THEME, UITheme


def resolve_sort_key(by_time: bool, by_size: bool) -> SortKey:
    """Map the ``-t``/``-s`` flags to a sort key; both at once is an error."""
    if by_time and by_size:
        raise ConfigurationError("-t and -s cannot be set at the same time.")
    if by_time:
        return SortKey.MODIFICATION_TIME
    if by_size:
        return SortKey.SIZE
    return SortKey.NONE


@dataclass(frozen=True)
class ListingOptions:
    """Everything the collect/sort/render pipeline needs to know.

    Built once from command-line flags and persisted defaults, then passed
    down explicitly.
    """

    sort_key: SortKey = SortKey.NONE
    reverse: bool = False
    long: bool = False
    theme: UITheme = PLAIN_THEME
    width: int = DEFAULT_GRID_WIDTH
    column_padding: int = DEFAULT_COLUMN_PADDING

    @classmethod
    def from_flags(
        cls,
        *,
        by_time: bool = False,
        by_size: bool = False,
        reverse: bool = False,
        long: bool = False,
        theme: UITheme = PLAIN_THEME,
        width: int = DEFAULT_GRID_WIDTH,
        column_padding: int = DEFAULT_COLUMN_PADDING,
    ) -> "ListingOptions":
        """Validate flag combinations and build options.

        Raises :class:`ConfigurationError` when both time and size sorting
        are requested.
        """
        return cls(
            sort_key=resolve_sort_key(by_time, by_size),
            reverse=reverse,
            long=long,
            theme=theme,
            width=max(1, width),
            column_padding=max(1, column_padding),
        )
