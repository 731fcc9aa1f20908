"""Render an ordered entry collection as listing text.

Three mutually exclusive layouts:

* grid: names only, row-major columns fitted to the display width;
* sorted: one line per entry, ``<sort property> <name>``;
* long: one line per entry, ``<mode> <owner> <size> <time> <name>``.

Renderers never reorder the collection; they return the full text so
nothing is written until every line is built.
"""

from __future__ import annotations

import time

from .collection import EntryCollection, SortKey, sort_property
from .columns import DEFAULT_COLUMN_PADDING, align_rows, layout_grid
from .entry import human_size, mode_string, relative_time, styled_name
from .options import ListingOptions
from .ui_theme import PLAIN_THEME, UITheme, paint


def _join_lines(lines: list[str]) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_grid(
    collection: EntryCollection,
    theme: UITheme = PLAIN_THEME,
    width: int = 80,
    padding: int = DEFAULT_COLUMN_PADDING,
) -> str:
    labels = [styled_name(entry, theme) for entry in collection]
    return _join_lines(layout_grid(labels, width, padding))


def render_sorted(
    collection: EntryCollection,
    key: SortKey,
    theme: UITheme = PLAIN_THEME,
    now: float | None = None,
) -> str:
    """Render one ``property  name`` line per entry for the active sort key."""
    if now is None:
        now = time.time()
    color = theme.time if key is SortKey.MODIFICATION_TIME else theme.size
    rows = [
        [paint(sort_property(entry, key, now), color, theme), styled_name(entry, theme)]
        for entry in collection
    ]
    return _join_lines(align_rows(rows))


def long_rows(collection: EntryCollection, theme: UITheme, now: float) -> list[list[str]]:
    """Return the five long-format cells for each entry, in display order."""
    return [
        [
            paint(mode_string(entry), theme.mode, theme),
            paint(entry.owner, theme.owner, theme),
            paint(human_size(entry), theme.size, theme),
            paint(relative_time(entry, now), theme.time, theme),
            styled_name(entry, theme),
        ]
        for entry in collection
    ]


def render_long(
    collection: EntryCollection,
    theme: UITheme = PLAIN_THEME,
    now: float | None = None,
) -> str:
    if now is None:
        now = time.time()
    return _join_lines(align_rows(long_rows(collection, theme, now)))


def render_listing(collection: EntryCollection, options: ListingOptions, now: float | None = None) -> str:
    """Pick the layout for ``options``; long format wins over the others."""
    if options.long:
        return render_long(collection, options.theme, now)
    if options.sort_key is not SortKey.NONE:
        return render_sorted(collection, options.sort_key, options.theme, now)
    return render_grid(collection, options.theme, options.width, options.column_padding)
