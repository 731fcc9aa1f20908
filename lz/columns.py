"""Column layout for listing output.

``layout_grid`` arranges labels into as many row-major columns as fit a
display width. ``align_rows`` pads tab-separated cells so each column lines
up, like a tab writer with one space of padding.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ansi import display_width, pad_ansi

DEFAULT_GRID_WIDTH = 80
DEFAULT_COLUMN_PADDING = 2
CELL_PADDING = 1


def grid_column_count(label_widths: Sequence[int], width: int, padding: int = DEFAULT_COLUMN_PADDING) -> int:
    """Return how many columns of the widest label plus ``padding`` fit ``width``.

    The last column needs no trailing padding. At least one column is always
    used, even when a single label is wider than ``width``.
    """
    if not label_widths:
        return 0
    padding = max(1, padding)
    cell_width = max(label_widths) + padding
    columns = (max(0, width) + padding) // cell_width
    return max(1, min(len(label_widths), columns))


def layout_grid(labels: Sequence[str], width: int, padding: int = DEFAULT_COLUMN_PADDING) -> list[str]:
    """Arrange ``labels`` left-to-right, wrapping to the next row when full."""
    if not labels:
        return []
    widths = [display_width(label) for label in labels]
    columns = grid_column_count(widths, width, padding)
    cell_width = max(widths) + max(1, padding)
    rows: list[str] = []
    for start in range(0, len(labels), columns):
        row_labels = labels[start : start + columns]
        cells = [pad_ansi(label, cell_width) for label in row_labels[:-1]]
        cells.append(row_labels[-1])
        rows.append("".join(cells))
    return rows


def align_rows(rows: Sequence[Sequence[str]], padding: int = CELL_PADDING) -> list[str]:
    """Pad every cell but the last of each row to its column's widest value.

    Widths ignore ANSI escapes. Trailing cells are left as-is, and a column
    whose cells are all empty still gets ``padding`` spaces.
    """
    column_widths: list[int] = []
    for row in rows:
        for idx, cell in enumerate(row[:-1]):
            width = display_width(cell)
            if idx >= len(column_widths):
                column_widths.append(width)
            elif width > column_widths[idx]:
                column_widths[idx] = width

    lines: list[str] = []
    for row in rows:
        if not row:
            lines.append("")
            continue
        cells = [pad_ansi(cell, column_widths[idx] + padding) for idx, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append("".join(cells))
    return lines
