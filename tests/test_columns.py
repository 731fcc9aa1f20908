"""Grid layout and tab-stop alignment tests."""

from __future__ import annotations

import unittest

from lz.columns import align_rows, grid_column_count, layout_grid


class LayoutGridTests(unittest.TestCase):
    def test_all_labels_fit_on_one_row(self) -> None:
        self.assertEqual(layout_grid(["a", "bb", "ccc"], width=80), ["a    bb   ccc"])

    def test_wraps_row_major_when_width_is_short(self) -> None:
        self.assertEqual(layout_grid(["a", "bb", "ccc"], width=8), ["a    bb", "ccc"])

    def test_narrow_width_still_uses_one_column(self) -> None:
        self.assertEqual(layout_grid(["long-name", "x"], width=3), ["long-name", "x"])

    def test_padding_is_at_least_one_space(self) -> None:
        self.assertEqual(layout_grid(["ab", "c"], width=80, padding=0), ["ab c"])

    def test_empty_input_has_no_rows(self) -> None:
        self.assertEqual(layout_grid([], width=80), [])
        self.assertEqual(grid_column_count([], 80), 0)

    def test_escape_sequences_do_not_count_toward_width(self) -> None:
        colored = "\033[1;34mab\033[0m"
        self.assertEqual(layout_grid([colored, "c"], width=80), [f"{colored}  c"])

    def test_wide_characters_count_as_two_columns(self) -> None:
        self.assertEqual(layout_grid(["日本", "a"], width=80), ["日本  a"])


class AlignRowsTests(unittest.TestCase):
    def test_columns_align_with_one_space_after_widest_cell(self) -> None:
        rows = [["a", "bb", "x"], ["ccc", "d", "y"]]
        self.assertEqual(align_rows(rows), ["a   bb x", "ccc d  y"])

    def test_all_empty_column_still_separates_neighbors(self) -> None:
        self.assertEqual(align_rows([["", "x"], ["", "y"]]), [" x", " y"])

    def test_last_cell_is_not_padded(self) -> None:
        self.assertEqual(align_rows([["a", "short"], ["b", "much longer"]]), ["a short", "b much longer"])


if __name__ == "__main__":
    unittest.main()
