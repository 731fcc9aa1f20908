"""Size and relative-time formatter tests."""

from __future__ import annotations

import unittest

from lz.formatting import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR, human_size, relative_time


class HumanSizeTests(unittest.TestCase):
    def test_zero_bytes_renders_in_byte_unit(self) -> None:
        self.assertEqual(human_size(0), "0 B")

    def test_sub_kibibyte_counts_stay_integral(self) -> None:
        self.assertEqual(human_size(50), "50 B")
        self.assertEqual(human_size(1023), "1023 B")

    def test_binary_prefixes_use_one_decimal(self) -> None:
        self.assertEqual(human_size(1024), "1.0 KiB")
        self.assertEqual(human_size(1536), "1.5 KiB")
        self.assertEqual(human_size(4096), "4.0 KiB")
        self.assertEqual(human_size(1_048_576), "1.0 MiB")
        self.assertEqual(human_size(3 * 1024**3), "3.0 GiB")

    def test_values_rounding_up_to_1024_step_to_the_next_unit(self) -> None:
        self.assertEqual(human_size(1_048_575), "1.0 MiB")
        self.assertEqual(human_size(1023 * 1024 + 1000), "1.0 MiB")
        self.assertEqual(human_size(1024**3 - 1), "1.0 GiB")
        self.assertEqual(human_size(1024**4 - 1), "1.0 TiB")

    def test_largest_unit_caps_at_exbibytes(self) -> None:
        self.assertEqual(human_size(2048 * 1024**6), "2048.0 EiB")


class RelativeTimeTests(unittest.TestCase):
    NOW = 1_700_000_000.0

    def ago(self, seconds: float) -> str:
        return relative_time(self.NOW - seconds, self.NOW)

    def test_coarse_past_buckets(self) -> None:
        self.assertEqual(self.ago(0), "now")
        self.assertEqual(self.ago(1), "1 second ago")
        self.assertEqual(self.ago(30), "30 seconds ago")
        self.assertEqual(self.ago(90), "1 minute ago")
        self.assertEqual(self.ago(5 * MINUTE), "5 minutes ago")
        self.assertEqual(self.ago(HOUR + 1), "1 hour ago")
        self.assertEqual(self.ago(5 * HOUR), "5 hours ago")
        self.assertEqual(self.ago(DAY), "1 day ago")
        self.assertEqual(self.ago(3 * DAY), "3 days ago")
        self.assertEqual(self.ago(WEEK), "1 week ago")
        self.assertEqual(self.ago(3 * WEEK), "3 weeks ago")
        self.assertEqual(self.ago(MONTH), "1 month ago")
        self.assertEqual(self.ago(5 * MONTH), "5 months ago")
        self.assertEqual(self.ago(13 * MONTH), "1 year ago")
        self.assertEqual(self.ago(20 * MONTH), "2 years ago")
        self.assertEqual(self.ago(5 * YEAR), "5 years ago")
        self.assertEqual(self.ago(40 * YEAR), "a long while ago")

    def test_ages_past_the_last_bucket_read_a_long_while(self) -> None:
        self.assertEqual(self.ago(100 * YEAR), "a long while ago")
        self.assertEqual(relative_time(self.NOW + 100 * YEAR, self.NOW), "a long while from now")

    def test_future_timestamps_read_from_now(self) -> None:
        self.assertEqual(relative_time(self.NOW + 2 * MINUTE, self.NOW), "2 minutes from now")

    def test_older_timestamps_never_read_as_more_recent(self) -> None:
        samples = [0, 1, 59, 61, 3599, 3601, DAY - 1, DAY, 6 * DAY, 8 * DAY, 29 * DAY, 31 * DAY, 11 * MONTH, 17 * MONTH, 19 * MONTH, 3 * YEAR, 40 * YEAR]
        rendered = [self.ago(seconds) for seconds in samples]
        ranks = [_elapsed_rank(text) for text in rendered]
        self.assertEqual(ranks, sorted(ranks))


_UNIT_SECONDS = {
    "second": 1,
    "seconds": 1,
    "minute": MINUTE,
    "minutes": MINUTE,
    "hour": HOUR,
    "hours": HOUR,
    "day": DAY,
    "days": DAY,
    "week": WEEK,
    "weeks": WEEK,
    "month": MONTH,
    "months": MONTH,
    "year": YEAR,
    "years": YEAR,
}


def _elapsed_rank(text: str) -> float:
    """Approximate the elapsed seconds a rendered string stands for."""
    if text == "now":
        return 0
    if text.startswith("a long while"):
        return float("inf")
    amount, unit, _label = text.split(" ", 2)
    return int(amount) * _UNIT_SECONDS[unit]


if __name__ == "__main__":
    unittest.main()
