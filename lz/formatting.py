"""Human-readable size and relative-time formatting.

Both formatters are pure: sizes depend only on the byte count, and relative
times only on the ``(then, now)`` pair.
"""

from __future__ import annotations

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 12 * MONTH
LONG_TIME = 37 * YEAR

# (upper bound in seconds, template, divisor); "{n}" is the elapsed amount in divisor units.
_RELATIVE_TIME_STEPS: tuple[tuple[float, str, int], ...] = (
    (1 * SECOND, "now", 1),
    (2 * SECOND, "1 second {label}", 1),
    (1 * MINUTE, "{n} seconds {label}", SECOND),
    (2 * MINUTE, "1 minute {label}", 1),
    (1 * HOUR, "{n} minutes {label}", MINUTE),
    (2 * HOUR, "1 hour {label}", 1),
    (1 * DAY, "{n} hours {label}", HOUR),
    (2 * DAY, "1 day {label}", 1),
    (1 * WEEK, "{n} days {label}", DAY),
    (2 * WEEK, "1 week {label}", 1),
    (1 * MONTH, "{n} weeks {label}", WEEK),
    (2 * MONTH, "1 month {label}", 1),
    (1 * YEAR, "{n} months {label}", MONTH),
    (18 * MONTH, "1 year {label}", 1),
    (2 * YEAR, "2 years {label}", 1),
    (LONG_TIME, "{n} years {label}", YEAR),
)


def human_size(size: int) -> str:
    """Format ``size`` bytes with base-1024 unit prefixes.

    Byte counts below 1 KiB print as integers (``"0 B"``, ``"512 B"``);
    larger values use the largest unit with magnitude >= 1 and one decimal
    (``"1.0 KiB"``, ``"4.5 MiB"``).
    """
    if size < 1024:
        return f"{max(0, int(size))} B"
    value = float(size)
    unit_idx = 0
    while value >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_idx += 1
    if round(value, 1) >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_idx += 1
    return f"{value:.1f} {SIZE_UNITS[unit_idx]}"


def relative_time(then: float, now: float) -> str:
    """Describe the distance from ``then`` to ``now`` in coarse units.

    Past timestamps read ``"... ago"``, future ones ``"... from now"``.
    """
    elapsed = now - then
    label = "ago"
    if elapsed < 0:
        elapsed = -elapsed
        label = "from now"
    for upper_bound, template, divisor in _RELATIVE_TIME_STEPS:
        if elapsed < upper_bound:
            return template.format(n=int(elapsed // divisor), label=label)
    return f"a long while {label}"
