"""Attempt-level calculations: best single, WCA-style average, time strings.

All durations are integer milliseconds. An attempt counts as valid when it
has a duration and is not flagged DNF.
"""

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from cuberank.config import MIN_ATTEMPTS_FOR_AVERAGE


class AttemptCountError(ValueError):
    """Raised when a competitor's attempts don't have the required shape.

    Either the attempt and DNF sequences differ in length, or they don't
    match the round's fixed attempt count. Ranking a malformed round would
    give a silently wrong leaderboard, so this is never recovered from.
    """
    pass


DNF_MARKERS = frozenset({"DNF", "DNS"})

TIME_PATTERN = re.compile(
    r"^(?:(?P<minutes>\d+):(?=\d{2}(?:\.|$)))?"
    r"(?P<seconds>\d+)"
    r"(?:\.(?P<fraction>\d{1,3}))?$"
)


def check_attempts(
    attempts: Sequence[int | None],
    dnfs: Sequence[bool],
    attempt_count: int | None = None,
) -> None:
    """Raise AttemptCountError unless the sequences are well-formed.

    Args:
        attempts: Attempt durations
        dnfs: Parallel DNF flags
        attempt_count: If given, both sequences must have exactly this length
    """
    if len(attempts) != len(dnfs):
        raise AttemptCountError(
            f"Got {len(attempts)} attempts but {len(dnfs)} DNF flags"
        )
    if attempt_count is not None and len(attempts) != attempt_count:
        raise AttemptCountError(
            f"Expected {attempt_count} attempts, got {len(attempts)}"
        )


def valid_times(attempts: Sequence[int | None], dnfs: Sequence[bool]) -> list[int]:
    """Return the durations of valid attempts, in attempt order."""
    check_attempts(attempts, dnfs)
    return [time for time, dnf in zip(attempts, dnfs) if time is not None and not dnf]


def rounded_mean(values: Sequence[int]) -> int:
    """Mean of non-negative integers, rounded half up to an integer."""
    total = sum(values)
    n = len(values)
    return (2 * total + n) // (2 * n)


def calculate_best_time(attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
    """Fastest valid attempt, or None if no attempt is valid."""
    times = valid_times(attempts, dnfs)
    if not times:
        return None
    return min(times)


def calculate_wca_average(attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
    """Calculate the average of a round (Ao5 style).

    - Fewer than 3 valid attempts: no average (None).
    - 5 valid attempts: drop the fastest and slowest, mean of the middle 3.
    - 3 or 4 valid attempts: plain mean of every valid attempt, no trimming.

    Results are rounded to the nearest millisecond.
    """
    times = valid_times(attempts, dnfs)

    if len(times) < MIN_ATTEMPTS_FOR_AVERAGE:
        return None

    if len(times) == 5:
        middle = sorted(times)[1:4]
        return rounded_mean(middle)

    # Partial round: average whatever was completed
    return rounded_mean(times)


def parse_time(text: str | None) -> tuple[int | None, bool]:
    """Parse a typed attempt into (milliseconds, is_dnf).

    Accepts "12.34", "12", "1:02.50", "DNF"/"DNS" (any case) and blank
    input. Blank input means no time was captured: (None, False).

    Raises:
        ValueError: If the text isn't a recognisable time
    """
    if text is None:
        return None, False

    cleaned = text.strip()
    if not cleaned or cleaned in ("-", "—"):
        return None, False
    if cleaned.upper() in DNF_MARKERS:
        return None, True

    match = TIME_PATTERN.match(cleaned)
    if match is None:
        raise ValueError(f"Unrecognised time: {text!r}")

    minutes = int(match.group("minutes") or 0)
    seconds = int(match.group("seconds"))
    fraction = (match.group("fraction") or "").ljust(3, "0")
    return (minutes * 60 + seconds) * 1000 + int(fraction), False


def format_seconds(milliseconds: int) -> str:
    """Format a duration as seconds with exactly two decimals (12340 -> "12.34")."""
    seconds = (Decimal(milliseconds) / 1000).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{seconds:.2f}"
