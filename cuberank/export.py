"""Text export of ranked results."""

import csv
import io
from typing import Iterable

from cuberank.models import RankedResult
from cuberank.times import format_seconds

EXPORT_HEADERS = ["Rank", "Name", "Best Time", "Average Time", "Attempts Completed", "DNFs"]


def format_time(milliseconds: int | None) -> str:
    """Format a time for display: "12.34s", or "N/A" when there is no time."""
    if milliseconds is None:
        return "N/A"
    return format_seconds(milliseconds) + "s"


def export_row(result: RankedResult) -> list:
    return [
        result.rank,
        result.student_name,
        "DNF" if result.best_time is None else format_seconds(result.best_time),
        "N/A" if result.average_time is None else format_seconds(result.average_time),
        result.attempts_completed,
        result.dnf_count,
    ]


def export_results_csv(ranked: Iterable[RankedResult], event_name: str, round_name: str) -> str:
    """Export a leaderboard as CSV text.

    Layout:
        <event_name> - <round_name>
        (blank line)
        Rank,Name,Best Time,Average Time,Attempts Completed,DNFs
        one row per competitor, in the order given

    Times are seconds with two decimals. A missing best single is written
    as "DNF" and a missing average as "N/A". Nothing is written to disk;
    the caller decides what to do with the text.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for result in ranked:
        writer.writerow(export_row(result))

    table = buffer.getvalue().rstrip("\n")
    return "\n".join([f"{event_name} - {round_name}", "", table])
