"""Placement points: convert an event's final order into points for team scoring."""

from typing import Iterable, Mapping

from cuberank.config import PLACEMENT_POINTS
from cuberank.models import FinalScore, RankedResult


def final_score_sort_key(score: FinalScore) -> tuple:
    """Sort key for final scores, same rule as the round ranking.

    DNF scores go last, then faster best single, then faster average with a
    missing average last. Ties keep input order.
    """
    return (
        score.is_dnf or score.best_time is None,
        score.best_time or 0,
        score.average_time is None,
        score.average_time or 0,
    )


def sort_final_scores(final_scores: Iterable[FinalScore]) -> list[FinalScore]:
    return sorted(final_scores, key=final_score_sort_key)


def calculate_placement_points(
    final_scores: Iterable[FinalScore],
    points_table: Mapping[int, int] | None = None,
) -> dict[str, int]:
    """Award points to each competitor by their final placement.

    Placement is the 1-indexed position after sorting, not the tie-aware
    rank: two competitors with identical results still occupy different
    positions and can receive different points.

    Args:
        final_scores: One final score per competitor
        points_table: Mapping placement -> points. Defaults to
            PLACEMENT_POINTS (10, 8, 6, 5, 4, 3, 2, 1). Placements missing
            from the table score 0.

    Returns:
        Dict mapping student_id -> points, in placement order.
    """
    table = PLACEMENT_POINTS if points_table is None else points_table

    points: dict[str, int] = {}
    for placement, score in enumerate(sort_final_scores(final_scores), start=1):
        points[score.student_id] = table.get(placement, 0)
    return points


def get_ranking_position(student_id: str, final_scores: Iterable[FinalScore]) -> int:
    """1-indexed sorted position of a competitor, or 0 if they aren't present."""
    for position, score in enumerate(sort_final_scores(final_scores), start=1):
        if score.student_id == student_id:
            return position
    return 0


def final_scores_from_ranked(ranked: Iterable[RankedResult]) -> list[FinalScore]:
    """Build final scores from a round leaderboard.

    A competitor without a best single is a DNF for the event.
    """
    return [
        FinalScore(
            student_id=r.student_id,
            best_time=r.best_time,
            average_time=r.average_time,
            is_dnf=r.best_time is None,
        )
        for r in ranked
    ]
