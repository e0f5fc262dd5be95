"""Group (heat) leaderboards and the combined overall leaderboard."""

import logging
from typing import Mapping, Sequence

from cuberank.formats import RoundFormat
from cuberank.models import CompetitorResult, RankedResult
from cuberank.ranking import rank_results

logger = logging.getLogger(__name__)


def rank_by_groups(
    results: Sequence[CompetitorResult],
    group_assignments: Mapping[str, str],
    round_format: RoundFormat | str | None = None,
) -> dict[str, list[RankedResult]]:
    """Rank competitors within each group independently.

    Args:
        results: Competitor results for the round
        group_assignments: Mapping student_id -> group id
        round_format: Optional round format passed to the ranking engine

    Returns:
        Dict mapping group id -> that group's leaderboard. Groups appear in
        the order their first competitor appears in results. Competitors
        without a group assignment are left out.
    """
    grouped: dict[str, list[CompetitorResult]] = {}
    unassigned: list[str] = []

    for result in results:
        group_id = group_assignments.get(result.student_id)
        if not group_id:
            unassigned.append(result.student_id)
            continue
        grouped.setdefault(group_id, []).append(result)

    if unassigned:
        logger.warning(
            "%d competitor(s) have no group and were left out of group rankings: %s",
            len(unassigned), ", ".join(unassigned),
        )

    return {
        group_id: rank_results(group_results, round_format)
        for group_id, group_results in grouped.items()
    }


def get_overall_leaderboard(
    results: Sequence[CompetitorResult],
    round_format: RoundFormat | str | None = None,
) -> list[RankedResult]:
    """Rank every competitor together, ignoring any group assignments."""
    return rank_results(results, round_format)
