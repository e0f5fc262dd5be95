"""Shared test helpers."""

from cuberank.models import CompetitorResult, RankedResult


def make_result(
    student_id: str,
    attempts: list[int | None],
    dnfs: list[bool] | None = None,
    name: str | None = None,
) -> CompetitorResult:
    """Build a CompetitorResult, defaulting to no DNFs and name == id.

    Args:
        student_id: Competitor identifier
        attempts: Attempt times in ms
        dnfs: DNF flags; defaults to all False
        name: Display name; defaults to the student id
    """
    return CompetitorResult(
        student_id=student_id,
        student_name=name or student_id,
        attempts=attempts,
        dnfs=dnfs if dnfs is not None else [False] * len(attempts),
    )


def make_dnf(student_id: str, count: int = 5) -> CompetitorResult:
    """Build a competitor whose every attempt is a DNF."""
    return make_result(student_id, [None] * count, [True] * count)


def ranking_ids(ranked: list[RankedResult]) -> list[str]:
    """Extract student ids in leaderboard order."""
    return [r.student_id for r in ranked]


def ranking_ranks(ranked: list[RankedResult]) -> list[int]:
    return [r.rank for r in ranked]
