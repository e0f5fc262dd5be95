"""Ranking engine: orders a round's competitors and assigns tie-aware ranks."""

import logging
from typing import Iterable

from cuberank.formats import RoundFormat, get_format
from cuberank.models import CompetitorResult, HeadToHead, RankedResult, ScoredResult
from cuberank.times import calculate_best_time, calculate_wca_average, check_attempts

logger = logging.getLogger(__name__)


def score_result(
    result: CompetitorResult, round_format: RoundFormat | str | None = None
) -> ScoredResult:
    """Compute a competitor's best single and average.

    Without a round format the Average of 5 calculators are used and only
    the attempts/DNF length match is enforced. With a format, the format's
    fixed attempt count is enforced as well.

    Raises:
        AttemptCountError: If the attempts are malformed
    """
    if round_format is None:
        check_attempts(result.attempts, result.dnfs)
        best = calculate_best_time(result.attempts, result.dnfs)
        average = calculate_wca_average(result.attempts, result.dnfs)
    else:
        round_format = get_format(round_format)
        check_attempts(result.attempts, result.dnfs, round_format.attempt_count)
        best = round_format.best(result.attempts, result.dnfs)
        average = round_format.average(result.attempts, result.dnfs)

    return ScoredResult(
        student_id=result.student_id,
        student_name=result.student_name,
        attempts=list(result.attempts),
        dnfs=list(result.dnfs),
        best_time=best,
        average_time=average,
    )


def ranking_sort_key(scored: ScoredResult) -> tuple:
    """Sort key for the competition order.

    1. Competitors with a best single come before those without
    2. Faster best single first
    3. Faster average first, missing average last
    4. More attempts completed first

    Python's sort is stable, so anything still tied keeps input order.
    """
    return (
        scored.best_time is None,
        scored.best_time or 0,
        scored.average_time is None,
        scored.average_time or 0,
        -scored.attempts_completed,
    )


def rank_scored(scored_results: Iterable[ScoredResult]) -> list[RankedResult]:
    """Sort scored results and assign standard competition ranks.

    A competitor shares the previous competitor's rank only when both their
    best single and average are equal; otherwise their rank is their
    1-indexed position, so ranks skip over tied slots (1, 2, 2, 4).
    """
    ordered = sorted(scored_results, key=ranking_sort_key)

    ranked: list[RankedResult] = []
    for position, scored in enumerate(ordered, start=1):
        if ranked and (
            scored.best_time == ranked[-1].best_time
            and scored.average_time == ranked[-1].average_time
        ):
            rank = ranked[-1].rank
        else:
            rank = position
        ranked.append(RankedResult.from_scored(scored, rank))

    return ranked


def rank_results(
    results: Iterable[CompetitorResult], round_format: RoundFormat | str | None = None
) -> list[RankedResult]:
    """Generate a ranked leaderboard from a round's results.

    Args:
        results: Competitor results, in insertion order
        round_format: Optional round format (instance or name). Defaults to
            Average of 5 calculations without a fixed attempt count check.

    Returns:
        RankedResults from 1st to last. An empty input gives an empty list.

    Raises:
        AttemptCountError: If any competitor's attempts are malformed
    """
    scored = [score_result(result, round_format) for result in results]
    ranked = rank_scored(scored)
    logger.debug("Ranked %d competitors", len(ranked))
    return ranked


def get_head_to_head(result1: CompetitorResult, result2: CompetitorResult) -> HeadToHead:
    """Compare two competitors attempt by attempt.

    Only attempt slots where both competitors have a valid time count as a
    matchup. A faster time wins the slot; equal times are a draw.
    """
    wins1 = 0
    wins2 = 0
    matchups = 0

    slots = zip(result1.attempts, result1.dnfs, result2.attempts, result2.dnfs)
    for time1, dnf1, time2, dnf2 in slots:
        if time1 is None or dnf1 or time2 is None or dnf2:
            continue
        matchups += 1
        if time1 < time2:
            wins1 += 1
        elif time2 < time1:
            wins2 += 1

    return HeadToHead(wins1=wins1, wins2=wins2, matchups=matchups)
