"""Pre-ranking checks that report every problem in a round at once."""

import logging
from typing import Sequence

from cuberank.config import DEFAULT_ATTEMPT_COUNT
from cuberank.models import CompetitorResult, ValidationResult

logger = logging.getLogger(__name__)


def validate_results_for_leaderboard(
    results: Sequence[CompetitorResult],
    attempt_count: int = DEFAULT_ATTEMPT_COUNT,
) -> ValidationResult:
    """Check that a round's results are ready to be ranked.

    Problems are collected rather than raised so they can all be shown
    together. Checks, in order:
    - there is at least one result (if not, nothing else is checked)
    - every result has a student id and name
    - every result has exactly attempt_count attempts and DNF flags

    Args:
        results: Competitor results for the round
        attempt_count: Fixed number of attempts for the round's format

    Returns:
        ValidationResult with valid=False and one message per problem found.
    """
    errors: list[str] = []

    if not results:
        errors.append("No results to rank")
        return ValidationResult(valid=False, errors=errors)

    for index, result in enumerate(results, start=1):
        label = result.student_name or result.student_id or f"#{index}"

        if not result.student_id or not result.student_name:
            errors.append(f"Result {label}: missing student ID or name")
        if len(result.attempts) != attempt_count:
            errors.append(
                f"Student {label}: Expected {attempt_count} attempts, got {len(result.attempts)}"
            )
        if len(result.dnfs) != attempt_count:
            errors.append(
                f"Student {label}: Expected {attempt_count} DNF flags, got {len(result.dnfs)}"
            )

    if errors:
        logger.warning("Round failed validation with %d problem(s)", len(errors))

    return ValidationResult(valid=not errors, errors=errors)
