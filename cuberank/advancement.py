"""Advancement: decide who moves on from a round, and who medals.

All functions take a leaderboard from the ranking engine, so competitors
are already in ranking order with DNF competitors last.
"""

import math
import statistics
from dataclasses import dataclass, field
from typing import Any, Sequence

from cuberank.config import DEFAULT_FINALS_SIZE, MIN_MEDALISTS
from cuberank.export import format_time
from cuberank.models import RankedResult

ADVANCEMENT_TYPES = ("percentage", "count", "time", "all")


class AdvancementError(ValueError):
    """Raised when a round's advancement settings are incomplete or unknown."""
    pass


@dataclass
class AdvancementConfig:
    """How competitors advance out of a round.

    Attributes:
        advancement_type: One of "percentage", "count", "time", "all"
        cutoff_percentage: Top percentage of competitors with a time (e.g. 75)
        cutoff_count: Top N competitors
        cutoff_time: Best single must be at or under this many ms
    """
    advancement_type: str
    cutoff_percentage: float | None = None
    cutoff_count: int | None = None
    cutoff_time: int | None = None


@dataclass
class AdvancementResult:
    """Outcome of applying an advancement rule to a leaderboard."""
    advancing: list[RankedResult]
    eliminated: list[RankedResult]
    total_competitors: int
    cutoff_applied: str

    @property
    def advancing_count(self) -> int:
        return len(self.advancing)

    @property
    def eliminated_count(self) -> int:
        return len(self.eliminated)

    def to_dict(self) -> dict[str, Any]:
        return {
            "advancing": [r.student_id for r in self.advancing],
            "eliminated": [r.student_id for r in self.eliminated],
            "total_competitors": self.total_competitors,
            "advancing_count": self.advancing_count,
            "eliminated_count": self.eliminated_count,
            "cutoff_applied": self.cutoff_applied,
        }


@dataclass
class MedalResult:
    champion: RankedResult
    runner_up: RankedResult
    third_place: RankedResult
    finalists: list[RankedResult] = field(default_factory=list)


@dataclass
class AdvancementStats:
    """Summary of valid best singles across a round."""
    average_time: float
    median_time: float
    min_time: int
    max_time: int
    dnf_count: int
    percentage_advancing: float


def advance_by_percentage(ranked: Sequence[RankedResult], percentage: float) -> AdvancementResult:
    """Top percentage of competitors that have a time, rounded up."""
    with_times = sum(1 for r in ranked if r.best_time is not None)
    advance_count = math.ceil(with_times * percentage / 100)
    advancing = list(ranked[:advance_count])
    return AdvancementResult(
        advancing=advancing,
        eliminated=list(ranked[advance_count:]),
        total_competitors=len(ranked),
        cutoff_applied=f"Top {percentage:g}% ({len(advancing)} competitors)",
    )


def advance_by_count(ranked: Sequence[RankedResult], top_count: int) -> AdvancementResult:
    return AdvancementResult(
        advancing=list(ranked[:top_count]),
        eliminated=list(ranked[top_count:]),
        total_competitors=len(ranked),
        cutoff_applied=f"Top {top_count} competitors",
    )


def advance_by_time(ranked: Sequence[RankedResult], cutoff_ms: int) -> AdvancementResult:
    """Everyone whose best single is at or under the cutoff."""
    def makes_cutoff(r: RankedResult) -> bool:
        return r.best_time is not None and r.best_time <= cutoff_ms

    return AdvancementResult(
        advancing=[r for r in ranked if makes_cutoff(r)],
        eliminated=[r for r in ranked if not makes_cutoff(r)],
        total_competitors=len(ranked),
        cutoff_applied=f"Under {format_time(cutoff_ms)}",
    )


def advance_all(ranked: Sequence[RankedResult]) -> AdvancementResult:
    return AdvancementResult(
        advancing=list(ranked),
        eliminated=[],
        total_competitors=len(ranked),
        cutoff_applied="Everyone advances (Qualification Round)",
    )


def calculate_advancement(ranked: Sequence[RankedResult], config: AdvancementConfig) -> AdvancementResult:
    """Apply a round's advancement rule to its leaderboard.

    Raises:
        AdvancementError: If the cutoff for the chosen rule is missing, or
            the rule is unknown
    """
    kind = config.advancement_type

    if kind == "percentage":
        if not config.cutoff_percentage:
            raise AdvancementError("Percentage cutoff not specified")
        return advance_by_percentage(ranked, config.cutoff_percentage)

    if kind == "count":
        if not config.cutoff_count:
            raise AdvancementError("Count cutoff not specified")
        return advance_by_count(ranked, config.cutoff_count)

    if kind == "time":
        if not config.cutoff_time:
            raise AdvancementError("Time cutoff not specified")
        return advance_by_time(ranked, config.cutoff_time)

    if kind == "all":
        return advance_all(ranked)

    raise AdvancementError(
        f"Unknown advancement type: {kind} (expected one of {', '.join(ADVANCEMENT_TYPES)})"
    )


def generate_finals(ranked: Sequence[RankedResult], finals_size: int = DEFAULT_FINALS_SIZE) -> list[RankedResult]:
    """The top finals_size competitors, excluding anyone without a time."""
    return [r for r in ranked if r.best_time is not None][:finals_size]


def determine_medalists(ranked: Sequence[RankedResult]) -> MedalResult | None:
    """Gold, silver and bronze from a final's leaderboard.

    Returns None when there are fewer than 3 competitors.
    """
    if len(ranked) < MIN_MEDALISTS:
        return None

    return MedalResult(
        champion=ranked[0],
        runner_up=ranked[1],
        third_place=ranked[2],
        finalists=list(ranked[3:]),
    )


def calculate_advancement_stats(result: AdvancementResult) -> AdvancementStats:
    everyone = result.advancing + result.eliminated
    times = sorted(r.best_time for r in everyone if r.best_time is not None)
    dnf_count = sum(1 for r in everyone if r.best_time is None)

    if times:
        average_time = statistics.fmean(times)
        median_time = statistics.median(times)
        min_time, max_time = times[0], times[-1]
    else:
        average_time = median_time = 0.0
        min_time = max_time = 0

    percentage = (result.advancing_count / result.total_competitors * 100
                  if result.total_competitors else 0.0)

    return AdvancementStats(
        average_time=average_time,
        median_time=median_time,
        min_time=min_time,
        max_time=max_time,
        dnf_count=dnf_count,
        percentage_advancing=percentage,
    )
