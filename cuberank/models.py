"""Core data models for round results and rankings."""

from dataclasses import dataclass, field
from typing import Any, Self


@dataclass
class CompetitorResult:
    """One competitor's attempts in a round.

    Attributes:
        student_id: Competitor identifier
        student_name: Display name
        attempts: Attempt durations in milliseconds (None = no time captured)
        dnfs: Parallel flags, True where the attempt is a DNF

    An attempt flagged as DNF never counts, even if a duration was captured.

    Example:
        >>> result = CompetitorResult(
        ...     student_id="s1",
        ...     student_name="Alice",
        ...     attempts=[12000, 11500, None, 13020, 12210],
        ...     dnfs=[False, False, True, False, False],
        ... )
    """
    student_id: str
    student_name: str
    attempts: list[int | None]
    dnfs: list[bool]

    @property
    def dnf_count(self) -> int:
        return sum(1 for dnf in self.dnfs if dnf)

    @property
    def valid_times(self) -> list[int]:
        """Durations of attempts that are neither DNF nor missing, in order."""
        return [
            time for time, dnf in zip(self.attempts, self.dnfs)
            if time is not None and not dnf
        ]

    @property
    def attempts_completed(self) -> int:
        return len(self.valid_times)


@dataclass
class ScoredResult(CompetitorResult):
    """A CompetitorResult with its best single and average filled in.

    Attributes:
        best_time: Fastest valid attempt in ms, or None if there is none
        average_time: Average in ms as defined by the round format, or None
    """
    best_time: int | None = None
    average_time: int | None = None


@dataclass
class RankedResult(ScoredResult):
    """A ScoredResult with its position on a leaderboard.

    Attributes:
        rank: 1-indexed rank. Tied competitors share a rank and the next
            competitor's rank skips over the tied slots (1, 2, 2, 4).
    """
    rank: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "rank": self.rank,
            "student_id": self.student_id,
            "student_name": self.student_name,
            "best_time": self.best_time,
            "average_time": self.average_time,
            "attempts": list(self.attempts),
            "dnf_count": self.dnf_count,
            "attempts_completed": self.attempts_completed,
        }

    @classmethod
    def from_scored(cls, scored: ScoredResult, rank: int) -> Self:
        return cls(
            student_id=scored.student_id,
            student_name=scored.student_name,
            attempts=list(scored.attempts),
            dnfs=list(scored.dnfs),
            best_time=scored.best_time,
            average_time=scored.average_time,
            rank=rank,
        )


@dataclass
class FinalScore:
    """A competitor's final score for an event, used for placement points.

    Attributes:
        student_id: Competitor identifier
        best_time: Best single in ms, or None
        average_time: Average in ms, or None
        is_dnf: Whether the competitor has no valid result for the event
    """
    student_id: str
    best_time: int | None
    average_time: int | None
    is_dnf: bool


@dataclass
class ValidationResult:
    """Outcome of checking a round's results before ranking them.

    Attributes:
        valid: True when no problems were found
        errors: Human-readable problem descriptions, in the order found
    """
    valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass
class HeadToHead:
    """Attempt-by-attempt comparison between two competitors."""
    wins1: int
    wins2: int
    matchups: int


@dataclass
class RoundSheet:
    """A round's results as read from a results sheet.

    Attributes:
        event_name: Event name (e.g. "3x3")
        round_name: Round name (e.g. "Round 1")
        results: Competitor results in sheet order
        groups: Mapping student_id -> group id, empty if the sheet has no groups
    """
    event_name: str
    round_name: str
    results: list[CompetitorResult]
    groups: dict[str, str] = field(default_factory=dict)

    @property
    def num_competitors(self) -> int:
        return len(self.results)

    @property
    def title(self) -> str:
        if self.round_name:
            return f"{self.event_name} - {self.round_name}"
        return self.event_name
