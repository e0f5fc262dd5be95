"""Tests for core data models."""

from cuberank.models import CompetitorResult, RankedResult, RoundSheet, ScoredResult


class TestCompetitorResult:
    def setup_method(self):
        self.result = CompetitorResult(
            student_id="s1",
            student_name="Alice",
            attempts=[12000, 900, None, 13020, None],
            dnfs=[False, True, True, False, False],
        )

    def test_dnf_count(self):
        assert self.result.dnf_count == 2

    def test_valid_times(self):
        assert self.result.valid_times == [12000, 13020]

    def test_attempts_completed(self):
        """Missing and DNF attempts don't count as completed."""
        assert self.result.attempts_completed == 2


class TestRankedResult:
    def test_from_scored_copies_attempts(self):
        scored = ScoredResult(
            student_id="s1", student_name="Alice",
            attempts=[1000, 2000, 3000], dnfs=[False, False, False],
            best_time=1000, average_time=2000,
        )
        ranked = RankedResult.from_scored(scored, rank=3)
        assert ranked.rank == 3
        assert ranked.best_time == 1000
        assert ranked.attempts == scored.attempts
        assert ranked.attempts is not scored.attempts

    def test_to_dict(self):
        ranked = RankedResult(
            student_id="s1", student_name="Alice",
            attempts=[1000, None, 3000], dnfs=[False, True, False],
            best_time=1000, average_time=None, rank=1,
        )
        assert ranked.to_dict() == {
            "rank": 1,
            "student_id": "s1",
            "student_name": "Alice",
            "best_time": 1000,
            "average_time": None,
            "attempts": [1000, None, 3000],
            "dnf_count": 1,
            "attempts_completed": 2,
        }


class TestRoundSheet:
    def test_title(self):
        sheet = RoundSheet(event_name="3x3", round_name="Final", results=[])
        assert sheet.title == "3x3 - Final"

    def test_title_without_round(self):
        sheet = RoundSheet(event_name="3x3", round_name="", results=[])
        assert sheet.title == "3x3"

    def test_num_competitors(self):
        sheet = RoundSheet(
            event_name="3x3", round_name="",
            results=[CompetitorResult("s1", "A", [1000], [False])],
        )
        assert sheet.num_competitors == 1
