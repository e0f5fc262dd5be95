"""Tests for placement points."""

import pytest

from tests.conftest import make_dnf, make_result

from cuberank.config import PLACEMENT_POINTS
from cuberank.models import FinalScore
from cuberank.points import (
    calculate_placement_points,
    final_scores_from_ranked,
    get_ranking_position,
)
from cuberank.ranking import rank_results


def score(student_id, best, average=None, is_dnf=False):
    return FinalScore(student_id=student_id, best_time=best, average_time=average, is_dnf=is_dnf)


class TestPlacementPoints:
    def test_nine_competitors(self):
        """1st gets 10, 9th is past the table and gets 0."""
        scores = [score(f"s{i}", 1000 + i * 100) for i in range(1, 10)]
        points = calculate_placement_points(scores)
        assert list(points.values()) == [10, 8, 6, 5, 4, 3, 2, 1, 0]
        assert points["s1"] == 10
        assert points["s9"] == 0

    def test_three_competitors(self):
        scores = [score("c", 3000), score("a", 1000), score("b", 2000)]
        assert calculate_placement_points(scores) == {"a": 10, "b": 8, "c": 6}

    def test_empty(self):
        assert calculate_placement_points([]) == {}

    def test_dnf_last(self):
        scores = [score("dnf", None, is_dnf=True), score("a", 5000), score("b", 4000)]
        points = calculate_placement_points(scores)
        assert list(points) == ["b", "a", "dnf"]
        assert points["dnf"] == 6

    def test_flagged_dnf_last_even_with_time(self):
        scores = [score("flagged", 100, is_dnf=True), score("a", 5000)]
        assert list(calculate_placement_points(scores)) == ["a", "flagged"]

    def test_equal_best_broken_by_average(self):
        scores = [score("x", 1000, 2000), score("y", 1000, 1500), score("z", 1000, None)]
        assert list(calculate_placement_points(scores)) == ["y", "x", "z"]

    def test_ties_get_points_by_position(self):
        """Identical results still occupy different positions."""
        scores = [score("a", 1000, 1100), score("b", 1000, 1100)]
        assert calculate_placement_points(scores) == {"a": 10, "b": 8}

    def test_custom_table(self):
        scores = [score("a", 1000), score("b", 2000), score("c", 3000)]
        points = calculate_placement_points(scores, points_table={1: 3, 2: 1})
        assert points == {"a": 3, "b": 1, "c": 0}

    def test_default_table_is_read_only(self):
        with pytest.raises(TypeError):
            PLACEMENT_POINTS[1] = 100


class TestRankingPosition:
    def test_position(self):
        scores = [score("c", 3000), score("a", 1000), score("b", 2000)]
        assert get_ranking_position("b", scores) == 2

    def test_absent(self):
        assert get_ranking_position("zzz", [score("a", 1000)]) == 0


class TestFinalScoresFromRanked:
    def test_builds_scores(self):
        ranked = rank_results([
            make_result("a", [1200, 1000, 1100, 1150, 5000]),
            make_dnf("b"),
        ])
        scores = final_scores_from_ranked(ranked)
        assert scores[0] == FinalScore("a", 1000, 1150, False)
        assert scores[1] == FinalScore("b", None, None, True)

    def test_points_for_ranked_round(self):
        ranked = rank_results([make_result(f"s{i}", [1000 + i] * 5) for i in range(3)])
        points = calculate_placement_points(final_scores_from_ranked(ranked))
        assert points == {"s0": 10, "s1": 8, "s2": 6}
