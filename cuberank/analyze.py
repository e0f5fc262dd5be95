"""Orchestrator: parse a results sheet, validate it, rank it and score it."""

import logging
from dataclasses import dataclass, field
from typing import Any

from cuberank.config import DEFAULT_FORMAT
from cuberank.export import export_results_csv
from cuberank.formats import RoundFormat, UnknownFormatError, get_format
from cuberank.leaderboard import get_overall_leaderboard, rank_by_groups
from cuberank.models import RankedResult, RoundSheet, ValidationResult
from cuberank.parsers import detect_parser, detect_parser_by_content, get_supported_file_types
from cuberank.points import calculate_placement_points, final_scores_from_ranked
from cuberank.validation import validate_results_for_leaderboard

logger = logging.getLogger(__name__)


@dataclass
class RoundAnalysis:
    """Complete analysis of one round."""
    sheet: RoundSheet
    round_format: RoundFormat
    validation: ValidationResult
    overall: list[RankedResult]
    groups: dict[str, list[RankedResult]] = field(default_factory=dict)
    points: dict[str, int] = field(default_factory=dict)
    export: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "event_name": self.sheet.event_name,
            "round_name": self.sheet.round_name,
            "format": self.round_format.name,
            "num_competitors": self.sheet.num_competitors,
            "overall": [r.to_dict() for r in self.overall],
            "groups": {
                group_id: [r.to_dict() for r in ranked]
                for group_id, ranked in self.groups.items()
            },
            "points": self.points,
        }


class AnalysisError(Exception):
    """Error during round analysis."""
    pass


def analyze_round(
    source: str, content: bytes, round_format: RoundFormat | str = DEFAULT_FORMAT
) -> RoundAnalysis:
    """Parse a results sheet and produce the round's leaderboards.

    Args:
        source: URL or filename (used to detect the appropriate parser)
        content: Raw bytes of the results sheet
        round_format: Round format instance or name, e.g. "Best of 3"

    Returns:
        RoundAnalysis with the overall leaderboard, per-group leaderboards
        (when the sheet assigns groups), placement points and CSV export

    Raises:
        AnalysisError: If the format is unknown, no parser is found, parsing
            fails or the results don't pass validation
    """
    try:
        round_format = get_format(round_format)
    except UnknownFormatError as e:
        raise AnalysisError(str(e)) from e

    # Find appropriate parser: try the filename first, then content detection
    parser = detect_parser(source)
    if parser is None:
        parser = detect_parser_by_content(content, source)
    if parser is None:
        raise AnalysisError(
            f"We couldn't determine the results sheet format.\n\n"
            f"{get_supported_file_types()}"
        )

    try:
        sheet = parser.parse(source, content)
    except Exception as e:
        raise AnalysisError(f"Failed to parse results sheet: {e}") from e

    logger.info("Parsed %d competitors from %s", sheet.num_competitors, source)

    validation = validate_results_for_leaderboard(sheet.results, round_format.attempt_count)
    if not validation.valid:
        problems = "\n".join(f"  - {error}" for error in validation.errors)
        raise AnalysisError(f"The results sheet has problems:\n{problems}")

    overall = get_overall_leaderboard(sheet.results, round_format)
    groups = rank_by_groups(sheet.results, sheet.groups, round_format) if sheet.groups else {}
    points = calculate_placement_points(final_scores_from_ranked(overall))

    return RoundAnalysis(
        sheet=sheet,
        round_format=round_format,
        validation=validation,
        overall=overall,
        groups=groups,
        points=points,
        export=export_results_csv(overall, sheet.event_name, sheet.round_name),
    )
