"""Abstract base class for results-sheet parsers, plus shared column handling."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from cuberank.models import CompetitorResult, RoundSheet
from cuberank.times import parse_time

NAME_HEADERS = frozenset({"name", "competitor", "student", "studentname", "competitorname"})
ID_HEADERS = frozenset({"id", "studentid", "competitorid", "wcaid"})
GROUP_HEADERS = frozenset({"group", "heat"})
ATTEMPT_HEADER = re.compile(r"^(?:attempt|solve|a|t)?([1-9])$")


class ResultsSheetParser(ABC):
    """Abstract base class for parsing round results sheets.

    Each parser implementation handles one file type. Parsers are
    registered via the @register_parser decorator in
    cuberank/parsers/__init__.py.
    """

    @abstractmethod
    def can_parse(self, source: str) -> bool:
        """Check if this parser can handle the given source.

        Args:
            source: URL or filename to check

        Returns:
            True if this parser can handle the source, False otherwise
        """
        pass

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this parser can handle the given file content.

        Used when the filename doesn't identify the format. Subclasses
        should override this to inspect the content for their format.
        """
        return False

    @abstractmethod
    def parse(self, source: str, content: bytes) -> RoundSheet:
        """Parse the content into a RoundSheet.

        Args:
            source: Original URL or filename (for context)
            content: Raw bytes of the file

        Returns:
            Parsed RoundSheet

        Raises:
            ValueError: If the content cannot be parsed
        """
        pass


@dataclass
class SheetColumns:
    """Column positions found in a results table header."""
    name: int
    attempts: list[int]
    student_id: int | None = None
    group: int | None = None
    headers: list[str] = field(default_factory=list)


def normalize_header(text: str | None) -> str:
    return re.sub(r"[^a-z0-9]", "", (text or "").lower())


def find_columns(headers: Sequence[str | None]) -> SheetColumns | None:
    """Locate the name, id, group and attempt columns in a header row.

    Attempt columns are headers like "1", "Attempt 1", "Solve 2" or "A3",
    and are returned in attempt-number order. Returns None unless the
    header has a name column and at least one attempt column.
    """
    name_idx = id_idx = group_idx = None
    numbered: list[tuple[int, int]] = []

    for i, header in enumerate(headers):
        key = normalize_header(header)
        if name_idx is None and key in NAME_HEADERS:
            name_idx = i
        elif id_idx is None and key in ID_HEADERS:
            id_idx = i
        elif group_idx is None and key in GROUP_HEADERS:
            group_idx = i
        else:
            match = ATTEMPT_HEADER.match(key)
            if match:
                numbered.append((int(match.group(1)), i))

    if name_idx is None or not numbered:
        return None

    return SheetColumns(
        name=name_idx,
        attempts=[i for _, i in sorted(numbered)],
        student_id=id_idx,
        group=group_idx,
        headers=[h or "" for h in headers],
    )


def cell(row: Sequence[str | None], index: int | None) -> str:
    if index is None or index >= len(row):
        return ""
    return (row[index] or "").strip()


def build_result(row: Sequence[str | None], columns: SheetColumns, row_number: int) -> CompetitorResult:
    """Turn one table row into a CompetitorResult.

    Rows without an id column get their 1-indexed row number as id.

    Raises:
        ValueError: If an attempt cell isn't a recognisable time
    """
    name = cell(row, columns.name)
    student_id = cell(row, columns.student_id) or str(row_number)

    attempts: list[int | None] = []
    dnfs: list[bool] = []
    for index in columns.attempts:
        try:
            time, dnf = parse_time(cell(row, index))
        except ValueError as e:
            raise ValueError(f"Row {row_number} ({name}): {e}") from e
        attempts.append(time)
        dnfs.append(dnf)

    return CompetitorResult(student_id=student_id, student_name=name, attempts=attempts, dnfs=dnfs)


def build_round_sheet(
    title: str, rows: Sequence[Sequence[str | None]], columns: SheetColumns
) -> RoundSheet:
    """Build a RoundSheet from data rows, skipping rows without a name.

    The title is split on the first " - " into event and round names.

    Raises:
        ValueError: If no competitor rows are found
    """
    event_name, _, round_name = title.partition(" - ")

    results: list[CompetitorResult] = []
    groups: dict[str, str] = {}
    for row in rows:
        if not cell(row, columns.name):
            continue
        result = build_result(row, columns, len(results) + 1)
        results.append(result)
        group = cell(row, columns.group)
        if group:
            groups[result.student_id] = group

    if not results:
        raise ValueError("No competitors found in results sheet")

    return RoundSheet(
        event_name=event_name.strip() or "Unknown Event",
        round_name=round_name.strip(),
        results=results,
        groups=groups,
    )
