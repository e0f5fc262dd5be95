"""Parser for CSV results sheets."""

import csv
import io
import re
from urllib.parse import urlparse

from cuberank.models import RoundSheet
from cuberank.parsers import register_parser
from cuberank.parsers.base import ResultsSheetParser, build_round_sheet, find_columns

# How many leading rows may come before the header row
HEADER_SEARCH_ROWS = 10


@register_parser
class CsvSheetParser(ResultsSheetParser):
    """Parser for CSV results sheets, as exported from a spreadsheet.

    Layout:
        Event - Round            (optional title line)
        Name,ID,Group,Attempt 1,Attempt 2,Attempt 3,Attempt 4,Attempt 5
        Alice,s1,A,12.34,DNF,11.02,13.50,12.00

    ID and Group columns are optional, and attempt columns can also be
    headed "1".."5" or "Solve 1".."Solve 5". Attempt cells hold times
    like "12.34" or "1:02.50", "DNF", or nothing.
    """

    EXTENSION_PATTERN = re.compile(r"\.csv$", re.IGNORECASE)

    DESCRIPTION = "CSV (.csv) with a Name column and one column per attempt"

    def can_parse(self, source: str) -> bool:
        return bool(self.EXTENSION_PATTERN.search(urlparse(source).path))

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this looks like a CSV sheet: a header row within the first few rows."""
        if content.startswith(b"%PDF") or b"<table" in content.lower():
            return False
        try:
            rows = self._read_rows(content)
        except (UnicodeDecodeError, csv.Error):
            return False
        return self._find_header(rows) is not None

    def parse(self, source: str, content: bytes) -> RoundSheet:
        """Parse CSV content into a RoundSheet."""
        try:
            rows = self._read_rows(content)
        except UnicodeDecodeError as e:
            raise ValueError(f"CSV sheet is not valid UTF-8: {e}") from e

        found = self._find_header(rows)
        if found is None:
            raise ValueError("Could not find a header row with a Name column and attempt columns")
        header_index, columns = found

        # Any non-empty line before the header is the title
        title = ""
        for row in rows[:header_index]:
            text = ",".join(c for c in row if c).strip().lstrip("#").strip()
            if text:
                title = text
                break

        return build_round_sheet(title, rows[header_index + 1:], columns)

    @staticmethod
    def _read_rows(content: bytes) -> list[list[str]]:
        text = content.decode("utf-8-sig")
        return [row for row in csv.reader(io.StringIO(text)) if any(c.strip() for c in row)]

    @staticmethod
    def _find_header(rows: list[list[str]]):
        for i, row in enumerate(rows[:HEADER_SEARCH_ROWS]):
            columns = find_columns(row)
            if columns is not None:
                return i, columns
        return None
