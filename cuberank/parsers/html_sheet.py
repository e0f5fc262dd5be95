"""Parser for HTML results pages."""

import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from cuberank.models import RoundSheet
from cuberank.parsers import register_parser
from cuberank.parsers.base import ResultsSheetParser, build_round_sheet, find_columns


@register_parser
class HtmlSheetParser(ResultsSheetParser):
    """Parser for HTML pages with a results table.

    The page must contain a <table> whose header row has a Name column and
    one column per attempt (same headers as the CSV sheet). The header row
    is the table's first row, whether it uses <th> or <td> cells.

    The round title comes from the first <h1>, falling back to <title>,
    e.g. "3x3 - Round 1".

    Note: Pages may contain several tables (e.g. a navigation table);
    the first one with a usable header is parsed.
    """

    EXTENSION_PATTERN = re.compile(r"\.html?$", re.IGNORECASE)

    DESCRIPTION = "HTML page (.html) with a results table"

    def can_parse(self, source: str) -> bool:
        return bool(self.EXTENSION_PATTERN.search(urlparse(source).path))

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this looks like an HTML page with a results table."""
        html = content.decode("utf-8", errors="replace")
        if "<table" not in html.lower():
            return False
        soup = BeautifulSoup(html, "lxml")
        return self._find_results_table(soup) is not None

    def parse(self, source: str, content: bytes) -> RoundSheet:
        """Parse HTML content into a RoundSheet."""
        html = content.decode("utf-8", errors="replace")
        soup = BeautifulSoup(html, "lxml")

        found = self._find_results_table(soup)
        if found is None:
            raise ValueError("No results table with a Name column and attempt columns found in HTML")
        rows, columns = found

        title = ""
        heading = soup.find("h1") or soup.find("title")
        if heading:
            title = heading.get_text(" ", strip=True)

        return build_round_sheet(title, rows[1:], columns)

    @staticmethod
    def _row_cells(row) -> list[str]:
        return [c.get_text(" ", strip=True) for c in row.find_all(["th", "td"])]

    def _find_results_table(self, soup):
        """Return (rows as cell text, columns) for the first results table."""
        for table in soup.find_all("table"):
            rows = [self._row_cells(tr) for tr in table.find_all("tr")]
            if not rows:
                continue
            columns = find_columns(rows[0])
            if columns is not None:
                return rows, columns
        return None
