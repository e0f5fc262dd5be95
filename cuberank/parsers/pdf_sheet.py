"""Parser for printed PDF results sheets."""

import re
from io import BytesIO
from urllib.parse import urlparse

import pdfplumber

from cuberank.models import RoundSheet
from cuberank.parsers import register_parser
from cuberank.parsers.base import ResultsSheetParser, build_round_sheet, find_columns


@register_parser
class PdfSheetParser(ResultsSheetParser):
    """Parser for PDF results sheets, e.g. printed from a spreadsheet.

    These PDFs have:
    - The round title ("Event - Round") as the first line of text
    - A results table with a Name column and one column per attempt
    - On multi-page sheets, the table continues on the following pages,
      with or without a repeated header row
    """

    EXTENSION_PATTERN = re.compile(r"\.pdf$", re.IGNORECASE)

    DESCRIPTION = "PDF (.pdf) results sheet with a results table"

    def can_parse(self, source: str) -> bool:
        return bool(self.EXTENSION_PATTERN.search(urlparse(source).path))

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this is a PDF whose first page has a results table."""
        if not content.startswith(b"%PDF"):
            return False

        try:
            with pdfplumber.open(BytesIO(content)) as pdf:
                if not pdf.pages:
                    return False
                tables = pdf.pages[0].extract_tables() or []
        except Exception:
            return False

        return any(table and find_columns(table[0]) is not None for table in tables)

    def parse(self, source: str, content: bytes) -> RoundSheet:
        """Parse PDF content into a RoundSheet."""
        with pdfplumber.open(BytesIO(content)) as pdf:
            if not pdf.pages:
                raise ValueError("PDF has no pages")

            first_text = pdf.pages[0].extract_text() or ""
            all_tables = []
            for page in pdf.pages:
                all_tables.extend(page.extract_tables() or [])

        if not all_tables:
            raise ValueError("No tables found in PDF")

        columns = None
        rows = []
        for table in all_tables:
            if not table:
                continue
            table_columns = find_columns(table[0])
            if table_columns is not None:
                # A (repeated) header row starts the table
                columns = columns or table_columns
                rows.extend(table[1:])
            elif columns is not None and len(table[0]) == len(columns.headers):
                # Continuation of the results table without a header
                rows.extend(table)

        if columns is None:
            raise ValueError("No results table with a Name column and attempt columns found in PDF")

        return build_round_sheet(self._extract_title(first_text), rows, columns)

    @staticmethod
    def _extract_title(text: str) -> str:
        for line in text.splitlines():
            line = line.strip()
            if line:
                return line
        return ""
