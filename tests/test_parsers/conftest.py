"""Shared fixtures for parser tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# --- File fixtures (anonymized) ---

@pytest.fixture
def round_csv():
    path = FIXTURES_DIR / "3x3-round1.csv"
    return path.read_bytes()


@pytest.fixture
def final_html():
    path = FIXTURES_DIR / "pyraminx-final.html"
    return path.read_bytes()


@pytest.fixture
def pdf_bytes():
    """Trivial PDF-like bytes for cross-parser rejection tests."""
    return b"%PDF-1.4 fake"


# --- PDF fixtures (extracted page data) ---

PDF_HEADER = ["Name", "ID", "1", "2", "3", "4", "5"]


def _results_pdf_pages(repeat_header: bool = False) -> list[dict]:
    """Two pages: header and one row on page 1, one more row on page 2."""
    page2_table = [["Ben Cole", "c2", "7.00", "7.00", "7.00", "7.00", "7.00"]]
    if repeat_header:
        page2_table = [PDF_HEADER] + page2_table
    return [
        {
            "text": "Clock - Round 2\nPrinted 2026-10-19",
            "tables": [[PDF_HEADER, ["Ana Ruiz", "c1", "8.00", "7.50", "9.00", "8.20", "DNF"]]],
        },
        {
            "text": "Clock - Round 2 (continued)",
            "tables": [page2_table],
        },
    ]


def _make_mock_pdf(pages_data: list[dict]) -> MagicMock:
    """Create a mock pdfplumber PDF object from extracted page data."""
    mock_pages = []
    for page_data in pages_data:
        mock_page = MagicMock()
        mock_page.extract_text.return_value = page_data["text"]
        mock_page.extract_tables.return_value = page_data["tables"]
        mock_pages.append(mock_page)

    mock_pdf = MagicMock()
    mock_pdf.pages = mock_pages
    mock_pdf.__enter__ = MagicMock(return_value=mock_pdf)
    mock_pdf.__exit__ = MagicMock(return_value=False)
    return mock_pdf


@pytest.fixture
def mock_pdfplumber(monkeypatch):
    """Monkeypatch pdfplumber.open to return a two-page results sheet."""
    import pdfplumber

    mock_pdf = _make_mock_pdf(_results_pdf_pages())
    monkeypatch.setattr(pdfplumber, "open", lambda *args, **kwargs: mock_pdf)
    return mock_pdf


@pytest.fixture
def mock_pdfplumber_repeated_header(monkeypatch):
    """Monkeypatch pdfplumber.open with a sheet that repeats its header on page 2."""
    import pdfplumber

    mock_pdf = _make_mock_pdf(_results_pdf_pages(repeat_header=True))
    monkeypatch.setattr(pdfplumber, "open", lambda *args, **kwargs: mock_pdf)
    return mock_pdf


@pytest.fixture
def mock_pdfplumber_no_tables(monkeypatch):
    import pdfplumber

    mock_pdf = _make_mock_pdf([{"text": "Just some text", "tables": []}])
    monkeypatch.setattr(pdfplumber, "open", lambda *args, **kwargs: mock_pdf)
    return mock_pdf
