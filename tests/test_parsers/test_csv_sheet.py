"""Tests for the CSV results-sheet parser."""

import pytest

from cuberank.parsers.csv_sheet import CsvSheetParser


class TestCsvSheetParser:
    def setup_method(self):
        self.parser = CsvSheetParser()

    # --- can_parse ---

    def test_can_parse_filename(self):
        assert self.parser.can_parse("3x3-round1.csv")

    def test_can_parse_uppercase_extension(self):
        assert self.parser.can_parse("RESULTS.CSV")

    def test_can_parse_url_with_query(self):
        assert self.parser.can_parse("https://example.com/export/round.csv?download=1")

    def test_cannot_parse_other_extension(self):
        assert not self.parser.can_parse("results.html")

    # --- can_parse_content ---

    def test_can_parse_content(self, round_csv):
        assert self.parser.can_parse_content(round_csv, "upload")

    def test_cannot_parse_content_html(self, final_html):
        assert not self.parser.can_parse_content(final_html, "upload")

    def test_cannot_parse_content_pdf(self, pdf_bytes):
        assert not self.parser.can_parse_content(pdf_bytes, "upload")

    def test_cannot_parse_content_without_attempt_columns(self):
        assert not self.parser.can_parse_content(b"Name,Score\nAlice,10\n", "upload")

    def test_cannot_parse_content_binary(self):
        assert not self.parser.can_parse_content(b"\xff\xfe\x00\x81", "upload")

    # --- parse ---

    def test_title(self, round_csv):
        sheet = self.parser.parse("3x3-round1.csv", round_csv)
        assert sheet.event_name == "3x3"
        assert sheet.round_name == "Round 1"

    def test_competitors(self, round_csv):
        sheet = self.parser.parse("3x3-round1.csv", round_csv)
        assert [r.student_id for r in sheet.results] == ["s1", "s2", "s3", "s4", "s5"]
        assert sheet.results[0].student_name == "Harper Lane"

    def test_attempts(self, round_csv):
        sheet = self.parser.parse("3x3-round1.csv", round_csv)
        harper = sheet.results[0]
        assert harper.attempts == [12000, 11500, None, 13020, 12210]
        assert harper.dnfs == [False, False, True, False, False]

    def test_blank_attempts(self, round_csv):
        sheet = self.parser.parse("3x3-round1.csv", round_csv)
        ivy = sheet.results[4]
        assert ivy.attempts == [9800, None, None, None, None]
        assert ivy.dnfs == [False] * 5

    def test_groups(self, round_csv):
        sheet = self.parser.parse("3x3-round1.csv", round_csv)
        assert sheet.groups == {"s1": "A", "s2": "A", "s3": "B", "s4": "B"}

    def test_without_title_or_ids(self):
        content = b"Name,1,2,3\nAlice,1.00,2.00,3.00\nBob,DNF,4.00,5.00\n"
        sheet = self.parser.parse("r.csv", content)
        assert sheet.event_name == "Unknown Event"
        assert [r.student_id for r in sheet.results] == ["1", "2"]
        assert sheet.results[1].dnfs == [True, False, False]

    def test_attempt_columns_ordered_by_number(self):
        content = b"Name,Attempt 2,Attempt 1\nAlice,2.00,1.00\n"
        sheet = self.parser.parse("r.csv", content)
        assert sheet.results[0].attempts == [1000, 2000]

    def test_bad_time(self):
        content = b"Name,1,2\nAlice,1.00,fast\n"
        with pytest.raises(ValueError, match="Row 1 \\(Alice\\)"):
            self.parser.parse("r.csv", content)

    def test_no_header(self):
        with pytest.raises(ValueError, match="header row"):
            self.parser.parse("r.csv", b"just,some,values\n")

    def test_no_competitors(self):
        with pytest.raises(ValueError, match="No competitors"):
            self.parser.parse("r.csv", b"Name,1,2,3\n")
