"""Results-sheet parsers for the file types rounds are recorded in."""

from .base import ResultsSheetParser

# Parser registry - parsers register themselves when their module is imported
_parsers: list[type[ResultsSheetParser]] = []


def register_parser(parser_class: type[ResultsSheetParser]) -> type[ResultsSheetParser]:
    """Decorator to register a parser class."""
    _parsers.append(parser_class)
    return parser_class


def get_all_parsers() -> list[type[ResultsSheetParser]]:
    """Return all registered parser classes."""
    return _parsers.copy()


def detect_parser(source: str) -> ResultsSheetParser | None:
    """Auto-detect and return an appropriate parser instance for the given source."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse(source):
            return parser
    return None


def detect_parser_by_content(content: bytes, filename: str) -> ResultsSheetParser | None:
    """Return a parser instance that recognises the content, if any."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse_content(content, filename):
            return parser
    return None


def get_supported_file_types() -> str:
    """Return a user-friendly description of supported file types."""
    lines = ["We currently support results sheets in these formats:"]
    for parser_class in _parsers:
        description = getattr(parser_class, "DESCRIPTION", None)
        if description:
            lines.append(f"  - {description}")
    return "\n".join(lines)


from . import csv_sheet, html_sheet, pdf_sheet  # noqa: E402,F401
