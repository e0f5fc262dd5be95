"""Round formats: how a competitor's attempts become a best and an average."""

import re

from .base import RoundFormat


class UnknownFormatError(ValueError):
    """Raised when a format name doesn't match any registered format."""
    pass


# Format registry - formats register themselves when their module is imported
_formats: list[type[RoundFormat]] = []


def register_format(format_class: type[RoundFormat]) -> type[RoundFormat]:
    """Decorator to register a round format class."""
    _formats.append(format_class)
    return format_class


def get_all_formats() -> list[RoundFormat]:
    """Return instances of all registered formats."""
    return [format_class() for format_class in _formats]


def normalize_format_name(name: str) -> str:
    """Lowercase and strip everything but letters and digits."""
    return re.sub(r"[^a-z0-9]", "", name.lower())


def get_format(name: str | RoundFormat) -> RoundFormat:
    """Look up a format by name, e.g. "Average of 5", "average-of-5" or "ao5".

    Raises:
        UnknownFormatError: If no registered format matches
    """
    if isinstance(name, RoundFormat):
        return name

    wanted = normalize_format_name(name)
    for round_format in get_all_formats():
        if wanted == normalize_format_name(round_format.name) or wanted in round_format.ALIASES:
            return round_format

    known = ", ".join(f.name for f in get_all_formats())
    raise UnknownFormatError(f"Unknown round format: {name!r}. Known formats: {known}")


from . import average, best  # noqa: E402,F401
