"""Abstract base class for round formats."""

from abc import ABC, abstractmethod
from typing import Sequence


class RoundFormat(ABC):
    """Abstract base class for round formats.

    A format fixes how many attempts each competitor gets and how those
    attempts turn into a best single and an average. Formats are registered
    via the @register_format decorator in cuberank/formats/__init__.py.
    """

    # Alternative spellings accepted by get_format(), already normalised
    ALIASES: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this format, e.g. "Average of 5"."""
        pass

    @property
    @abstractmethod
    def attempt_count(self) -> int:
        """Fixed number of attempts per competitor."""
        pass

    @abstractmethod
    def best(self, attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
        """Best single for one competitor, or None if there is none."""
        pass

    @abstractmethod
    def average(self, attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
        """Average for one competitor, or None if the format defines none."""
        pass
