"""Best-of-N formats: only the fastest single counts."""

from typing import Sequence

from cuberank.formats import register_format
from cuberank.formats.base import RoundFormat
from cuberank.times import calculate_best_time


class BestOfN(RoundFormat):
    """Shared behaviour for Best of N formats.

    The result is the fastest valid attempt. No average is defined, so
    competitors are ranked on their single alone and ties on the single
    fall through to attempts completed.
    """

    ATTEMPTS: int = 0

    @property
    def name(self) -> str:
        return f"Best of {self.ATTEMPTS}"

    @property
    def attempt_count(self) -> int:
        return self.ATTEMPTS

    def best(self, attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
        return calculate_best_time(attempts, dnfs)

    def average(self, attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
        return None


@register_format
class BestOfFive(BestOfN):
    ATTEMPTS = 5
    ALIASES = ("bo5", "b5")


@register_format
class BestOfThree(BestOfN):
    ATTEMPTS = 3
    ALIASES = ("bo3", "b3")
