"""Average of 5, the standard speedcubing round format."""

from typing import Sequence

from cuberank.formats import register_format
from cuberank.formats.base import RoundFormat
from cuberank.times import calculate_best_time, calculate_wca_average


@register_format
class AverageOfFive(RoundFormat):
    """Average of 5.

    Each competitor gets 5 attempts. The best single is the fastest valid
    attempt. With all 5 attempts valid, the fastest and slowest are dropped
    and the middle 3 are averaged. With 3 or 4 valid attempts (a round that
    ended early) every valid attempt is averaged without trimming. Fewer
    than 3 valid attempts means no average.
    """

    ALIASES = ("ao5", "avg5", "a5")

    @property
    def name(self) -> str:
        return "Average of 5"

    @property
    def attempt_count(self) -> int:
        return 5

    def best(self, attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
        return calculate_best_time(attempts, dnfs)

    def average(self, attempts: Sequence[int | None], dnfs: Sequence[bool]) -> int | None:
        return calculate_wca_average(attempts, dnfs)
