"""
ICAO AIRAC cycle value type.

Cycles are 28 days long and tile the calendar without gaps. Every boundary
is located by walking from a known cycle start (ANCHOR_DATE) in whole
cycle lengths.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from airac.cycle.constants import ANCHOR_DATE, CYCLE_DAYS, CYCLE_LENGTH
from airac.cycle.errors import CycleAlignmentError
from airac.utils.clock import Clock, get_default_clock
from airac.utils.date import DateLike, to_date, two_digit_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class AIRACCycle:
    """A single AIRAC cycle, effective on [start, start + 28 days)."""

    start: date

    def __post_init__(self) -> None:
        start = to_date(self.start)
        object.__setattr__(self, "start", start)
        if (start - ANCHOR_DATE).days % CYCLE_DAYS != 0:
            raise CycleAlignmentError(
                f"{start} is not an AIRAC cycle start (anchor {ANCHOR_DATE})"
            )

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> AIRACCycle:
        """Return the cycle effective on the given day."""
        target = date(year, month, day)
        cursor = ANCHOR_DATE
        steps = 0
        if target < ANCHOR_DATE:
            # Move backward in time
            while cursor > target:
                cursor -= CYCLE_LENGTH
                steps -= 1
        else:
            # Move forward in time
            while cursor + CYCLE_LENGTH <= target:
                cursor += CYCLE_LENGTH
                steps += 1
        logger.debug("Located %s in cycle starting %s (%s steps from anchor)", target, cursor, steps)
        return cls(cursor)

    @classmethod
    def containing(cls, date_like: DateLike) -> AIRACCycle:
        """Return the cycle effective on a date, datetime or date string."""
        dt = to_date(date_like)
        return cls.from_ymd(dt.year, dt.month, dt.day)

    @classmethod
    def current(cls, clock: Optional[Clock] = None) -> AIRACCycle:
        """Return the cycle effective today (UTC)."""
        if clock is None:
            clock = get_default_clock()
        today = to_date(clock())
        return cls.from_ymd(today.year, today.month, today.day)

    def previous(self) -> AIRACCycle:
        return AIRACCycle(self.start - CYCLE_LENGTH)

    def next(self) -> AIRACCycle:
        return AIRACCycle(self.start + CYCLE_LENGTH)

    def starts(self) -> date:
        """The date this cycle became effective."""
        return self.start

    def ends(self) -> date:
        """
        The date this cycle became ineffective.

        The cycle stops being effective as this day begins, so this is the
        next cycle's start rather than the last effective day.
        """
        return self.start + CYCLE_LENGTH

    def contains(self, date_like: DateLike) -> bool:
        dt = to_date(date_like)
        return self.starts() <= dt < self.ends()

    @property
    def sequence(self) -> int:
        """1-based position among the cycles starting in the same year."""
        count = 0
        cycle = self.previous()
        while cycle.start.year == self.start.year:
            count += 1
            cycle = cycle.previous()
        return count + 1

    def display(self) -> str:
        """Canonical YYSS identifier, e.g. '2205'."""
        return f"{two_digit_year(self.start)}{self.sequence:02d}"

    def __str__(self) -> str:
        return self.display()


def cycles(start: DateLike, stop: DateLike) -> List[AIRACCycle]:
    """
    Consecutive cycles from the one containing ``start`` through the one
    containing ``stop`` (inclusive). Empty when stop precedes start.
    """
    first = AIRACCycle.containing(start)
    last = AIRACCycle.containing(stop)
    result: List[AIRACCycle] = []
    cycle = first
    while cycle <= last:
        result.append(cycle)
        cycle = cycle.next()
    return result
