"""
Current date provider.
Supplies today's civil date in UTC, with a swappable process-wide default.
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


def utc_today() -> date:
    """Today's calendar date in UTC."""
    return datetime.now(timezone.utc).date()


# Default clock used by AIRACCycle.current()
_DEFAULT_CLOCK: Clock = utc_today


def get_default_clock() -> Clock:
    """Get the clock used when no explicit clock is supplied."""
    return _DEFAULT_CLOCK


def set_default_clock(clock: Clock) -> None:
    """Set the default clock for current-cycle lookups."""
    global _DEFAULT_CLOCK
    if not callable(clock):
        raise TypeError(f"Clock must be callable, got {type(clock)}")
    logger.debug("Default clock set to %r", clock)
    _DEFAULT_CLOCK = clock


def reset_default_clock() -> None:
    """Restore the system UTC clock as default."""
    global _DEFAULT_CLOCK
    _DEFAULT_CLOCK = utc_today
