"""AIRAC cycle engine."""

from .constants import ANCHOR_DATE, CYCLE_DAYS, CYCLE_LENGTH
from .core import AIRACCycle, cycles
from .errors import CycleAlignmentError

__all__ = [
    "AIRACCycle",
    "cycles",
    "CycleAlignmentError",
    "ANCHOR_DATE",
    "CYCLE_DAYS",
    "CYCLE_LENGTH",
]
