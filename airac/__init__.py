"""ICAO AIRAC cycle calculations.

This package locates the 28-day AIRAC cycle containing a calendar date,
steps between adjacent cycles and renders the YYSS cycle identifier.

Key modules:
- cycle: the AIRACCycle value type and its constants
- utils: date coercion and the current date provider
- cli: command line entry point
"""

from .cycle import (
    ANCHOR_DATE,
    CYCLE_DAYS,
    CYCLE_LENGTH,
    AIRACCycle,
    CycleAlignmentError,
    cycles,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AIRACCycle",
    "cycles",
    "CycleAlignmentError",
    "ANCHOR_DATE",
    "CYCLE_DAYS",
    "CYCLE_LENGTH",
]
