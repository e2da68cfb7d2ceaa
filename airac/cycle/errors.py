"""Exceptions raised by the cycle engine."""


class CycleAlignmentError(ValueError):
    """Raised when a cycle start is not a whole number of cycles from the anchor."""
