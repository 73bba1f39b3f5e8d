class LichTaError(Exception):
    """Base error."""

class MonthIndexOverflowError(LichTaError, OverflowError):
    """Raised when a lunation count does not fit a 32-bit signed integer."""

class InvalidLunarDateError(LichTaError, ValueError):
    """Raised when a lunar (year, month, day, leap) label does not exist."""
