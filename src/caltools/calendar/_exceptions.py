class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError, ValueError):
    """A value could not be interpreted as a point in time."""
