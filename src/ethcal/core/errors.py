class EthcalError(Exception):
    """Base error."""

class ConfigurationError(EthcalError, ValueError):
    """Raised for invalid constructor or settings arguments."""

class InvalidDateError(EthcalError, ValueError):
    """Raised when an Ethiopian or Hijri date label does not exist."""

class HolidayLookupError(EthcalError):
    """Raised when a holiday or fasting table cannot be evaluated."""
