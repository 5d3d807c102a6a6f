"""
Exceptions raised by the thread calculator.

All derive from ValueError so callers that already guard numeric parsing
with ``except ValueError`` keep working.
"""


class ThreadCalculationError(ValueError):
    """Base class for calculator failures."""
    pass


class InvalidInputError(ThreadCalculationError):
    """Raised for non-positive, non-finite or non-numeric sizes and pitches."""
    pass


class UnsupportedClassError(ThreadCalculationError):
    """Raised when a tolerance class (or gender) is not defined for a standard."""
    pass


class InvalidThreadError(ThreadCalculationError):
    """Raised when major and minor diameters leave no thread height."""
    pass
