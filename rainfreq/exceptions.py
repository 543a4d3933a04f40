"""
Exceptions raised by the RainFreq analysis core.

All errors derive from ``ValueError`` so callers that already guard
analysis input with ``except ValueError`` keep working.
"""


class RainFreqError(ValueError):
    """Base class for RainFreq analysis errors."""


class EmptyInputError(RainFreqError):
    """The sample has no values where at least one is required."""


class UnsupportedDistributionError(RainFreqError):
    """An unrecognised distribution code or name reached the dispatch step."""


class InvalidConfidenceIndexError(RainFreqError):
    """A confidence-level index outside the supported range."""


class InvalidReturnPeriodError(RainFreqError):
    """A return period below one year, or not a finite number."""
