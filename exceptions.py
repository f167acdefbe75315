"""
Exceptions raised by the analysis functions.

Callers catch ``AnalysisError`` at the rendering seam and decide on a fallback display.
"""


class AnalysisError(ValueError):
    """Base class for analysis failures caused by the shape of the input series."""

    pass


class EmptySeriesError(AnalysisError):
    """Raised when an operation needs at least one sample and the series has none."""

    pass


class InsufficientDataError(AnalysisError):
    """Raised when the trend needs two samples and the series has fewer."""

    pass
