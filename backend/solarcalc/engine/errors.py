"""
Estimator error types.

All derive from ValueError so the API layer maps them to 422 responses.
"""


class ConfigurationError(ValueError):
    """Panel configuration cannot produce a meaningful estimate."""


class InvalidMonthError(ConfigurationError):
    """Month name is not one of the twelve calendar months."""

    def __init__(self, month: str):
        self.month = month
        super().__init__(f"Unknown month: {month!r}")


class EmptySeriesError(ValueError):
    """Export was requested for a series with no points."""
