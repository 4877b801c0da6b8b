"""Domain exceptions."""


class MalformedInputError(ValueError):
    """Raised when a provider time series is missing or cannot be parsed."""


class ForecastFetchError(RuntimeError):
    """Raised when the forecast provider cannot be reached or returns an error."""
