"""
Adapter error types.

Adapters report problems by returning these exceptions in an error list
rather than raising them, so one bad impression never aborts a batch.
"""


class AdapterError(Exception):
    """Base exception for bid adapter errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadInputError(AdapterError):
    """Raised when the bid request, or part of it, cannot be sent to the partner."""
    pass


class NoValidImpressionsError(BadInputError):
    """Raised when no impression in the request passed validation."""

    def __init__(self, message: str = "no impressions in the bid request"):
        super().__init__(message)


class BadServerResponseError(AdapterError):
    """Raised when the partner answers with an unexpected status or body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
