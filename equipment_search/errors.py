# equipment_search/errors.py


class APIError(Exception):
    """Error surfaced to the HTTP caller as ``{"error": message}``."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self):
        return {"error": self.message}


class QueryValidationError(APIError):
    """Malformed or insufficient query parameters; never retried."""

    def __init__(self, message, status_code=400):
        super().__init__(message, status_code)


class NotFoundError(APIError):
    def __init__(self, message="Equipment not found", status_code=404):
        super().__init__(message, status_code)


class AggregationFailure(APIError):
    """Failure outside any single source; details are only logged."""

    def __init__(self, message="Internal server error", status_code=500):
        super().__init__(message, status_code)


class SourceFailure(Exception):
    """Failure inside one retrieval strategy of one source.

    Raised by strategies and absorbed by the owning adapter, never seen by callers.
    """

    def __init__(self, source_id, message):
        super().__init__(f"[{source_id}] {message}")
