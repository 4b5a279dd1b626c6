class TrackerError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Malformed or missing input."""
    status_code = 400


class NotFound(TrackerError):
    """The referenced match does not exist."""
    status_code = 404


class StorageError(TrackerError):
    """The underlying store failed."""
    status_code = 500
