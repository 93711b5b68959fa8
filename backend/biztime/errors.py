import enum


class ErrorKind(enum.Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    STORE_ERROR = "STORE_ERROR"


class ServiceError(Exception):
    """Base for every failure a service reports. ``kind`` picks the HTTP status."""

    kind = ErrorKind.STORE_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ServiceError):
    """Raised for a malformed or missing required field."""

    kind = ErrorKind.INVALID_INPUT


class NotFound(ServiceError):
    """Raised when the referenced company or invoice does not exist."""

    kind = ErrorKind.NOT_FOUND


class Conflict(ServiceError):
    """Raised for uniqueness or referential-integrity violations."""

    kind = ErrorKind.CONFLICT


class StoreError(ServiceError):
    """Raised when the store is unreachable or a call times out."""

    kind = ErrorKind.STORE_ERROR
