# products_sdk/errors.py
from .models import ErrorKind


class ApiError(Exception):
    """Raised by the request helper when an exchange cannot produce a response."""

    kind: ErrorKind = ErrorKind.TRANSPORT


class TransportError(ApiError):
    kind = ErrorKind.TRANSPORT


class ResponseParseError(ApiError):
    kind = ErrorKind.PARSE

    def __init__(self, message: str = "Failed to parse response"):
        super().__init__(message)
