from .client import ProductsClient
from .errors import ApiError, ResponseParseError, TransportError
from .models import ApiResponse, ErrorKind, Failure, ProductIn

__all__ = [
    "ProductsClient",
    "ApiError",
    "TransportError",
    "ResponseParseError",
    "ApiResponse",
    "ErrorKind",
    "Failure",
    "ProductIn",
]
