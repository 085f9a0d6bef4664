"""
Domain error taxonomy for the products API.

Every error the application layer raises is a ``ProductServiceError`` tagged
with an ``ErrorKind``. The boundary middleware turns it into an API Gateway
response through ``ERROR_DICTIONARY``, a fixed kind -> (status, code) table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from product_service.handlers.utils.responses import create_api_response
from product_service.models.output import ErrorOutput

UNKNOWN_ERROR_CODE = 'internal_server_error'
UNKNOWN_ERROR_MESSAGE = 'unknown error'


class ErrorKind(str, Enum):
    """Closed set of domain error kinds."""

    VALIDATION_ERROR = 'ValidationError'
    EXISTING_ITEM_ERROR = 'ExistingItemError'
    NOT_FOUND_ERROR = 'NotFoundError'
    SYSTEM_ERROR = 'SystemError'


@dataclass(frozen=True)
class ErrorMapping:
    """HTTP status and response code for an error kind."""

    status: int
    code: str


ERROR_DICTIONARY: Dict[ErrorKind, ErrorMapping] = {
    ErrorKind.VALIDATION_ERROR: ErrorMapping(status=400, code='validation_error'),
    ErrorKind.EXISTING_ITEM_ERROR: ErrorMapping(status=400, code='database_error'),
    ErrorKind.NOT_FOUND_ERROR: ErrorMapping(status=404, code='not_found'),
    ErrorKind.SYSTEM_ERROR: ErrorMapping(status=500, code='internal_server_error'),
}


class ProductServiceError(Exception):
    """Base class for errors raised by the products application layer."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProductServiceError):
    """Raised when a path parameter or the request body is missing or invalid."""

    kind = ErrorKind.VALIDATION_ERROR


class ExistingItemError(ProductServiceError):
    """Raised when creating a product whose id is already stored."""

    kind = ErrorKind.EXISTING_ITEM_ERROR


class NotFoundError(ProductServiceError):
    """Raised when the product targeted by get, update or delete does not exist."""

    kind = ErrorKind.NOT_FOUND_ERROR


class SystemFailureError(ProductServiceError):
    """Raised when the backend failed and the request cannot be completed."""

    kind = ErrorKind.SYSTEM_ERROR


def error_to_response(error: ProductServiceError) -> Dict[str, Any]:
    """Map a domain error to its API Gateway response."""
    mapping = ERROR_DICTIONARY[error.kind]
    body = ErrorOutput(code=mapping.code, message=error.message)
    return create_api_response(status_code=mapping.status, body=body.model_dump_json())


def unknown_error_response() -> Dict[str, Any]:
    """Response for any failure outside the domain taxonomy."""
    return create_api_response(
        status_code=500,
        body=ErrorOutput(code=UNKNOWN_ERROR_CODE, message=UNKNOWN_ERROR_MESSAGE).model_dump_json(),
    )
