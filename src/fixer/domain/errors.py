# src/fixer/domain/errors.py
"""
Domain Errors - Rates API Error Taxonomy

This module defines the closed set of errors the rates API client derives
from HTTP status codes, and the classification of a response into one of them.

Files that USE this module:
- fixer.adapters.providers.fixer (Client raises classified errors)
- fixer.app (reports API errors to the user)
- tests.test_errors (unit tests)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""
from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any, Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ErrorKind(Enum):
    """Kinds of API errors, one per status classification outcome."""
    NIL_RESPONSE = "Unexpected nil response"
    UNEXPECTED_STATUS = "Unexpected status"
    NOT_FOUND = HTTPStatus.NOT_FOUND.phrase
    UNPROCESSABLE_ENTITY = HTTPStatus.UNPROCESSABLE_ENTITY.phrase


class APIError(DomainError):
    """
    Error returned for a rates API request.

    Attributes:
        kind: ErrorKind of this error, None for ad-hoc errors
        status_code: HTTP status code of the response, if there was one
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        if message is None:
            message = self.kind.value if self.kind is not None else ""
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class NilResponseError(APIError):
    """Raised when the transport produced no response at all."""
    kind = ErrorKind.NIL_RESPONSE


class UnexpectedStatusError(APIError):
    """Raised for any status other than 200, 404 and 422."""
    kind = ErrorKind.UNEXPECTED_STATUS


class NotFoundError(APIError):
    """Raised when the API answers 404 Not Found."""
    kind = ErrorKind.NOT_FOUND


class UnprocessableEntityError(APIError):
    """Raised when the API answers 422, e.g. for dates before 1999."""
    kind = ErrorKind.UNPROCESSABLE_ENTITY


def new_error(message: str) -> APIError:
    """Create an APIError carrying message."""
    return APIError(message)


def response_error(response: Any) -> Optional[APIError]:
    """
    Classify a response purely by its HTTP status code.

    Args:
        response: requests.Response (or any object with status_code), or None

    Returns:
        None for 200 OK, otherwise the APIError matching the status
    """
    if response is None:
        return NilResponseError()

    status = getattr(response, "status_code", None) or 0
    if status == HTTPStatus.OK:
        return None
    if status == HTTPStatus.NOT_FOUND:
        return NotFoundError(status_code=status)
    if status == HTTPStatus.UNPROCESSABLE_ENTITY:
        return UnprocessableEntityError(status_code=status)
    return UnexpectedStatusError(status_code=status)
