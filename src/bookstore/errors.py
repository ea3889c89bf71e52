"""
Error types surfaced to GraphQL clients
"""

from typing import Any

BAD_USER_INPUT = "BAD_USER_INPUT"


class BookstoreError(Exception):
    """Base class for errors raised by the book store.

    ``extensions`` is picked up by graphql-core when the error is raised from a
    resolver and ends up in the response's ``errors[].extensions``.
    """

    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class NotFoundError(BookstoreError):
    """Raised when no record matches the requested ID."""

    code = BAD_USER_INPUT

    def __init__(self, message: str = "Failed to find record with given ID") -> None:
        super().__init__(message)


class InvalidInputError(BookstoreError):
    """Raised when a filter, patch or new record is malformed."""

    code = BAD_USER_INPUT
