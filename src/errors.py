"""
Error types for the article service.

Each error carries the HTTP status code the API layer answers with, so
handlers can convert any of them into a JSON error body in one place.
"""
from typing import Optional


class ArticleServiceError(Exception):
    """Base class for all article service errors."""

    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        """
        Initialize the error.

        Args:
            message: Human readable message returned to the caller
            detail: Optional lower-level error text (e.g. a parser message)
        """
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict:
        """Build the JSON error body."""
        body = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


class ValidationError(ArticleServiceError):
    """Missing or empty required field, or malformed body/id."""

    status_code = 400


class NotFoundError(ArticleServiceError):
    """Referenced article id does not exist."""

    status_code = 404


class MethodNotAllowedError(ArticleServiceError):
    """Known path, unsupported method."""

    status_code = 405


class RouteNotFoundError(ArticleServiceError):
    """Unknown path."""

    status_code = 404


class PersistenceError(ArticleServiceError):
    """Backing storage is unreadable, unwritable or holds invalid data."""

    status_code = 500
