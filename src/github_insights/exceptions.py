"""Exceptions for GitHub Insights.

Exception Hierarchy:
    GitHubInsightsError (base)
    ├── TransportError (request could not complete, or non-2xx status)
    │   └── NotFoundError (404 not found)
    └── DecodeError (payload does not match the expected shape)

Malformed individual timestamps are not errors: they are dropped during
aggregation. Non-success statuses met while paginating are not raised either;
see ResourceFetcher.
"""

from typing import Any

__all__ = [
    "GitHubInsightsError",
    "TransportError",
    "NotFoundError",
    "DecodeError",
]


class GitHubInsightsError(Exception):
    """Base exception for all GitHub Insights errors."""

    pass


class TransportError(GitHubInsightsError):
    """Raised when a request cannot complete or returns an error status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class NotFoundError(TransportError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: Any = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class DecodeError(GitHubInsightsError):
    """Raised when a response payload does not match the expected shape."""

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload
