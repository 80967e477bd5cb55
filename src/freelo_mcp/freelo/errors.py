"""Freelo API exception hierarchy."""

from __future__ import annotations

from typing import Any


class FreeloAPIError(Exception):
    """Raised when the Freelo API answers with an HTTP error status.

    Carries the uniform error shape: the HTTP status text, a best-effort
    message extracted from the response body and the status code.
    """

    def __init__(
        self,
        message: str = "Unknown error",
        status_code: int | None = None,
        error: str = "",
    ):
        self.message = message
        self.status_code = status_code
        self.error = error
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"Freelo API error {self.status_code} ({self.error or 'Error'}): {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message, "status_code": self.status_code}


class FreeloValidationError(FreeloAPIError):
    """Raised when the request payload is invalid (400, 422)."""


class FreeloAuthenticationError(FreeloAPIError):
    """Raised when authentication fails (401). Check FREELO_EMAIL and FREELO_API_KEY."""


class FreeloPermissionError(FreeloAPIError):
    """Raised when the user lacks permissions (403)."""


class FreeloNotFoundError(FreeloAPIError):
    """Raised when a resource is not found (404)."""


class FreeloRateLimitError(FreeloAPIError):
    """Raised when the server rejects the request as over quota (429)."""


class UnexpectedResponseError(ValueError):
    """Raised when a response body does not have the expected shape."""
