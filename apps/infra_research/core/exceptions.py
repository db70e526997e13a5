from __future__ import annotations

from typing import Any

RAW_SNIPPET_LIMIT = 500


def error_payload(exc: "InfraApiError") -> dict[str, Any]:
    """Render an API error as a flat diagnostic dict (for logs or UI layers)."""

    payload: dict[str, Any] = {
        "error": exc.message,
        "code": exc.code,
        "type": exc.__class__.__name__,
    }
    if exc.status_code is not None:
        payload["status_code"] = exc.status_code
    if exc.details is not None:
        payload["details"] = exc.details
    return payload


class InfraApiError(Exception):
    """Base exception for the infra research API client.

    `str(exc)` is always the human-readable message, so callers can present
    it directly. Structured context lives on `code`, `status_code` and
    `details`.
    """

    status_code: int | None = None
    default_code: str | None = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        self.message = message
        self.code = code if code is not None else self.default_code
        self.status_code = status_code if status_code is not None else self.status_code
        self.details = details
        super().__init__(message)


class NetworkError(InfraApiError):
    """Raised when the transport fails before any response is received."""

    default_code = "network_error"

    def __init__(self, message: str, *, target: str, **kwargs: Any) -> None:
        self.target = target
        super().__init__(message or "Network request failed", **kwargs)


class RouteNotFoundError(InfraApiError):
    """Raised when a candidate host answers 404 for the requested path."""

    status_code = 404
    default_code = "route_not_found"

    def __init__(self, target: str, **kwargs: Any) -> None:
        self.target = target
        super().__init__(f"Route not found on {target}", **kwargs)


class ApplicationError(InfraApiError):
    """Raised when the server answers a non-404 failure status with JSON."""

    default_code = "application_error"


class ResponseDecodeError(InfraApiError):
    """Raised when a response body is not JSON or not the expected shape."""

    default_code = "invalid_response"


class RequestFailedError(InfraApiError):
    """Raised when no candidate target was attempted at all."""

    default_code = "request_failed"


def raw_snippet(text: str, limit: int = RAW_SNIPPET_LIMIT) -> str:
    return text if len(text) <= limit else text[:limit]


__all__ = [
    "ApplicationError",
    "InfraApiError",
    "NetworkError",
    "RequestFailedError",
    "ResponseDecodeError",
    "RouteNotFoundError",
    "error_payload",
    "raw_snippet",
]
