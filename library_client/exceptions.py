"""Domain-specific exceptions."""

from __future__ import annotations

import httpx

# Network failures are raised by httpx unchanged; exported for convenience.
TransportError = httpx.TransportError


class LibraryClientError(Exception):
    pass


class ConfigError(LibraryClientError):
    """Raised when a client cannot be built from the supplied configuration."""


class ValidationError(LibraryClientError):
    """Raised before any request is made when search arguments are rejected."""


class ValueRequiredError(ValidationError):
    def __init__(self, message: str = "search query ('value') must be specified") -> None:
        super().__init__(message)


class BadRequestError(ValidationError):
    pass


class RequestError(LibraryClientError):
    """Raised when an outbound request cannot be constructed."""


class DecodeError(LibraryClientError):
    pass


class ResponseError(LibraryClientError):
    """Raised when the service answers with an unexpected HTTP status."""

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        *,
        code: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        detail = f": {message}" if message else ""
        super().__init__(f"request did not succeed ({status_code}){detail}")


class UnauthorizedError(ResponseError):
    pass


class NotFoundError(ResponseError):
    pass


__all__ = [
    "BadRequestError",
    "ConfigError",
    "DecodeError",
    "LibraryClientError",
    "NotFoundError",
    "RequestError",
    "ResponseError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "ValueRequiredError",
]
