from __future__ import annotations

from dataclasses import dataclass


class BLCLIError(Exception):
    """Base error type for the blcli SDK."""


class ConfigError(BLCLIError):
    """Raised when configuration cannot be loaded or validated."""


class AuthError(BLCLIError):
    """Raised when no usable access token is configured."""


class RequestError(BLCLIError):
    """Raised when an HTTP request cannot be completed."""


class DisplayError(BLCLIError):
    """Raised when a resource cannot be rendered for output."""


@dataclass(slots=True)
class InvalidArgumentError(BLCLIError):
    """Raised before any network call when a caller-supplied argument is unusable."""

    argument: str
    reason: str

    def __str__(self) -> str:
        return f"{self.argument} is invalid because {self.reason}"


@dataclass(slots=True)
class PaginationExhaustedError(BLCLIError):
    """Raised when a list keeps reporting a next page past the page cap."""

    max_pages: int

    def __str__(self) -> str:
        return f"pagination did not terminate after {self.max_pages} pages"


@dataclass(slots=True)
class APIError(RequestError):
    """Represents a non-success BinaryLane API response."""

    status_code: int
    message: str
    body: str | None = None
    request_id: str | None = None

    def __str__(self) -> str:
        text = f"HTTP {self.status_code}: {self.message}"
        if self.request_id:
            text = f"{text} (request {self.request_id})"
        return text
