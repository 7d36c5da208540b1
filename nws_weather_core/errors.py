"""Error types for NWS weather lookups and request dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(Enum):
    """Closed set of failure categories surfaced to callers."""

    UNKNOWN_OPERATION = "unknown-operation"
    UNSUPPORTED_RESOURCE = "unsupported-resource"
    VALIDATION_FAILURE = "validation-failure"
    LOCATION_NOT_SUPPORTED = "location-not-supported"
    UPSTREAM_ERROR = "upstream-error"
    TRANSPORT_FAILURE = "transport-failure"


class WeatherClientError(Exception):
    """Base error for weather client failures."""

    category: ErrorCategory


class UnknownOperationError(WeatherClientError):
    """Tool name is not one of the supported operations."""

    category = ErrorCategory.UNKNOWN_OPERATION

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnsupportedResourceError(WeatherClientError):
    """Resource URI does not match any readable resource."""

    category = ErrorCategory.UNSUPPORTED_RESOURCE

    def __init__(self, uri: str) -> None:
        super().__init__(f"Unsupported URI: {uri}")
        self.uri = uri


@dataclass(frozen=True)
class Violation:
    """A single rejected request argument."""

    field: str
    reason: str


class ValidationFailure(WeatherClientError):
    """One or more request arguments were rejected."""

    category = ErrorCategory.VALIDATION_FAILURE

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        super().__init__(", ".join(v.reason for v in violations))
        self.violations = violations

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(v.field for v in self.violations)


class LocationNotSupportedError(WeatherClientError):
    """The provider has no forecast grid for the requested point."""

    category = ErrorCategory.LOCATION_NOT_SUPPORTED

    def __init__(self, message: str = "Location not found or not supported") -> None:
        super().__init__(message)


class UpstreamError(WeatherClientError):
    """The provider answered with an error status or a malformed body."""

    category = ErrorCategory.UPSTREAM_ERROR

    def __init__(self, status: int | None, detail: str) -> None:
        super().__init__(f"API error: {detail}")
        self.status = status
        self.detail = detail


class TransportFailure(WeatherClientError):
    """The request to the provider could not be completed."""

    category = ErrorCategory.TRANSPORT_FAILURE

    def __init__(self, cause: str, *, status: int | None = None) -> None:
        super().__init__(cause)
        self.cause = cause
        self.status = status


class ConfigLoadError(Exception):
    """Gateway configuration could not be loaded."""
