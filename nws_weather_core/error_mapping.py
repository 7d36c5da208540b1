"""Map weather client errors onto caller-facing failures."""

from __future__ import annotations

from .errors import (
    TransportFailure,
    UnknownOperationError,
    UnsupportedResourceError,
    UpstreamError,
    ValidationFailure,
    WeatherClientError,
)
from .models import Failure

_FETCH_LABELS = {
    "get_alerts": "alerts",
    "get_forecast": "forecast",
    "alerts_resource": "alerts",
}


def _detail(error: WeatherClientError) -> str | None:
    if isinstance(error, UpstreamError):
        if error.status is None:
            return error.detail
        return f"HTTP {error.status}: {error.detail}"
    if isinstance(error, TransportFailure):
        if error.status is None:
            return error.cause
        return f"HTTP {error.status}: {error.cause}"
    if isinstance(error, ValidationFailure):
        return "; ".join(f"{v.field}: {v.reason}" for v in error.violations)
    return None


def map_failure(error: WeatherClientError, operation: str | None = None) -> Failure:
    """Attach a category and a readable message to an error.

    Args:
        error: The error raised while handling the request.
        operation: Tool or resource operation being handled, used to name
            what was being fetched.

    Returns:
        Failure carrying the error's category, message and diagnostic detail.
    """
    if isinstance(error, ValidationFailure):
        message = f"Invalid parameters: {error}"
    elif operation in _FETCH_LABELS and not isinstance(
        error, (UnknownOperationError, UnsupportedResourceError)
    ):
        message = f"Error fetching {_FETCH_LABELS[operation]}: {error}"
    else:
        message = str(error)
    return Failure(category=error.category, message=message, detail=_detail(error))
