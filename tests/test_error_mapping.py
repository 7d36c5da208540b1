"""Tests for mapping client errors to caller-facing failures."""

from __future__ import annotations

from nws_weather_core.error_mapping import map_failure
from nws_weather_core.errors import (
    ErrorCategory,
    LocationNotSupportedError,
    TransportFailure,
    UnknownOperationError,
    UnsupportedResourceError,
    UpstreamError,
    ValidationFailure,
    Violation,
)


class TestMapFailure:
    """Tests for map_failure."""

    def test_validation_failure(self) -> None:
        """Validation failures list every reason."""
        error = ValidationFailure(
            (
                Violation("latitude", "latitude must be between -90 and 90"),
                Violation("longitude", "longitude is required"),
            )
        )
        failure = map_failure(error, "get_forecast")

        assert failure.category is ErrorCategory.VALIDATION_FAILURE
        assert failure.message == (
            "Invalid parameters: latitude must be between -90 and 90, longitude is required"
        )
        assert failure.detail is not None
        assert "latitude:" in failure.detail

    def test_unknown_operation(self) -> None:
        """Unknown tools name the tool."""
        failure = map_failure(UnknownOperationError("get_weather_xyz"), "get_weather_xyz")
        assert failure.category is ErrorCategory.UNKNOWN_OPERATION
        assert failure.message == "Unknown tool: get_weather_xyz"

    def test_unsupported_resource(self) -> None:
        """Unsupported resources name the URI."""
        failure = map_failure(
            UnsupportedResourceError("weather://example/current"), "alerts_resource"
        )
        assert failure.category is ErrorCategory.UNSUPPORTED_RESOURCE
        assert failure.message == "Unsupported URI: weather://example/current"

    def test_location_not_supported(self) -> None:
        """Location failures are reported as a forecast error."""
        failure = map_failure(LocationNotSupportedError(), "get_forecast")
        assert failure.category is ErrorCategory.LOCATION_NOT_SUPPORTED
        assert failure.message == (
            "Error fetching forecast: Location not found or not supported"
        )

    def test_upstream_error_keeps_detail(self) -> None:
        """Upstream status and detail are preserved."""
        failure = map_failure(UpstreamError(500, "Unexpected problem"), "get_forecast")
        assert failure.category is ErrorCategory.UPSTREAM_ERROR
        assert failure.message == "Error fetching forecast: API error: Unexpected problem"
        assert failure.detail == "HTTP 500: Unexpected problem"

    def test_transport_failure(self) -> None:
        """Transport failures are reported against alerts."""
        failure = map_failure(TransportFailure("Alerts request timed out"), "get_alerts")
        assert failure.category is ErrorCategory.TRANSPORT_FAILURE
        assert failure.message == "Error fetching alerts: Alerts request timed out"
        assert failure.detail == "Alerts request timed out"

    def test_transport_failure_with_status(self) -> None:
        """A status on a transport failure is kept in the detail."""
        failure = map_failure(
            TransportFailure("Weather API error: busy", status=503), "alerts_resource"
        )
        assert failure.detail == "HTTP 503: Weather API error: busy"
        assert failure.message.startswith("Error fetching alerts:")
