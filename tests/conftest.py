"""Pytest configuration and fixtures for nws_weather_core tests."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """Create a mock gateway with empty results by default."""
    gateway = AsyncMock()
    gateway.fetch_alerts.return_value = []
    gateway.fetch_forecast.return_value = []
    return gateway


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception raised from json() call instead

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status
    response.reason = HTTPStatus(status).phrase

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


def alert_feature(**properties: Any) -> dict[str, Any]:
    """Build a GeoJSON alert feature."""
    return {"type": "Feature", "properties": properties}


def forecast_period(number: int, **overrides: Any) -> dict[str, Any]:
    """Build a provider forecast period."""
    period: dict[str, Any] = {
        "number": number,
        "name": f"Period {number}",
        "temperature": 60 + number,
        "temperatureUnit": "F",
        "windSpeed": f"{number} mph",
        "windDirection": "NW",
        "detailedForecast": f"Forecast text {number}.",
    }
    period.update(overrides)
    return period
