"""Render alerts and forecast periods as readable text."""

from __future__ import annotations

import json
from collections.abc import Sequence

from .models import ForecastPeriod, WeatherAlert

BLOCK_SEPARATOR = "\n\n---\n\n"
MAX_FORECAST_PERIODS = 5

NO_ALERTS_TEXT = "No active weather alerts found for this area."
NO_FORECAST_TEXT = "No forecast data available for this location."

UNKNOWN = "Unknown"
NO_DESCRIPTION = "No description available"
NO_INSTRUCTIONS = "No specific instructions provided"


def _format_alert(alert: WeatherAlert) -> str:
    return "\n".join(
        (
            f"Event: {alert.event or UNKNOWN}",
            f"Area: {alert.area_description or UNKNOWN}",
            f"Severity: {alert.severity or UNKNOWN}",
            f"Description: {alert.description or NO_DESCRIPTION}",
            f"Instructions: {alert.instruction or NO_INSTRUCTIONS}",
        )
    )


def _format_temperature(value: float) -> str:
    # Provider temperatures are integral; avoid rendering 72.0 as "72.0".
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_period(period: ForecastPeriod) -> str:
    temperature = _format_temperature(period.temperature)
    return "\n".join(
        (
            f"{period.name}:",
            f"Temperature: {temperature}°{period.temperature_unit}",
            f"Wind: {period.wind_speed} {period.wind_direction}",
            f"Forecast: {period.detailed_forecast}",
        )
    )


def format_alerts(alerts: Sequence[WeatherAlert]) -> str:
    """Format alerts into text blocks, preserving provider order."""
    if not alerts:
        return NO_ALERTS_TEXT
    return BLOCK_SEPARATOR.join(_format_alert(alert) for alert in alerts)


def format_forecast(periods: Sequence[ForecastPeriod]) -> str:
    """Format the first five forecast periods into text blocks.

    Later periods are dropped to bound the response size.
    """
    if not periods:
        return NO_FORECAST_TEXT
    return BLOCK_SEPARATOR.join(
        _format_period(period) for period in periods[:MAX_FORECAST_PERIODS]
    )


def format_alerts_json(alerts: Sequence[WeatherAlert]) -> str:
    """Serialize alerts for the alerts resource as provider features."""
    return json.dumps(
        [alert.to_feature() for alert in alerts], indent=2, ensure_ascii=False
    )
