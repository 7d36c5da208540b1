"""Argument validation for weather tool invocations.

Validation is pure: it never performs I/O, and it collects every violation
before raising so a single failure reports all input errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ValidationFailure, Violation
from .models import Coordinate, GetAlerts, GetForecast, StateCode

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _as_mapping(arguments: Any) -> Mapping[str, Any]:
    if arguments is None:
        return {}
    if not isinstance(arguments, Mapping):
        raise ValidationFailure(
            (Violation("arguments", "Arguments must be an object"),)
        )
    return arguments


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_range(
    name: str, value: Any, bounds: tuple[float, float], violations: list[Violation]
) -> None:
    low, high = bounds
    if value is None:
        violations.append(Violation(name, f"{name} is required"))
    elif not _is_number(value):
        violations.append(Violation(name, f"{name} must be a number"))
    elif not low <= value <= high:
        violations.append(
            Violation(name, f"{name} must be between {low:g} and {high:g}")
        )


def validate_alerts_arguments(arguments: Any) -> GetAlerts:
    """Validate get_alerts arguments.

    Args:
        arguments: Raw tool arguments, expected to contain ``state``.

    Returns:
        GetAlerts with the state normalized to uppercase.

    Raises:
        ValidationFailure: If ``state`` is missing, not a string, or not
            exactly 2 characters long.
    """
    state = _as_mapping(arguments).get("state")
    # Some characters change length when uppercased (e.g. "ß" -> "SS").
    if not isinstance(state, str) or len(state) != 2 or len(state.upper()) != 2:
        raise ValidationFailure(
            (Violation("state", "State code must be a 2-letter US state code"),)
        )
    return GetAlerts(state=StateCode.normalize(state))


def validate_forecast_arguments(arguments: Any) -> GetForecast:
    """Validate get_forecast arguments.

    Args:
        arguments: Raw tool arguments with ``latitude`` and ``longitude``.

    Returns:
        GetForecast carrying an in-range Coordinate.

    Raises:
        ValidationFailure: Listing every violated field.
    """
    data = _as_mapping(arguments)
    latitude = data.get("latitude")
    longitude = data.get("longitude")

    violations: list[Violation] = []
    _check_range("latitude", latitude, LATITUDE_RANGE, violations)
    _check_range("longitude", longitude, LONGITUDE_RANGE, violations)
    if violations:
        raise ValidationFailure(tuple(violations))

    return GetForecast(coordinate=Coordinate(latitude=latitude, longitude=longitude))
