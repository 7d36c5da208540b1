"""Value types for weather requests, upstream records and outcomes.

Every type here is immutable and lives for a single request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ErrorCategory, UpstreamError

RESOURCE_MIME_TYPE = "application/json"


def _optional_text(value: Any) -> str | None:
    """Return value when it is a non-empty string, otherwise None."""
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class WeatherAlert:
    """An active alert as reported by the provider.

    Attributes:
        event: Alert event name (e.g., "Flood Warning").
        area_description: Human-readable affected area.
        severity: Provider severity label.
        description: Full alert text.
        instruction: Recommended actions, when the provider supplies them.
        feature: The GeoJSON feature the alert was parsed from, kept for the
            JSON resource. Excluded from equality.
    """

    event: str | None = None
    area_description: str | None = None
    severity: str | None = None
    description: str | None = None
    instruction: str | None = None
    feature: Mapping[str, Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_feature(cls, feature: Any) -> WeatherAlert:
        """Build an alert from a GeoJSON feature, tolerating missing fields."""
        if not isinstance(feature, Mapping):
            return cls()
        props = feature.get("properties")
        if not isinstance(props, Mapping):
            return cls(feature=feature)
        return cls(
            event=_optional_text(props.get("event")),
            area_description=_optional_text(props.get("areaDesc")),
            severity=_optional_text(props.get("severity")),
            description=_optional_text(props.get("description")),
            instruction=_optional_text(props.get("instruction")),
            feature=feature,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the provider's property names, omitting absent fields."""
        result: dict[str, Any] = {}
        if self.event is not None:
            result["event"] = self.event
        if self.area_description is not None:
            result["areaDesc"] = self.area_description
        if self.severity is not None:
            result["severity"] = self.severity
        if self.description is not None:
            result["description"] = self.description
        if self.instruction is not None:
            result["instruction"] = self.instruction
        return result

    def to_feature(self) -> dict[str, Any]:
        """Return the provider feature, or a minimal one for built alerts."""
        if self.feature is not None:
            return dict(self.feature)
        return {"properties": self.to_dict()}


_PERIOD_TEXT_FIELDS = (
    ("name", "name"),
    ("temperatureUnit", "temperature_unit"),
    ("windSpeed", "wind_speed"),
    ("windDirection", "wind_direction"),
    ("detailedForecast", "detailed_forecast"),
)


@dataclass(frozen=True)
class ForecastPeriod:
    """A single forecast period (e.g., "Tonight", "Tuesday")."""

    name: str
    temperature: float
    temperature_unit: str
    wind_speed: str
    wind_direction: str
    detailed_forecast: str

    @classmethod
    def from_dict(cls, data: Any, *, index: int = 0) -> ForecastPeriod:
        """Build a period from the provider payload.

        Raises:
            UpstreamError: If any required field is missing or ill-typed.
        """
        if not isinstance(data, Mapping):
            raise UpstreamError(None, f"Forecast period {index} is not an object")

        missing: list[str] = []
        values: dict[str, Any] = {}
        for source, target in _PERIOD_TEXT_FIELDS:
            value = data.get(source)
            if not isinstance(value, str):
                missing.append(source)
            else:
                values[target] = value

        temperature = data.get("temperature")
        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            missing.append("temperature")

        if missing:
            raise UpstreamError(
                None,
                f"Forecast period {index} is missing required fields: "
                + ", ".join(sorted(missing)),
            )
        return cls(temperature=temperature, **values)


@dataclass(frozen=True)
class StateCode:
    """Two-letter US state code, always uppercase."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 2 or self.value != self.value.upper():
            raise ValueError(f"Invalid state code: {self.value!r}")

    @classmethod
    def normalize(cls, raw: str) -> StateCode:
        return cls(raw.upper())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude out of range: {self.longitude}")


# Inbound requests


@dataclass(frozen=True)
class ResourceRead:
    """Read of a URI-addressed resource."""

    uri: str


@dataclass(frozen=True)
class ToolInvocation:
    """Invocation of a named tool with an argument mapping."""

    name: str
    arguments: Mapping[str, Any] | None = None


Request = ResourceRead | ToolInvocation


# Resolved operations


@dataclass(frozen=True)
class GetAlerts:
    """Fetch active alerts for a state."""

    state: StateCode


@dataclass(frozen=True)
class GetForecast:
    """Fetch the short-range forecast for a point."""

    coordinate: Coordinate


Operation = GetAlerts | GetForecast


# Outcomes


@dataclass(frozen=True)
class Failure:
    """A categorized failure ready to be shown to the caller.

    Attributes:
        category: Stable category tag.
        message: Human-readable message.
        detail: Underlying diagnostic detail, when one exists.
    """

    category: ErrorCategory
    message: str
    detail: str | None = None


@dataclass(frozen=True)
class Outcome:
    """Result of one dispatched request: formatted text or a failure."""

    text: str
    failure: Failure | None = None

    @property
    def is_error(self) -> bool:
        return self.failure is not None

    @classmethod
    def success(cls, text: str) -> Outcome:
        return cls(text=text)

    @classmethod
    def from_failure(cls, failure: Failure) -> Outcome:
        return cls(text=failure.message, failure=failure)
