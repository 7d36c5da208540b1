"""Request dispatch for weather resources and tools.

The dispatcher resolves each inbound request to one operation, validates its
arguments, runs the upstream lookup and formats the result. Every failure is
returned as a failed Outcome rather than raised.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from .error_mapping import map_failure
from .errors import (
    UnknownOperationError,
    UnsupportedResourceError,
    WeatherClientError,
)
from .formatting import (
    MAX_FORECAST_PERIODS,
    format_alerts,
    format_alerts_json,
    format_forecast,
)
from .models import (
    Coordinate,
    ForecastPeriod,
    GetAlerts,
    Outcome,
    Request,
    ResourceRead,
    StateCode,
    ToolInvocation,
    WeatherAlert,
)
from .validation import validate_alerts_arguments, validate_forecast_arguments

_LOGGER = logging.getLogger(__name__)

ALERTS_RESOURCE_PATTERN = re.compile(r"weather://([A-Z]{2})/alerts", re.IGNORECASE)
ALERTS_RESOURCE = "alerts_resource"
GET_ALERTS = "get_alerts"
GET_FORECAST = "get_forecast"


class WeatherGateway(Protocol):
    async def fetch_alerts(self, state: StateCode) -> list[WeatherAlert]:
        """Fetch active alerts for a state."""

    async def fetch_forecast(
        self, coordinate: Coordinate, *, limit: int | None = None
    ) -> list[ForecastPeriod]:
        """Fetch up to ``limit`` forecast periods for a coordinate."""


def resolve_resource(uri: str) -> GetAlerts:
    """Resolve a resource URI to the alerts operation it addresses.

    Raises:
        UnsupportedResourceError: If the URI is not a state alerts resource.
    """
    match = ALERTS_RESOURCE_PATTERN.fullmatch(uri)
    if match is None:
        raise UnsupportedResourceError(uri)
    return GetAlerts(state=StateCode.normalize(match.group(1)))


class WeatherDispatcher:
    """Entry point for resource reads and tool invocations."""

    def __init__(self, gateway: WeatherGateway) -> None:
        self._gateway = gateway
        self._tools: dict[str, Callable[[Any], Awaitable[str]]] = {
            GET_ALERTS: self._get_alerts,
            GET_FORECAST: self._get_forecast,
        }

    @property
    def tool_names(self) -> tuple[str, ...]:
        return tuple(self._tools)

    async def handle(self, request: Request) -> Outcome:
        """Dispatch a parsed request."""
        if isinstance(request, ResourceRead):
            return await self.read_resource(request.uri)
        if isinstance(request, ToolInvocation):
            return await self.call_tool(request.name, request.arguments)
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    async def read_resource(self, uri: str) -> Outcome:
        """Read a ``weather://<state>/alerts`` resource as JSON text."""
        try:
            operation = resolve_resource(uri)
            alerts = await self._gateway.fetch_alerts(operation.state)
        except WeatherClientError as err:
            return self._fail(err, ALERTS_RESOURCE)
        return Outcome.success(format_alerts_json(alerts))

    async def call_tool(self, name: str, arguments: Any = None) -> Outcome:
        """Invoke a tool by name."""
        handler = self._tools.get(name)
        if handler is None:
            return self._fail(UnknownOperationError(name), name)
        try:
            text = await handler(arguments)
        except WeatherClientError as err:
            return self._fail(err, name)
        return Outcome.success(text)

    async def _get_alerts(self, arguments: Any) -> str:
        operation = validate_alerts_arguments(arguments)
        alerts = await self._gateway.fetch_alerts(operation.state)
        return format_alerts(alerts)

    async def _get_forecast(self, arguments: Any) -> str:
        operation = validate_forecast_arguments(arguments)
        periods = await self._gateway.fetch_forecast(
            operation.coordinate, limit=MAX_FORECAST_PERIODS
        )
        return format_forecast(periods)

    @staticmethod
    def _fail(error: WeatherClientError, operation: str) -> Outcome:
        failure = map_failure(error, operation)
        _LOGGER.warning(
            "[%s] %s: %s",
            operation,
            failure.category.value,
            failure.detail or failure.message,
        )
        return Outcome.from_failure(failure)
