"""HTTP client for the National Weather Service API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import aiohttp
import yarl

from .config import GatewayConfig
from .errors import (
    LocationNotSupportedError,
    TransportFailure,
    UpstreamError,
)
from .models import Coordinate, ForecastPeriod, StateCode, WeatherAlert

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _UpstreamResponse:
    status: int
    payload: Any = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def lookup(self, *keys: str) -> Any:
        """Walk nested mappings in the payload, returning None on any miss."""
        value = self.payload
        for key in keys:
            if not isinstance(value, Mapping):
                return None
            value = value.get(key)
        return value


def _path_segment(value: str) -> str:
    # quote() leaves "." alone, and a bare "." or ".." segment would be
    # collapsed out of the path.
    return quote(value, safe="").replace(".", "%2E")


def _format_coordinate(value: float) -> str:
    # The points endpoint redirects anything finer than 4 decimal places.
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


async def _error_detail(resp: aiohttp.ClientResponse) -> str:
    """Extract the provider's diagnostic message from an error response."""
    try:
        payload = await resp.json(content_type=None)
    except ValueError:
        payload = None
    if isinstance(payload, Mapping):
        for key in ("detail", "title", "message"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return resp.reason or f"HTTP {resp.status}"


class NwsHttpClient:
    """HTTP client wrapper for the api.weather.gov endpoints.

    The client never retries and never re-validates its inputs: callers pass
    an uppercase StateCode or an in-range Coordinate.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: GatewayConfig | None = None,
    ) -> None:
        self._session = session
        self._config = config or GatewayConfig()

    @property
    def config(self) -> GatewayConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    async def _get(self, url: str | yarl.URL) -> _UpstreamResponse:
        """Issue one GET and decode the body.

        Raises:
            TimeoutError: If the request exceeds the configured timeout.
            aiohttp.ClientError: If the request cannot be completed.
            UpstreamError: If a success response carries an undecodable body.
        """
        _LOGGER.debug("GET %s", url)
        async with self._session.get(
            url,
            headers=self._config.headers,
            timeout=aiohttp.ClientTimeout(total=self._config.timeout_seconds),
        ) as resp:
            if not 200 <= resp.status < 300:
                detail = await _error_detail(resp)
                return _UpstreamResponse(resp.status, detail=detail)
            try:
                payload = await resp.json(content_type=None)
            except ValueError as err:
                raise UpstreamError(
                    resp.status, f"Invalid JSON response from {url}"
                ) from err
            return _UpstreamResponse(resp.status, payload=payload)

    async def fetch_alerts(self, state: StateCode) -> list[WeatherAlert]:
        """Fetch active alerts for a state.

        A 404 means the provider has no active alerts for the area and yields
        an empty list.

        Raises:
            TransportFailure: On timeout, network error, or any other
                non-success status.
            UpstreamError: If the response body is not valid JSON.
        """
        url = yarl.URL(
            self._url(f"/alerts/active/area/{_path_segment(state.value)}"),
            encoded=True,
        )
        try:
            resp = await self._get(url)
        except TimeoutError as err:
            raise TransportFailure("Alerts request timed out") from err
        except aiohttp.ClientError as err:
            raise TransportFailure(f"Alerts request failed: {err}") from err

        if resp.status == 404:
            _LOGGER.debug("[%s] No alerts resource, treating as empty", state)
            return []
        if not resp.ok:
            raise TransportFailure(
                f"Weather API error: {resp.detail}", status=resp.status
            )

        features = resp.lookup("features")
        if not isinstance(features, list):
            return []
        return [WeatherAlert.from_feature(feature) for feature in features]

    async def resolve_forecast_url(self, coordinate: Coordinate) -> str:
        """Resolve a coordinate to its gridpoint forecast URL.

        Raises:
            LocationNotSupportedError: If the provider returns 404.
            UpstreamError: On any other error status or a response without
                ``properties.forecast``.
            TransportFailure: On timeout or network error.
        """
        lat = _format_coordinate(coordinate.latitude)
        lon = _format_coordinate(coordinate.longitude)
        url = self._url(f"/points/{lat},{lon}")
        try:
            resp = await self._get(url)
        except TimeoutError as err:
            raise TransportFailure("Point lookup timed out") from err
        except aiohttp.ClientError as err:
            raise TransportFailure(f"Point lookup failed: {err}") from err

        if resp.status == 404:
            raise LocationNotSupportedError
        if not resp.ok:
            raise UpstreamError(resp.status, resp.detail)

        forecast_url = resp.lookup("properties", "forecast")
        if not isinstance(forecast_url, str) or not forecast_url:
            raise UpstreamError(
                resp.status, "Point response did not include a forecast URL"
            )
        return forecast_url

    async def fetch_forecast(
        self, coordinate: Coordinate, *, limit: int | None = None
    ) -> list[ForecastPeriod]:
        """Fetch forecast periods for a coordinate.

        Runs the point lookup first; the forecast request is only issued once
        the point lookup has succeeded. With ``limit``, only the first
        ``limit`` periods are parsed and returned.

        Raises:
            LocationNotSupportedError: If the point lookup returns 404.
            UpstreamError: On any other error status, or a malformed body.
            TransportFailure: On timeout or network error.
        """
        forecast_url = await self.resolve_forecast_url(coordinate)
        try:
            resp = await self._get(forecast_url)
        except TimeoutError as err:
            raise TransportFailure("Forecast request timed out") from err
        except aiohttp.ClientError as err:
            raise TransportFailure(f"Forecast request failed: {err}") from err

        if not resp.ok:
            raise UpstreamError(resp.status, resp.detail)

        periods = resp.lookup("properties", "periods")
        if periods is None:
            return []
        if not isinstance(periods, list):
            raise UpstreamError(resp.status, "Forecast periods were not a list")
        if limit is not None:
            periods = periods[:limit]
        return [
            ForecastPeriod.from_dict(period, index=index)
            for index, period in enumerate(periods)
        ]
