"""Weather alerts and forecasts from the National Weather Service."""

__version__ = "1.0.0"

from .config import GatewayConfig, load_config
from .dispatcher import WeatherDispatcher
from .errors import (
    ConfigLoadError,
    ErrorCategory,
    LocationNotSupportedError,
    TransportFailure,
    UnknownOperationError,
    UnsupportedResourceError,
    UpstreamError,
    ValidationFailure,
    Violation,
    WeatherClientError,
)
from .http import NwsHttpClient
from .models import (
    Coordinate,
    ForecastPeriod,
    Outcome,
    ResourceRead,
    StateCode,
    ToolInvocation,
    WeatherAlert,
)

__all__ = [
    "ConfigLoadError",
    "Coordinate",
    "ErrorCategory",
    "ForecastPeriod",
    "GatewayConfig",
    "LocationNotSupportedError",
    "NwsHttpClient",
    "Outcome",
    "ResourceRead",
    "StateCode",
    "ToolInvocation",
    "TransportFailure",
    "UnknownOperationError",
    "UnsupportedResourceError",
    "UpstreamError",
    "ValidationFailure",
    "Violation",
    "WeatherAlert",
    "WeatherClientError",
    "WeatherDispatcher",
    "__version__",
    "load_config",
]
