"""Gateway configuration for the National Weather Service API."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigLoadError

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-mcp/1.0.0"
GEOJSON_ACCEPT = "application/geo+json"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class GatewayConfig:
    """Read-only settings shared by every upstream request.

    Attributes:
        base_url: Provider base address, without trailing slash.
        user_agent: Identifying header the provider requires.
        accept: Accept header sent with every request.
        timeout_seconds: Total timeout applied to each HTTP call.
    """

    base_url: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    accept: str = GEOJSON_ACCEPT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": self.accept}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning an empty dict for an empty file."""
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    with path.open() as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping in {path}")
    return data


def load_config(path: Path | None = None) -> GatewayConfig:
    """Load gateway configuration.

    Args:
        path: Optional YAML file with any of ``base_url``, ``user_agent``,
            ``accept`` and ``timeout_seconds``. Unknown keys are ignored.

    Returns:
        GatewayConfig with defaults for anything the file omits.

    Raises:
        ConfigLoadError: If the file is missing or holds invalid values.
    """
    if path is None:
        return GatewayConfig()

    data = _load_yaml(path)
    try:
        return GatewayConfig(
            base_url=str(data.get("base_url", NWS_API_BASE)),
            user_agent=str(data.get("user_agent", USER_AGENT)),
            accept=str(data.get("accept", GEOJSON_ACCEPT)),
            timeout_seconds=float(data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
        )
    except (TypeError, ValueError) as err:
        raise ConfigLoadError(f"Invalid configuration in {path}: {err}") from err
