"""Static descriptors for the resources and tools this server exposes."""

from __future__ import annotations

from typing import Any

from .dispatcher import GET_ALERTS, GET_FORECAST
from .models import RESOURCE_MIME_TYPE
from .validation import LATITUDE_RANGE, LONGITUDE_RANGE

RESOURCES: tuple[dict[str, Any], ...] = (
    {
        "uri": "weather://example/current",
        "name": "Current weather example",
        "mimeType": RESOURCE_MIME_TYPE,
        "description": "Example resource for demonstration purposes",
    },
)

RESOURCE_TEMPLATES: tuple[dict[str, Any], ...] = (
    {
        "uriTemplate": "weather://{state}/alerts",
        "name": "Weather alerts for a US state",
        "mimeType": RESOURCE_MIME_TYPE,
        "description": "Current weather alerts for a specified US state",
    },
)

TOOLS: tuple[dict[str, Any], ...] = (
    {
        "name": GET_ALERTS,
        "description": "Get weather alerts for a US state",
        "inputSchema": {
            "type": "object",
            "properties": {
                "state": {
                    "type": "string",
                    "description": "Two-letter US state code (e.g. CA, NY)",
                },
            },
            "required": ["state"],
        },
    },
    {
        "name": GET_FORECAST,
        "description": "Get weather forecast for a location",
        "inputSchema": {
            "type": "object",
            "properties": {
                "latitude": {
                    "type": "number",
                    "description": "Latitude of the location",
                    "minimum": LATITUDE_RANGE[0],
                    "maximum": LATITUDE_RANGE[1],
                },
                "longitude": {
                    "type": "number",
                    "description": "Longitude of the location",
                    "minimum": LONGITUDE_RANGE[0],
                    "maximum": LONGITUDE_RANGE[1],
                },
            },
            "required": ["latitude", "longitude"],
        },
    },
)
