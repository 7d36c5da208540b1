"""Tests for the static resource and tool descriptors."""

from __future__ import annotations

from unittest.mock import AsyncMock

import mcp.types as types

from nws_weather_core import WeatherDispatcher
from nws_weather_core.catalog import RESOURCE_TEMPLATES, RESOURCES, TOOLS
from nws_weather_core.dispatcher import resolve_resource
from nws_weather_core.server import create_server


class TestCatalog:
    """Tests for catalog contents."""

    def test_tool_names_match_dispatcher(self, mock_gateway: AsyncMock) -> None:
        """Every listed tool is dispatchable."""
        dispatcher = WeatherDispatcher(mock_gateway)
        assert tuple(tool["name"] for tool in TOOLS) == dispatcher.tool_names

    def test_forecast_schema_ranges(self) -> None:
        """The forecast schema advertises the coordinate ranges."""
        forecast = next(tool for tool in TOOLS if tool["name"] == "get_forecast")
        properties = forecast["inputSchema"]["properties"]
        assert properties["latitude"]["minimum"] == -90
        assert properties["latitude"]["maximum"] == 90
        assert properties["longitude"]["minimum"] == -180
        assert properties["longitude"]["maximum"] == 180
        assert forecast["inputSchema"]["required"] == ["latitude", "longitude"]

    def test_alerts_template_resolves(self) -> None:
        """The alerts template expands to a readable URI."""
        template = RESOURCE_TEMPLATES[0]["uriTemplate"]
        assert resolve_resource(template.replace("{state}", "tx")).state.value == "TX"

    def test_descriptors_are_valid_mcp_types(self) -> None:
        """Descriptors construct MCP protocol types."""
        assert all(types.Tool(**tool) for tool in TOOLS)
        assert all(types.Resource(**resource) for resource in RESOURCES)
        assert all(types.ResourceTemplate(**t) for t in RESOURCE_TEMPLATES)


class TestCreateServer:
    """Tests for MCP handler registration."""

    def test_handlers_registered(self, mock_gateway: AsyncMock) -> None:
        """Resource and tool requests have handlers."""
        server = create_server(WeatherDispatcher(mock_gateway))
        for request_type in (
            types.ListResourcesRequest,
            types.ListResourceTemplatesRequest,
            types.ReadResourceRequest,
            types.ListToolsRequest,
            types.CallToolRequest,
        ):
            assert request_type in server.request_handlers
