"""MCP server wiring for the weather dispatcher."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import aiohttp
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from . import __version__
from .catalog import RESOURCE_TEMPLATES, RESOURCES, TOOLS
from .config import GatewayConfig
from .dispatcher import WeatherDispatcher
from .errors import ErrorCategory
from .http import NwsHttpClient
from .models import RESOURCE_MIME_TYPE

_LOGGER = logging.getLogger(__name__)

SERVER_NAME = "weather-server"


class ToolCallFailed(Exception):
    """Raised to make the MCP layer return a tool result flagged as an error."""


def _resource_error(category: ErrorCategory | None, message: str) -> McpError:
    code = (
        types.INVALID_REQUEST
        if category is ErrorCategory.UNSUPPORTED_RESOURCE
        else types.INTERNAL_ERROR
    )
    return McpError(types.ErrorData(code=code, message=message))


def create_server(dispatcher: WeatherDispatcher) -> Server:
    """Register resource and tool handlers that delegate to the dispatcher."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [types.Resource(**resource) for resource in RESOURCES]

    @server.list_resource_templates()
    async def list_resource_templates() -> list[types.ResourceTemplate]:
        return [types.ResourceTemplate(**template) for template in RESOURCE_TEMPLATES]

    @server.read_resource()
    async def read_resource(uri: Any) -> Iterable[ReadResourceContents]:
        outcome = await dispatcher.read_resource(str(uri))
        if outcome.failure is not None:
            raise _resource_error(outcome.failure.category, outcome.text)
        return [
            ReadResourceContents(content=outcome.text, mime_type=RESOURCE_MIME_TYPE)
        ]

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [types.Tool(**tool) for tool in TOOLS]

    # Arguments are validated by the dispatcher, which reports every violation.
    @server.call_tool(validate_input=False)
    async def call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        outcome = await dispatcher.call_tool(name, arguments)
        if outcome.is_error:
            raise ToolCallFailed(outcome.text)
        return [types.TextContent(type="text", text=outcome.text)]

    return server


async def run(config: GatewayConfig | None = None) -> None:
    """Serve the weather tools over stdio until the client disconnects."""
    async with aiohttp.ClientSession() as session:
        dispatcher = WeatherDispatcher(NwsHttpClient(session, config))
        server = create_server(dispatcher)
        async with stdio_server() as (read_stream, write_stream):
            _LOGGER.info("Weather MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
