"""
IACR MCP Server
===============

MCP server wiring for the IACR ePrint tools.
"""

import logging
import sys
from typing import Any

import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .config import Settings
from .tools import TOOLS, ToolFailure, dispatch

settings = Settings()
logger = logging.getLogger("iacr-mcp-server")
server = Server(settings.APP_NAME)


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    """List available IACR tools."""
    return list(TOOLS)


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent | types.EmbeddedResource]:
    """Handle tool calls for IACR paper search, lookup and download."""
    outcome = await dispatch(name, arguments, settings)
    if isinstance(outcome, ToolFailure):
        raise McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=outcome.message))
    return outcome.content


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the protocol."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


async def main():
    """Run the server on stdio."""
    configure_logging(settings.LOG_LEVEL)
    async with stdio_server() as streams:
        logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} running on stdio")
        await server.run(
            streams[0],
            streams[1],
            InitializationOptions(
                server_name=settings.APP_NAME,
                server_version=settings.APP_VERSION,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )
