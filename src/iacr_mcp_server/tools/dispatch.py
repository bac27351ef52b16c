"""Routing of tool calls to their handlers.

``dispatch`` never raises: it returns either a ``ToolSuccess`` holding the
MCP content blocks or a ``ToolFailure`` holding the error, and the server
turns the latter into a protocol error.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import mcp.types as types

from ..config import Settings
from ..errors import IACRServerError, UnknownToolError
from .arguments import validate_arguments
from .details import details_tool, get_paper_details
from .download import PaperDownload, download_paper, download_tool
from .search import search_papers, search_tool

logger = logging.getLogger("iacr-mcp-server")

Content = types.TextContent | types.EmbeddedResource

TOOLS = [search_tool, details_tool, download_tool]

HANDLERS = {
    "search_papers": search_papers,
    "get_paper_details": get_paper_details,
    "download_paper": download_paper,
}

FAILURE_PREFIXES = {
    "search_papers": "Search failed",
    "get_paper_details": "Paper details retrieval failed",
    "download_paper": "Paper download failed",
}


@dataclass(frozen=True)
class ToolSuccess:
    content: list[Content]


@dataclass(frozen=True)
class ToolFailure:
    error: Exception
    message: str


DispatchOutcome = ToolSuccess | ToolFailure


def to_content(result: Any) -> list[Content]:
    """Wrap a handler result in a single MCP content block."""
    if isinstance(result, PaperDownload):
        return [
            types.EmbeddedResource(
                type="resource",
                resource=types.BlobResourceContents(
                    uri=f"file:///{result.filename}",
                    mimeType=result.mime_type,
                    blob=result.data,
                ),
            )
        ]
    return [types.TextContent(type="text", text=json.dumps(result, indent=2))]


async def dispatch(name: str, arguments: dict[str, Any] | None, settings: Settings | None = None) -> DispatchOutcome:
    """Validate and run one tool call."""
    logger.debug(f"Calling tool {name} with arguments {arguments}")
    handler = HANDLERS.get(name)
    if handler is None:
        error = UnknownToolError(name)
        logger.error(str(error))
        return ToolFailure(error=error, message=str(error))

    try:
        args = validate_arguments(name, arguments)
    except IACRServerError as e:
        logger.error(f"Rejected {name} call: {e}")
        return ToolFailure(error=e, message=str(e))

    try:
        result = await handler(args, settings)
    except Exception as e:
        message = f"{FAILURE_PREFIXES[name]}: {str(e) or type(e).__name__}"
        logger.error(message)
        return ToolFailure(error=e, message=message)

    return ToolSuccess(content=to_content(result))
