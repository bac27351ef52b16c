"""Tool definitions for the IACR MCP server."""

from .arguments import validate_arguments
from .details import details_tool, get_paper_details
from .dispatch import TOOLS, ToolFailure, ToolSuccess, dispatch
from .download import download_paper, download_tool
from .search import search_papers, search_tool

__all__ = [
    "TOOLS",
    "search_tool",
    "details_tool",
    "download_tool",
    "search_papers",
    "get_paper_details",
    "download_paper",
    "validate_arguments",
    "dispatch",
    "ToolSuccess",
    "ToolFailure",
]
