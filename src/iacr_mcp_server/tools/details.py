"""Paper detail lookup for the IACR MCP server."""

from typing import Any

import mcp.types as types

from ..config import Settings
from ..errors import NotFoundError
from ..feed import fetch_papers
from .arguments import GetPaperDetailsArgs

details_tool = types.Tool(
    name="get_paper_details",
    description="Retrieve details of a specific paper by its ID",
    inputSchema={
        "type": "object",
        "properties": {
            "paper_id": {
                "type": "string",
                "description": "The paper ID, i.e. the last segment of its ePrint link",
            },
        },
        "required": ["paper_id"],
    },
)


async def get_paper_details(args: GetPaperDetailsArgs, settings: Settings | None = None) -> dict[str, Any]:
    """Look up one paper in the current feed by ID."""
    papers = await fetch_papers(settings)
    paper = next((p for p in papers if p.id == args.paper_id), None)
    if paper is None:
        raise NotFoundError("Paper not found")

    return {
        "id": paper.id,
        "title": paper.title,
        "authors": paper.authors,
        "abstract": paper.abstract,
        "link": paper.link,
        "date": paper.pub_date,
    }
