"""Search functionality for the IACR MCP server."""

import logging
from datetime import datetime
from typing import Any

import mcp.types as types

from ..config import Settings
from ..feed import PaperRecord, fetch_papers
from .arguments import SearchPapersArgs

logger = logging.getLogger("iacr-mcp-server")

search_tool = types.Tool(
    name="search_papers",
    description="Search for papers in the IACR Cryptology ePrint Archive",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Text to look for in paper titles and abstracts (case-insensitive)",
            },
            "year": {
                "type": "integer",
                "description": "Publication year to include; papers from the last ten years are always included",
            },
            "category": {
                "type": "string",
                "description": "Paper category (currently not used for matching)",
            },
            "max_results": {
                "type": "integer",
                "description": "Maximum number of results to return",
                "default": 20,
            },
        },
        "required": ["query"],
    },
)


def matches_query(paper: PaperRecord, query: str) -> bool:
    query = query.lower()
    return query in paper.title.lower() or query in paper.abstract.lower()


def matches_year(paper: PaperRecord, year: int | None, current_year: int, recent_years: int) -> bool:
    """Year gate for search results.

    A paper passes when no year was requested, when it was published in the
    requested year, or when it was published within ``recent_years`` of
    ``current_year``. The last clause admits recent papers whatever year was
    asked for.
    """
    paper_year = paper.year
    if year is None:
        return True
    if paper_year is None:
        return False
    return paper_year == year or paper_year >= current_year - recent_years


def filter_papers(
    papers: list[PaperRecord],
    args: SearchPapersArgs,
    current_year: int,
    recent_years: int = 10,
) -> list[dict[str, Any]]:
    """Apply query and year gates, cap the count and project to result dicts."""
    results = []
    for paper in papers:
        if len(results) >= args.max_results:
            break
        if not matches_query(paper, args.query):
            continue
        if not matches_year(paper, args.year, current_year, recent_years):
            continue
        results.append(
            {
                "id": paper.id,
                "title": paper.title,
                "authors": paper.authors,
                "year": paper.year,
                "link": paper.link,
                "abstract": paper.abstract,
            }
        )
    return results


async def search_papers(args: SearchPapersArgs, settings: Settings | None = None) -> list[dict[str, Any]]:
    """Search the current feed for papers matching ``args``."""
    settings = settings or Settings()
    papers = await fetch_papers(settings)
    results = filter_papers(papers, args, datetime.now().year, settings.RECENT_YEARS)
    logger.info(f"Search for {args.query!r} matched {len(results)} of {len(papers)} papers")
    return results
