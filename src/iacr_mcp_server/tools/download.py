"""Download functionality for the IACR MCP server."""

import base64
import logging
from dataclasses import dataclass

import httpx
import mcp.types as types

from ..config import Settings
from ..errors import FetchError
from .arguments import DownloadPaperArgs

logger = logging.getLogger("iacr-mcp-server")

MIME_TYPES = {
    "pdf": "application/pdf",
    "txt": "text/plain",
}


@dataclass(frozen=True)
class PaperDownload:
    """A downloaded paper, base64-encoded."""

    filename: str
    data: str
    mime_type: str
    url: str


download_tool = types.Tool(
    name="download_paper",
    description="Download a paper in PDF or TXT format",
    inputSchema={
        "type": "object",
        "properties": {
            "paper_id": {
                "type": "string",
                "description": "The ePrint ID of the paper to download",
            },
            "format": {
                "type": "string",
                "enum": ["pdf", "txt"],
                "description": "Document format",
                "default": "pdf",
            },
        },
        "required": ["paper_id"],
    },
)


def get_document_url(paper_id: str, fmt: str, settings: Settings | None = None) -> str:
    """Build the document server URL for a paper in the given format."""
    settings = settings or Settings()
    return f"{settings.DOCUMENT_BASE_URL}{paper_id}.{fmt}"


async def download_paper(args: DownloadPaperArgs, settings: Settings | None = None) -> PaperDownload:
    """Fetch the raw document bytes.

    The paper ID is not checked against the feed; a bad ID surfaces as the
    document server's HTTP error.
    """
    url = get_document_url(args.paper_id, args.format, settings)
    logger.info(f"Downloading {url}")
    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
            resp = await client.get(url)
            resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"Request failed with status code {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise FetchError(str(e) or type(e).__name__) from e

    return PaperDownload(
        filename=f"{args.paper_id}.{args.format}",
        data=base64.b64encode(resp.content).decode("ascii"),
        mime_type=MIME_TYPES[args.format],
        url=url,
    )
