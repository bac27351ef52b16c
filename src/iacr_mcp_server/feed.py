"""Client for the IACR ePrint recent-papers RSS feed."""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from email.utils import parsedate_to_datetime

import httpx

from .config import Settings
from .errors import FetchError

logger = logging.getLogger("iacr-mcp-server")

DC_CREATOR = "{http://purl.org/dc/elements/1.1/}creator"
UNKNOWN_AUTHOR = "Unknown"

FEED_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "application/xml,text/xml,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

_YEAR_RE = re.compile(r"\b(\d{4})\b")


@dataclass(frozen=True)
class PaperRecord:
    """One paper entry taken from the feed."""

    id: str
    title: str
    authors: str
    link: str
    abstract: str
    pub_date: str

    @property
    def year(self) -> int | None:
        return parse_year(self.pub_date)


def parse_year(pub_date: str) -> int | None:
    """Extract the publication year from a feed date.

    RSS dates are RFC 822 (``Mon, 15 Jan 2024 10:00:00 +0000``); anything else
    falls back to the first four-digit number in the string.
    """
    try:
        return parsedate_to_datetime(pub_date).year
    except (TypeError, ValueError):
        pass
    match = _YEAR_RE.search(pub_date or "")
    return int(match.group(1)) if match else None


def paper_id_from_link(link: str) -> str:
    """ePrint links end in ``/<year>/<number>``; the id is the last segment."""
    return link.rsplit("/", 1)[-1]


def parse_feed(xml_text: str | bytes) -> list[PaperRecord]:
    """Parse an RSS document into paper records, preserving feed order.

    Raises FetchError if the body is not well-formed XML. A document without a
    channel or without items is not an error and yields an empty list.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise FetchError(f"Malformed feed XML: {e}") from e

    channel = root.find("channel")
    items = channel.findall("item") if channel is not None else []
    if not items:
        logger.warning("No items found in RSS feed")
        return []

    papers = []
    for item in items:
        link = item.findtext("link", default="")
        papers.append(
            PaperRecord(
                id=paper_id_from_link(link),
                title=item.findtext("title", default=""),
                authors=item.findtext(DC_CREATOR, default=UNKNOWN_AUTHOR),
                link=link,
                abstract=item.findtext("description", default=""),
                pub_date=item.findtext("pubDate", default=""),
            )
        )
    return papers


async def fetch_papers(settings: Settings | None = None) -> list[PaperRecord]:
    """Fetch the feed and return every paper in it.

    Nothing is cached; each call issues a fresh request.
    """
    settings = settings or Settings()
    try:
        async with httpx.AsyncClient(
            headers=FEED_HEADERS,
            timeout=settings.FEED_TIMEOUT,
            follow_redirects=True,
        ) as client:
            response = await client.get(settings.FEED_URL)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"Feed request failed with HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise FetchError(f"Feed request failed: {e}") from e

    papers = parse_feed(response.content)
    logger.info(f"Fetched {len(papers)} papers from {settings.FEED_URL}")
    return papers
