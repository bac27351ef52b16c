"""Shared fixtures for the IACR MCP server tests."""

import re
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from iacr_mcp_server.config import Settings

FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Cryptology ePrint Archive</title>
    <link>https://eprint.iacr.org</link>
    {items}
  </channel>
</rss>
"""


def make_item(paper_id, title, description, pub_date, creator=None, year=None):
    year = year or re.search(r"\d{4}", pub_date).group()
    creator_xml = f"<dc:creator>{creator}</dc:creator>" if creator is not None else ""
    return f"""<item>
      <link>https://eprint.iacr.org/{year}/{paper_id}</link>
      <title>{title}</title>
      {creator_xml}
      <description>{description}</description>
      <pubDate>{pub_date}</pubDate>
    </item>"""


def make_feed(*items):
    return FEED_TEMPLATE.format(items="\n".join(items))


def make_client(response=None, side_effect=None):
    """An AsyncMock standing in for httpx.AsyncClient used as a context manager."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=response, side_effect=side_effect)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


def make_response(content, status_code=200):
    response = MagicMock()
    response.content = content.encode("utf-8") if isinstance(content, str) else content
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}", request=MagicMock(), response=response
        )
    else:
        response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def recent_year():
    """A year inside the always-admitted recent window."""
    return datetime.now().year - 3


@pytest.fixture
def sample_feed(recent_year):
    return make_feed(
        make_item(
            "123",
            "Zero Knowledge Proofs",
            "about ZK",
            "Jan 2024",
            creator="A. Author",
        ),
        make_item(
            "456",
            "Lattice Signatures",
            "Post-quantum signatures from lattices, with zero knowledge arguments",
            f"Tue, 02 Jan {recent_year} 10:00:00 +0000",
            creator="B. Builder",
        ),
        make_item(
            "789",
            "Old Hash Functions",
            "A survey of MD5 collisions",
            "Mon, 03 Jan 2000 10:00:00 +0000",
        ),
    )


@pytest.fixture
def mock_feed(mocker, sample_feed):
    """Patch the feed client so fetch_papers returns ``sample_feed``."""
    client = make_client(make_response(sample_feed))
    mocker.patch("iacr_mcp_server.feed.httpx.AsyncClient", return_value=client)
    return client
