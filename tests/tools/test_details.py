"""Tests for paper detail lookup."""

import httpx
import pytest

from iacr_mcp_server.errors import FetchError, NotFoundError
from iacr_mcp_server.tools.arguments import GetPaperDetailsArgs
from iacr_mcp_server.tools.details import get_paper_details

from ..conftest import make_client


@pytest.mark.asyncio
async def test_details_found(mock_feed):
    details = await get_paper_details(GetPaperDetailsArgs(paper_id="123"))

    assert details == {
        "id": "123",
        "title": "Zero Knowledge Proofs",
        "authors": "A. Author",
        "abstract": "about ZK",
        "link": "https://eprint.iacr.org/2024/123",
        "date": "Jan 2024",
    }


@pytest.mark.asyncio
async def test_details_keeps_raw_date(mock_feed, recent_year):
    details = await get_paper_details(GetPaperDetailsArgs(paper_id="456"))
    assert details["date"] == f"Tue, 02 Jan {recent_year} 10:00:00 +0000"


@pytest.mark.asyncio
async def test_details_missing_author_is_unknown(mock_feed):
    details = await get_paper_details(GetPaperDetailsArgs(paper_id="789"))
    assert details["authors"] == "Unknown"


@pytest.mark.asyncio
async def test_details_not_found(mock_feed):
    with pytest.raises(NotFoundError, match="Paper not found"):
        await get_paper_details(GetPaperDetailsArgs(paper_id="999"))


@pytest.mark.asyncio
async def test_details_fetch_failure_propagates(mocker):
    mocker.patch(
        "iacr_mcp_server.feed.httpx.AsyncClient",
        return_value=make_client(side_effect=httpx.ConnectError("Connection refused")),
    )

    with pytest.raises(FetchError, match="Connection refused"):
        await get_paper_details(GetPaperDetailsArgs(paper_id="123"))
