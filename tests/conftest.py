"""Shared fixtures for EarningsFeed tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from earningsfeed import ClientConfig, EarningsFeed

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BASE_URL = "https://api.test"


def load_fixture(name: str) -> dict[str, Any]:
    """Load a JSON fixture from tests/fixtures."""
    with open(FIXTURES_DIR / f"{name}.json") as f:
        return json.load(f)


def page(items: list[dict], next_cursor: str | None = None, has_more: bool = False) -> dict:
    """Build a list-endpoint response body."""
    return {"items": items, "nextCursor": next_cursor, "hasMore": has_more}


@pytest.fixture
def filing_data():
    return load_fixture("filing")


@pytest.fixture
def filing_detail_data():
    return load_fixture("filing_detail")


@pytest.fixture
def insider_data():
    return load_fixture("insider_transaction")


@pytest.fixture
def holding_data():
    return load_fixture("institutional_holding")


@pytest.fixture
def company_data():
    return load_fixture("company")


@pytest.fixture
def search_result_data():
    return load_fixture("company_search_result")


@pytest.fixture
async def client():
    """Create an EarningsFeed client pointed at the mocked base URL."""
    config = ClientConfig(api_key="test_key", base_url=BASE_URL)
    async with EarningsFeed(config=config) as c:
        yield c
