"""Tests for cursor pagination."""

import pytest
from pytest_httpx import HTTPXMock

from conftest import BASE_URL, page
from earningsfeed import (
    APIError,
    ListFilingsParams,
    ListInsiderParams,
    ListInstitutionalParams,
    PaginatedResponse,
    Paginator,
    RateLimitError,
    SearchCompaniesParams,
)


class FakeEndpoint:
    """In-memory list endpoint that records the params of each call."""

    def __init__(self, pages):
        self._pages = list(pages)
        self.calls = []

    async def __call__(self, params):
        self.calls.append(params)
        result = self._pages.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class TestPaginator:
    """Test Paginator against an in-memory endpoint."""

    async def test_follows_cursor_until_has_more_false(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1, 2], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[3], next_cursor="c3", has_more=True),
                PaginatedResponse[int](items=[4, 5], next_cursor=None, has_more=False),
            ]
        )
        paginator = Paginator(endpoint, ListFilingsParams(ticker="AAPL"))

        items = [item async for item in paginator]

        assert items == [1, 2, 3, 4, 5]
        assert [p.cursor for p in endpoint.calls] == [None, "c2", "c3"]
        assert all(p.ticker == "AAPL" for p in endpoint.calls)
        assert paginator.last_cursor == "c3"
        assert paginator.pages_fetched == 3

    async def test_cursor_ignored_when_has_more_false(self):
        endpoint = FakeEndpoint(
            [PaginatedResponse[int](items=[1], next_cursor="dangling", has_more=False)]
        )

        items = [item async for item in Paginator(endpoint, ListFilingsParams())]

        assert items == [1]
        assert len(endpoint.calls) == 1

    async def test_has_more_without_cursor_stops(self):
        """Test that a missing cursor ends iteration without an error."""
        endpoint = FakeEndpoint(
            [PaginatedResponse[int](items=[1, 2], next_cursor=None, has_more=True)]
        )

        items = [item async for item in Paginator(endpoint, ListFilingsParams())]

        assert items == [1, 2]
        assert len(endpoint.calls) == 1

    async def test_empty_string_cursor_followed(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1], next_cursor="", has_more=True),
                PaginatedResponse[int](items=[2], has_more=False),
            ]
        )

        items = [item async for item in Paginator(endpoint, ListFilingsParams())]

        assert items == [1, 2]
        assert [p.cursor for p in endpoint.calls] == [None, ""]

    async def test_empty_first_page(self):
        endpoint = FakeEndpoint([PaginatedResponse[int](items=[], has_more=False)])

        items = [item async for item in Paginator(endpoint, ListFilingsParams())]

        assert items == []
        assert len(endpoint.calls) == 1

    async def test_error_ends_iteration_after_earlier_items(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1, 2], next_cursor="c2", has_more=True),
                RateLimitError(reset_at=1703520000),
            ]
        )
        received = []

        with pytest.raises(RateLimitError):
            async for item in Paginator(endpoint, ListFilingsParams()):
                received.append(item)

        assert received == [1, 2]
        assert len(endpoint.calls) == 2

    async def test_items_emitted_before_next_page_requested(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1, 2], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[3], has_more=False),
            ]
        )
        calls_seen = []

        async for _ in Paginator(endpoint, ListFilingsParams()):
            calls_seen.append(len(endpoint.calls))

        assert calls_seen == [1, 1, 2]

    async def test_early_break_stops_fetching(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1, 2], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[3], has_more=False),
            ]
        )

        async for item in Paginator(endpoint, ListFilingsParams()):
            if item == 1:
                break

        assert len(endpoint.calls) == 1

    async def test_starting_params_not_mutated(self):
        params = ListFilingsParams(ticker="AAPL")
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[2], has_more=False),
            ]
        )

        [item async for item in Paginator(endpoint, params)]

        assert params.cursor is None

    async def test_restart_from_starting_params(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[2], has_more=False),
                PaginatedResponse[int](items=[1], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[2], has_more=False),
            ]
        )
        paginator = Paginator(endpoint, ListFilingsParams())

        first = [item async for item in paginator]
        second = [item async for item in paginator]

        assert first == second == [1, 2]
        assert [p.cursor for p in endpoint.calls] == [None, "c2", None, "c2"]

    async def test_pages(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[2], has_more=False),
            ]
        )

        pages = [p async for p in Paginator(endpoint, ListFilingsParams()).pages()]

        assert [p.items for p in pages] == [[1], [2]]

    async def test_collect_with_limit(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1, 2], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[3, 4], has_more=False),
            ]
        )

        items = await Paginator(endpoint, ListFilingsParams()).collect(limit=2)

        assert items == [1, 2]
        assert len(endpoint.calls) == 1

    async def test_collect_all(self):
        endpoint = FakeEndpoint(
            [
                PaginatedResponse[int](items=[1, 2], next_cursor="c2", has_more=True),
                PaginatedResponse[int](items=[3, 4], has_more=False),
            ]
        )

        assert await Paginator(endpoint, ListFilingsParams()).collect() == [1, 2, 3, 4]


class TestResourceIteration:
    """Test iter() on resources over mocked HTTP."""

    async def test_two_page_filings(self, client, httpx_mock: HTTPXMock, filing_data):
        second = {**filing_data, "accessionNumber": "0000320193-24-000081", "formType": "10-Q"}
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/filings",
            json=page([filing_data], next_cursor="cursor_page_2", has_more=True),
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/filings?cursor=cursor_page_2",
            json=page([second], next_cursor=None, has_more=False),
        )

        filings = [f async for f in client.filings.iter()]

        assert [f.accession_number for f in filings] == [
            "0000320193-24-000123",
            "0000320193-24-000081",
        ]
        requests = httpx_mock.get_requests()
        assert len(requests) == 2
        assert "cursor" not in requests[0].url.params
        assert requests[1].url.params["cursor"] == "cursor_page_2"

    async def test_single_page_no_second_request(self, client, httpx_mock: HTTPXMock, insider_data):
        httpx_mock.add_response(json=page([insider_data], has_more=False))

        txns = [t async for t in client.insider.iter(ListInsiderParams(ticker="AAPL"))]

        assert len(txns) == 1
        assert len(httpx_mock.get_requests()) == 1

    async def test_filters_kept_across_pages(self, client, httpx_mock: HTTPXMock, holding_data):
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/institutional/holdings?ticker=AAPL",
            json=page([holding_data], next_cursor="n2", has_more=True),
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/institutional/holdings?ticker=AAPL&cursor=n2",
            json=page([holding_data], has_more=False),
        )

        holdings = await client.institutional.iter(ListInstitutionalParams(ticker="AAPL")).collect()

        assert len(holdings) == 2

    async def test_search_iteration(self, client, httpx_mock: HTTPXMock, search_result_data):
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/companies/search?q=Apple",
            json=page([search_result_data], has_more=True),
        )

        results = [r async for r in client.companies.iter_search(SearchCompaniesParams(q="Apple"))]

        assert [r.cik for r in results] == [320193]
        assert len(httpx_mock.get_requests()) == 1

    async def test_http_error_mid_stream(self, client, httpx_mock: HTTPXMock, filing_data):
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/filings",
            json=page([filing_data], next_cursor="c2", has_more=True),
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/filings?cursor=c2",
            status_code=500,
            json={"error": "Internal server error", "code": "INTERNAL_ERROR"},
        )
        received = []

        with pytest.raises(APIError) as exc_info:
            async for filing in client.filings.iter():
                received.append(filing)

        assert len(received) == 1
        assert exc_info.value.code == "INTERNAL_ERROR"
