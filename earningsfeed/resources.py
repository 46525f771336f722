"""Per-domain resource accessors.

Each resource is a stateless view over an EarningsFeed client that binds
fixed paths to typed parameters and responses.
"""

from typing import TYPE_CHECKING

from earningsfeed.models import (
    Company,
    CompanySearchResult,
    Filing,
    FilingDetail,
    InsiderTransaction,
    InstitutionalHolding,
    PaginatedResponse,
)
from earningsfeed.pagination import Paginator
from earningsfeed.params import (
    ListFilingsParams,
    ListInsiderParams,
    ListInstitutionalParams,
    SearchCompaniesParams,
)

if TYPE_CHECKING:
    from earningsfeed.client import EarningsFeed

FILINGS_PATH = "/api/v1/filings"
INSIDER_TRANSACTIONS_PATH = "/api/v1/insider/transactions"
INSTITUTIONAL_HOLDINGS_PATH = "/api/v1/institutional/holdings"
COMPANIES_PATH = "/api/v1/companies"
COMPANY_SEARCH_PATH = "/api/v1/companies/search"


class Resource:
    def __init__(self, client: "EarningsFeed") -> None:
        self._client = client


class FilingsResource(Resource):
    """SEC filings: list, detail and iteration."""

    async def list(self, params: ListFilingsParams | None = None) -> PaginatedResponse[Filing]:
        """
        List filings matching the filters.

        Returns one page; use iter() to walk every page.
        """
        return await self._client.get(
            FILINGS_PATH,
            params or ListFilingsParams(),
            response_type=PaginatedResponse[Filing],
        )

    async def get(self, accession_number: str) -> FilingDetail:
        """
        Get a filing with its documents and roles.

        Args:
            accession_number: SEC accession number, e.g. "0000950170-24-000001"
        """
        return await self._client.get(
            f"{FILINGS_PATH}/{accession_number}",
            response_type=FilingDetail,
        )

    def iter(self, params: ListFilingsParams | None = None) -> Paginator[Filing, ListFilingsParams]:
        return Paginator(self.list, params or ListFilingsParams())


class InsiderResource(Resource):
    """Insider transactions from Forms 3, 4 and 5."""

    async def list(
        self, params: ListInsiderParams | None = None
    ) -> PaginatedResponse[InsiderTransaction]:
        return await self._client.get(
            INSIDER_TRANSACTIONS_PATH,
            params or ListInsiderParams(),
            response_type=PaginatedResponse[InsiderTransaction],
        )

    def iter(
        self, params: ListInsiderParams | None = None
    ) -> Paginator[InsiderTransaction, ListInsiderParams]:
        return Paginator(self.list, params or ListInsiderParams())


class InstitutionalResource(Resource):
    """Institutional holdings from 13F filings."""

    async def list(
        self, params: ListInstitutionalParams | None = None
    ) -> PaginatedResponse[InstitutionalHolding]:
        return await self._client.get(
            INSTITUTIONAL_HOLDINGS_PATH,
            params or ListInstitutionalParams(),
            response_type=PaginatedResponse[InstitutionalHolding],
        )

    def iter(
        self, params: ListInstitutionalParams | None = None
    ) -> Paginator[InstitutionalHolding, ListInstitutionalParams]:
        return Paginator(self.list, params or ListInstitutionalParams())


class CompaniesResource(Resource):
    """Company profiles and search."""

    async def get(self, cik: int) -> Company:
        """Get the full profile of a company by CIK."""
        return await self._client.get(f"{COMPANIES_PATH}/{cik}", response_type=Company)

    async def search(
        self, params: SearchCompaniesParams | None = None
    ) -> PaginatedResponse[CompanySearchResult]:
        return await self._client.get(
            COMPANY_SEARCH_PATH,
            params or SearchCompaniesParams(),
            response_type=PaginatedResponse[CompanySearchResult],
        )

    def iter_search(
        self, params: SearchCompaniesParams | None = None
    ) -> Paginator[CompanySearchResult, SearchCompaniesParams]:
        return Paginator(self.search, params or SearchCompaniesParams())
