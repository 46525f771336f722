"""EarningsFeed - async client for SEC filings, insider trades and 13F holdings.

Example:
    async with EarningsFeed("your_api_key") as client:
        params = ListFilingsParams(ticker="AAPL", forms=["10-K", "10-Q"], limit=10)
        async for filing in client.filings.iter(params):
            print(filing.form_type, filing.title)
"""

__version__ = "0.1.0"

from earningsfeed.client import EarningsFeed
from earningsfeed.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    ClientConfigBuilder,
)
from earningsfeed.errors import (
    APIError,
    AuthenticationError,
    ConfigError,
    EarningsFeedError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    ValidationError,
)
from earningsfeed.models import (
    AcquiredDisposed,
    Address,
    Company,
    CompanySearchResult,
    DirectIndirect,
    EntityClass,
    Filing,
    FilingCompany,
    FilingDetail,
    FilingDocument,
    FilingRole,
    InsiderTransaction,
    InstitutionalHolding,
    InvestmentDiscretion,
    PaginatedResponse,
    PutCall,
    SharesType,
    SicCode,
    Ticker,
)
from earningsfeed.pagination import Paginator
from earningsfeed.params import (
    FilingStatus,
    ListFilingsParams,
    ListInsiderParams,
    ListInstitutionalParams,
    PutCallFilter,
    SearchCompaniesParams,
    TransactionDirection,
)

__all__ = [
    # Client
    "EarningsFeed",
    "ClientConfig",
    "ClientConfigBuilder",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "Paginator",
    # Errors
    "EarningsFeedError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "APIError",
    "TransportError",
    "RequestTimeoutError",
    "SerializationError",
    "ConfigError",
    # Models
    "PaginatedResponse",
    "EntityClass",
    "Filing",
    "FilingCompany",
    "FilingDetail",
    "FilingDocument",
    "FilingRole",
    "AcquiredDisposed",
    "DirectIndirect",
    "InsiderTransaction",
    "InstitutionalHolding",
    "InvestmentDiscretion",
    "PutCall",
    "SharesType",
    "Address",
    "Company",
    "CompanySearchResult",
    "SicCode",
    "Ticker",
    # Parameters
    "FilingStatus",
    "ListFilingsParams",
    "ListInsiderParams",
    "ListInstitutionalParams",
    "PutCallFilter",
    "SearchCompaniesParams",
    "TransactionDirection",
]
