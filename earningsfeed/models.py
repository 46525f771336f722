"""Data models for the EarningsFeed API.

Records are immutable once constructed. Attribute names are snake_case; the
API's camelCase field names are mapped by alias, and unknown fields are
ignored so new server fields never break decoding.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class Record(BaseModel):
    """Base for records deserialized from API JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PaginatedResponse(Record, Generic[T]):
    """One page of a cursor-paginated list endpoint."""

    items: list[T]
    next_cursor: str | None = None
    has_more: bool


# Filings


class EntityClass(str, Enum):
    """Kind of entity that filed."""

    COMPANY = "company"
    PERSON = "person"


class FilingCompany(Record):
    """Company information embedded in a filing."""

    cik: int
    name: str
    state_of_incorporation: str | None = None
    state_of_incorporation_description: str | None = None
    fiscal_year_end: str | None = None


class Filing(Record):
    """SEC filing as returned by the filings list endpoint."""

    accession_number: str
    accession_no_dashes: str | None = None
    cik: int
    company_name: str | None = None
    form_type: str
    filed_at: datetime
    accept_ts: datetime | None = None
    provisional: bool
    feed_day: str | None = None
    size_bytes: int
    url: str
    title: str
    status: str
    updated_at: datetime
    primary_ticker: str | None = None
    primary_exchange: str | None = None
    company: FilingCompany | None = None
    sorted_at: datetime
    logo_url: str | None = None
    entity_class: EntityClass | None = None


class FilingDocument(Record):
    """A document within a filing."""

    seq: int
    filename: str
    doc_type: str
    description: str | None = None
    is_primary: bool


class FilingRole(Record):
    """An entity's role (filer, subject, reporting owner...) in a filing."""

    cik: int
    role: str


class FilingDetail(Record):
    """Single filing with its documents and roles."""

    accession_number: str
    accession_no_dashes: str | None = None
    cik: int
    form_type: str
    filed_at: datetime
    accept_ts: datetime | None = None
    provisional: bool
    feed_day: str | None = None
    title: str
    url: str
    size_bytes: int
    sec_relative_dir: str | None = None
    company_name: str | None = None
    primary_ticker: str | None = None
    company: FilingCompany | None = None
    documents: list[FilingDocument]
    roles: list[FilingRole]


# Insider transactions (Forms 3/4/5)


class AcquiredDisposed(str, Enum):
    ACQUIRED = "A"
    DISPOSED = "D"


class DirectIndirect(str, Enum):
    DIRECT = "D"
    INDIRECT = "I"


class InsiderTransaction(Record):
    """A single transaction reported on a Form 3, 4 or 5."""

    accession_number: str
    filed_at: datetime
    form_type: str
    person_cik: int
    person_name: str
    company_cik: int
    company_name: str | None = None
    ticker: str | None = None
    is_director: bool
    is_officer: bool
    is_ten_percent_owner: bool
    is_other: bool
    officer_title: str | None = None
    security_title: str
    is_derivative: bool
    transaction_date: date
    transaction_code: str
    equity_swap_involved: bool
    shares: Decimal | None = None
    price_per_share: Decimal | None = None
    acquired_disposed: AcquiredDisposed
    shares_after: Decimal | None = None
    direct_indirect: DirectIndirect
    ownership_nature: str | None = None
    conversion_or_exercise_price: Decimal | None = None
    exercise_date: date | None = None
    expiration_date: date | None = None
    underlying_security_title: str | None = None
    underlying_shares: Decimal | None = None
    transaction_value: Decimal | None = None


# Institutional holdings (13F)


class SharesType(str, Enum):
    SHARES = "SH"
    PRINCIPAL = "PRN"


class PutCall(str, Enum):
    PUT = "Put"
    CALL = "Call"


class InvestmentDiscretion(str, Enum):
    SOLE = "SOLE"
    DEFINED = "DFND"
    OTHER = "OTHER"


class InstitutionalHolding(Record):
    """One position from an institutional manager's 13F-HR filing."""

    cusip: str
    issuer_name: str
    class_title: str
    company_cik: int | None = None
    ticker: str | None = None
    value: Decimal
    shares: Decimal
    shares_type: SharesType
    put_call: PutCall | None = None
    investment_discretion: InvestmentDiscretion
    other_manager: str | None = None
    voting_sole: Decimal | None = None
    voting_shared: Decimal | None = None
    voting_none: Decimal | None = None
    manager_cik: int
    manager_name: str
    report_period_date: date
    filed_at: datetime
    accession_number: str


# Companies


class Ticker(Record):
    symbol: str
    exchange: str
    is_primary: bool


class SicCode(Record):
    """Standard Industrial Classification code."""

    code: int
    description: str


class Address(Record):
    """Mailing or business address of a company."""

    address_type: str = Field(alias="type")
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state_or_country: str | None = None
    state_or_country_description: str | None = None
    zip_code: str | None = None


class Company(Record):
    """Full company profile."""

    cik: int
    name: str
    entity_type: str | None = None
    category: str | None = None
    description: str | None = None
    tickers: list[Ticker]
    primary_ticker: str | None = None
    sic_codes: list[SicCode]
    ein: str | None = None
    fiscal_year_end: str | None = None
    state_of_incorporation: str | None = None
    state_of_incorporation_description: str | None = None
    phone: str | None = None
    website: str | None = None
    investor_website: str | None = None
    addresses: list[Address]
    logo_url: str | None = None
    has_insider_transactions: bool
    is_insider: bool
    updated_at: datetime


class CompanySearchResult(Record):
    """Company summary returned by the search endpoint."""

    cik: int
    name: str
    ticker: str | None = None
    exchange: str | None = None
    entity_type: str | None = None
    category: str | None = None
    sic_code: int | None = None
    sic_description: str | None = None
    logo_url: str | None = None
