"""Query parameter objects for list and search endpoints."""

from datetime import date
from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class FilingStatus(str, Enum):
    ALL = "all"
    PROVISIONAL = "provisional"
    FINAL = "final"


class TransactionDirection(str, Enum):
    BUY = "buy"
    SELL = "sell"


class PutCallFilter(str, Enum):
    """Restrict holdings to puts, calls or plain equity positions."""

    PUT = "put"
    CALL = "call"
    EQUITY = "equity"


def _join_csv(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


class QueryParams(BaseModel):
    """
    Base for parameter objects.

    Every field is optional. Unset fields are left out of the query string
    entirely.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_query(self) -> dict[str, Any]:
        """Return the query-string mapping with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def with_cursor(self, cursor: str | None) -> Self:
        """Return a copy pointing at another page; self is unchanged."""
        return self.model_copy(update={"cursor": cursor})


class ListFilingsParams(QueryParams):
    """
    Filters for the filings list.

    ``forms`` takes a list of form types (["10-K", "10-Q"]) or an already
    comma-joined string.
    """

    forms: str | None = None
    ticker: str | None = None
    cik: int | None = None
    status: FilingStatus | None = None
    start_date: date | None = None
    end_date: date | None = None
    q: str | None = None
    limit: int | None = None
    cursor: str | None = None

    @field_validator("forms", mode="before")
    @classmethod
    def join_forms(cls, value: Any) -> Any:
        return _join_csv(value)


class ListInsiderParams(QueryParams):
    """Filters for insider transactions. ``codes`` takes transaction codes (P, S, M...)."""

    ticker: str | None = None
    cik: int | None = None
    person_cik: int | None = None
    direction: TransactionDirection | None = None
    codes: str | None = None
    derivative: bool | None = None
    min_value: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    limit: int | None = None
    cursor: str | None = None

    @field_validator("codes", mode="before")
    @classmethod
    def join_codes(cls, value: Any) -> Any:
        return _join_csv(value)


class ListInstitutionalParams(QueryParams):
    cik: int | None = None
    ticker: str | None = None
    cusip: str | None = None
    manager_cik: int | None = None
    min_value: int | None = None
    put_call: PutCallFilter | None = None
    report_period: date | None = None
    limit: int | None = None
    cursor: str | None = None


class SearchCompaniesParams(QueryParams):
    q: str | None = None
    ticker: str | None = None
    sic_code: int | None = None
    state: str | None = None
    limit: int | None = None
    cursor: str | None = None
