"""Core EarningsFeed client: authentication, request dispatch and error mapping."""

import logging
from typing import Any, TypeVar

import httpx
import pydantic

from earningsfeed import __version__
from earningsfeed.config import ClientConfig, ClientConfigBuilder
from earningsfeed.errors import (
    ConfigError,
    RateLimitError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    error_from_response,
)
from earningsfeed.params import QueryParams
from earningsfeed.resources import (
    CompaniesResource,
    FilingsResource,
    InsiderResource,
    InstitutionalResource,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=pydantic.BaseModel)

USER_AGENT = f"earningsfeed-python/{__version__}"


def _build_headers(api_key: str) -> httpx.Headers:
    """
    Build the headers sent with every request.

    Raises:
        ConfigError: If the API key cannot be carried in an HTTP header
    """
    if any(ch in api_key for ch in "\r\n\x00"):
        raise ConfigError("invalid API key format")
    try:
        api_key.encode("ascii")
    except UnicodeEncodeError as e:
        raise ConfigError("invalid API key format") from e

    return httpx.Headers(
        {
            "Authorization": f"Bearer {api_key}",
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
    )


class EarningsFeed:
    """
    Async client for the EarningsFeed API.

    One instance can be shared by any number of concurrent tasks; it keeps
    no per-call state. Connection pooling is handled by the underlying
    ``httpx.AsyncClient``.

    Example:
        async with EarningsFeed("your_api_key") as client:
            page = await client.filings.list(ListFilingsParams(ticker="AAPL", limit=10))
            detail = await client.filings.get(page.items[0].accession_number)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize with an API key or a full configuration.

        Args:
            api_key: API key; shorthand for ClientConfig(api_key=...)
            config: Full configuration (mutually exclusive with api_key)
            http: Optional shared httpx.AsyncClient. The caller keeps
                ownership and must close it.

        Raises:
            ConfigError: If the key is missing, empty or not header-safe
        """
        if config is not None and api_key is not None:
            raise ConfigError("pass either api_key or config, not both")
        if config is None:
            if api_key is None:
                raise ConfigError("API key is required")
            config = ClientConfig(api_key=api_key)

        self._config = config
        self._base_url = config.resolved_base_url
        self._timeout = config.resolved_timeout
        self._headers = _build_headers(config.api_key)

        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(headers=self._headers, timeout=self._timeout)

    @classmethod
    def with_config(cls, config: ClientConfig) -> "EarningsFeed":
        return cls(config=config)

    @classmethod
    def from_env(cls) -> "EarningsFeed":
        """Create a client configured from EARNINGSFEED_* environment variables."""
        return cls(config=ClientConfig.from_env())

    @staticmethod
    def builder() -> ClientConfigBuilder:
        return ClientConfig.builder()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def filings(self) -> FilingsResource:
        return FilingsResource(self)

    @property
    def insider(self) -> InsiderResource:
        return InsiderResource(self)

    @property
    def institutional(self) -> InstitutionalResource:
        return InstitutionalResource(self)

    @property
    def companies(self) -> CompaniesResource:
        return CompaniesResource(self)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http and not self._http.is_closed:
            await self._http.aclose()

    async def __aenter__(self) -> "EarningsFeed":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"EarningsFeed(base_url={self._base_url!r})"

    async def get(
        self,
        path: str,
        params: QueryParams | None = None,
        *,
        response_type: type[R],
    ) -> R:
        """
        Make an authenticated GET request and decode the body.

        Args:
            path: API path, e.g. "/api/v1/filings"
            params: Optional parameter object serialized into the query string
            response_type: Model the 2xx body is validated into

        Returns:
            The decoded response

        Raises:
            AuthenticationError, NotFoundError, ValidationError,
            RateLimitError, APIError: On non-2xx statuses
            RequestTimeoutError: If the request exceeded the timeout
            TransportError: On connection or protocol failures
            SerializationError: If a 2xx body does not match response_type
        """
        url = f"{self._base_url}{path}"
        query = params.to_query() if params is not None else None

        try:
            response = await self._http.get(
                url,
                params=query,
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            logger.debug("GET %s timed out after %ss", path, self._timeout)
            raise RequestTimeoutError(e, self._timeout) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("GET %s failed: %s", path, e)
            raise TransportError(e) from e

        logger.debug("GET %s -> %d", path, response.status_code)

        if not response.is_success:
            error = error_from_response(response, path)
            if isinstance(error, RateLimitError):
                logger.warning("Rate limited on %s (resets at %s)", path, error.reset_at)
            raise error

        try:
            return response_type.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            raise SerializationError(e) from e
