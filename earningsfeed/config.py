"""Client configuration for the EarningsFeed client."""

from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

from earningsfeed.errors import ConfigError

DEFAULT_BASE_URL = "https://earningsfeed.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for the EarningsFeed client.

    Only the API key is validated. A malformed base URL surfaces when the
    first request is sent.

    Attributes:
        api_key: API key sent as a bearer token
        base_url: API root; DEFAULT_BASE_URL when None
        timeout: Per-request timeout in seconds; DEFAULT_TIMEOUT when None
    """

    api_key: str
    base_url: str | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.api_key is None:
            raise ConfigError("API key is required")
        if not self.api_key:
            raise ConfigError("API key cannot be empty")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )

    @property
    def resolved_base_url(self) -> str:
        return self.base_url or DEFAULT_BASE_URL

    @property
    def resolved_timeout(self) -> float:
        return DEFAULT_TIMEOUT if self.timeout is None else self.timeout

    @staticmethod
    def builder() -> "ClientConfigBuilder":
        return ClientConfigBuilder()

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Load configuration from the environment.

        Reads EARNINGSFEED_API_KEY, EARNINGSFEED_BASE_URL and
        EARNINGSFEED_TIMEOUT.

        Raises:
            ConfigError: If the API key is unset or empty
        """
        settings = EnvSettings()
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )


class EnvSettings(BaseSettings):
    """Environment variables read by ClientConfig.from_env()."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="EARNINGSFEED_",
        env_ignore_empty=True,
        extra="ignore",
    )


class ClientConfigBuilder:
    """Fluent builder for ClientConfig."""

    def __init__(self) -> None:
        self._api_key: str | None = None
        self._base_url: str | None = None
        self._timeout: float | None = None

    def api_key(self, api_key: str) -> "ClientConfigBuilder":
        self._api_key = api_key
        return self

    def base_url(self, base_url: str) -> "ClientConfigBuilder":
        """Override the API root (defaults to https://earningsfeed.com)."""
        self._base_url = base_url
        return self

    def timeout(self, timeout: float) -> "ClientConfigBuilder":
        """Set the per-request timeout in seconds (defaults to 30)."""
        self._timeout = timeout
        return self

    def build(self) -> ClientConfig:
        """
        Build the configuration.

        Raises:
            ConfigError: If the API key was never set or is empty
        """
        if self._api_key is None:
            raise ConfigError("API key is required")
        return ClientConfig(
            api_key=self._api_key,
            base_url=self._base_url,
            timeout=self._timeout,
        )
