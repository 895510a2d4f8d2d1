"""Runtime configuration, built once at process start from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.extract.errors import ConfigurationError
from src.models.team import Provider

CFBD_BASE_URL = "https://api.collegefootballdata.com"
ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports/football/college-football"
DEFAULT_OPENAI_MODEL = "gpt-4o"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoints for the upstream providers."""

    cfbd_api_key: str = ""
    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL
    cfbd_base_url: str = CFBD_BASE_URL
    espn_base_url: str = ESPN_BASE_URL
    http_timeout: float = 30.0
    log_level: str = "INFO"
    default_provider: Provider = Provider.CFBD

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Read settings from the environment, loading `.env` first."""
        if dotenv:
            load_dotenv()

        timeout = os.getenv("HTTP_TIMEOUT", "30")
        try:
            http_timeout = float(timeout)
        except ValueError as e:
            raise ConfigurationError(f"HTTP_TIMEOUT must be a number, got {timeout!r}") from e

        provider = os.getenv("DEFAULT_PROVIDER", Provider.CFBD.value).lower()
        try:
            default_provider = Provider(provider)
        except ValueError as e:
            raise ConfigurationError(f"Unknown DEFAULT_PROVIDER {provider!r}") from e

        return cls(
            cfbd_api_key=os.getenv("CFBD_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
            cfbd_base_url=os.getenv("CFBD_BASE_URL", CFBD_BASE_URL),
            espn_base_url=os.getenv("ESPN_BASE_URL", ESPN_BASE_URL),
            http_timeout=http_timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            default_provider=default_provider,
        )

    def require_cfbd_key(self) -> str:
        if not self.cfbd_api_key:
            raise ConfigurationError(
                "CFBD_API_KEY is required. Get a free key at https://collegefootballdata.com/key"
            )
        return self.cfbd_api_key

    def require_openai_key(self) -> str:
        if not self.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY is required for AI overviews.")
        return self.openai_api_key
