import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import httpx
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream employee API
    upstream_base_url: str = os.getenv(
        "UPSTREAM_BASE_URL", "https://dummy.restapiexample.com/api/v1/"
    )
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # Cache
    cache_key: str = os.getenv("CACHE_KEY", "allEmployees")
    top_earners_limit: int = int(os.getenv("TOP_EARNERS_LIMIT", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.upstream_timeout <= 0:
            raise ValueError("UPSTREAM_TIMEOUT must be greater than 0")

        if self.top_earners_limit <= 0:
            raise ValueError("TOP_EARNERS_LIMIT must be greater than 0")

        if not self.upstream_base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"UPSTREAM_BASE_URL must be an http(s) URL, got {self.upstream_base_url!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_http_client(
    base_url: str | None = None,
    timeout: float | None = None,
) -> httpx.AsyncClient:
    """Create the async HTTP client used to talk to the upstream API."""
    return httpx.AsyncClient(
        base_url=base_url or settings.upstream_base_url,
        timeout=timeout or settings.upstream_timeout,
        headers={"Accept": "application/json"},
    )


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
