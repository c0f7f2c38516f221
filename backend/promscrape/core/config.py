"""Scraper settings.

Loaded from environment variables with the ``PROMSCRAPE_`` prefix (or a
local ``.env`` file). Values are only defaults: every scrape call can
override the accept header and the advisory timeout.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Header names sent on every scrape request.
ACCEPT_HEADER = "Accept"
X_PROMETHEUS_SCRAPE_TIMEOUT_HEADER = "X-Prometheus-Scrape-Timeout-Seconds"

TEXT_EXPOSITION_ACCEPT = "text/plain;version=0.0.4;q=1,*/*;q=0.1"


class Settings(BaseSettings):
    """Scraper settings.

    Example:
        >>> s = Settings(SCRAPE_TIMEOUT_SECONDS="10")
        >>> s.SCRAPE_TIMEOUT_SECONDS
        '10'
    """

    model_config = SettingsConfigDict(
        env_prefix="PROMSCRAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ACCEPT_HEADER: str = Field(
        default=TEXT_EXPOSITION_ACCEPT,
        description="Accept header used to negotiate the exposition format",
    )
    SCRAPE_TIMEOUT_SECONDS: str = Field(
        default="5",
        description="Advisory scrape deadline sent to the target, verbatim",
    )


settings = Settings()
