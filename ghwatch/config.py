"""Runtime settings — env-driven.

Centralized settings using pydantic-settings for environment variable
support.  Reads from a .env file and GHWATCH_* environment variables.
The repository list and token live in the YAML config file instead
(see ``ghwatch.core.config_loader``).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_REFRESH_INTERVAL = 7.5


class WatchSettings(BaseSettings):
    """Runtime settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export GHWATCH_CONFIG_PATH=~/.config/ghwatch.yml
        export GHWATCH_LOG_LEVEL=DEBUG
        export GHWATCH_REQUEST_TIMEOUT=10

    Or via .env file::

        GHWATCH_REFRESH_INTERVAL=15
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GHWATCH_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Repository list + token
    config_path: Path = Path("config.yml")

    # WARNING by default so log lines don't tear the live table
    log_level: str = "WARNING"

    # GitHub API
    api_base_url: str = DEFAULT_API_BASE_URL
    user_agent: str = "ghwatch"
    request_timeout: float | None = None

    # Poll cadence in seconds
    refresh_interval: float = Field(DEFAULT_REFRESH_INTERVAL, gt=0)

    def runs_url(self, owner: str, name: str) -> str:
        """Return the workflow-runs endpoint for ``owner/name``."""
        base = self.api_base_url.rstrip("/")
        return f"{base}/repos/{owner}/{name}/actions/runs"


# Module-level singleton; import as `from ghwatch.config import settings`
settings = WatchSettings()
