"""Configuration management for GitHub Insights."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None = None
    github_api_url: str = DEFAULT_API_URL

    # Pagination
    per_page: int = 100  # GitHub's maximum page size
    events_per_page: int = 100  # Single page of recent public events

    # Presentation
    language_limit: int = 7  # Languages shown before the "Other" rollup

    # Timeouts
    request_timeout: float = 30.0

    user_agent: str = "github-insights/0.1.0"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # GITHUB_INSIGHTS_TOKEN wins over the generic GITHUB_TOKEN
        token = os.getenv("GITHUB_INSIGHTS_TOKEN") or os.getenv("GITHUB_TOKEN")

        return cls(
            github_token=token,
            github_api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


_config: Config | None = None


def get_config() -> Config:
    """Get or create the default configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the default configuration instance (useful for testing)."""
    global _config
    _config = config
