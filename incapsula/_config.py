"""Connection settings for the Incapsula management API."""

from __future__ import annotations

from dataclasses import dataclass, field
import os

from ._exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.imperva.com"

ENV_API_ID = "INCAPSULA_API_ID"
ENV_API_KEY = "INCAPSULA_API_KEY"
ENV_BASE_URL = "INCAPSULA_BASE_URL_API"


@dataclass(frozen=True)
class Config:
    """Base URL plus the api_id/api_key credential pair."""

    api_id: str
    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not self.api_id or not self.api_key:
            raise ConfigurationError(
                "No API credentials provided. Pass api_id= and api_key= or set "
                f"{ENV_API_ID} and {ENV_API_KEY} env vars."
            )
        if not self.base_url:
            raise ConfigurationError("Base URL must not be empty.")

    @classmethod
    def from_env(
        cls,
        api_id: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> Config:
        """Build a config, filling anything not passed from the environment."""
        return cls(
            api_id=api_id or os.environ.get(ENV_API_ID, ""),
            api_key=api_key or os.environ.get(ENV_API_KEY, ""),
            base_url=base_url or os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
        )
