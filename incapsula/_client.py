"""Incapsula client — entry point for the user-management API."""

from __future__ import annotations

from ._config import Config
from ._http import HTTPClient
from ._resources import Roles, Users


class Incapsula:
    """Client for the Incapsula user-management API.

    Usage:
        client = Incapsula(api_id="12345", api_key="...")
        role = client.roles.create(CreateRole(role_name="Ops", account_id=42))
        client.users.delete("ops@example.com", 42)

    Anything not passed is read from INCAPSULA_API_ID, INCAPSULA_API_KEY,
    and INCAPSULA_BASE_URL_API.
    """

    def __init__(
        self,
        api_id: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 60,
        config: Config | None = None,
    ):
        self.config = config or Config.from_env(api_id=api_id, api_key=api_key, base_url=base_url)
        self._http = HTTPClient(self.config, timeout=timeout)
        self.roles = Roles(self._http)
        self.users = Users(self._http)
