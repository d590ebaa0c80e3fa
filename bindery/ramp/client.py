"""Ramp developer API client."""

from typing import Any

import httpx

from bindery.config import RampConfig
from bindery.core.client import AsyncResourceClient
from bindery.core.pagination import CursorPagination
from bindery.ramp.users import Users

# Collections come as {"data": [...], "page": {"next": <url or null>}}
RAMP_PAGINATION = CursorPagination(
    data_path='data', next_path='page.next', cursor_param='start'
)


class RampClient(AsyncResourceClient):
    """Async client for the Ramp developer API.

    The OAuth2 access token is taken from the configuration; obtaining or
    refreshing it is up to the caller.
    """

    def __init__(
        self,
        config: RampConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        config = config or RampConfig()
        headers = {'Accept': 'application/json', 'User-Agent': config.user_agent}
        if config.token is not None:
            headers['Authorization'] = f'Bearer {config.token.get_secret_value()}'
        super().__init__(
            config.base_url,
            headers=headers,
            timeout=config.timeout,
            max_pages=config.max_pages,
            pagination=RAMP_PAGINATION,
            http_client=http_client,
            **kwargs,
        )
        self.users = Users(self)
