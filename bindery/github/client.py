"""GitHub REST API client."""

from typing import Any

import httpx

from bindery.config import GithubConfig
from bindery.core.client import AsyncResourceClient
from bindery.core.pagination import LinkHeaderPagination
from bindery.github.gists import Gists

GITHUB_API_VERSION = '2022-11-28'


def github_headers(config: GithubConfig) -> dict[str, str]:
    headers = {
        'Accept': 'application/vnd.github+json',
        'X-GitHub-Api-Version': GITHUB_API_VERSION,
        'User-Agent': config.user_agent,
    }
    if config.token is not None:
        headers['Authorization'] = f'Bearer {config.token.get_secret_value()}'
    return headers


class GitHubClient(AsyncResourceClient):
    """Async client for the GitHub REST API.

    Example:
        >>> async with GitHubClient(GithubConfig(token='ghp_...')) as github:
        ...     gists = await github.gists.list_for_user('octocat')
    """

    def __init__(
        self,
        config: GithubConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        config = config or GithubConfig()
        super().__init__(
            config.base_url,
            headers=github_headers(config),
            timeout=config.timeout,
            max_pages=config.max_pages,
            pagination=LinkHeaderPagination(),
            http_client=http_client,
            **kwargs,
        )
        self.gists = Gists(self)
