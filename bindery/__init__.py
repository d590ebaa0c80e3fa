"""bindery - Typed REST resource clients and API bindings.

bindery provides a small HTTP resource client built on httpx and pydantic:
it encodes path segments, assembles query strings, serializes request bodies,
decodes responses into typed models and walks paginated collections. On top
of it sit bindings for the GitHub gists API and the Ramp users API.

Quick Start:
    >>> from bindery import GitHubClient, get_config
    >>>
    >>> config = get_config()
    >>> async with GitHubClient(config.github) as github:
    ...     gists = await github.gists.list_for_user('octocat')

CLI Usage:
    $ bindery gists list --user octocat
    $ bindery gists get aa5a315d61ae9438b18d
    $ bindery ramp users --department-id 4b2a...
"""

from importlib.metadata import PackageNotFoundError, version

from bindery.config import BinderyConfig, GithubConfig, RampConfig, get_config
from bindery.core import (
    EMPTY_BODY,
    NO_BODY,
    ApiModel,
    AsyncResourceClient,
    CursorPagination,
    JsonBody,
    LinkHeaderPagination,
    PagePagination,
    ResourceClient,
)
from bindery.exceptions import (
    BinderyError,
    ConfigurationError,
    DecodeError,
    HttpError,
    PaginationError,
    PaginationLimitError,
    PaginationLoopError,
    TransportError,
)
from bindery.github import GitHubClient
from bindery.ramp import RampClient

__all__ = [
    # Clients
    'ResourceClient',
    'AsyncResourceClient',
    'GitHubClient',
    'RampClient',
    # Bodies and pagination
    'ApiModel',
    'JsonBody',
    'NO_BODY',
    'EMPTY_BODY',
    'LinkHeaderPagination',
    'CursorPagination',
    'PagePagination',
    # Configuration
    'BinderyConfig',
    'GithubConfig',
    'RampConfig',
    'get_config',
    # Exceptions
    'BinderyError',
    'TransportError',
    'HttpError',
    'DecodeError',
    'PaginationError',
    'PaginationLimitError',
    'PaginationLoopError',
    'ConfigurationError',
]

try:
    __version__ = version('bindery')
except PackageNotFoundError:
    __version__ = 'unknown'
