"""Pagination policies for list endpoints.

APIs announce their next page in different ways. A policy knows where the
items of one page live and how to find the address of the following page:

- :class:`LinkHeaderPagination` follows the ``rel="next"`` entry of the
  ``Link`` header (GitHub).
- :class:`CursorPagination` reads a continuation value from the body, either
  a URL to follow or a token to send back as a query parameter (Ramp).
- :class:`PagePagination` increments a page number until a short page.

:class:`PageWalk` tracks one walk over the pages and enforces its bounds.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from bindery.exceptions import PaginationLimitError, PaginationLoopError

__all__ = [
    'CursorPagination',
    'DEFAULT_MAX_PAGES',
    'LinkHeaderPagination',
    'PagePagination',
    'PageWalk',
    'PaginationPolicy',
    'extract_path',
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 1000


def extract_path(data: dict | list, path: str | None) -> Any:
    """Extract nested data using dot notation path.

    Args:
        data: The response data (dict or list).
        path: Dot notation path (e.g., "page.next").

    Returns:
        The extracted data at the specified path.

    Raises:
        KeyError: If the path does not exist in the data.

    Examples:
        >>> extract_path({"data": {"users": [1, 2, 3]}}, "data.users")
        [1, 2, 3]
        >>> extract_path([1, 2, 3], None)
        [1, 2, 3]
    """
    if path is None:
        return data

    current = data
    for key in path.split('.'):
        if isinstance(current, dict):
            if key not in current:
                raise KeyError(
                    f"Key '{key}' not found in response. "
                    f'Available keys: {list(current.keys())}. Full path: {path}'
                )
            current = current[key]
        elif isinstance(current, list) and key.isdigit():
            current = current[int(key)]
        else:
            raise KeyError(
                f"Cannot access '{key}' on {type(current).__name__}. "
                f'Full path: {path}'
            )

    return current


def _is_address(value: str) -> bool:
    return value.startswith(('http://', 'https://', '/'))


class PaginationPolicy(ABC):
    """How one API splits a collection over several responses."""

    data_path: str | None = None

    def extract_items(self, data: Any) -> list:
        """Return the raw items of one decoded page.

        Raises:
            KeyError: If ``data_path`` does not exist in the page.
            TypeError: If the items are not a JSON array.
        """
        items = extract_path(data, self.data_path)
        if not isinstance(items, list):
            raise TypeError(
                f'Expected a list of items, got {type(items).__name__}'
            )
        return items

    @abstractmethod
    def next_page(
        self, response: httpx.Response, data: Any, items: list, current: str
    ) -> str | None:
        """Return the address of the page after ``current``, or None if last."""


@dataclass
class LinkHeaderPagination(PaginationPolicy):
    """Follow the ``rel="next"`` URL of the ``Link`` response header."""

    data_path: str | None = None

    def next_page(
        self, response: httpx.Response, data: Any, items: list, current: str
    ) -> str | None:
        return response.links.get('next', {}).get('url') or None


@dataclass
class CursorPagination(PaginationPolicy):
    """Read the continuation from a field of the response body.

    A continuation that looks like an address (absolute URL or a path rooted
    at ``/``) is returned as is and later resolved against the current page.
    Anything else is treated as an opaque token and sent as ``cursor_param``
    on the current page's address. A missing, null or empty continuation
    marks the last page.
    """

    data_path: str | None = 'data'
    next_path: str = 'next'
    cursor_param: str = 'cursor'

    def next_page(
        self, response: httpx.Response, data: Any, items: list, current: str
    ) -> str | None:
        try:
            value = extract_path(data, self.next_path)
        except KeyError:
            return None
        if value is None or value == '':
            return None
        value = str(value)
        if _is_address(value):
            return value
        return str(httpx.URL(current).copy_set_param(self.cursor_param, value))


@dataclass
class PagePagination(PaginationPolicy):
    """Increment a page number until a page comes back short or empty."""

    page_param: str = 'page'
    per_page_param: str = 'per_page'
    page_size: int = 100
    data_path: str | None = None

    def next_page(
        self, response: httpx.Response, data: Any, items: list, current: str
    ) -> str | None:
        if len(items) < self.page_size:
            return None
        url = httpx.URL(current)
        page = int(url.params.get(self.page_param, '1'))
        url = url.copy_set_param(self.page_param, str(page + 1))
        if self.per_page_param not in url.params:
            url = url.copy_set_param(self.per_page_param, str(self.page_size))
        return str(url)


class PageWalk:
    """State of one walk over a paginated collection.

    Guarantees that no page address is requested twice and that at most
    ``max_pages`` pages are fetched.
    """

    def __init__(self, policy: PaginationPolicy, max_pages: int = DEFAULT_MAX_PAGES):
        if max_pages < 1:
            raise ValueError('max_pages must be at least 1')
        self.policy = policy
        self.max_pages = max_pages
        self.pages_fetched = 0
        self._seen: set[str] = set()

    def visit(self, url: str) -> None:
        """Record that the page at the resolved ``url`` is about to be fetched.

        Raises:
            PaginationLimitError: If ``max_pages`` pages were already fetched.
            PaginationLoopError: If ``url`` was fetched before.
        """
        if self.pages_fetched >= self.max_pages:
            logger.warning(
                f'Pagination bound of {self.max_pages} pages reached before {url}'
            )
            raise PaginationLimitError(self.max_pages, url)
        if url in self._seen:
            raise PaginationLoopError(url)
        self._seen.add(url)
        self.pages_fetched += 1

    def advance(
        self, response: httpx.Response, data: Any, items: list, current: str
    ) -> str | None:
        """Return the absolute address of the next page, or None if last.

        Relative continuations are resolved against ``current``, the absolute
        URL of the page just fetched.
        """
        next_page = self.policy.next_page(response, data, items, current)
        if next_page is not None:
            next_page = str(httpx.URL(current).join(next_page))
        logger.debug(
            f'Page {self.pages_fetched} returned {len(items)} items, next: {next_page}'
        )
        return next_page
