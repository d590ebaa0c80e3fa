"""Typed HTTP resource clients.

:class:`ResourceClient` and :class:`AsyncResourceClient` perform one HTTP
exchange per call: they resolve the path against the base URL, attach the
request body, check the status and decode the JSON response into the
requested type. ``get_all_pages`` walks a paginated collection into a
single ordered list.

Both clients hold a reference to an httpx client. An injected
``httpx.Client``/``httpx.AsyncClient`` is used as is and left open for its
owner; otherwise the resource client creates one and closes it in
``close()``/``aclose()``.
"""

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any, TypeVar

import httpx
from pydantic import RootModel, TypeAdapter, ValidationError

from bindery.core.body import NO_BODY, RequestBody
from bindery.core.pagination import (
    DEFAULT_MAX_PAGES,
    LinkHeaderPagination,
    PageWalk,
    PaginationPolicy,
)
from bindery.core.urls import QueryPairs, with_query
from bindery.exceptions import DecodeError, HttpError, TransportError

__all__ = ['AsyncResourceClient', 'ResourceClient']

logger = logging.getLogger(__name__)

T = TypeVar('T')


class _BaseResourceClient:
    """Request building and response decoding shared by both clients.

    Args:
        base_url: URL that relative request paths are appended to.
        headers: Default headers sent with every request.
        timeout: Per-exchange timeout in seconds, applied by the transport.
        max_pages: Default bound on the number of pages ``get_all_pages``
            fetches for one collection.
        pagination: Default pagination policy. Link headers when omitted.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = 30.0,
        max_pages: int = DEFAULT_MAX_PAGES,
        pagination: PaginationPolicy | None = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.headers = headers or {}
        self.timeout = timeout
        self.max_pages = max_pages
        self.pagination = pagination or LinkHeaderPagination()

    def resolve_url(self, path: str) -> str:
        """Return the absolute URL for ``path``.

        Absolute URLs, such as next-page links, are returned unchanged.
        """
        if path.startswith(('http://', 'https://')):
            return path
        if not path.startswith('/'):
            path = f'/{path}'
        return f'{self.base_url}{path}'

    def _build_request(
        self,
        client: httpx.Client | httpx.AsyncClient,
        method: str,
        path: str,
        body: RequestBody,
        params: QueryPairs | None,
        headers: dict[str, str] | None,
    ) -> httpx.Request:
        if params is not None:
            path = with_query(path, params)
        merged_headers = {**self.headers, **body.headers(), **(headers or {})}
        return client.build_request(
            method.upper(),
            self.resolve_url(path),
            headers=merged_headers,
            content=body.content(),
            timeout=(
                httpx.USE_CLIENT_DEFAULT if self.timeout is None else self.timeout
            ),
        )

    def _check(self, response: httpx.Response) -> httpx.Response:
        logger.debug(
            f'{response.request.method} {response.request.url} -> {response.status_code}'
        )
        if not response.is_success:
            raise HttpError.from_response(response)
        return response

    def _decode(self, response: httpx.Response, response_type: Any) -> Any:
        if response_type is None:
            return None
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(response.content, e, response_type) from e
        try:
            validated = TypeAdapter(response_type).validate_python(data)
        except ValidationError as e:
            raise DecodeError(response.content, e, response_type) from e
        if isinstance(validated, RootModel):
            return validated.root
        return validated

    def _decode_page(
        self, walk: PageWalk, response: httpx.Response, item_type: Any, current: str
    ) -> tuple[list, str | None]:
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(response.content, e, list[item_type]) from e
        try:
            raw_items = walk.policy.extract_items(data)
            items = TypeAdapter(list[item_type]).validate_python(raw_items)
            next_page = walk.advance(response, data, items, current)
        except (IndexError, KeyError, TypeError, ValueError, ValidationError) as e:
            raise DecodeError(response.content, e, list[item_type]) from e
        return items, next_page


class ResourceClient(_BaseResourceClient):
    """Blocking resource client.

    Example:
        >>> with ResourceClient('https://api.github.com') as client:
        ...     gist = client.get('/gists/aa5a315d61ae9438b18d', GistSimple)
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.Client | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, **kwargs)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> 'ResourceClient':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            response = self._client.send(request)
        except httpx.TransportError as e:
            raise TransportError(request.method, str(request.url), e) from e
        return self._check(response)

    def request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        *,
        body: RequestBody = NO_BODY,
        params: QueryPairs | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Perform one exchange and decode the response as ``response_type``.

        A ``response_type`` of None means no response body is expected.

        Raises:
            TransportError: The exchange failed at the connection level.
            HttpError: The server answered with a non-2xx status.
            DecodeError: The body did not match ``response_type``.
        """
        request = self._build_request(
            self._client, method, path, body, params, headers
        )
        return self._decode(self._send(request), response_type)

    def get(self, path: str, response_type: Any = None, **kwargs: Any) -> Any:
        return self.request('GET', path, response_type, **kwargs)

    def post(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return self.request('POST', path, response_type, body=body, **kwargs)

    def patch(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return self.request('PATCH', path, response_type, body=body, **kwargs)

    def put(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return self.request('PUT', path, response_type, body=body, **kwargs)

    def delete(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return self.request('DELETE', path, response_type, body=body, **kwargs)

    def iter_pages(
        self,
        path: str,
        item_type: Any = Any,
        *,
        policy: PaginationPolicy | None = None,
        params: QueryPairs | None = None,
        headers: dict[str, str] | None = None,
        max_pages: int | None = None,
    ) -> Iterator[list[T]]:
        """Yield the decoded items of each page, in page order."""
        walk = PageWalk(
            policy or self.pagination,
            self.max_pages if max_pages is None else max_pages,
        )
        current: str | None = path if params is None else with_query(path, params)
        while current is not None:
            request = self._build_request(
                self._client, 'GET', current, NO_BODY, None, headers
            )
            walk.visit(str(request.url))
            response = self._send(request)
            items, current = self._decode_page(
                walk, response, item_type, str(request.url)
            )
            yield items

    def get_all_pages(self, path: str, item_type: Any = Any, **kwargs: Any) -> list[T]:
        """Fetch every page of a collection and return all items in order.

        Accepts the same keyword arguments as :meth:`iter_pages`. Any failure
        aborts the walk; no partial collection is returned.
        """
        all_items: list[T] = []
        for items in self.iter_pages(path, item_type, **kwargs):
            all_items.extend(items)
        return all_items


class AsyncResourceClient(_BaseResourceClient):
    """Resource client that suspends on I/O.

    Concurrent calls share the connection pool of the underlying
    ``httpx.AsyncClient`` and may complete in any order.

    Example:
        >>> async with AsyncResourceClient('https://api.github.com') as client:
        ...     gist = await client.get('/gists/aa5a315d61ae9438b18d', GistSimple)
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, **kwargs)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> 'AsyncResourceClient':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            response = await self._client.send(request)
        except httpx.TransportError as e:
            raise TransportError(request.method, str(request.url), e) from e
        return self._check(response)

    async def request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        *,
        body: RequestBody = NO_BODY,
        params: QueryPairs | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Async version of :meth:`ResourceClient.request`."""
        request = self._build_request(
            self._client, method, path, body, params, headers
        )
        return self._decode(await self._send(request), response_type)

    async def get(self, path: str, response_type: Any = None, **kwargs: Any) -> Any:
        return await self.request('GET', path, response_type, **kwargs)

    async def post(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return await self.request('POST', path, response_type, body=body, **kwargs)

    async def patch(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return await self.request('PATCH', path, response_type, body=body, **kwargs)

    async def put(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return await self.request('PUT', path, response_type, body=body, **kwargs)

    async def delete(
        self,
        path: str,
        body: RequestBody = NO_BODY,
        response_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        return await self.request('DELETE', path, response_type, body=body, **kwargs)

    async def iter_pages(
        self,
        path: str,
        item_type: Any = Any,
        *,
        policy: PaginationPolicy | None = None,
        params: QueryPairs | None = None,
        headers: dict[str, str] | None = None,
        max_pages: int | None = None,
    ) -> AsyncIterator[list[T]]:
        """Async version of :meth:`ResourceClient.iter_pages`."""
        walk = PageWalk(
            policy or self.pagination,
            self.max_pages if max_pages is None else max_pages,
        )
        current: str | None = path if params is None else with_query(path, params)
        while current is not None:
            request = self._build_request(
                self._client, 'GET', current, NO_BODY, None, headers
            )
            walk.visit(str(request.url))
            response = await self._send(request)
            items, current = self._decode_page(
                walk, response, item_type, str(request.url)
            )
            yield items

    async def get_all_pages(
        self, path: str, item_type: Any = Any, **kwargs: Any
    ) -> list[T]:
        """Async version of :meth:`ResourceClient.get_all_pages`."""
        all_items: list[T] = []
        async for items in self.iter_pages(path, item_type, **kwargs):
            all_items.extend(items)
        return all_items
