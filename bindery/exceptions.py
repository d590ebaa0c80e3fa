"""Custom exceptions for bindery.

This module defines the hierarchy of exceptions raised by the resource client
and the API bindings built on it. Every failed call surfaces as exactly one of
these; nothing is retried or swallowed on the caller's behalf.
"""

from typing import Any

import httpx


class BinderyError(Exception):
    """Base exception for all bindery errors.

    All exceptions raised by bindery inherit from this class, making it easy
    to catch every client-related error with a single except clause.

    Example:
        try:
            gist = await gists.get('aa5a315d61ae9438b18d')
        except BinderyError as e:
            print(f"bindery error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class TransportError(BinderyError):
    """The HTTP exchange failed before a response was received.

    Raised for connection-level failures: timeouts, DNS resolution, TLS
    handshakes, refused or dropped connections. Whether to retry is left to
    the caller.

    Attributes:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        cause: The underlying httpx exception.
    """

    def __init__(self, method: str, url: str, cause: Exception | None = None):
        self.method = method
        self.url = url
        self.cause = cause
        message = f'{method.upper()} {url} failed'
        if cause:
            message += f': {cause!r}'
        super().__init__(message)


class HttpError(BinderyError):
    """The server answered with a non-2xx status.

    Attributes:
        status_code: The HTTP status code of the response.
        body: The raw response body as text.
        detail: The parsed JSON body when the body is JSON, otherwise None.
        method: The HTTP method of the rejected request.
        url: The URL of the rejected request.
    """

    def __init__(
        self,
        status_code: int,
        body: str = '',
        detail: Any | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        self.status_code = status_code
        self.body = body
        self.detail = detail
        self.method = method
        self.url = url
        message = f'HTTP {status_code} Error'
        if method and url:
            message += f' ({method.upper()} {url})'
        if isinstance(detail, dict) and 'message' in detail:
            message += f': {detail["message"]}'
        elif body:
            message += f': {body[:200]}'
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        """Whether a caller-side retry policy may reasonably try again."""
        return self.status_code == 429 or self.status_code >= 500

    @classmethod
    def from_response(cls, response: httpx.Response) -> 'HttpError':
        body = response.text
        try:
            detail = response.json()
        except ValueError:
            detail = None
        return cls(
            response.status_code,
            body=body,
            detail=detail,
            method=response.request.method,
            url=str(response.request.url),
        )


class DecodeError(BinderyError):
    """The response body did not match the expected shape.

    This signals contract drift between the API and the bindings. The raw
    body is kept for diagnostics and is never coerced into a fallback value.

    Attributes:
        raw: The raw response body.
        cause: The JSON or validation error that rejected the body.
        response_type: The type the body was decoded against.
    """

    def __init__(
        self,
        raw: bytes | str,
        cause: Exception | None = None,
        response_type: Any | None = None,
    ):
        self.raw = raw
        self.cause = cause
        self.response_type = response_type
        message = 'Failed to decode response body'
        if response_type is not None:
            name = getattr(response_type, '__name__', None) or repr(response_type)
            message += f' as {name}'
        if cause:
            message += f': {cause}'
        super().__init__(message)


class PaginationError(BinderyError):
    """Base exception for pagination failures.

    Raised instead of returning a partial collection: a paginated call
    yields every page or fails.
    """

    pass


class PaginationLimitError(PaginationError):
    """The server kept announcing more pages past the configured bound.

    Attributes:
        max_pages: The bound that was reached.
        url: The continuation that would have been fetched next.
    """

    def __init__(self, max_pages: int, url: str | None = None):
        self.max_pages = max_pages
        self.url = url
        message = f'Pagination stopped after {max_pages} pages'
        if url:
            message += f" (next page was '{url}')"
        super().__init__(message)


class PaginationLoopError(PaginationError):
    """A continuation pointed back at a page that was already fetched.

    Attributes:
        url: The repeated page address.
    """

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Page '{url}' was already fetched")


class ConfigurationError(BinderyError):
    """Error in configuration.

    This exception is raised when the configuration is invalid or
    cannot be loaded.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
