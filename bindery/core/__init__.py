"""Resource client core: URL construction, bodies, pagination and transport."""

from bindery.core.body import (
    EMPTY_BODY,
    NO_BODY,
    ApiModel,
    EmptyBody,
    JsonBody,
    NoBody,
    RequestBody,
)
from bindery.core.client import AsyncResourceClient, ResourceClient
from bindery.core.pagination import (
    CursorPagination,
    LinkHeaderPagination,
    PagePagination,
    PaginationPolicy,
)
from bindery.core.urls import build_query, encode_path, expand_path, with_query

__all__ = [
    'ApiModel',
    'AsyncResourceClient',
    'CursorPagination',
    'EMPTY_BODY',
    'EmptyBody',
    'JsonBody',
    'LinkHeaderPagination',
    'NO_BODY',
    'NoBody',
    'PagePagination',
    'PaginationPolicy',
    'RequestBody',
    'ResourceClient',
    'build_query',
    'encode_path',
    'expand_path',
    'with_query',
]
