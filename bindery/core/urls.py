"""Path and query-string construction for endpoint calls."""

import re
from collections.abc import Iterable
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

__all__ = [
    'QueryPairs',
    'build_query',
    'encode_path',
    'expand_path',
    'render_query_value',
    'with_query',
]

QueryPairs = Iterable[tuple[str, Any]]

_PLACEHOLDER = re.compile(r'\{([A-Za-z_][A-Za-z0-9_]*)\}')


def encode_path(value: Any) -> str:
    """Percent-encode an opaque identifier for use as a single path segment.

    Every reserved character is encoded, including ``/``, ``?`` and ``#``, so
    the value can never add segments, start a query or cut the URL short.

    Examples:
        >>> encode_path('abc def')
        'abc%20def'
        >>> encode_path('a/b?c#d')
        'a%2Fb%3Fc%23d'
        >>> encode_path(42)
        '42'
    """
    text = str(value)
    # dot segments would be removed by URL normalization
    if text in ('.', '..'):
        return text.replace('.', '%2E')
    return quote(text, safe='')


def expand_path(template: str, **values: Any) -> str:
    """Substitute ``{name}`` placeholders in a path template.

    Each value is encoded independently with :func:`encode_path`; the
    template itself is left untouched.

    Raises:
        ValueError: If a placeholder has no value, or a value matches no
            placeholder.

    Examples:
        >>> expand_path('/gists/{gist_id}/comments/{comment_id}', gist_id='a b', comment_id=7)
        '/gists/a%20b/comments/7'
    """
    names = _PLACEHOLDER.findall(template)
    missing = [name for name in names if name not in values]
    if missing:
        raise ValueError(
            f"Missing value for placeholder(s) {', '.join(missing)} in '{template}'"
        )
    unused = sorted(set(values) - set(names))
    if unused:
        raise ValueError(
            f"No placeholder for value(s) {', '.join(unused)} in '{template}'"
        )
    return _PLACEHOLDER.sub(lambda m: encode_path(values[m.group(1)]), template)


def render_query_value(value: Any) -> str:
    """Render a query value in its canonical textual form.

    Examples:
        >>> render_query_value(True)
        'true'
        >>> render_query_value(1000.0)
        '1000'
        >>> render_query_value(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        '2024-01-02T03:04:05Z'
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return render_query_value(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc).replace(microsecond=0, tzinfo=None)
        return f'{value.isoformat()}Z'
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_query(pairs: QueryPairs) -> str:
    """Build a query string from ordered ``(name, value)`` pairs.

    Pairs keep the order they are given in. Pairs whose value is ``None`` or
    the empty string are dropped entirely rather than sent as ``name=``.

    Examples:
        >>> build_query([('department_id', ''), ('page_size', 50.0), ('start', 'u1')])
        'page_size=50&start=u1'
    """
    rendered = []
    for name, value in pairs:
        if value is None:
            continue
        text = render_query_value(value)
        if text == '':
            continue
        rendered.append((name, text))
    return urlencode(rendered, quote_via=quote)


def with_query(path: str, pairs: QueryPairs) -> str:
    """Append the query built from ``pairs`` to ``path``.

    Existing query parameters in ``path`` are kept in front.
    """
    query = build_query(pairs)
    if not query:
        return path
    separator = '&' if '?' in path else '?'
    return f'{path}{separator}{query}'
