"""Follow ``next`` links of current-API collection responses."""

import logging
from typing import Any, Callable, Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from .exceptions import MappingError

logger = logging.getLogger(__name__)


def next_link(page: Any) -> Optional[str]:
    """The ``meta.pagination.links.next`` cursor of a page, if present."""
    if not isinstance(page, dict):
        return None
    pagination = (page.get("meta") or {}).get("pagination") or {}
    return (pagination.get("links") or {}).get("next") or None


def apply_cursor(path: str, cursor: str) -> str:
    """Apply a ``next`` cursor to a collection path.

    The cursor is normally a query string such as ``?page=2&limit=50``. Its
    parameters are merged into the path's own query. Keys the cursor carries
    replace the path's values for them; every other pair is kept, repeated keys
    included, so filters survive even if the API does not echo them back.
    An absolute URL cursor replaces the path entirely.
    """
    if cursor.startswith(("http://", "https://")):
        return cursor

    base, _, query = path.partition("?")
    cursor_params = parse_qsl(urlsplit(cursor).query or cursor.lstrip("?"), keep_blank_values=True)
    overridden = {key for key, _ in cursor_params}
    params = [(key, value) for key, value in parse_qsl(query, keep_blank_values=True) if key not in overridden]
    params.extend(cursor_params)
    if not params:
        return base
    return f"{base}?{urlencode(params, safe=':,', quote_via=quote)}"


def collect_pages(path: str, first_page: Any, fetch: Callable[[str], Any]) -> list:
    """Concatenate ``data`` from the first page and every following page.

    ``fetch`` is called with the collection path (cursor applied) and must
    return the decoded page. Traversal ends at the first page whose metadata
    has no ``next`` link.
    """
    if not isinstance(first_page, dict) or not isinstance(first_page.get("data"), list):
        raise MappingError(f"Expected a paginated collection at {path}, got {type(first_page).__name__}")

    data = list(first_page["data"])
    cursor = next_link(first_page)
    pages = 1
    while cursor:
        page = fetch(apply_cursor(path, cursor))
        if not isinstance(page, dict) or not isinstance(page.get("data"), list):
            raise MappingError(f"Page {pages + 1} of {path} has no data array")
        data.extend(page["data"])
        cursor = next_link(page)
        pages += 1

    if pages > 1:
        logger.debug(f"Fetched {len(data)} items over {pages} pages from {path}")
    return data
