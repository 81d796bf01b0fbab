from urllib.parse import unquote

from fastapi import Request

from app.core.config import settings
from app.utils.exceptions import BadRequestError
from app.utils.pagination import PaginationRange
from app.utils.range_parser import parse_range


class RequestHeaderSource:
    """Looks a name up in the query string first, then in the request headers."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def get_url_decoded_header(self, name: str) -> str | None:
        value = self._request.query_params.get(name)
        if value is not None and value.strip():
            return value
        value = self._request.headers.get(name)
        if value is None:
            return None
        return unquote(value)


def get_pagination_range(request: Request) -> PaginationRange:
    page = parse_range(RequestHeaderSource(request), settings.DEFAULT_PAGE_LIMIT)
    if page.limit > settings.MAX_PAGE_LIMIT:
        raise BadRequestError(f"Requested limit={page.limit} exceeds the maximum of {settings.MAX_PAGE_LIMIT}")
    return page
