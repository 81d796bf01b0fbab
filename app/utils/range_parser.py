"""Builds a PaginationRange from a request's pagination signals.

Clients page either with ``limit``/``offset`` parameters or with a
``Range: items=<start>-<end>`` header. The parameters win whenever either of
them is present; the header is only consulted when both are absent.
"""

import logging
import re
from typing import Protocol

from app.utils.exceptions import BadRequestError
from app.utils.pagination import MAX_LIMIT, MAX_OFFSET, PaginationRange

logger = logging.getLogger(__name__)

LIMIT_HEADER_NAME = "limit"
OFFSET_HEADER_NAME = "offset"
RANGE_HEADER_NAME = "Range"

ITEMS_RANGE_PATTERN = re.compile(r"items=(\d+)-(\d+)", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class HeaderSource(Protocol):
    def get_url_decoded_header(self, name: str) -> str | None: ...


def parse_range(source: HeaderSource, default_limit: int) -> PaginationRange:
    """Parse a range, defaulting to ``offset=0, limit=default_limit``."""
    range_ = PaginationRange(offset=0, limit=default_limit)
    parse_into(source, range_)
    return range_


def parse_range_or_empty(source: HeaderSource) -> PaginationRange:
    """Parse a range; the result is left unset when the request has no pagination."""
    range_ = PaginationRange()
    parse_into(source, range_)
    return range_


def parse_into(source: HeaderSource, range_: PaginationRange) -> None:
    limit = source.get_url_decoded_header(LIMIT_HEADER_NAME)
    offset = source.get_url_decoded_header(OFFSET_HEADER_NAME)

    if _parse_limit_and_offset(limit, offset, range_):
        return
    _parse_range_header(source.get_url_decoded_header(RANGE_HEADER_NAME), range_)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _parse_int(value: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def _parse_limit_and_offset(limit: str | None, offset: str | None, range_: PaginationRange) -> bool:
    has_limit = not _is_blank(limit)
    has_offset = not _is_blank(offset)
    if not (has_limit or has_offset):
        return False

    message = f"Invalid 'limit' and 'offset' parameters: limit={limit} offset={offset}"
    try:
        if has_limit:
            range_.limit = _parse_int(limit)
        if has_offset:
            range_.offset = _parse_int(offset)
        else:
            range_.offset = 0
    except ValueError as e:
        logger.info(f"Отклонены параметры пагинации. limit={limit!r} offset={offset!r} error={e}")
        raise BadRequestError(message) from e

    if not range_.is_valid:
        logger.info(f"Отклонены параметры пагинации. limit={limit!r} offset={offset!r}")
        raise BadRequestError(message)
    return True


def _apply_items_range(range_: PaginationRange, start: int, end: int) -> bool:
    # offset is applied even when end is rejected; the caller re-validates
    range_.offset = start
    if end < start - 1:
        return False
    range_.set_limit_via_end(end)
    return True


def _parse_range_header(header: str | None, range_: PaginationRange) -> None:
    if _is_blank(header):
        return

    match = ITEMS_RANGE_PATTERN.fullmatch(header)
    if match is None:
        logger.info(f"Заголовок Range не распознан. Range={header!r}")
        raise BadRequestError(f"Unparseable 'Range' header.  Expecting items=[start]-[end] was: {header}")

    invalid = f"Invalid 'Range' header.  Expecting 'items=[start]-[end]'  was: {header}"
    start, end = int(match.group(1)), int(match.group(2))
    if start > MAX_OFFSET or end > MAX_OFFSET or end - start + 1 > MAX_LIMIT:
        logger.info(f"Заголовок Range вне допустимых границ. Range={header!r}")
        raise BadRequestError(invalid)

    if not _apply_items_range(range_, start, end):
        logger.info(f"Конец диапазона раньше начала, limit не изменён. Range={header!r}")

    if not range_.is_valid:
        raise BadRequestError(invalid)
