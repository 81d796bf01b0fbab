MAX_OFFSET = 2**63 - 1
MAX_LIMIT = 2**31 - 1


class PaginationRange:
    """Offset/limit window requested by a client.

    Either value may be unset, which is not the same as zero. Unset values
    read back as 0; use ``has_offset`` / ``has_limit`` to tell them apart.

    The range renders itself for the ``Content-Range`` response header:

        >>> PaginationRange(0, 25).as_content_range(67)
        'items 0-24/67'
    """

    __slots__ = ("_offset", "_limit")

    def __init__(self, offset: int | None = None, limit: int | None = None) -> None:
        self._offset: int | None = None
        self._limit: int | None = None
        if offset is not None:
            self.offset = offset
        if limit is not None:
            self.limit = limit

    @property
    def offset(self) -> int:
        return self._offset if self._offset is not None else 0

    @offset.setter
    def offset(self, value: int) -> None:
        _check_int("offset", value)
        if value < 0:
            raise ValueError("offset must be >= 0")
        if value > MAX_OFFSET:
            raise ValueError(f"offset must be <= {MAX_OFFSET}")
        self._offset = value

    # start is a synonym for offset
    start = offset

    @property
    def limit(self) -> int:
        return self._limit if self._limit is not None else 0

    @limit.setter
    def limit(self, value: int) -> None:
        _check_int("limit", value)
        if value < 0:
            raise ValueError("limit must be >= 0")
        if value > MAX_LIMIT:
            raise ValueError(f"limit must be <= {MAX_LIMIT}")
        self._limit = value

    @property
    def end(self) -> int:
        """Last included index, or the offset when no limit is set."""
        if self.has_limit:
            return self.offset + self.limit - 1
        return self.offset

    def set_limit_via_end(self, end: int) -> None:
        """Set the limit from an inclusive end index.

        Raises ValueError when no offset is set yet, or when ``end`` lies so far
        before the offset that the limit would be negative.
        """
        if not self.has_offset:
            raise ValueError("setting 'end' requires 'offset' to be set first")
        _check_int("end", end)
        self.limit = end - self.offset + 1

    @property
    def has_offset(self) -> bool:
        return self._offset is not None

    @property
    def has_limit(self) -> bool:
        return self._limit is not None

    @property
    def is_initialized(self) -> bool:
        return self.has_offset and self.has_limit

    @property
    def is_valid(self) -> bool:
        return self.is_initialized and self.offset >= 0 and self.limit >= 0

    def as_items(self, max_items: int | None = None) -> str:
        """Render as ``items <offset>-<end>``.

        With ``max_items`` the end is clamped to ``max_items - 1`` when it runs
        past it; a zero total keeps the end at 0 rather than -1. The range is
        not validated.
        """
        end = self.end
        if max_items is not None and end > max_items:
            end = max_items - 1 if max_items > 0 else max_items
        return f"items {self.offset}-{end}"

    def as_content_range(self, max_items: int) -> str:
        """Render as ``items <offset>-<end>/<max_items>`` for the Content-Range header."""
        return f"{self.as_items(max_items)}/{max_items}"

    def __str__(self) -> str:
        return self.as_items()

    def __repr__(self) -> str:
        return f"PaginationRange(offset={self._offset!r}, limit={self._limit!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaginationRange):
            return NotImplemented
        return (self._offset, self._limit) == (other._offset, other._limit)

    __hash__ = None  # mutable


def _check_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
