class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    pass


class BadRequestError(DomainError):
    """Client sent pagination input that cannot be honoured."""
