"""Errors raised by use cases and translated into HTTP responses by the API."""


class NotFoundError(ValueError):
    """The requested record does not exist or is hidden from the caller."""


class PermissionDeniedError(ValueError):
    """The caller is authenticated but may not perform the operation."""


class ConflictError(ValueError):
    """The operation conflicts with existing data."""

    def __init__(self, message: str, *, item_count: int | None = None) -> None:
        super().__init__(message)
        self.item_count = item_count


__all__ = ["ConflictError", "NotFoundError", "PermissionDeniedError"]
