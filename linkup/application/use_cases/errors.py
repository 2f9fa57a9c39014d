"""Errors raised by use cases and translated to HTTP statuses by the routes."""


class NotFoundError(ValueError):
    """The requested resource does not exist."""


class ConflictError(ValueError):
    """The operation would duplicate an existing resource."""


__all__ = ["ConflictError", "NotFoundError"]
