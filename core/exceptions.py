# core/exceptions.py
from __future__ import annotations


class ServiceError(Exception):
    """Request-scoped failure raised by the data access layer."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ServiceError):
    pass


class ConflictError(ServiceError):
    pass
