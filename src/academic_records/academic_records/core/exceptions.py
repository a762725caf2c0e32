from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when an operation addresses a record id that does not exist."""

    def __init__(self, entity: str, record_id: object):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TransientError(DomainError):
    """Raised by a remote backing store when a call may succeed on retry.

    The in-memory stores never raise it; retries belong to the caller.
    """
