"""Errors raised by the reconciliation core."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for errors originating in the reconciliation core."""


class SchemaMismatchError(ReconciliationError):
    """Raised when stored and desired records do not share a field layout."""

    def __init__(self, stored: object, desired: object, stored_len: int, desired_len: int) -> None:
        super().__init__(
            f"Field layout mismatch between {type(stored).__name__} ({stored_len} fields) "
            f"and {type(desired).__name__} ({desired_len} fields)"
        )
        self.stored_len = stored_len
        self.desired_len = desired_len
