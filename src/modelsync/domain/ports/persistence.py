"""Ports for persisting reconciled records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transaction[TRecord](Protocol):
    """Applies single-record writes immediately.

    Each call either succeeds or raises; there is no implicit batching. Commit
    and rollback belong to whoever opened the transaction.
    """

    def insert(self, record: TRecord) -> None: ...

    def update(self, record: TRecord) -> None: ...

    def delete(self, record: TRecord) -> None: ...
