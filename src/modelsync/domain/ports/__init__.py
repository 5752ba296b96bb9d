"""Domain port definitions for adapters."""

from __future__ import annotations

from .iteration import ListIterator, RecordIterator, RecordSource, iterate
from .persistence import Transaction
from .unit_of_work import ReconcileUnitOfWork

__all__ = [
    "ListIterator",
    "ReconcileUnitOfWork",
    "RecordIterator",
    "RecordSource",
    "Transaction",
    "iterate",
]
