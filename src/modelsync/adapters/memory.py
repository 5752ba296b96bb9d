"""In-memory transaction for tests and small jobs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from modelsync.domain.ports.iteration import ListIterator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from modelsync.domain.model import Record

type Operation = Literal["insert", "update", "delete"]


class TransactionError(RuntimeError):
    """Raised when an in-memory write cannot be applied."""


class DuplicateKeyError(TransactionError):
    """Raised when inserting a record whose key is already stored."""


class MissingRecordError(TransactionError):
    """Raised when updating or deleting a record that is not stored."""


class InMemoryTransaction[TRecord: Record]:
    """Dict-backed transaction keyed by primary key.

    Every successful call is appended to ``calls`` as ``(operation, pk)``.
    """

    def __init__(self, records: Iterable[TRecord] = ()) -> None:
        self.records: dict[str, TRecord] = {record.pk: record for record in records}
        self.calls: list[tuple[Operation, str]] = []

    def stored(self) -> ListIterator[TRecord]:
        """Return a fresh iterator over the currently stored records."""

        return ListIterator(self.records.values())

    def insert(self, record: TRecord) -> None:
        if record.pk in self.records:
            raise DuplicateKeyError(f"Record {record.pk!r} already stored")
        self.records[record.pk] = record
        self.calls.append(("insert", record.pk))

    def update(self, record: TRecord) -> None:
        if record.pk not in self.records:
            raise MissingRecordError(f"Record {record.pk!r} is not stored")
        self.records[record.pk] = record
        self.calls.append(("update", record.pk))

    def delete(self, record: TRecord) -> None:
        if record.pk not in self.records:
            raise MissingRecordError(f"Record {record.pk!r} is not stored")
        del self.records[record.pk]
        self.calls.append(("delete", record.pk))
