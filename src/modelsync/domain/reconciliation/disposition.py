"""Keyed partitioning of stored and desired records.

Both sequences are drained completely before anything is written, so the map
reflects the whole picture. Later records with a key already seen in the same
sequence replace the earlier one (last write wins).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from modelsync.domain.ports.iteration import iterate

if TYPE_CHECKING:
    from modelsync.domain.model import Record
    from modelsync.domain.ports.iteration import RecordSource


class DispositionKind(StrEnum):
    """What reconciliation has to do with one key."""

    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(slots=True)
class Disposition[TRecord: Record]:
    """Stored and desired record sharing one primary key."""

    stored: TRecord | None = None
    desired: TRecord | None = None

    def __post_init__(self) -> None:
        if self.stored is None and self.desired is None:
            raise ValueError("Disposition requires a stored or a desired record")

    @property
    def kind(self) -> DispositionKind:
        if self.stored is None:
            return DispositionKind.ADD
        if self.desired is None:
            return DispositionKind.DELETE
        return DispositionKind.UPDATE


type Dispositions[TRecord: Record] = dict[str, Disposition[TRecord]]


def build_dispositions[TRecord: Record](
    stored: RecordSource[TRecord],
    desired: RecordSource[TRecord],
) -> Dispositions[TRecord]:
    """Pair stored and desired records by primary key."""

    dispositions: Dispositions[TRecord] = {}
    for record in iterate(stored):
        dispositions[record.pk] = Disposition(stored=record)
    for record in iterate(desired):
        existing = dispositions.get(record.pk)
        if existing is None:
            dispositions[record.pk] = Disposition(desired=record)
        else:
            existing.desired = record
    return dispositions


def partition(
    dispositions: Dispositions[Record],
) -> tuple[set[str], set[str], set[str]]:
    """Split keys into ``(adds, updates, deletes)``."""

    by_kind: dict[DispositionKind, set[str]] = {kind: set() for kind in DispositionKind}
    for key, disposition in dispositions.items():
        by_kind[disposition.kind].add(key)
    return (
        by_kind[DispositionKind.ADD],
        by_kind[DispositionKind.UPDATE],
        by_kind[DispositionKind.DELETE],
    )
