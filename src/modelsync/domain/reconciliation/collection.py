"""Reconcile a stored collection of records with the desired collection.

``Collection.reconcile`` pairs both collections by primary key and then runs
three phases against the transaction, always in this order:

1) delete stored records with no desired counterpart
2) insert desired records with no stored counterpart
3) update stored records that differ from their desired counterpart

A failing transaction call ends the phase (and the run) immediately. Writes
already issued are not undone here; atomicity is up to the transaction owner.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, cast

from .disposition import DispositionKind, build_dispositions
from .shepherd import DefaultShepherd

if TYPE_CHECKING:
    from collections.abc import Callable

    from modelsync.domain.model import Record
    from modelsync.domain.ports.iteration import RecordSource
    from modelsync.domain.ports.persistence import Transaction

    from .disposition import Dispositions
    from .shepherd import Shepherd

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconcileCounts:
    """Number of records changed per operation."""

    added: int = 0
    updated: int = 0
    deleted: int = 0

    @property
    def total(self) -> int:
        return self.added + self.updated + self.deleted


class Collection[TRecord: Record]:
    """Model collection bound to a stored source and a transaction.

    ``stored`` is either a record source, drained by the first operation, or a
    callable returning a fresh source for every operation. Counters accumulate
    over the lifetime of the instance.
    """

    def __init__(
        self,
        stored: RecordSource[TRecord] | Callable[[], RecordSource[TRecord]],
        tx: Transaction[TRecord],
        shepherd: Shepherd[TRecord] | None = None,
    ) -> None:
        self.stored = stored
        self.tx = tx
        self.shepherd = shepherd
        self.added = 0
        self.updated = 0
        self.deleted = 0

    @property
    def counts(self) -> ReconcileCounts:
        return ReconcileCounts(added=self.added, updated=self.updated, deleted=self.deleted)

    def add(self, desired: RecordSource[TRecord]) -> int:
        """Insert desired records that are not stored."""

        return self._run("add", self._add, self.dispositions(desired))

    def update(self, desired: RecordSource[TRecord]) -> int:
        """Update stored records that differ from the desired ones."""

        return self._run("update", self._update, self.dispositions(desired))

    def delete(self, desired: RecordSource[TRecord]) -> int:
        """Delete stored records that are not desired."""

        return self._run("delete", self._delete, self.dispositions(desired))

    def reconcile(self, desired: RecordSource[TRecord]) -> ReconcileCounts:
        """Ensure the stored collection is as desired."""

        dispositions = self.dispositions(desired)
        deleted = self._run("delete", self._delete, dispositions)
        added = self._run("add", self._add, dispositions)
        updated = self._run("update", self._update, dispositions)
        log.info(
            "Reconciled %s records: added=%s, updated=%s, deleted=%s",
            len(dispositions),
            added,
            updated,
            deleted,
        )
        return ReconcileCounts(added=added, updated=updated, deleted=deleted)

    def dispositions(self, desired: RecordSource[TRecord]) -> Dispositions[TRecord]:
        """Pair the stored source with ``desired``, draining both."""

        return build_dispositions(self._stored_source(), desired)

    def _stored_source(self) -> RecordSource[TRecord]:
        if callable(self.stored):
            factory = cast("Callable[[], RecordSource[TRecord]]", self.stored)
            return factory()
        return self.stored

    def _run(
        self,
        phase: str,
        operation: Callable[[Dispositions[TRecord]], int],
        dispositions: Dispositions[TRecord],
    ) -> int:
        try:
            return operation(dispositions)
        except Exception as exc:
            exc.add_note(f"reconcile phase: {phase}")
            log.warning("Reconcile %s phase aborted: %s", phase, exc)
            raise

    def _add(self, dispositions: Dispositions[TRecord]) -> int:
        count = 0
        for disposition in dispositions.values():
            if disposition.kind is not DispositionKind.ADD:
                continue
            desired = cast("TRecord", disposition.desired)
            self.tx.insert(desired)
            log.debug("Inserted %s", desired.pk)
            self.added += 1
            count += 1
        return count

    def _update(self, dispositions: Dispositions[TRecord]) -> int:
        shepherd: Shepherd[TRecord] = (
            self.shepherd if self.shepherd is not None else DefaultShepherd()
        )
        count = 0
        for disposition in dispositions.values():
            if disposition.kind is not DispositionKind.UPDATE:
                continue
            stored = cast("TRecord", disposition.stored)
            desired = cast("TRecord", disposition.desired)
            if shepherd.equals(stored, desired):
                continue
            shepherd.update(stored, desired)
            self.tx.update(stored)
            log.debug("Updated %s", stored.pk)
            self.updated += 1
            count += 1
        return count

    def _delete(self, dispositions: Dispositions[TRecord]) -> int:
        count = 0
        for disposition in dispositions.values():
            if disposition.kind is not DispositionKind.DELETE:
                continue
            stored = cast("TRecord", disposition.stored)
            self.tx.delete(stored)
            log.debug("Deleted %s", stored.pk)
            self.deleted += 1
            count += 1
        return count
