"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from modelsync.adapters.sqlalchemy import SqlAlchemyIntrospector
from modelsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from modelsync.config.reconcile import get_reconcile_config
from modelsync.domain.ports.unit_of_work import ReconcileUnitOfWork
from modelsync.domain.reconciliation import Collection, DefaultShepherd

if TYPE_CHECKING:
    from modelsync.domain.model import FieldIntrospector, Record
    from modelsync.domain.ports.iteration import RecordSource
    from modelsync.domain.reconciliation import ReconcileCounts, Shepherd

UnitOfWorkFactory = Callable[[], ReconcileUnitOfWork]


log = getLogger(__name__)


def reconcile_records[TRecord: Record](
    record_type: type[TRecord],
    desired: RecordSource[TRecord],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    shepherd: Shepherd[TRecord] | None = None,
    introspector: FieldIntrospector | None = None,
) -> ReconcileCounts:
    """Make the stored ``record_type`` rows match ``desired`` and commit.

    Without a ``shepherd`` the default one is used, introspecting records through
    ``introspector`` (mapped SQLAlchemy columns unless given) and configured from
    the environment.
    """

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyUnitOfWork
    effective_shepherd = shepherd
    if effective_shepherd is None:
        effective_shepherd = DefaultShepherd(
            introspector if introspector is not None else SqlAlchemyIntrospector(),
            config=get_reconcile_config(),
        )
    log.info("Starting reconciliation of %s", record_type.__name__)

    with unit_of_work_factory() as uow:
        collection = Collection(
            uow.stored(record_type),
            uow.transaction,
            effective_shepherd,
        )
        counts = collection.reconcile(desired)
        uow.commit()

    log.info(
        f"Finished reconciliation of {record_type.__name__}: added={counts.added}, "
        f"updated={counts.updated}, deleted={counts.deleted}"
    )
    return counts
