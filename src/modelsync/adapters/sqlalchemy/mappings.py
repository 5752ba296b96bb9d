"""Mapper registry for records persisted through SQLAlchemy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect, orm

if TYPE_CHECKING:
    from sqlalchemy import MetaData, Table
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def is_mapped(record_type: type) -> bool:
    return inspect(record_type, raiseerr=False) is not None


def map_record(record_type: type, table: Table, **kwargs: Any) -> orm.Mapper[Any]:
    """Map ``record_type`` onto ``table`` once; later calls return the existing mapper."""

    if is_mapped(record_type):
        return orm.class_mapper(record_type)
    log.info("Mapping %s onto table %s", record_type.__name__, table.name)
    return mapper_registry.map_imperatively(record_type, table, **kwargs)


def create_all_tables(engine: Engine, *, metadata: MetaData | None = None) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    (metadata or mapper_registry.metadata).create_all(engine)
