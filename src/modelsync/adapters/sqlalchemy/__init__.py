"""SQLAlchemy adapter package for modelsync."""

from __future__ import annotations

from .introspection import SqlAlchemyIntrospector, is_incremented
from .iteration import QueryIterator
from .mappings import create_all_tables, is_mapped, map_record, mapper_registry
from .transaction import SqlAlchemyTransaction
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "QueryIterator",
    "SqlAlchemyIntrospector",
    "SqlAlchemyTransaction",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_incremented",
    "is_mapped",
    "is_started",
    "map_record",
    "mapper_registry",
    "shutdown",
    "startup",
]
