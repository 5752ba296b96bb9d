"""Reconciliation core: converge a stored record collection onto a desired one.

Flow of one run:
1) drain stored and desired sources into a keyed disposition map
2) delete stored-only records
3) insert desired-only records
4) compare and merge records present on both sides through a shepherd
"""

from __future__ import annotations

from .collection import Collection, ReconcileCounts
from .disposition import (
    Disposition,
    DispositionKind,
    Dispositions,
    build_dispositions,
    partition,
)
from .errors import ReconciliationError, SchemaMismatchError
from .shepherd import DefaultShepherd, Shepherd, values_equal

__all__ = [
    "Collection",
    "DefaultShepherd",
    "Disposition",
    "DispositionKind",
    "Dispositions",
    "ReconcileCounts",
    "ReconciliationError",
    "SchemaMismatchError",
    "Shepherd",
    "build_dispositions",
    "partition",
    "values_equal",
]
