"""Public domain model surface."""

from __future__ import annotations

from modelsync.domain.model.fields import (
    DataclassIntrospector,
    Field,
    FieldIntrospector,
    ModelIntrospector,
    RecordIntrospector,
    record_field,
    record_metadata,
)
from modelsync.domain.model.record import Record

__all__ = [
    "DataclassIntrospector",
    "Field",
    "FieldIntrospector",
    "ModelIntrospector",
    "Record",
    "RecordIntrospector",
    "record_field",
    "record_metadata",
]
