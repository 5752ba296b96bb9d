"""Field introspection for records.

The default shepherd does not know record types up front. It asks an
introspector for an ordered list of :class:`Field` handles, each bound to one
record, and reads the primary-key/incremented flags and tags from them.

Dataclass records describe their fields with :func:`record_field`::

    @dataclass(eq=False, kw_only=True)
    class Host:
        id: str = record_field(primary_key=True)
        revision: int = record_field(default=0, incremented=True)
        name: str
        cached_at: float = record_field(default=0.0, tags={"eq": "-"})

        @property
        def pk(self) -> str:
            return self.id

pydantic models pass the same metadata through ``json_schema_extra``::

    class Item(BaseModel):
        id: str = Field(json_schema_extra=record_metadata(primary_key=True))
        name: str = ""
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

PRIMARY_KEY: Final[str] = "modelsync.primary_key"
INCREMENTED: Final[str] = "modelsync.incremented"
TAGS: Final[str] = "modelsync.tags"


@dataclass(slots=True, kw_only=True)
class Field:
    """Handle on one field of one record."""

    name: str
    owner: object
    primary_key: bool = False
    incremented: bool = False
    tags: Mapping[str, str] = dataclasses.field(default_factory=dict[str, str])

    @property
    def value(self) -> object:
        return getattr(self.owner, self.name)

    @value.setter
    def value(self, value: object) -> None:
        setattr(self.owner, self.name, value)

    def tag(self, key: str) -> str | None:
        """Return the annotation stored under ``key`` (``None`` when absent)."""

        return self.tags.get(key)


@runtime_checkable
class FieldIntrospector(Protocol):
    """Enumerate a record's fields in a stable, type-defined order."""

    def fields(self, record: object) -> list[Field]: ...


def record_metadata(
    *,
    primary_key: bool = False,
    incremented: bool = False,
    tags: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Reconciliation metadata, usable as pydantic ``json_schema_extra``."""

    return {PRIMARY_KEY: primary_key, INCREMENTED: incremented, TAGS: dict(tags or {})}


def record_field(
    *,
    primary_key: bool = False,
    incremented: bool = False,
    tags: Mapping[str, str] | None = None,
    **kwargs: Any,
) -> Any:
    """``dataclasses.field`` carrying reconciliation metadata."""

    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata.update(record_metadata(primary_key=primary_key, incremented=incremented, tags=tags))
    return dataclasses.field(metadata=metadata, **kwargs)


def _field(name: str, owner: object, metadata: Mapping[str, Any]) -> Field:
    return Field(
        name=name,
        owner=owner,
        primary_key=bool(metadata.get(PRIMARY_KEY, False)),
        incremented=bool(metadata.get(INCREMENTED, False)),
        tags=metadata.get(TAGS, {}),
    )


class DataclassIntrospector:
    """Introspect dataclass records using ``dataclasses.fields`` order."""

    def fields(self, record: object) -> list[Field]:
        if not dataclasses.is_dataclass(record) or isinstance(record, type):
            raise TypeError(f"Expected a dataclass instance, got {type(record).__name__}")
        return [_field(item.name, record, item.metadata) for item in dataclasses.fields(record)]


class ModelIntrospector:
    """Introspect pydantic models using ``model_fields`` order.

    Metadata is read from ``Field(json_schema_extra=record_metadata(...))``;
    a callable ``json_schema_extra`` carries none.
    """

    def fields(self, record: object) -> list[Field]:
        model_fields: Mapping[str, Any] | None = getattr(type(record), "model_fields", None)
        if model_fields is None or isinstance(record, type):
            raise TypeError(f"Expected a pydantic model instance, got {type(record).__name__}")
        fields: list[Field] = []
        for name, info in model_fields.items():
            extra = info.json_schema_extra
            fields.append(_field(name, record, extra if isinstance(extra, dict) else {}))
        return fields


class RecordIntrospector:
    """Pick the dataclass or pydantic introspector from the record itself."""

    def __init__(self) -> None:
        self._dataclasses = DataclassIntrospector()
        self._models = ModelIntrospector()

    def fields(self, record: object) -> list[Field]:
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return self._dataclasses.fields(record)
        if hasattr(type(record), "model_fields") and not isinstance(record, type):
            return self._models.fields(record)
        raise TypeError(
            f"Cannot introspect {type(record).__name__}; expected a dataclass or pydantic model"
        )
