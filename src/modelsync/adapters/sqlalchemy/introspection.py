"""Field introspection for SQLAlchemy-mapped records."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import inspect

from modelsync.domain.model.fields import Field

if TYPE_CHECKING:
    from sqlalchemy import Column
    from sqlalchemy.orm import InstanceState


class SqlAlchemyIntrospector:
    """Enumerate mapped column attributes in mapper order.

    Primary-key and incremented flags come from the column definition; tags
    come from ``Column.info``, e.g. ``Column("synced_at", Float, info={"eq": "-"})``.
    """

    def fields(self, record: object) -> list[Field]:
        state = cast("InstanceState[object]", inspect(record))
        fields: list[Field] = []
        for attribute in state.mapper.column_attrs:
            column = cast("Column[object]", attribute.columns[0])
            fields.append(
                Field(
                    name=attribute.key,
                    owner=record,
                    primary_key=bool(column.primary_key),
                    incremented=is_incremented(column),
                    tags={str(key): value for key, value in column.info.items()},
                )
            )
        return fields


def is_incremented(column: Column[object]) -> bool:
    """Return whether storage assigns the column's value."""

    if column.identity is not None or column.autoincrement is True:
        return True
    table = column.table
    return getattr(table, "autoincrement_column", None) is column
