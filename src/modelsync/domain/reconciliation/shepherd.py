"""Equality and merge policies used by the update phase.

A shepherd decides whether a stored record already matches its desired
counterpart and, when it does not, copies the desired state onto the stored
record so it can be persisted.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from modelsync.config.reconcile import ReconcileConfig
from modelsync.domain.model.fields import RecordIntrospector

from .errors import SchemaMismatchError

if TYPE_CHECKING:
    from modelsync.domain.model import Field, FieldIntrospector

log = getLogger(__name__)


def values_equal(left: Any, right: Any) -> bool:
    """Compare field values structurally, treating differing types as unequal.

    ``1``, ``1.0`` and ``True`` differ here, also inside dicts, lists and tuples.
    Other values fall back to ``==``.
    """

    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            values_equal(value, right[key]) for key, value in left.items()
        )
    if isinstance(left, list | tuple):
        return len(left) == len(right) and all(map(values_equal, left, right))
    return left == right


@runtime_checkable
class Shepherd[TRecord](Protocol):
    """Pluggable equality/merge policy."""

    def equals(self, stored: TRecord, desired: TRecord) -> bool:
        """Return whether ``stored`` already reflects ``desired``."""
        ...

    def update(self, stored: TRecord, desired: TRecord) -> None:
        """Mutate ``stored`` in place so it reflects ``desired``."""
        ...


class DefaultShepherd:
    """Introspection-driven shepherd usable for any record type.

    Fields are ignored when they:
      - are the primary key,
      - are incremented by storage,
      - carry the exclusion tag with the exclusion sentinel (``eq="-"``).

    Every other field is compared with :func:`values_equal` and copied on
    update. Fields are matched by position; both records must come from the
    same type. Without an introspector, dataclass and pydantic records are
    both understood.
    """

    def __init__(
        self,
        introspector: FieldIntrospector | None = None,
        *,
        config: ReconcileConfig | None = None,
    ) -> None:
        self.introspector = introspector if introspector is not None else RecordIntrospector()
        self.config = config if config is not None else ReconcileConfig()

    def equals(self, stored: object, desired: object) -> bool:
        stored_fields = self.introspector.fields(stored)
        desired_fields = self.introspector.fields(desired)
        if len(stored_fields) != len(desired_fields):
            if self.config.strict_schema:
                raise SchemaMismatchError(
                    stored, desired, len(stored_fields), len(desired_fields)
                )
            log.warning(
                "Field layout mismatch comparing %s with %s; treating as unequal",
                type(stored).__name__,
                type(desired).__name__,
            )
            return False
        for stored_field, desired_field in zip(stored_fields, desired_fields, strict=True):
            if self.ignored(stored_field):
                continue
            if not values_equal(stored_field.value, desired_field.value):
                return False
        return True

    def update(self, stored: object, desired: object) -> None:
        stored_fields = self.introspector.fields(stored)
        desired_fields = self.introspector.fields(desired)
        if len(stored_fields) != len(desired_fields):
            raise SchemaMismatchError(stored, desired, len(stored_fields), len(desired_fields))
        for stored_field, desired_field in zip(stored_fields, desired_fields, strict=True):
            if self.ignored(stored_field):
                continue
            stored_field.value = desired_field.value

    def ignored(self, field: Field) -> bool:
        if field.primary_key or field.incremented:
            return True
        return field.tag(self.config.exclude_tag) == self.config.exclude_sentinel
