"""Record contract shared by stored and desired collections."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Record(Protocol):
    """Anything with a stable, unique primary key.

    Records are owned by the caller. Reconciliation only mutates a stored record
    through a shepherd's ``update``.
    """

    @property
    def pk(self) -> str: ...
