"""Unit-of-work abstraction around a reconciliation transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from .iteration import RecordSource
    from .persistence import Transaction


@runtime_checkable
class ReconcileUnitOfWork(Protocol):
    """Transaction boundary for one reconciliation run."""

    @property
    def transaction(self) -> Transaction[object]: ...

    def stored[T](self, record_type: type[T]) -> RecordSource[T]: ...

    def __enter__(self) -> ReconcileUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
