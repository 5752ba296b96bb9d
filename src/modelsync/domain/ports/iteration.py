"""Lazy record sequences.

Record producers (database cursors, files, in-memory lists) hand out records
through ``next()`` calls returning ``(record, has_next)`` pairs. Iteration is
over once ``has_next`` is false. Plain Python iterables are accepted wherever a
sequence is expected; :func:`iterate` drains either kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, cast, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class RecordIterator[T](Protocol):
    """Single-pass producer of records."""

    def next(self) -> tuple[T | None, bool]: ...


type RecordSource[T] = RecordIterator[T] | Iterable[T]


class ListIterator[T]:
    """In-memory :class:`RecordIterator` over a snapshot of ``items``."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items = list(items)
        self._index = 0

    def __len__(self) -> int:
        return len(self._items)

    def next(self) -> tuple[T | None, bool]:
        if self._index >= len(self._items):
            return None, False
        item = self._items[self._index]
        self._index += 1
        return item, True


def iterate[T](source: RecordSource[T]) -> Iterator[T]:
    """Yield every record of ``source`` exactly once."""

    if isinstance(source, RecordIterator):
        producer = cast("RecordIterator[T]", source)
        while True:
            item, has_next = producer.next()
            if not has_next:
                return
            yield cast("T", item)
    else:
        yield from source
