"""Stream stored records out of a SQLAlchemy query."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Select
    from sqlalchemy.orm import Session


class QueryIterator[T]:
    """Lazy :class:`~modelsync.domain.ports.RecordIterator` over ``session.scalars``.

    The statement is executed on the first ``next()`` call.
    """

    def __init__(
        self,
        session: Session,
        statement: Select[tuple[T]],
        *,
        yield_per: int | None = None,
    ) -> None:
        self.session = session
        self.statement = statement
        self.yield_per = yield_per
        self._rows: Iterator[T] | None = None
        self._exhausted = False

    def next(self) -> tuple[T | None, bool]:
        if self._exhausted:
            return None, False
        if self._rows is None:
            statement = self.statement
            if self.yield_per is not None:
                statement = statement.execution_options(yield_per=self.yield_per)
            self._rows = iter(self.session.scalars(statement))
        for row in self._rows:
            return row, True
        self._exhausted = True
        self._rows = None
        return None, False
