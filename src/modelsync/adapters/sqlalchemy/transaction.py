"""Session-backed transaction for reconciliation writes."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

log = getLogger(__name__)


class SqlAlchemyTransaction:
    """Apply inserts, updates and deletes through a session.

    Each call flushes so failures surface on the call that caused them. The
    session is never committed here; the unit of work owns that.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert(self, record: object) -> None:
        self.session.add(record)
        self.session.flush()

    def update(self, record: object) -> None:
        self.session.merge(record)
        self.session.flush()

    def delete(self, record: object) -> None:
        target = record if record in self.session else self.session.merge(record)
        self.session.delete(target)
        self.session.flush()
