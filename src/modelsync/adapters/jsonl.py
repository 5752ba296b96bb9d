"""JSON Lines record source validated through pydantic."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

if TYPE_CHECKING:
    from typing import TextIO

log = getLogger(__name__)


class JsonLinesIterator[T]:
    """Lazily read one record per non-blank line of a JSON Lines file.

    The file is opened on the first ``next()`` call and closed once the last
    line has been read. Each line is validated into ``record_type`` (a
    dataclass, pydantic model or anything ``TypeAdapter`` accepts).
    """

    def __init__(self, path: Path | str, record_type: type[T]) -> None:
        self.path = Path(path)
        self._adapter = TypeAdapter(record_type)
        self._handle: TextIO | None = None
        self._line_number = 0
        self._exhausted = False

    def next(self) -> tuple[T | None, bool]:
        if self._exhausted:
            return None, False
        if self._handle is None:
            log.debug("Reading records from %s", self.path)
            self._handle = self.path.open(encoding="utf-8")
        try:
            for line in self._handle:
                self._line_number += 1
                if not line.strip():
                    continue
                try:
                    return self._adapter.validate_json(line), True
                except ValidationError as exc:
                    exc.add_note(f"{self.path}:{self._line_number}")
                    raise
        except BaseException:
            self.close()
            raise
        self.close()
        return None, False

    @property
    def closed(self) -> bool:
        """Whether the file has been read to the end or abandoned after an error."""

        return self._exhausted and self._handle is None

    def close(self) -> None:
        self._exhausted = True
        if self._handle is not None:
            self._handle.close()
            self._handle = None
