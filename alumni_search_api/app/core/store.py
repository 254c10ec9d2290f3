"""
JSON file persistence for the alumni collection.

The whole collection lives in a single JSON array (``Database.json``
by default).  ``AlumniStore`` reads the file in full on every
``load`` and rewrites it in full on every ``save``; there is no
caching and no partial update.  A missing file is an empty
collection.

All file access goes through one re-entrant lock, so a request never
observes a half-written file from another request in the same
process.  Mutations should use ``transaction`` to hold the lock
across the whole read-modify-write.  Separate processes sharing the
file are not coordinated: the last write wins.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Sequence

from pydantic import ValidationError

from ..schemas.alumni import AlumniRecord, parse_alumni, format_alumni
from .config import settings

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the backing file cannot be read, parsed or written."""


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text: str) -> Any:
    """Parse JSON text, rejecting the non-standard NaN and Infinity literals."""
    return json.loads(text, parse_constant=_reject_constant)


def get_database_path() -> str:
    """Compute the path to the JSON database file.

    Absolute paths in ``settings.database_path`` are used as is;
    relative ones are resolved against the current working directory.
    """
    db_path = settings.database_path
    if os.path.isabs(db_path):
        return db_path
    return str((Path.cwd() / db_path).resolve())


class AlumniStore:
    """Read-everything / write-everything repository over one JSON file."""

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self.path = Path(path) if path is not None else Path(get_database_path())
        self._lock = threading.RLock()

    def load(self) -> List[AlumniRecord]:
        """Return every record in file order.

        An empty or whitespace-only file counts as an empty collection.
        Raises ``StoreError`` if the file exists but is unreadable or
        does not contain a JSON array of objects.
        """
        with self._lock:
            if not self.path.exists():
                return []
            try:
                text = self.path.read_text(encoding="utf-8")
                # a touched or truncated file holds no records yet
                if not text.strip():
                    return []
                raw = loads_strict(text)
            except (OSError, ValueError) as exc:
                raise StoreError(f"Cannot read {self.path}: {exc}") from exc

        if not isinstance(raw, list):
            raise StoreError(f"{self.path} does not contain a JSON array")
        records: List[AlumniRecord] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise StoreError(f"Entry {index} in {self.path} is not an object")
            try:
                records.append(parse_alumni(item))
            except ValidationError as exc:
                raise StoreError(f"Entry {index} in {self.path} is malformed: {exc}") from exc
        return records

    def save(self, records: Sequence[AlumniRecord]) -> None:
        """Overwrite the file with ``records`` as a pretty-printed array."""
        documents = [format_alumni(record) for record in records]
        with self._lock:
            try:
                with self.path.open("w", encoding="utf-8") as f:
                    json.dump(documents, f, indent=2, ensure_ascii=False, allow_nan=False)
            except (OSError, ValueError) as exc:
                raise StoreError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Wrote %d records to %s", len(documents), self.path)

    @contextmanager
    def transaction(self) -> Iterator[List[AlumniRecord]]:
        """Yield the loaded collection and save it when the block exits.

        The lock is held for the whole block.  If the block raises,
        nothing is written.
        """
        with self._lock:
            records = self.load()
            yield records
            self.save(records)
