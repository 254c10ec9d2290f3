"""
Service layer for adding alumni records.

New records are appended to the end of the collection and receive
sequential ids starting at ``len(collection) + 1``.  Any id supplied
by the client is discarded.  The load, append and save happen inside
a single store transaction so two adds in the same process cannot be
handed the same id.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.schemas.alumni import AlumniRecord, parse_alumni

logger = logging.getLogger(__name__)


class PayloadError(ValueError):
    """Raised when a request body does not have the expected JSON shape."""


def parse_single(body: Any) -> AlumniRecord:
    """Validate the body of ``POST /add``: one JSON object."""
    if not isinstance(body, dict):
        raise PayloadError(f"Expected a JSON object, got {type(body).__name__}")
    return parse_alumni(body)


def parse_many(body: Any) -> List[AlumniRecord]:
    """Validate the body of ``POST /add-bulk``: a JSON array of objects."""
    if not isinstance(body, list):
        raise PayloadError(f"Expected a JSON array, got {type(body).__name__}")
    records = []
    for index, item in enumerate(body):
        if not isinstance(item, dict):
            raise PayloadError(f"Item {index} is not a JSON object")
        records.append(parse_alumni(item))
    return records


class AlumniService:
    """Mutations on the alumni collection."""

    @classmethod
    async def add_alumni(cls, store: AlumniStore, record: AlumniRecord) -> AlumniRecord:
        """Append one record and return it with its assigned id."""
        added = await cls.add_many(store, [record])
        return added[0]

    @classmethod
    async def add_many(cls, store: AlumniStore, records: Sequence[AlumniRecord]) -> List[AlumniRecord]:
        """Append ``records`` in order and persist the collection once.

        Returns the stored copies carrying their assigned ids.
        """
        with store.transaction() as collection:
            next_id = len(collection) + 1
            added = [
                record.model_copy(update={"id": next_id + offset})
                for offset, record in enumerate(records)
            ]
            collection.extend(added)
        if added:
            logger.info("Added %d alumni (ids %d-%d)", len(added), added[0].id, added[-1].id)
        return added
