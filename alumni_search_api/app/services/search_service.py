"""
Service layer for alumni lookups.

Every call loads the full collection from the store and scans it
linearly; results keep collection order.  Functions here work on
internal ``AlumniRecord`` objects; converting them to the external
key casing is left to the API layer.

Numeric query values (ids, years) are parsed with ``parse_int``,
which accepts an optional sign and ASCII digits only, within the
32-bit signed range.  A value that
does not parse never raises: it simply matches nothing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.schemas.alumni import AlumniRecord

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids and years are 32-bit signed integers.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a query string value as an integer, or return ``None``.

    Values outside the 32-bit signed range count as non-numeric.
    """
    if value is None:
        return None
    value = value.strip()
    if not _INT_PATTERN.fullmatch(value):
        return None
    try:
        number = int(value)
    except ValueError:
        # more digits than the interpreter will convert
        return None
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def _contains(haystack: str, needle: str) -> bool:
    return needle in (haystack or "").lower()


@dataclass
class SearchFilters:
    """Optional search criteria; blank values impose no constraint.

    ``location`` is matched against the record's address.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    department: Optional[str] = None
    year: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None

    def matches(self, record: AlumniRecord) -> bool:
        """Return ``True`` if ``record`` satisfies every supplied filter."""
        id_value = (self.id or "").strip()
        if id_value and parse_int(id_value) != record.id:
            return False
        year_value = (self.year or "").strip()
        if year_value and parse_int(year_value) != record.year:
            return False
        text_filters = (
            (self.name, record.name),
            (self.department, record.department),
            (self.location, record.address),
            (self.company, record.company),
        )
        for wanted, actual in text_filters:
            needle = (wanted or "").strip().lower()
            if needle and not _contains(actual, needle):
                return False
        return True


def filter_records(records: Iterable[AlumniRecord], filters: SearchFilters) -> List[AlumniRecord]:
    """Apply ``filters`` to ``records``, skipping entries whose id is 0."""
    return [r for r in records if r.id != 0 and filters.matches(r)]


class SearchService:
    """Read-only queries over the alumni collection."""

    @classmethod
    async def search(cls, store: AlumniStore, filters: SearchFilters) -> List[AlumniRecord]:
        """Return all valid records matching every supplied filter."""
        return filter_records(store.load(), filters)

    @classmethod
    async def find_by_id(cls, store: AlumniStore, alumni_id: int) -> Optional[AlumniRecord]:
        """Return the first record with ``alumni_id``.

        Ids are not guaranteed unique, so later duplicates are ignored.
        """
        for record in store.load():
            if record.id == alumni_id:
                return record
        return None

    @classmethod
    async def find_all_by_id(cls, store: AlumniStore, alumni_id: int) -> List[AlumniRecord]:
        """Return every record carrying ``alumni_id``, in collection order."""
        return [r for r in store.load() if r.id == alumni_id]

    @classmethod
    async def find_by_year(cls, store: AlumniStore, year: int) -> List[AlumniRecord]:
        """Return every record of the given graduation year."""
        return [r for r in store.load() if r.year == year]
