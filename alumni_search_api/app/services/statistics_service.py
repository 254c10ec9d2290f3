"""
Service layer for statistics and reporting.

Aggregates are computed in Python over the full collection: a total,
batch counts for the current and previous calendar years, and counts
grouped by department, company and location (address).  Blank
companies and addresses are grouped under ``"Unknown"``; departments
are grouped by their value as stored.

Each grouping is returned sorted by count, highest first.  Entries
with equal counts keep the order in which their key first appears in
the collection.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, Optional, Sequence

from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.schemas.alumni import AlumniRecord
from alumni_search_api.app.schemas.stats import StatsReport

UNKNOWN = "Unknown"


def _or_unknown(value: str) -> str:
    return value if value else UNKNOWN


def sort_by_count(counts: Counter) -> Dict[str, int]:
    """Return ``counts`` as a dict ordered by descending count.

    ``sorted`` is stable and ``Counter`` remembers insertion order, so
    ties stay in first-seen order.
    """
    return dict(sorted(counts.items(), key=lambda item: item[1], reverse=True))


class StatisticsService:
    """Aggregated statistics over the alumni collection."""

    @staticmethod
    def compute_stats(
        records: Sequence[AlumniRecord], current_year: Optional[int] = None
    ) -> StatsReport:
        """Build a ``StatsReport`` for ``records``.

        ``current_year`` defaults to today's calendar year.
        """
        if current_year is None:
            current_year = date.today().year

        departments: Counter = Counter()
        companies: Counter = Counter()
        locations: Counter = Counter()
        recent_batch = 0
        current_batch = 0

        for record in records:
            if record.year == current_year - 1:
                recent_batch += 1
            if record.year == current_year:
                current_batch += 1
            departments[record.department] += 1
            companies[_or_unknown(record.company)] += 1
            locations[_or_unknown(record.address)] += 1

        return StatsReport(
            total_alumni=len(records),
            recent_batch=recent_batch,
            current_batch=current_batch,
            departments=len(departments),
            department_counts=sort_by_count(departments),
            companies=len(companies),
            company_counts=sort_by_count(companies),
            locations=len(locations),
            location_counts=sort_by_count(locations),
        )

    @classmethod
    async def overview(cls, store: AlumniStore, current_year: Optional[int] = None) -> StatsReport:
        """Load the collection and return its statistics."""
        return cls.compute_stats(store.load(), current_year=current_year)
