"""
Pydantic schema for the aggregated statistics report.

Field aliases carry the exact key names clients expect, including the
embedded spaces.  Count mappings are plain dictionaries whose
insertion order is the display order (highest count first).
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class StatsReport(BaseModel):
    """Totals and grouped counts over the whole alumni collection."""

    model_config = ConfigDict(populate_by_name=True)

    total_alumni: int = Field(0, alias="Total Alumni")
    recent_batch: int = Field(0, alias="Recent Batch")
    current_batch: int = Field(0, alias="Current Batch")
    departments: int = Field(0, alias="Departments")
    department_counts: Dict[str, int] = Field(default_factory=dict, alias="Department Counts")
    companies: int = Field(0, alias="Companies")
    company_counts: Dict[str, int] = Field(default_factory=dict, alias="Company Counts")
    locations: int = Field(0, alias="Locations")
    location_counts: Dict[str, int] = Field(default_factory=dict, alias="Location Counts")
