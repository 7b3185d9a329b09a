"""
Result schemas
Outputs of the filter engine and the search service.
"""

from enum import Enum
from pydantic import BaseModel, Field

from .listing import ListingRecord


class FilterStatus(str, Enum):
    """Filter outcome for one listing"""
    PASS = "pass"
    FAIL = "fail"


class FilterResult(BaseModel):
    """
    Per-listing filter explanation
    Lists which criteria passed or failed and why.
    """
    listing_id: str
    status: FilterStatus
    passed_conditions: list[str] = Field(
        default_factory=list,
        description="Criteria the listing satisfies"
    )
    failed_conditions: list[str] = Field(
        default_factory=list,
        description="Criteria the listing fails"
    )
    failure_reasons: dict[str, str] = Field(
        default_factory=dict,
        description="Failure reason per criterion",
        examples=[{"max_price": "price 25,000,000 > max 15,000,000"}]
    )


class SearchPage(BaseModel):
    """One page of ranked search results"""
    items: list[ListingRecord] = Field(default_factory=list)
    total_count: int = Field(description="Matching listings across all pages")
    page: int
    page_size: int
    has_next: bool = False
