"""
Imoveis schema package
Typed records shared by the engine, the service and the API.
"""

from .listing import (
    Amenity,
    Currency,
    ListingKind,
    ListingRecord,
    Location,
    PropertyKind,
)
from .criteria import CriteriaField, FilterCriteria
from .results import FilterResult, FilterStatus, SearchPage

__all__ = [
    "Amenity",
    "Currency",
    "ListingKind",
    "ListingRecord",
    "Location",
    "PropertyKind",
    "CriteriaField",
    "FilterCriteria",
    "FilterResult",
    "FilterStatus",
    "SearchPage",
]
