"""
Filter criteria schema
User-chosen constraints that narrow the listing set.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .listing import Amenity, ListingKind, PropertyKind


class CriteriaField(str, Enum):
    """Single-valued criteria that can be toggled from a selector"""
    PROPERTY_KIND = "property_kind"
    LISTING_KIND = "listing_kind"
    PROVINCE = "province"
    CITY = "city"


class FilterCriteria(BaseModel):
    """
    Filter criteria

    Every field is optional. None means the criterion is absent and never
    excludes a listing; 0 is a real bound. Contradictory combinations
    (min_price > max_price, a city outside the province) are accepted and
    simply match nothing.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "listing_kind": "sale",
                "property_kind": "apartment",
                "province": "maputo",
                "city": "maputo_city",
                "min_price": 5000000,
                "max_price": 15000000,
                "min_bedrooms": 2,
                "required_amenities": ["garage", "security"],
            }
        }
    )

    # === Text ===
    query: Optional[str] = Field(
        default=None,
        description="Case-insensitive text matched against title and description",
        examples=["piscina"]
    )

    # === Type ===
    property_kind: Optional[PropertyKind] = None
    listing_kind: Optional[ListingKind] = None

    # === Location ===
    province: Optional[str] = Field(default=None, examples=["maputo"])
    city: Optional[str] = Field(default=None, examples=["matola"])

    # === Price (inclusive) ===
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)

    # === Rooms (inclusive lower bounds) ===
    min_bedrooms: Optional[int] = Field(default=None, ge=0)
    min_bathrooms: Optional[int] = Field(default=None, ge=0)

    # === Amenities ===
    required_amenities: Optional[frozenset[Amenity]] = Field(
        default=None,
        description="A listing must offer every amenity in this set"
    )

    @field_validator("query")
    @classmethod
    def _blank_is_absent(cls, value: Optional[str]):
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("required_amenities")
    @classmethod
    def _empty_is_absent(cls, value: Optional[frozenset[Amenity]]):
        if not value:
            return None
        return value

    def active_fields(self) -> list[str]:
        """Names of the criteria that are present"""
        return [name for name, value in self if value is not None]

    def is_empty(self) -> bool:
        return not self.active_fields()
