"""
Listing schema
A single property advertisement as supplied by the listing store.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ListingKind(str, Enum):
    """Transaction offered by the listing"""
    SALE = "sale"
    RENT = "rent"


class PropertyKind(str, Enum):
    """Property type"""
    HOUSE = "house"
    APARTMENT = "apartment"
    LAND = "land"
    OFFICE = "office"
    COMMERCIAL = "commercial"
    WAREHOUSE = "warehouse"
    FARM = "farm"


class Amenity(str, Enum):
    """Fixed amenity vocabulary"""
    POOL = "pool"
    GARAGE = "garage"
    GARDEN = "garden"
    SECURITY = "security"
    FURNISHED = "furnished"
    AIR_CONDITIONING = "aircon"
    BALCONY = "balcony"
    ELEVATOR = "elevator"


class Currency(str, Enum):
    MZN = "MZN"
    USD = "USD"


class Location(BaseModel):
    """
    Listing location

    Province and city are plain identifiers (e.g. "maputo", "matola").
    Province/city containment is advisory and never checked here.
    """
    model_config = ConfigDict(frozen=True)

    province: str = Field(examples=["maputo"])
    city: str = Field(examples=["maputo_city"])
    neighborhood: str = Field(default="", examples=["Polana"])
    address: Optional[str] = None


class ListingRecord(BaseModel):
    """
    Listing record

    Owned by the listing store. The filter engine only reads it, so the
    model is frozen and every collection field is immutable.
    """
    model_config = ConfigDict(frozen=True)

    # === Identity ===
    id: str = Field(
        description="Stable unique listing id",
        examples=["1"]
    )
    title: str = Field(default="", examples=["Apartamento Moderno T3 na Polana"])
    description: Optional[str] = None

    # === Transaction ===
    listing_kind: ListingKind
    property_kind: PropertyKind
    price: float = Field(ge=0, examples=[12000000])
    currency: Currency = Currency.MZN

    # === Size ===
    bedroom_count: Optional[int] = Field(
        default=None,
        ge=0,
        description="Number of bedrooms, absent when not applicable (e.g. land)"
    )
    bathroom_count: Optional[int] = Field(default=None, ge=0)
    area_sqm: float = Field(gt=0, description="Area in square meters")

    # === Location & amenities ===
    location: Location
    amenities: frozenset[Amenity] = Field(default_factory=frozenset)

    # === Ranking ===
    is_featured: bool = Field(
        default=False,
        description="True while a paid boost is active"
    )
    created_at: datetime

    views: int = Field(default=0, ge=0)

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # naive and aware timestamps must stay comparable when ranking
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_summary(self) -> str:
        """Short one-line description"""
        parts = [self.title or self.id]
        parts.append(f"{self.property_kind.value}/{self.listing_kind.value}")
        parts.append(f"{self.price:,.0f} {self.currency.value}")
        if self.bedroom_count is not None:
            parts.append(f"T{self.bedroom_count}")
        parts.append(f"{self.location.city}")
        if self.is_featured:
            parts.append("featured")
        return " | ".join(parts)
