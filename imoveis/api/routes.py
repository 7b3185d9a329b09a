"""
Imoveis API router
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from imoveis.data_sources.catalog import get_catalog
from imoveis.data_sources.store import ListingNotFoundError, ListingStore, get_listing_store
from imoveis.domain.toggles import apply_toggle, toggle_amenity
from imoveis.schemas.criteria import CriteriaField, FilterCriteria
from imoveis.schemas.listing import Amenity, ListingRecord
from imoveis.schemas.results import FilterResult, SearchPage
from imoveis.services.search import ListingSearchService

router = APIRouter()


def get_search_service(
    store: ListingStore = Depends(get_listing_store),
) -> ListingSearchService:
    return ListingSearchService(store)


class SearchRequest(BaseModel):
    """Search request"""
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "criteria": {
                    "listing_kind": "sale",
                    "province": "maputo",
                    "min_bedrooms": 2,
                    "required_amenities": ["garage"],
                },
                "page": 1,
                "page_size": 20,
            }
        }
    )


class ToggleRequest(BaseModel):
    """Selector toggle request"""
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    field: CriteriaField
    value: str


class AmenityToggleRequest(BaseModel):
    """Amenity toggle request"""
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    amenity: Amenity


@router.post("/search", response_model=SearchPage)
async def search_listings(
    request: SearchRequest,
    service: ListingSearchService = Depends(get_search_service),
) -> SearchPage:
    """
    Listing search

    Filters by the given criteria, ranks featured listings first and
    newest first, and returns the requested page.
    """
    return service.search(
        request.criteria,
        page=request.page,
        page_size=request.page_size,
    )


@router.get("/featured", response_model=list[ListingRecord])
async def get_featured_listings(
    limit: Optional[int] = Query(default=None, ge=0),
    service: ListingSearchService = Depends(get_search_service),
):
    """Featured listings for the home carousel"""
    return service.featured(limit=limit)


@router.get("/recent", response_model=list[ListingRecord])
async def get_recent_listings(
    limit: Optional[int] = Query(default=None, ge=0),
    service: ListingSearchService = Depends(get_search_service),
):
    """Top ranked listings for the home screen"""
    return service.recent(limit=limit)


@router.get("/listings/{listing_id}", response_model=ListingRecord)
async def get_listing(
    listing_id: str,
    service: ListingSearchService = Depends(get_search_service),
):
    try:
        return service.get(listing_id)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/listings/{listing_id}/explain", response_model=FilterResult)
async def explain_listing(
    listing_id: str,
    criteria: FilterCriteria,
    service: ListingSearchService = Depends(get_search_service),
):
    """Which criteria a listing passes or fails"""
    try:
        return service.explain(listing_id, criteria)
    except ListingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/criteria/toggle", response_model=FilterCriteria)
async def toggle_criterion(request: ToggleRequest):
    """
    Select to filter, select again to clear

    Changing or clearing the province also clears the city.
    """
    try:
        return apply_toggle(request.criteria, request.field, request.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid value: {e}")


@router.post("/criteria/amenities/toggle", response_model=FilterCriteria)
async def toggle_required_amenity(request: AmenityToggleRequest):
    return toggle_amenity(request.criteria, request.amenity)


@router.get("/catalog")
async def get_catalog_data():
    """Provinces, cities and labels"""
    return get_catalog().as_dict()


@router.get("/schema/criteria")
async def get_criteria_schema():
    return FilterCriteria.model_json_schema()
