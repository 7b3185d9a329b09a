"""
Data source module
"""

from .catalog import Catalog, get_catalog
from .store import (
    InMemoryListingStore,
    ListingNotFoundError,
    ListingStore,
    ListingStoreError,
    get_listing_store,
)

__all__ = [
    "Catalog",
    "get_catalog",
    "InMemoryListingStore",
    "ListingNotFoundError",
    "ListingStore",
    "ListingStoreError",
    "get_listing_store",
]
