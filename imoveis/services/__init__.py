from .search import ListingSearchService, paginate

__all__ = ["ListingSearchService", "paginate"]
