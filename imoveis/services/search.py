"""
Listing search service
Single access path from callers to the filter engine.

Every method takes a fresh snapshot from the listing store, runs it through
the FilterEngine and only then applies caller-side truncation (pages,
featured carousel, recent strip).
"""

from itertools import islice, takewhile
from typing import Optional, Sequence, TypeVar

from loguru import logger

from imoveis.config import settings
from imoveis.data_sources.store import ListingStore
from imoveis.domain.filters import FilterEngine
from imoveis.schemas.criteria import FilterCriteria
from imoveis.schemas.listing import ListingRecord
from imoveis.schemas.results import FilterResult, SearchPage

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """
    Slices one 1-based page out of a ranked sequence.

    Raises:
        ValueError: page or page_size below 1
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    start = (page - 1) * page_size
    return list(items[start:start + page_size])


class ListingSearchService:
    """
    Search service

    [search]    filter & rank -> page slice
    [featured]  rank all -> leading featured run -> limit
    [recent]    filter & rank -> limit
    """

    def __init__(self, store: ListingStore, engine: Optional[FilterEngine] = None):
        self.store = store
        self.engine = engine or FilterEngine()
        self.logger = logger.bind(component="ListingSearchService")

    def search(
        self,
        criteria: FilterCriteria,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> SearchPage:
        """
        Ranked, paged search.

        Args:
            criteria: filter criteria
            page: 1-based page number
            page_size: results per page, clamped to 1..settings.MAX_PAGE_SIZE

        Returns:
            SearchPage: the requested page and the overall match count
        """
        if page_size is None:
            page_size = settings.DEFAULT_PAGE_SIZE
        page_size = max(1, min(page_size, settings.MAX_PAGE_SIZE))

        ranked = self.engine.filter_and_rank(self.store.list_all(), criteria)
        items = paginate(ranked, page, page_size)

        self.logger.info(
            f"Search: {len(ranked)} matches, page {page} ({len(items)} items)"
        )

        return SearchPage(
            items=items,
            total_count=len(ranked),
            page=page,
            page_size=page_size,
            has_next=page * page_size < len(ranked),
        )

    def featured(self, limit: Optional[int] = None) -> list[ListingRecord]:
        """Featured listings for the home carousel, newest first."""
        if limit is None:
            limit = settings.FEATURED_LIMIT

        ranked = self.engine.filter_and_rank(self.store.list_all(), FilterCriteria())
        # featured listings always lead the ranking
        leading = takewhile(lambda listing: listing.is_featured, ranked)
        return list(islice(leading, max(limit, 0)))

    def recent(
        self,
        criteria: Optional[FilterCriteria] = None,
        limit: Optional[int] = None,
    ) -> list[ListingRecord]:
        """First results of the ranking, for the home screen strip."""
        if limit is None:
            limit = settings.RECENT_LIMIT

        ranked = self.engine.filter_and_rank(
            self.store.list_all(), criteria or FilterCriteria()
        )
        return ranked[:max(limit, 0)]

    def get(self, listing_id: str) -> ListingRecord:
        return self.store.get(listing_id)

    def explain(self, listing_id: str, criteria: FilterCriteria) -> FilterResult:
        """Why one listing does or does not match the criteria"""
        return self.engine.evaluate(self.store.get(listing_id), criteria)
