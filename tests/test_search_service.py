"""
Imoveis tests - Search service & listing store
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from imoveis.config import settings
from imoveis.data_sources import (
    InMemoryListingStore,
    ListingNotFoundError,
    ListingStoreError,
    get_catalog,
)
from imoveis.schemas.criteria import FilterCriteria
from imoveis.schemas.listing import ListingKind
from imoveis.schemas.results import FilterStatus
from imoveis.services import ListingSearchService, paginate

from factories import make_listing

BASE = datetime(2023, 1, 1, tzinfo=timezone.utc)


def _ids(listings):
    return [listing.id for listing in listings]


class TestPaginate:

    def test_slices_one_based_pages(self):
        items = list(range(7))

        assert paginate(items, 1, 3) == [0, 1, 2]
        assert paginate(items, 3, 3) == [6]
        assert paginate(items, 4, 3) == []

    @pytest.mark.parametrize("page,page_size", [(0, 10), (1, 0), (-1, -1)])
    def test_invalid_arguments(self, page, page_size):
        with pytest.raises(ValueError):
            paginate([1, 2, 3], page, page_size)


class TestListingSearchService:
    """Service truncation on top of the engine"""

    def setup_method(self):
        # 12 featured sale listings, 13 plain rent listings, newest last
        records = [
            make_listing(
                f"f{i:02d}",
                featured=True,
                created=BASE + timedelta(days=i),
            )
            for i in range(12)
        ] + [
            make_listing(
                f"r{i:02d}",
                listing_kind=ListingKind.RENT,
                created=BASE + timedelta(days=i),
            )
            for i in range(13)
        ]
        self.store = InMemoryListingStore(records)
        self.service = ListingSearchService(self.store)

    def test_search_first_page(self):
        result = self.service.search(FilterCriteria(), page=1, page_size=10)

        assert result.total_count == 25
        assert len(result.items) == 10
        assert result.has_next
        assert _ids(result.items)[:2] == ["f11", "f10"]

    def test_search_last_page(self):
        result = self.service.search(FilterCriteria(), page=3, page_size=10)

        assert _ids(result.items) == ["r04", "r03", "r02", "r01", "r00"]
        assert not result.has_next

    def test_pages_are_consistent(self):
        """Concatenated pages equal the full ranking"""
        pages = [
            self.service.search(FilterCriteria(), page=p, page_size=7).items
            for p in range(1, 5)
        ]
        full = self.service.search(FilterCriteria(), page_size=100).items

        assert [item for page in pages for item in page] == full

    def test_search_uses_default_page_size(self):
        result = self.service.search(FilterCriteria())

        assert result.page_size == settings.DEFAULT_PAGE_SIZE

    def test_page_size_is_clamped(self):
        result = self.service.search(FilterCriteria(), page_size=10_000)

        assert result.page_size == settings.MAX_PAGE_SIZE

    def test_page_size_below_one_is_clamped(self):
        result = self.service.search(FilterCriteria(), page_size=0)

        assert result.page_size == 1
        assert _ids(result.items) == ["f11"]
        assert result.has_next

    def test_search_by_text(self):
        result = self.service.search(FilterCriteria(query="LISTING r0"))

        assert result.total_count == 10
        assert all(item.id.startswith("r0") for item in result.items)

    def test_search_with_criteria(self):
        result = self.service.search(FilterCriteria(listing_kind=ListingKind.RENT))

        assert result.total_count == 13
        assert all(item.listing_kind == ListingKind.RENT for item in result.items)

    def test_featured_is_limited_to_featured(self):
        featured = self.service.featured(limit=10)

        assert len(featured) == 10
        assert all(item.is_featured for item in featured)
        assert _ids(featured)[0] == "f11"

    def test_featured_never_pads_with_plain_listings(self):
        featured = self.service.featured(limit=50)

        assert len(featured) == 12

    def test_recent(self):
        recent = self.service.recent(limit=3)

        assert _ids(recent) == ["f11", "f10", "f09"]

    def test_recent_with_criteria(self):
        recent = self.service.recent(FilterCriteria(listing_kind=ListingKind.RENT), limit=2)

        assert _ids(recent) == ["r12", "r11"]

    def test_get_and_explain(self):
        assert self.service.get("r00").id == "r00"

        result = self.service.explain("r00", FilterCriteria(listing_kind=ListingKind.SALE))
        assert result.status == FilterStatus.FAIL
        assert result.failed_conditions == ["listing_kind"]

    def test_unknown_listing(self):
        with pytest.raises(ListingNotFoundError):
            self.service.get("missing")


class TestInMemoryListingStore:
    """JSON seeding"""

    def test_seed_file_loads(self):
        store = InMemoryListingStore.from_json(settings.SEED_DATA_PATH)

        assert len(store) == 5
        assert store.get("4").bedroom_count is None

    def test_seed_data_featured_order(self):
        service = ListingSearchService(InMemoryListingStore.from_json(settings.SEED_DATA_PATH))

        assert _ids(service.featured()) == ["1", "2", "5"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ListingStoreError):
            InMemoryListingStore.from_json(tmp_path / "nope.json")

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"id": "1", "price": -5}]), encoding="utf-8")

        with pytest.raises(ListingStoreError):
            InMemoryListingStore.from_json(path)

    def test_list_all_returns_copy(self):
        store = InMemoryListingStore([make_listing("a")])

        snapshot = store.list_all()
        snapshot.clear()

        assert len(store.list_all()) == 1


class TestCatalog:

    def setup_method(self):
        self.catalog = get_catalog()

    def test_cities(self):
        assert {c["id"] for c in self.catalog.get_cities("gaza")} == {"xai_xai", "chokwe"}
        assert self.catalog.get_cities("niassa") == []

    def test_containment_is_advisory(self):
        assert self.catalog.is_city_in_province("maputo", "matola")
        assert not self.catalog.is_city_in_province("gaza", "matola")

    def test_labels(self):
        assert self.catalog.get_province_label("zambezia") == "Zambézia"
        assert self.catalog.get_city_label("maputo_city") == "Cidade de Maputo"
        assert self.catalog.get_city_label("unknown") is None

    def test_as_dict(self):
        data = self.catalog.as_dict()

        assert len(data["provinces"]) == 10
        assert {"id": "aircon", "label": "Ar Condicionado"} in data["amenities"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
