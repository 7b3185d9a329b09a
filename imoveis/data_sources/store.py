"""
Listing store
Supplies listing snapshots to the search service.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Union

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from imoveis.config import settings
from imoveis.schemas.listing import ListingRecord


class ListingStoreError(Exception):
    """Listing data could not be loaded"""
    pass


class ListingNotFoundError(ListingStoreError):
    """No listing with the requested id"""

    def __init__(self, listing_id: str):
        super().__init__(f"Listing not found: {listing_id}")
        self.listing_id = listing_id


_listing_list = TypeAdapter(list[ListingRecord])


class ListingStore(ABC):
    """
    Listing store interface

    Implementations own the listings. Callers receive snapshots and must
    not rely on them staying in sync with later store changes.
    """

    @abstractmethod
    def list_all(self) -> list[ListingRecord]:
        """All listings, in store order"""
        pass

    @abstractmethod
    def get(self, listing_id: str) -> ListingRecord:
        """
        Single listing by id.

        Raises:
            ListingNotFoundError: unknown id
        """
        pass


class InMemoryListingStore(ListingStore):
    """
    In-memory listing store
    - keeps an immutable snapshot of the records it was built from
    - can be seeded from a JSON file
    """

    def __init__(self, records: Iterable[ListingRecord] = ()):
        self._records = tuple(records)
        self._by_id = {record.id: record for record in self._records}
        self.logger = logger.bind(source="InMemoryListingStore")

        if len(self._by_id) != len(self._records):
            self.logger.warning("Duplicate listing ids, last one wins on lookup")

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "InMemoryListingStore":
        """
        Loads listings from a JSON array file.

        Raises:
            ListingStoreError: file missing or content not valid listings
        """
        path = Path(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            records = _listing_list.validate_python(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Listing seed load failed ({path}): {e}")
            raise ListingStoreError(f"Cannot load listings from {path}") from e

        logger.info(f"Loaded {len(records)} listings from {path.name}")
        return cls(records)

    def list_all(self) -> list[ListingRecord]:
        return list(self._records)

    def get(self, listing_id: str) -> ListingRecord:
        try:
            return self._by_id[listing_id]
        except KeyError:
            raise ListingNotFoundError(listing_id) from None

    def __len__(self) -> int:
        return len(self._records)


# Global instance
_listing_store: ListingStore | None = None


def get_listing_store() -> ListingStore:
    """Singleton store seeded from settings.SEED_DATA_PATH"""
    global _listing_store
    if _listing_store is None:
        _listing_store = InMemoryListingStore.from_json(settings.SEED_DATA_PATH)
    return _listing_store
