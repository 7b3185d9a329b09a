"""
Ranking
Featured listings first, newest first within the same featured status.
"""

from datetime import datetime
from typing import Iterable

from imoveis.schemas.listing import ListingRecord


def rank_key(record: ListingRecord) -> tuple[bool, datetime]:
    """Composite sort key, compared in descending order"""
    return (record.is_featured, record.created_at)


def rank(records: Iterable[ListingRecord]) -> list[ListingRecord]:
    """
    Sorts listings by (is_featured, created_at) descending.

    sorted() keeps equal keys in input order even with reverse=True,
    so exact ties come out in the order they went in.

    Args:
        records: listings to order (not modified)

    Returns:
        A new, ranked list
    """
    return sorted(records, key=rank_key, reverse=True)
