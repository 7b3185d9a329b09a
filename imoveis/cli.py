"""
Imoveis search CLI

Usage:
    imoveis-search featured [limit]               # featured carousel
    imoveis-search search key=value ...           # ranked search
    imoveis-search search listing_kind=sale required_amenities=pool,garage
    imoveis-search search query=piscina           # text in title or description
    imoveis-search catalog                        # provinces and cities
"""

import sys

from imoveis.config import setup_logging
from imoveis.data_sources import get_catalog, get_listing_store
from imoveis.schemas.criteria import FilterCriteria
from imoveis.schemas.listing import ListingRecord
from imoveis.services.search import ListingSearchService

# arguments that steer paging rather than filtering
_PAGING_KEYS = {"page", "page_size"}


def parse_criteria_args(args: list[str]) -> tuple[FilterCriteria, dict]:
    """
    Turns key=value arguments into criteria and paging options.

    Raises:
        ValueError: argument without '=' or invalid criteria
    """
    values = {}
    paging = {}

    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got: {arg}")

        if key in _PAGING_KEYS:
            paging[key] = int(value)
        elif key == "required_amenities":
            values[key] = [item for item in value.split(",") if item]
        else:
            values[key] = value

    # pydantic.ValidationError is a ValueError
    return FilterCriteria.model_validate(values), paging


def _print_listings(listings: list[ListingRecord]):
    if not listings:
        print("  (no listings)")
        return
    for listing in listings:
        print(f"  [{listing.id}] {listing.to_summary()}")


def cmd_featured(limit: int | None = None):
    """Featured listings"""
    service = ListingSearchService(get_listing_store())
    print("=" * 60)
    print("Featured listings")
    print("=" * 60)
    _print_listings(service.featured(limit=limit))


def cmd_search(args: list[str]):
    """Ranked search"""
    criteria, paging = parse_criteria_args(args)
    service = ListingSearchService(get_listing_store())
    result = service.search(criteria, **paging)

    print("=" * 60)
    print(f"Criteria: {criteria.model_dump(exclude_none=True) or 'none'}")
    print(f"Matches: {result.total_count} (page {result.page})")
    print("-" * 60)
    _print_listings(result.items)


def cmd_catalog():
    """Provinces and their cities"""
    catalog = get_catalog()
    for province_id, label in catalog.PROVINCES.items():
        cities = ", ".join(city["id"] for city in catalog.get_cities(province_id))
        print(f"  {province_id:<14} {label:<14} {cities}")


def print_help():
    print(__doc__)


def main():
    setup_logging("WARNING")

    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1].lower()

    if command == "featured":
        try:
            limit = int(sys.argv[2]) if len(sys.argv) > 2 else None
        except ValueError:
            print(f"Invalid limit: {sys.argv[2]}")
            sys.exit(2)
        cmd_featured(limit)
    elif command == "search":
        try:
            cmd_search(sys.argv[2:])
        except ValueError as e:
            print(f"Invalid search: {e}")
            sys.exit(2)
    elif command == "catalog":
        cmd_catalog()
    elif command in ["help", "-h", "--help"]:
        print_help()
    else:
        print(f"Unknown command: {command}")
        print_help()


if __name__ == "__main__":
    main()
