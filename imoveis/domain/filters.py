"""
Filter engine
Rule based listing filtering and ranking.
"""

from typing import Any, Callable, Iterable

from loguru import logger

from imoveis.schemas.criteria import FilterCriteria
from imoveis.schemas.listing import Amenity, ListingRecord
from imoveis.schemas.results import FilterResult, FilterStatus
from .ranking import rank


class FilterEngine:
    """
    Rule based filter engine

    Keeps a listing only when it satisfies every criterion that is
    present. The engine is stateless: it never stores, caches or mutates
    the listings it is given, and it raises nothing for contradictory
    criteria (they just match nothing).
    """

    def __init__(self):
        # criterion name -> check function returning (passed, reason)
        self._filters: dict[str, Callable[[ListingRecord, Any], tuple[bool, str]]] = {
            "query": self._check_query,
            "property_kind": self._check_property_kind,
            "listing_kind": self._check_listing_kind,
            "province": self._check_province,
            "city": self._check_city,
            "min_price": self._check_min_price,
            "max_price": self._check_max_price,
            "min_bedrooms": self._check_min_bedrooms,
            "min_bathrooms": self._check_min_bathrooms,
            "required_amenities": self._check_amenities,
        }

    def _active_checks(self, criteria: FilterCriteria):
        for field_name, check_func in self._filters.items():
            condition_value = getattr(criteria, field_name, None)

            # absent criterion never excludes
            if condition_value is None:
                continue

            yield field_name, check_func, condition_value

    def matches(self, listing: ListingRecord, criteria: FilterCriteria) -> bool:
        """True when the listing satisfies every present criterion."""
        for _, check_func, condition_value in self._active_checks(criteria):
            is_pass, _ = check_func(listing, condition_value)
            if not is_pass:
                return False
        return True

    def evaluate(self, listing: ListingRecord, criteria: FilterCriteria) -> FilterResult:
        """
        Checks every present criterion and explains the outcome.

        Args:
            listing: listing to check
            criteria: filter criteria

        Returns:
            FilterResult: pass/fail with the reason for each failed criterion
        """
        passed = []
        failed = []
        failure_reasons = {}

        for field_name, check_func, condition_value in self._active_checks(criteria):
            is_pass, reason = check_func(listing, condition_value)

            if is_pass:
                passed.append(field_name)
            else:
                failed.append(field_name)
                failure_reasons[field_name] = reason

        result = FilterResult(
            listing_id=listing.id,
            status=FilterStatus.FAIL if failed else FilterStatus.PASS,
            passed_conditions=passed,
            failed_conditions=failed,
            failure_reasons=failure_reasons,
        )

        logger.debug(f"Filter result for {listing.id}: {result.status.value}")
        return result

    def filter_and_rank(
        self,
        records: Iterable[ListingRecord],
        criteria: FilterCriteria,
    ) -> list[ListingRecord]:
        """
        Narrows listings to the matching ones and ranks them.

        Matching listings are ordered featured first, then by created_at
        (newest first). Ties keep their input order. No limit is applied;
        callers slice the result for pages or carousels.

        Args:
            records: candidate listings (any iterable, left untouched)
            criteria: filter criteria, possibly empty

        Returns:
            A new ranked list of matching listings
        """
        candidates = list(records)
        kept = [listing for listing in candidates if self.matches(listing, criteria)]

        logger.debug(
            f"Filtered {len(kept)}/{len(candidates)} listings "
            f"(criteria: {criteria.active_fields() or 'none'})"
        )
        return rank(kept)

    # === Individual checks ===

    def _check_query(self, listing: ListingRecord, query: str) -> tuple[bool, str]:
        needle = query.casefold()
        for text in (listing.title, listing.description):
            if text and needle in text.casefold():
                return True, ""
        return False, f"no \"{query}\" in title or description"

    def _check_property_kind(self, listing: ListingRecord, kind) -> tuple[bool, str]:
        if listing.property_kind == kind:
            return True, ""
        return False, f"property kind {listing.property_kind.value} != {kind.value}"

    def _check_listing_kind(self, listing: ListingRecord, kind) -> tuple[bool, str]:
        if listing.listing_kind == kind:
            return True, ""
        return False, f"listing kind {listing.listing_kind.value} != {kind.value}"

    def _check_province(self, listing: ListingRecord, province: str) -> tuple[bool, str]:
        # exact match, callers normalize identifiers
        if listing.location.province == province:
            return True, ""
        return False, f"province {listing.location.province} != {province}"

    def _check_city(self, listing: ListingRecord, city: str) -> tuple[bool, str]:
        if listing.location.city == city:
            return True, ""
        return False, f"city {listing.location.city} != {city}"

    def _check_min_price(self, listing: ListingRecord, min_val: float) -> tuple[bool, str]:
        if listing.price >= min_val:
            return True, ""
        return False, f"price {listing.price:,.0f} < min {min_val:,.0f}"

    def _check_max_price(self, listing: ListingRecord, max_val: float) -> tuple[bool, str]:
        if listing.price <= max_val:
            return True, ""
        return False, f"price {listing.price:,.0f} > max {max_val:,.0f}"

    def _check_min_bedrooms(self, listing: ListingRecord, min_val: int) -> tuple[bool, str]:
        # missing count compares as zero
        count = listing.bedroom_count or 0
        if count >= min_val:
            return True, ""
        if listing.bedroom_count is None:
            return False, f"no bedroom count < min {min_val}"
        return False, f"{count} bedrooms < min {min_val}"

    def _check_min_bathrooms(self, listing: ListingRecord, min_val: int) -> tuple[bool, str]:
        count = listing.bathroom_count or 0
        if count >= min_val:
            return True, ""
        if listing.bathroom_count is None:
            return False, f"no bathroom count < min {min_val}"
        return False, f"{count} bathrooms < min {min_val}"

    def _check_amenities(
        self, listing: ListingRecord, required: frozenset[Amenity]
    ) -> tuple[bool, str]:
        missing = required - listing.amenities
        if not missing:
            return True, ""
        names = ", ".join(sorted(a.value for a in missing))
        return False, f"missing amenities: {names}"


_default_engine = FilterEngine()


def filter_and_rank(
    records: Iterable[ListingRecord],
    criteria: FilterCriteria,
) -> list[ListingRecord]:
    """Module level shortcut over a shared FilterEngine."""
    return _default_engine.filter_and_rank(records, criteria)
