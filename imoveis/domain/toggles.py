"""
Criteria toggles
"Select to filter, select again to clear" updates for FilterCriteria.
Every function returns a new criteria value and leaves its input alone.
"""

from typing import Union

from imoveis.schemas.criteria import CriteriaField, FilterCriteria
from imoveis.schemas.listing import Amenity, ListingKind, PropertyKind

# value coercion for enum valued fields
_FIELD_TYPES = {
    CriteriaField.PROPERTY_KIND: PropertyKind,
    CriteriaField.LISTING_KIND: ListingKind,
}


def apply_toggle(
    criteria: FilterCriteria,
    field: Union[CriteriaField, str],
    value,
) -> FilterCriteria:
    """
    Toggles a single-valued criterion.

    Selecting the value the criterion already holds clears it; any other
    value replaces it. Toggling the province always clears the city, since
    a city held over from another province would silently empty the
    results.

    Args:
        criteria: current criteria
        field: criterion to toggle
        value: selected value (enum member or its string value)

    Returns:
        FilterCriteria: updated copy
    """
    field = CriteriaField(field)
    value_type = _FIELD_TYPES.get(field)
    if value_type is not None:
        value = value_type(value)

    current = getattr(criteria, field.value)
    update = {field.value: None if current == value else value}

    if field is CriteriaField.PROVINCE:
        update[CriteriaField.CITY.value] = None

    return criteria.model_copy(update=update)


def toggle_amenity(criteria: FilterCriteria, amenity: Union[Amenity, str]) -> FilterCriteria:
    """Adds or removes one required amenity. An emptied set becomes absent."""
    amenity = Amenity(amenity)
    selected = criteria.required_amenities or frozenset()

    if amenity in selected:
        selected = selected - {amenity}
    else:
        selected = selected | {amenity}

    return criteria.model_copy(update={"required_amenities": selected or None})


def clear_criteria() -> FilterCriteria:
    return FilterCriteria()
