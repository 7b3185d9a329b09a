"""
Imoveis domain package
Rule based filtering, ranking and criteria toggles.
No I/O happens in this layer.
"""

from .filters import FilterEngine, filter_and_rank
from .ranking import rank, rank_key
from .toggles import apply_toggle, clear_criteria, toggle_amenity

__all__ = [
    "FilterEngine",
    "filter_and_rank",
    "rank",
    "rank_key",
    "apply_toggle",
    "clear_criteria",
    "toggle_amenity",
]
