# equipment_search/processing.py
from typing import Iterable, List

from equipment_search.schemas import EquipmentQuery, NormalizedListing


def process_results(listings: Iterable[NormalizedListing], query: EquipmentQuery) -> List[NormalizedListing]:
    """Filter by price bounds and exact year, then sort ascending by price.

    The year filter is a plain string comparison: "2020" does not match
    "2020.0". ``sorted`` is stable, so equal prices keep their source order.
    """
    results = list(listings)
    if query.min_price is not None:
        results = [l for l in results if l.price >= query.min_price]
    if query.max_price is not None:
        results = [l for l in results if l.price <= query.max_price]
    if query.year is not None:
        results = [l for l in results if l.year == query.year]
    return sorted(results, key=lambda l: l.price)
