# equipment_search/services/similar.py
from typing import List, Optional

from equipment_search.config import settings
from equipment_search.schemas import EquipmentQuery, NormalizedListing
from equipment_search.services.details import EquipmentDetailsService
from equipment_search.services.search import QueryService


class SimilarEquipmentService:
    """Re-queries the aggregate by an item's make/model/category, minus the item itself."""

    def __init__(self, details: EquipmentDetailsService, search: QueryService, default_limit: Optional[int] = None):
        self.details = details
        self.search = search
        self.default_limit = default_limit or settings.SIMILAR_DEFAULT_LIMIT

    async def find(self, source_id: Optional[str], equipment_id: Optional[str], limit: Optional[int] = None) -> List[NormalizedListing]:
        item = await self.details.get(source_id, equipment_id)
        query = EquipmentQuery(
            make=item.make or None,
            model=item.model or None,
            category=item.category or None,
        )
        if not query.has_search_terms:
            return []

        listings = await self.search.search(query)
        # ids are only unique within a source
        similar = [l for l in listings if not (l.source_id == item.source_id and l.id == item.id)]
        return similar[: limit or self.default_limit]
