# equipment_search/services/details.py
import logging

from equipment_search.errors import NotFoundError, QueryValidationError
from equipment_search.schemas import NormalizedListing
from equipment_search.sources.registry import SourceRegistry

logger = logging.getLogger(__name__)


class EquipmentDetailsService:
    def __init__(self, registry: SourceRegistry):
        self.registry = registry

    async def get(self, source_id: str | None, equipment_id: str | None) -> NormalizedListing:
        if not source_id or not equipment_id:
            raise QueryValidationError("Source ID and equipment ID are required")
        adapter = self.registry.get(source_id)
        if adapter is None:
            raise QueryValidationError("Invalid source ID")

        listing = await adapter.fetch_details(equipment_id)
        if listing is None:
            logger.info("[%s] no listing with id %s", source_id, equipment_id)
            raise NotFoundError()
        return listing
