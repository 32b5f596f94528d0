# equipment_search/services/search.py
import logging
from typing import List

from equipment_search.errors import AggregationFailure, APIError, QueryValidationError
from equipment_search.processing import process_results
from equipment_search.schemas import EquipmentQuery, NormalizedListing
from equipment_search.services.aggregator import Aggregator

logger = logging.getLogger(__name__)


def validate_query(query: EquipmentQuery) -> EquipmentQuery:
    if not query.has_search_terms:
        raise QueryValidationError("At least one search parameter is required")
    return query


class QueryService:
    """Validates a query, runs the aggregate search and orders the result."""

    def __init__(self, aggregator: Aggregator):
        self.aggregator = aggregator

    async def search(self, query: EquipmentQuery) -> List[NormalizedListing]:
        validate_query(query)
        try:
            listings = await self.aggregator.search(query)
            return process_results(listings, query)
        except APIError:
            raise
        except Exception as exc:
            logger.exception("equipment search failed")
            raise AggregationFailure() from exc
