# equipment_search/services/aggregator.py
import asyncio
import logging
import time
from typing import List

from equipment_search.schemas import EquipmentQuery, NormalizedListing
from equipment_search.sources.registry import SourceRegistry

logger = logging.getLogger(__name__)


class Aggregator:
    def __init__(self, registry: SourceRegistry):
        self.registry = registry

    async def search(self, query: EquipmentQuery) -> List[NormalizedListing]:
        """Query every selected source at once and concatenate their listings.

        Waits for all adapters; adapters answer with an empty list instead of
        raising, so one failing source never hides the others. Output is in
        source order, then in each source's own order.
        """
        adapters = self.registry.resolve(query.source)
        start = time.monotonic()
        tasks = [asyncio.ensure_future(adapter.fetch(query)) for adapter in adapters]
        try:
            batches = await asyncio.gather(*tasks)
        except BaseException:
            # no sibling keeps running once the search has failed
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        combined: List[NormalizedListing] = []
        for adapter, batch in zip(adapters, batches):
            logger.debug("[%s] returned %d listings", adapter.source_id, len(batch))
            combined.extend(batch)
        logger.info(
            "searched %d sources in %.2fs, %d listings",
            len(adapters), time.monotonic() - start, len(combined),
        )
        return combined
