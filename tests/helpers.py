"""Shared listing builders and adapter doubles for the test suite."""
import asyncio

import httpx

from equipment_search.schemas import NormalizedListing
from equipment_search.sources.fallback import FallbackProvider

def make_listing(source_id, listing_id, price, year="2019", **fields):
    return NormalizedListing(
        id=listing_id,
        title=fields.pop("title", f"{source_id} {listing_id}"),
        price=price,
        year=year,
        source_id=source_id,
        source_name=fields.pop("source_name", source_id.title()),
        **fields,
    )

class StaticAdapter:
    """Adapter double returning fixed listings."""

    def __init__(self, source_id, listings=(), delay=0.0, details=None):
        self.source_id = source_id
        self.listings = list(listings)
        self.delay = delay
        self.details = details or {}
        self.queries = []

    async def fetch(self, query):
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        return list(self.listings)

    async def fetch_details(self, equipment_id):
        return self.details.get(equipment_id)

class ExplodingFallback(FallbackProvider):
    def __init__(self):
        self.calls = 0

    async def search(self, adapter, query):
        self.calls += 1
        raise RuntimeError("scraping service unavailable")

    async def details(self, adapter, equipment_id):
        self.calls += 1
        raise RuntimeError("scraping service unavailable")

def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))

