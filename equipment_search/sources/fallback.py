# equipment_search/sources/fallback.py
from __future__ import annotations

import asyncio
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from equipment_search.errors import SourceFailure
from equipment_search.schemas import EquipmentQuery, NormalizedListing
from equipment_search.sources.base import CANONICAL_PARAMS, SourceAdapter, build_params
from equipment_search.sources.catalog import SAMPLE_LISTINGS

logger = logging.getLogger(__name__)


class FallbackProvider:
    """Secondary retrieval path shared by every adapter.

    Implementations return listings in the canonical shape and may raise;
    the calling adapter turns any failure into an empty result.
    """

    async def search(self, adapter: SourceAdapter, query: EquipmentQuery) -> list[NormalizedListing]:
        raise NotImplementedError

    async def details(self, adapter: SourceAdapter, equipment_id: str) -> Optional[NormalizedListing]:
        raise NotImplementedError


class SampleCatalogFallback(FallbackProvider):
    """Serves the built-in sample catalog, shaped by the query's make/model/year/category."""

    def __init__(self, simulate_delay: bool = True):
        self.simulate_delay = simulate_delay

    async def _wait(self, adapter: SourceAdapter):
        if self.simulate_delay and adapter.fallback_delay > 0:
            await asyncio.sleep(adapter.fallback_delay)

    async def search(self, adapter: SourceAdapter, query: EquipmentQuery) -> list[NormalizedListing]:
        logger.info("[%s] serving sample catalog for %r", adapter.source_id, query.query or query.make or query.category)
        await self._wait(adapter)
        return [render_sample(sample, adapter, query) for sample in SAMPLE_LISTINGS.get(adapter.source_id, [])]

    async def details(self, adapter: SourceAdapter, equipment_id: str) -> Optional[NormalizedListing]:
        await self._wait(adapter)
        for sample in SAMPLE_LISTINGS.get(adapter.source_id, []):
            if sample["id"] == equipment_id:
                return render_sample(sample, adapter, None)
        return None


def render_sample(sample: dict, adapter: SourceAdapter, query: Optional[EquipmentQuery]) -> NormalizedListing:
    make = (query and query.make) or sample["make"]
    model = (query and query.model) or sample["model"]
    return NormalizedListing(
        id=sample["id"],
        title=f"{make} {model} {sample['kind']}",
        description=sample["description"],
        price=sample["price"],
        currency="USD",
        year=(query and query.year) or sample["year"],
        make=make,
        model=model,
        category=(query and query.category) or sample["category"],
        condition=sample["condition"],
        location=sample["location"],
        image_urls=list(sample["images"]),
        source_url=adapter.site_url,
        source_name=adapter.display_name,
        source_id=adapter.source_id,
        specifications=dict(sample["specifications"]),
    )


class ScrapingServiceFallback(FallbackProvider):
    """Third-party lookup service answering ``/<source_id>/listings`` with provider-shaped JSON."""

    def __init__(self, client: httpx.AsyncClient, base_url: str, api_key: Optional[str] = None):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def _get(self, adapter: SourceAdapter, path: str, params=None):
        url = f"{self.base_url}/{adapter.source_id}/{path}"
        r = await self.client.get(url, params=params, headers=self._headers())
        if not r.is_success:
            raise SourceFailure(adapter.source_id, f"lookup service failed with status {r.status_code}")
        try:
            return r.json()
        except ValueError as exc:
            raise SourceFailure(adapter.source_id, "lookup service returned invalid JSON") from exc

    async def search(self, adapter: SourceAdapter, query: EquipmentQuery) -> list[NormalizedListing]:
        data = await self._get(adapter, "listings", params=build_params(query, CANONICAL_PARAMS))
        if isinstance(data, dict):
            data = data.get("listings") or []
        if not isinstance(data, list):
            raise SourceFailure(adapter.source_id, "lookup service returned an unexpected payload")
        return [adapter.to_listing(record) for record in data]

    async def details(self, adapter: SourceAdapter, equipment_id: str) -> Optional[NormalizedListing]:
        data = await self._get(adapter, f"listings/{quote(equipment_id, safe='')}")
        if not data:
            return None
        if not isinstance(data, dict):
            raise SourceFailure(adapter.source_id, "lookup service returned an unexpected payload")
        return adapter.to_listing(data)
