# equipment_search/sources/registry.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

import httpx

from equipment_search.config import Settings, settings
from equipment_search.sources.base import SourceAdapter
from equipment_search.sources.equipment_watch import EquipmentWatchAdapter
from equipment_search.sources.fallback import FallbackProvider, SampleCatalogFallback, ScrapingServiceFallback
from equipment_search.sources.iron_planet import IronPlanetAdapter
from equipment_search.sources.machinery_trader import MachineryTraderAdapter
from equipment_search.sources.mascus import MascusAdapter

logger = logging.getLogger(__name__)

# Registry order is the fan-out order, and so the pre-sort concatenation order.
ADAPTER_CLASSES: dict[str, type[SourceAdapter]] = {
    cls.source_id: cls
    for cls in (EquipmentWatchAdapter, MascusAdapter, MachineryTraderAdapter, IronPlanetAdapter)
}


class SourceRegistry:
    """Maps source identifiers to adapter instances."""

    def __init__(self, adapters: Iterable[SourceAdapter]):
        self._adapters: dict[str, SourceAdapter] = {}
        for adapter in adapters:
            if adapter.source_id in self._adapters:
                raise ValueError(f"duplicate source id {adapter.source_id!r}")
            self._adapters[adapter.source_id] = adapter

    @property
    def known_ids(self) -> list[str]:
        return list(self._adapters)

    def __contains__(self, source_id: str) -> bool:
        return source_id in self._adapters

    def get(self, source_id: str) -> Optional[SourceAdapter]:
        return self._adapters.get(source_id)

    def resolve(self, source_ids: Optional[Iterable[str]] = None) -> list[SourceAdapter]:
        """Adapters for ``source_ids`` in registry order; None selects every source.

        Unknown identifiers are ignored and duplicates collapse to one adapter.
        """
        if source_ids is None:
            return list(self._adapters.values())
        requested = set(source_ids)
        unknown = sorted(requested - self._adapters.keys())
        if unknown:
            logger.warning("ignoring unknown sources: %s", ", ".join(unknown))
        return [adapter for sid, adapter in self._adapters.items() if sid in requested]


def build_fallback(client: httpx.AsyncClient, cfg: Settings = settings) -> FallbackProvider:
    if cfg.SCRAPER_SERVICE_URL:
        return ScrapingServiceFallback(client, cfg.SCRAPER_SERVICE_URL, cfg.SCRAPER_SERVICE_API_KEY)
    return SampleCatalogFallback(simulate_delay=cfg.SIMULATE_FALLBACK_DELAY)


def build_registry(
    client: httpx.AsyncClient,
    cfg: Settings = settings,
    fallback: Optional[FallbackProvider] = None,
) -> SourceRegistry:
    fallback = fallback or build_fallback(client, cfg)
    return SourceRegistry(
        cls(
            client,
            fallback,
            api_key=getattr(cfg, cls.credential_setting, None),
            timeout=cfg.SOURCE_TIMEOUT_SECONDS,
        )
        for cls in ADAPTER_CLASSES.values()
    )
