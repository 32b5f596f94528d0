# equipment_search/sources/base.py
from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, TypeVar
from urllib.parse import quote

import httpx

from equipment_search.config import settings
from equipment_search.errors import SourceFailure
from equipment_search.normalizer import DEFAULT_ALIASES, AliasMap, map_listing
from equipment_search.schemas import EquipmentQuery, NormalizedListing

if TYPE_CHECKING:
    from equipment_search.sources.fallback import FallbackProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")

# EquipmentQuery attribute -> canonical query-string name
CANONICAL_PARAMS: dict[str, str] = {
    "query": "query",
    "make": "make",
    "model": "model",
    "year": "year",
    "category": "category",
    "min_price": "min_price",
    "max_price": "max_price",
}


class Strategy(str, Enum):
    PRIMARY = "primary"    # direct provider API
    FALLBACK = "fallback"  # scraping / third-party lookup


def _param_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_params(query: EquipmentQuery, names: dict[str, str]) -> dict[str, str]:
    """Query-string params for the fields present on ``query``; absent fields are omitted."""
    params: dict[str, str] = {}
    for field, name in names.items():
        value = getattr(query, field)
        if value is None or value == "":
            continue
        params[name] = _param_value(value)
    return params


class SourceAdapter:
    """One marketplace source: direct API first, fallback retrieval second.

    ``fetch`` and ``fetch_details`` never raise. Each strategy in
    :meth:`strategies` is tried in order under its own timeout and the first
    one that completes wins; when every strategy fails the adapter answers
    with an empty result.
    """

    source_id = "base"
    display_name = ""
    api_url = ""
    # settings attribute holding the API key
    credential_setting = ""
    site_url = ""
    # provider listing URL, ``{id}`` is substituted
    default_url = ""
    # key holding the record list in the API payload, None for a bare list
    results_key: Optional[str] = None
    param_names: dict[str, str] = CANONICAL_PARAMS
    aliases: AliasMap = DEFAULT_ALIASES
    title_fields: tuple[str, ...] = ("make", "model")
    # simulated latency of the sample catalog, seconds
    fallback_delay = 0.0

    def __init__(
        self,
        client: httpx.AsyncClient,
        fallback: "FallbackProvider",
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.fallback = fallback
        self.api_key = api_key
        self.timeout = timeout if timeout is not None else settings.SOURCE_TIMEOUT_SECONDS

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def strategies(self) -> list[Strategy]:
        if self.has_credentials:
            return [Strategy.PRIMARY, Strategy.FALLBACK]
        return [Strategy.FALLBACK]

    # ------------------------ public contract ------------------------

    async def fetch(self, query: EquipmentQuery) -> list[NormalizedListing]:
        attempts = {
            Strategy.PRIMARY: lambda: self.search_api(query),
            Strategy.FALLBACK: lambda: self.fallback.search(self, query),
        }
        return await self._first_success("search", attempts, [])

    async def fetch_details(self, equipment_id: str) -> Optional[NormalizedListing]:
        attempts = {
            Strategy.PRIMARY: lambda: self.details_api(equipment_id),
            Strategy.FALLBACK: lambda: self.fallback.details(self, equipment_id),
        }
        return await self._first_success("details", attempts, None)

    async def _first_success(
        self,
        action: str,
        attempts: dict[Strategy, Callable[[], Awaitable[T]]],
        empty: T,
    ) -> T:
        strategies = self.strategies()
        if Strategy.PRIMARY not in strategies:
            logger.info("[%s] no API key configured, using fallback for %s", self.source_id, action)
        for strategy in strategies:
            try:
                result = await asyncio.wait_for(attempts[strategy](), timeout=self.timeout)
            except asyncio.TimeoutError:
                logger.warning("[%s] %s %s timed out after %ss", self.source_id, strategy.value, action, self.timeout)
            except Exception as exc:
                logger.warning("[%s] %s %s failed: %s", self.source_id, strategy.value, action, exc)
            else:
                return result
        logger.warning("[%s] every strategy failed for %s, returning no results", self.source_id, action)
        return empty

    # ------------------------- direct API -------------------------

    def build_params(self, query: EquipmentQuery) -> dict[str, str]:
        return build_params(query, self.param_names)

    async def search_api(self, query: EquipmentQuery) -> list[NormalizedListing]:
        data = await self._get_json(self.api_url, params=self.build_params(query))
        return [self.to_listing(record) for record in self.extract_records(data)]

    async def details_api(self, equipment_id: str) -> Optional[NormalizedListing]:
        data = await self._get_json(f"{self.api_url}/{quote(equipment_id, safe='')}")
        if not isinstance(data, dict):
            raise SourceFailure(self.source_id, "unexpected details payload")
        return self.to_listing(data)

    def extract_records(self, data: Any) -> list:
        if self.results_key is None:
            records = data
        elif isinstance(data, dict):
            records = data.get(self.results_key) or []
        else:
            raise SourceFailure(self.source_id, f"expected an object holding {self.results_key!r}")
        if not isinstance(records, list):
            raise SourceFailure(self.source_id, "expected a list of listings")
        return records

    def to_listing(self, record: Any) -> NormalizedListing:
        return map_listing(
            record,
            source_id=self.source_id,
            source_name=self.display_name,
            aliases=self.aliases,
            default_url=self.default_url,
            title_fields=self.title_fields,
        )

    async def _get_json(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        r = await self.client.get(
            url,
            params=params,
            headers={"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"},
        )
        if not r.is_success:
            raise SourceFailure(self.source_id, f"API request failed with status {r.status_code}")
        try:
            return r.json()
        except ValueError as exc:
            raise SourceFailure(self.source_id, "API returned invalid JSON") from exc
