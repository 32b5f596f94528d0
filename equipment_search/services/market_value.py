# equipment_search/services/market_value.py
"""Market value estimation on top of the aggregate search.

When the aggregate returns listings, the estimate is their average price with
a band of ``min * low_factor`` to ``max * high_factor``. Otherwise an
independent :class:`ValueEstimator` answers.
"""
import logging
import math
from typing import Optional, Sequence

from equipment_search.config import Settings, settings
from equipment_search.errors import QueryValidationError
from equipment_search.schemas import EquipmentQuery, MarketValueEstimate, MarketValueRequest, NormalizedListing
from equipment_search.services.search import QueryService

logger = logging.getLogger(__name__)


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_from_listings(
    listings: Sequence[NormalizedListing],
    low_factor: float,
    high_factor: float,
    confidence: float,
) -> Optional[MarketValueEstimate]:
    if not listings:
        return None
    prices = [l.price for l in listings]
    return MarketValueEstimate(
        estimated_value=_round(sum(prices) / len(prices)),
        value_range=(_round(min(prices) * low_factor), _round(max(prices) * high_factor)),
        confidence=confidence,
    )


class ValueEstimator:
    async def estimate(self, request: MarketValueRequest) -> MarketValueEstimate:
        raise NotImplementedError


class StaticValueEstimator(ValueEstimator):
    """Configured fixed estimate, used when no market data is available."""

    def __init__(self, cfg: Settings = settings):
        self.cfg = cfg

    async def estimate(self, request: MarketValueRequest) -> MarketValueEstimate:
        return MarketValueEstimate(
            estimated_value=self.cfg.FALLBACK_ESTIMATE_VALUE,
            value_range=(self.cfg.FALLBACK_ESTIMATE_LOW, self.cfg.FALLBACK_ESTIMATE_HIGH),
            confidence=self.cfg.FALLBACK_ESTIMATE_CONFIDENCE,
        )


class MarketValueService:
    def __init__(self, search: QueryService, estimator: Optional[ValueEstimator] = None, cfg: Settings = settings):
        self.search = search
        self.cfg = cfg
        self.default_estimator = StaticValueEstimator(cfg)
        self.estimator = estimator or self.default_estimator

    async def estimate(self, request: MarketValueRequest) -> MarketValueEstimate:
        if not request.make or not request.model:
            raise QueryValidationError("Make and model are required")

        listings: Sequence[NormalizedListing] = []
        try:
            listings = await self.search.search(
                EquipmentQuery(make=request.make, model=request.model, year=request.year)
            )
        except Exception:
            logger.exception("market data lookup failed for %s %s", request.make, request.model)

        estimate = estimate_from_listings(
            listings,
            self.cfg.MARKET_VALUE_LOW_FACTOR,
            self.cfg.MARKET_VALUE_HIGH_FACTOR,
            self.cfg.MARKET_DATA_CONFIDENCE,
        )
        if estimate is not None:
            return estimate

        try:
            return await self.estimator.estimate(request)
        except Exception:
            logger.exception("value estimator failed, using configured estimate")
            return await self.default_estimator.estimate(request)
