import pytest

from equipment_search.config import Settings
from equipment_search.errors import QueryValidationError
from equipment_search.schemas import MarketValueEstimate, MarketValueRequest
from equipment_search.services.aggregator import Aggregator
from equipment_search.services.market_value import (
    MarketValueService,
    ValueEstimator,
    estimate_from_listings,
)
from equipment_search.services.search import QueryService
from equipment_search.sources.registry import SourceRegistry

from helpers import StaticAdapter, make_listing

CFG = Settings(_env_file=None)


def _search(*listings):
    return QueryService(Aggregator(SourceRegistry([StaticAdapter("mascus", listings)])))


def test_estimate_from_listings_applies_band():
    listings = [make_listing("mascus", "a", 80000), make_listing("mascus", "b", 100000)]
    estimate = estimate_from_listings(listings, 0.9, 1.1, 0.8)
    assert estimate.estimated_value == 90000
    assert estimate.value_range == (72000, 110000)
    assert estimate.confidence == 0.8


def test_estimate_from_no_listings_is_none():
    assert estimate_from_listings([], 0.9, 1.1, 0.8) is None


@pytest.mark.asyncio
async def test_market_data_drives_the_estimate():
    service = MarketValueService(_search(make_listing("mascus", "a", 85000), make_listing("mascus", "b", 65000)), cfg=CFG)

    estimate = await service.estimate(MarketValueRequest(make="CAT", model="320D L"))
    assert estimate.model_dump(by_alias=True) == {
        "estimatedValue": 75000,
        "valueRange": (58500, 93500),
        "confidence": 0.8,
    }


@pytest.mark.asyncio
async def test_band_factors_are_configurable():
    cfg = Settings(MARKET_VALUE_LOW_FACTOR=0.5, MARKET_VALUE_HIGH_FACTOR=2.0, _env_file=None)
    service = MarketValueService(_search(make_listing("mascus", "a", 1000)), cfg=cfg)

    estimate = await service.estimate(MarketValueRequest(make="CAT", model="D6"))
    assert estimate.value_range == (500, 2000)


@pytest.mark.asyncio
async def test_no_market_data_uses_independent_estimator():
    class FixedEstimator(ValueEstimator):
        async def estimate(self, request):
            return MarketValueEstimate(estimated_value=123, value_range=(100, 150), confidence=0.5)

    service = MarketValueService(_search(), estimator=FixedEstimator(), cfg=CFG)
    estimate = await service.estimate(MarketValueRequest(make="CAT", model="D6"))
    assert estimate.estimated_value == 123


@pytest.mark.asyncio
async def test_failing_estimator_falls_back_to_configured_estimate():
    class BrokenEstimator(ValueEstimator):
        async def estimate(self, request):
            raise RuntimeError("model unavailable")

    service = MarketValueService(_search(), estimator=BrokenEstimator(), cfg=CFG)
    estimate = await service.estimate(MarketValueRequest(make="CAT", model="D6"))
    assert (estimate.estimated_value, estimate.value_range, estimate.confidence) == (50000, (40000, 60000), 0.3)


@pytest.mark.asyncio
async def test_market_data_failure_is_treated_as_no_data():
    class BrokenAdapter(StaticAdapter):
        async def fetch(self, query):
            raise RuntimeError("bug")

    search = QueryService(Aggregator(SourceRegistry([BrokenAdapter("mascus")])))
    estimate = await MarketValueService(search, cfg=CFG).estimate(MarketValueRequest(make="CAT", model="D6"))
    assert estimate.estimated_value == 50000


@pytest.mark.asyncio
@pytest.mark.parametrize("request_body", [MarketValueRequest(make="CAT"), MarketValueRequest(model="D6")])
async def test_make_and_model_are_required(request_body):
    with pytest.raises(QueryValidationError):
        await MarketValueService(_search(), cfg=CFG).estimate(request_body)


@pytest.mark.asyncio
async def test_year_is_forwarded_to_the_search():
    adapter = StaticAdapter("mascus", [make_listing("mascus", "a", 1000, year="2019"), make_listing("mascus", "b", 9000, year="2020")])
    search = QueryService(Aggregator(SourceRegistry([adapter])))

    estimate = await MarketValueService(search, cfg=CFG).estimate(MarketValueRequest(make="CAT", model="D6", year="2019"))
    assert adapter.queries[0].year == "2019"
    assert estimate.estimated_value == 1000
