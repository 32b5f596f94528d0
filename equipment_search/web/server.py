# equipment_search/web/server.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from equipment_search.config import Settings, settings
from equipment_search.errors import APIError, AggregationFailure
from equipment_search.schemas import (
    EquipmentDetailsRequest,
    EquipmentQuery,
    MarketValueEstimate,
    MarketValueRequest,
    NormalizedListing,
    SimilarEquipmentRequest,
)
from equipment_search.services.aggregator import Aggregator
from equipment_search.services.details import EquipmentDetailsService
from equipment_search.services.market_value import MarketValueService, ValueEstimator
from equipment_search.services.search import QueryService
from equipment_search.services.similar import SimilarEquipmentService
from equipment_search.sources.registry import SourceRegistry, build_registry

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def create_app(
    registry: Optional[SourceRegistry] = None,
    cfg: Settings = settings,
    estimator: Optional[ValueEstimator] = None,
) -> FastAPI:
    # one outbound client for the whole process, closed on shutdown
    client: Optional[httpx.AsyncClient] = None
    if registry is None:
        client = httpx.AsyncClient(
            timeout=cfg.SOURCE_TIMEOUT_SECONDS,
            follow_redirects=True,
            headers={"User-Agent": "Mozilla/5.0 (compatible; EquipmentSearch/0.1)"},
        )
        registry = build_registry(client, cfg)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if client is not None:
            await client.aclose()

    search = QueryService(Aggregator(registry))
    details = EquipmentDetailsService(registry)
    similar = SimilarEquipmentService(details, search, cfg.SIMILAR_DEFAULT_LIMIT)
    market_value = MarketValueService(search, estimator, cfg)

    app = FastAPI(title="Equipment Search Aggregator", lifespan=lifespan)

    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(APIError)
    async def api_error(request: Request, exc: APIError):
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.info("rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse({"error": "Invalid request body"}, status_code=400)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("unhandled error on %s", request.url.path)
        return JSONResponse(AggregationFailure().to_dict(), status_code=500, headers=CORS_HEADERS)

    @app.get("/healthz")
    async def healthz():
        return {"ok": True, "sources": registry.known_ids}

    @app.post("/search-equipment-sources", response_model=List[NormalizedListing])
    async def search_equipment_sources(query: EquipmentQuery):
        return await search.search(query)

    @app.post("/get-equipment-details", response_model=NormalizedListing)
    async def get_equipment_details(body: EquipmentDetailsRequest):
        return await details.get(body.source_id, body.equipment_id)

    @app.post("/get-similar-equipment", response_model=List[NormalizedListing])
    async def get_similar_equipment(body: SimilarEquipmentRequest):
        return await similar.find(body.source_id, body.equipment_id, body.limit)

    @app.post("/get-market-value-estimate", response_model=MarketValueEstimate)
    async def get_market_value_estimate(body: MarketValueRequest):
        return await market_value.estimate(body)

    return app
