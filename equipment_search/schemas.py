# equipment_search/schemas.py
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EquipmentQuery(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: Optional[str] = None
    category: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[str] = None
    min_price: Optional[float] = Field(default=None, alias="minPrice")
    max_price: Optional[float] = Field(default=None, alias="maxPrice")
    # None means every registered source
    source: Optional[List[str]] = None

    @property
    def has_search_terms(self) -> bool:
        return any((self.query, self.make, self.model, self.category))


class NormalizedListing(BaseModel):
    """Canonical listing record shared by every source.

    Every field is always present in the serialized output; missing provider
    data is represented as an empty string, zero or an empty collection.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    title: str = ""
    description: str = ""
    price: float = Field(default=0.0, ge=0)
    currency: str = "USD"
    year: str = ""
    make: str = ""
    model: str = ""
    category: str = ""
    condition: str = "Unknown"
    location: str = ""
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")
    source_url: str = Field(default="", alias="sourceUrl")
    source_name: str = Field(default="", alias="sourceName")
    source_id: str = Field(alias="sourceId")
    specifications: Dict[str, str] = Field(default_factory=dict)
    created_at: str = Field(default_factory=utc_now_iso, alias="createdAt")


class EquipmentDetailsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_id: Optional[str] = Field(default=None, alias="sourceId")
    equipment_id: Optional[str] = Field(default=None, alias="equipmentId")


class SimilarEquipmentRequest(EquipmentDetailsRequest):
    # 0 means the default limit
    limit: Optional[int] = Field(default=None, ge=0)


class MarketValueRequest(BaseModel):
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[str] = None
    condition: Optional[str] = None


class MarketValueEstimate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    estimated_value: int = Field(alias="estimatedValue")
    value_range: Tuple[int, int] = Field(alias="valueRange")
    confidence: float
