# equipment_search/normalizer.py
"""Best-effort mapping of provider records into :class:`NormalizedListing`.

Providers disagree on field names, so each canonical field is looked up
through an ordered alias list: the canonical name first, then the known
provider-specific aliases, then a default.
"""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, Sequence

from equipment_search.schemas import NormalizedListing, utc_now_iso

AliasMap = Mapping[str, Sequence[str]]

DEFAULT_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "title": ("title",),
    "description": ("description",),
    "price": ("price",),
    "currency": ("currency",),
    "year": ("year",),
    "make": ("make",),
    "model": ("model",),
    "category": ("category",),
    "condition": ("condition",),
    "location": ("location",),
    "image_urls": ("images",),
    "source_url": ("url",),
    "specifications": ("specifications",),
    "created_at": ("created_at",),
}

_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def merge_aliases(overrides: AliasMap) -> dict[str, tuple[str, ...]]:
    merged = dict(DEFAULT_ALIASES)
    for field, names in overrides.items():
        merged[field] = tuple(names)
    return merged


def first_present(obj: Mapping[str, Any], names: Sequence[str]):
    """Return the first truthy value found under ``names``, else None."""
    for name in names:
        value = obj.get(name)
        if value:
            return value
    return None


def parse_price(value: Any) -> float:
    """Coerce a provider price into a non-negative float, 0.0 when unusable."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        cleaned = value.replace("\xa0", " ").replace(",", "")
        m = _NUMBER_RE.search(cleaned)
        try:
            price = float(m.group(0)) if m else 0.0
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(price) or math.isinf(price) or price < 0:
        return 0.0
    return price


def format_year(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _image_urls(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return [str(u) for u in value if u]
    return []


def _specifications(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {str(k): str(v) for k, v in value.items() if v is not None}


def map_listing(
    item: Mapping[str, Any],
    *,
    source_id: str,
    source_name: str,
    aliases: Optional[AliasMap] = None,
    default_url: str = "",
    title_fields: Sequence[str] = ("make", "model"),
    default_currency: str = "USD",
) -> NormalizedListing:
    if not isinstance(item, Mapping):
        raise ValueError(f"expected an object, got {type(item).__name__}")
    names = aliases or DEFAULT_ALIASES

    def pick(field: str):
        return first_present(item, names.get(field, (field,)))

    listing_id = _text(pick("id"))
    fields = {f: _text(pick(f)) for f in ("make", "model", "category")}
    title = _text(pick("title")) or " ".join(fields[f] for f in title_fields if fields[f])

    return NormalizedListing(
        id=listing_id,
        title=title,
        description=_text(pick("description")),
        price=parse_price(pick("price")),
        currency=_text(pick("currency"), default_currency),
        year=format_year(pick("year")),
        make=fields["make"],
        model=fields["model"],
        category=fields["category"],
        condition=_text(pick("condition"), "Unknown"),
        location=_text(pick("location")),
        image_urls=_image_urls(pick("image_urls")),
        source_url=_text(pick("source_url")) or default_url.format(id=listing_id),
        source_name=source_name,
        source_id=source_id,
        specifications=_specifications(pick("specifications")),
        created_at=_text(pick("created_at")) or utc_now_iso(),
    )
