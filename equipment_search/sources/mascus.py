# equipment_search/sources/mascus.py
from equipment_search.normalizer import merge_aliases
from equipment_search.sources.base import CANONICAL_PARAMS, SourceAdapter


class MascusAdapter(SourceAdapter):
    source_id = "mascus"
    display_name = "Mascus"
    credential_setting = "MASCUS_API_KEY"
    api_url = "https://api.mascus.com/v1/listings"
    site_url = "https://www.mascus.com"
    default_url = "https://www.mascus.com/{id}"
    fallback_delay = 0.7

    param_names = {**CANONICAL_PARAMS, "query": "keywords"}
    aliases = merge_aliases({
        "description": ("description", "details"),
        "price": ("price", "current_bid"),
        "year": ("year", "manufacture_year"),
        "make": ("make", "brand"),
        "category": ("category", "type"),
        "location": ("location", "country"),
        "image_urls": ("images", "image_urls"),
        "specifications": ("specifications", "tech_specs"),
        "created_at": ("created_at", "listed_date"),
    })
