# equipment_search/sources/iron_planet.py
from equipment_search.normalizer import merge_aliases
from equipment_search.sources.base import SourceAdapter


class IronPlanetAdapter(SourceAdapter):
    source_id = "iron-planet"
    display_name = "IronPlanet"
    credential_setting = "IRON_PLANET_API_KEY"
    api_url = "https://api.ironplanet.com/v1/listings"
    site_url = "https://www.ironplanet.com"
    default_url = "https://www.ironplanet.com/listing/{id}"
    results_key = "results"
    fallback_delay = 0.55

    param_names = {
        "query": "q",
        "make": "make",
        "model": "model",
        "year": "year_min",
        "category": "category",
        "min_price": "price_min",
        "max_price": "price_max",
    }
    aliases = merge_aliases({
        "id": ("id", "listing_id"),
        "description": ("description", "listing_description"),
        "price": ("price", "current_bid", "buy_now_price"),
        "year": ("year", "manufacture_year"),
        "make": ("make", "brand"),
        "category": ("category", "type", "category_name"),
        "condition": ("condition", "item_condition"),
        "location": ("location", "seller_location"),
        "image_urls": ("image_urls", "images"),
        "source_url": ("source_url", "listing_url"),
        "specifications": ("specifications", "tech_specs"),
        "created_at": ("created_at", "listed_date"),
    })
