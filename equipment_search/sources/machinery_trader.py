# equipment_search/sources/machinery_trader.py
from equipment_search.normalizer import merge_aliases
from equipment_search.sources.base import SourceAdapter


class MachineryTraderAdapter(SourceAdapter):
    source_id = "machinery-trader"
    display_name = "MachineryTrader"
    credential_setting = "MACHINERY_TRADER_API_KEY"
    api_url = "https://api.machinerytrader.com/v1/equipment"
    site_url = "https://www.machinerytrader.com"
    default_url = "https://www.machinerytrader.com/listing/{id}"
    results_key = "equipment_listings"
    title_fields = ("make", "model", "category")
    fallback_delay = 0.6

    param_names = {
        "query": "search",
        "make": "make",
        "model": "model",
        "year": "year",
        "category": "category",
        "min_price": "minprice",
        "max_price": "maxprice",
    }
    aliases = merge_aliases({
        "id": ("id", "listing_id"),
        "description": ("description", "details"),
        "price": ("price", "current_price"),
        "currency": ("currency", "price_currency"),
        "year": ("year", "model_year"),
        "make": ("make", "manufacturer"),
        "category": ("category", "equipment_type"),
        "condition": ("condition", "item_condition"),
        "location": ("location", "location_city", "seller_location"),
        "image_urls": ("image_urls", "images"),
        "source_url": ("source_url",),
        "specifications": ("specifications", "tech_specs", "details"),
        "created_at": ("created_at", "listed_date"),
    })
