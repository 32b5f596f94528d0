# equipment_search/sources/equipment_watch.py
from equipment_search.sources.base import SourceAdapter


class EquipmentWatchAdapter(SourceAdapter):
    source_id = "equipment-watch"
    display_name = "EquipmentWatch"
    credential_setting = "EQUIPMENT_WATCH_API_KEY"
    api_url = "https://api.equipmentwatch.com/v1/equipment"
    site_url = "https://equipmentwatch.com"
    default_url = "https://equipmentwatch.com"
    fallback_delay = 0.7
