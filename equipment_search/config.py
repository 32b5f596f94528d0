# equipment_search/config.py
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    EQUIPMENT_WATCH_API_KEY: Optional[str] = None
    MASCUS_API_KEY: Optional[str] = None
    MACHINERY_TRADER_API_KEY: Optional[str] = None
    IRON_PLANET_API_KEY: Optional[str] = None

    # third-party lookup service used as fallback; sample catalog when unset
    SCRAPER_SERVICE_URL: Optional[str] = None
    SCRAPER_SERVICE_API_KEY: Optional[str] = None

    SOURCE_TIMEOUT_SECONDS: float = 8.0
    SIMULATE_FALLBACK_DELAY: bool = True

    MARKET_VALUE_LOW_FACTOR: float = 0.9
    MARKET_VALUE_HIGH_FACTOR: float = 1.1
    MARKET_DATA_CONFIDENCE: float = 0.8
    FALLBACK_ESTIMATE_VALUE: int = 50000
    FALLBACK_ESTIMATE_LOW: int = 40000
    FALLBACK_ESTIMATE_HIGH: int = 60000
    FALLBACK_ESTIMATE_CONFIDENCE: float = 0.3

    SIMILAR_DEFAULT_LIMIT: int = 5

    LOG_LEVEL: str = "INFO"

    WEB_HOST: str = "0.0.0.0"
    WEB_PORT: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
