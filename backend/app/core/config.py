from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)

    app_name: str = "Hotel Finder"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    google_maps_api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("GOOGLE_PLACES_API_KEY", "GOOGLE_MAPS_API_KEY"),
    )
    locationiq_api_key: Optional[str] = Field(None, validation_alias="LOCATIONIQ_API_KEY")
    hotel_provider: str = Field("google", validation_alias="HOTEL_PROVIDER")
    request_timeout_seconds: float = Field(10.0, validation_alias="REQUEST_TIMEOUT_SECONDS")
    default_radius_meters: int = Field(5000, validation_alias="DEFAULT_RADIUS_METERS")
    max_remote_results: int = Field(20, validation_alias="MAX_REMOTE_RESULTS")
    detail_workers: int = Field(8, validation_alias="DETAIL_WORKERS")
    synthetic_roster_size: int = Field(8, validation_alias="SYNTHETIC_ROSTER_SIZE")
    synthetic_seed: Optional[int] = Field(None, validation_alias="SYNTHETIC_SEED")
    default_lat: float = Field(40.7128, validation_alias="DEFAULT_LAT")
    default_lng: float = Field(-74.0060, validation_alias="DEFAULT_LNG")
    default_jitter_degrees: float = Field(0.1, validation_alias="DEFAULT_JITTER_DEGREES")
    allow_default_location: bool = Field(True, validation_alias="ALLOW_DEFAULT_LOCATION")
    directions_provider: str = Field("google", validation_alias="DIRECTIONS_PROVIDER")
    max_sessions: int = Field(1000, validation_alias="MAX_SESSIONS")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
