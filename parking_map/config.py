"""Centralised application settings loaded from environment / .env file."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    # Dataset
    dataset_path: str = str(DATA_DIR / "st_park_p.json")

    # Map framing (Bordeaux centre)
    default_latitude: float = 44.8378
    default_longitude: float = -0.5792
    region_latitude_delta: float = 0.0922
    region_longitude_delta: float = 0.0421

    # Selector
    nearest_limit: int = 3

    # Geolocation
    location_timeout_seconds: float = 10.0
    location_permission_granted: bool = True
    device_latitude: Optional[float] = None
    device_longitude: Optional[float] = None

    # Address resolution (placeholder geocoder)
    geocoder_latitude: float = 44.8378
    geocoder_longitude: float = -0.5792
    address_gazetteer: dict[str, tuple[float, float]] = {}

    # API
    rate_limit: str = "100/minute"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
