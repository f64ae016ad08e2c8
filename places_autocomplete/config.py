# places_autocomplete/config.py
from dataclasses import dataclass
from typing import Optional
import os

from .models import PlaceType


@dataclass(frozen=True)
class Settings:
    api_key: str
    timeout_sec: int = 20

    # Google endpoints
    autocomplete_url: str = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
    details_url: str = "https://maps.googleapis.com/maps/api/place/details/json"

    # Autocomplete defaults
    place_type: PlaceType = PlaceType.ALL
    country: Optional[str] = None

    log_level: str = "INFO"


def load_settings() -> Settings:
    key = (os.getenv("GOOGLE_MAPS_API_KEY") or os.getenv("API_KEY") or "").strip()

    if not key:
        raise ValueError(
            "Missing GOOGLE_MAPS_API_KEY.\n"
            "Add it to a .env file locally or export it in your shell.\n"
            "Example (local): export GOOGLE_MAPS_API_KEY='YOUR_KEY'"
        )

    timeout = os.getenv("PLACES_TIMEOUT_SEC", "").strip()
    country = os.getenv("GOOGLE_PLACES_COUNTRY", "").strip()

    return Settings(
        api_key=key,
        timeout_sec=int(timeout) if timeout else 20,
        place_type=PlaceType.parse(os.getenv("GOOGLE_PLACES_TYPE", "")),
        country=country or None,
        log_level=os.getenv("PLACES_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
