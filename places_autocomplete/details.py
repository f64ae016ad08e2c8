# places_autocomplete/details.py
import logging
from typing import Optional

from .http_client import HttpClient
from .models import PlaceDetails

logger = logging.getLogger(__name__)

PLACE_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"


def fetch_place_details(
    client: HttpClient,
    api_key: str,
    place_id: str,
    details_url: Optional[str] = None,
) -> PlaceDetails:
    """Fetch name + geometry for a selected suggestion."""
    params = {
        "place_id": place_id,
        "key": api_key or "",
    }
    data = client.get_json(details_url or PLACE_DETAILS_URL, params=params)
    details = PlaceDetails.from_json(data)
    logger.info("Fetched %s", details)
    return details
