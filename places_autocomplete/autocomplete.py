# places_autocomplete/autocomplete.py
import logging
from typing import Any, Dict, List, Optional

from . import errors
from .delegate import PlacesDelegate
from .errors import PlacesError
from .http_client import HttpClient
from .models import LocationBias, Place, PlaceType

logger = logging.getLogger(__name__)

AUTOCOMPLETE_URL = "https://maps.googleapis.com/maps/api/place/autocomplete/json"


def build_autocomplete_params(
    api_key: str,
    search_string: str,
    place_type: PlaceType = PlaceType.ALL,
    location_bias: Optional[LocationBias] = None,
    country: Optional[str] = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "input": search_string,
        "types": str(place_type),  # "" means every type
        "key": api_key or "",
    }

    if location_bias is not None:
        params["location"] = location_bias.location
        params["radius"] = str(float(location_bias.radius))

    if country:
        params["components"] = f"country:{country}"

    return params


def get_place_suggestions(
    client: HttpClient,
    api_key: str,
    search_string: str,
    place_type: PlaceType = PlaceType.ALL,
    location_bias: Optional[LocationBias] = None,
    country: Optional[str] = None,
    limit: Optional[int] = None,
    url: str = AUTOCOMPLETE_URL,
) -> List[Place]:
    """Returns place stubs (place_id + description) for a partial query."""
    if search_string == "":
        raise PlacesError(errors.NO_SEARCH_STRING, "No search string given")

    params = build_autocomplete_params(api_key, search_string, place_type, location_bias, country)
    data = client.get_json(url, params=params, ok_statuses=("OK", "ZERO_RESULTS"))

    preds = data.get("predictions")
    if not isinstance(preds, list):
        logger.debug("Autocomplete response without predictions (status=%s)", data.get("status"))
        return []

    if limit is not None:
        preds = preds[:limit]
    return [Place.from_prediction(p, api_key=api_key) for p in preds]


class AutocompleteService:
    """
    Holds the search configuration and the last list of places found.

    place_type, location_bias, country and delegate may be changed between
    calls; the next get_places() picks them up.
    """

    def __init__(
        self,
        client: HttpClient,
        api_key: str,
        place_type: PlaceType = PlaceType.ALL,
        url: str = AUTOCOMPLETE_URL,
    ):
        self.client = client
        self.api_key = api_key
        self.place_type = place_type
        self.url = url
        self.location_bias: Optional[LocationBias] = None
        self.country: Optional[str] = None
        self.delegate: Optional[PlacesDelegate] = None
        self.places: List[Place] = []

    @classmethod
    def from_settings(cls, client: HttpClient, settings) -> "AutocompleteService":
        service = cls(client, settings.api_key, place_type=settings.place_type, url=settings.autocomplete_url)
        service.country = settings.country
        return service

    def get_places(self, search_string: str) -> List[Place]:
        places = get_place_suggestions(
            self.client,
            self.api_key,
            search_string,
            place_type=self.place_type,
            location_bias=self.location_bias,
            country=self.country,
            url=self.url,
        )
        self.places = places
        logger.info("Autocomplete %r -> %d places", search_string, len(places))
        if self.delegate is not None:
            self.delegate.places_found(places)
        return places
