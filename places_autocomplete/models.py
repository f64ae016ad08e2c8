# places_autocomplete/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from . import errors
from .errors import PlacesError
from .geo import haversine_m

if TYPE_CHECKING:
    from .http_client import HttpClient

# Radius large enough to cover the whole globe, i.e. "bias without restriction".
DEFAULT_BIAS_RADIUS_M = 20_000_000.0


class PlaceType(Enum):
    ALL = ""
    GEOCODE = "geocode"
    ADDRESS = "address"
    ESTABLISHMENT = "establishment"
    REGIONS = "(regions)"
    CITIES = "(cities)"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: Optional[str]) -> "PlaceType":
        """Accepts a wire value ("(cities)") or a member name ("cities")."""
        raw = (text or "").strip()
        for member in cls:
            if raw == member.value or raw.upper() == member.name:
                return member
        raise ValueError(f"Unknown place type: {text!r}")


@dataclass(frozen=True)
class LocationBias:
    latitude: float = 0.0
    longitude: float = 0.0
    radius: float = DEFAULT_BIAS_RADIUS_M

    @property
    def location(self) -> str:
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def from_region(cls, details: "PlaceDetails") -> "LocationBias":
        return cls(latitude=details.latitude, longitude=details.longitude, radius=details.radius)


@dataclass
class Place:
    """Place stub returned by the autocomplete endpoint."""

    id: str
    description: str
    api_key: Optional[str] = None

    def __str__(self) -> str:
        return self.description

    @classmethod
    def from_prediction(cls, prediction: Dict[str, Any], api_key: Optional[str] = None) -> "Place":
        if not isinstance(prediction, dict):
            raise PlacesError(errors.SERIALIZATION, "Serialization error", detail=f"prediction is {type(prediction).__name__}")
        place_id = prediction.get("place_id")
        description = prediction.get("description")
        if not isinstance(place_id, str) or not isinstance(description, str):
            raise PlacesError(errors.SERIALIZATION, "Serialization error", detail="prediction without place_id/description")
        return cls(id=place_id, description=description, api_key=api_key)

    def get_details(self, client: "HttpClient", details_url: Optional[str] = None) -> "PlaceDetails":
        """Fetch name, coordinates and viewport for this place (needs api_key)."""
        from .details import fetch_place_details

        return fetch_place_details(client, self.api_key or "", self.id, details_url=details_url)


@dataclass
class PlaceDetails:
    name: str
    latitude: float
    longitude: float
    radius: float = 0.0
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __str__(self) -> str:
        return f"PlaceDetails: {self.name} ({self.latitude}, {self.longitude})"

    @property
    def region(self) -> LocationBias:
        return LocationBias.from_region(self)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "PlaceDetails":
        """
        Parse a Place Details response body.

        radius is the distance from the place's location to the north-east
        corner of its viewport, 0 when the API sends no viewport.
        """
        try:
            result = payload["result"]
            geometry = result["geometry"]
            location = geometry["location"]
            name = result["name"]
            if not isinstance(name, str):
                raise TypeError(f"name is {type(name).__name__}")
            lat = float(location["lat"])
            lng = float(location["lng"])

            radius = 0.0
            viewport = geometry.get("viewport")
            if viewport:
                north_east = viewport["northeast"]
                radius = haversine_m(lat, lng, float(north_east["lat"]), float(north_east["lng"]))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PlacesError(errors.SERIALIZATION, "Serialization error", detail=f"bad details payload: {e}") from e

        return cls(name=name, latitude=lat, longitude=lng, radius=radius, raw=payload)
