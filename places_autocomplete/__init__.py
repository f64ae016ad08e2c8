from .errors import PlacesError
from .models import LocationBias, Place, PlaceDetails, PlaceType

__all__ = ["PlacesError", "LocationBias", "Place", "PlaceDetails", "PlaceType"]
