# places_autocomplete/delegate.py
from typing import List

from .models import Place


class PlacesDelegate:
    """Callbacks for the search screen. Override only the ones you need."""

    def places_found(self, places: List[Place]) -> None:
        pass

    def place_selected(self, place: Place) -> None:
        pass

    def place_view_closed(self) -> None:
        pass
