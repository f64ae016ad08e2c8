# places_autocomplete/search_view.py
import logging
from typing import List, Optional

from .autocomplete import AutocompleteService
from .errors import PlacesError
from .models import Place

logger = logging.getLogger(__name__)


class SearchView:
    """
    UI-independent state of the search screen: the text typed so far,
    whether the result list is visible, and the last error.

    Each text change dispatches at most one autocomplete request.
    """

    def __init__(self, service: AutocompleteService, title: str = "Enter Address"):
        self.service = service
        self.title = title
        self.text = ""
        self.hidden = True
        self.last_error: Optional[PlacesError] = None

    @property
    def places(self) -> List[Place]:
        return self.service.places

    @property
    def rows(self) -> List[str]:
        return [str(p) for p in self.service.places]

    def text_changed(self, text: str) -> List[Place]:
        self.text = text
        self.last_error = None

        if text == "":
            self.service.places = []
            self.hidden = True
            return []

        try:
            self.service.get_places(text)
        except PlacesError as e:
            # list keeps its previous contents
            logger.warning("Autocomplete failed for %r: %s", text, e)
            self.last_error = e
        self.hidden = False
        return self.service.places

    def select(self, index: int) -> Place:
        place = self.service.places[index]
        if self.service.delegate is not None:
            self.service.delegate.place_selected(place)
        return place

    def close(self) -> None:
        if self.service.delegate is not None:
            self.service.delegate.place_view_closed()

    def reset(self) -> None:
        self.text_changed("")
