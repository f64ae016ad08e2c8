# places_autocomplete/demo.py
import logging
from typing import Optional

from dotenv import load_dotenv

from .autocomplete import AutocompleteService
from .config import load_settings
from .delegate import PlacesDelegate
from .errors import PlacesError
from .http_client import HttpClient
from .search_view import SearchView


class ConsoleDelegate(PlacesDelegate):
    def __init__(self, client: HttpClient, details_url: str):
        self.client = client
        self.details_url = details_url
        self.closed = False

    def place_selected(self, place):
        print(place.description)
        try:
            details = place.get_details(self.client, details_url=self.details_url)
        except PlacesError as e:
            print(f"Error fetching google place details: {e}")
            return
        print(details)

    def place_view_closed(self):
        self.closed = True


def parse_pick(line: str) -> Optional[int]:
    """"#2" -> 1 (zero-based); anything else is a search."""
    if line.startswith("#") and line[1:].isdigit():
        return int(line[1:]) - 1
    return None


def run():
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    with HttpClient(timeout_sec=settings.timeout_sec) as client:
        service = AutocompleteService.from_settings(client, settings)
        delegate = ConsoleDelegate(client, settings.details_url)
        service.delegate = delegate
        view = SearchView(service)

        print(f"\n=== Google Places Autocomplete: {view.title} ===")
        print("Type a search, then #<number> to pick a place. Empty line clears, 'q' quits.\n")

        while not delegate.closed:
            line = input("> ").strip()

            if line.lower() in ("q", "quit", "exit"):
                view.close()
                break

            pick = parse_pick(line)
            if pick is not None:
                if not view.hidden and 0 <= pick < len(view.places):
                    view.select(pick)
                else:
                    print(f"Pick a number between 1 and {len(view.places)}.")
                continue

            view.text_changed(line)
            if view.last_error is not None:
                print(f"Autocomplete unavailable: {view.last_error}")
            if view.hidden:
                continue
            if not view.rows:
                print("No places found.")
            for i, row in enumerate(view.rows, start=1):
                print(f" #{i}. {row}")


if __name__ == "__main__":
    run()
