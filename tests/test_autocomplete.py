from urllib.parse import parse_qsl, urlsplit

import pytest

from places_autocomplete import errors
from places_autocomplete.autocomplete import AutocompleteService, build_autocomplete_params, get_place_suggestions
from places_autocomplete.config import Settings
from places_autocomplete.delegate import PlacesDelegate
from places_autocomplete.errors import PlacesError
from places_autocomplete.models import LocationBias, PlaceType

PREDICTIONS = {
    "status": "OK",
    "predictions": [
        {"place_id": "p1", "description": "Paris, France"},
        {"place_id": "p2", "description": "Paris, TX, USA"},
    ],
}


def query_of(call):
    return dict(parse_qsl(urlsplit(call["url"]).query, keep_blank_values=True))


def test_params_minimal():
    assert build_autocomplete_params("k", "par") == {"input": "par", "types": "", "key": "k"}


def test_params_with_bias_and_country():
    params = build_autocomplete_params(
        "k", "par", PlaceType.CITIES, LocationBias(48.85, 2.35, 5000), country="fr"
    )

    assert params == {
        "input": "par",
        "types": "(cities)",
        "key": "k",
        "location": "48.85,2.35",
        "radius": "5000.0",
        "components": "country:fr",
    }


def test_suggestions_are_parsed_into_places(make_client, ok):
    client, session = make_client(ok(PREDICTIONS))

    places = get_place_suggestions(client, "k", "Paris", place_type=PlaceType.GEOCODE)

    assert [(p.id, p.description, p.api_key) for p in places] == [
        ("p1", "Paris, France", "k"),
        ("p2", "Paris, TX, USA", "k"),
    ]
    url = session.calls[0]["url"]
    assert url.startswith("https://maps.googleapis.com/maps/api/place/autocomplete/json?input=Paris&key=k&types=geocode")


def test_empty_search_string_sends_nothing(make_client):
    client, session = make_client()

    with pytest.raises(PlacesError) as exc:
        get_place_suggestions(client, "k", "")

    assert exc.value.code == errors.NO_SEARCH_STRING
    assert exc.value.message == "No search string given"
    assert session.calls == []


def test_zero_results_is_an_empty_list(make_client, ok):
    client, _ = make_client(ok({"status": "ZERO_RESULTS", "predictions": []}))

    assert get_place_suggestions(client, "k", "zzzzqqq") == []


def test_missing_predictions_is_an_empty_list(make_client, ok):
    client, _ = make_client(ok({"status": "OK"}))

    assert get_place_suggestions(client, "k", "x") == []


def test_limit(make_client, ok):
    client, _ = make_client(ok(PREDICTIONS))

    assert [p.id for p in get_place_suggestions(client, "k", "Paris", limit=1)] == ["p1"]


def test_api_error_propagates(make_client, ok):
    client, _ = make_client(ok({"status": "OVER_QUERY_LIMIT"}))

    with pytest.raises(PlacesError) as exc:
        get_place_suggestions(client, "k", "Paris")

    assert exc.value.status == "OVER_QUERY_LIMIT"


class RecordingDelegate(PlacesDelegate):
    def __init__(self):
        self.found = []

    def places_found(self, places):
        self.found.append(places)


def test_service_stores_places_and_notifies_delegate(make_client, ok):
    client, session = make_client(ok(PREDICTIONS))
    service = AutocompleteService(client, "k", place_type=PlaceType.ADDRESS)
    service.location_bias = LocationBias(1.5, 2.5, 100)
    service.country = "us"
    service.delegate = RecordingDelegate()

    places = service.get_places("Paris")

    assert service.places == places
    assert service.delegate.found == [places]
    assert query_of(session.calls[0]) == {
        "input": "Paris",
        "key": "k",
        "types": "address",
        "location": "1.5,2.5",
        "radius": "100.0",
        "components": "country:us",
    }


def test_service_keeps_previous_places_on_error(make_client, ok, connection_error):
    client, _ = make_client(ok(PREDICTIONS), connection_error)
    service = AutocompleteService(client, "k")
    service.get_places("Paris")

    with pytest.raises(PlacesError):
        service.get_places("Pari")

    assert [p.id for p in service.places] == ["p1", "p2"]


def test_service_from_settings(make_client):
    client, _ = make_client()
    settings = Settings(api_key="k", place_type=PlaceType.CITIES, country="de", autocomplete_url="https://example.com/ac")

    service = AutocompleteService.from_settings(client, settings)

    assert (service.api_key, service.place_type, service.country, service.url) == (
        "k",
        PlaceType.CITIES,
        "de",
        "https://example.com/ac",
    )


def test_non_object_prediction_is_a_serialization_error(make_client, ok):
    client, _ = make_client(ok({"status": "OK", "predictions": ["oops"]}))

    with pytest.raises(PlacesError) as exc:
        get_place_suggestions(client, "k", "Paris")

    assert exc.value.code == errors.SERIALIZATION
