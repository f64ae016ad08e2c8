import logging

import streamlit as st
from dotenv import load_dotenv

from places_autocomplete.autocomplete import AutocompleteService
from places_autocomplete.config import load_settings
from places_autocomplete.errors import PlacesError
from places_autocomplete.exporters import details_frame, places_frame, to_csv_bytes
from places_autocomplete.http_client import HttpClient
from places_autocomplete.models import LocationBias, PlaceType
from places_autocomplete.search_view import SearchView

load_dotenv()

# -------------------------
# Streamlit page setup
# -------------------------
st.set_page_config(page_title="Google Places Autocomplete", layout="wide")

try:
    settings = load_settings()
except ValueError as e:
    st.error(str(e))
    st.stop()

logging.basicConfig(level=settings.log_level)

# -------------------------
# Session state (one service + view per browser session)
# -------------------------
if "view" not in st.session_state:
    client = HttpClient(timeout_sec=settings.timeout_sec)
    service = AutocompleteService.from_settings(client, settings)
    st.session_state.client = client
    st.session_state.view = SearchView(service)
    st.session_state.details = None
    st.session_state.selected_id = None
    st.session_state.use_bias = False
    st.session_state.bias_lat = 0.0
    st.session_state.bias_lng = 0.0
    st.session_state.bias_radius = LocationBias().radius

view: SearchView = st.session_state.view
service = view.service

st.title(view.title)


def reset():
    view.reset()
    st.session_state.details = None
    st.session_state.selected_id = None
    st.session_state.search_text = ""


def bias_to_details():
    region = st.session_state.details.region
    st.session_state.use_bias = True
    st.session_state.bias_lat = region.latitude
    st.session_state.bias_lng = region.longitude
    st.session_state.bias_radius = max(region.radius, 1.0)


# -------------------------
# Sidebar: search options
# -------------------------
with st.sidebar:
    st.header("Search options")
    types = list(PlaceType)
    service.place_type = st.selectbox(
        "Place type",
        options=types,
        index=types.index(service.place_type),
        format_func=lambda t: t.name.title() if t is PlaceType.ALL else str(t),
    )
    service.country = st.text_input("Country (ISO code)", settings.country or "").strip() or None

    if st.checkbox("Bias results to a location", key="use_bias"):
        lat = st.number_input("Latitude", min_value=-90.0, max_value=90.0, format="%.6f", key="bias_lat")
        lng = st.number_input("Longitude", min_value=-180.0, max_value=180.0, format="%.6f", key="bias_lng")
        radius = st.number_input("Radius (m)", min_value=1.0, step=1000.0, key="bias_radius")
        service.location_bias = LocationBias(latitude=lat, longitude=lng, radius=radius)
    else:
        service.location_bias = None

# -------------------------
# Search box + results
# -------------------------
col_search, col_close = st.columns([5, 1])
with col_search:
    text = st.text_input("Search", key="search_text", placeholder="Start typing an address...")
with col_close:
    st.button("Close", on_click=reset)

if text != view.text:
    view.text_changed(text)
    st.session_state.details = None
    st.session_state.selected_id = None

if view.last_error is not None:
    st.warning(f"Autocomplete unavailable: {view.last_error}")

if not view.hidden:
    if not view.places:
        st.info("No places found.")
    else:
        idx = st.radio(
            "Suggestions",
            options=list(range(len(view.places))),
            format_func=lambda i: view.rows[i],
            index=None,
            key=f"suggestions_{view.text}",
        )

        if idx is not None:
            place = view.select(idx)
            if st.session_state.selected_id != place.id:
                with st.spinner("Fetching place details..."):
                    try:
                        st.session_state.details = place.get_details(
                            st.session_state.client, details_url=settings.details_url
                        )
                        st.session_state.selected_id = place.id
                    except PlacesError as e:
                        st.session_state.details = None
                        st.error(f"Could not fetch place details: {e}")

        st.download_button(
            "Download suggestions.csv",
            to_csv_bytes(places_frame(view.places)),
            "suggestions.csv",
            "text/csv",
        )

# -------------------------
# Selected place
# -------------------------
details = st.session_state.details
if details is not None:
    st.subheader(details.name)
    st.success(
        f"Lat/Lon: {details.latitude:.6f}, {details.longitude:.6f} | "
        f"Radius: {details.radius:,.0f} m"
    )
    df = details_frame(details)
    st.map(df, latitude="lat", longitude="lon")
    st.dataframe(df, use_container_width=True)

    st.button("Bias next search to this place", on_click=bias_to_details)
