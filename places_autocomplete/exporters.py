# places_autocomplete/exporters.py
from typing import List

import pandas as pd

from .models import Place, PlaceDetails

PLACE_COLUMNS = ["place_id", "description"]
DETAILS_COLUMNS = ["name", "lat", "lon", "radius_m"]


def places_frame(places: List[Place]) -> pd.DataFrame:
    rows = [{"place_id": p.id, "description": p.description} for p in places]
    return pd.DataFrame(rows, columns=PLACE_COLUMNS)


def details_frame(details: PlaceDetails) -> pd.DataFrame:
    # lat/lon column names are what st.map looks for
    return pd.DataFrame(
        [{
            "name": details.name,
            "lat": details.latitude,
            "lon": details.longitude,
            "radius_m": details.radius,
        }],
        columns=DETAILS_COLUMNS,
    )


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")
