# places_autocomplete/http_client.py
import logging
from typing import Any, Dict, Iterable, Optional

import requests

from . import errors
from .errors import PlacesError
from .query import build_url

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, timeout_sec: int, session: Optional[requests.Session] = None):
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def get_json(
        self,
        url: str,
        params: Dict[str, Any],
        ok_statuses: Iterable[str] = ("OK",),
    ) -> Dict[str, Any]:
        """
        One GET against a Places endpoint.

        The query string is built here (sorted keys, escaped values) rather than
        by requests, so the wire format does not depend on dict ordering.
        Raises PlacesError for transport, HTTP, JSON and API-status failures.
        """
        full_url = build_url(url, params)
        try:
            resp = self.session.get(full_url, timeout=self.timeout_sec)
        except requests.RequestException as e:
            logger.error("GooglePlaces Error: %s", e)
            raise PlacesError(errors.NO_RESPONSE, str(e) or "Request failed") from e

        if resp is None:
            logger.error("GooglePlaces Error: No response from API")
            raise PlacesError(errors.NO_RESPONSE, "No response from API")

        if resp.status_code != 200:
            logger.error("GooglePlaces Error: Invalid status code %s from API", resp.status_code)
            raise PlacesError(resp.status_code, "Invalid status code", http_status=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("GooglePlaces Error: Serialization error")
            raise PlacesError(errors.SERIALIZATION, "Serialization error", http_status=200) from e

        if not isinstance(data, dict):
            logger.error("GooglePlaces Error: Serialization error (payload is %s)", type(data).__name__)
            raise PlacesError(errors.SERIALIZATION, "Serialization error", http_status=200)

        status = data.get("status")
        if isinstance(status, str) and status not in tuple(ok_statuses):
            # Common: OVER_QUERY_LIMIT, REQUEST_DENIED, INVALID_REQUEST
            logger.error("GooglePlaces API Error: %s, msg=%s", status, data.get("error_message"))
            raise PlacesError(
                errors.API_STATUS,
                status,
                status=status,
                http_status=200,
                detail=data.get("error_message"),
            )

        return data
