# places_autocomplete/errors.py
from typing import Optional

ERROR_DOMAIN = "GooglePlacesAutocompleteErrorDomain"

NO_SEARCH_STRING = 1000
NO_RESPONSE = 1001
SERIALIZATION = 1002
API_STATUS = 1002  # shares the code with SERIALIZATION; tell them apart via .status


class PlacesError(Exception):
    """
    Error value for every failed autocomplete/details call.

    code is one of the constants above, or the HTTP status code when the
    API answered with something other than 200.
    """

    def __init__(
        self,
        code: int,
        message: str,
        status: Optional[str] = None,
        http_status: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.http_status = http_status
        self.detail = detail
        self.domain = ERROR_DOMAIN

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail} (code={self.code})"
        return f"{self.message} (code={self.code})"
