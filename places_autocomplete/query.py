# places_autocomplete/query.py
from typing import Any, Mapping
from urllib.parse import quote

# Only unreserved characters (letters, digits, "-._~") survive unescaped.
# Reserved ones like :/?&=;+!@#$()',* are always percent-encoded.
SAFE_CHARS = ""


def escape(value: Any) -> str:
    return quote(str(value), safe=SAFE_CHARS, encoding="utf-8")


def build_query(params: Mapping[str, Any]) -> str:
    """Alphabetical, percent-escaped "k=v&k=v" string."""
    return "&".join(f"{escape(k)}={escape(params[k])}" for k in sorted(params))


def build_url(base_url: str, params: Mapping[str, Any]) -> str:
    return f"{base_url}?{build_query(params)}"
