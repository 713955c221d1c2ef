"""
Parsers for Runware API responses.

The image URL shows up under different keys depending on endpoint and API
version, so several paths are probed in a fixed priority order.
"""

import json
from typing import Any, Callable, List, Optional, Tuple


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _get(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


# (description, accessor) in priority order
IMAGE_URL_PATHS: List[Tuple[str, Callable[[Any], Any]]] = [
    ("data[0].imageURL", lambda d: _get(_first(_get(d, "data")), "imageURL")),
    ("imageURLs[0].imageURL", lambda d: _get(_first(_get(d, "imageURLs")), "imageURL")),
    ("imageUrl", lambda d: _get(d, "imageUrl")),
    ("images[0].url", lambda d: _get(_first(_get(d, "images")), "url")),
]


def extract_image_url(payload: Any) -> Optional[str]:
    """
    Find the generated image URL in a response payload.

    Args:
        payload: Decoded JSON body (any shape)

    Returns:
        The first non-empty string found along IMAGE_URL_PATHS, or None
    """
    for _, accessor in IMAGE_URL_PATHS:
        value = accessor(payload)
        if isinstance(value, str) and value.strip():
            return value
    return None


def extract_error_message(body_text: str, status_code: int) -> str:
    """
    Pull a readable error message out of a non-2xx response body.

    Tries the JSON fields ``message``, ``error`` and ``errors[0].message``,
    falls back to the raw body text, then to 'API error: <status>'.
    """
    text = (body_text or "").strip()
    if not text:
        return f"API error: {status_code}"

    try:
        data = json.loads(text)
    except ValueError:
        return text

    for candidate in (
        _get(data, "message"),
        _get(data, "error"),
        _get(_first(_get(data, "errors")), "message"),
    ):
        if isinstance(candidate, str) and candidate.strip():
            return candidate
        # Some gateways nest the message one level down
        nested = _get(candidate, "message")
        if isinstance(nested, str) and nested.strip():
            return nested

    return f"API error: {status_code}"
