from collections.abc import Mapping
from http import HTTPStatus


def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.upper()

def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.lower()

def to_http_status(value: int | str | HTTPStatus) -> int:
    """
    Coerce an HTTP status given as int, numeric string or HTTPStatus to a plain int.

    Raises:
        ValueError: if the value is not numeric or falls outside 100..599.
    """
    try:
        code = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid HTTP status: {value!r}") from exc
    if not 100 <= code <= 599:
        raise ValueError(f"HTTP status out of range: {code}")
    return code

def normalize_error_pages(value: Mapping | None) -> dict[int, str]:
    """
    Normalize the status -> redirect URL mapping read from configuration.

    - keys are coerced with to_http_status()
    - values are stripped; None becomes "" (treated as "no page" at lookup time)
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError("error pages must be a mapping of HTTP status to URL")
    return {
        to_http_status(status): ("" if url is None else str(url).strip())
        for status, url in value.items()
    }
