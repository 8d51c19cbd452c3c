"""
Error page registry: HTTP status -> redirect URL.

Built once at startup from configuration (Settings.ERROR_PAGES) and shared by every
request afterwards. There is no writer at runtime, so concurrent reads need no lock.
"""

import logging
from collections.abc import Iterator, Mapping
from http import HTTPStatus
from types import MappingProxyType

from errorgate.validators.config_validators import normalize_error_pages

logger = logging.getLogger(__name__)


class ErrorPageRegistry(Mapping[int, str]):
    """
    Read-only mapping of HTTP status code to custom error page URL.

    Usage:
        registry = ErrorPageRegistry({404: "/custom-404"})
        registry.lookup(404)   # "/custom-404"
        registry.lookup(500)   # None -> render the default error view
    """

    def __init__(self, pages: Mapping | None = None):
        # normalize into a private dict and only expose a read-only proxy
        self._pages = MappingProxyType(normalize_error_pages(pages))

    @classmethod
    def from_settings(cls, settings) -> "ErrorPageRegistry":
        registry = cls(getattr(settings, "ERROR_PAGES", None))
        logger.info("error_pages.loaded", extra={"error_pages": dict(registry)})
        return registry

    def lookup(self, http_status: int | HTTPStatus) -> str | None:
        """
        Return the redirect URL configured for `http_status`, or None.

        A missing entry, an empty string and a whitespace-only string all mean
        "no custom page"; this never raises.
        """
        try:
            url = self._pages.get(int(http_status))
        except (TypeError, ValueError):
            return None
        # values were stripped on construction, so blank entries are "" here
        return url or None

    def __getitem__(self, http_status: int) -> str:
        return self._pages[http_status]

    def __iter__(self) -> Iterator[int]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"ErrorPageRegistry({dict(self._pages)!r})"


__all__ = ["ErrorPageRegistry"]
