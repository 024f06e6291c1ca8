from __future__ import annotations

from typing import Any

import httpx

from app.core.config import PLACES_SEARCH_ENDPOINT, Settings
from app.core.errors import ConfigurationError, UpstreamError
from app.core.logging import get_logger
from app.domain.address import NormalizedAddress, normalize_response


_logger = get_logger(__name__)
_PLACES_FIELD_MASK = (
    "places.displayName,places.formattedAddress,places.addressComponents,places.types"
)
# Rough bounding box around the United Kingdom.
_UK_LOCATION_BIAS = {
    "rectangle": {
        "low": {"latitude": 49.5, "longitude": -10.5},
        "high": {"latitude": 60.9, "longitude": 1.8},
    }
}


class PlacesClient:
    """Search the places provider and normalize results into postal addresses.

    Each call is independent: one request, one transform, nothing retained.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        endpoint: str = PLACES_SEARCH_ENDPOINT,
        timeout: float = 10.0,
        max_results: int = 20,
    ) -> None:
        self._api_key = api_key
        self._endpoint = endpoint
        self._timeout = timeout
        self._max_results = max_results

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlacesClient":
        return cls(
            settings.google_places_api_key,
            endpoint=settings.places_endpoint,
            timeout=settings.places_timeout,
            max_results=settings.places_max_results,
        )

    async def normalize(self, query: str) -> list[NormalizedAddress]:
        """Resolve ``query`` (usually a postcode) into candidate addresses."""

        if not query:
            raise ValueError("query must be non-empty")
        if not self._api_key:
            raise ConfigurationError("Google Places API key not configured")

        payload = await self._search(query)
        addresses = normalize_response(payload, query)
        _logger.info(
            "Places search completed",
            query=query,
            places=_count_places(payload),
            results=len(addresses),
        )
        return addresses

    async def _search(self, query: str) -> Any:
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self._api_key or "",
            "X-Goog-FieldMask": _PLACES_FIELD_MASK,
        }
        body = {
            "textQuery": query,
            "locationBias": _UK_LOCATION_BIAS,
            "maxResultCount": self._max_results,
        }

        _logger.info("Places search", query=query)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._endpoint, headers=headers, json=body)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            _logger.warning(
                "Places search rejected",
                query=query,
                status_code=status_code,
                body=exc.response.text[:500],
            )
            raise UpstreamError(
                f"Google Places API error: {status_code}", status_code=status_code
            ) from exc
        except httpx.HTTPError as exc:
            _logger.warning("Places search failed", query=query, error=str(exc))
            raise UpstreamError(f"Google Places API request failed: {exc}") from exc
        except ValueError as exc:
            _logger.warning("Places response not JSON", query=query, error=str(exc))
            raise UpstreamError("Google Places API returned invalid JSON") from exc


def _count_places(payload: Any) -> int:
    if isinstance(payload, dict) and isinstance(payload.get("places"), list):
        return len(payload["places"])
    return 0
