from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.config import get_settings
from app.core.errors import ConfigurationError, UpstreamError
from app.core.logging import get_logger
from app.schemas.addresses import Address, AddressSearchResponse
from app.services.places import PlacesClient


router = APIRouter()
_logger = get_logger(__name__)


def get_places_client() -> PlacesClient:
    settings = get_settings()
    if not settings.address_search_enabled:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Address search is disabled")
    return PlacesClient.from_settings(settings)


@router.get(
    "/search",
    response_model=AddressSearchResponse,
    status_code=status.HTTP_200_OK,
)
async def search_addresses(
    postcode: str = Query("", description="Postcode or partial address"),
    client: PlacesClient = Depends(get_places_client),
) -> AddressSearchResponse:
    if not postcode.strip():
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Postcode is required")

    try:
        addresses = await client.normalize(postcode)
    except ConfigurationError as exc:
        _logger.error("Address search misconfigured", error=str(exc))
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Address search is not configured"
        ) from exc
    except UpstreamError as exc:
        _logger.error("Address search failed", query=postcode, error=str(exc))
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to search addresses"
        ) from exc

    return AddressSearchResponse(
        query=postcode,
        addresses=[Address.from_domain(address) for address in addresses],
    )
