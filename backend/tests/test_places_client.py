from __future__ import annotations

import json

import httpx
import pytest
import respx

from app.core.config import PLACES_SEARCH_ENDPOINT
from app.core.errors import ConfigurationError, UpstreamError
from app.services.places import PlacesClient


_DOWNING_STREET = {
    "places": [
        {
            "displayName": {"text": "10 Downing Street"},
            "formattedAddress": "10 Downing Street, London SW1A 1AA, UK",
            "addressComponents": [
                {"longText": "10", "shortText": "10", "types": ["street_number"]},
                {
                    "longText": "Downing Street",
                    "shortText": "Downing St",
                    "types": ["route"],
                },
                {"longText": "London", "shortText": "London", "types": ["locality"]},
                {
                    "longText": "SW1A 1AA",
                    "shortText": "SW1A 1AA",
                    "types": ["postal_code"],
                },
            ],
        }
    ]
}


@pytest.mark.asyncio
async def test_normalize_sends_biased_text_search():
    client = PlacesClient("test-key")

    with respx.mock:
        route = respx.post(PLACES_SEARCH_ENDPOINT).mock(
            return_value=httpx.Response(200, json=_DOWNING_STREET)
        )
        addresses = await client.normalize("SW1A 1AA")

    assert route.call_count == 1
    request = route.calls.last.request
    assert request.headers["X-Goog-Api-Key"] == "test-key"
    assert request.headers["X-Goog-FieldMask"] == (
        "places.displayName,places.formattedAddress,"
        "places.addressComponents,places.types"
    )

    body = json.loads(request.content)
    assert body["textQuery"] == "SW1A 1AA"
    assert body["maxResultCount"] == 20
    assert body["locationBias"]["rectangle"] == {
        "low": {"latitude": 49.5, "longitude": -10.5},
        "high": {"latitude": 60.9, "longitude": 1.8},
    }

    assert len(addresses) == 1
    assert addresses[0].address_line_1 == "10 Downing Street"
    assert addresses[0].town_or_city == "London"
    assert addresses[0].postcode == "SW1A 1AA"


@pytest.mark.asyncio
async def test_normalize_returns_empty_list_for_no_places():
    client = PlacesClient("test-key")

    with respx.mock:
        respx.post(PLACES_SEARCH_ENDPOINT).mock(
            return_value=httpx.Response(200, json={})
        )
        addresses = await client.normalize("ZZ9 9ZZ")

    assert addresses == []


@pytest.mark.asyncio
async def test_provider_error_status_raises_upstream_error():
    client = PlacesClient("test-key")

    with respx.mock:
        respx.post(PLACES_SEARCH_ENDPOINT).mock(
            return_value=httpx.Response(500, json={"error": {"code": 500}})
        )
        with pytest.raises(UpstreamError) as excinfo:
            await client.normalize("SW1A 1AA")

    assert excinfo.value.status_code == 500


@pytest.mark.asyncio
async def test_transport_failure_raises_upstream_error():
    client = PlacesClient("test-key")

    with respx.mock:
        respx.post(PLACES_SEARCH_ENDPOINT).mock(
            side_effect=httpx.ConnectTimeout("timed out")
        )
        with pytest.raises(UpstreamError):
            await client.normalize("SW1A 1AA")


@pytest.mark.asyncio
async def test_invalid_json_raises_upstream_error():
    client = PlacesClient("test-key")

    with respx.mock:
        respx.post(PLACES_SEARCH_ENDPOINT).mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )
        with pytest.raises(UpstreamError):
            await client.normalize("SW1A 1AA")


@pytest.mark.asyncio
async def test_missing_api_key_fails_before_network_call():
    client = PlacesClient(None)

    with respx.mock(assert_all_called=False) as respx_mock:
        route = respx_mock.post(PLACES_SEARCH_ENDPOINT)
        with pytest.raises(ConfigurationError):
            await client.normalize("SW1A 1AA")

    assert not route.called


@pytest.mark.asyncio
async def test_custom_endpoint_and_result_limit():
    client = PlacesClient(
        "test-key", endpoint="https://places.test/search", max_results=5
    )

    with respx.mock:
        route = respx.post("https://places.test/search").mock(
            return_value=httpx.Response(200, json={"places": []})
        )
        await client.normalize("LS1")

    assert json.loads(route.calls.last.request.content)["maxResultCount"] == 5


@pytest.mark.asyncio
async def test_empty_query_is_rejected():
    client = PlacesClient("test-key")

    with pytest.raises(ValueError):
        await client.normalize("")
