from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, Field, field_validator

from app.domain.address import NormalizedAddress


class Address(BaseModel):
    """Search result as produced by the normalizer, serialized unchanged."""

    address_line_1: str
    address_line_2: str | None = None
    street_name: str | None = None
    street_number: str | None = None
    building_name: str | None = None
    sub_building: str | None = None
    town_or_city: str
    county: str | None = None
    postcode: str
    formatted_address: str
    country: str | None = None

    @classmethod
    def from_domain(cls, address: NormalizedAddress) -> "Address":
        return cls(**asdict(address))


class SelectedAddress(Address):
    """Address the customer picked or typed in, checked before a quote is built."""

    address_line_1: str = Field(..., min_length=1)
    town_or_city: str = Field(..., min_length=1)
    postcode: str = Field(..., min_length=1)

    @field_validator("address_line_1", "town_or_city", "postcode", mode="before")
    def _strip_required(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip()
        return value


class AddressSearchResponse(BaseModel):
    query: str
    addresses: list[Address] = Field(default_factory=list)
