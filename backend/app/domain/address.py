from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence


DEFAULT_COUNTRY = "United Kingdom"
_LEADING_DIGIT = re.compile(r"^[0-9]")


@dataclass(frozen=True, slots=True)
class AddressComponent:
    long_text: str
    short_text: str
    types: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RawPlaceResult:
    formatted_address: str
    display_name: str
    components: tuple[AddressComponent, ...]


@dataclass(frozen=True, slots=True)
class NormalizedAddress:
    address_line_1: str
    town_or_city: str
    postcode: str
    formatted_address: str
    address_line_2: str | None = None
    street_name: str | None = None
    street_number: str | None = None
    building_name: str | None = None
    sub_building: str | None = None
    county: str | None = None
    country: str | None = None


@dataclass(frozen=True, slots=True)
class ExtractedFields:
    """Component values picked out of one place result, empty when absent."""

    street_number: str = ""
    route: str = ""
    subpremise: str = ""
    premise: str = ""
    establishment_name: str = ""
    point_of_interest: str = ""
    locality: str = ""
    admin_area_2: str = ""
    admin_area_1: str = ""
    country: str = DEFAULT_COUNTRY
    postal_code: str = ""


def parse_place(place: Mapping[str, Any]) -> RawPlaceResult:
    """Coerce one provider ``places[]`` entry into a ``RawPlaceResult``.

    The provider payload is loosely typed, so anything unexpected is
    replaced with an empty value instead of raising.
    """

    formatted = place.get("formattedAddress")
    display = place.get("displayName")
    display_text = display.get("text") if isinstance(display, Mapping) else None

    raw_components = place.get("addressComponents")
    components: list[AddressComponent] = []
    if isinstance(raw_components, list):
        for item in raw_components:
            if not isinstance(item, Mapping):
                continue
            types = item.get("types")
            components.append(
                AddressComponent(
                    long_text=_as_text(item.get("longText")),
                    short_text=_as_text(item.get("shortText")),
                    types=tuple(t for t in types if isinstance(t, str))
                    if isinstance(types, list)
                    else (),
                )
            )

    return RawPlaceResult(
        formatted_address=_as_text(formatted),
        display_name=_as_text(display_text),
        components=tuple(components),
    )


def find_component(components: Sequence[AddressComponent], tag: str) -> str:
    """Return the long text of the first component tagged ``tag``."""

    for component in components:
        if tag in component.types:
            return component.long_text
    return ""


def extract_fields(place: RawPlaceResult) -> ExtractedFields:
    components = place.components

    def first_of(*tags: str) -> str:
        for tag in tags:
            value = find_component(components, tag)
            if value:
                return value
        return ""

    return ExtractedFields(
        street_number=first_of("street_number"),
        route=first_of("route"),
        subpremise=first_of("subpremise"),
        premise=first_of("premise"),
        establishment_name=first_of("establishment"),
        point_of_interest=first_of("point_of_interest"),
        locality=first_of("locality", "postal_town", "administrative_area_level_3"),
        admin_area_2=first_of("administrative_area_level_2"),
        admin_area_1=first_of("administrative_area_level_1"),
        country=first_of("country") or DEFAULT_COUNTRY,
        postal_code=first_of("postal_code"),
    )


def derive_address_lines(
    fields: ExtractedFields, formatted_address: str
) -> tuple[str, str | None, str | None]:
    """Return ``(line_1, line_2, building_name)`` for the extracted fields."""

    street_number = fields.street_number
    route = fields.route
    premise = fields.premise
    building_name = ""

    # Named buildings go to line 2 while line 1 stays a street address.
    if fields.establishment_name and not _starts_with_digit(fields.establishment_name):
        building_name = fields.establishment_name
        line_1 = _street_line(street_number, route)
    elif premise and not _starts_with_digit(premise):
        building_name = premise
        line_1 = _street_line(street_number, route)
    elif street_number and route:
        line_1 = f"{street_number} {route}"
    elif premise:
        line_1 = premise
    elif route:
        line_1 = route
    else:
        line_1 = formatted_address.split(",")[0]

    line_2 = ""
    if fields.subpremise:
        prefix = "Flat " if _starts_with_digit(fields.subpremise) else ""
        line_2 = f"{prefix}{fields.subpremise}"
    elif building_name and building_name != line_1:
        line_2 = building_name

    return line_1, line_2 or None, building_name or None


def normalize_place(place: RawPlaceResult, query: str) -> NormalizedAddress:
    fields = extract_fields(place)
    line_1, line_2, building_name = derive_address_lines(
        fields, place.formatted_address
    )

    return NormalizedAddress(
        address_line_1=line_1,
        address_line_2=line_2,
        street_name=fields.route or None,
        street_number=fields.street_number or None,
        building_name=building_name,
        sub_building=fields.subpremise or None,
        town_or_city=fields.locality,
        county=fields.admin_area_2 or fields.admin_area_1 or None,
        postcode=fields.postal_code or query.upper(),
        formatted_address=place.formatted_address,
        country=fields.country,
    )


def normalize_places(
    places: Iterable[RawPlaceResult], query: str
) -> list[NormalizedAddress]:
    """Normalize provider results in order, dropping ones without line 1 or town.

    Whitespace-only values count as missing.
    """

    addresses: list[NormalizedAddress] = []
    for place in places:
        address = normalize_place(place, query)
        if address.address_line_1.strip() and address.town_or_city.strip():
            addresses.append(address)
    return addresses


def normalize_response(payload: Any, query: str) -> list[NormalizedAddress]:
    """Normalize a decoded ``places:searchText`` response body."""

    places = payload.get("places") if isinstance(payload, Mapping) else None
    if not isinstance(places, list):
        return []
    return normalize_places(
        (parse_place(place) for place in places if isinstance(place, Mapping)),
        query,
    )


def _street_line(street_number: str, route: str) -> str:
    if street_number and route:
        return f"{street_number} {route}"
    return route


def _starts_with_digit(value: str) -> bool:
    return bool(_LEADING_DIGIT.match(value))


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""
