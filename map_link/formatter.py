"""Address query formatting and Google Maps directions URLs."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping
from urllib.parse import quote, urlencode

from map_link.countries import CountryNameTable
from map_link.exceptions import MissingCountryMappingError
from map_link.models.base import AddressRecord

logger = logging.getLogger(__name__)

GOOGLE_DIRECTIONS_BASE_URL = "https://google.com/maps"

# Order is significant: query parts always appear in this sequence.
QUERY_FIELDS: tuple[str, ...] = (
    "address_line1",
    "address_line2",
    "locality",
    "administrative_area",
    "dependent_locality",
    "postal_code",
)


class UnmappedCountryPolicy(str, Enum):
    """What to do with a country code missing from the name table."""

    FAIL = "fail"
    OMIT = "omit"


def format_query(
    address: AddressRecord,
    countries: CountryNameTable,
    on_unmapped_country: UnmappedCountryPolicy = UnmappedCountryPolicy.FAIL,
) -> str:
    """Join the non-empty address components into a single query string.

    Components are emitted in a fixed order (see ``QUERY_FIELDS``) followed
    by the country's display name. The country code itself never appears.

    Parameters
    ----------
    address : AddressRecord
        Address to format. Any field may be empty.
    countries : CountryNameTable
        Lookup used to turn ``country_code`` into a display name.
    on_unmapped_country : UnmappedCountryPolicy
        ``FAIL`` raises when the code is not in ``countries``; ``OMIT``
        drops the country segment and logs a warning.

    Returns
    -------
    str
        Space-joined query, or ``""`` when no component is set.

    Raises
    ------
    MissingCountryMappingError
        If the country code is unmapped and the policy is ``FAIL``.
    """
    parts: list[str] = []
    for field_name in QUERY_FIELDS:
        value = getattr(address, field_name)
        if value:
            parts.append(value)

    country_code = address.country_code
    if country_code:
        if country_code in countries:
            parts.append(countries.name_for(country_code))
        elif UnmappedCountryPolicy(on_unmapped_country) is UnmappedCountryPolicy.OMIT:
            logger.warning(
                "Country code %r not in country table, omitting from query",
                country_code,
            )
        else:
            raise MissingCountryMappingError(country_code)

    return " ".join(parts)


def build_url(base_url: str, params: Mapping[str, object]) -> str:
    """Append percent-encoded ``params`` to ``base_url``.

    Spaces are encoded as ``%20`` and every reserved character is escaped.
    """
    return f"{base_url}?{urlencode(params, quote_via=quote)}"


def build_directions_url(
    address: AddressRecord,
    countries: CountryNameTable,
    on_unmapped_country: UnmappedCountryPolicy = UnmappedCountryPolicy.FAIL,
) -> str:
    """Return a Google Maps directions URL with ``address`` as destination."""
    query = format_query(address, countries, on_unmapped_country)
    url = build_url(GOOGLE_DIRECTIONS_BASE_URL, {"daddr": query})
    logger.debug("Built directions URL %s", url)
    return url
