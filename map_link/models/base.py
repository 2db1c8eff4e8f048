"""Base models for addresses and generated map links."""

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class AddressRecord:
    """Structured postal address with optional components.

    Field names follow the usual postal address data model:
    - address_line1/address_line2: street lines
    - locality: city or town
    - administrative_area: state, province, county, prefecture
    - dependent_locality: neighborhood, suburb, district
    - postal_code: ZIP/CEP/postcode in country-specific format
    - country_code: ISO 3166-1 alpha-2 code

    ``sorting_code``, ``organization``, ``given_name`` and ``family_name``
    are carried for completeness but never appear in a map query.
    """

    address_line1: str | None = None
    address_line2: str | None = None
    locality: str | None = None
    administrative_area: str | None = None
    dependent_locality: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    sorting_code: str | None = None
    organization: str | None = None
    given_name: str | None = None
    family_name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AddressRecord":
        """Create a record from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key in known and value is not None:
                values[key] = str(value)
        return cls(**values)

    def is_empty(self) -> bool:
        """Return True when no query component is set."""
        return not any(
            (
                self.address_line1,
                self.address_line2,
                self.locality,
                self.administrative_area,
                self.dependent_locality,
                self.postal_code,
                self.country_code,
            )
        )


@dataclass(frozen=True)
class MapLinkResult:
    """A map link built for one address by one provider."""

    provider_id: str
    query: str
    url: str
    address: AddressRecord
