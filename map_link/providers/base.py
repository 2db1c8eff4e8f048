"""Base class for map link providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from map_link.countries import CountryNameTable
from map_link.formatter import UnmappedCountryPolicy, format_query
from map_link.models.base import AddressRecord, MapLinkResult


class MapLinkBase(ABC):
    """Turn an address into a link for one map provider.

    Subclasses set ``id`` and ``name`` and implement ``get_address_url``.
    The query string shared by every provider comes from
    ``address_string``.

    Parameters
    ----------
    countries : CountryNameTable | None
        Country name lookup. Defaults to the standard list.
    on_unmapped_country : UnmappedCountryPolicy
        Policy for country codes missing from ``countries``.
    """

    id: ClassVar[str]
    name: ClassVar[str]

    def __init__(
        self,
        countries: CountryNameTable | None = None,
        on_unmapped_country: UnmappedCountryPolicy = UnmappedCountryPolicy.FAIL,
    ) -> None:
        self.countries = countries if countries is not None else CountryNameTable.standard()
        self.on_unmapped_country = UnmappedCountryPolicy(on_unmapped_country)

    def address_string(self, address: AddressRecord) -> str:
        """Build the query string for a single address."""
        return format_query(address, self.countries, self.on_unmapped_country)

    @abstractmethod
    def get_address_url(self, address: AddressRecord) -> str:
        """Return the map link URL for ``address``."""

    def get_result(self, address: AddressRecord) -> MapLinkResult:
        """Return the query and URL for ``address`` as one record."""
        return MapLinkResult(
            provider_id=self.id,
            query=self.address_string(address),
            url=self.get_address_url(address),
            address=address,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
