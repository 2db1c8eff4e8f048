"""Google Maps link providers."""

from map_link.formatter import GOOGLE_DIRECTIONS_BASE_URL, build_directions_url, build_url
from map_link.models.base import AddressRecord
from map_link.providers.base import MapLinkBase

GOOGLE_SEARCH_BASE_URL = "https://www.google.com/maps/search/"


class GoogleDirectionsLink(MapLinkBase):
    """Google Maps directions with the address as destination (``daddr``)."""

    id = "google_directions"
    name = "Google Direction"
    base_url = GOOGLE_DIRECTIONS_BASE_URL

    def get_address_url(self, address: AddressRecord) -> str:
        return build_directions_url(address, self.countries, self.on_unmapped_country)


class GoogleSearchLink(MapLinkBase):
    """Google Maps universal search URL.

    See https://developers.google.com/maps/documentation/urls/get-started
    """

    id = "google_search"
    name = "Google Maps Search"
    base_url = GOOGLE_SEARCH_BASE_URL

    def get_address_url(self, address: AddressRecord) -> str:
        return build_url(self.base_url, {"api": 1, "query": self.address_string(address)})
