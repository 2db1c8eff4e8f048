"""OpenStreetMap link provider."""

from map_link.formatter import build_url
from map_link.models.base import AddressRecord
from map_link.providers.base import MapLinkBase


class OpenStreetMapLink(MapLinkBase):
    """OpenStreetMap search for the address."""

    id = "openstreetmap"
    name = "OpenStreetMap"
    base_url = "https://www.openstreetmap.org/search"

    def get_address_url(self, address: AddressRecord) -> str:
        return build_url(self.base_url, {"query": self.address_string(address)})
