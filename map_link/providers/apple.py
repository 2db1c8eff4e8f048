"""Apple Maps link provider."""

from map_link.formatter import build_url
from map_link.models.base import AddressRecord
from map_link.providers.base import MapLinkBase


class AppleMapsLink(MapLinkBase):
    """Apple Maps directions to the address."""

    id = "apple_maps"
    name = "Apple Maps"
    base_url = "https://maps.apple.com/"

    def get_address_url(self, address: AddressRecord) -> str:
        return build_url(self.base_url, {"daddr": self.address_string(address)})
