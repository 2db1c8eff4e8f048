"""Map link providers."""

from map_link.providers.apple import AppleMapsLink
from map_link.providers.base import MapLinkBase
from map_link.providers.google import GoogleDirectionsLink, GoogleSearchLink
from map_link.providers.openstreetmap import OpenStreetMapLink

__all__ = [
    "AppleMapsLink",
    "GoogleDirectionsLink",
    "GoogleSearchLink",
    "MapLinkBase",
    "OpenStreetMapLink",
]
