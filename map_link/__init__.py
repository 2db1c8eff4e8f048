"""Build map provider links from structured postal addresses."""

from map_link.countries import CountryNameTable
from map_link.exceptions import MapLinkError, MissingCountryMappingError
from map_link.formatter import UnmappedCountryPolicy, build_directions_url, format_query
from map_link.models.base import AddressRecord, MapLinkResult
from map_link.registry import MapLinkRegistry, default_registry, get_map_link

__version__ = "0.1.0"

__all__ = [
    "AddressRecord",
    "CountryNameTable",
    "MapLinkError",
    "MapLinkRegistry",
    "MapLinkResult",
    "MissingCountryMappingError",
    "UnmappedCountryPolicy",
    "build_directions_url",
    "default_registry",
    "format_query",
    "get_map_link",
]
