"""Domain models for map link generation."""

from map_link.models.base import AddressRecord, MapLinkResult

__all__ = ["AddressRecord", "MapLinkResult"]
