"""Custom exception hierarchy for map-link."""


class MapLinkError(Exception):
    """Base exception for all map-link errors."""


class MissingCountryMappingError(MapLinkError, LookupError):
    """Raised when a country code has no entry in the country name table."""

    def __init__(self, country_code: str) -> None:
        super().__init__(f"No country name mapped for code {country_code!r}")
        self.country_code = country_code


class UnknownMapLinkError(MapLinkError, LookupError):
    """Raised when a map link provider id is not registered."""


class DuplicateMapLinkError(MapLinkError):
    """Raised when a map link provider id is registered twice."""


class ConfigurationError(MapLinkError):
    """Raised when configuration is invalid or missing."""


class SinkError(MapLinkError):
    """Raised when a sink operation fails."""
