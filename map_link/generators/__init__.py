"""Sample address generators."""

from map_link.generators.address import AddressFactory, CountryDistribution

__all__ = ["AddressFactory", "CountryDistribution"]
