"""Pytest configuration and fixtures."""

import pytest

from map_link.countries import CountryNameTable
from map_link.models.base import AddressRecord


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def countries() -> CountryNameTable:
    """Small country table."""
    return CountryNameTable({"GB": "United Kingdom", "US": "United States", "BR": "Brazil"})


@pytest.fixture
def baker_street() -> AddressRecord:
    """Partially filled UK address."""
    return AddressRecord(
        address_line1="221B Baker Street",
        locality="London",
        postal_code="NW1 6XE",
        country_code="GB",
    )


@pytest.fixture
def full_address() -> AddressRecord:
    """Address with every query component set."""
    return AddressRecord(
        address_line1="Rua das Flores, 123",
        address_line2="Apto 101",
        locality="São Paulo",
        administrative_area="SP",
        dependent_locality="Centro",
        postal_code="01234-567",
        country_code="BR",
    )
