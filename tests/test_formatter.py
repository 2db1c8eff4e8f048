"""Tests for address query formatting and directions URLs."""

import logging

import pytest

from map_link.countries import CountryNameTable
from map_link.exceptions import MissingCountryMappingError
from map_link.formatter import (
    UnmappedCountryPolicy,
    build_directions_url,
    build_url,
    format_query,
)
from map_link.models.base import AddressRecord


class _Translatable:
    """Display name object that only becomes text through str()."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text


class TestFormatQuery:
    """Tests for format_query."""

    def test_baker_street(
        self, baker_street: AddressRecord, countries: CountryNameTable
    ) -> None:
        assert (
            format_query(baker_street, countries)
            == "221B Baker Street London NW1 6XE United Kingdom"
        )

    def test_empty_address(self, countries: CountryNameTable) -> None:
        assert format_query(AddressRecord(), countries) == ""

    def test_empty_strings_are_skipped(self, countries: CountryNameTable) -> None:
        address = AddressRecord(
            address_line1="",
            address_line2="",
            locality="London",
            administrative_area="",
            postal_code="",
            country_code="",
        )

        assert format_query(address, countries) == "London"

    def test_full_field_order(
        self, full_address: AddressRecord, countries: CountryNameTable
    ) -> None:
        assert format_query(full_address, countries) == (
            "Rua das Flores, 123 Apto 101 São Paulo SP Centro 01234-567 Brazil"
        )

    @pytest.mark.parametrize(
        "fields, expected",
        [
            ({"address_line2": "L2", "postal_code": "PC"}, "L2 PC"),
            ({"dependent_locality": "DL", "locality": "LO"}, "LO DL"),
            ({"country_code": "US", "address_line1": "L1"}, "L1 United States"),
            ({"administrative_area": "AA", "address_line2": "L2"}, "L2 AA"),
        ],
    )
    def test_order_independent_of_present_fields(
        self, fields: dict, expected: str, countries: CountryNameTable
    ) -> None:
        assert format_query(AddressRecord(**fields), countries) == expected

    def test_country_name_not_code(self, countries: CountryNameTable) -> None:
        result = format_query(AddressRecord(country_code="GB"), countries)

        assert result == "United Kingdom"
        assert "GB" not in result

    def test_country_name_converted_with_str(self) -> None:
        table = CountryNameTable({"DE": _Translatable("Germany")})

        assert format_query(AddressRecord(locality="Berlin", country_code="DE"), table) == (
            "Berlin Germany"
        )

    def test_recipient_fields_not_in_query(self, countries: CountryNameTable) -> None:
        address = AddressRecord(
            given_name="Sherlock",
            family_name="Holmes",
            organization="Consulting Detective",
            sorting_code="CEDEX 1",
            locality="London",
        )

        assert format_query(address, countries) == "London"

    def test_idempotent(
        self, full_address: AddressRecord, countries: CountryNameTable
    ) -> None:
        assert format_query(full_address, countries) == format_query(full_address, countries)

    def test_unmapped_country_fails_by_default(self, countries: CountryNameTable) -> None:
        address = AddressRecord(locality="Nowhere", country_code="XX")

        with pytest.raises(MissingCountryMappingError) as exc_info:
            format_query(address, countries)

        assert exc_info.value.country_code == "XX"

    def test_unmapped_country_omitted(
        self, countries: CountryNameTable, caplog: pytest.LogCaptureFixture
    ) -> None:
        address = AddressRecord(locality="Nowhere", country_code="XX")

        with caplog.at_level(logging.WARNING, logger="map_link.formatter"):
            result = format_query(address, countries, UnmappedCountryPolicy.OMIT)

        assert result == "Nowhere"
        assert "'XX'" in caplog.text

    def test_policy_accepts_plain_string(self, countries: CountryNameTable) -> None:
        address = AddressRecord(country_code="XX")

        assert format_query(address, countries, "omit") == ""  # type: ignore[arg-type]

    def test_country_lookup_is_case_sensitive(self, countries: CountryNameTable) -> None:
        with pytest.raises(MissingCountryMappingError):
            format_query(AddressRecord(country_code="gb"), countries)


class TestBuildDirectionsUrl:
    """Tests for build_directions_url."""

    def test_baker_street(
        self, baker_street: AddressRecord, countries: CountryNameTable
    ) -> None:
        assert build_directions_url(baker_street, countries) == (
            "https://google.com/maps?daddr="
            "221B%20Baker%20Street%20London%20NW1%206XE%20United%20Kingdom"
        )

    def test_empty_address(self, countries: CountryNameTable) -> None:
        assert build_directions_url(AddressRecord(), countries) == (
            "https://google.com/maps?daddr="
        )

    def test_reserved_and_non_ascii_characters_encoded(
        self, full_address: AddressRecord, countries: CountryNameTable
    ) -> None:
        url = build_directions_url(full_address, countries)

        assert url == (
            "https://google.com/maps?daddr="
            "Rua%20das%20Flores%2C%20123%20Apto%20101%20S%C3%A3o%20Paulo"
            "%20SP%20Centro%2001234-567%20Brazil"
        )

    def test_slash_and_ampersand_encoded(self, countries: CountryNameTable) -> None:
        address = AddressRecord(address_line1="Unit 4/12 A&B Road")

        assert build_directions_url(address, countries) == (
            "https://google.com/maps?daddr=Unit%204%2F12%20A%26B%20Road"
        )

    def test_unmapped_country_fails(self, countries: CountryNameTable) -> None:
        with pytest.raises(MissingCountryMappingError):
            build_directions_url(AddressRecord(country_code="XX"), countries)

    def test_unmapped_country_omitted(self, countries: CountryNameTable) -> None:
        url = build_directions_url(
            AddressRecord(locality="Nowhere", country_code="XX"),
            countries,
            UnmappedCountryPolicy.OMIT,
        )

        assert url == "https://google.com/maps?daddr=Nowhere"


class TestBuildUrl:
    """Tests for build_url."""

    def test_multiple_params_keep_order(self) -> None:
        assert build_url("https://example.com/search/", {"api": 1, "query": "a b"}) == (
            "https://example.com/search/?api=1&query=a%20b"
        )
