"""Tests for sinks."""

import json
from pathlib import Path

import pytest

from map_link.exceptions import SinkError
from map_link.formatter import UnmappedCountryPolicy
from map_link.models.base import AddressRecord, MapLinkResult
from map_link.sinks import ConsoleSink, JsonFileSink
from map_link.sinks.serialization import serialize_value, to_dict


@pytest.fixture
def result(baker_street: AddressRecord) -> MapLinkResult:
    return MapLinkResult(
        provider_id="google_directions",
        query="221B Baker Street London NW1 6XE United Kingdom",
        url="https://google.com/maps?daddr=221B%20Baker%20Street",
        address=baker_street,
    )


class TestSerialization:
    """Tests for serialization helpers."""

    def test_to_dict_nested_dataclass(self, result: MapLinkResult) -> None:
        data = to_dict(result)

        assert data["provider_id"] == "google_directions"
        assert data["address"] == {
            "address_line1": "221B Baker Street",
            "locality": "London",
            "postal_code": "NW1 6XE",
            "country_code": "GB",
        }

    def test_to_dict_dict_passthrough(self) -> None:
        assert to_dict({"a": 1}) == {"a": 1}

    def test_to_dict_other(self) -> None:
        assert to_dict(42) == {"value": "42"}

    def test_serialize_enum(self) -> None:
        assert serialize_value(UnmappedCountryPolicy.OMIT) == "omit"

    def test_serialize_list(self) -> None:
        assert serialize_value([AddressRecord(locality="Paris")]) == [{"locality": "Paris"}]


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.pretty is True
        assert sink.max_records is None

    def test_write_batch(self, result: MapLinkResult, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_batch("google_directions", [result])
        captured = capsys.readouterr()

        assert "google_directions (1 records)" in captured.out
        assert "https://google.com/maps?daddr=221B%20Baker%20Street" in captured.out

    def test_max_records(self, result: MapLinkResult, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False, max_records=1)

        sink.write_batch("links", [result, result, result])
        captured = capsys.readouterr()

        assert "... and 2 more records" in captured.out

    def test_close_summary(self, result: MapLinkResult, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write_batch("links", [result])
        sink.write_batch("links", [result])

        sink.close()
        captured = capsys.readouterr()

        assert "links: 2 records" in captured.out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_write_batch(self, tmp_path: Path, result: MapLinkResult) -> None:
        sink = JsonFileSink(tmp_path / "out", pretty=True)

        sink.write_batch("google_directions", [result])

        with open(tmp_path / "out" / "google_directions.json", encoding="utf-8") as f:
            data = json.load(f)
        assert len(data) == 1
        assert data[0]["query"] == "221B Baker Street London NW1 6XE United Kingdom"
        assert data[0]["address"]["country_code"] == "GB"

    def test_non_ascii_preserved(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)

        sink.write_batch("addresses", [AddressRecord(locality="São Paulo")])

        content = (tmp_path / "addresses.json").read_text(encoding="utf-8")
        assert "São Paulo" in content

    def test_close_summary(
        self, tmp_path: Path, result: MapLinkResult, capsys: pytest.CaptureFixture
    ) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("links", [result, result])

        sink.close()
        captured = capsys.readouterr()

        assert "links: 2 records" in captured.out

    def test_output_dir_is_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(SinkError):
            JsonFileSink(blocker / "out")
