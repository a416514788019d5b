"""Tests for whole-file catalog persistence."""

import json
import pytest
from datetime import datetime, timedelta

from flight_catalog.catalog import FlightCatalog
from flight_catalog.config import CatalogConfig
from flight_catalog.errors import FlightParseError, FlightSerializeError, MissingFlightDataError
from flight_catalog.models.flight import Flight, FlightStatus
from flight_catalog.persistence import read_catalog, write_catalog


class TestReadCatalog:

    def test_read_asset(self, test_assets_dir):
        catalog = read_catalog(test_assets_dir / 'flights_data.json')

        assert len(catalog) == 4
        assert [f.flight_number for f in catalog.search_delayed()] == ["XYZ789"]

    def test_read_with_config(self, test_assets_dir):
        config = CatalogConfig(json_indent=4)
        catalog = read_catalog(str(test_assets_dir / 'flights_data.json'), config=config)
        assert catalog.config is config

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_catalog(tmp_path / 'missing.json')

    def test_read_invalid_document(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('{"flights": [', encoding='utf-8')
        with pytest.raises(FlightParseError):
            read_catalog(path)

    def test_read_document_without_flights(self, tmp_path):
        path = tmp_path / 'empty.json'
        path.write_text('{}', encoding='utf-8')
        with pytest.raises(MissingFlightDataError):
            read_catalog(path)


class TestWriteCatalog:

    def test_write_then_read(self, tmp_path, test_assets_dir):
        catalog = read_catalog(test_assets_dir / 'flights_data.json')
        catalog.remove("XYZ789")
        catalog.add(Flight(
            flight_number="AB123",
            airline="MAU",
            destination="Donbass",
            departure_time=datetime(2023, 12, 27, 15, 30),
            arrival_time=datetime(2023, 12, 27, 17, 30),
            status=FlightStatus.ON_TIME,
            duration=timedelta(hours=2),
        ))
        path = tmp_path / 'flights_data_updated.json'

        write_catalog(catalog, path)
        restored = read_catalog(path)

        assert restored.flights.all() == catalog.flights.all()
        assert [f.flight_number for f in restored.flights] == ["PS101", "PS205", "LH1493", "AB123"]

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / 'flights.json'
        path.write_text('previous content that is much longer than the new document', encoding='utf-8')

        write_catalog(FlightCatalog(), path)

        assert json.loads(path.read_text(encoding='utf-8')) == {"flights": []}

    def test_write_serialize_failure_leaves_file(self, tmp_path):
        path = tmp_path / 'flights.json'
        path.write_text('{"flights": []}', encoding='utf-8')
        catalog = FlightCatalog([Flight(duration=None)])

        with pytest.raises(FlightSerializeError):
            write_catalog(catalog, path)
        assert path.read_text(encoding='utf-8') == '{"flights": []}'
