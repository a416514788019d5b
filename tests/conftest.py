import pytest
from datetime import datetime, timedelta
from pathlib import Path

from flight_catalog.models.flight import Flight, FlightStatus


def _flight(
    flight_number: str = "AB123",
    airline: str = "MAU",
    destination: str = "London",
    departure_time: datetime = datetime(2023, 12, 27, 15, 30),
    arrival_time: datetime = None,
    status: FlightStatus = FlightStatus.ON_TIME,
    duration: timedelta = timedelta(hours=2),
    aircraft_type: str = "",
    terminal: str = "",
) -> Flight:
    """Helper to create test flights."""
    return Flight(
        flight_number=flight_number,
        airline=airline,
        destination=destination,
        departure_time=departure_time,
        arrival_time=arrival_time or departure_time + duration,
        status=status,
        duration=duration,
        aircraft_type=aircraft_type,
        terminal=terminal,
    )


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def flights_document(test_assets_dir) -> str:
    """Return the sample flights JSON document."""
    return (test_assets_dir / 'flights_data.json').read_text(encoding='utf-8')


@pytest.fixture
def sample_flights() -> list:
    """Flights with a departure tie and a duplicate flight number."""
    return [
        _flight("A1", airline="MAU", departure_time=datetime(2023, 12, 27, 10, 0)),
        _flight("B1", airline="MAU", departure_time=datetime(2023, 12, 27, 9, 0)),
        _flight("C1", airline="DAL", departure_time=datetime(2023, 12, 27, 10, 0)),
        _flight("D1", airline="MAU", departure_time=datetime(2023, 12, 27, 10, 0),
                    status=FlightStatus.DELAYED),
        _flight("A1", airline="DAL", destination="Paris",
                    departure_time=datetime(2023, 12, 28, 7, 0), status=FlightStatus.DELAYED),
    ]
