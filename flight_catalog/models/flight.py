"""Flight data model."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict

from dateutil.parser import isoparse

from ..utils.timespan import format_timespan, parse_timespan


class FlightStatus(Enum):
    """
    Operational status of a flight.

    Values are the wire ordinals, in declaration order.
    """
    ON_TIME = 0
    DELAYED = 1
    CANCELLED = 2
    BOARDING = 3
    IN_FLIGHT = 4

    @property
    def wire_name(self) -> str:
        """PascalCase name, e.g. ``OnTime`` or ``InFlight``."""
        return ''.join(part.capitalize() for part in self.name.split('_'))

    @classmethod
    def parse(cls, value: Any) -> 'FlightStatus':
        """
        Create status from its ordinal or name.

        Args:
            value: Ordinal (0-4), wire name ("Delayed") or member name ("DELAYED")

        Returns:
            Matching FlightStatus

        Raises:
            ValueError: If value matches no status
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; true/false are not valid ordinals
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().replace('_', '').lower()
            for status in cls:
                if status.wire_name.lower() == key:
                    return status
        raise ValueError(f"Unknown flight status: {value!r}")


# Python attribute -> JSON key, in wire order
FLIGHT_FIELD_MAP: Dict[str, str] = {
    'flight_number': 'FlightNumber',
    'airline': 'Airline',
    'destination': 'Destination',
    'departure_time': 'DepartureTime',
    'arrival_time': 'ArrivalTime',
    'status': 'Status',
    'duration': 'Duration',
    'aircraft_type': 'AircraftType',
    'terminal': 'Terminal',
}


@dataclass
class Flight:
    """
    Flight record held by the catalog.

    No field is validated and duration is never derived from the
    departure and arrival times; all fields are set independently.

    Example:
        flight = Flight(
            flight_number="AB123",
            airline="MAU",
            destination="London",
            departure_time=datetime(2023, 12, 27, 15, 30),
            arrival_time=datetime(2023, 12, 27, 17, 30),
            duration=timedelta(hours=2),
        )
    """

    flight_number: str = ""
    airline: str = ""
    destination: str = ""
    departure_time: datetime = datetime.min
    arrival_time: datetime = datetime.min
    status: FlightStatus = FlightStatus.ON_TIME
    duration: timedelta = field(default_factory=timedelta)
    aircraft_type: str = ""
    terminal: str = ""

    @property
    def is_delayed(self) -> bool:
        return self.status == FlightStatus.DELAYED

    def copy(self) -> 'Flight':
        """Return an independent copy of this flight."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a dictionary using the wire field names.

        Timestamps are ISO-8601 without offset, status is the ordinal and
        duration is interval text.
        """
        encoders = {
            'departure_time': lambda v: v.isoformat(),
            'arrival_time': lambda v: v.isoformat(),
            'status': lambda v: v.value,
            'duration': format_timespan,
        }
        return {
            key: encoders.get(attr, lambda v: v)(getattr(self, attr))
            for attr, key in FLIGHT_FIELD_MAP.items()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Flight':
        """
        Create Flight from a wire dictionary.

        Keys are matched case-insensitively. Missing keys and nulls take
        the field default.

        Args:
            data: Dictionary with flight fields

        Returns:
            Flight instance

        Raises:
            TypeError: If data is not a dict or a field has the wrong JSON type
            ValueError: If a timestamp, status or duration cannot be parsed
        """
        if not isinstance(data, dict):
            raise TypeError(f"Flight entry must be an object, got {type(data).__name__}")

        lowered = {str(key).lower(): value for key, value in data.items()}

        def get(attr: str) -> Any:
            return lowered.get(FLIGHT_FIELD_MAP[attr].lower())

        kwargs: Dict[str, Any] = {}
        for attr in ('flight_number', 'airline', 'destination', 'aircraft_type', 'terminal'):
            value = get(attr)
            if value is not None:
                kwargs[attr] = _as_text(FLIGHT_FIELD_MAP[attr], value)

        for attr in ('departure_time', 'arrival_time'):
            value = get(attr)
            if value is not None:
                kwargs[attr] = _parse_timestamp(FLIGHT_FIELD_MAP[attr], value)

        status = get('status')
        if status is not None:
            kwargs['status'] = FlightStatus.parse(status)

        duration = get('duration')
        if duration is not None:
            kwargs['duration'] = parse_timespan(duration)

        return cls(**kwargs)

    def __str__(self) -> str:
        return (
            f"{self.flight_number} - {self.airline} - {self.destination} - "
            f"{self.departure_time} - {self.arrival_time} - {self.status.wire_name}"
        )


def _as_text(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _parse_timestamp(key: str, value: Any) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    parsed = isoparse(value)
    # Wall-clock time is kept; offsets are not interpreted
    return parsed.replace(tzinfo=None)
