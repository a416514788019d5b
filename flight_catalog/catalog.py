"""
In-memory flight catalog.

FlightCatalog owns an ordered list of flights and offers insertion,
removal by flight number, sorted searches and whole-document JSON
import/export. Searches never modify the catalog: they return copies of
the matching flights, so changes to search results are not reflected in
the catalog.
"""

import json
import logging
from datetime import date, datetime
from typing import List, Optional, Union

from .config import CatalogConfig
from .errors import (
    CatalogResult,
    FlightImportError,
    FlightParseError,
    FlightSerializeError,
    MissingFlightDataError,
)
from .models.flight import Flight
from .models.flight_collection import FlightCollection

logger = logging.getLogger(__name__)

FLIGHTS_KEY = 'flights'


class FlightCatalog:
    """
    Ordered collection of flight records with filtered, sorted searches.

    Examples:
        catalog = FlightCatalog()
        result = catalog.load_from_json(Path("flights_data.json").read_text())
        if not result.is_ok:
            print(result.error)

        catalog.remove("XYZ789")
        catalog.add(Flight(flight_number="AB123", airline="MAU", ...))

        for flight in catalog.search_by_airline("MAU"):
            print(flight)

        document = catalog.export_to_json().unwrap()
    """

    def __init__(self, flights: Optional[List[Flight]] = None, config: Optional[CatalogConfig] = None):
        """
        Initialize the catalog.

        Args:
            flights: Optional initial flights, copied and kept in the given order
            config: Optional settings; defaults to CatalogConfig()
        """
        self.config = config or CatalogConfig()
        self._flights: List[Flight] = [f.copy() for f in flights] if flights else []

    def _query(self) -> FlightCollection:
        # Wrap a snapshot so query chains never touch the catalog's list
        return FlightCollection(list(self._flights))

    @property
    def flights(self) -> FlightCollection:
        """Queryable collection over copies of all flights, in catalog order."""
        return FlightCollection(self._query().copies())

    # --- Mutation ---

    def add(self, flight: Flight) -> None:
        """Append a copy of a flight. Duplicates are allowed and nothing is validated."""
        self._flights.append(flight.copy())
        logger.debug(f"Added flight {flight.flight_number!r}, catalog now has {len(self._flights)} flights")

    def remove(self, flight_number: str) -> int:
        """
        Remove every flight with the given flight number.

        Args:
            flight_number: Exact, case-sensitive flight number

        Returns:
            Number of flights removed (0 when nothing matched)
        """
        before = len(self._flights)
        self._flights = [f for f in self._flights if f.flight_number != flight_number]
        removed_count = before - len(self._flights)

        if removed_count > 0:
            logger.info(f"Removed {removed_count} flights with number {flight_number!r}")
        else:
            logger.debug(f"No flights found with number {flight_number!r}")
        return removed_count

    # --- Searches ---

    def search_by_airline(self, airline: str) -> List[Flight]:
        """Flights of an airline, earliest departure first."""
        return self._query().by_airline(airline).by_departure().copies()

    def search_delayed(self) -> List[Flight]:
        """Delayed flights, earliest departure first."""
        return self._query().delayed().by_departure().copies()

    def search_by_departure_date(self, departure_date: Union[date, datetime]) -> List[Flight]:
        """
        Flights departing on a calendar date, earliest departure first.

        Args:
            departure_date: Date to match; the time of a datetime is ignored
        """
        return self._query().departing_on(departure_date).by_departure().copies()

    def search_by_time_and_destination(self, start: datetime, end: datetime, destination: str) -> List[Flight]:
        """
        Flights to a destination departing within [start, end], earliest first.

        An inverted range (start after end) returns an empty list.
        """
        if start > end:
            logger.debug(f"Inverted departure range {start} > {end}, no flights match")
            return []
        return (
            self._query()
            .to_destination(destination)
            .departing_between(start, end)
            .by_departure()
            .copies()
        )

    def search_recent_arrivals(self, reference_time: datetime) -> List[Flight]:
        """
        Flights that arrived within the recent window ending at reference_time.

        The window is [reference_time - config.recent_window, reference_time],
        one hour by default. Results are ordered by arrival time.
        """
        try:
            window_start = reference_time - self.config.recent_window
        except OverflowError:
            # reference_time is within the window of datetime.min
            window_start = datetime.min
        return self._query().arriving_between(window_start, reference_time).by_arrival().copies()

    # --- JSON import/export ---

    def load_from_json(self, document: Union[str, bytes]) -> CatalogResult[None]:
        """
        Replace the catalog contents with the flights of a JSON document.

        The document must be an object with a ``flights`` array. On any
        failure the catalog is left exactly as it was.

        Args:
            document: JSON text, or UTF-8 encoded bytes

        Returns:
            Successful result, or a failed result carrying a
            FlightParseError or MissingFlightDataError
        """
        try:
            flights = self._decode(document)
        except FlightImportError as e:
            logger.warning(f"Failed to load flights from JSON: {e}")
            return CatalogResult.failure(e)

        self._flights = flights
        logger.info(f"Loaded {len(flights)} flights from JSON")
        return CatalogResult.success()

    def export_to_json(self) -> CatalogResult[str]:
        """
        Serialize all flights, in catalog order, as an indented JSON document.

        Returns:
            Successful result holding the document text, or a failed result
            carrying a FlightSerializeError
        """
        try:
            document = json.dumps(
                {FLIGHTS_KEY: [f.to_dict() for f in self._flights]},
                indent=self.config.json_indent,
                ensure_ascii=False,
            )
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            logger.error(f"Failed to serialize flights to JSON: {e}")
            return CatalogResult.failure(FlightSerializeError("Failed to serialize flights", details=str(e)))

        logger.info(f"Exported {len(self._flights)} flights to JSON")
        return CatalogResult.success(document)

    @staticmethod
    def _decode(document: Union[str, bytes]) -> List[Flight]:
        """Decode a document into flights, raising FlightImportError on failure."""
        if isinstance(document, (bytes, bytearray)):
            try:
                document = bytes(document).decode('utf-8-sig')
            except UnicodeDecodeError as e:
                raise FlightParseError("Document is not valid UTF-8", details=str(e)) from e
        if not isinstance(document, str):
            raise FlightParseError(f"Document must be text or bytes, got {type(document).__name__}")

        try:
            data = json.loads(document.lstrip('\ufeff'))
        except (ValueError, RecursionError) as e:
            raise FlightParseError("Document is not valid JSON", details=str(e)) from e

        if not isinstance(data, dict):
            raise FlightParseError(f"Document root must be an object, got {type(data).__name__}")

        # Keys match case-insensitively, like the flight fields
        entries = next(
            (value for key, value in data.items() if key.lower() == FLIGHTS_KEY),
            None,
        )
        if entries is None:
            raise MissingFlightDataError(f"Document has no '{FLIGHTS_KEY}' array")
        if not isinstance(entries, list):
            raise FlightParseError(f"'{FLIGHTS_KEY}' must be an array, got {type(entries).__name__}")

        flights = []
        for index, entry in enumerate(entries):
            try:
                flights.append(Flight.from_dict(entry))
            except (TypeError, ValueError, OverflowError) as e:
                raise FlightParseError(f"Malformed flight entry: {e}", details=f"index {index}") from e
        return flights

    def __len__(self) -> int:
        return len(self._flights)

    def __repr__(self) -> str:
        return f"FlightCatalog(flights={len(self._flights)})"
