"""
Specialized queryable collection for Flight objects.

Provides the filters and orderings the catalog searches are built from,
while keeping the composability of the base QueryableCollection.
"""

from datetime import date, datetime
from typing import List, Union

from .flight import Flight, FlightStatus
from .queryable_collection import QueryableCollection


class FlightCollection(QueryableCollection[Flight]):
    """
    Queryable collection for flight filtering.

    String filters are exact and case-sensitive. Time ranges are inclusive
    at both ends; an inverted range (start after end) matches nothing.

    Example:
        # Delayed departures to London on a given day, earliest first
        london = (
            collection
            .delayed()
            .to_destination("London")
            .departing_on(date(2023, 12, 27))
            .by_departure()
            .all()
        )
    """

    # --- Attribute filters ---

    def by_airline(self, airline: str) -> 'FlightCollection':
        """Filter flights operated by an airline code."""
        return self._new_collection([
            f for f in self._items
            if f.airline == airline
        ])

    def by_flight_number(self, flight_number: str) -> 'FlightCollection':
        """Filter flights with a flight number (duplicates all match)."""
        return self._new_collection([
            f for f in self._items
            if f.flight_number == flight_number
        ])

    def with_status(self, status: FlightStatus) -> 'FlightCollection':
        """Filter flights by status."""
        return self._new_collection([
            f for f in self._items
            if f.status == status
        ])

    def delayed(self) -> 'FlightCollection':
        """Filter delayed flights."""
        return self._new_collection([f for f in self._items if f.is_delayed])

    def to_destination(self, destination: str) -> 'FlightCollection':
        """Filter flights bound for a destination."""
        return self._new_collection([
            f for f in self._items
            if f.destination == destination
        ])

    # --- Time filters ---

    def departing_on(self, day: Union[date, datetime]) -> 'FlightCollection':
        """
        Filter flights departing on a calendar date.

        Args:
            day: Date to match; if a datetime is given its time is ignored

        Returns:
            Collection with flights whose departure falls on that date
        """
        if isinstance(day, datetime):
            day = day.date()
        return self._new_collection([
            f for f in self._items
            if f.departure_time.date() == day
        ])

    def departing_between(self, start: datetime, end: datetime) -> 'FlightCollection':
        """Filter flights departing within [start, end]."""
        return self._new_collection([
            f for f in self._items
            if start <= f.departure_time <= end
        ])

    def arriving_between(self, start: datetime, end: datetime) -> 'FlightCollection':
        """Filter flights arriving within [start, end]."""
        return self._new_collection([
            f for f in self._items
            if start <= f.arrival_time <= end
        ])

    # --- Ordering ---

    def by_departure(self) -> 'FlightCollection':
        """Sort by departure time, earliest first; ties keep input order."""
        return self.order_by(lambda f: f.departure_time)

    def by_arrival(self) -> 'FlightCollection':
        """Sort by arrival time, earliest first; ties keep input order."""
        return self.order_by(lambda f: f.arrival_time)

    # --- Results ---

    def copies(self) -> List[Flight]:
        """
        Return independent copies of the flights.

        Changes made to the returned flights do not affect the flights
        held by this collection.
        """
        return [f.copy() for f in self._items]
