"""
Data models for the flight_catalog library.

This package contains the flight record model and the queryable
collections the catalog searches are composed from.
"""

from .flight import Flight, FlightStatus, FLIGHT_FIELD_MAP
from .queryable_collection import QueryableCollection
from .flight_collection import FlightCollection

__all__ = [
    'Flight',
    'FlightStatus',
    'FLIGHT_FIELD_MAP',
    'QueryableCollection',
    'FlightCollection',
]
