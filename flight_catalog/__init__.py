"""
In-memory flight catalog with sorted queries and JSON persistence.

The main public API includes:
- Flight, FlightStatus: Flight data model
- FlightCatalog: Catalog with add/remove, searches and JSON import/export
- FlightCollection: Queryable collection used to build searches
- CatalogConfig: Catalog settings
- read_catalog / write_catalog: Whole-file JSON persistence
"""

from .models import Flight, FlightStatus, FlightCollection, QueryableCollection
from .catalog import FlightCatalog
from .config import CatalogConfig
from .errors import (
    CatalogError,
    CatalogResult,
    FlightImportError,
    FlightParseError,
    FlightSerializeError,
    ImportErrorKind,
    MissingFlightDataError,
)
from .persistence import read_catalog, write_catalog

__version__ = '0.1.0'
__all__ = [
    'Flight',
    'FlightStatus',
    'FlightCollection',
    'QueryableCollection',
    'FlightCatalog',
    'CatalogConfig',
    'CatalogError',
    'CatalogResult',
    'FlightImportError',
    'FlightParseError',
    'FlightSerializeError',
    'ImportErrorKind',
    'MissingFlightDataError',
    'read_catalog',
    'write_catalog',
]
