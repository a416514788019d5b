"""
Configuration for the flight catalog.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta

logger = logging.getLogger(__name__)

# JSON export
DEFAULT_JSON_INDENT = 2

# Recent arrivals look back this far from the reference time
DEFAULT_RECENT_WINDOW_MINUTES = 60


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    """Read a non-negative integer from the environment, falling back to default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value < minimum:
        logger.warning(f"Ignoring {name}={value}: must be >= {minimum}, using {default}")
        return default
    return value


@dataclass(frozen=True)
class CatalogConfig:
    """
    Settings used by FlightCatalog.

    Attributes:
        json_indent: Indentation width of exported documents
        recent_window: Look-back period of recent-arrival searches
    """

    json_indent: int = DEFAULT_JSON_INDENT
    recent_window: timedelta = field(
        default_factory=lambda: timedelta(minutes=DEFAULT_RECENT_WINDOW_MINUTES)
    )

    @classmethod
    def from_env(cls) -> 'CatalogConfig':
        """
        Build settings from the environment.

        Reads FLIGHT_CATALOG_JSON_INDENT and FLIGHT_CATALOG_RECENT_WINDOW_MINUTES;
        unset or invalid values use the defaults.
        """
        return cls(
            json_indent=_env_int('FLIGHT_CATALOG_JSON_INDENT', DEFAULT_JSON_INDENT),
            recent_window=timedelta(minutes=_env_int(
                'FLIGHT_CATALOG_RECENT_WINDOW_MINUTES', DEFAULT_RECENT_WINDOW_MINUTES
            )),
        )
