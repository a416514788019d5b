"""
Whole-document file persistence for flight catalogs.

Files are read and written in one piece as UTF-8 JSON; a write always
overwrites the whole file.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .catalog import FlightCatalog
from .config import CatalogConfig

logger = logging.getLogger(__name__)


def read_catalog(filepath: Union[str, Path], config: Optional[CatalogConfig] = None) -> FlightCatalog:
    """
    Load a catalog from a JSON file.

    Args:
        filepath: Path of the JSON document
        config: Optional settings for the new catalog

    Returns:
        Catalog holding the file's flights

    Raises:
        OSError: If the file cannot be read
        FlightImportError: If the document cannot be imported
    """
    path = Path(filepath)
    catalog = FlightCatalog(config=config)
    catalog.load_from_json(path.read_bytes()).unwrap()
    logger.info(f"Read {len(catalog)} flights from {path}")
    return catalog


def write_catalog(catalog: FlightCatalog, filepath: Union[str, Path]) -> None:
    """
    Write a catalog to a JSON file, replacing any existing content.

    Raises:
        OSError: If the file cannot be written
        FlightSerializeError: If the catalog cannot be serialized
    """
    path = Path(filepath)
    document = catalog.export_to_json().unwrap()
    path.write_text(document, encoding='utf-8')
    logger.info(f"Wrote {len(catalog)} flights to {path}")
