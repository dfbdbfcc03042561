"""Catalog loader reading JSON documents from a directory."""

import json
from dataclasses import dataclass
from pathlib import Path

from trip_quiz.domain.errors import CatalogLoadError
from trip_quiz.services.catalog import CatalogLoader

CUSTOMERS_FILE = "customers.json"
VENUES_FILE = "places.json"


@dataclass
class JsonFileCatalogLoader(CatalogLoader):
    """Reads customers.json and places.json from a data directory."""

    data_dir: Path

    def load_customers(self) -> object:
        """Read the customers document."""
        return self._read(CUSTOMERS_FILE)

    def load_venues(self) -> object:
        """Read the venues document."""
        return self._read(VENUES_FILE)

    def _read(self, filename: str) -> object:
        path = self.data_dir / filename
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CatalogLoadError(f"Catalog file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"Catalog file is not valid JSON: {path}") from exc
