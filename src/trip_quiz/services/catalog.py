"""Catalog loading and integrity checks."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from trip_quiz.domain.catalog import CATEGORIES, Catalog
from trip_quiz.domain.catalog_documents import CustomerDocument, VenueDocument
from trip_quiz.domain.errors import CatalogLoadError

logger = logging.getLogger(__name__)

_CUSTOMERS = TypeAdapter(list[CustomerDocument])
_VENUES = TypeAdapter(list[VenueDocument])


class CatalogLoader(Protocol):
    """Source of the raw customer and venue documents."""

    def load_customers(self) -> object:
        """Return the parsed customers document."""

    def load_venues(self) -> object:
        """Return the parsed venues document."""


@dataclass
class CatalogService:
    """Loads and validates the catalog from a loader."""

    loader: CatalogLoader

    def load(self) -> Catalog:
        """Load both documents or fail with CatalogLoadError."""
        try:
            raw_customers = self.loader.load_customers()
            raw_venues = self.loader.load_venues()
        except CatalogLoadError:
            raise
        except Exception as exc:
            raise CatalogLoadError(f"Failed to read catalog: {exc}") from exc

        try:
            customers = _CUSTOMERS.validate_python(raw_customers)
            venues = _VENUES.validate_python(raw_venues)
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid catalog document: {exc}") from exc

        catalog = Catalog(
            customers=tuple(document.to_domain() for document in customers),
            venues=tuple(document.to_domain() for document in venues),
        )
        _check_integrity(catalog)
        logger.info(
            "Catalog loaded",
            extra={
                "customers": len(catalog.customers),
                "venues": len(catalog.venues),
            },
        )
        return catalog


def _check_integrity(catalog: Catalog) -> None:
    """Reject duplicate ids and plans that point at unknown venues."""
    customer_ids = [customer.id for customer in catalog.customers]
    if len(set(customer_ids)) != len(customer_ids):
        raise CatalogLoadError("Duplicate customer id in catalog")
    venue_ids = [venue.id for venue in catalog.venues]
    if len(set(venue_ids)) != len(venue_ids):
        raise CatalogLoadError("Duplicate venue id in catalog")

    for customer in catalog.customers:
        for category in CATEGORIES:
            venue = catalog.venue(customer.correct_plan[category])
            if venue is None or venue.category != category:
                raise CatalogLoadError(
                    f"Customer {customer.id} plans an unknown "
                    f"{category.value} venue: {customer.correct_plan[category]}"
                )
