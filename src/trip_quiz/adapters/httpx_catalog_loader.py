"""Catalog loader fetching JSON documents over HTTP."""

from dataclasses import dataclass

import httpx

from trip_quiz.services.catalog import CatalogLoader


@dataclass
class HttpxCatalogLoader(CatalogLoader):
    """HTTPX-backed catalog loader."""

    customers_url: str
    venues_url: str
    http_client: httpx.Client

    @classmethod
    def create(cls, customers_url: str, venues_url: str) -> "HttpxCatalogLoader":
        """Create a loader with a managed httpx session."""
        return cls(
            customers_url=customers_url,
            venues_url=venues_url,
            http_client=httpx.Client(),
        )

    def load_customers(self) -> object:
        """Fetch the customers document."""
        return self._get_json(self.customers_url)

    def load_venues(self) -> object:
        """Fetch the venues document."""
        return self._get_json(self.venues_url)

    def _get_json(self, url: str) -> object:
        response = self.http_client.get(url, timeout=15)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
