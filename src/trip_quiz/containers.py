"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass

from supabase import create_client

from trip_quiz.adapters.httpx_catalog_loader import HttpxCatalogLoader
from trip_quiz.adapters.json_file_catalog_loader import JsonFileCatalogLoader
from trip_quiz.adapters.memory_session_store import InMemorySessionStore
from trip_quiz.adapters.supabase_session_store import SupabaseSessionStore
from trip_quiz.config import Settings, parse_session_backend
from trip_quiz.domain.catalog import Catalog
from trip_quiz.services.catalog import CatalogLoader, CatalogService
from trip_quiz.services.interview import InterviewService, SessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: Catalog
    session_store: SessionStore
    interview_service: InterviewService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises CatalogLoadError when the catalog cannot be loaded.
    """
    resolved_settings = settings or Settings()
    loader = _build_catalog_loader(resolved_settings)
    try:
        catalog = CatalogService(loader).load()
    finally:
        if isinstance(loader, HttpxCatalogLoader):
            loader.close()

    session_store = _build_session_store(resolved_settings)
    interview_service = InterviewService(
        catalog=catalog,
        store=session_store,
        rng=random.Random(resolved_settings.random_seed),
    )

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        session_store=session_store,
        interview_service=interview_service,
    )


def _build_catalog_loader(settings: Settings) -> CatalogLoader:
    if settings.uses_remote_catalog:
        return HttpxCatalogLoader.create(
            customers_url=str(settings.catalog_customers_url),
            venues_url=str(settings.catalog_places_url),
        )
    return JsonFileCatalogLoader(settings.catalog_data_dir)


def _build_session_store(settings: Settings) -> SessionStore:
    backend = parse_session_backend(settings.session_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase session backend needs url and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseSessionStore(
            client=client,
            namespace=settings.session_namespace,
            table=settings.supabase_session_table,
        )
    return InMemorySessionStore(namespace=settings.session_namespace)
