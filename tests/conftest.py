"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from trip_quiz.adapters.memory_session_store import InMemorySessionStore
from trip_quiz.config import Settings
from trip_quiz.containers import AppContainer
from trip_quiz.domain.catalog import Catalog, Category, Customer, Venue
from trip_quiz.domain.sessions import SessionState
from trip_quiz.services.interview import InterviewService, SessionStore


def make_venue(venue_id: str, category: Category, **overrides) -> Venue:
    values: dict[str, object] = {
        "id": venue_id,
        "category": category,
        "name": f"Venue {venue_id}",
        "description": f"About {venue_id}",
        "detail": f"Details of {venue_id}",
        "age_target": "All ages",
        "duration_minutes": 60,
        "cost_amount": 1000,
        "rain_safe": False,
        "tags": (f"tag-{venue_id}",),
    }
    values.update(overrides)
    return Venue(**values)  # type: ignore[arg-type]


def make_plan(*venue_ids: str) -> dict[Category, str]:
    return dict(zip(Category, venue_ids, strict=True))


def make_catalog() -> Catalog:
    venues = (
        make_venue("v1", Category.MORNING, rain_safe=True),
        make_venue("m-alt", Category.MORNING, cost_amount=0),
        make_venue("v2", Category.LUNCH),
        make_venue("l-alt", Category.LUNCH),
        make_venue("v3", Category.AFTERNOON),
        make_venue("wrong", Category.AFTERNOON, tags=("busy", "outdoor")),
        make_venue("v4", Category.NIGHT),
        make_venue("n-alt", Category.NIGHT),
        make_venue("v5", Category.STAY, photo_ref="images/v5.jpg"),
        make_venue("s-alt", Category.STAY),
    )
    customers = (
        Customer(
            id="c1",
            name="Planner One",
            persona_text="Likes the obvious choices.",
            correct_plan=make_plan("v1", "v2", "v3", "v4", "v5"),
            category_hints={Category.MORNING: "Start somewhere dry."},
        ),
        Customer(
            id="c2",
            name="Planner Two",
            persona_text="Likes the alternatives.",
            correct_plan=make_plan("m-alt", "l-alt", "wrong", "n-alt", "s-alt"),
        ),
        Customer(
            id="c3",
            name="Planner Three",
            persona_text="Mixes both.",
            correct_plan=make_plan("v1", "l-alt", "v3", "n-alt", "v5"),
        ),
    )
    return Catalog(customers=customers, venues=venues)


@dataclass
class FailingSessionStore(SessionStore):
    """Session store whose writes fail after an optional number of saves."""

    saves_before_failure: int = 0
    values: dict[str, str] = field(default_factory=dict)

    def load(self, key: str) -> str | None:
        return self.values.get(key)

    def save(self, key: str, value: str) -> None:
        if self.saves_before_failure <= 0:
            raise OSError("disk full")
        self.saves_before_failure -= 1
        self.values[key] = value

    def clear(self) -> None:
        raise OSError("disk full")


@pytest.fixture
def catalog() -> Catalog:
    return make_catalog()


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def service(catalog: Catalog, store: InMemorySessionStore) -> InterviewService:
    return InterviewService(catalog=catalog, store=store, rng=random.Random(7))


@pytest.fixture
def started_with_c1(service: InterviewService) -> InterviewService:
    """Service with a fresh session assigned to customer c1."""
    service.resume(SessionState(customer_id="c1"))
    return service


@pytest.fixture
def settings() -> Settings:
    return Settings(
        session_backend="memory",
        session_namespace="test",
        random_seed=3,
        environment="test",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def container(
    settings: Settings, catalog: Catalog, store: InMemorySessionStore
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=catalog,
        session_store=store,
        interview_service=InterviewService(
            catalog=catalog, store=store, rng=random.Random(11)
        ),
    )
