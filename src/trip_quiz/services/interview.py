"""Interview state machine for the trip planning quiz."""

import json
import logging
import random
from dataclasses import dataclass, field
from typing import Protocol

from trip_quiz.domain.catalog import CATEGORIES, Catalog, Category, Customer, Venue
from trip_quiz.domain.errors import (
    AtStartError,
    CorruptSessionError,
    EmptyCatalogError,
    InterviewCompleteError,
    InterviewIncompleteError,
    InvalidSelectionError,
    PersistenceWriteError,
    SessionNotStartedError,
)
from trip_quiz.domain.scoring import ScoreReport
from trip_quiz.domain.sessions import Screen, SessionState
from trip_quiz.services.scoring import score_session

logger = logging.getLogger(__name__)

SELECTED_CUSTOMER_KEY = "selectedCustomerId"
CURRENT_INDEX_KEY = "currentCategoryIndex"
SELECTED_PLACES_KEY = "selectedPlaces"


class SessionStore(Protocol):
    """Key/value persistence for the live session snapshot."""

    def load(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def save(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def clear(self) -> None:
        """Remove every key owned by this store."""


@dataclass
class InterviewService:
    """State machine driving one quiz session.

    Every mutating action validates first, then changes the in-memory
    state, then writes the snapshot through to the store. A rejected
    action leaves the state untouched.
    """

    catalog: Catalog
    store: SessionStore
    rng: random.Random = field(default_factory=random.Random)
    state: SessionState | None = None

    def bootstrap(self) -> SessionState:
        """Resume the persisted session or start a new one."""
        try:
            snapshot = self.load_snapshot()
            if snapshot is not None:
                return self.resume(snapshot)
        except CorruptSessionError:
            logger.warning("Discarding corrupt session snapshot", exc_info=True)
            self._clear_store()
        return self.start_session()

    def start_session(self) -> SessionState:
        """Assign a random customer and begin at the first step."""
        if not self.catalog.customers:
            raise EmptyCatalogError("No customers available to start a session")
        customer = self.rng.choice(self.catalog.customers)
        self.state = SessionState(customer_id=customer.id)
        logger.info("Session started", extra={"customer_id": customer.id})
        self._persist()
        return self.state

    def resume(self, snapshot: SessionState) -> SessionState:
        """Adopt a previously persisted session after validating it."""
        _validate_snapshot(snapshot, self.catalog)
        self.state = SessionState(
            customer_id=snapshot.customer_id,
            step_index=snapshot.step_index,
            selections=dict(snapshot.selections),
        )
        logger.info(
            "Session resumed",
            extra={
                "customer_id": snapshot.customer_id,
                "step_index": snapshot.step_index,
            },
        )
        return self.state

    def load_snapshot(self) -> SessionState | None:
        """Read the persisted snapshot; None when any key is missing."""
        customer_id = self.store.load(SELECTED_CUSTOMER_KEY)
        raw_index = self.store.load(CURRENT_INDEX_KEY)
        raw_places = self.store.load(SELECTED_PLACES_KEY)
        if customer_id is None or raw_index is None or raw_places is None:
            return None
        try:
            step_index = int(raw_index)
        except ValueError as exc:
            raise CorruptSessionError(f"Invalid step index: {raw_index!r}") from exc
        return SessionState(
            customer_id=customer_id,
            step_index=step_index,
            selections=_parse_selections(raw_places),
        )

    def restart(self) -> None:
        """Drop the session and its persisted snapshot."""
        self.state = None
        self._clear_store()

    def current_screen(self) -> Screen:
        """Return the screen implied by the session state."""
        if self.state is None:
            return Screen.HOME
        if self.state.is_complete:
            return Screen.PLAN
        return Screen.INTERVIEW

    def current_customer(self) -> Customer:
        """Return the customer assigned to the session."""
        state = self._require_state()
        customer = self.catalog.customer(state.customer_id)
        if customer is None:
            raise CorruptSessionError(f"Unknown customer: {state.customer_id}")
        return customer

    def current_category(self) -> Category:
        """Return the category being asked."""
        state = self._require_state()
        if state.is_complete:
            raise InterviewCompleteError("Every category has been answered")
        return CATEGORIES[state.step_index]

    def current_hint(self) -> str:
        """Return the customer's hint for the current category."""
        return self.current_customer().hint_for(self.current_category())

    def venues_for_current_category(self) -> list[Venue]:
        """Return the selectable venues for the current step."""
        return self.catalog.venues_in(self.current_category())

    def select_venue(self, venue_id: str) -> SessionState:
        """Record a venue for the current category and advance."""
        state = self._require_state()
        if state.is_complete:
            raise InvalidSelectionError("Interview is already complete")
        category = CATEGORIES[state.step_index]
        if all(venue.id != venue_id for venue in self.catalog.venues_in(category)):
            raise InvalidSelectionError(
                f"Venue {venue_id!r} is not a {category.value} option"
            )
        state.selections[category] = venue_id
        state.step_index += 1
        self._persist()
        return state

    def go_back(self) -> SessionState:
        """Return to the previous category and forget its selection."""
        state = self._require_state()
        if state.step_index <= 0:
            raise AtStartError("Already at the first category")
        state.step_index -= 1
        state.selections.pop(CATEGORIES[state.step_index], None)
        self._persist()
        return state

    def progress_fraction(self) -> float:
        """Return display progress in (0, 1]."""
        state = self._require_state()
        return min(1.0, (state.step_index + 1) / len(CATEGORIES))

    def compute_score(self) -> ScoreReport:
        """Score the completed session."""
        state = self._require_state()
        if not state.is_complete:
            raise InterviewIncompleteError("Interview is not complete yet")
        return score_session(state, self.current_customer(), self.catalog)

    def _require_state(self) -> SessionState:
        if self.state is None:
            raise SessionNotStartedError("No active session")
        return self.state

    def _persist(self) -> None:
        state = self._require_state()
        places = {
            category.value: state.selections[category]
            for category in CATEGORIES
            if category in state.selections
        }
        try:
            self.store.save(SELECTED_CUSTOMER_KEY, state.customer_id)
            self.store.save(CURRENT_INDEX_KEY, str(state.step_index))
            self.store.save(SELECTED_PLACES_KEY, json.dumps(places))
        except Exception as exc:
            logger.exception(
                "Failed to persist session", extra={"customer_id": state.customer_id}
            )
            raise PersistenceWriteError("Failed to persist session state") from exc

    def _clear_store(self) -> None:
        try:
            self.store.clear()
        except Exception as exc:
            logger.exception("Failed to clear persisted session")
            raise PersistenceWriteError("Failed to clear session state") from exc


def _parse_selections(raw: str) -> dict[Category, str]:
    """Parse selectedPlaces; values may be venue ids or full venue records."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorruptSessionError("selectedPlaces is not valid JSON") from exc
    if not isinstance(data, dict):
        raise CorruptSessionError("selectedPlaces must be an object")

    selections: dict[Category, str] = {}
    for key, value in data.items():
        try:
            category = Category(key)
        except ValueError as exc:
            raise CorruptSessionError(f"Unknown category: {key!r}") from exc
        if isinstance(value, dict):
            value = value.get("id")
        if not isinstance(value, str):
            raise CorruptSessionError(f"Invalid selection for {key}")
        selections[category] = value
    return selections


def _validate_snapshot(snapshot: SessionState, catalog: Catalog) -> None:
    if catalog.customer(snapshot.customer_id) is None:
        raise CorruptSessionError(f"Unknown customer: {snapshot.customer_id}")
    if not 0 <= snapshot.step_index <= len(CATEGORIES):
        raise CorruptSessionError(f"Step index out of range: {snapshot.step_index}")
    if not snapshot.has_consistent_selections():
        raise CorruptSessionError("Selections do not match the step index")
    for category, venue_id in snapshot.selections.items():
        venue = catalog.venue(venue_id)
        if venue is None or venue.category != category:
            raise CorruptSessionError(
                f"Invalid {category.value} selection: {venue_id}"
            )
