"""Domain models for the customer and venue catalog."""

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Interview steps in the order they are asked."""

    MORNING = "morning"
    LUNCH = "lunch"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    STAY = "stay"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def time_slot(self) -> str:
        return _CATEGORY_TIME_SLOTS[self]


CATEGORIES: tuple[Category, ...] = tuple(Category)

_CATEGORY_LABELS = {
    Category.MORNING: "Morning sightseeing",
    Category.LUNCH: "Lunch",
    Category.AFTERNOON: "Afternoon sightseeing",
    Category.NIGHT: "Evening",
    Category.STAY: "Accommodation",
}

_CATEGORY_TIME_SLOTS = {
    Category.MORNING: "09:00-11:00",
    Category.LUNCH: "12:00-13:00",
    Category.AFTERNOON: "13:30-16:00",
    Category.NIGHT: "17:00-19:00",
    Category.STAY: "19:00-",
}


@dataclass(frozen=True)
class Venue:
    """A selectable place belonging to one category."""

    id: str
    category: Category
    name: str
    description: str
    detail: str
    age_target: str
    duration_minutes: int
    cost_amount: int
    rain_safe: bool
    tags: tuple[str, ...] = ()
    photo_ref: str | None = None


@dataclass(frozen=True)
class Customer:
    """A persona with hidden preferences and a hidden correct plan."""

    id: str
    name: str
    persona_text: str
    correct_plan: dict[Category, str]
    category_hints: dict[Category, str] = field(default_factory=dict)

    def hint_for(self, category: Category) -> str:
        """Return the category hint, falling back to the persona text."""
        hint = self.category_hints.get(category)
        return self.persona_text if hint is None else hint


@dataclass(frozen=True)
class Catalog:
    """Read-only view over the loaded customers and venues.

    Both collections keep the order of the source documents.
    """

    customers: tuple[Customer, ...]
    venues: tuple[Venue, ...]

    def customer(self, customer_id: str) -> Customer | None:
        """Return a customer by id, if present."""
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    def venue(self, venue_id: str) -> Venue | None:
        """Return a venue by id, if present."""
        for venue in self.venues:
            if venue.id == venue_id:
                return venue
        return None

    def venues_in(self, category: Category) -> list[Venue]:
        """Return venues for a category in catalog order."""
        return [venue for venue in self.venues if venue.category == category]
