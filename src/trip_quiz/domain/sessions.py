"""Domain models for quiz sessions."""

from dataclasses import dataclass, field
from enum import Enum

from trip_quiz.domain.catalog import CATEGORIES, Category


@dataclass
class SessionState:
    """Represents an in-progress or completed interview."""

    customer_id: str
    step_index: int = 0
    selections: dict[Category, str] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return self.step_index >= len(CATEGORIES)

    def has_consistent_selections(self) -> bool:
        """Return true when selections cover exactly the answered steps."""
        if not 0 <= self.step_index <= len(CATEGORIES):
            return False
        return set(self.selections) == set(CATEGORIES[: self.step_index])


class Screen(str, Enum):
    """Screens the presentation layer can be asked to show."""

    HOME = "home"
    INTERVIEW = "interview"
    PLAN = "plan"
    RESULT = "result"
