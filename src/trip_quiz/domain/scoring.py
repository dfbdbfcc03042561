"""Domain models for quiz scoring."""

from dataclasses import dataclass
from enum import Enum

from trip_quiz.domain.catalog import Category, Venue


class ScoreTier(str, Enum):
    """Headline comment tier for a score."""

    PERFECT = "perfect"
    GREAT = "great"
    GOOD = "good"
    FAIR = "fair"
    TRY_AGAIN = "try again"


class FeedbackBand(str, Enum):
    """Coarse banding used for the feedback hint."""

    PERFECT = "perfect"
    GOOD = "good"
    TRY = "try"


@dataclass(frozen=True)
class CategoryResult:
    """Outcome of a single category comparison."""

    correct: bool
    selected_venue: Venue | None
    correct_venue: Venue | None


@dataclass(frozen=True)
class ScoreReport:
    """Represents the scored outcome of a completed session."""

    score: int
    correct_count: int
    total_categories: int
    results: dict[Category, CategoryResult]
    all_tags: tuple[str, ...]
