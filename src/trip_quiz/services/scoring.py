"""Scoring of completed quiz sessions."""

from collections.abc import Sequence

from trip_quiz.domain.catalog import CATEGORIES, Catalog, Category, Customer
from trip_quiz.domain.scoring import (
    CategoryResult,
    FeedbackBand,
    ScoreReport,
    ScoreTier,
)
from trip_quiz.domain.sessions import SessionState

_MAX_SCORE = 100


def score_session(
    state: SessionState,
    customer: Customer,
    catalog: Catalog,
    categories: Sequence[Category] = CATEGORIES,
) -> ScoreReport:
    """Compare the session's selections with the customer's correct plan."""
    results: dict[Category, CategoryResult] = {}
    all_tags: list[str] = []
    correct_count = 0
    for category in categories:
        selected_id = state.selections.get(category)
        correct_id = customer.correct_plan.get(category)
        selected = catalog.venue(selected_id) if selected_id is not None else None
        correct = selected_id is not None and selected_id == correct_id
        if correct:
            correct_count += 1
        if selected is not None:
            all_tags.extend(selected.tags)
        results[category] = CategoryResult(
            correct=correct,
            selected_venue=selected,
            correct_venue=catalog.venue(correct_id) if correct_id else None,
        )

    total = len(categories)
    score = correct_count * _MAX_SCORE // total if total else 0
    return ScoreReport(
        score=score,
        correct_count=correct_count,
        total_categories=total,
        results=results,
        all_tags=tuple(all_tags),
    )


def score_tier(score: int) -> ScoreTier:
    """Map a score to its headline tier."""
    if score >= _MAX_SCORE:
        return ScoreTier.PERFECT
    if score >= 80:
        return ScoreTier.GREAT
    if score >= 60:
        return ScoreTier.GOOD
    if score >= 40:
        return ScoreTier.FAIR
    return ScoreTier.TRY_AGAIN


def feedback_band(score: int) -> FeedbackBand:
    """Map a score to the coarse feedback band."""
    tier = score_tier(score)
    if tier is ScoreTier.PERFECT:
        return FeedbackBand.PERFECT
    if tier in {ScoreTier.GREAT, ScoreTier.GOOD}:
        return FeedbackBand.GOOD
    return FeedbackBand.TRY
