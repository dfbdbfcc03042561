"""Tests for plan scoring."""

import pytest

from trip_quiz.domain.catalog import Catalog, Category, Customer
from trip_quiz.domain.scoring import FeedbackBand, ScoreTier
from trip_quiz.domain.sessions import SessionState
from trip_quiz.services.scoring import feedback_band, score_session, score_tier
from tests.conftest import make_plan


def _state(*venue_ids: str) -> SessionState:
    return SessionState(
        customer_id="c1", step_index=len(venue_ids), selections=make_plan(*venue_ids)
    )


def _customer(catalog: Catalog) -> Customer:
    customer = catalog.customer("c1")
    assert customer is not None
    return customer


def test_matching_plan_scores_perfect(catalog: Catalog) -> None:
    report = score_session(
        _state("v1", "v2", "v3", "v4", "v5"), _customer(catalog), catalog
    )

    assert report.score == 100
    assert report.correct_count == 5
    assert report.total_categories == 5
    assert score_tier(report.score) == ScoreTier.PERFECT
    assert all(result.correct for result in report.results.values())
    assert list(report.results) == list(Category)


def test_one_wrong_category_scores_eighty(catalog: Catalog) -> None:
    report = score_session(
        _state("v1", "v2", "wrong", "v4", "v5"), _customer(catalog), catalog
    )

    assert report.score == 80
    assert score_tier(report.score) == ScoreTier.GREAT
    afternoon = report.results[Category.AFTERNOON]
    assert afternoon.correct is False
    assert afternoon.selected_venue is not None
    assert afternoon.selected_venue.id == "wrong"
    assert afternoon.correct_venue is not None
    assert afternoon.correct_venue.id == "v3"


def test_scoring_is_repeatable(catalog: Catalog) -> None:
    state = _state("m-alt", "v2", "wrong", "v4", "s-alt")
    customer = _customer(catalog)

    first = score_session(state, customer, catalog)
    second = score_session(state, customer, catalog)

    assert first == second
    assert state == _state("m-alt", "v2", "wrong", "v4", "s-alt")


def test_missing_selection_counts_as_incorrect(catalog: Catalog) -> None:
    state = SessionState(
        customer_id="c1",
        step_index=5,
        selections={Category.MORNING: "v1", Category.LUNCH: "v2"},
    )

    report = score_session(state, _customer(catalog), catalog)

    assert report.score == 40
    assert report.results[Category.NIGHT].correct is False
    assert report.results[Category.NIGHT].selected_venue is None
    assert report.results[Category.NIGHT].correct_venue is not None


def test_all_tags_follow_category_order(catalog: Catalog) -> None:
    report = score_session(
        _state("v1", "v2", "wrong", "v4", "v5"), _customer(catalog), catalog
    )

    assert report.all_tags == (
        "tag-v1",
        "tag-v2",
        "busy",
        "outdoor",
        "tag-v4",
        "tag-v5",
    )


def test_score_scales_with_category_count(catalog: Catalog) -> None:
    categories = [Category.MORNING, Category.LUNCH, Category.AFTERNOON, Category.NIGHT]

    report = score_session(
        _state("v1", "v2", "v3", "n-alt", "v5"),
        _customer(catalog),
        catalog,
        categories=categories,
    )

    assert report.total_categories == 4
    assert report.correct_count == 3
    assert report.score == 75
    assert list(report.results) == categories


@pytest.mark.parametrize(
    ("score", "tier", "band"),
    [
        (100, ScoreTier.PERFECT, FeedbackBand.PERFECT),
        (99, ScoreTier.GREAT, FeedbackBand.GOOD),
        (80, ScoreTier.GREAT, FeedbackBand.GOOD),
        (79, ScoreTier.GOOD, FeedbackBand.GOOD),
        (60, ScoreTier.GOOD, FeedbackBand.GOOD),
        (59, ScoreTier.FAIR, FeedbackBand.TRY),
        (40, ScoreTier.FAIR, FeedbackBand.TRY),
        (39, ScoreTier.TRY_AGAIN, FeedbackBand.TRY),
        (0, ScoreTier.TRY_AGAIN, FeedbackBand.TRY),
    ],
)
def test_tier_and_band_thresholds(
    score: int, tier: ScoreTier, band: FeedbackBand
) -> None:
    assert score_tier(score) == tier
    assert feedback_band(score) == band
