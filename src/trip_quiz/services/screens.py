"""Render data for the interview, plan and result screens."""

from dataclasses import dataclass

from trip_quiz.domain.catalog import CATEGORIES, Catalog, Venue
from trip_quiz.domain.errors import InterviewIncompleteError, InvalidSelectionError
from trip_quiz.domain.scoring import FeedbackBand, ScoreReport, ScoreTier
from trip_quiz.domain.sessions import SessionState
from trip_quiz.services.interview import InterviewService
from trip_quiz.services.scoring import feedback_band, score_tier

TIER_COMMENTS = {
    ScoreTier.PERFECT: "Perfect! Every pick was right!",
    ScoreTier.GREAT: "A very good plan!",
    ScoreTier.GOOD: "A good plan!",
    ScoreTier.FAIR: "There is room to improve.",
    ScoreTier.TRY_AGAIN: "Let's build a better plan next time!",
}

BAND_HINTS = {
    FeedbackBand.PERFECT: (
        "Every spot is correct. You understood the customer perfectly!"
    ),
    FeedbackBand.GOOD: "Nice work! Read the customer's hints again.",
    FeedbackBand.TRY: (
        "Read the customer's preferences and hints carefully "
        "and pick spots that match them!"
    ),
}


@dataclass(frozen=True)
class VenueCard:
    """Summary of a venue shown in the selection list."""

    id: str
    name: str
    description: str
    age_target: str
    duration_minutes: int
    cost_amount: int
    is_free: bool
    rain_safe: bool
    photo_ref: str | None


@dataclass(frozen=True)
class VenueDetail:
    """Detail payload shown before confirming a selection."""

    id: str
    name: str
    detail: str
    photo_ref: str | None


@dataclass(frozen=True)
class InterviewView:
    """Render data for the interview screen."""

    customer_name: str
    persona_text: str
    category: str
    category_label: str
    title: str
    hint: str
    venues: list[VenueCard]
    progress: float
    can_go_back: bool


@dataclass(frozen=True)
class TimelineEntry:
    """One stop in the planned day."""

    category: str
    time_slot: str
    name: str
    description: str
    duration_minutes: int
    cost_amount: int
    rain_safe: bool


@dataclass(frozen=True)
class PlanView:
    """Render data for the plan timeline screen."""

    timeline: list[TimelineEntry]


@dataclass(frozen=True)
class FeedbackLine:
    """Per-category result line."""

    category: str
    category_label: str
    correct: bool
    selected_name: str | None
    correct_name: str | None


@dataclass(frozen=True)
class ResultView:
    """Render data for the score screen."""

    score: int
    tier: str
    comment: str
    band: str
    band_hint: str
    correct_count: int
    total_categories: int
    feedback: list[FeedbackLine]
    all_tags: list[str]


def interview_view(service: InterviewService) -> InterviewView:
    """Build the interview screen for the current step."""
    customer = service.current_customer()
    category = service.current_category()
    state = service.state
    return InterviewView(
        customer_name=customer.name,
        persona_text=customer.persona_text,
        category=category.value,
        category_label=category.label,
        title=f"Choose the {category.label.lower()}",
        hint=customer.hint_for(category),
        venues=[_venue_card(venue) for venue in service.venues_for_current_category()],
        progress=service.progress_fraction(),
        can_go_back=state is not None and state.step_index > 0,
    )


def venue_detail(catalog: Catalog, venue_id: str) -> VenueDetail:
    """Build the detail payload for a venue."""
    venue = catalog.venue(venue_id)
    if venue is None:
        raise InvalidSelectionError(f"Unknown venue: {venue_id}")
    return VenueDetail(
        id=venue.id, name=venue.name, detail=venue.detail, photo_ref=venue.photo_ref
    )


def plan_view(state: SessionState, catalog: Catalog) -> PlanView:
    """Build the day timeline from the session's selections."""
    if not state.is_complete:
        raise InterviewIncompleteError("Interview is not complete yet")
    timeline = []
    for category in CATEGORIES:
        venue_id = state.selections.get(category)
        venue = catalog.venue(venue_id) if venue_id else None
        if venue is None:
            continue
        timeline.append(
            TimelineEntry(
                category=category.value,
                time_slot=category.time_slot,
                name=venue.name,
                description=venue.description,
                duration_minutes=venue.duration_minutes,
                cost_amount=venue.cost_amount,
                rain_safe=venue.rain_safe,
            )
        )
    return PlanView(timeline=timeline)


def result_view(report: ScoreReport) -> ResultView:
    """Build the score screen from a report."""
    tier = score_tier(report.score)
    band = feedback_band(report.score)
    feedback = [
        FeedbackLine(
            category=category.value,
            category_label=category.label,
            correct=result.correct,
            selected_name=_name(result.selected_venue),
            correct_name=_name(result.correct_venue),
        )
        for category, result in report.results.items()
    ]
    return ResultView(
        score=report.score,
        tier=tier.value,
        comment=TIER_COMMENTS[tier],
        band=band.value,
        band_hint=BAND_HINTS[band],
        correct_count=report.correct_count,
        total_categories=report.total_categories,
        feedback=feedback,
        all_tags=list(report.all_tags),
    )


def _venue_card(venue: Venue) -> VenueCard:
    return VenueCard(
        id=venue.id,
        name=venue.name,
        description=venue.description,
        age_target=venue.age_target,
        duration_minutes=venue.duration_minutes,
        cost_amount=venue.cost_amount,
        is_free=venue.cost_amount == 0,
        rain_safe=venue.rain_safe,
        photo_ref=venue.photo_ref,
    )


def _name(venue: Venue | None) -> str | None:
    return venue.name if venue is not None else None
