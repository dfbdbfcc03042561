"""Pydantic models for catalog source documents."""

from pydantic import BaseModel, Field, field_validator

from trip_quiz.domain.catalog import CATEGORIES, Category, Customer, Venue


class VenueDocument(BaseModel):
    """Venue entry as stored in places.json."""

    id: str = Field(min_length=1)
    category: Category
    name: str
    description: str = ""
    detail: str = ""
    age: str = ""
    duration_min: int = Field(alias="durationMin", ge=0)
    cost_yen: int = Field(alias="costYen", ge=0)
    rainy_ok: bool = Field(default=False, alias="rainyOk")
    tags: list[str] = Field(default_factory=list)
    photo: str | None = None

    def to_domain(self) -> Venue:
        return Venue(
            id=self.id,
            category=self.category,
            name=self.name,
            description=self.description,
            detail=self.detail,
            age_target=self.age,
            duration_minutes=self.duration_min,
            cost_amount=self.cost_yen,
            rain_safe=self.rainy_ok,
            tags=tuple(self.tags),
            photo_ref=self.photo or None,
        )


class CustomerDocument(BaseModel):
    """Customer entry as stored in customers.json."""

    id: str = Field(min_length=1)
    name: str
    persona: str
    category_hints: dict[Category, str] = Field(
        default_factory=dict, alias="categoryHints"
    )
    correct_plan: dict[Category, str] = Field(alias="correctPlan")

    @field_validator("correct_plan")
    @classmethod
    def _plan_covers_every_category(
        cls, value: dict[Category, str]
    ) -> dict[Category, str]:
        missing = [category.value for category in CATEGORIES if category not in value]
        if missing:
            raise ValueError(f"correctPlan is missing {', '.join(missing)}")
        return value

    def to_domain(self) -> Customer:
        return Customer(
            id=self.id,
            name=self.name,
            persona_text=self.persona,
            correct_plan=dict(self.correct_plan),
            category_hints=dict(self.category_hints),
        )
