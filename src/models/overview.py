"""Result types for the AI-generated player overview."""

from dataclasses import asdict, dataclass, field


@dataclass
class RatingStat:
    name: str
    value: int


@dataclass
class RatingCategory:
    """A group of 0-99 ratings, e.g. "Athletic" or "Quarterback"."""

    category: str
    stats: list[RatingStat] = field(default_factory=list)


@dataclass
class Ability:
    name: str
    tier: str  # Bronze, Silver, Gold, Platinum, X-Factor
    description: str


@dataclass
class PlayerOverview:
    """Narrative overview and hypothetical ratings for one player."""

    ai_overview: str
    ai_ratings: list[RatingCategory] = field(default_factory=list)
    player_quality_score: int | None = None
    player_class: str = "Uncertain"
    redshirted: str = "Uncertain"  # "Yes", "No", "Uncertain"
    high_school_rating: str = "N/A"
    archetype: str = "General"
    dealbreaker: str = "None apparent"
    assigned_abilities: list[Ability] = field(default_factory=list)

    def to_api_dict(self) -> dict[str, object]:
        return {
            "aiOverview": self.ai_overview,
            "aiRatings": [asdict(c) for c in self.ai_ratings],
            "playerQualityScore": self.player_quality_score,
            "playerClass": self.player_class,
            "redshirted": self.redshirted,
            "highSchoolRating": self.high_school_rating,
            "archetype": self.archetype,
            "dealbreaker": self.dealbreaker,
            "assignedAbilities": [asdict(a) for a in self.assigned_abilities],
        }
