from dataclasses import dataclass, field

from src.models.team import Provider
from src.transform.clean import NOT_AVAILABLE, format_height, format_weight

FALLBACK_TEAM_PRIMARY_COLOR = "#4A5568"
FALLBACK_TEAM_SECONDARY_COLOR = "#A0AEC0"


@dataclass
class Player:
    """A college football player, joined to its team's colors and logos."""

    id: str
    first_name: str
    last_name: str
    position: str = NOT_AVAILABLE
    team: str = ""
    jersey_number: int | None = None
    height_inches: int | None = None
    weight_pounds: int | None = None
    hometown: str | None = None
    class_year: str | None = None  # "Freshman" .. "Graduate"
    recruit_ids: list[str] = field(default_factory=list)
    redshirted: bool | None = None
    recruit_rating: str | None = None  # ESPN recruit.rating, e.g. "0.9512"
    provider: Provider = Provider.CFBD
    team_primary_color: str = FALLBACK_TEAM_PRIMARY_COLOR
    team_secondary_color: str = FALLBACK_TEAM_SECONDARY_COLOR
    team_logo_url: str = ""
    team_dark_logo_url: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def redshirt_status(self) -> str:
        if self.redshirted is None:
            return "Uncertain"
        return "Yes" if self.redshirted else "No"

    @property
    def display_height(self) -> str:
        return format_height(self.height_inches)

    @property
    def display_weight(self) -> str:
        return format_weight(self.weight_pounds)

    @property
    def display_jersey(self) -> str:
        return f"#{self.jersey_number}" if self.jersey_number is not None else NOT_AVAILABLE

    def to_api_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "position": self.position,
            "jerseyNumber": self.jersey_number,
            "heightInches": self.height_inches,
            "weightPounds": self.weight_pounds,
            "displayHeight": self.display_height,
            "displayWeight": self.display_weight,
            "hometown": self.hometown,
            "team": self.team,
            "classYear": self.class_year,
            "recruitIds": list(self.recruit_ids),
            "redshirted": self.redshirted,
            "recruitRating": self.recruit_rating,
            "provider": self.provider.value,
            "teamPrimaryColor": self.team_primary_color,
            "teamSecondaryColor": self.team_secondary_color,
            "teamLogoUrl": self.team_logo_url,
            "teamDarkLogoUrl": self.team_dark_logo_url,
        }
