from dataclasses import dataclass
from enum import StrEnum

DEFAULT_PRIMARY_COLOR = "#000000"
DEFAULT_SECONDARY_COLOR = "#FFFFFF"
INDEPENDENT = "Independent"


class Provider(StrEnum):
    """Upstream data provider a raw record came from."""

    CFBD = "cfbd"  # CollegeFootballData.com, flat snake_case JSON
    ESPN = "espn"  # ESPN site API, nested camelCase JSON


class Classification(StrEnum):
    """Competitive tier. Only FBS and FCS teams are selectable."""

    FBS = "FBS"
    FCS = "FCS"
    OTHER = "other"

    @property
    def is_selectable(self) -> bool:
        return self in (Classification.FBS, Classification.FCS)


@dataclass
class Team:
    """A college football program."""

    id: str
    display_name: str
    classification: Classification = Classification.OTHER
    mascot: str | None = None
    conference: str | None = None
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    logo_url: str = ""
    dark_logo_url: str = ""
    provider: Provider = Provider.CFBD

    def to_api_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "mascot": self.mascot,
            "conference": self.conference,
            "classification": self.classification.value,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "logoUrl": self.logo_url,
            "darkLogoUrl": self.dark_logo_url,
            "provider": self.provider.value,
        }
