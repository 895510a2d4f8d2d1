from src.models.overview import Ability, PlayerOverview, RatingCategory, RatingStat
from src.models.player import Player
from src.models.team import Classification, Provider, Team

__all__ = [
    "Ability",
    "Classification",
    "Player",
    "PlayerOverview",
    "Provider",
    "RatingCategory",
    "RatingStat",
    "Team",
]
