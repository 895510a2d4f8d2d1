"""Attach team colors and logos to players by team display name."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from src.models.player import (
    FALLBACK_TEAM_PRIMARY_COLOR,
    FALLBACK_TEAM_SECONDARY_COLOR,
    Player,
)
from src.models.team import Team

logger = logging.getLogger(__name__)


def attach_team_colors(players: Iterable[Player], teams: Iterable[Team]) -> list[Player]:
    """Copy each player's team colors and logos onto the player.

    Players are matched to teams by exact `display_name` equality. Players
    whose team is not in `teams` get the neutral fallback colors and no logos.
    """
    by_name = {team.display_name: team for team in teams if team.display_name}
    joined: list[Player] = []
    misses: set[str] = set()

    for player in players:
        team = by_name.get(player.team)
        if team is None:
            misses.add(player.team)
        joined.append(with_team(player, team))

    if misses:
        logger.info("No team colors for %d team name(s): %s", len(misses), sorted(misses))
    return joined


def with_team(player: Player, team: Team | None) -> Player:
    if team is None:
        return replace(
            player,
            team_primary_color=FALLBACK_TEAM_PRIMARY_COLOR,
            team_secondary_color=FALLBACK_TEAM_SECONDARY_COLOR,
            team_logo_url="",
            team_dark_logo_url="",
        )
    return replace(
        player,
        team_primary_color=team.primary_color,
        team_secondary_color=team.secondary_color,
        team_logo_url=team.logo_url,
        team_dark_logo_url=team.dark_logo_url,
    )
