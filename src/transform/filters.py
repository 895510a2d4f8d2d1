"""Selection and search predicates applied after normalization."""

from collections.abc import Iterable
from operator import attrgetter

from src.models.player import Player
from src.models.team import Classification, Team


def select_teams(teams: Iterable[Team]) -> list[Team]:
    """Return the selectable teams: FBS alphabetically, then FCS alphabetically.

    Teams of any other classification are dropped.
    """
    groups = group_by_classification(teams)
    return groups[Classification.FBS] + groups[Classification.FCS]


def group_by_classification(teams: Iterable[Team]) -> dict[Classification, list[Team]]:
    """Split teams into sorted FBS and FCS lists."""
    groups: dict[Classification, list[Team]] = {
        Classification.FBS: [],
        Classification.FCS: [],
    }
    for team in teams:
        if team.classification.is_selectable:
            groups[team.classification].append(team)
    for members in groups.values():
        members.sort(key=attrgetter("display_name"))
    return groups


def matches_player(
    player: Player,
    search: str | None = None,
    position: str | None = None,
) -> bool:
    """Check a player against optional name and position filters.

    The name filter is a case-insensitive substring match on the full, first
    or last name. The position filter is a case-insensitive exact match.
    """
    if search and search.strip():
        needle = search.strip().casefold()
        names = (player.full_name, player.first_name, player.last_name)
        if not any(needle in name.casefold() for name in names):
            return False
    if position and position.strip():
        if player.position.casefold() != position.strip().casefold():
            return False
    return True


def filter_players(
    players: Iterable[Player],
    search: str | None = None,
    position: str | None = None,
) -> list[Player]:
    return [p for p in players if matches_player(p, search, position)]


def is_listable(player: Player) -> bool:
    """Drop CFBD roster rows with a negative/non-numeric id or a missing name."""
    return player.id.isdigit() and bool(player.first_name) and bool(player.last_name)
