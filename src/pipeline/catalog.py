"""Catalog: fetches teams and players from the requested provider and normalizes them.

This is the glue between the upstream clients and the normalization layer.
Callers say which provider to query; the catalog calls that provider's
endpoints in order and routes every record through the shared normalizers.
Upstream failures propagate as UpstreamUnavailable; nothing is synthesized.
"""

import logging

from src.config import Settings
from src.extract.cfbd_api import CFBDClient
from src.extract.errors import NotFound, UpstreamUnavailable
from src.extract.espn_api import ESPNClient
from src.models.player import Player
from src.models.team import Classification, Provider, Team
from src.transform.filters import (
    filter_players,
    group_by_classification,
    is_listable,
    select_teams,
)
from src.transform.join import attach_team_colors, with_team
from src.transform.normalize import (
    normalize_player,
    normalize_players,
    normalize_team,
    normalize_teams,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Request-scoped access to canonical teams and players.

    Clients are created lazily so that ESPN-only requests work without a
    CFBD key. Use as a context manager to close them.
    """

    def __init__(
        self,
        settings: Settings,
        cfbd: CFBDClient | None = None,
        espn: ESPNClient | None = None,
    ) -> None:
        self.settings = settings
        self._cfbd = cfbd
        self._espn = espn

    def close(self) -> None:
        if self._cfbd is not None:
            self._cfbd.close()
        if self._espn is not None:
            self._espn.close()

    def __enter__(self) -> "Catalog":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def cfbd(self) -> CFBDClient:
        if self._cfbd is None:
            self._cfbd = CFBDClient(
                api_key=self.settings.require_cfbd_key(),
                base_url=self.settings.cfbd_base_url,
                timeout=self.settings.http_timeout,
            )
        return self._cfbd

    @property
    def espn(self) -> ESPNClient:
        if self._espn is None:
            self._espn = ESPNClient(
                base_url=self.settings.espn_base_url,
                timeout=self.settings.http_timeout,
            )
        return self._espn

    # ── Teams ────────────────────────────────────────────────────────

    def all_teams(self, provider: Provider, year: int | None = None) -> list[Team]:
        """Fetch and normalize every team the provider lists (any classification)."""
        if provider is Provider.CFBD:
            raw = self.cfbd.get_teams(year)
        else:
            raw = self.espn.get_teams()
        return normalize_teams(raw, provider)

    def teams(self, provider: Provider, year: int | None = None) -> list[Team]:
        """Selectable teams: FBS alphabetically, then FCS alphabetically."""
        teams = select_teams(self.all_teams(provider, year))
        logger.info("Returning %d FBS/FCS %s teams for %s", len(teams), provider, year)
        return teams

    def teams_by_classification(self, year: int | None = None) -> dict[Classification, list[Team]]:
        """FBS and FCS team lists from CFBD.

        FBS comes from the dedicated FBS endpoint; FCS is filtered out of the
        full listing.
        """
        fbs = normalize_teams(self.cfbd.get_fbs_teams(year), Provider.CFBD)
        everyone = self.all_teams(Provider.CFBD, year)
        return {
            Classification.FBS: sorted(fbs, key=lambda t: t.display_name),
            Classification.FCS: group_by_classification(everyone)[Classification.FCS],
        }

    def find_team(self, provider: Provider, name: str, year: int | None = None) -> Team:
        """Look up a team by display name (case-insensitive).

        ESPN has no name lookup, so this fetches the whole team list.

        Raises:
            NotFound: No team has that name.
        """
        wanted = name.strip().casefold()
        for team in self.all_teams(provider, year):
            if team.display_name.casefold() == wanted:
                return team
        raise NotFound(f"No {provider} team named {name!r}")

    # ── Players ──────────────────────────────────────────────────────

    def roster(
        self,
        provider: Provider,
        year: int,
        team: str | None = None,
        search: str | None = None,
        position: str | None = None,
    ) -> list[Player]:
        """Players for a season, optionally for one team, filtered by name/position.

        Args:
            provider: Which provider to query.
            year: Season year.
            team: Team name. Optional for CFBD (all teams), required for ESPN.
            search: Case-insensitive name substring.
            position: Case-insensitive exact position code.

        Raises:
            UpstreamUnavailable: A roster or team-list call failed.
            NotFound: ESPN has no team with that name.
            ValueError: ESPN roster requested without a team.
        """
        if provider is Provider.CFBD:
            players = self._cfbd_roster(year, team)
        else:
            if not team:
                raise ValueError("ESPN rosters require a team name")
            players = self._espn_roster(year, team)

        filtered = filter_players(players, search=search, position=position)
        logger.info(
            "Returning %d of %d %s players for %s %s",
            len(filtered), len(players), provider, team or "all teams", year,
        )
        return filtered

    def _cfbd_roster(self, year: int, team: str | None) -> list[Player]:
        raw = self.cfbd.get_roster(year, team)
        players = [p for p in normalize_players(raw, Provider.CFBD) if is_listable(p)]
        dropped = len(raw) - len(players)
        if dropped:
            logger.debug("Dropped %d CFBD roster rows without a valid id or name", dropped)
        return self.join_team_colors(players, year)

    def _espn_roster(self, year: int, team_name: str) -> list[Player]:
        team = self.find_team(Provider.ESPN, team_name)
        raw = self.espn.get_roster(team.id, year)
        players = normalize_players(raw, Provider.ESPN, team_name=team.display_name)
        return attach_team_colors(players, [team])

    def join_team_colors(self, players: list[Player], year: int | None) -> list[Player]:
        """Attach CFBD team colors for the year. A failed team lookup leaves fallbacks."""
        try:
            teams = self.all_teams(Provider.CFBD, year)
        except UpstreamUnavailable as e:
            logger.warning("Team color lookup failed, using fallback colors: %s", e)
            teams = []
        return attach_team_colors(players, teams)

    def player(self, athlete_id: str) -> Player:
        """One ESPN athlete, joined to the team embedded in the athlete record.

        Raises:
            NotFound: The athlete record is empty.
        """
        raw = self.espn.get_athlete(athlete_id)
        if not raw:
            raise NotFound(f"No ESPN athlete with id {athlete_id!r}")
        player = normalize_player(raw, Provider.ESPN)
        team = normalize_team(raw.get("team"), Provider.ESPN) if raw.get("team") else None
        return with_team(player, team)

    # ── AI overview inputs (CFBD) ────────────────────────────────────

    def player_season_stats(self, player: Player, year: int) -> list[dict]:
        """Season stat rows for the player's team; the caller picks the player's rows.

        ESPN players carry ESPN's team name, which is mapped to the CFBD
        school first.

        Raises:
            NotFound: No CFBD school matches an ESPN team name.
        """
        team = player.team
        if player.provider is Provider.ESPN:
            team = self.cfbd_school(player.team, year)
        return self.cfbd.get_player_season_stats(year, team)

    def cfbd_school(self, team_name: str, year: int | None = None) -> str:
        """CFBD school name for an ESPN team display name ("LSU Tigers" -> "LSU").

        ESPN display names are the school followed by the mascot.
        """
        for team in self.all_teams(Provider.CFBD, year):
            if team_name in (team.display_name, f"{team.display_name} {team.mascot}"):
                return team.display_name
        raise NotFound(f"No CFBD school for ESPN team {team_name!r}")

    def high_school_rating(self, player: Player) -> str:
        """Recruiting rating like "0.9512 (4-star)", or "N/A".

        A rating already on the player (ESPN's recruit block) is used as is.
        Best effort: lookup failures are logged and give "N/A".
        """
        if player.recruit_rating:
            return player.recruit_rating
        if not player.recruit_ids:
            logger.info("No recruit ids for %s, skipping recruiting lookup", player.full_name)
            return "N/A"
        try:
            recruits = self.cfbd.get_recruits(player.recruit_ids)
        except UpstreamUnavailable as e:
            logger.warning("Recruiting lookup failed for %s: %s", player.full_name, e)
            return "N/A"
        if not recruits or not recruits[0].get("rating"):
            return "N/A"
        recruit = recruits[0]
        return f"{recruit['rating']} ({recruit.get('stars', '?')}-star)"
