"""Client for the CollegeFootballData.com API (teams, rosters, season stats).

Requires a bearer token. Free keys: https://collegefootballdata.com/key

API docs: https://api.collegefootballdata.com/
"""

import logging

import httpx

from src.config import CFBD_BASE_URL
from src.extract.errors import ConfigurationError, UpstreamUnavailable
from src.models.team import Provider

logger = logging.getLogger(__name__)


class CFBDClient:
    """Client for the CollegeFootballData.com API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = CFBD_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError(
                "CFBD_API_KEY is required. Get a free key at https://collegefootballdata.com/key"
            )
        self.client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Accept": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "CFBDClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _get(self, endpoint: str, params: dict[str, str] | None = None) -> list[dict]:
        """Make a single GET request and return the JSON array body."""
        params = {k: v for k, v in (params or {}).items() if v}
        try:
            response = self.client.get(endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "CFBD: %s failed with %d: %s",
                endpoint,
                e.response.status_code,
                e.response.text[:200],
            )
            raise UpstreamUnavailable(
                Provider.CFBD, e.response.status_code, e.response.text or e.response.reason_phrase
            ) from e
        except httpx.TransportError as e:
            logger.warning("CFBD: %s failed: %s", endpoint, e)
            raise UpstreamUnavailable(Provider.CFBD, None, str(e)) from e

        logger.info("CFBD: GET %s %s", endpoint, params)
        try:
            result = response.json()
        except ValueError as e:
            raise UpstreamUnavailable(
                Provider.CFBD, response.status_code, "Response body is not JSON"
            ) from e
        if not isinstance(result, list):
            return []
        return result

    def get_teams(self, year: int | None = None) -> list[dict]:
        """List all teams, optionally as of a season year."""
        return self._get("/teams", {"year": _str(year)})

    def get_fbs_teams(self, year: int | None = None) -> list[dict]:
        """List FBS teams only."""
        return self._get("/teams/fbs", {"year": _str(year)})

    def get_roster(self, year: int, team: str | None = None) -> list[dict]:
        """Get roster entries for a season, optionally for a single team.

        Args:
            year: Season year, e.g. 2024.
            team: School name as CFBD spells it, e.g. "Ohio State".
        """
        return self._get("/roster", {"year": str(year), "team": team or ""})

    def get_player_season_stats(self, year: int, team: str) -> list[dict]:
        """Get season stat rows for every player on a team.

        Each row has playerId, player, category, statType and stat.
        """
        return self._get("/stats/player/season", {"year": str(year), "team": team})

    def get_recruits(self, recruit_ids: list[str]) -> list[dict]:
        """Get recruiting records (rating, stars) for recruit ids."""
        return self._get("/recruiting/players", {"recruitIds": ",".join(recruit_ids)})


def _str(value: int | None) -> str:
    return "" if value is None else str(value)
