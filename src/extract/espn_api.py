"""Client for ESPN's public college football site API.

No authentication required. There is no name-to-id lookup; callers fetch the
full team list and match names themselves.
"""

import logging

import httpx

from src.config import ESPN_BASE_URL
from src.extract.errors import UpstreamUnavailable
from src.models.team import Provider

logger = logging.getLogger(__name__)

TEAM_LIST_LIMIT = 1000


class ESPNClient:
    """Client for the ESPN college football site API."""

    def __init__(
        self,
        base_url: str = ESPN_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ESPNClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _get(self, endpoint: str, params: dict[str, str] | None = None) -> dict:
        """Make a single GET request and return the JSON object body."""
        try:
            response = self.client.get(endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "ESPN: %s failed with %d: %s",
                endpoint,
                e.response.status_code,
                e.response.text[:200],
            )
            raise UpstreamUnavailable(
                Provider.ESPN, e.response.status_code, e.response.text or e.response.reason_phrase
            ) from e
        except httpx.TransportError as e:
            logger.warning("ESPN: %s failed: %s", endpoint, e)
            raise UpstreamUnavailable(Provider.ESPN, None, str(e)) from e

        logger.info("ESPN: GET %s %s", endpoint, params or {})
        try:
            result = response.json()
        except ValueError as e:
            raise UpstreamUnavailable(
                Provider.ESPN, response.status_code, "Response body is not JSON"
            ) from e
        if not isinstance(result, dict):
            return {}
        return result

    def get_teams(self, limit: int = TEAM_LIST_LIMIT) -> list[dict]:
        """List all teams.

        Returns:
            The `sports[0].leagues[0].teams` entries, each shaped {"team": {...}}.
        """
        payload = self._get("/teams", {"limit": str(limit)})
        sports = payload.get("sports") or [{}]
        leagues = sports[0].get("leagues") or [{}]
        teams = leagues[0].get("teams") or []
        return [t for t in teams if isinstance(t, dict)]

    def get_roster(self, team_id: str, season: int | None = None) -> list[dict]:
        """Get a team's roster for a season as a flat list of athletes.

        Football rosters come grouped by unit ({"position": "offense",
        "items": [...]}); groups are flattened in order.
        """
        params = {"season": str(season)} if season else None
        payload = self._get(f"/teams/{team_id}/roster", params)

        athletes: list[dict] = []
        for entry in payload.get("athletes") or []:
            if not isinstance(entry, dict):
                continue
            if isinstance(entry.get("items"), list):
                athletes.extend(a for a in entry["items"] if isinstance(a, dict))
            else:
                athletes.append(entry)
        return athletes

    def get_athlete(self, athlete_id: str) -> dict:
        """Get one athlete, including its embedded team."""
        payload = self._get(f"/athletes/{athlete_id}")
        athletes = payload.get("athletes")
        if isinstance(athletes, list):
            return athletes[0] if athletes and isinstance(athletes[0], dict) else {}
        athlete = payload.get("athlete")
        return athlete if isinstance(athlete, dict) else payload
