"""Normalize raw CFBD and ESPN records into canonical Team and Player models.

The provider is always passed in explicitly by the caller, which knows which
endpoint it queried. Record shapes are never used to guess the provider.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from src.extract.errors import MalformedField
from src.models.player import Player
from src.models.team import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    INDEPENDENT,
    Classification,
    Provider,
    Team,
)
from src.transform.clean import (
    NOT_AVAILABLE,
    class_name,
    compose_hometown,
    normalize_color,
    parse_int,
    split_full_name,
)

logger = logging.getLogger(__name__)


def normalize_team(raw: object, provider: Provider) -> Team:
    """Normalize one upstream team record.

    Args:
        raw: A team record as returned by the provider's team listing.
        provider: Which provider produced the record.

    Returns:
        Canonical Team. Missing identity fields become empty strings.
    """
    return _TEAM_NORMALIZERS[provider](_as_dict(raw))


def normalize_teams(raws: Iterable[object], provider: Provider) -> list[Team]:
    teams = [normalize_team(raw, provider) for raw in raws]
    logger.debug("Normalized %d %s teams", len(teams), provider)
    return teams


def normalize_player(
    raw: object,
    provider: Provider,
    team_name: str | None = None,
) -> Player:
    """Normalize one upstream player/roster record.

    Args:
        raw: A roster or athlete record.
        provider: Which provider produced the record.
        team_name: Team display name to record on the player. ESPN roster
            entries do not carry their team, so callers pass the team they
            looked up. Overrides any team name in the record.

    Returns:
        Canonical Player with the default (fallback) team colors; run it
        through the team-color join to fill them in.
    """
    player = _PLAYER_NORMALIZERS[provider](_as_dict(raw))
    if team_name is not None:
        player.team = team_name
    return player


def normalize_players(
    raws: Iterable[object],
    provider: Provider,
    team_name: str | None = None,
) -> list[Player]:
    players = [normalize_player(raw, provider, team_name) for raw in raws]
    logger.debug("Normalized %d %s players", len(players), provider)
    return players


def classify(value: object, provider: Provider) -> Classification:
    """Resolve a provider's tier label to FBS, FCS or other.

    CFBD's `classification` is compared case-insensitively; ESPN's `type`
    must match exactly.
    """
    if not isinstance(value, str):
        return Classification.OTHER
    if provider is Provider.CFBD:
        value = value.upper()
    if value == Classification.FBS.value:
        return Classification.FBS
    if value == Classification.FCS.value:
        return Classification.FCS
    return Classification.OTHER


# ── CFBD ─────────────────────────────────────────────────────────────

def _normalize_cfbd_team(raw: dict[str, Any]) -> Team:
    logos = [logo for logo in raw.get("logos") or [] if isinstance(logo, str) and logo]
    logo_url = logos[0] if logos else ""
    return Team(
        id=_str_id(raw.get("id")),
        display_name=_text(raw.get("school")),
        mascot=_text(raw.get("mascot")) or None,
        conference=_text(raw.get("conference")) or INDEPENDENT,
        classification=classify(raw.get("classification"), Provider.CFBD),
        primary_color=normalize_color(raw.get("color"), DEFAULT_PRIMARY_COLOR),
        secondary_color=normalize_color(raw.get("alt_color"), DEFAULT_SECONDARY_COLOR),
        logo_url=logo_url,
        dark_logo_url=logos[1] if len(logos) > 1 else logo_url,
        provider=Provider.CFBD,
    )


def _normalize_cfbd_player(raw: dict[str, Any]) -> Player:
    # The roster endpoint has returned both snake_case and camelCase keys
    first = _text(_first_of(raw, "first_name", "firstName"))
    last = _text(_first_of(raw, "last_name", "lastName"))
    recruit_ids = _first_of(raw, "recruitIds", "recruit_ids") or []

    return Player(
        id=_str_id(raw.get("id")),
        first_name=first,
        last_name=last,
        position=_text(raw.get("position")) or NOT_AVAILABLE,
        team=_text(raw.get("team")),
        jersey_number=_safe_int(raw.get("jersey"), "jersey"),
        height_inches=_safe_int(raw.get("height"), "height"),
        weight_pounds=_safe_int(raw.get("weight"), "weight"),
        hometown=compose_hometown(
            _text(_first_of(raw, "home_city", "homeCity")),
            _text(_first_of(raw, "home_state", "homeState")),
        ),
        class_year=class_name(_safe_int(raw.get("year"), "year")),
        recruit_ids=[str(r) for r in recruit_ids if r is not None]
        if isinstance(recruit_ids, list)
        else [],
    )


# ── ESPN ─────────────────────────────────────────────────────────────

def _normalize_espn_team(raw: dict[str, Any]) -> Team:
    # Team listings wrap each record as {"team": {...}}
    team = raw["team"] if isinstance(raw.get("team"), dict) else raw

    logos = [logo for logo in team.get("logos") or [] if isinstance(logo, dict) and logo.get("href")]
    logo_url = logos[0]["href"] if logos else ""
    dark_logo_url = next(
        (logo["href"] for logo in logos if "dark" in (logo.get("rel") or [])),
        logo_url,
    )
    conference = _text(_as_dict(team.get("conference")).get("name"))

    return Team(
        id=_str_id(team.get("id")),
        display_name=_text(team.get("displayName")),
        mascot=_text(team.get("nickname") or team.get("name")) or None,
        conference=conference or None,
        classification=classify(team.get("type"), Provider.ESPN),
        primary_color=normalize_color(team.get("color"), DEFAULT_PRIMARY_COLOR),
        secondary_color=normalize_color(team.get("alternateColor"), DEFAULT_SECONDARY_COLOR),
        logo_url=logo_url,
        dark_logo_url=dark_logo_url,
        provider=Provider.ESPN,
    )


def _normalize_espn_player(raw: dict[str, Any]) -> Player:
    first = _text(raw.get("firstName"))
    last = _text(raw.get("lastName"))
    if not first and not last:
        first, last = split_full_name(_text(raw.get("fullName") or raw.get("displayName")))

    position = raw.get("position")
    if isinstance(position, dict):
        position = position.get("abbreviation") or position.get("displayName")

    hometown = _as_dict(raw.get("hometown"))
    experience = _as_dict(raw.get("experience"))
    college = _as_dict(raw.get("college"))
    recruit = _as_dict(raw.get("recruit"))
    team = _as_dict(raw.get("team"))
    redshirted = college.get("redshirted")

    return Player(
        id=_str_id(raw.get("id")),
        first_name=first,
        last_name=last,
        position=_text(position) or NOT_AVAILABLE,
        team=_text(team.get("displayName")),
        jersey_number=_safe_int(raw.get("jersey"), "jersey"),
        height_inches=_safe_int(raw.get("height"), "height"),
        weight_pounds=_safe_int(raw.get("weight"), "weight"),
        hometown=compose_hometown(
            _text(hometown.get("city")),
            _text(hometown.get("state")),
            _text(hometown.get("description")),
        ),
        class_year=_text(experience.get("displayValue")) or _text(college.get("year")) or None,
        redshirted=redshirted if isinstance(redshirted, bool) else None,
        recruit_rating=_text(recruit.get("rating")) or None,
        provider=Provider.ESPN,
    )


_TEAM_NORMALIZERS: dict[Provider, Callable[[dict[str, Any]], Team]] = {
    Provider.CFBD: _normalize_cfbd_team,
    Provider.ESPN: _normalize_espn_team,
}

_PLAYER_NORMALIZERS: dict[Provider, Callable[[dict[str, Any]], Player]] = {
    Provider.CFBD: _normalize_cfbd_player,
    Provider.ESPN: _normalize_espn_player,
}


# ── Helpers ──────────────────────────────────────────────────────────

def _safe_int(value: object, field: str) -> int | None:
    """parse_int that drops a malformed field instead of the whole record."""
    try:
        return parse_int(value, field)
    except MalformedField as e:
        logger.debug("Dropping malformed field: %s", e)
        return None


def _as_dict(value: object) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _first_of(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _str_id(value: object) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()
