"""AI player overview: stat summary, prompt assembly, LLM call and response parsing.

The canonical Player record is the prompt's input. CFBD season stats and the
recruiting rating are optional context; if they can't be fetched the prompt
says so and generation continues.
"""

import json
import logging
import random
from typing import Any, Protocol

from openai import APIStatusError, OpenAIError

from src.analysis.abilities import ABILITIES, POSITION_GROUPS, TIERS
from src.extract.errors import ConfigurationError, MalformedField, NotFound, UpstreamUnavailable
from src.models.overview import Ability, PlayerOverview, RatingCategory, RatingStat
from src.models.player import Player
from src.transform.clean import parse_int

logger = logging.getLogger(__name__)

MAX_ABILITIES = 3

SYSTEM_PROMPT = """You are a college football analyst. Given a player's profile and \
season statistics, produce a scouting overview and hypothetical video-game style ratings.

Respond with a single JSON object with exactly these keys:
- "aiOverview": 2-4 paragraphs on the player's play style, strengths and areas to \
improve. Work the provided stats in naturally.
- "playerQualityScore": integer 0-100 for overall quality and potential.
- "playerClass": one of "Freshman", "Sophomore", "Junior", "Senior", "Grad", "Uncertain".
- "redshirted": one of "Yes", "No", "Uncertain".
- "archetype": one archetype fitting the position (e.g. "Pocket Passer", "Dual Threat", \
"Power Back", "Deep Threat", "Run Blocker", "Pass Rusher (Edge)", "Coverage Linebacker", \
"Press Corner", "Free Safety (Coverage)", "Kicker"), or "General" if none fits.
- "dealbreaker": the single biggest concern for the player's development, or "None apparent".
- "aiRatings": a list of {"category": str, "stats": [{"name": str, "value": int 0-99}]}. \
Use categories such as General, Quarterback, Rushing, Receiving, Blocking, Defense, \
Coverage, Kicking, Punting. Only include categories relevant to the player's position; \
a quarterback gets no tackling or pass-block ratings.

Do not include any text outside the JSON object."""


class OverviewGenerationError(Exception):
    """The LLM call failed or returned something we can't use."""

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class StatsSource(Protocol):
    def player_season_stats(self, player: Player, year: int) -> list[dict]: ...

    def high_school_rating(self, player: Player) -> str: ...


def generate_overview(
    player: Player,
    year: int,
    source: StatsSource,
    llm: Any,
    model: str,
    rng: random.Random | None = None,
) -> PlayerOverview:
    """Generate an AI overview for a player.

    Args:
        player: The canonical player to describe.
        year: Season year the stats summary covers.
        source: Provides season stats and the recruiting rating (a Catalog).
        llm: OpenAI client (anything exposing `chat.completions.create`).
        model: Chat model name.
        rng: Random source for ability tiers.

    Raises:
        OverviewGenerationError: The completion call failed or its reply
            was not the expected JSON.
    """
    stats_summary = _stats_summary(player, year, source)
    high_school_rating = source.high_school_rating(player)
    prompt = build_player_prompt(player, year, stats_summary, high_school_rating)
    logger.info("Requesting AI overview for %s (%s, %s)", player.full_name, player.team, year)
    logger.debug("Prompt:\n%s", prompt)

    try:
        completion = llm.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=0.7,
            max_tokens=1500,
            response_format={"type": "json_object"},
        )
    except APIStatusError as e:
        logger.warning("OpenAI returned %d: %s", e.status_code, e.message)
        raise OverviewGenerationError(f"OpenAI API error: {e.message}", e.status_code) from e
    except OpenAIError as e:
        logger.warning("OpenAI request failed: %s", e)
        raise OverviewGenerationError(f"OpenAI request failed: {e}") from e

    content = completion.choices[0].message.content or ""
    logger.debug("Raw AI response:\n%s", content)

    overview = parse_overview_response(content)
    overview.high_school_rating = high_school_rating
    if overview.player_class == "Uncertain" and player.class_year:
        overview.player_class = player.class_year
    if player.redshirted is not None:
        overview.redshirted = player.redshirt_status
    overview.assigned_abilities = assign_abilities(player.position, rng)
    return overview


def _stats_summary(player: Player, year: int, source: StatsSource) -> str:
    try:
        rows = source.player_season_stats(player, year)
    except UpstreamUnavailable as e:
        logger.warning("Season stats unavailable for %s: %s", player.full_name, e)
        return f"Could not retrieve CFBD stats for {player.full_name} in {year}. Status: {e.status}."
    except ConfigurationError as e:
        logger.warning("Skipping season stats: %s", e)
        return f"No CFBD stats available for {player.full_name}."
    except NotFound as e:
        logger.info("Skipping season stats: %s", e)
        return f"No CFBD stats available for {player.full_name} ({player.team})."
    return build_stats_summary(player, rows, year)


def build_stats_summary(player: Player, stat_rows: list[dict], year: int) -> str:
    """Summarize a player's CFBD season stat rows for their position.

    Rows for the whole team are accepted; the player's rows are picked by id,
    falling back to a case-insensitive name match.
    """
    name = player.full_name.casefold()
    rows = [
        row for row in stat_rows
        if (player.id and str(row.get("playerId", row.get("id", ""))) == player.id)
        or str(row.get("player", "")).strip().casefold() == name
    ]
    if not rows:
        return f"No detailed CFBD stats found for {player.full_name} in {year} for team {player.team}."

    stats = {f"{row.get('category')}_{row.get('statType')}": row.get("stat") for row in rows}
    lines = [f"{label}: {_stat(stats, key)}" for label, key in _stat_lines(player.position, stats)]
    if not lines:
        return "No detailed CFBD stats available for this player's position."
    return "\n".join(lines)


def _stat(stats: dict[str, Any], key: str) -> str:
    value = stats.get(key)
    return "N/A" if value in (None, "") else str(value)


def _stat_lines(position: str, stats: dict[str, Any]) -> list[tuple[str, str]]:
    pos = position.upper()
    if "QB" in pos:
        stats["passing_COMP_PCT"] = _completion_pct(stats)
        return [
            ("Passing Yards", "passing_YDS"),
            ("Passing TDs", "passing_TD"),
            ("Completions", "passing_COMPLETIONS"),
            ("Attempts", "passing_ATT"),
            ("Completion %", "passing_COMP_PCT"),
            ("Interceptions", "passing_INT"),
            ("Rushing Yards (QB)", "rushing_YDS"),
            ("Rushing TDs (QB)", "rushing_TD"),
        ]
    if "RB" in pos or "FB" in pos:
        return [
            ("Rushing Yards", "rushing_YDS"),
            ("Rushing TDs", "rushing_TD"),
            ("Carries", "rushing_CAR"),
            ("Receptions", "receiving_REC"),
            ("Receiving Yards", "receiving_YDS"),
            ("Receiving TDs", "receiving_TD"),
        ]
    if "WR" in pos or "TE" in pos:
        return [
            ("Receptions", "receiving_REC"),
            ("Receiving Yards", "receiving_YDS"),
            ("Receiving TDs", "receiving_TD"),
            ("Long", "receiving_LONG"),
        ]
    if "DL" in pos or "DT" in pos or "DE" in pos:
        return [
            ("Total Tackles", "defensive_TOT"),
            ("Solo Tackles", "defensive_SOLO"),
            ("Sacks", "defensive_SACKS"),
            ("Tackles for Loss", "defensive_TFL"),
            ("QB Hurries", "defensive_QB HUR"),
        ]
    if "LB" in pos or "DB" in pos or "CB" in pos or pos in ("S", "FS", "SS"):
        return [
            ("Total Tackles", "defensive_TOT"),
            ("Solo Tackles", "defensive_SOLO"),
            ("Sacks", "defensive_SACKS"),
            ("Tackles for Loss", "defensive_TFL"),
            ("Interceptions", "interceptions_INT"),
            ("Pass Breakups", "defensive_PD"),
        ]
    if pos in ("K", "PK", "P"):
        return [
            ("Field Goals Made", "kicking_FGM"),
            ("Field Goals Att", "kicking_FGA"),
            ("Extra Points Made", "kicking_XPM"),
            ("Punts", "punting_NO"),
            ("Punt Yards", "punting_YDS"),
            ("Average Punt", "punting_YPP"),
        ]
    return []


def _completion_pct(stats: dict[str, Any]) -> str:
    try:
        completions = float(stats["passing_COMPLETIONS"])
        attempts = float(stats["passing_ATT"])
    except (KeyError, TypeError, ValueError):
        return "N/A"
    if attempts <= 0:
        return "N/A"
    return f"{completions / attempts * 100:.1f}%"


def build_player_prompt(
    player: Player,
    year: int,
    stats_summary: str,
    high_school_rating: str = "N/A",
) -> str:
    """The user message sent with SYSTEM_PROMPT."""
    return "\n".join([
        f"Player Name: {player.full_name}",
        f"Team: {player.team or 'N/A'}",
        f"Position: {player.position.upper()}",
        f"Height: {player.display_height}",
        f"Weight: {player.display_weight}",
        f"Jersey: {player.display_jersey}",
        f"Hometown: {player.hometown or 'N/A'}",
        f"Class: {player.class_year or 'Uncertain'}",
        f"Redshirted: {player.redshirt_status}",
        f"High School Rating: {high_school_rating}",
        f"College Football Data Stats Summary for {year} Season:",
        stats_summary,
    ])


def parse_overview_response(content: str) -> PlayerOverview:
    """Parse the model's JSON reply into a PlayerOverview.

    Missing keys fall back to defaults; ratings that aren't name/number
    pairs are skipped.

    Raises:
        OverviewGenerationError: The reply is not a JSON object or has no
            overview text.
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        raise OverviewGenerationError("AI response was not valid JSON") from e
    if not isinstance(data, dict):
        raise OverviewGenerationError("AI response was not a JSON object")

    overview_text = str(data.get("aiOverview") or "").strip()
    if not overview_text:
        raise OverviewGenerationError("AI response had no overview")

    return PlayerOverview(
        ai_overview=overview_text,
        ai_ratings=_parse_ratings(data.get("aiRatings")),
        player_quality_score=_score(data.get("playerQualityScore"), upper=100),
        player_class=_label(data.get("playerClass"), "Uncertain"),
        redshirted=_label(data.get("redshirted"), "Uncertain"),
        archetype=_label(data.get("archetype"), "General"),
        dealbreaker=_label(data.get("dealbreaker"), "None apparent"),
    )


def _parse_ratings(value: object) -> list[RatingCategory]:
    if not isinstance(value, list):
        return []
    categories: list[RatingCategory] = []
    for entry in value:
        if not isinstance(entry, dict) or not entry.get("category"):
            continue
        stats: list[RatingStat] = []
        for stat in entry.get("stats") or []:
            if not isinstance(stat, dict) or not stat.get("name"):
                continue
            rating = _score(stat.get("value"), upper=99)
            if rating is not None:
                stats.append(RatingStat(name=str(stat["name"]), value=rating))
        categories.append(RatingCategory(category=str(entry["category"]), stats=stats))
    return categories


def _score(value: object, upper: int) -> int | None:
    try:
        score = parse_int(value, "score")
    except MalformedField:
        return None
    if score is None:
        return None
    return max(0, min(upper, score))


def _label(value: object, default: str) -> str:
    text = str(value).strip() if value is not None else ""
    return text or default


def assign_abilities(
    position: str,
    rng: random.Random | None = None,
    limit: int = MAX_ABILITIES,
) -> list[Ability]:
    """Pick up to `limit` abilities for the position, each with a random tier."""
    rng = rng or random.Random()
    code = position.split(" ")[0].upper()
    group = POSITION_GROUPS.get(code, code)
    candidates = [a for a in ABILITIES if group in a.positions or "Any" in a.positions]
    chosen = rng.sample(candidates, min(limit, len(candidates)))
    return [
        Ability(name=a.name, tier=rng.choice(TIERS), description=a.description)
        for a in chosen
    ]
