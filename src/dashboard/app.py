"""Streamlit dashboard for browsing college football teams and players.

Pages call the Catalog directly (no HTTP hop through the API). Provider and
season are chosen in the sidebar.
"""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

# Streamlit adds the script's directory to sys.path, but other modules
# import from the project root (e.g. "from src.models.team import ...").
# Ensure the project root is on sys.path so those imports resolve.
_PROJECT_ROOT = str(Path(__file__).resolve().parents[2])
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

import pandas as pd  # noqa: E402
import streamlit as st  # noqa: E402
from openai import OpenAI  # noqa: E402

from src.analysis.overview import OverviewGenerationError, generate_overview  # noqa: E402
from src.config import LOG_FORMAT, Settings  # noqa: E402
from src.extract.errors import ConfigurationError, NotFound, UpstreamUnavailable  # noqa: E402
from src.extract.utils import current_season_year  # noqa: E402
from src.models.player import Player  # noqa: E402
from src.models.team import Classification, Provider, Team  # noqa: E402
from src.pipeline.catalog import Catalog  # noqa: E402

logger = logging.getLogger(__name__)

st.set_page_config(page_title="CFB Player Explorer", layout="wide")

FIRST_SEASON = 2004


@st.cache_resource
def get_settings() -> Settings:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    return settings


@st.cache_data(ttl=3600, show_spinner="Loading teams...")
def load_teams(provider: Provider, year: int) -> list[Team]:
    with Catalog(get_settings()) as catalog:
        return catalog.teams(provider, year)


@st.cache_data(ttl=600, show_spinner="Loading players...")
def load_players(
    provider: Provider,
    year: int,
    team: str | None,
    search: str | None,
    position: str | None,
) -> list[Player]:
    with Catalog(get_settings()) as catalog:
        return catalog.roster(provider, year, team=team, search=search, position=position)


def _show_error(exc: Exception) -> None:
    """Render a user-facing message for a catalog failure."""
    if isinstance(exc, NotFound):
        st.info(f"No data found: {exc}")
    elif isinstance(exc, UpstreamUnavailable):
        st.error(
            f"{exc.provider} is unavailable right now "
            f"(status: {exc.status or 'no response'}). Try again shortly."
        )
    elif isinstance(exc, ConfigurationError):
        st.error(f"Configuration error: {exc}\n\nSet it in your `.env` file and restart.")
    elif isinstance(exc, OverviewGenerationError):
        st.error(f"AI generation failed: {exc}")
    else:
        st.error(str(exc))


def teams_frame(teams: list[Team]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Team": t.display_name,
                "Mascot": t.mascot or "",
                "Conference": t.conference or "",
                "Division": t.classification.value,
                "Color": t.primary_color,
            }
            for t in teams
        ]
    )


def players_frame(players: list[Player]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Name": p.full_name,
                "#": p.display_jersey,
                "Pos": p.position,
                "Team": p.team,
                "Height": p.display_height,
                "Weight": p.display_weight,
                "Class": p.class_year or "",
                "Hometown": p.hometown or "",
            }
            for p in players
        ]
    )


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

def page_teams(provider: Provider, year: int) -> None:
    """FBS and FCS teams for the selected provider and season."""
    st.header("Teams")
    try:
        teams = load_teams(provider, year)
    except (UpstreamUnavailable, ConfigurationError) as exc:
        _show_error(exc)
        return

    if not teams:
        st.info("No teams found for this season.")
        return

    fbs = [t for t in teams if t.classification is Classification.FBS]
    fcs = [t for t in teams if t.classification is Classification.FCS]
    cols = st.columns(2)
    cols[0].metric("FBS Teams", len(fbs))
    cols[1].metric("FCS Teams", len(fcs))

    for label, group in (("FBS", fbs), ("FCS", fcs)):
        if group:
            st.subheader(label)
            st.dataframe(teams_frame(group), use_container_width=True, hide_index=True)


def page_players(provider: Provider, year: int) -> None:
    """Roster browser with name search and position filter."""
    st.header("Players")
    try:
        teams = load_teams(provider, year)
    except (UpstreamUnavailable, ConfigurationError) as exc:
        _show_error(exc)
        return

    filter_cols = st.columns(3)
    team_names = [t.display_name for t in teams]
    # ESPN has no cross-team player search, so it always needs a team
    options = team_names if provider is Provider.ESPN else ["All", *team_names]
    selected_team = filter_cols[0].selectbox("Team", options)
    search = filter_cols[1].text_input("Search name", placeholder="e.g. Burrow")
    position = filter_cols[2].text_input("Position", placeholder="e.g. QB")

    team = None if selected_team in (None, "All") else selected_team
    if team is None and not search.strip():
        st.info("Pick a team or search for a player by name.")
        return

    try:
        players = load_players(provider, year, team, search.strip() or None, position.strip() or None)
    except (UpstreamUnavailable, ConfigurationError, NotFound, ValueError) as exc:
        _show_error(exc)
        return

    if not players:
        st.info("No players found.")
        return

    st.caption(f"{len(players)} players")
    st.dataframe(players_frame(players), use_container_width=True, hide_index=True)

    by_name = {f"{p.full_name} ({p.position}, {p.team})": p for p in players}
    choice = st.selectbox("Open player overview", ["", *by_name])
    if choice:
        st.session_state["overview_player"] = by_name[choice]
        st.session_state["overview_year"] = year
        st.success(f"Selected {by_name[choice].full_name}. Open the Player Overview page.")


def page_player_overview(provider: Provider, year: int) -> None:
    """Player card plus the AI-generated scouting overview."""
    st.header("Player Overview")
    player: Player | None = st.session_state.get("overview_player")
    if player is None:
        st.info("Select a player on the Players page first.")
        return
    year = st.session_state.get("overview_year", year)

    st.markdown(
        f"<div style='border-left: 8px solid {player.team_primary_color}; padding-left: 12px'>"
        f"<h3>{player.full_name} {player.display_jersey}</h3>"
        f"{player.position} &middot; {player.team}</div>",
        unsafe_allow_html=True,
    )
    if player.team_logo_url:
        st.image(player.team_logo_url, width=80)

    cols = st.columns(5)
    cols[0].metric("Height", player.display_height)
    cols[1].metric("Weight", player.display_weight)
    cols[2].metric("Class", player.class_year or "N/A")
    cols[3].metric("Redshirted", player.redshirt_status)
    cols[4].metric("Hometown", player.hometown or "N/A")

    if not st.button("Generate AI overview"):
        return

    settings = get_settings()
    try:
        llm = OpenAI(api_key=settings.require_openai_key())
        with Catalog(settings) as catalog, st.spinner("Generating overview..."):
            overview = generate_overview(player, year, catalog, llm, settings.openai_model)
    except (OverviewGenerationError, ConfigurationError) as exc:
        _show_error(exc)
        return

    meta = st.columns(4)
    meta[0].metric("Quality Score", overview.player_quality_score if overview.player_quality_score is not None else "N/A")
    meta[1].metric("Archetype", overview.archetype)
    meta[2].metric("Redshirted", overview.redshirted)
    meta[3].metric("HS Rating", overview.high_school_rating)
    st.markdown(overview.ai_overview)
    st.caption(f"Dealbreaker: {overview.dealbreaker}")

    for category in overview.ai_ratings:
        st.subheader(category.category)
        st.dataframe(
            pd.DataFrame([{"Rating": s.name, "Value": s.value} for s in category.stats]),
            use_container_width=True,
            hide_index=True,
        )

    if overview.assigned_abilities:
        st.subheader("Abilities")
        for ability in overview.assigned_abilities:
            st.markdown(f"**{ability.name}** ({ability.tier}): {ability.description}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

PAGES: dict[str, Callable[[Provider, int], None]] = {
    "Teams": page_teams,
    "Players": page_players,
    "Player Overview": page_player_overview,
}


def main() -> None:
    """Dashboard entry point."""
    st.title("CFB Player Explorer")

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        _show_error(exc)
        st.stop()

    providers = list(Provider)
    provider = st.sidebar.selectbox(
        "Provider",
        providers,
        index=providers.index(settings.default_provider),
        format_func=lambda p: p.value.upper(),
    )
    seasons = list(range(current_season_year(), FIRST_SEASON - 1, -1))
    year = st.sidebar.selectbox("Season", seasons)

    page = st.sidebar.radio("Navigation", list(PAGES))
    PAGES[page](provider, year)


main()
