"""FastAPI entrypoint: REST-ish endpoints over the team/player catalog.

Handlers only translate query parameters into Catalog calls and map the error
types to HTTP responses:

- UpstreamUnavailable -> the provider's status (or 500), so callers can tell
  "upstream unavailable" apart from "no data".
- NotFound -> 404 with an empty result set.
- OverviewGenerationError -> "AI generation failed" with OpenAI's status (or 502).
- ConfigurationError -> 500.

Run locally with `python -m src.api.app --reload`.
"""

import argparse
import logging
from collections.abc import Iterator
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from openai import OpenAI
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.analysis.overview import OverviewGenerationError, generate_overview
from src.config import LOG_FORMAT, Settings
from src.extract.errors import ConfigurationError, NotFound, UpstreamUnavailable
from src.extract.utils import parse_year
from src.models.player import Player
from src.models.team import Classification, Provider
from src.pipeline.catalog import Catalog
from src.transform.clean import NOT_AVAILABLE, split_full_name

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def get_catalog(settings: Settings = Depends(get_settings)) -> Iterator[Catalog]:
    with Catalog(settings) as catalog:
        yield catalog


def get_llm(settings: Settings = Depends(get_settings)) -> OpenAI:
    return OpenAI(api_key=settings.require_openai_key(), timeout=settings.http_timeout * 2)


class PlayerIn(BaseModel):
    """A canonical player as the frontend sends it back (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    team: str = Field(min_length=1)
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    position: str = NOT_AVAILABLE
    jersey_number: int | None = None
    height_inches: int | None = None
    weight_pounds: int | None = None
    hometown: str | None = None
    class_year: str | None = None
    recruit_ids: list[str] = Field(default_factory=list)
    redshirted: bool | None = None
    recruit_rating: str | None = None
    provider: Provider = Provider.CFBD

    def to_player(self) -> Player:
        first, last = self.first_name, self.last_name
        if not first and not last:
            first, last = split_full_name(self.full_name)
        return Player(
            id=self.id,
            first_name=first,
            last_name=last,
            position=self.position or NOT_AVAILABLE,
            team=self.team,
            jersey_number=self.jersey_number,
            height_inches=self.height_inches,
            weight_pounds=self.weight_pounds,
            hometown=self.hometown,
            class_year=self.class_year,
            recruit_ids=self.recruit_ids,
            redshirted=self.redshirted,
            recruit_rating=self.recruit_rating,
            provider=self.provider,
        )


class OverviewRequest(BaseModel):
    player: PlayerIn
    year: int


def create_app() -> FastAPI:
    app = FastAPI(title="CFB Player Explorer API", version="0.1.0")
    _register_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": "api"}

    @app.get("/api/teams")
    def list_teams(
        provider: Provider | None = Query(None, description="cfbd or espn; defaults to DEFAULT_PROVIDER"),
        year: str | None = Query(None, description="Season year; defaults to the current season"),
        catalog: Catalog = Depends(get_catalog),
    ) -> list[dict]:
        """FBS teams then FCS teams, each alphabetical."""
        teams = catalog.teams(provider or catalog.settings.default_provider, _year(year))
        return [t.to_api_dict() for t in teams]

    @app.get("/api/teams/grouped")
    def list_teams_grouped(
        year: str | None = Query(None),
        catalog: Catalog = Depends(get_catalog),
    ) -> dict[str, list[dict]]:
        groups = catalog.teams_by_classification(_year(year))
        return {
            "fbsTeams": [t.to_api_dict() for t in groups[Classification.FBS]],
            "fcsTeams": [t.to_api_dict() for t in groups[Classification.FCS]],
        }

    @app.get("/api/players")
    def list_players(
        provider: Provider | None = Query(None),
        year: str | None = Query(None),
        team: str | None = Query(None, description="Team name"),
        search: str | None = Query(None, description="Case-insensitive name substring"),
        position: str | None = Query(None, description="Position code, e.g. QB"),
        catalog: Catalog = Depends(get_catalog),
    ) -> list[dict]:
        if not team and not search:
            raise HTTPException(status_code=400, detail="Missing team or search parameter.")
        provider = provider or catalog.settings.default_provider
        if provider is Provider.ESPN and not team:
            raise HTTPException(status_code=400, detail="ESPN player lookups require a team.")
        players = catalog.roster(provider, _year(year), team=team, search=search, position=position)
        return [p.to_api_dict() for p in players]

    @app.get("/api/roster")
    def roster(
        team: str | None = Query(None),
        year: str | None = Query(None),
        catalog: Catalog = Depends(get_catalog),
    ) -> list[dict]:
        """One team's CFBD roster for one season."""
        if not team or not year:
            raise HTTPException(status_code=400, detail="Missing required query parameters: team and year.")
        players = catalog.roster(Provider.CFBD, _year(year), team=team)
        return [p.to_api_dict() for p in players]

    @app.get("/api/players/{athlete_id}")
    def get_player(athlete_id: str, catalog: Catalog = Depends(get_catalog)) -> dict:
        return catalog.player(athlete_id).to_api_dict()

    @app.get("/api/ai-overview")
    def ai_overview_by_id(
        player_id: str = Query(..., alias="playerId", min_length=1),
        year: str | None = Query(None),
        catalog: Catalog = Depends(get_catalog),
        llm: OpenAI = Depends(get_llm),
    ) -> dict:
        """AI overview for an ESPN athlete."""
        player = catalog.player(player_id)
        overview = generate_overview(player, _year(year), catalog, llm, catalog.settings.openai_model)
        return {"player": player.to_api_dict(), **overview.to_api_dict()}

    @app.post("/api/ai-overview")
    def ai_overview(
        request: OverviewRequest,
        catalog: Catalog = Depends(get_catalog),
        llm: OpenAI = Depends(get_llm),
    ) -> dict:
        """AI overview for a player the client already has."""
        player = request.player.to_player()
        logger.info("AI overview requested for %s, %s, %s", player.full_name, player.team, request.year)
        overview = generate_overview(player, request.year, catalog, llm, catalog.settings.openai_model)
        return overview.to_api_dict()

    return app


def _year(value: str | None) -> int:
    try:
        return parse_year(value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail="Year must be a valid number.") from e


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UpstreamUnavailable)
    def upstream_unavailable(request: Request, exc: UpstreamUnavailable) -> JSONResponse:
        status = exc.status if exc.status and 400 <= exc.status <= 599 else 500
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status,
            content={
                "error": f"Failed to fetch data from {exc.provider}",
                "provider": str(exc.provider),
                "status": exc.status,
                "details": exc.message,
            },
        )

    @app.exception_handler(NotFound)
    def not_found(request: Request, exc: NotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc), "results": []})

    @app.exception_handler(OverviewGenerationError)
    def generation_failed(request: Request, exc: OverviewGenerationError) -> JSONResponse:
        status = exc.status if exc.status and 400 <= exc.status <= 599 else 502
        return JSONResponse(
            status_code=status,
            content={"error": "AI generation failed", "details": str(exc)},
        )

    @app.exception_handler(ConfigurationError)
    def misconfigured(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Configuration error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Server configuration error", "details": str(exc)},
        )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser(description="CFB Player Explorer API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    uvicorn.run("src.api.app:app", host=args.host, port=args.port, reload=args.reload)
