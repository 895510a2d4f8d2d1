"""Tests for AI overview generation with a stubbed LLM client."""

import json
import random
from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError, RateLimitError

from src.analysis.abilities import ABILITIES, TIERS
from src.analysis.overview import (
    OverviewGenerationError,
    assign_abilities,
    build_player_prompt,
    build_stats_summary,
    generate_overview,
    parse_overview_response,
)
from src.extract.errors import NotFound, UpstreamUnavailable
from src.models.player import Player

REPLY = {
    "aiOverview": "A poised pocket passer with elite anticipation.",
    "playerQualityScore": 97,
    "playerClass": "Senior",
    "redshirted": "Yes",
    "archetype": "Pocket Passer",
    "dealbreaker": "None apparent",
    "aiRatings": [
        {"category": "Quarterback", "stats": [{"name": "Throw Accuracy Short", "value": 95}]},
    ],
}

QB_ROWS = [
    {"playerId": "4360310", "player": "Joe Burrow", "category": "passing", "statType": "YDS", "stat": "5671"},
    {"playerId": "4360310", "player": "Joe Burrow", "category": "passing", "statType": "TD", "stat": "60"},
    {"playerId": "4360310", "player": "Joe Burrow", "category": "passing", "statType": "COMPLETIONS", "stat": "402"},
    {"playerId": "4360310", "player": "Joe Burrow", "category": "passing", "statType": "ATT", "stat": "527"},
    {"playerId": "999", "player": "Someone Else", "category": "passing", "statType": "YDS", "stat": "12"},
]


def _make_player(**kwargs) -> Player:
    fields = {
        "id": "4360310",
        "first_name": "Joe",
        "last_name": "Burrow",
        "position": "QB",
        "team": "LSU",
        "height_inches": 76,
        "weight_pounds": 221,
        "jersey_number": 9,
        "class_year": "Senior",
    }
    fields.update(kwargs)
    return Player(**fields)


class _FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _make_llm(content: str | None = None, error: Exception | None = None):
    completions = _FakeCompletions(content, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


class _FakeSource:
    def __init__(self, rows: list[dict] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error

    def player_season_stats(self, player: Player, year: int) -> list[dict]:
        if self.error is not None:
            raise self.error
        return self.rows

    def high_school_rating(self, player: Player) -> str:
        return "0.8929 (4-star)"


class TestBuildStatsSummary:
    def test_quarterback_lines(self) -> None:
        summary = build_stats_summary(_make_player(), QB_ROWS, 2019)
        assert "Passing Yards: 5671" in summary
        assert "Passing TDs: 60" in summary
        assert "Completion %: 76.3%" in summary
        assert "Interceptions: N/A" in summary

    def test_matches_by_name_without_id(self) -> None:
        rows = [{"player": "joe burrow", "category": "passing", "statType": "YDS", "stat": "5671"}]
        summary = build_stats_summary(_make_player(id=""), rows, 2019)
        assert "Passing Yards: 5671" in summary

    def test_no_rows_for_player(self) -> None:
        summary = build_stats_summary(_make_player(id="1", first_name="Nobody"), QB_ROWS, 2019)
        assert summary.startswith("No detailed CFBD stats found for Nobody Burrow")

    def test_receiver_lines(self) -> None:
        rows = [{"playerId": "4360310", "category": "receiving", "statType": "REC", "stat": "84"}]
        summary = build_stats_summary(_make_player(position="WR"), rows, 2019)
        assert "Receptions: 84" in summary

    def test_position_without_stat_lines(self) -> None:
        summary = build_stats_summary(_make_player(position="LS"), QB_ROWS, 2019)
        assert "position" in summary


class TestBuildPlayerPrompt:
    def test_includes_profile(self) -> None:
        prompt = build_player_prompt(_make_player(), 2019, "Passing Yards: 5671", "0.8929 (4-star)")
        assert "Player Name: Joe Burrow" in prompt
        assert "Height: 6'4\"" in prompt
        assert "Jersey: #9" in prompt
        assert "High School Rating: 0.8929 (4-star)" in prompt
        assert prompt.endswith("Passing Yards: 5671")


class TestParseOverviewResponse:
    def test_parses_reply(self) -> None:
        overview = parse_overview_response(json.dumps(REPLY))
        assert overview.ai_overview.startswith("A poised")
        assert overview.player_quality_score == 97
        assert overview.archetype == "Pocket Passer"
        assert overview.ai_ratings[0].stats[0].value == 95

    def test_clamps_ratings(self) -> None:
        reply = dict(REPLY, playerQualityScore=140, aiRatings=[
            {"category": "General", "stats": [{"name": "Speed", "value": 120}, {"name": "Bad", "value": "x"}]},
        ])
        overview = parse_overview_response(json.dumps(reply))
        assert overview.player_quality_score == 100
        assert [(s.name, s.value) for s in overview.ai_ratings[0].stats] == [("Speed", 99)]

    def test_defaults_for_missing_keys(self) -> None:
        overview = parse_overview_response(json.dumps({"aiOverview": "Text"}))
        assert overview.player_class == "Uncertain"
        assert overview.redshirted == "Uncertain"
        assert overview.archetype == "General"
        assert overview.ai_ratings == []
        assert overview.player_quality_score is None

    def test_invalid_json(self) -> None:
        with pytest.raises(OverviewGenerationError):
            parse_overview_response("not json")

    def test_not_an_object(self) -> None:
        with pytest.raises(OverviewGenerationError):
            parse_overview_response("[1, 2]")

    def test_missing_overview_text(self) -> None:
        with pytest.raises(OverviewGenerationError):
            parse_overview_response(json.dumps({"aiOverview": "  "}))


class TestAssignAbilities:
    def test_picks_position_abilities(self) -> None:
        abilities = assign_abilities("QB", random.Random(7))
        assert len(abilities) == 3
        allowed = {a.name for a in ABILITIES if "QB" in a.positions or "Any" in a.positions}
        assert all(a.name in allowed for a in abilities)
        assert all(a.tier in TIERS for a in abilities)

    def test_maps_roster_codes(self) -> None:
        abilities = assign_abilities("RB", random.Random(1))
        allowed = {a.name for a in ABILITIES if "HB" in a.positions or "Any" in a.positions}
        assert {a.name for a in abilities} <= allowed

    def test_unknown_position_gets_generic(self) -> None:
        abilities = assign_abilities("N/A", random.Random(1))
        allowed = {a.name for a in ABILITIES if "Any" in a.positions}
        assert {a.name for a in abilities} <= allowed

    def test_seeded_is_repeatable(self) -> None:
        first = assign_abilities("WR", random.Random(3))
        second = assign_abilities("WR", random.Random(3))
        assert first == second


class TestGenerateOverview:
    def test_generates_overview(self) -> None:
        llm, completions = _make_llm(json.dumps(REPLY))
        overview = generate_overview(
            _make_player(), 2019, _FakeSource(QB_ROWS), llm, "gpt-4o", random.Random(0)
        )
        assert overview.ai_overview.startswith("A poised")
        assert overview.high_school_rating == "0.8929 (4-star)"
        assert len(overview.assigned_abilities) == 3

        call = completions.calls[0]
        assert call["model"] == "gpt-4o"
        assert call["response_format"] == {"type": "json_object"}
        assert "Passing Yards: 5671" in call["messages"][1]["content"]

    def test_uncertain_class_uses_roster_class(self) -> None:
        llm, _ = _make_llm(json.dumps(dict(REPLY, playerClass="Uncertain")))
        overview = generate_overview(_make_player(class_year="Junior"), 2019, _FakeSource(), llm, "gpt-4o")
        assert overview.player_class == "Junior"

    def test_stats_failure_still_generates(self) -> None:
        llm, completions = _make_llm(json.dumps(REPLY))
        source = _FakeSource(error=UpstreamUnavailable("cfbd", 503, "down"))
        generate_overview(_make_player(), 2019, source, llm, "gpt-4o")
        assert "Could not retrieve CFBD stats" in completions.calls[0]["messages"][1]["content"]

    def test_api_status_error(self) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        error = RateLimitError("Rate limit reached", response=httpx.Response(429, request=request), body=None)
        llm, _ = _make_llm(error=error)
        with pytest.raises(OverviewGenerationError) as exc_info:
            generate_overview(_make_player(), 2019, _FakeSource(), llm, "gpt-4o")
        assert exc_info.value.status == 429

    def test_connection_error(self) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        llm, _ = _make_llm(error=APIConnectionError(request=request))
        with pytest.raises(OverviewGenerationError) as exc_info:
            generate_overview(_make_player(), 2019, _FakeSource(), llm, "gpt-4o")
        assert exc_info.value.status is None

    def test_empty_reply(self) -> None:
        llm, _ = _make_llm(None)
        with pytest.raises(OverviewGenerationError):
            generate_overview(_make_player(), 2019, _FakeSource(), llm, "gpt-4o")


class TestRedshirtStatus:
    def test_prompt_includes_redshirt(self) -> None:
        prompt = build_player_prompt(_make_player(redshirted=True), 2019, "summary")
        assert "Redshirted: Yes" in prompt

    def test_unknown_redshirt_in_prompt(self) -> None:
        prompt = build_player_prompt(_make_player(), 2019, "summary")
        assert "Redshirted: Uncertain" in prompt

    def test_known_redshirt_overrides_model(self) -> None:
        llm, _ = _make_llm(json.dumps(dict(REPLY, redshirted="Yes")))
        overview = generate_overview(_make_player(redshirted=False), 2019, _FakeSource(), llm, "gpt-4o")
        assert overview.redshirted == "No"

    def test_unknown_redshirt_keeps_model_answer(self) -> None:
        llm, _ = _make_llm(json.dumps(REPLY))
        overview = generate_overview(_make_player(), 2019, _FakeSource(), llm, "gpt-4o")
        assert overview.redshirted == "Yes"

    def test_unmatched_school_still_generates(self) -> None:
        llm, completions = _make_llm(json.dumps(REPLY))
        source = _FakeSource(error=NotFound("No CFBD school for ESPN team 'Hogwarts Wizards'"))
        generate_overview(_make_player(team="Hogwarts Wizards"), 2019, source, llm, "gpt-4o")
        assert "No CFBD stats available" in completions.calls[0]["messages"][1]["content"]
