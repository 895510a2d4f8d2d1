"""Tests for the extract layer helpers."""

from datetime import date

import pytest

from src.extract.errors import MalformedField, UpstreamUnavailable
from src.extract.utils import current_season_year, parse_year


class TestCurrentSeasonYear:
    def test_fall_is_current_year(self) -> None:
        assert current_season_year(date(2024, 9, 14)) == 2024

    def test_august_starts_the_season(self) -> None:
        assert current_season_year(date(2024, 8, 1)) == 2024

    def test_spring_is_previous_season(self) -> None:
        assert current_season_year(date(2025, 3, 1)) == 2024

    def test_defaults_to_today(self) -> None:
        season = current_season_year()
        assert season in (date.today().year, date.today().year - 1)


class TestParseYear:
    def test_parses_string(self) -> None:
        assert parse_year("2023") == 2023

    def test_passes_int_through(self) -> None:
        assert parse_year(2019) == 2019

    def test_missing_uses_default(self) -> None:
        assert parse_year(None, default=2020) == 2020
        assert parse_year("", default=2020) == 2020

    def test_missing_without_default_is_current_season(self) -> None:
        assert parse_year(None) == current_season_year()

    def test_non_numeric_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_year("twenty")

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_year("1492")


class TestErrors:
    def test_upstream_unavailable_carries_status(self) -> None:
        err = UpstreamUnavailable("cfbd", 401, "Unauthorized")
        assert err.provider == "cfbd"
        assert err.status == 401
        assert err.message == "Unauthorized"
        assert "401" in str(err)

    def test_upstream_unavailable_without_response(self) -> None:
        err = UpstreamUnavailable("espn", None, "connection refused")
        assert "no response" in str(err)

    def test_malformed_field_is_value_error(self) -> None:
        err = MalformedField("height", "6-2")
        assert isinstance(err, ValueError)
        assert "height" in str(err)
