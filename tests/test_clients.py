"""Tests for the CFBD and ESPN HTTP clients."""

import httpx
import pytest

from src.extract.cfbd_api import CFBDClient
from src.extract.errors import ConfigurationError, UpstreamUnavailable
from src.extract.espn_api import ESPNClient


def _cfbd(handler) -> CFBDClient:
    return CFBDClient(api_key="test-key", transport=httpx.MockTransport(handler))


def _espn(handler) -> ESPNClient:
    return ESPNClient(transport=httpx.MockTransport(handler))


class TestCFBDClient:
    def test_requires_key(self) -> None:
        with pytest.raises(ConfigurationError):
            CFBDClient(api_key="")

    def test_sends_bearer_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        with _cfbd(handler) as client:
            client.get_teams(2024)
        assert seen[0].headers["Authorization"] == "Bearer test-key"
        assert seen[0].url.path == "/teams"
        assert seen[0].url.params["year"] == "2024"

    def test_roster_params_skip_empty_team(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"id": 1}])

        with _cfbd(handler) as client:
            rows = client.get_roster(2024)
        assert rows == [{"id": 1}]
        assert seen[0].url.path == "/roster"
        assert "team" not in seen[0].url.params

    def test_recruit_ids_joined(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        with _cfbd(handler) as client:
            client.get_recruits(["1", "2"])
        assert seen[0].url.path == "/recruiting/players"
        assert seen[0].url.params["recruitIds"] == "1,2"

    def test_error_status_raises_with_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, text="Unauthorized")

        with _cfbd(handler) as client, pytest.raises(UpstreamUnavailable) as exc_info:
            client.get_teams()
        assert exc_info.value.status == 401
        assert exc_info.value.provider == "cfbd"
        assert exc_info.value.message == "Unauthorized"

    def test_roster_404_is_not_empty_list(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="Not Found")

        with _cfbd(handler) as client, pytest.raises(UpstreamUnavailable) as exc_info:
            client.get_roster(2024, "Hogwarts")
        assert exc_info.value.status == 404

    def test_transport_error_has_no_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _cfbd(handler) as client, pytest.raises(UpstreamUnavailable) as exc_info:
            client.get_roster(2024, "LSU")
        assert exc_info.value.status is None

    def test_non_json_body_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        with _cfbd(handler) as client, pytest.raises(UpstreamUnavailable):
            client.get_teams()

    def test_non_list_body_is_empty(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"message": "odd"})

        with _cfbd(handler) as client:
            assert client.get_fbs_teams() == []


class TestESPNClient:
    def test_get_teams_unwraps_league(self) -> None:
        payload = {"sports": [{"leagues": [{"teams": [{"team": {"id": "99"}}, {"team": {"id": "2"}}]}]}]}

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path.endswith("/college-football/teams")
            assert request.url.params["limit"] == "1000"
            return httpx.Response(200, json=payload)

        with _espn(handler) as client:
            teams = client.get_teams()
        assert [t["team"]["id"] for t in teams] == ["99", "2"]

    def test_get_teams_empty_payload(self) -> None:
        with _espn(lambda request: httpx.Response(200, json={})) as client:
            assert client.get_teams() == []

    def test_roster_flattens_groups(self) -> None:
        payload = {
            "athletes": [
                {"position": "offense", "items": [{"id": "1"}, {"id": "2"}]},
                {"position": "defense", "items": [{"id": "3"}]},
            ]
        }

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path.endswith("/teams/99/roster")
            assert request.url.params["season"] == "2024"
            return httpx.Response(200, json=payload)

        with _espn(handler) as client:
            athletes = client.get_roster("99", 2024)
        assert [a["id"] for a in athletes] == ["1", "2", "3"]

    def test_roster_flat_list(self) -> None:
        payload = {"athletes": [{"id": "1"}, {"id": "2"}]}
        with _espn(lambda request: httpx.Response(200, json=payload)) as client:
            assert [a["id"] for a in client.get_roster("99")] == ["1", "2"]

    def test_get_athlete(self) -> None:
        payload = {"athlete": {"id": "4426338", "displayName": "Jayden Daniels"}}
        with _espn(lambda request: httpx.Response(200, json=payload)) as client:
            assert client.get_athlete("4426338")["id"] == "4426338"

    def test_not_found_status(self) -> None:
        with _espn(lambda request: httpx.Response(404, text="Not Found")) as client:
            with pytest.raises(UpstreamUnavailable) as exc_info:
                client.get_athlete("0")
        assert exc_info.value.status == 404
        assert exc_info.value.provider == "espn"

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _espn(handler) as client, pytest.raises(UpstreamUnavailable) as exc_info:
            client.get_teams()
        assert exc_info.value.status is None
