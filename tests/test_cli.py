import json

import httpx
import pytest

from ffnerd import cli
from ffnerd.client import FFNerdClient


PROJECTIONS = """<FFNSitStart>
  <Player playerId="100" name="A. Back" position="RB" team="NE" projectedPoints="12.5" rank="1" week="5"/>
</FFNSitStart>
"""

INJURIES = """<FFNInjuries>
  <Injury><week>5</week><playerId>100</playerId><playerName>A. Back</playerName><injuryDesc>Knee</injuryDesc></Injury>
</FFNInjuries>
"""

RANKINGS = '<FFNRankings><Player playerId="7" name="Someone" position="WR" team="SEA"/></FFNRankings>'


@pytest.fixture
def seen(monkeypatch) -> list[httpx.Request]:
    requests: list[httpx.Request] = []
    routes = {
        "/ffnSitStartXML.php": PROJECTIONS,
        "/ffnInjuriesXML.php": INJURIES,
        "/ffnRankingsXML.php": RANKINGS,
    }

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=routes[request.url.path].encode("utf-8"))

    def factory(*, settings):
        http = httpx.Client(transport=httpx.MockTransport(handler))
        return FFNerdClient(settings=settings, http_client=http)

    monkeypatch.setattr(cli, "FFNerdClient", factory)
    monkeypatch.delenv("FFNERD_API_KEY", raising=False)
    return requests


def test_cli_merged_prints_json(seen, capsys):
    code = cli.main(["--api-key", "k", "merged", "5", "--position", "rb"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["id"] == 100
    assert payload[0]["injured"] is True
    assert payload[0]["injury"]["injury_desc"] == "Knee"
    assert seen[0].url.params["position"] == "RB"


def test_cli_rankings_defaults_follow_variant(seen, capsys):
    assert cli.main(["--api-key", "k", "rankings", "--ppr"]) == 0
    assert cli.main(["--api-key", "k", "rankings", "--no-sos", "--limit", "5"]) == 0

    assert seen[0].url.params["sos"] == "1"
    assert seen[0].url.params["limit"] == "20"
    assert seen[1].url.params["sos"] == "0"
    assert seen[1].url.params["limit"] == "5"
    capsys.readouterr()


def test_cli_missing_key_exits_with_message(seen, capsys):
    code = cli.main(["projections", "5"])

    assert code == 2
    assert "API key not set" in capsys.readouterr().err
    assert seen == []


def test_cli_profile_supplies_key(seen, tmp_path, capsys):
    profile = tmp_path / "profile.json"
    assert cli.main(["--api-key", "from-profile", "--save-profile", str(profile), "projections", "5"]) == 0

    assert cli.main(["--profile", str(profile), "injuries", "5"]) == 0
    assert seen[-1].url.params["apiKey"] == "from-profile"
    capsys.readouterr()


def test_cli_transport_error_prints_message(monkeypatch, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="down")

    def factory(*, settings):
        return FFNerdClient(settings=settings, http_client=httpx.Client(transport=httpx.MockTransport(handler)))

    monkeypatch.setattr(cli, "FFNerdClient", factory)

    code = cli.main(["--api-key", "k", "injuries", "5"])

    assert code == 2
    assert "503" in capsys.readouterr().err
