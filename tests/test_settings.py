import json
from pathlib import Path

import pytest

from ffnerd.config import BASE_URL
from ffnerd.config_loader import ClientSettings
from ffnerd.errors import ConfigurationError


def test_from_env_reads_all_values(monkeypatch):
    monkeypatch.setenv("FFNERD_API_KEY", "abc123")
    monkeypatch.setenv("FFNERD_BASE_URL", "http://localhost:9000")
    monkeypatch.setenv("FFNERD_TIMEOUT", "2.5")
    monkeypatch.setenv("FFNERD_STRICT_MERGE", "yes")

    settings = ClientSettings.from_env()

    assert settings.api_key == "abc123"
    assert settings.base_url == "http://localhost:9000"
    assert settings.timeout == pytest.approx(2.5)
    assert settings.strict_merge is True


def test_from_env_defaults_when_unset(monkeypatch):
    for name in ("FFNERD_API_KEY", "FFNERD_BASE_URL", "FFNERD_TIMEOUT", "FFNERD_STRICT_MERGE"):
        monkeypatch.delenv(name, raising=False)

    settings = ClientSettings.from_env()

    assert settings.api_key is None
    assert settings.base_url == BASE_URL
    assert settings.strict_merge is False


def test_from_env_invalid_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("FFNERD_TIMEOUT", "soon")
    monkeypatch.setenv("FFNERD_STRICT_MERGE", "maybe")

    with caplog.at_level("WARNING"):
        settings = ClientSettings.from_env()

    assert settings.timeout == pytest.approx(10.0)
    assert settings.strict_merge is False
    assert "FFNERD_TIMEOUT" in caplog.text
    assert "FFNERD_STRICT_MERGE" in caplog.text


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "ffnerd.json"
    ClientSettings(api_key="k", timeout=3.0, strict_merge=True).save(path)

    loaded = ClientSettings.load(path)

    assert loaded == ClientSettings(api_key="k", timeout=3.0, strict_merge=True)


def test_require_api_key_raises_when_missing():
    with pytest.raises(ConfigurationError):
        ClientSettings().require_api_key()
    assert ClientSettings(api_key="k").require_api_key() == "k"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(True, True), (False, False), ("false", False), ("no", False), ("1", True), ("sometimes", False)],
)
def test_load_parses_strict_merge_flag(tmp_path: Path, raw, expected):
    path = tmp_path / "ffnerd.json"
    path.write_text(json.dumps({"api_key": "k", "strict_merge": raw}), encoding="utf-8")

    assert ClientSettings.load(path).strict_merge is expected
