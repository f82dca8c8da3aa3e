from pathlib import Path

from squadapi.config import load_settings


def test_defaults(monkeypatch):
    for name in ("SQUADAPI_SEED_PATH", "SQUADAPI_HOST", "SQUADAPI_PORT", "SQUADAPI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.seed_path == Path("players.json")
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "info"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SQUADAPI_SEED_PATH", "/data/squad.json")
    monkeypatch.setenv("SQUADAPI_HOST", "0.0.0.0")
    monkeypatch.setenv("SQUADAPI_PORT", "9090")
    monkeypatch.setenv("SQUADAPI_LOG_LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.seed_path == Path("/data/squad.json")
    assert settings.host == "0.0.0.0"
    assert settings.port == 9090
    assert settings.log_level == "debug"


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SQUADAPI_PORT", "eighty")
    monkeypatch.setenv("SQUADAPI_LOG_LEVEL", "chatty")

    settings = load_settings()

    assert settings.port == 8000
    assert settings.log_level == "info"
