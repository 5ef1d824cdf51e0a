"""Tests for configuration and logging setup."""

from pathlib import Path

import pytest

from gameplanner.app import choose_default_game
from gameplanner.config import Config
from gameplanner.engine.loader import CatalogError
from gameplanner.logging import hash_fingerprint_processor


def test_defaults():
    config = Config.from_env({})
    assert config.port == 1965
    assert config.catalog_dir is None
    assert config.default_game == "chess"
    assert config.json_logs is False
    assert config.hash_fingerprints is True
    assert config.tls_files() == {"certfile": None, "keyfile": None}


def test_from_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("GAMEPLANNER_PORT", "1966")
    monkeypatch.setenv("GAMEPLANNER_CATALOG_DIR", str(tmp_path))
    monkeypatch.setenv("GAMEPLANNER_DEFAULT_GAME", "sc2")
    monkeypatch.setenv("GAMEPLANNER_JSON_LOGS", "yes")
    monkeypatch.setenv("GAMEPLANNER_HASH_FINGERPRINTS", "false")
    config = Config.from_env()
    assert config.port == 1966
    assert config.catalog_dir == tmp_path
    assert config.default_game == "sc2"
    assert config.json_logs is True
    assert config.hash_fingerprints is False


def test_blank_values_keep_defaults():
    config = Config.from_env(
        {"GAMEPLANNER_HOST": "  ", "GAMEPLANNER_PORT": "", "GAMEPLANNER_JSON_LOGS": ""}
    )
    assert config.host == "localhost"
    assert config.port == 1965
    assert config.json_logs is False


def test_log_level_is_normalized():
    assert Config.from_env({"GAMEPLANNER_LOG_LEVEL": "debug"}).log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"GAMEPLANNER_PORT": "gemini"},
        {"GAMEPLANNER_PORT": "70000"},
        {"GAMEPLANNER_JSON_LOGS": "maybe"},
        {"GAMEPLANNER_LOG_LEVEL": "chatty"},
        {"GAMEPLANNER_CERTFILE": "cert.pem"},
    ],
)
def test_bad_settings_rejected(env):
    with pytest.raises(ValueError):
        Config.from_env(env)


def test_tls_files(tmp_path: Path):
    config = Config.from_env(
        {
            "GAMEPLANNER_CERTFILE": str(tmp_path / "cert.pem"),
            "GAMEPLANNER_KEYFILE": str(tmp_path / "key.pem"),
        }
    )
    assert config.tls_files() == {
        "certfile": str(tmp_path / "cert.pem"),
        "keyfile": str(tmp_path / "key.pem"),
    }


def test_default_game_kept_when_loaded(catalogs):
    assert choose_default_game(catalogs, "sc2") == "sc2"


def test_default_game_falls_back(catalogs):
    assert choose_default_game(catalogs, "go") in catalogs


def test_default_game_without_catalogs():
    with pytest.raises(CatalogError, match="no catalogs"):
        choose_default_game({}, "chess")


def test_fingerprint_is_hashed():
    event = hash_fingerprint_processor(None, "info", {"fingerprint": "abc"})
    assert "fingerprint" not in event
    assert len(event["fingerprint_hash"]) == 12


def test_unknown_fingerprint_kept():
    event = hash_fingerprint_processor(None, "info", {"fingerprint": "unknown"})
    assert event == {"fingerprint": "unknown"}
