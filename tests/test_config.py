# tests/test_config.py

from __future__ import annotations

import pytest

from guest_roster.config import CONFIG_ENV_VAR, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_env_override_is_read(tmp_path, monkeypatch) -> None:
    path = tmp_path / "roster.yml"
    path.write_text("roster:\n  max_guests_per_room: 2\ncache:\n  dir: /tmp/gr\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = get_config()

    assert cfg.max_guests_per_room == 2
    assert cfg.cache_dir == "/tmp/gr"


def test_missing_file_falls_back_to_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))

    cfg = get_config()

    assert cfg.max_guests_per_room == 5
    assert cfg.cache_dir == ".guest_cache"


def test_config_is_cached_until_reset(tmp_path, monkeypatch) -> None:
    path = tmp_path / "roster.yml"
    path.write_text("roster:\n  max_guests_per_room: 3\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert get_config().max_guests_per_room == 3

    path.write_text("roster:\n  max_guests_per_room: 4\n", encoding="utf-8")
    assert get_config().max_guests_per_room == 3

    reset_config()
    assert get_config().max_guests_per_room == 4
