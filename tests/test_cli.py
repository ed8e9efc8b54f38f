# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from guest_roster.cli.app import app

runner = CliRunner()


def _backend_file(tmp_path):
    path = tmp_path / "backend.json"
    path.write_text(
        json.dumps({"data": [{"guest_id": 1, "full_name": "Owner Person", "is_main_guest": True}]}),
        encoding="utf-8",
    )
    return path


def test_reconcile_save_then_show_and_clear(tmp_path) -> None:
    cache_dir = tmp_path / "cache"
    backend = _backend_file(tmp_path)

    result = runner.invoke(
        app,
        ["reconcile", str(backend), "--booking-id", "9", "--cache-dir", str(cache_dir), "--save", "--json"],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["name"] == "Owner Person"
    assert (cache_dir / "guest_cache_9.json").exists()

    shown = runner.invoke(app, ["show-cache", "--booking-id", "9", "--cache-dir", str(cache_dir)])
    assert shown.exit_code == 0
    assert "Owner Person" in shown.stdout

    cleared = runner.invoke(app, ["clear-cache", "--booking-id", "9", "--cache-dir", str(cache_dir)])
    assert cleared.exit_code == 0
    assert not (cache_dir / "guest_cache_9.json").exists()


def test_show_cache_missing_exits_non_zero(tmp_path) -> None:
    result = runner.invoke(app, ["show-cache", "--booking-id", "1", "--cache-dir", str(tmp_path)])
    assert result.exit_code == 1
