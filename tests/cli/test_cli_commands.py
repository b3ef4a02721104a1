"""Tests for the developer CLI."""

import datetime as dt
import json

import pytest
from typer.testing import CliRunner

from cli.cli import app
from overload.config.settings import settings
from overload.core.logger import setup_logger
from overload.sync.migration import build_default_state, dump_state

runner = CliRunner()


@pytest.fixture
def snapshot_file(tmp_path, make_session):
    """Write a snapshot with one finished Push A session for Jacob."""

    def _write(name: str, *sessions, device_id: str = "device-cli"):
        state = build_default_state(device_id=device_id, now_ms=1_000)
        jacob = state.profiles["jacob"].model_copy(update={"sessions": tuple(sessions)})
        state = state.model_copy(update={"profiles": {**state.profiles, "jacob": jacob}})
        path = tmp_path / name
        path.write_text(json.dumps(dump_state(state)), encoding="utf-8")
        return path

    return _write


def test_plan_prints_todays_exercises(snapshot_file) -> None:
    path = snapshot_file("state.json")

    result = runner.invoke(app, ["plan", str(path)])

    assert result.exit_code == 0
    assert "Push A" in result.output
    assert "Back Squat" in result.output


def test_plan_for_other_profile(snapshot_file) -> None:
    result = runner.invoke(app, ["plan", str(snapshot_file("state.json")), "--profile", "mari"])

    assert result.exit_code == 0
    assert "Mari" in result.output


def test_plan_reports_calendar_week_since_program_start(tmp_path) -> None:
    state = build_default_state(device_id="device-cli", now_ms=1_000, today=dt.date(2026, 1, 5))
    path = tmp_path / "state.json"
    path.write_text(json.dumps(dump_state(state)), encoding="utf-8")

    result = runner.invoke(app, ["plan", str(path), "--date", "2026-01-21"])

    assert result.exit_code == 0
    assert "Calendar week 3, day 3 of 7 since 2026-01-05" in result.output


def test_plan_invalid_date_fails(snapshot_file) -> None:
    result = runner.invoke(app, ["plan", str(snapshot_file("state.json")), "--date", "next tuesday"])

    assert result.exit_code == 1


def test_plan_unknown_profile_fails(snapshot_file) -> None:
    result = runner.invoke(app, ["plan", str(snapshot_file("state.json")), "--profile", "nobody"])

    assert result.exit_code == 1


def test_plan_unreadable_file_fails(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")

    result = runner.invoke(app, ["plan", str(path)])

    assert result.exit_code == 1


def test_merge_writes_union_of_sessions(tmp_path, snapshot_file, make_session) -> None:
    local = snapshot_file("local.json", make_session("l1", "2026-01-05"))
    remote = snapshot_file("remote.json", make_session("r1", "2026-01-06", day_key="Pull A"), device_id="device-r")
    output = tmp_path / "out" / "merged.json"

    result = runner.invoke(app, ["merge", str(local), str(remote), "--output", str(output)])

    assert result.exit_code == 0
    merged = json.loads(output.read_text(encoding="utf-8"))
    assert [s["id"] for s in merged["profiles"]["jacob"]["sessions"]] == ["l1", "r1"]
    assert merged["deviceId"] == "device-cli"


def test_sync_without_url_fails(snapshot_file, monkeypatch) -> None:
    monkeypatch.setattr(settings, "sync_url", "")

    result = runner.invoke(app, ["sync", str(snapshot_file("state.json"))])

    assert result.exit_code == 1


def test_serve_passes_log_file_through(tmp_path, monkeypatch) -> None:
    calls = {}

    def fake_run(relay_app, host, port):
        calls.update(host=host, port=port)

    monkeypatch.setattr("cli.cli.uvicorn.run", fake_run)
    log_file = tmp_path / "relay.log"

    try:
        result = runner.invoke(
            app,
            ["serve", "--port", "9999", "--file", str(tmp_path / "state.json"), "--log-file", str(log_file)],
        )
    finally:
        setup_logger(level="INFO", log_file="")

    assert result.exit_code == 0
    assert calls["port"] == 9999
    assert "Starting sync relay" in log_file.read_text(encoding="utf-8")
