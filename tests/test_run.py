import argparse
import json

import pytest

from medipredict import run
from medipredict.session import Session


@pytest.fixture()
def cli_session(monkeypatch, service):
    monkeypatch.setattr(run, "Session", lambda month: Session(service=service, month=month))


def _predict_args(tmp_path, **overrides):
    base = {
        "month": 7,
        "category": "Dengue",
        "humidity": "78.5",
        "rainfall": "215.4",
        "temperature": "31.2",
        "festive": True,
        "awareness": 0.8,
        "out": str(tmp_path / "out" / "result.json"),
    }
    base.update(overrides)
    return argparse.Namespace(**base)


def test_cmd_predict_prints_cards_and_saves_json(cli_session, tmp_path, capsys):
    assert run.cmd_predict(_predict_args(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "Target: July · Category: Dengue" in out
    assert "Critical" in out
    assert "Infectious Disease Ward" in out
    assert "Increase ward capacity" in out

    saved = json.loads((tmp_path / "out" / "result.json").read_text(encoding="utf-8"))
    assert saved["category"] == "Dengue"
    assert saved["derived"]["visible_entries"] == {"Dengue": 180}
    assert len(saved["derived"]["bar_series"]) == 7


def test_cmd_predict_fails_on_invalid_reading(cli_session, tmp_path, backend):
    assert run.cmd_predict(_predict_args(tmp_path, rainfall="heavy")) == 1
    assert backend.predict_bodies == []


def test_cmd_history(cli_session, capsys):
    assert run.cmd_history(argparse.Namespace(month=3)) == 0
    out = capsys.readouterr().out
    assert "Average cases for March:" in out
    assert "Road Accidents" in out


def test_cmd_history_failure(cli_session, backend):
    backend.failing_months.add(3)
    assert run.cmd_history(argparse.Namespace(month=3)) == 1
