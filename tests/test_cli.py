import json

from main import main


def test_cli_rejects_bad_birth_date():
    assert main(["--birth-date", "garbage"]) == 2


def test_cli_rejects_bad_target_date():
    assert main(["--birth-date", "1990-05-15", "--date", "nope"]) == 2


def test_cli_json_output(capsys):
    assert main(["--birth-date", "1990-05-15", "--date", "2026-01-21", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["reading"]["combined"]["perfect_day_score"] == 72
    assert payload["reading"]["insights"]["meetings"]["time"] == "09:00–11:00"
    assert "forecast" not in payload


def test_cli_json_with_forecast(capsys):
    args = ["--birth-date", "1990-05-15", "--date", "2026-01-21", "--json", "--forecast", "3"]
    assert main(args) == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["forecast"]["days"]) == 3
    assert payload["forecast"]["start"] == "2026-01-21"


def test_cli_table_output(capsys):
    args = ["--birth-date", "1990-05-15", "--date", "2026-01-21", "--forecast", "3"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "72" in out


def test_cli_rejects_partial_target_date():
    assert main(["--birth-date", "1990-05-15", "--date", "Jan 2026"]) == 2


def test_cli_rejects_partial_birth_date():
    assert main(["--birth-date", "May 1990", "--date", "2026-01-21"]) == 2


def test_cli_shows_day_label(capsys):
    assert main(["--birth-date", "1990-05-15", "--date", "2026-01-21"]) == 0
    assert "Excellent day for business" in capsys.readouterr().out
