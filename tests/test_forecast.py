from datetime import date, timedelta

import pytest

from alignment.forecast import ScoreSeries, daily_outlook, forecast


# ── ScoreSeries ───────────────────────────────────────────────────────────────

def test_score_series_empty():
    series = ScoreSeries()
    assert len(series) == 0
    assert series.mean() is None
    assert series.slope() is None


def test_score_series_two_points_uses_delta():
    series = ScoreSeries()
    series.push(60)
    series.push(72)
    assert series.slope() == 12
    assert series.mean() == 66


def test_score_series_regression_slope():
    series = ScoreSeries()
    for score in (50, 60, 70, 80):
        series.push(score)
    assert series.slope() == pytest.approx(10.0)
    assert len(series) == 4


# ── Forecast ──────────────────────────────────────────────────────────────────

def test_daily_outlook_matches_reading(personal):
    outlook = daily_outlook(personal, date(2026, 1, 21))
    assert outlook.perfect_day_score == 72
    assert outlook.confidence_score == 57
    assert outlook.day_of_week == "Wednesday"
    assert outlook.critical_cycles == 1


def test_forecast_days(personal):
    result = forecast(personal, date(2026, 1, 21), days=14)
    assert len(result.days) == 14
    assert [o.target for o in result.days] == [date(2026, 1, 21) + timedelta(days=i) for i in range(14)]
    assert result.slope is not None
    assert all(o.perfect_day_score >= 75 for o in result.days if o.target in result.best_days)
    assert all(o.critical_cycles >= 2 for o in result.days if o.target in result.caution_days)


def test_forecast_min_score(personal):
    everything = forecast(personal, date(2026, 1, 21), days=7, min_score=0)
    assert len(everything.best_days) == 7
    nothing = forecast(personal, date(2026, 1, 21), days=7, min_score=101)
    assert nothing.best_days == ()


def test_forecast_zero_days(personal):
    result = forecast(personal, date(2026, 1, 21), days=0)
    assert result.days == ()
    assert result.mean_score is None
    assert result.slope is None


def test_forecast_two_days_uses_delta(personal):
    result = forecast(personal, date(2026, 1, 21), days=2)
    first, second = result.days
    assert result.slope == second.perfect_day_score - first.perfect_day_score


def test_forecast_rejects_negative_days(personal):
    with pytest.raises(ValueError):
        forecast(personal, date(2026, 1, 21), days=-1)
