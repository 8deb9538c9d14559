from datetime import date

from alignment.forecast import forecast
from scripts.forecast_report import forecast_frame
from scripts.plot_forecast import load_csv, make_chart


def test_forecast_frame_columns(personal):
    df = forecast_frame(forecast(personal, date(2026, 1, 21), days=10))
    assert len(df) == 10
    assert list(df.columns) == [
        "date", "day_of_week", "perfect_day", "confidence", "alignment",
        "energy_type", "critical_cycles", "strong_day", "caution_day",
    ]
    assert df.loc[0, "perfect_day"] == 72
    assert (df.loc[df["strong_day"], "perfect_day"] >= 75).all()


def test_forecast_frame_empty(personal):
    assert forecast_frame(forecast(personal, date(2026, 1, 21), days=0)).empty


def test_chart_round_trip(personal, tmp_path):
    csv_path = tmp_path / "forecast.csv"
    forecast_frame(forecast(personal, date(2026, 1, 21), days=14)).to_csv(csv_path, index=False)

    df = load_csv(str(csv_path))
    assert df.index.is_monotonic_increasing

    out = tmp_path / "chart.png"
    make_chart(df, "Test", out)
    assert out.exists() and out.stat().st_size > 0
