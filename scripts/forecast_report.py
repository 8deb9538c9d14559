#!/usr/bin/env python3
"""
Forecast report — one row per day over a date range, saved as CSV.

Columns: date, day_of_week, perfect_day, confidence, alignment,
energy_type, critical_cycles, strong_day, caution_day

Usage:
    python scripts/forecast_report.py --birth-date 1990-05-15
    python scripts/forecast_report.py --birth-date 1990-05-15 --start 2026-01-01 --days 90
"""
import argparse
import sys
from datetime import date
from pathlib import Path

import pandas as pd
from loguru import logger

# ── Allow importing from project root ─────────────────────────────────────────
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

import config
from alignment.forecast import forecast
from alignment.profiles import build_personal_profile, parse_full_date


def forecast_frame(result) -> pd.DataFrame:
    df = pd.DataFrame([
        {
            "date":            d.target.isoformat(),
            "day_of_week":     d.day_of_week,
            "perfect_day":     d.perfect_day_score,
            "confidence":      d.confidence_score,
            "alignment":       d.overall_alignment,
            "energy_type":     d.energy_type,
            "critical_cycles": d.critical_cycles,
        }
        for d in result.days
    ])
    if df.empty:
        return df
    strong = {d.isoformat() for d in result.best_days}
    caution = {d.isoformat() for d in result.caution_days}
    df["strong_day"] = df["date"].isin(strong)
    df["caution_day"] = df["date"].isin(caution)
    return df


def run_report(birth_date: str, start: date, days: int, min_score: int) -> Path:
    personal = build_personal_profile(birth_date, today=start)
    result = forecast(personal, start, days, min_score=min_score)
    df = forecast_frame(result)

    print(f"\n=== FORECAST {start} +{days}d ===")
    if not df.empty:
        print(f"Mean perfect day:  {result.mean_score:.1f}")
        print(f"Trend:             {'n/a' if result.slope is None else f'{result.slope:+.2f}/day'}")
        print(f"Strong days:       {int(df['strong_day'].sum())}")
        print(f"Caution days:      {int(df['caution_day'].sum())}")
        print(f"Best day:          {df.loc[df['perfect_day'].idxmax(), 'date']}")

    out_path = Path(config.LOG_DIR) / f"forecast_{personal.birth_date}_{start}_{days}d.csv"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    print(f"\nFull results saved to: {out_path}")
    return out_path


def main():
    parser = argparse.ArgumentParser(description="Energy alignment forecast report")
    parser.add_argument("--birth-date", type=str, required=True)
    parser.add_argument("--start", type=str, default=None, help="First day (default: today)")
    parser.add_argument("--days", type=int, default=config.FORECAST_DAYS)
    parser.add_argument("--min-score", type=int, default=config.FORECAST_MIN_SCORE)
    args = parser.parse_args()

    start = parse_full_date(args.start).date() if args.start else date.today()
    logger.info(f"Forecast report for {args.birth_date}: {start} +{args.days}d")
    run_report(args.birth_date, start, args.days, args.min_score)


if __name__ == "__main__":
    main()
