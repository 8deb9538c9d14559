"""
Forecast — perfect-day scores over a run of consecutive dates.

Series statistics over the whole run:
  - mean   numpy mean of the perfect-day scores
  - slope  linear-regression slope with three or more points,
           simple delta with two, None with fewer
"""
from datetime import date, timedelta
from typing import Optional

import numpy as np
from loguru import logger

import config
from alignment.models import DailyOutlook, Forecast, PersonalProfile
from alignment.profiles import build_earth_profile
from alignment.synthesis import synthesize


class ScoreSeries:
    """
    Ordered buffer of daily scores.
    Computes the mean and the slope (regression or simple delta).
    """

    def __init__(self):
        self._scores: list = []

    def push(self, score: float):
        self._scores.append(score)

    def mean(self) -> Optional[float]:
        if not self._scores:
            return None
        return float(np.mean(self._scores))

    def slope(self) -> Optional[float]:
        """
        With >=3 points: linear regression slope.
        With 2 points:   current - previous.
        With <2 points:  None.
        """
        buf = self._scores
        if len(buf) < 2:
            return None
        if len(buf) >= 3:
            x = np.arange(len(buf), dtype=float)
            return float(np.polyfit(x, buf, 1)[0])
        return float(buf[-1] - buf[-2])

    def __len__(self) -> int:
        return len(self._scores)


def daily_outlook(personal: PersonalProfile, target: date) -> DailyOutlook:
    earth = build_earth_profile(target, birth_date=personal.birth_date)
    combined = synthesize(personal, earth)
    return DailyOutlook(
        target=earth.target,
        day_of_week=earth.day.day_of_week,
        perfect_day_score=combined.perfect_day_score,
        confidence_score=combined.confidence_score,
        overall_alignment=combined.overall_alignment,
        energy_type=combined.energy_type,
        critical_cycles=earth.biorhythm.critical_count(),
    )


def forecast(
    personal: PersonalProfile,
    start: date,
    days: int = config.FORECAST_DAYS,
    min_score: int = config.FORECAST_MIN_SCORE,
) -> Forecast:
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")

    outlooks = []
    series = ScoreSeries()
    for offset in range(days):
        outlook = daily_outlook(personal, start + timedelta(days=offset))
        outlooks.append(outlook)
        series.push(outlook.perfect_day_score)

    mean_score, slope = series.mean(), series.slope()
    best = tuple(o.target for o in outlooks if o.perfect_day_score >= min_score)
    caution = tuple(o.target for o in outlooks if o.critical_cycles >= 2)

    if outlooks:
        logger.info(
            f"Forecast {start} +{days}d | mean {mean_score:.1f} | "
            f"slope {slope if slope is None else f'{slope:+.2f}'} | "
            f"{len(best)} strong, {len(caution)} caution"
        )

    return Forecast(
        start=start,
        days=tuple(outlooks),
        mean_score=mean_score,
        slope=slope,
        best_days=best,
        caution_days=caution,
    )
