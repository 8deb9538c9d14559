from datetime import date, datetime

import pytest

from alignment.engine import calculate_energy_reading, synthesize_and_explain
from alignment.errors import InvalidBirthDateError
from alignment.models import Birthplace, to_dict
from alignment.synthesis import synthesize


def test_synthesize_and_explain(personal, earth):
    explanation = synthesize_and_explain(personal, earth)
    assert explanation.combined == synthesize(personal, earth)
    assert explanation.insights.perfect_day_score == explanation.combined.perfect_day_score
    assert explanation.insights.confidence_score == explanation.combined.confidence_score


def test_calculate_energy_reading_scenario():
    reading = calculate_energy_reading("1990-05-15", date(2026, 1, 21))
    assert reading.combined.perfect_day_score == 72
    assert reading.combined.confidence_score == 57
    assert reading.earth.biorhythm.available
    assert reading.personal.personal_year_number == 3
    assert reading.insights.meetings.time == "09:00–11:00"


def test_reading_with_datetime_target_and_birthplace():
    place = Birthplace(latitude=40.71, longitude=-74.01, city="New York")
    reading = calculate_energy_reading(date(1990, 5, 15), datetime(2026, 1, 21, 9, 0), place, "Alex")
    assert reading.earth.hour == 9
    assert reading.earth.target == date(2026, 1, 21)
    assert reading.personal.astrology.location_based


def test_reading_defaults_to_today():
    reading = calculate_energy_reading("1990-05-15")
    assert reading.earth.target == date.today()


def test_reading_rejects_bad_birth_date():
    with pytest.raises(InvalidBirthDateError):
        calculate_energy_reading("", date(2026, 1, 21))


def test_reading_serialises_to_plain_data():
    data = to_dict(calculate_energy_reading("1990-05-15", date(2026, 1, 21)))
    assert data["earth"]["target"] == "2026-01-21"
    assert data["personal"]["birth_element"] == "Metal"
    assert data["earth"]["day"]["ratings"]["deals"]["score"] == 95
    assert data["combined"]["components"]["transit"] == 65.0
