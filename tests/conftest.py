from datetime import date

import pytest

from alignment.profiles import build_earth_profile, build_personal_profile

BIRTH = date(1990, 5, 15)
TARGET = date(2026, 1, 21)  # a Wednesday


@pytest.fixture(scope="session")
def personal():
    return build_personal_profile(BIRTH, today=TARGET)


@pytest.fixture(scope="session")
def earth():
    return build_earth_profile(TARGET, birth_date=BIRTH)


@pytest.fixture(scope="session")
def earth_without_birth():
    return build_earth_profile(TARGET)
