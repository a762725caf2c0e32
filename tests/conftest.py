from __future__ import annotations

from datetime import date

import pytest

from config import load_settings

from src.academic_records.academic_records.container import build_container


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 10, 16)


@pytest.fixture
def settings() -> dict:
    return load_settings("config.testing")


@pytest.fixture
def container(settings):
    return build_container(settings=settings)


@pytest.fixture
def seeded_container(settings):
    return build_container(settings={**settings, "AUTO_SEED": True})
