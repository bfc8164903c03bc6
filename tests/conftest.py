# tests/conftest.py

"""
Pytest Fixtures - Shared test configuration and data for the scoring core and API

Redis caching is switched off before the application is imported so tests
never depend on a running Redis. Each API test module gets fresh in-memory
repositories through dependency overrides.
"""

import os

os.environ["CACHE_ENABLED"] = "false"
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from multievent.core.dependencies import (
    get_achievement_repository,
    get_performance_repository,
)
from multievent.main import app
from multievent.models.enumerations import EventType
from multievent.repositories.achievement_repository import AchievementRepository
from multievent.repositories.performance_repository import PerformanceRepository
from multievent.scoring.engine import ScoringEngine
from multievent.services.achievement_service import AchievementService


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """TestClient over the app with fresh in-memory repositories per module."""
    performance_repo = PerformanceRepository()
    achievement_repo = AchievementRepository()
    app.dependency_overrides[get_performance_repository] = lambda: performance_repo
    app.dependency_overrides[get_achievement_repository] = lambda: achievement_repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def performance_repo():
    return PerformanceRepository()


@pytest.fixture
def achievement_repo():
    return AchievementRepository()


@pytest.fixture
def achievement_service(performance_repo, achievement_repo):
    return AchievementService(performance_repo, achievement_repo)


@pytest.fixture
def engine():
    return ScoringEngine()


# =============================================================================
# PERFORMANCE DATA FIXTURES
# =============================================================================

@pytest.fixture
def decathlon_results():
    """A complete decathlon as typed (metric)."""
    return {
        "100m": "10.45",
        "Long Jump": "7.50",
        "Shot Put": "16.20",
        "High Jump": "2.10",
        "400m": "48.25",
        "110m Hurdles": "13.80",
        "Discus": "48.50",
        "Pole Vault": "5.20",
        "Javelin": "65.40",
        "1500m": "4:25.50",
    }


@pytest.fixture
def heptathlon_event_results():
    """Heptathlon EventResult dicts with points already filled in."""
    return [
        {"name": "100m Hurdles", "result": "13.24", "points": 1000, "type": "time", "unit": "seconds", "day": 1},
        {"name": "High Jump", "result": "1.85", "points": 1041, "type": "measurement", "unit": "meters", "day": 1},
        {"name": "Shot Put", "result": "14.50", "points": 828, "type": "measurement", "unit": "meters", "day": 1},
        {"name": "200m", "result": "23.45", "points": 1043, "type": "time", "unit": "seconds", "day": 1},
        {"name": "Long Jump", "result": "6.50", "points": 1007, "type": "measurement", "unit": "meters", "day": 2},
        {"name": "Javelin", "result": "55.20", "points": 964, "type": "measurement", "unit": "meters", "day": 2},
        {"name": "800m", "result": "2:10.50", "points": 958, "type": "time", "unit": "seconds", "day": 2},
    ]


@pytest.fixture
def valid_performance_data(heptathlon_event_results):
    """Valid heptathlon performance body for POST /performances."""
    return {
        "event_type": EventType.HEPTATHLON.value,
        "event_results": heptathlon_event_results,
        "label": "Spring Open",
    }
