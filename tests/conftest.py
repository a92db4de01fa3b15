"""Shared pytest fixtures."""

import pytest

from jobboard.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT", "MATCH_LANGUAGE")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Unset configuration variables so the host environment cannot leak in."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def strong_profile():
    """Profile used by most matching tests."""
    return {
        "region_id": 1,
        "district_id": "district-uuid",
        "category_id": "cat-1",
        "expected_salary_min": 2000000,
        "experience_level": "no_experience",
    }


@pytest.fixture
def strong_job():
    """Job matching strong_profile on every compared field."""
    return {
        "id": "job-1",
        "region_id": 1,
        "district_id": "district-uuid",
        "category_id": "cat-1",
        "salary_min": 3000000,
    }
