"""Shared pytest fixtures for all tests."""

import pytest

from job_planner.catalog.models import JobRecord
from job_planner.logging_config import reset_logging_config_cache


@pytest.fixture(autouse=True)
def set_test_environment(monkeypatch):
    """
    Automatically set ENVIRONMENT variable for all tests.

    Keeps log output predictable and clears the cached logging config so a
    test that writes config/logging.yaml does not leak into others.
    """
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("JOB_PLANNER_CATALOG", raising=False)
    reset_logging_config_cache()
    yield
    reset_logging_config_cache()


@pytest.fixture
def make_job():
    """
    Factory for job records.

    Returns a function building a fully populated record; individual tests
    override specific fields with keyword arguments (use None to drop one).
    """

    def _make_job(**overrides):
        data = {
            "title": "Senior Software Engineer",
            "description": "We are looking for a senior software engineer...",
            "company": {"display_name": "FooTech Inc"},
            "location": {
                "display_name": "Seattle, King County",
                "area": ["US", "Washington", "King County", "Seattle"],
            },
            "salary_min": 100000.0,
            "salary_max": 140000.0,
            "contract_time": "full_time",
            "created": "2024-04-20T08:15:00Z",
            "redirect_url": "https://www.adzuna.com/details/1",
            "adref": "abc123",
            "category": {"tag": "it-jobs", "label": "IT Jobs"},
            "latitude": 47.6062,
            "longitude": -122.3321,
            "id": "1",
            "salary_is_predicted": "0",
        }
        data.update(overrides)
        return JobRecord.from_dict(data)

    return _make_job


@pytest.fixture
def sample_jobs(make_job):
    """A small mixed catalog in a fixed order."""
    return [
        make_job(id="1"),
        make_job(
            id="2",
            title="Staff Accountant",
            company={"display_name": "Other Co"},
            location={"display_name": "Denver, Colorado", "area": ["US", "Colorado", "Denver"]},
            salary_min=65000.0,
            salary_max=72000.0,
            created="2024-04-12T16:40:00Z",
            category={"tag": "accounting-finance-jobs", "label": "Accounting & Finance Jobs"},
        ),
        make_job(
            id="3",
            title="Data Engineer",
            company={"display_name": "Northwind Technology"},
            location={"display_name": "London, UK", "area": ["UK", "London"]},
            salary_min=70000.0,
            salary_max=85000.0,
            contract_time="contract",
            created="2024-04-22T09:00:00Z",
        ),
        make_job(
            id="4",
            title="Part-time Barista",
            company={"display_name": "Bean There"},
            location={"display_name": "Portland, Oregon", "area": ["US", "Oregon", "Portland"]},
            salary_min=None,
            salary_max=None,
            contract_time=None,
            created="not a date",
            category={"tag": "hospitality-catering-jobs", "label": "Hospitality & Catering Jobs"},
        ),
    ]
