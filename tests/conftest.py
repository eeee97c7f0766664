"""
Shared test fixtures for the TalentMatch test suite.

Sets environment variables before any talentmatch imports so settings and
logging pick up the test configuration, then provides factory fixtures for
candidates and jobs.
"""

import os

# === Set environment BEFORE any talentmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "talentmatch_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, Optional

import pytest
from bson import ObjectId

from talentmatch.core.matching import MatchingEngine, Ranker
from talentmatch.data.models import Candidate, Job, ScoringWeights


# ---------------------------------------------------------------------------
# Factory fixtures for Pydantic document models
# ---------------------------------------------------------------------------


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build Candidate models from raw fields."""

    def _factory(
        skills: Optional[list[Any]] = None,
        experience: Optional[list[dict[str, Any]]] = None,
        preferred_locations: Optional[list[dict[str, Any]]] = None,
        name: str = "Asha Rao",
        email: str = "asha.rao@example.com",
        with_id: bool = True,
        **kwargs,
    ) -> Candidate:
        data: dict[str, Any] = {
            "name": name,
            "email": email,
            "skills": skills or [],
            "experience": experience or [],
            "preferredLocations": preferred_locations or [],
        }
        if with_id:
            data["_id"] = ObjectId()
        data.update(kwargs)
        return Candidate.model_validate(data)

    return _factory


@pytest.fixture
def make_job():
    """Factory that returns a callable to build Job models from raw fields."""

    def _factory(
        title: str = "Architect",
        skills: Optional[list[Any]] = None,
        description: Optional[str] = None,
        experience: Optional[int] = None,
        location: Optional[str] = None,
        organization: str = "Studio Nine",
        with_id: bool = True,
        **kwargs,
    ) -> Job:
        data: dict[str, Any] = {
            "title": title,
            "organization": organization,
            "skills": skills or [],
            "description": description,
            "experience": experience,
            "location": location,
        }
        if with_id:
            data["_id"] = ObjectId()
        data.update(kwargs)
        return Job.model_validate(data)

    return _factory


@pytest.fixture
def full_candidate(make_candidate):
    """Candidate with data for every scoring dimension."""
    return make_candidate(
        skills=["AutoCAD", "SketchUp"],
        experience=[
            {"company": "Studio One", "position": "Architect", "start": "2018", "end": "2022"},
        ],
        preferred_locations=[{"city": "Mumbai"}, {"city": "Bangalore"}],
    )


@pytest.fixture
def full_job(make_job):
    """Job with data for every scoring dimension."""
    return make_job(
        skills=["autocad", "Enscape"],
        description="Looking for an architect with strong design skills",
        experience=4,
        location="Bangalore, India",
    )


@pytest.fixture
def equal_weights():
    return ScoringWeights(
        skills=25, title_vs_description=25, years_of_experience=25, location=25
    )


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine():
    return MatchingEngine()


@pytest.fixture
def ranker():
    return Ranker()
