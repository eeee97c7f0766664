"""
Pydantic data models and schemas for TalentMatch.

This module provides all data models used throughout the application,
including stored documents, embedded models and match results.
"""

# Base models
from .base import BaseDocument, EmbeddedModel, PyObjectId

# Candidate models
from .candidate import (
    AdditionalLink,
    Candidate,
    Certification,
    Education,
    Location,
    ResumeFile,
    WorkExperience,
)

# Job models
from .job import Job, ScoringWeights

# Match models
from .match import IndividualScores, MatchResult

__all__ = [
    # Base
    "BaseDocument",
    "EmbeddedModel",
    "PyObjectId",
    # Candidate
    "AdditionalLink",
    "Candidate",
    "Certification",
    "Education",
    "Location",
    "ResumeFile",
    "WorkExperience",
    # Job
    "Job",
    "ScoringWeights",
    # Match
    "IndividualScores",
    "MatchResult",
]
