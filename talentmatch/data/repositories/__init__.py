"""
Database repositories for TalentMatch data access.

This module provides repository classes for the collections the matching
endpoints read from.
"""

# Base repository
from .base import BaseRepository

# Entity repositories
from .candidate_repository import CandidateRepository, get_candidate_repository
from .job_repository import JobRepository, get_job_repository

__all__ = [
    # Base
    "BaseRepository",
    # Candidate
    "CandidateRepository",
    "get_candidate_repository",
    # Job
    "JobRepository",
    "get_job_repository",
]
