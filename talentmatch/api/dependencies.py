"""
FastAPI dependency providers.

Routes receive repositories, the ranker and settings through these
functions so tests can swap them with ``app.dependency_overrides``.
"""

from typing import Optional

from talentmatch.core.matching import Ranker
from talentmatch.data.database import DatabaseManager, get_database_manager
from talentmatch.data.repositories import (
    CandidateRepository,
    JobRepository,
    get_candidate_repository,
    get_job_repository,
)
from talentmatch.utils.config import AppSettings, MatchingSettings, get_settings


def get_app_settings() -> AppSettings:
    return get_settings()


def get_db_manager() -> DatabaseManager:
    return get_database_manager()


def get_candidate_repo() -> CandidateRepository:
    return get_candidate_repository()


def get_job_repo() -> JobRepository:
    return get_job_repository()


def get_ranker() -> Ranker:
    return Ranker()


def resolve_limit(raw: Optional[str], matching: MatchingSettings) -> int:
    """
    Interpret the ``limit`` query parameter.

    Missing, non-numeric and non-positive values fall back to the default;
    larger values are clamped to the configured maximum.
    """
    try:
        limit = int(raw) if raw is not None else 0
    except ValueError:
        limit = 0
    if limit <= 0:
        limit = matching.default_limit
    return min(limit, matching.max_limit)
