"""
Candidate repository for TalentMatch.

Provides read access to candidate documents.
"""

from typing import Optional

from talentmatch.data.models.candidate import Candidate

from .base import BaseRepository


class CandidateRepository(BaseRepository[Candidate]):
    """Repository for candidate document reads."""

    collection_name = "candidates"
    model_class = Candidate


# Singleton instance
_candidate_repository: Optional[CandidateRepository] = None


def get_candidate_repository() -> CandidateRepository:
    """Get the candidate repository singleton instance."""
    global _candidate_repository
    if _candidate_repository is None:
        _candidate_repository = CandidateRepository()
    return _candidate_repository
