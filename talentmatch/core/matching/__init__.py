"""Candidate-job matching engine module."""

from .matching_engine import (
    MatchingEngine,
    experience_duration_years,
    total_experience_years,
)
from .ranker import RankedMatch, Ranker, RankingResult
from .string_similarity import levenshtein_distance, similarity

__all__ = [
    "MatchingEngine",
    "experience_duration_years",
    "total_experience_years",
    "RankedMatch",
    "Ranker",
    "RankingResult",
    "levenshtein_distance",
    "similarity",
]
