"""
Application-wide constants for TalentMatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Fuzzy Matching Constants
# =============================================================================

# Similarity returned when one string contains the other
CONTAINMENT_SIMILARITY: Final[float] = 0.9

# Per-call similarity thresholds
DEFAULT_FUZZY_THRESHOLD: Final[float] = 0.6
SKILL_FUZZY_THRESHOLD: Final[float] = 0.7
DESCRIPTION_SKILL_THRESHOLD: Final[float] = 0.3
TITLE_FUZZY_THRESHOLD: Final[float] = 0.2
LOCATION_FUZZY_THRESHOLD: Final[float] = 0.5


# =============================================================================
# Scoring Constants
# =============================================================================

# Points per skill / title in the skills and title accumulators
EXACT_MATCH_POINTS: Final[float] = 3.0
FUZZY_MATCH_MULTIPLIER: Final[float] = 2.0

# Default weights for candidate -> jobs ranking
DEFAULT_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skills": 25.0,
    "title_vs_description": 25.0,
    "years_of_experience": 30.0,
    "location": 20.0,
}

# Default value of each recruiter preference slider (job -> candidates)
DEFAULT_PREFERENCE_WEIGHT: Final[float] = 50.0

# Weights closer than this are considered equal
WEIGHT_EQUALITY_TOLERANCE: Final[float] = 0.01

# Years-of-experience step function: (fraction of required years, score fraction)
EXPERIENCE_BUCKETS: Final[tuple[tuple[float, float, str], ...]] = (
    (1.0, 1.00, "meets requirement"),
    (0.8, 0.85, "close to requirement"),
    (0.6, 0.70, "partial match"),
    (0.4, 0.55, "basic match"),
)
EXPERIENCE_FLOOR: Final[tuple[float, str]] = (0.40, "below requirement")

# Bare years at or below this are not treated as years
MIN_BARE_YEAR: Final[int] = 1900
DAYS_PER_YEAR: Final[float] = 365.25

# Location score fractions
LOCATION_CITY_SCORE: Final[float] = 1.0
LOCATION_STATE_SCORE: Final[float] = 0.8
LOCATION_COUNTRY_SCORE: Final[float] = 0.6
LOCATION_FUZZY_CITY_SCALE: Final[float] = 0.8
LOCATION_FUZZY_STATE_SCALE: Final[float] = 0.6

# Score thresholds (percentages)
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 85,
    "good": 70,
    "fair": 50,
}


# =============================================================================
# Ranking Constants
# =============================================================================

DEFAULT_RESULT_LIMIT: Final[int] = 10


# =============================================================================
# Enums
# =============================================================================


class JobStatus(str, Enum):
    """Status of a job posting."""

    NEW = "New"
    IN_PROGRESS = "In Progress"
    HALTED = "Halted"
    WITHDRAWN = "Withdrawn"
    CLIENT_PROCESS = "Ongoing client process"
    COMPLETED = "Completed"


class MatchScoreLevel(Enum):
    """Categorical levels for match scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a 0-100 score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    JOBS_RANKED = "jobs_ranked"
    CANDIDATES_RANKED = "candidates_ranked"
