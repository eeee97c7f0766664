"""
Request schemas for the matching endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from talentmatch.data.models import ScoringWeights
from talentmatch.utils.constants import DEFAULT_PREFERENCE_WEIGHT


class MatchPreferences(BaseModel):
    """Recruiter weighting of the four match dimensions, each 0-100."""

    model_config = ConfigDict(populate_by_name=True)

    skills_vs_description: float = Field(
        default=DEFAULT_PREFERENCE_WEIGHT, ge=0, le=100, alias="skillsVsDescription"
    )
    experience_vs_description: float = Field(
        default=DEFAULT_PREFERENCE_WEIGHT, ge=0, le=100, alias="experienceVsDescription"
    )
    years_of_experience: float = Field(
        default=DEFAULT_PREFERENCE_WEIGHT, ge=0, le=100, alias="yearsOfExperience"
    )
    location: float = Field(default=DEFAULT_PREFERENCE_WEIGHT, ge=0, le=100)

    def to_weights(self) -> ScoringWeights:
        """Convert slider values to scoring weights."""
        return ScoringWeights(
            skills=self.skills_vs_description,
            title_vs_description=self.experience_vs_description,
            years_of_experience=self.years_of_experience,
            location=self.location,
        )

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SuitableCandidatesRequest(BaseModel):
    """Optional body of the suitable-candidates endpoint."""

    preferences: Optional[MatchPreferences] = None
