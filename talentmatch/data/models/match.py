"""
Match and scoring data models for TalentMatch.

Match results are computed per request and never stored.
"""

from typing import Any

from pydantic import Field

from talentmatch.utils.constants import MatchScoreLevel

from .base import EmbeddedModel


class IndividualScores(EmbeddedModel):
    """Per-dimension scores as percentages (0-100); inactive dimensions stay 0."""

    skills: float = 0.0
    experience: float = 0.0
    years_of_exp: float = Field(default=0.0, alias="yearsOfExp")
    location: float = 0.0

    @property
    def mean(self) -> float:
        """Plain average of the four dimensions."""
        return (self.skills + self.experience + self.years_of_exp + self.location) / 4


class MatchResult(EmbeddedModel):
    """Score of one candidate against one job, with its explanation."""

    score: int = Field(default=0, ge=0, le=100)
    raw_score: float = Field(default=0.0, alias="rawScore")
    total_possible: float = Field(default=0.0, alias="totalPossible")
    match_details: list[str] = Field(default_factory=list, alias="matchDetails")
    individual_scores: IndividualScores = Field(
        default_factory=IndividualScores, alias="individualScores"
    )
    matched_skills: list[str] = Field(default_factory=list, alias="matchedSkills")
    score_level: MatchScoreLevel = Field(default=MatchScoreLevel.POOR, alias="scoreLevel")

    @property
    def is_comparable(self) -> bool:
        """False when no dimension had data on both sides."""
        return self.total_possible > 0

    def to_response(self) -> dict[str, Any]:
        """camelCase dictionary for API and CLI output."""
        return self.model_dump(by_alias=True, mode="json")
