"""
Job posting data models for TalentMatch.

Defines the schema for job postings and the scoring weights used when
matching them against candidates.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from talentmatch.utils.constants import (
    DEFAULT_SCORING_WEIGHTS,
    WEIGHT_EQUALITY_TOLERANCE,
    JobStatus,
)

from .base import BaseDocument, EmbeddedModel, blank_as_none, none_as_empty_list


class ScoringWeights(EmbeddedModel):
    """
    Per-dimension weights for candidate matching.

    Weights are relative: they need not sum to 100 because the final score
    is normalized by the weight of the dimensions that were compared.
    """

    skills: float = Field(default=25.0, ge=0)
    title_vs_description: float = Field(default=25.0, ge=0, alias="titleVsDescription")
    years_of_experience: float = Field(default=30.0, ge=0, alias="yearsOfExperience")
    location: float = Field(default=20.0, ge=0)

    @classmethod
    def from_defaults(cls) -> "ScoringWeights":
        """Create scoring weights from default constants."""
        return cls(**DEFAULT_SCORING_WEIGHTS)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "skills": self.skills,
            "title_vs_description": self.title_vs_description,
            "years_of_experience": self.years_of_experience,
            "location": self.location,
        }

    @property
    def all_equal(self) -> bool:
        """True when every dimension carries the same weight."""
        values = list(self.to_dict().values())
        return all(abs(v - values[0]) < WEIGHT_EQUALITY_TOLERANCE for v in values)


class Job(BaseDocument):
    """
    Main job posting model.

    ``skills`` holds skill names; the repository resolves stored skill
    references before validation.
    """

    # Basic Information
    job_id: Optional[str] = Field(default=None, alias="jobId")
    title: Optional[str] = None
    organization: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None

    # Location
    location: Optional[str] = None
    remote: bool = False

    # Requirements
    experience: Optional[int] = Field(default=None, ge=0)
    skills: list[str] = Field(default_factory=list)

    # Compensation
    ctc_min: Optional[float] = Field(default=None, ge=0, alias="ctcMin")
    ctc_max: Optional[float] = Field(default=None, ge=0, alias="ctcMax")

    # Status
    status: JobStatus = JobStatus.NEW

    @field_validator("description", "location", mode="before")
    @classmethod
    def blank_text(cls, v: Any) -> Any:
        return blank_as_none(v)

    @field_validator("remote", mode="before")
    @classmethod
    def null_remote(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def missing_status(cls, v: Any) -> Any:
        return JobStatus.NEW if blank_as_none(v) is None else v

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v: Any) -> Any:
        """Accept plain names or populated ``{"name": ...}`` skill documents."""
        v = none_as_empty_list(v)
        if not isinstance(v, list):
            return v
        skills = []
        for item in v:
            name = item.get("name") if isinstance(item, dict) else item
            if isinstance(name, str) and name.strip():
                skills.append(name)
        return skills

    def public_projection(self) -> dict[str, Any]:
        """Job fields returned alongside match results."""
        return {
            "_id": self.id_str,
            "jobId": self.job_id,
            "title": self.title,
            "organization": self.organization,
            "location": self.location,
            "experience": self.experience,
            "industry": self.industry,
            "description": self.description,
            "remote": self.remote,
            "ctcMin": self.ctc_min,
            "ctcMax": self.ctc_max,
        }
