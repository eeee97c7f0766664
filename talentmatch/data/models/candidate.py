"""
Candidate data models for TalentMatch.

Mirrors the stored candidate documents: identity, preferred locations,
work history and skills, plus the profile fields returned to recruiters.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import BaseDocument, EmbeddedModel, blank_as_none, none_as_empty_list


class Location(EmbeddedModel):
    """A city/state/country triple; any part may be missing."""

    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    @field_validator("city", "state", "country", mode="before")
    @classmethod
    def blank_parts(cls, v: Any) -> Any:
        return blank_as_none(v)

    @property
    def is_empty(self) -> bool:
        return not (self.city or self.state or self.country)

    @property
    def display_string(self) -> str:
        """Get formatted location string."""
        parts = [p for p in [self.city, self.state, self.country] if p]
        return ", ".join(parts) if parts else "Location not specified"


class WorkExperience(EmbeddedModel):
    """
    A single work history entry.

    ``start`` and ``end`` are kept as entered: either bare years ("2018")
    or calendar dates ("2020-01-01", "Jan 2020").
    """

    company: Optional[str] = None
    position: Optional[str] = None
    role: Optional[str] = None
    ctc: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @field_validator("ctc", "start", "end", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Any:
        """Years and salaries are sometimes stored as numbers."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return blank_as_none(v)


class Education(EmbeddedModel):
    """Represents a single education entry."""

    clg: Optional[str] = None
    course: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


class Certification(EmbeddedModel):
    """Represents a professional certification."""

    name: Optional[str] = None
    organization: Optional[str] = None
    link: Optional[str] = None


class AdditionalLink(EmbeddedModel):
    """A named profile link (portfolio, GitHub, ...)."""

    name: Optional[str] = None
    link: Optional[str] = None


class ResumeFile(EmbeddedModel):
    """Metadata of the uploaded resume file."""

    url: Optional[str] = None
    public_id: Optional[str] = Field(default=None, alias="publicId")
    file_name: Optional[str] = Field(default=None, alias="fileName")
    file_size: Optional[int] = Field(default=None, alias="fileSize")
    uploaded_at: Optional[datetime] = Field(default=None, alias="uploadedAt")


class Candidate(BaseDocument):
    """
    Main candidate model.

    Only ``skills``, ``experience`` and ``preferred_locations`` take part in
    matching; the rest is carried through to API responses.
    """

    # Identity
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    # Locations
    current_location: Optional[Location] = Field(default=None, alias="currentLocation")
    preferred_locations: list[Location] = Field(default_factory=list, alias="preferredLocations")

    # Matching inputs
    experience: list[WorkExperience] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)

    # Profile
    education: list[Education] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    linkedin: Optional[str] = None
    x: Optional[str] = None
    additional_links: list[AdditionalLink] = Field(default_factory=list, alias="additionalLinks")
    resume: Optional[ResumeFile] = None

    @field_validator(
        "preferred_locations",
        "experience",
        "education",
        "certifications",
        "additional_links",
        mode="before",
    )
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        return none_as_empty_list(v)

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

    @property
    def has_resume(self) -> bool:
        return bool(self.resume and self.resume.url)

    def summary_projection(self) -> dict[str, Any]:
        """Candidate header of the suitable-jobs response."""
        return {
            "_id": self.id_str,
            "name": self.name,
            "email": self.email,
            "skills": list(self.skills),
            "experience": [e.model_dump(by_alias=True) for e in self.experience],
            "currentLocation": self.current_location.model_dump() if self.current_location else None,
            "preferredLocations": [loc.model_dump() for loc in self.preferred_locations],
        }

    def public_projection(self) -> dict[str, Any]:
        """Candidate entry of the suitable-candidates response."""
        data = self.summary_projection()
        data["phone"] = self.phone
        data["resume"] = (
            self.resume.model_dump(by_alias=True, mode="json") if self.has_resume else None
        )
        if self.education:
            data["education"] = [e.model_dump() for e in self.education]
        if self.certifications:
            data["certifications"] = [c.model_dump() for c in self.certifications]
        if self.linkedin:
            data["linkedin"] = self.linkedin
        if self.x:
            data["x"] = self.x
        if self.additional_links:
            data["additionalLinks"] = [link.model_dump() for link in self.additional_links]
        return data
