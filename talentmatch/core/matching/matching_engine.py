"""
Candidate-Job matching engine.

Scores a candidate against a job on four independent dimensions:
skills overlap, past titles against the job description, years of
experience and preferred location. Each dimension only counts when both
sides carry the data it compares, so sparse profiles are ranked among
comparable peers instead of being penalized.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as date_parser

from talentmatch.data.models import (
    Candidate,
    IndividualScores,
    Job,
    MatchResult,
    ScoringWeights,
    WorkExperience,
)
from talentmatch.utils.constants import (
    DAYS_PER_YEAR,
    DESCRIPTION_SKILL_THRESHOLD,
    EXACT_MATCH_POINTS,
    EXPERIENCE_BUCKETS,
    EXPERIENCE_FLOOR,
    FUZZY_MATCH_MULTIPLIER,
    LOCATION_CITY_SCORE,
    LOCATION_COUNTRY_SCORE,
    LOCATION_FUZZY_CITY_SCALE,
    LOCATION_FUZZY_STATE_SCALE,
    LOCATION_FUZZY_THRESHOLD,
    LOCATION_STATE_SCORE,
    MIN_BARE_YEAR,
    SKILL_FUZZY_THRESHOLD,
    TITLE_FUZZY_THRESHOLD,
    MatchScoreLevel,
)

from .string_similarity import similarity

_BARE_YEAR = re.compile(r"\d{4}")
_DATE_DEFAULT = datetime(2000, 1, 1)


@dataclass
class DimensionScore:
    """Outcome of one active dimension."""

    fraction: float  # 0-1 share of the dimension weight earned
    label: str  # left-hand side of the match detail line
    matched: list[str] = field(default_factory=list)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


# -----------------------------------------------------------------------------
# Experience duration parsing
# -----------------------------------------------------------------------------


def parse_bare_year(value: Optional[str]) -> Optional[int]:
    """Return the year for strings like "2018", None for anything else."""
    if not value or not _BARE_YEAR.fullmatch(value.strip()):
        return None
    year = int(value.strip())
    return year if year > MIN_BARE_YEAR else None


def parse_calendar_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a free-form date string; missing parts default to January 1st."""
    if not value or not value.strip():
        return None
    try:
        parsed = date_parser.parse(value, default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def experience_duration_years(start: Optional[str], end: Optional[str]) -> Optional[float]:
    """
    Length of one experience entry in years.

    Bare years are subtracted directly; anything else is read as calendar
    dates. Returns None when either bound is missing or unparseable.
    """
    if not start or not end:
        return None

    start_year = parse_bare_year(start)
    end_year = parse_bare_year(end)
    if start_year is not None and end_year is not None:
        return float(end_year - start_year)

    start_date = parse_calendar_date(start)
    end_date = parse_calendar_date(end)
    if start_date is None or end_date is None:
        return None

    days = (end_date - start_date).total_seconds() / 86400
    return days / DAYS_PER_YEAR


def total_experience_years(entries: list[WorkExperience]) -> tuple[float, int]:
    """
    Sum durations across experience entries.

    Returns:
        Tuple of (total years, number of entries that could be measured)
    """
    total = 0.0
    valid = 0
    for entry in entries:
        years = experience_duration_years(entry.start, entry.end)
        if years is None:
            continue
        total += years
        valid += 1
    return total, valid


# -----------------------------------------------------------------------------
# Engine
# -----------------------------------------------------------------------------


class MatchingEngine:
    """
    Engine for scoring candidates against jobs.

    Uses a multi-factor approach:
    - Skills overlap (explicit job skills, or the description as fallback)
    - Past position titles against the job description
    - Total years of experience against the requirement (step function)
    - Preferred locations against the job location (best of)
    """

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        average_when_equal: bool = False,
    ):
        """
        Initialize the matching engine.

        Args:
            weights: Optional custom scoring weights
            average_when_equal: Score as the plain mean of the four
                dimension scores when all weights are equal
        """
        self.weights = weights or ScoringWeights.from_defaults()
        self.average_when_equal = average_when_equal

    def score(self, candidate: Candidate, job: Job) -> MatchResult:
        """
        Match a candidate against a job.

        Args:
            candidate: Candidate profile
            job: Job posting

        Returns:
            MatchResult with the score, details and per-dimension scores

        Raises:
            TypeError: If either argument is not the expected model
        """
        if not isinstance(candidate, Candidate):
            raise TypeError(f"Expected Candidate, got {type(candidate).__name__}")
        if not isinstance(job, Job):
            raise TypeError(f"Expected Job, got {type(job).__name__}")

        dimensions = (
            ("skills", self.weights.skills, self._score_skills(candidate, job)),
            ("experience", self.weights.title_vs_description, self._score_titles(candidate, job)),
            ("years_of_exp", self.weights.years_of_experience, self._score_years(candidate, job)),
            ("location", self.weights.location, self._score_location(candidate, job)),
        )

        raw_score = 0.0
        total_possible = 0.0
        details: list[str] = []
        individual = IndividualScores()
        matched_skills: list[str] = []

        for name, weight, dimension in dimensions:
            if dimension is None:
                continue
            points = dimension.fraction * weight
            raw_score += points
            total_possible += weight
            setattr(individual, name, dimension.fraction * 100)
            details.append(f"{dimension.label} = {points:.1f}/{weight:g}")
            if name == "skills":
                matched_skills = dimension.matched

        final_score = 0
        if total_possible > 0:
            if self.average_when_equal and self.weights.all_equal:
                final_score = round_half_up(individual.mean)
            else:
                final_score = round_half_up(raw_score / total_possible * 100)
        final_score = max(0, min(100, final_score))

        return MatchResult(
            score=final_score,
            raw_score=raw_score,
            total_possible=total_possible,
            match_details=details,
            individual_scores=individual,
            matched_skills=matched_skills,
            score_level=MatchScoreLevel.from_score(final_score),
        )

    def _score_skills(self, candidate: Candidate, job: Job) -> Optional[DimensionScore]:
        """Match candidate skills against job skills, or the description."""
        if not candidate.skills:
            return None

        if job.skills:
            job_skills = {s.strip().casefold() for s in job.skills}
            against_description = False
        elif job.description:
            description = job.description.casefold()
            against_description = True
        else:
            return None

        accumulated = 0.0
        matched: list[str] = []

        for skill in candidate.skills:
            normalized = skill.strip().casefold()
            if against_description:
                if normalized in description:
                    points = EXACT_MATCH_POINTS
                else:
                    fuzzy = similarity(skill, job.description, DESCRIPTION_SKILL_THRESHOLD)
                    points = fuzzy * FUZZY_MATCH_MULTIPLIER
            elif normalized in job_skills:
                points = EXACT_MATCH_POINTS
            else:
                best = max(
                    (similarity(skill, job_skill, SKILL_FUZZY_THRESHOLD) for job_skill in job.skills),
                    default=0.0,
                )
                points = best * FUZZY_MATCH_MULTIPLIER

            if points > 0:
                accumulated += points
                matched.append(skill)

        total = len(candidate.skills)
        fraction = min(1.0, accumulated / total)

        if against_description:
            label = f"Skills vs Description: {len(matched)}/{total} matched"
        else:
            label = f"Skills Match: {len(matched)}/{total} matched ({', '.join(matched)})"

        return DimensionScore(fraction=fraction, label=label, matched=matched)

    def _score_titles(self, candidate: Candidate, job: Job) -> Optional[DimensionScore]:
        """Match past position titles against the job description."""
        if not job.description or not candidate.experience:
            return None

        description = job.description.casefold()
        accumulated = 0.0
        matched: list[str] = []

        for entry in candidate.experience:
            if not entry.position:
                continue
            if entry.position.casefold() in description:
                points = EXACT_MATCH_POINTS
            else:
                fuzzy = similarity(entry.position, job.description, TITLE_FUZZY_THRESHOLD)
                points = fuzzy * FUZZY_MATCH_MULTIPLIER
            if points > 0:
                accumulated += points
                matched.append(entry.position)

        # Averaged over matched titles only, not all titles.
        fraction = min(1.0, accumulated / len(matched)) if matched else 0.0

        return DimensionScore(
            fraction=fraction,
            label=f"Experience Titles vs Description: {len(matched)} roles matched",
            matched=matched,
        )

    def _score_years(self, candidate: Candidate, job: Job) -> Optional[DimensionScore]:
        """Bucket total years of experience against the requirement."""
        if job.experience is None or not candidate.experience:
            return None

        total_years, valid_entries = total_experience_years(candidate.experience)
        if valid_entries == 0:
            return None

        required = job.experience
        fraction, bucket = EXPERIENCE_FLOOR
        for ratio, bucket_fraction, bucket_label in EXPERIENCE_BUCKETS:
            if total_years >= required * ratio:
                fraction, bucket = bucket_fraction, bucket_label
                break

        return DimensionScore(
            fraction=fraction,
            label=f"Years Experience: {total_years:.1f} years ({bucket}: {required})",
        )

    def _score_location(self, candidate: Candidate, job: Job) -> Optional[DimensionScore]:
        """Best match of any preferred location against the job location."""
        preferred = [loc for loc in candidate.preferred_locations if not loc.is_empty]
        if not job.location or not preferred:
            return None

        job_location = job.location.casefold()
        best_fraction = 0.0
        best_label = "no match"

        for loc in preferred:
            if loc.city and loc.city.casefold() in job_location:
                fraction, label = LOCATION_CITY_SCORE, f"City: {loc.city}"
            elif loc.state and loc.state.casefold() in job_location:
                fraction, label = LOCATION_STATE_SCORE, f"State: {loc.state}"
            elif loc.country and loc.country.casefold() in job_location:
                fraction, label = LOCATION_COUNTRY_SCORE, f"Country: {loc.country}"
            else:
                fraction, label = 0.0, ""
                if loc.city:
                    fuzzy = similarity(loc.city, job.location, LOCATION_FUZZY_THRESHOLD)
                    fraction = fuzzy * LOCATION_FUZZY_CITY_SCALE
                    label = f"City (fuzzy): {loc.city}"
                if fraction == 0 and loc.state:
                    fuzzy = similarity(loc.state, job.location, LOCATION_FUZZY_THRESHOLD)
                    fraction = fuzzy * LOCATION_FUZZY_STATE_SCALE
                    label = f"State (fuzzy): {loc.state}"

            if fraction > best_fraction:
                best_fraction, best_label = fraction, label

        return DimensionScore(fraction=best_fraction, label=f"Location: {best_label}")

