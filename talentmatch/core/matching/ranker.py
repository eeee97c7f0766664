"""
Ranking of candidates for a job, or of jobs for a candidate.

The anchor is scored against every counterpart with the matching engine,
non-comparable pairs are dropped, and the rest is sorted by score
(input order breaks ties) and truncated.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from talentmatch.data.models import Candidate, Job, MatchResult, ScoringWeights
from talentmatch.utils.constants import DEFAULT_RESULT_LIMIT, AuditAction
from talentmatch.utils.logger import LoggerMixin, audit_log

from .matching_engine import MatchingEngine

Entity = Union[Candidate, Job]


@dataclass
class RankedMatch:
    """One counterpart together with its match result."""

    entity: Entity
    result: MatchResult
    preferences: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Public projection of the entity merged with its score breakdown."""
        data = self.entity.public_projection()
        response = self.result.to_response()
        data["score"] = response["score"]
        data["matchDetails"] = response["matchDetails"]
        data["individualScores"] = response["individualScores"]
        if self.preferences is not None:
            data["preferences"] = self.preferences
        return data


@dataclass
class RankingResult:
    """Top matches plus the number of comparable counterparts."""

    results: list[RankedMatch] = field(default_factory=list)
    total_considered: int = 0

    def to_list(self) -> list[dict[str, Any]]:
        return [match.to_dict() for match in self.results]


class Ranker(LoggerMixin):
    """Scores, filters, sorts and truncates match results."""

    def rank(
        self,
        anchor: Entity,
        counterparts: list[Entity],
        weights: Optional[ScoringWeights] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
        average_when_equal: bool = False,
    ) -> RankingResult:
        """
        Rank counterparts against an anchor.

        Args:
            anchor: The fixed candidate or job
            counterparts: Jobs (for a candidate anchor) or candidates (for a job anchor)
            weights: Scoring weights, defaults to the standard profile
            limit: Maximum number of results returned
            average_when_equal: See MatchingEngine

        Returns:
            RankingResult with at most ``limit`` matches, best first
        """
        if anchor is None:
            raise ValueError("Ranking requires an anchor candidate or job")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        engine = MatchingEngine(weights=weights, average_when_equal=average_when_equal)
        anchor_is_candidate = isinstance(anchor, Candidate)

        scored: list[RankedMatch] = []
        for other in counterparts:
            if anchor_is_candidate:
                result = engine.score(anchor, other)
            else:
                result = engine.score(other, anchor)
            if not result.is_comparable:
                continue
            scored.append(RankedMatch(entity=other, result=result))

        # sorted() is stable, so equal scores keep input order
        ranked = sorted(scored, key=lambda match: match.result.score, reverse=True)

        self.logger.debug(
            f"Ranked {len(scored)} of {len(counterparts)} counterparts "
            f"for {type(anchor).__name__} {anchor.id_str}"
        )
        return RankingResult(results=ranked[:limit], total_considered=len(scored))

    def rank_jobs_for_candidate(
        self,
        candidate: Candidate,
        jobs: list[Job],
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> RankingResult:
        """Rank jobs for a candidate with the default weight profile."""
        ranking = self.rank(candidate, jobs, limit=limit)
        audit_log(
            AuditAction.JOBS_RANKED.value,
            {
                "candidate_id": candidate.id_str,
                "jobs_considered": ranking.total_considered,
                "returned": len(ranking.results),
            },
        )
        return ranking

    def rank_candidates_for_job(
        self,
        job: Job,
        candidates: list[Candidate],
        weights: Optional[ScoringWeights] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
        preferences: Optional[dict[str, Any]] = None,
    ) -> RankingResult:
        """
        Rank candidates for a job with recruiter-chosen weights.

        Equal weights score as the plain mean of the four dimensions.
        ``preferences`` is echoed back on every result.
        """
        ranking = self.rank(
            job,
            candidates,
            weights=weights,
            limit=limit,
            average_when_equal=True,
        )
        for match in ranking.results:
            match.preferences = preferences
        audit_log(
            AuditAction.CANDIDATES_RANKED.value,
            {
                "job_id": job.id_str,
                "weights": (weights or ScoringWeights.from_defaults()).to_dict(),
                "candidates_considered": ranking.total_considered,
                "returned": len(ranking.results),
            },
        )
        return ranking
