"""
Job routes: candidates that suit a job.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from starlette.concurrency import run_in_threadpool

from talentmatch.api.dependencies import (
    get_app_settings,
    get_candidate_repo,
    get_job_repo,
    get_ranker,
    resolve_limit,
)
from talentmatch.api.schemas import MatchPreferences, SuitableCandidatesRequest
from talentmatch.core.matching import Ranker
from talentmatch.data.repositories import CandidateRepository, JobRepository
from talentmatch.utils.config import AppSettings
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.api_route("/{job_id}/suitable-candidates", methods=["GET", "POST"])
async def find_suitable_candidates(
    job_id: str,
    limit: Optional[str] = Query(default=None),
    body: Optional[SuitableCandidatesRequest] = Body(default=None),
    candidates: CandidateRepository = Depends(get_candidate_repo),
    jobs: JobRepository = Depends(get_job_repo),
    ranker: Ranker = Depends(get_ranker),
    settings: AppSettings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Rank every candidate for one job with the recruiter's preferences."""
    preferences = (body.preferences if body else None) or MatchPreferences()

    try:
        job = await jobs.get_by_id_async(job_id)
        if job is None:
            raise HTTPException(status_code=404, detail="Job not found")

        all_candidates = await candidates.get_all_async()
        result_limit = resolve_limit(limit, settings.matching)
        logger.info(
            f"Ranking {len(all_candidates)} candidates for job {job_id} (limit {result_limit})"
        )

        ranking = await run_in_threadpool(
            ranker.rank_candidates_for_job,
            job,
            all_candidates,
            preferences.to_weights(),
            result_limit,
            preferences.to_response(),
        )

        return {
            "job": job.public_projection(),
            "suitableCandidates": ranking.to_list(),
            "totalCandidates": ranking.total_considered,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error finding suitable candidates for job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to find suitable candidates")
