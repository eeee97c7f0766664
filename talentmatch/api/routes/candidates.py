"""
Candidate routes: jobs that suit a candidate.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.concurrency import run_in_threadpool

from talentmatch.api.dependencies import (
    get_app_settings,
    get_candidate_repo,
    get_job_repo,
    get_ranker,
    resolve_limit,
)
from talentmatch.core.matching import Ranker
from talentmatch.data.repositories import CandidateRepository, JobRepository
from talentmatch.utils.config import AppSettings
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/candidates", tags=["candidates"])


@router.api_route("/{candidate_id}/suitable-jobs", methods=["GET", "POST"])
async def find_suitable_jobs(
    candidate_id: str,
    limit: Optional[str] = Query(default=None),
    candidates: CandidateRepository = Depends(get_candidate_repo),
    jobs: JobRepository = Depends(get_job_repo),
    ranker: Ranker = Depends(get_ranker),
    settings: AppSettings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Rank every job for one candidate with the default weights."""
    try:
        candidate = await candidates.get_by_id_async(candidate_id)
        if candidate is None:
            raise HTTPException(status_code=404, detail="Candidate not found")

        all_jobs = await jobs.get_all_async()
        result_limit = resolve_limit(limit, settings.matching)
        logger.info(
            f"Ranking {len(all_jobs)} jobs for candidate {candidate_id} (limit {result_limit})"
        )

        ranking = await run_in_threadpool(
            ranker.rank_jobs_for_candidate, candidate, all_jobs, result_limit
        )

        return {
            "candidate": candidate.summary_projection(),
            "suitableJobs": ranking.to_list(),
            "totalJobs": ranking.total_considered,
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error finding suitable jobs for candidate {candidate_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to find suitable jobs")
