"""
Job repository for TalentMatch.

Job documents store skills as references into the ``skills`` collection;
reads resolve them to skill names before validation.
"""

from typing import Any, Optional

from bson import ObjectId

from talentmatch.data.models.job import Job
from talentmatch.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)

SKILLS_COLLECTION = "skills"


def _skill_refs(documents: list[dict[str, Any]]) -> set[ObjectId]:
    """Collect skill ObjectIds referenced by the given job documents."""
    refs = set()
    for document in documents:
        for skill in document.get("skills") or []:
            if isinstance(skill, ObjectId):
                refs.add(skill)
    return refs


def _replace_refs(documents: list[dict[str, Any]], names: dict[ObjectId, str]) -> list[dict[str, Any]]:
    """Swap skill references for names; unresolved references are dropped."""
    for document in documents:
        resolved = []
        for skill in document.get("skills") or []:
            if isinstance(skill, ObjectId):
                if skill in names:
                    resolved.append(names[skill])
            else:
                resolved.append(skill)
        document["skills"] = resolved
    return documents


class JobRepository(BaseRepository[Job]):
    """Repository for job posting document reads."""

    collection_name = "jobs"
    model_class = Job

    def _prepare(self, documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
        refs = _skill_refs(documents)
        if not refs:
            return documents
        collection = self._db_manager.get_sync_collection(SKILLS_COLLECTION)
        names = {
            doc["_id"]: doc.get("name")
            for doc in collection.find({"_id": {"$in": list(refs)}}, {"name": 1})
        }
        logger.debug(f"Resolved {len(names)} of {len(refs)} skill references")
        return _replace_refs(documents, names)

    async def _prepare_async(self, documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
        refs = _skill_refs(documents)
        if not refs:
            return documents
        collection = self._db_manager.get_async_collection(SKILLS_COLLECTION)
        cursor = collection.find({"_id": {"$in": list(refs)}}, {"name": 1})
        names = {doc["_id"]: doc.get("name") for doc in await cursor.to_list(length=None)}
        logger.debug(f"Resolved {len(names)} of {len(refs)} skill references")
        return _replace_refs(documents, names)


# Singleton instance
_job_repository: Optional[JobRepository] = None


def get_job_repository() -> JobRepository:
    """Get the job repository singleton instance."""
    global _job_repository
    if _job_repository is None:
        _job_repository = JobRepository()
    return _job_repository
