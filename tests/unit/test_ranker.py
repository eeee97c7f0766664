"""
Tests for talentmatch.core.matching.ranker: filtering, ordering and
truncation of match results.
"""

from unittest.mock import patch

import pytest

from talentmatch.core.matching.ranker import RankedMatch, RankingResult
from talentmatch.utils.constants import AuditAction


@pytest.fixture
def comparable_jobs(make_job):
    """Five jobs that all share the candidate's location."""
    return [make_job(title=f"Job {i}", location="Pune") for i in range(5)]


@pytest.fixture
def pune_candidate(make_candidate):
    return make_candidate(preferred_locations=[{"city": "Pune"}])


class TestRank:
    def test_truncates_to_limit(self, ranker, pune_candidate, comparable_jobs):
        ranking = ranker.rank(pune_candidate, comparable_jobs, limit=3)

        assert len(ranking.results) == 3
        assert ranking.total_considered == 5

    @pytest.mark.parametrize("limit", [0, 1, 5, 50])
    def test_result_count(self, ranker, pune_candidate, comparable_jobs, limit):
        ranking = ranker.rank(pune_candidate, comparable_jobs, limit=limit)

        assert len(ranking.results) == min(limit, ranking.total_considered)

    def test_sorted_by_score_descending(self, ranker, make_candidate, make_job):
        candidate = make_candidate(
            skills=["Python", "Django"],
            preferred_locations=[{"city": "Pune"}],
        )
        jobs = [
            make_job(title="No overlap", skills=["Cobol"], location="Berlin"),
            make_job(title="Full", skills=["python", "django"], location="Pune"),
            make_job(title="Location only", skills=["Cobol"], location="Pune"),
        ]

        ranking = ranker.rank(candidate, jobs)
        scores = [match.result.score for match in ranking.results]

        assert [match.entity.title for match in ranking.results] == ["Full", "Location only", "No overlap"]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, ranker, pune_candidate, comparable_jobs):
        ranking = ranker.rank(pune_candidate, comparable_jobs)

        assert [match.entity.title for match in ranking.results] == [f"Job {i}" for i in range(5)]

    def test_excludes_non_comparable(self, ranker, pune_candidate, make_job):
        jobs = [
            make_job(title="Empty"),
            make_job(title="Pune", location="Pune"),
            make_job(title="Description only", description="Anything at all"),
        ]

        ranking = ranker.rank(pune_candidate, jobs)

        assert ranking.total_considered == 1
        assert [match.entity.title for match in ranking.results] == ["Pune"]

    def test_zero_scores_are_still_ranked(self, ranker, make_candidate, make_job):
        candidate = make_candidate(preferred_locations=[{"city": "Tokyo"}])
        job = make_job(location="Berlin")

        ranking = ranker.rank(candidate, [job])

        assert ranking.total_considered == 1
        assert ranking.results[0].result.score == 0

    def test_job_anchor(self, ranker, make_candidate, make_job):
        job = make_job(location="Pune")
        candidates = [
            make_candidate(name="Far", preferred_locations=[{"city": "Delhi"}]),
            make_candidate(name="Near", preferred_locations=[{"city": "Pune"}]),
        ]

        ranking = ranker.rank(job, candidates)

        assert [match.entity.name for match in ranking.results] == ["Near", "Far"]

    def test_idempotent(self, ranker, full_candidate, make_job):
        jobs = [
            make_job(skills=["autocad"], location="Bangalore"),
            make_job(description="Architect role", experience=2),
            make_job(location="Mumbai"),
        ]

        first = ranker.rank(full_candidate, jobs).to_list()
        second = ranker.rank(full_candidate, jobs).to_list()

        assert first == second

    def test_empty_counterparts(self, ranker, pune_candidate):
        ranking = ranker.rank(pune_candidate, [])

        assert ranking.results == []
        assert ranking.total_considered == 0

    def test_requires_anchor(self, ranker, comparable_jobs):
        with pytest.raises(ValueError):
            ranker.rank(None, comparable_jobs)

    def test_rejects_negative_limit(self, ranker, pune_candidate, comparable_jobs):
        with pytest.raises(ValueError):
            ranker.rank(pune_candidate, comparable_jobs, limit=-1)

    def test_rejects_mismatched_counterparts(self, ranker, pune_candidate, make_candidate):
        with pytest.raises(TypeError):
            ranker.rank(pune_candidate, [make_candidate()])


class TestDirectionalRanking:
    def test_jobs_for_candidate_audits(self, ranker, pune_candidate, comparable_jobs):
        with patch("talentmatch.core.matching.ranker.audit_log") as audit:
            ranking = ranker.rank_jobs_for_candidate(pune_candidate, comparable_jobs, limit=2)

        assert len(ranking.results) == 2
        audit.assert_called_once()
        action, details = audit.call_args.args
        assert action == AuditAction.JOBS_RANKED.value
        assert details["candidate_id"] == pune_candidate.id_str
        assert details["jobs_considered"] == 5
        assert details["returned"] == 2

    def test_jobs_for_candidate_have_no_preferences(self, ranker, pune_candidate, comparable_jobs):
        ranking = ranker.rank_jobs_for_candidate(pune_candidate, comparable_jobs)

        assert all("preferences" not in item for item in ranking.to_list())

    def test_candidates_for_job_echo_preferences(self, ranker, make_candidate, make_job, equal_weights):
        job = make_job(location="Pune")
        candidates = [make_candidate(preferred_locations=[{"city": "Pune"}])]
        preferences = {"skillsVsDescription": 50, "experienceVsDescription": 50, "yearsOfExperience": 50, "location": 50}

        ranking = ranker.rank_candidates_for_job(job, candidates, equal_weights, preferences=preferences)

        assert ranking.to_list()[0]["preferences"] == preferences

    def test_candidates_for_job_equal_weights_rank_by_mean(self, ranker, make_candidate, make_job, equal_weights):
        job = make_job(skills=["python"], experience=4, location="Pune")
        candidates = [
            # only years active: weighted 70, mean 17.5
            make_candidate(name="Years", experience=[{"start": "2019", "end": "2022"}]),
            # skills and location active at 100: weighted 100, mean 50
            make_candidate(name="Both", skills=["Python"], preferred_locations=[{"city": "Pune"}]),
            # location only at 100: weighted 100, mean 25
            make_candidate(name="Location", preferred_locations=[{"city": "Pune"}]),
        ]

        ranking = ranker.rank_candidates_for_job(job, candidates, equal_weights)

        assert [m.entity.name for m in ranking.results] == ["Both", "Location", "Years"]
        for match in ranking.results:
            assert match.result.score == int(match.result.individual_scores.mean + 0.5)

    def test_candidates_for_job_audits_weights(self, ranker, make_candidate, make_job):
        job = make_job(location="Pune")
        with patch("talentmatch.core.matching.ranker.audit_log") as audit:
            ranker.rank_candidates_for_job(job, [make_candidate(preferred_locations=[{"city": "Pune"}])])

        action, details = audit.call_args.args
        assert action == AuditAction.CANDIDATES_RANKED.value
        assert details["weights"] == {
            "skills": 25.0,
            "title_vs_description": 25.0,
            "years_of_experience": 30.0,
            "location": 20.0,
        }


class TestRankedMatch:
    def test_to_dict_merges_projection_and_scores(self, ranker, full_candidate, full_job):
        item = ranker.rank(full_candidate, [full_job]).to_list()[0]

        assert item["_id"] == full_job.id_str
        assert item["title"] == "Architect"
        assert item["score"] == 100
        assert len(item["matchDetails"]) == 4
        assert set(item["individualScores"]) == {"skills", "experience", "yearsOfExp", "location"}

    def test_ranking_result_defaults(self):
        result = RankingResult()

        assert result.results == []
        assert result.total_considered == 0
        assert result.to_list() == []

    def test_preferences_only_when_set(self, matching_engine, full_candidate, full_job):
        match = RankedMatch(entity=full_job, result=matching_engine.score(full_candidate, full_job))

        assert "preferences" not in match.to_dict()
