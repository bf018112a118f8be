"""
Tests for atsfit.data.models — frozen profiles and result validation.
"""

import pytest
from pydantic import ValidationError

from atsfit.data.models import (
    ATSResult,
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    JobProfile,
    RoleProfile,
    ScoreBreakdown,
    WeightedItem,
    dedupe_casefold,
)


# ── CandidateProfile ─────────────────────────────────────────────────────────


class TestCandidateProfile:
    def test_defaults_are_empty(self):
        profile = CandidateProfile()
        assert profile.skills == ()
        assert profile.experience == ()
        assert profile.links is None
        assert profile.is_empty is True

    def test_skills_deduplicated_case_insensitively(self):
        profile = CandidateProfile(skills=["Python", "python ", "PYTHON", "Go", ""])
        assert profile.skills == ("Python", "Go")

    def test_empty_links_become_none(self):
        assert CandidateProfile(links=[]).links is None
        assert CandidateProfile(links=["github.com/jane"]).links == ("github.com/jane",)

    def test_frozen(self):
        profile = CandidateProfile(name="Jane Doe")
        with pytest.raises(ValidationError):
            profile.name = "John Doe"

    def test_model_copy_builds_new_instance(self):
        profile = CandidateProfile(name="Jane Doe")
        renamed = profile.model_copy(update={"name": "John Doe"})
        assert profile.name == "Jane Doe"
        assert renamed.name == "John Doe"

    def test_all_bullets_in_document_order(self):
        profile = CandidateProfile(experience=[
            ExperienceEntry(title="Lead", bullets=["a", "b"]),
            ExperienceEntry(title="Engineer", bullets=["c"]),
        ])
        assert profile.all_bullets == ["a", "b", "c"]
        assert profile.is_empty is False

    def test_camel_case_dump(self):
        profile = CandidateProfile(
            name="Jane Doe",
            experience=[ExperienceEntry(title="Engineer", start="2019")],
            education=[EducationEntry(school="MIT")],
        )
        data = profile.model_dump(by_alias=True)
        assert data["name"] == "Jane Doe"
        assert data["experience"][0]["start"] == "2019"
        assert "links" in data

    def test_accepts_camel_case_input(self):
        job = JobProfile.model_validate({"requiredSkills": ["Python"], "seniorityLevel": "Senior"})
        assert job.required_skills == ("Python",)
        assert job.model_dump(by_alias=True)["seniorityLevel"] == "Senior"


# ── JobProfile ───────────────────────────────────────────────────────────────


class TestJobProfile:
    def test_keywords_deduplicated(self):
        job = JobProfile(keywords=["Kafka", "kafka", "Redis"])
        assert job.keywords == ("Kafka", "Redis")

    def test_all_skills(self):
        job = JobProfile(required_skills=["Python"], preferred_skills=["Go"])
        assert job.all_skills == ["Python", "Go"]

    def test_is_empty(self):
        assert JobProfile(title="Engineer").is_empty is True
        assert JobProfile(keywords=["SQL"]).is_empty is False


# ── Results ──────────────────────────────────────────────────────────────────


class TestResults:
    @pytest.mark.parametrize("field", ["skill_overlap", "keyword_coverage", "seniority_match", "impact_strength"])
    @pytest.mark.parametrize("value", [-1, 101])
    def test_breakdown_range(self, field, value):
        with pytest.raises(ValidationError):
            ScoreBreakdown(**{field: value})

    def test_score_range(self):
        with pytest.raises(ValidationError):
            ATSResult(score=120)

    def test_result_dump_uses_camel_case(self):
        result = ATSResult(score=64, breakdown=ScoreBreakdown(skill_overlap=80), missing_keywords=["Kafka"])
        data = result.model_dump(by_alias=True)
        assert data["missingKeywords"] == ("Kafka",)
        assert data["breakdown"]["skillOverlap"] == 80


# ── Role profiles ────────────────────────────────────────────────────────────


class TestRoleProfile:
    def test_category_normalized(self):
        profile = RoleProfile(id="x", normalized_title="X", category=" Sales ")
        assert profile.category == "sales"
        assert profile.seniority == "mid"

    def test_weight_is_a_share(self):
        with pytest.raises(ValidationError):
            WeightedItem(value="Python", weight=1.5)


def test_dedupe_casefold_keeps_first_spelling():
    assert dedupe_casefold([" SQL", "sql", "NoSQL", "  "]) == ("SQL", "NoSQL")
