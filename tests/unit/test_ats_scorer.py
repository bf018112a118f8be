"""
Tests for atsfit.core.matching.ats_scorer — deterministic ATS scoring.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from atsfit.core.domain.strategies import get_strategy_by_key
from atsfit.core.matching.ats_scorer import (
    COMPONENT_ADVICE,
    ATSScorer,
    estimate_years_experience,
    extract_job_terms,
    generate_gaps,
    generate_rewrite_previews,
    generate_strengths,
    generate_warnings,
    score_ats,
    term_found,
)
from atsfit.data.models import ATSResult, CandidateProfile, JobProfile
from atsfit.utils.config import ScoringSettings


# ── Bounds and baselines ─────────────────────────────────────────────────────


class TestScoreBounds:
    def test_empty_inputs_use_baselines(self):
        result = ATSScorer().score(CandidateProfile(), JobProfile())
        assert isinstance(result, ATSResult)
        assert 0 <= result.score <= 100
        assert result.breakdown.skill_overlap == 50
        assert result.breakdown.keyword_coverage == 50
        assert result.breakdown.seniority_match == 50
        assert result.breakdown.impact_strength == 20
        assert result.matched_keywords == ()
        assert result.missing_keywords == ()

    def test_full_profile_in_range(self, senior_engineer, make_job):
        job = make_job(
            title="Senior Backend Engineer",
            required=["Python", "Go", "Kubernetes"],
            keywords=["Kafka", "PostgreSQL"],
            seniority="Senior",
        )
        result = score_ats(senior_engineer, job)
        assert 0 <= result.score <= 100
        for value in result.breakdown.model_dump().values():
            assert 0 <= value <= 100

    def test_deterministic(self, senior_engineer, make_job):
        job = make_job(required=["Python", "Rust"], keywords=["gRPC"])
        assert score_ats(senior_engineer, job) == score_ats(senior_engineer, job)


# ── Skill overlap ────────────────────────────────────────────────────────────


class TestSkillOverlap:
    def test_adding_skills_never_lowers_score(self, make_candidate, make_job):
        job = make_job(required=["Python", "Kubernetes", "Kafka"], keywords=["Python", "Kubernetes", "Kafka"])
        partial = score_ats(make_candidate(skills=["Python"]), job)
        full = score_ats(make_candidate(skills=["Python", "Kubernetes", "Kafka"]), job)

        assert full.score > partial.score
        assert partial.matched_keywords == ("Python",)
        assert partial.missing_keywords == ("Kubernetes", "Kafka")
        assert full.missing_keywords == ()
        assert full.breakdown.skill_overlap == 100

    def test_required_terms_weigh_double(self, make_candidate, make_job):
        settings = ScoringSettings(skill_weight=1, keyword_weight=0, seniority_weight=0, impact_weight=0)
        job = make_job(required=["Python"], preferred=["Rust"])
        result = ATSScorer(settings).score(make_candidate(skills=["Python"]), job)
        # 2 of 3 weighted points
        assert result.score == 67

    def test_synonyms_match(self, make_candidate, make_job):
        candidate = make_candidate(skills=["Golang", "k8s"])
        result = score_ats(candidate, make_job(required=["Go", "Kubernetes"]))
        assert result.missing_keywords == ()

    def test_bullet_terms_count(self, make_candidate, make_job):
        candidate = make_candidate(bullets=["Built event pipelines on Kafka and Redis"])
        result = score_ats(candidate, make_job(keywords=["Kafka", "Redis", "Snowflake"]))
        assert result.matched_keywords == ("Kafka", "Redis")
        assert result.missing_keywords == ("Snowflake",)


# ── Seniority and impact ─────────────────────────────────────────────────────


class TestSeniorityAndImpact:
    def test_title_at_level_is_full_credit(self, make_candidate, make_experience, make_job):
        candidate = make_candidate(experience=[make_experience(title="Senior Engineer", start=str(date.today().year))])
        result = score_ats(candidate, make_job(seniority="Senior"))
        assert result.breakdown.seniority_match == 100

    def test_far_below_band(self, make_candidate, make_experience, make_job):
        recent = str(date.today().year - 1)
        candidate = make_candidate(experience=[make_experience(title="Engineer", start=recent)])
        result = score_ats(candidate, make_job(seniority="Senior"))
        assert result.breakdown.seniority_match == 25

    def test_impact_averages_bullets(self, make_candidate, make_job):
        candidate = make_candidate(bullets=[
            "Led a migration of the billing platform, reducing costs by 30%",
            "Worked on stuff",
        ])
        result = score_ats(candidate, make_job())
        assert result.breakdown.impact_strength == 50

    def test_weights_must_be_usable(self):
        with pytest.raises(ValidationError):
            ScoringSettings(skill_weight=0, keyword_weight=0, seniority_weight=0, impact_weight=0)
        with pytest.raises(ValidationError):
            ScoringSettings(skill_weight=-1)


# ── Term helpers ─────────────────────────────────────────────────────────────


class TestTermHelpers:
    @pytest.mark.parametrize("item,expected", [
        ("5+ years of Python experience", ["Python"]),
        ("Go and Kubernetes, REST APIs", ["Go", "Kubernetes", "REST", "APIs"]),
        ("Hands-on nodejs experience", ["Node.js"]),
        ("Strong communication skills", ["Strong communication skills"]),
        ("Excellent written and verbal communication across many teams", []),
    ])
    def test_extract_job_terms(self, item, expected):
        assert extract_job_terms(item) == expected

    def test_term_found_synonym(self):
        assert term_found("Golang", "built services in go", set()) is True

    def test_term_found_whole_word(self):
        assert term_found("Java", "javascript developer", set()) is False

    def test_term_found_keyword_inside_term(self):
        assert term_found("Python 3", "", {"python"}) is True

    def test_estimate_years(self, make_candidate, make_experience):
        candidate = make_candidate(experience=[
            make_experience(start="Mar 2019", end="Present"),
            make_experience(start="2015", end="2019"),
        ])
        assert estimate_years_experience(candidate, current_year=2026) == 11

    def test_estimate_years_without_dates(self, make_candidate, make_experience):
        candidate = make_candidate(experience=[
            make_experience(start=None, end=None),
            make_experience(start=None, end=None),
        ])
        assert estimate_years_experience(candidate) == 4

    def test_estimate_years_empty(self):
        assert estimate_years_experience(CandidateProfile()) == 0


# ── Warnings and suggestions ─────────────────────────────────────────────────


class TestWarningsAndSuggestions:
    def test_empty_profile_warnings(self):
        warnings = generate_warnings(CandidateProfile())
        assert len(warnings) == 4
        assert any("summary" in w for w in warnings)
        assert any("education" in w for w in warnings)

    def test_long_bullet_warning(self, make_candidate):
        warnings = generate_warnings(make_candidate(bullets=["Delivered " + "x" * 200]))
        assert any("exceed 200 characters" in w for w in warnings)

    def test_weakest_component_advice_first(self):
        result = ATSScorer().score(CandidateProfile(), JobProfile())
        assert result.suggestions[0] == COMPONENT_ADVICE["impact_strength"]

    def test_missing_keywords_suggested(self, make_candidate, make_job):
        result = score_ats(make_candidate(skills=["Python"]), make_job(required=["Python", "Terraform"]))
        assert "Add these missing keywords to your resume: Terraform" in result.suggestions

    def test_weak_opener_suggested(self, make_candidate, make_job):
        result = score_ats(make_candidate(bullets=["Responsible for billing"]), make_job())
        assert any("weak bullet openings" in s for s in result.suggestions)

    def test_suggestions_capped(self, make_candidate, make_job):
        candidate = make_candidate(bullets=["Helped with reports"], headline="Designer")
        result = score_ats(candidate, make_job(required=["Rust", "Terraform"], keywords=["Kafka"]))
        assert len(result.suggestions) <= 7


# ── Strengths and gaps ───────────────────────────────────────────────────────


class TestStrengthsAndGaps:
    def test_experience_strength_first(self, senior_engineer, make_job):
        strengths = generate_strengths(senior_engineer, make_job(keywords=["Python", "Go", "Kafka"]))
        assert 1 <= len(strengths) <= 5
        assert "across 2 positions" in strengths[0]
        assert "2 direct skill matches with the job requirements" in strengths
        assert "Demonstrates leadership and mentoring experience" in strengths
        assert "B.S. Computer Science from University of Texas" in strengths

    def test_empty_candidate_still_has_a_strength(self):
        assert generate_strengths(CandidateProfile(), JobProfile()) == [
            "Resume text is machine-readable by applicant tracking systems"
        ]

    def test_no_missing_keywords_no_gaps(self, make_candidate, make_job):
        assert generate_gaps(make_candidate(), make_job(seniority="Senior"), []) == []

    def test_gaps(self, make_candidate, make_experience, make_job):
        job = make_job(required=["Kubernetes", "Kafka"], seniority="Senior")
        candidate = make_candidate(experience=[
            make_experience(start=str(date.today().year - 1), bullets=["Helped with deploys"]),
        ])
        gaps = generate_gaps(candidate, job, ["Kubernetes", "Kafka"])
        assert gaps[0] == "Missing key required skills: Kubernetes, Kafka"
        assert "1 bullet use weak language; rewrite with action verbs and metrics" in gaps
        assert any("senior-level" in g for g in gaps)
        assert len(gaps) <= 7


# ── Rewrite previews ─────────────────────────────────────────────────────────


class TestRewritePreviews:
    BULLETS = [
        "Responsible for vendor onboarding",
        "Reduced costs by 20%",
        "Worked on the data pipeline",
        "Helped with hiring",
        "Made dashboards",
    ]

    def test_previews_come_from_own_bullets(self, make_candidate):
        candidate = make_candidate(bullets=self.BULLETS)
        previews = generate_rewrite_previews(candidate)
        assert len(previews) == 3
        assert [p.original for p in previews] == [self.BULLETS[0], self.BULLETS[2], self.BULLETS[3]]
        assert previews[0].improved == "Led vendor onboarding."

    def test_unchanged_bullets_skipped(self, make_candidate):
        candidate = make_candidate(bullets=["Reduced costs by 20%", "Shipped the app."])
        assert generate_rewrite_previews(candidate) == []

    def test_limit(self, make_candidate):
        candidate = make_candidate(bullets=self.BULLETS)
        assert generate_rewrite_previews(candidate, limit=0) == []
        assert len(generate_rewrite_previews(candidate, limit=10)) == 4

    def test_strategy(self, make_candidate):
        candidate = make_candidate(bullets=["Built a deploy tool"])
        previews = generate_rewrite_previews(candidate, strategy=get_strategy_by_key("engineering"))
        assert previews[0].improved == "Architected and built a deploy tool."
