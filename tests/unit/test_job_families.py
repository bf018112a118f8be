"""
Tests for atsfit.core.domain.job_families — weighted-lexicon classifier.
"""

import pytest

from atsfit.core.domain.job_families import (
    FAMILY_LEXICONS,
    JobFamilyClassifier,
    classify_job_family,
    family_to_strategy_key,
)
from atsfit.data.models import CandidateProfile, JobProfile
from atsfit.utils.config import ClassifierSettings
from atsfit.utils.constants import JobFamily, StrategyKey


# ── Representative pairs ─────────────────────────────────────────────────────


class TestClassify:
    def test_engineering(self, make_candidate, make_job):
        candidate = make_candidate(
            skills=["Python", "Docker", "Kubernetes"],
            bullets=["Built backend microservices and CI/CD pipelines on AWS"],
        )
        job = make_job(
            title="Backend Software Engineer",
            required=["Python", "Kubernetes", "API design"],
            keywords=["microservices", "cloud"],
        )
        result = classify_job_family(candidate, job)
        assert result.family == JobFamily.ENGINEERING
        assert result.confidence > 0.4

    def test_sales(self, make_candidate, make_job):
        candidate = make_candidate(
            skills=["Salesforce", "Negotiation"],
            bullets=["Exceeded quota by 130% closing enterprise deals"],
        )
        job = make_job(
            title="Account Executive",
            required=["B2B sales experience", "Pipeline management in Salesforce"],
            keywords=["quota", "territory", "CRM"],
        )
        result = classify_job_family(candidate, job)
        assert result.family == JobFamily.SALES
        assert result.confidence > 0.4

    def test_marketing(self, make_candidate, make_job):
        candidate = make_candidate(
            skills=["SEO", "Google Analytics"],
            bullets=["Ran paid social media campaigns that lifted conversion by 22%"],
        )
        job = make_job(
            title="Digital Marketing Manager",
            required=["SEO and SEM", "Email marketing"],
            keywords=["brand", "demand generation", "content strategy"],
        )
        result = classify_job_family(candidate, job)
        assert result.family == JobFamily.MARKETING
        assert result.confidence > 0.4

    def test_finance(self, make_candidate, make_job):
        candidate = make_candidate(
            skills=["Excel", "Financial modeling"],
            bullets=["Prepared monthly variance analysis and budget forecasts"],
        )
        job = make_job(
            title="Financial Analyst",
            required=["GAAP", "FP&A experience", "Financial modeling"],
            keywords=["forecast", "audit", "cash flow"],
        )
        result = classify_job_family(candidate, job)
        assert result.family == JobFamily.FINANCE
        assert result.confidence > 0.4

    def test_operations(self, make_candidate, make_job):
        candidate = make_candidate(
            skills=["Lean", "Six Sigma"],
            bullets=["Cut warehouse cycle time by 18% through process improvement"],
        )
        job = make_job(
            title="Operations Manager",
            required=["Supply chain experience", "Vendor management"],
            keywords=["logistics", "inventory", "fulfillment"],
        )
        result = classify_job_family(candidate, job)
        assert result.family == JobFamily.OPERATIONS
        assert result.confidence > 0.4


class TestFallbacks:
    def test_empty_inputs_are_general(self):
        result = classify_job_family(CandidateProfile(), JobProfile())
        assert result.family == JobFamily.GENERAL
        assert result.confidence == 0.0

    def test_tie_is_general(self, make_job):
        # "sales" and "marketing" each score the same single job-side hit
        job = make_job(title=None, keywords=["sales", "marketing"])
        result = classify_job_family(CandidateProfile(), job)
        assert result.family == JobFamily.GENERAL
        assert result.confidence == 0.0

    def test_low_confidence_is_general(self, make_job):
        job = make_job(title=None, keywords=["sales"], seniority=None)
        result = classify_job_family(CandidateProfile(), job)
        assert result.family == JobFamily.GENERAL
        assert 0.0 < result.confidence < 0.4

    def test_custom_settings(self, make_job):
        classifier = JobFamilyClassifier(ClassifierSettings(min_confidence=0.0))
        result = classifier.classify(CandidateProfile(), make_job(title=None, keywords=["sales"]))
        assert result.family == JobFamily.SALES

    def test_whole_word_matching(self, make_job):
        # "sla" must not fire inside "slate", nor "lab" inside "label"
        scores = JobFamilyClassifier().score_families(
            CandidateProfile(), make_job(title=None, keywords=["slate", "label"])
        )
        assert scores[JobFamily.OPERATIONS] == 0
        assert scores[JobFamily.HEALTHCARE] == 0


class TestStrategyMapping:
    @pytest.mark.parametrize("family,key", [
        (JobFamily.ENGINEERING, StrategyKey.ENGINEERING),
        (JobFamily.SALES, StrategyKey.SALES),
        (JobFamily.MARKETING, StrategyKey.MARKETING),
        (JobFamily.FINANCE, StrategyKey.FINANCE),
        (JobFamily.OPERATIONS, StrategyKey.BUSINESS),
        (JobFamily.PRODUCT, StrategyKey.BUSINESS),
        (JobFamily.HEALTHCARE, StrategyKey.BUSINESS),
        (JobFamily.EDUCATION, StrategyKey.BUSINESS),
        (JobFamily.BUSINESS, StrategyKey.BUSINESS),
        (JobFamily.GENERAL, StrategyKey.BUSINESS),
    ])
    def test_mapping(self, family, key):
        assert family_to_strategy_key(family) == key

    def test_string_family(self):
        assert family_to_strategy_key("sales") == StrategyKey.SALES

    def test_unknown_family_is_business(self):
        assert family_to_strategy_key("astronaut") == StrategyKey.BUSINESS

    def test_every_family_but_general_has_a_lexicon(self):
        assert set(FAMILY_LEXICONS) == set(JobFamily) - {JobFamily.GENERAL}
