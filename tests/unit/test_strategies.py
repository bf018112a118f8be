"""
Tests for atsfit.core.domain.strategies — family rewrite strategies.
"""

import pytest

from atsfit.core.domain.strategies import (
    STRATEGY_REGISTRY,
    BusinessStrategy,
    EngineeringStrategy,
    FinanceStrategy,
    SalesStrategy,
    UnknownStrategyError,
    finish_sentence,
    get_strategy,
    get_strategy_by_key,
)
from atsfit.core.domain.types import CoverLetterParams, SummaryParams
from atsfit.utils.constants import JobFamily, StrategyKey


ALL_STRATEGIES = list(STRATEGY_REGISTRY.values())


@pytest.fixture
def cover_params():
    return CoverLetterParams(
        name="Sam Rivera",
        title="Backend Engineer",
        company="BigCo",
        top_skills="Python, Go",
        recent_role="Senior Engineer",
        top_bullet="Led migration of the billing platform to Go.",
        years=6,
        responsibilities=("Design scalable payment services", "Mentor engineers"),
    )


# ── Registry ─────────────────────────────────────────────────────────────────


class TestRegistry:
    def test_every_key_registered(self):
        assert set(STRATEGY_REGISTRY) == set(StrategyKey)

    def test_keys_match_instances(self):
        for key, strategy in STRATEGY_REGISTRY.items():
            assert strategy.key == key

    def test_lookup_by_string(self):
        assert isinstance(get_strategy_by_key("finance"), FinanceStrategy)

    @pytest.mark.parametrize("key", ["legal", "", None, "Engineering"])
    def test_unknown_key_raises(self, key):
        with pytest.raises(UnknownStrategyError) as exc_info:
            get_strategy_by_key(key)
        assert exc_info.value.key == key
        assert "engineering" in str(exc_info.value)

    def test_unknown_key_is_a_lookup_error(self):
        with pytest.raises(KeyError):
            get_strategy_by_key("legal")

    @pytest.mark.parametrize("family,cls", [
        (JobFamily.ENGINEERING, EngineeringStrategy),
        (JobFamily.SALES, SalesStrategy),
        (JobFamily.HEALTHCARE, BusinessStrategy),
        (JobFamily.GENERAL, BusinessStrategy),
    ])
    def test_get_strategy_by_family(self, family, cls):
        assert isinstance(get_strategy(family), cls)


# ── rewrite_bullet ───────────────────────────────────────────────────────────


class TestRewriteBullet:
    def test_weak_opener_replaced(self):
        assert get_strategy_by_key("business").rewrite_bullet("Responsible for vendor onboarding") == (
            "Led vendor onboarding."
        )

    def test_helped_with(self):
        assert EngineeringStrategy().rewrite_bullet("helped with database optimization") == (
            "Collaborated on database optimization."
        )

    def test_helped_before_verb(self):
        assert EngineeringStrategy().rewrite_bullet("Helped launch the mobile app") == (
            "Collaborated to launch the mobile app."
        )

    @pytest.mark.parametrize("key,expected", [
        ("engineering", "Architected and built a payments API."),
        ("business", "Developed a payments API."),
        ("sales", "Grew a payments API."),
        ("finance", "Constructed a payments API."),
    ])
    def test_family_verbs(self, key, expected):
        assert get_strategy_by_key(key).rewrite_bullet("Built a payments API") == expected

    def test_only_first_replacement_applies(self):
        # "Managed" is replaced, the "Handled" later in the text is not an opener
        assert SalesStrategy().rewrite_bullet("Managed renewals. Handled churn") == (
            "Owned and grew renewals. Handled churn."
        )

    def test_strong_bullet_only_gets_punctuation(self):
        assert EngineeringStrategy().rewrite_bullet("shipped the mobile app!!") == "Shipped the mobile app."

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.key.value)
    @pytest.mark.parametrize("bullet", [
        "Responsible for weekly reporting",
        "Reduced costs by 20%.",
        "worked on the data pipeline;",
        "Led a team of 4?",
    ])
    def test_always_ends_with_single_period(self, strategy, bullet):
        result = strategy.rewrite_bullet(bullet)
        assert result.endswith(".")
        assert not result.endswith("..")
        assert result[0].isupper()

    @pytest.mark.parametrize("text", ["", "   ", "...", None])
    def test_empty_rewrite(self, text):
        assert EngineeringStrategy().rewrite_bullet(text) == ""

    def test_finish_sentence(self):
        assert finish_sentence("  grew revenue 3x!?  ") == "Grew revenue 3x."


# ── draft_summary ────────────────────────────────────────────────────────────


class TestDraftSummary:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.key.value)
    def test_summary_mentions_skills(self, strategy):
        params = SummaryParams(headline="Operations Lead", years=5, skills=("Excel", "SQL", "Lean"))
        summary = strategy.draft_summary(params)
        assert len(summary) > 50
        assert "Operations Lead with 5+ years of experience" in summary
        assert "Skilled in Excel, SQL, Lean." in summary

    def test_only_five_skills_named(self):
        params = SummaryParams(headline="Engineer", years=3, skills=("A1", "B2", "C3", "D4", "E5", "F6"))
        summary = EngineeringStrategy().draft_summary(params)
        assert "E5" in summary
        assert "F6" not in summary

    def test_no_years_no_headline(self):
        params = SummaryParams(headline="", years=0, skills=(), job_title="Account Executive")
        summary = SalesStrategy().draft_summary(params)
        assert summary.startswith("Account Executive with hands-on experience")
        assert "Skilled in" not in summary


# ── draft_cover_letter ───────────────────────────────────────────────────────


class TestDraftCoverLetter:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.key.value)
    def test_four_paragraphs(self, strategy, cover_params):
        paragraphs = strategy.draft_cover_letter(cover_params)
        assert len(paragraphs) == 4
        assert paragraphs[0].startswith("Dear")
        assert paragraphs[3].endswith("Sam Rivera")

    def test_opening_uses_profile(self, cover_params):
        opening = EngineeringStrategy().draft_cover_letter(cover_params)[1]
        assert opening.startswith("With 6+ years of experience in software development")
        assert "the Backend Engineer position at BigCo" in opening
        assert "In my role as Senior Engineer, I led migration of the billing platform to Go," in opening

    def test_alignment_uses_first_responsibility(self, cover_params):
        alignment = BusinessStrategy().draft_cover_letter(cover_params)[2]
        assert "focus on design scalable payment services" in alignment

    def test_sparse_params(self):
        params = CoverLetterParams(
            name="", title="", company="", top_skills="", recent_role="", top_bullet="", years=0,
        )
        greeting, opening, alignment, closing = FinanceStrategy().draft_cover_letter(params)
        assert greeting == "Dear Hiring Manager,"
        assert opening == (
            "With experience in financial analysis and strategic planning, I am applying for this position."
        )
        assert "focus on" not in alignment
        assert closing.endswith("Candidate")


# ── group_skills ─────────────────────────────────────────────────────────────


class TestGroupSkills:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=lambda s: s.key.value)
    def test_never_adds_skills(self, strategy, make_candidate, make_job):
        candidate = make_candidate(skills=["Python", "Excel", "Salesforce", "SEO", "Budgeting"])
        job = make_job(keywords=["Kubernetes", "GAAP", "python"])
        groups = strategy.group_skills(candidate, job)

        grouped = [skill for group in groups for skill in group.skills]
        allowed = {s.lower() for s in candidate.skills} | {k.lower() for k in job.keywords}
        assert {s.lower() for s in grouped} <= allowed
        assert len(grouped) == len({s.lower() for s in grouped}) == 7
        assert all(group.skills for group in groups)

    def test_engineering_groups(self, make_candidate, make_job):
        candidate = make_candidate(skills=["Python", "React", "Docker", "PostgreSQL", "Communication"])
        groups = EngineeringStrategy().group_skills(candidate, make_job(keywords=["Kubernetes"]))
        by_name = {group.name: group.skills for group in groups}
        assert by_name["Languages"] == ("Python",)
        assert by_name["Frameworks & Libraries"] == ("React",)
        assert by_name["Cloud & DevOps"] == ("Docker", "Kubernetes")
        assert by_name["Data"] == ("PostgreSQL",)
        assert by_name["Additional Skills"] == ("Communication",)
        assert [g.name for g in groups][-1] == "Additional Skills"

    def test_empty_inputs(self, make_candidate, make_job):
        assert SalesStrategy().group_skills(make_candidate(), make_job()) == []
