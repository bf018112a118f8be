"""
Job family classifier.

Scores a candidate/job pair against a weighted lexicon per occupational
family. The job side counts more than the résumé side, and multi-word
terms count more than single words because they are more specific. The
result only selects tone and vocabulary for rewrites; it never adds
terms to anything the candidate sees.
"""

import re
from typing import Optional

from atsfit.data.models import CandidateProfile, JobProfile
from atsfit.utils.config import ClassifierSettings, get_settings
from atsfit.utils.constants import JobFamily, StrategyKey
from atsfit.utils.logger import get_logger

from .types import JobFamilyResult

logger = get_logger(__name__)


FAMILY_LEXICONS: dict[JobFamily, tuple[str, ...]] = {
    JobFamily.ENGINEERING: (
        "software", "engineer", "developer", "programming", "codebase", "api",
        "backend", "frontend", "full-stack", "fullstack", "devops", "sre",
        "infrastructure", "microservices", "deployment", "ci/cd", "testing",
        "debugging", "repository", "pull request", "code review", "architecture",
        "database", "cloud", "kubernetes", "docker", "aws", "gcp", "azure",
        "react", "node", "node.js", "python", "java", "typescript", "javascript", "rust",
        "golang", "c++", "scala", "sql", "nosql", "machine learning", "data engineer",
        "system design", "scalability", "latency", "throughput", "uptime",
        "sprint", "agile", "scrum", "jira", "git", "linux", "postgresql",
    ),
    JobFamily.PRODUCT: (
        "product manager", "product owner", "product management", "roadmap",
        "backlog", "user stories", "prioritization", "okr", "discovery",
        "user research", "a/b testing", "feature", "release", "go-to-market",
        "gtm", "product strategy", "market fit", "customer feedback",
        "wireframe", "prototype", "prd",
    ),
    JobFamily.SALES: (
        "sales", "account executive", "account manager", "business development",
        "bdr", "sdr", "quota", "pipeline", "revenue", "closing", "deal",
        "prospect", "cold calling", "crm", "salesforce", "hubspot", "territory",
        "commission", "win rate", "upsell", "cross-sell", "negotiation",
        "contract", "renewal", "client relationship", "customer acquisition",
        "saas sales", "b2b sales", "pipeline management", "account-based selling",
    ),
    JobFamily.MARKETING: (
        "marketing", "brand", "content", "seo", "sem", "ppc", "social media",
        "campaign", "demand generation", "lead generation", "email marketing",
        "ctr", "cvr", "roas", "cac", "ltv", "impression", "engagement",
        "google analytics", "copywriting", "creative", "advertising", "media buy",
        "influencer", "public relations", "growth", "funnel", "content strategy",
        "digital marketing", "marketo", "conversion",
    ),
    JobFamily.FINANCE: (
        "finance", "financial", "accounting", "cpa", "cfa", "budget",
        "forecast", "variance", "audit", "tax", "treasury", "p&l",
        "balance sheet", "cash flow", "gaap", "ifrs", "sox", "reconciliation",
        "journal entry", "accounts payable", "accounts receivable",
        "financial modeling", "valuation", "due diligence", "investment",
        "portfolio", "risk management", "actuarial", "underwriting",
        "controller", "fp&a", "variance analysis", "month-end close",
    ),
    JobFamily.OPERATIONS: (
        "operations", "logistics", "supply chain", "procurement", "warehouse",
        "inventory", "lean", "six sigma", "process improvement", "efficiency",
        "sla", "vendor management", "fleet", "distribution", "fulfillment",
        "quality assurance", "quality control", "iso", "erp", "sap",
        "cycle time", "capacity planning", "operations management",
    ),
    JobFamily.BUSINESS: (
        "consulting", "consultant", "management consulting", "strategy",
        "strategic planning", "stakeholder", "stakeholder management",
        "business analysis", "business analyst", "business case",
        "requirements gathering", "market research", "competitive analysis",
        "change management", "executive presentations", "client engagement",
        "organizational design", "transformation",
    ),
    JobFamily.HEALTHCARE: (
        "healthcare", "clinical", "patient", "hipaa", "ehr", "emr",
        "medical", "nursing", "rn", "physician", "pharmacy", "lab",
        "diagnosis", "treatment", "care plan", "hospital", "health system",
        "fda", "cms", "medicare", "medicaid", "clinical trial",
        "biotech", "pharmaceutical", "life sciences",
    ),
    JobFamily.EDUCATION: (
        "education", "teaching", "curriculum", "student", "classroom",
        "learning outcomes", "pedagogy", "assessment", "grading", "cohort",
        "academic", "faculty", "professor", "instructor", "k-12",
        "higher education", "school", "workshop", "e-learning", "lms",
        "enrollment", "lesson plan",
    ),
}


def _compile_term(term: str) -> re.Pattern:
    # Whole words only; a trailing plural "s"/"es" still matches
    return re.compile(rf"(?<![\w]){re.escape(term)}(?:e?s)?(?![\w])")


_COMPILED_LEXICONS: dict[JobFamily, tuple[tuple[re.Pattern, int], ...]] = {
    family: tuple((_compile_term(term), len(term.split())) for term in terms)
    for family, terms in FAMILY_LEXICONS.items()
}

_STRATEGY_KEYS: dict[JobFamily, StrategyKey] = {
    JobFamily.ENGINEERING: StrategyKey.ENGINEERING,
    JobFamily.SALES: StrategyKey.SALES,
    JobFamily.MARKETING: StrategyKey.MARKETING,
    JobFamily.FINANCE: StrategyKey.FINANCE,
}


class JobFamilyClassifier:
    """Weighted-lexicon classifier over a candidate/job pair."""

    def __init__(self, settings: Optional[ClassifierSettings] = None):
        self.settings = settings or get_settings().classifier

    def classify(self, candidate: CandidateProfile, job: JobProfile) -> JobFamilyResult:
        """
        Classify the job family.

        Args:
            candidate: Parsed résumé
            job: Parsed job description

        Returns:
            JobFamilyResult; ``general`` on ties, empty input or low confidence
        """
        scores = self.score_families(candidate, job)
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        top_family, top_score = ranked[0]
        runner_up = ranked[1][1] if len(ranked) > 1 else 0.0

        if top_score <= 0:
            return JobFamilyResult(family=JobFamily.GENERAL, confidence=0.0)

        confidence = min(1.0, top_score / self.settings.saturation)
        if top_score == runner_up:
            logger.debug(f"Job family tie at {top_score:.1f}, falling back to general")
            return JobFamilyResult(family=JobFamily.GENERAL, confidence=0.0)
        if confidence < self.settings.min_confidence:
            return JobFamilyResult(family=JobFamily.GENERAL, confidence=round(confidence, 2))

        logger.debug(f"Job family: {top_family.value} (confidence {confidence:.2f})")
        return JobFamilyResult(family=top_family, confidence=round(confidence, 2))

    def score_families(self, candidate: CandidateProfile, job: JobProfile) -> dict[JobFamily, float]:
        """Raw lexicon score per family (general excluded)."""
        resume_text = _resume_text(candidate)
        jd_text = _job_text(job)

        scores: dict[JobFamily, float] = {}
        for family, terms in _COMPILED_LEXICONS.items():
            score = 0.0
            for pattern, specificity in terms:
                if pattern.search(jd_text):
                    score += self.settings.jd_weight * specificity
                if pattern.search(resume_text):
                    score += self.settings.resume_weight * specificity
            scores[family] = score
        return scores


def _resume_text(candidate: CandidateProfile) -> str:
    parts: list[str] = []
    if candidate.headline:
        parts.append(candidate.headline)
    if candidate.summary:
        parts.append(candidate.summary)
    parts.extend(candidate.skills)
    for entry in candidate.experience:
        if entry.title:
            parts.append(entry.title)
        parts.extend(entry.bullets)
    return " ".join(parts).lower()


def _job_text(job: JobProfile) -> str:
    parts: list[str] = []
    if job.title:
        parts.append(job.title)
    parts.extend(job.required_skills)
    parts.extend(job.preferred_skills)
    parts.extend(job.responsibilities)
    parts.extend(job.keywords)
    return " ".join(parts).lower()


def classify_job_family(candidate: CandidateProfile, job: JobProfile) -> JobFamilyResult:
    """Classify the job family of a candidate/job pair."""
    return JobFamilyClassifier().classify(candidate, job)


def family_to_strategy_key(family: JobFamily | str) -> StrategyKey:
    """
    Map a job family to its rewrite strategy.

    Engineering, sales, marketing and finance keep their own strategy;
    every other family shares the business strategy.
    """
    try:
        family = JobFamily(family)
    except ValueError:
        return StrategyKey.BUSINESS
    return _STRATEGY_KEYS.get(family, StrategyKey.BUSINESS)
