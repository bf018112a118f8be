"""
Rewrite strategies, one per strategy family.

Each strategy changes phrasing (verb palette, summary tone, cover letter
framing), never content: skills and keywords in its output come only from
the candidate's profile or the job profile.

Registry:
    engineering -> EngineeringStrategy
    business (operations/product/healthcare/education/general) -> BusinessStrategy
    sales -> SalesStrategy
    marketing -> MarketingStrategy
    finance -> FinanceStrategy
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from atsfit.data.models import CandidateProfile, JobProfile
from atsfit.data.models.base import dedupe_casefold
from atsfit.utils.constants import JobFamily, StrategyKey

from .job_families import family_to_strategy_key
from .types import BulletSignals, CoverLetterParams, SkillGroup, SummaryParams


class UnknownStrategyError(KeyError, ValueError):
    """Raised when a strategy key is not one of the registered keys."""

    def __init__(self, key: object):
        self.key = key
        valid = ", ".join(k.value for k in StrategyKey)
        super().__init__(f"Unknown strategy key {key!r} (expected one of: {valid})")

    def __str__(self) -> str:
        return str(self.args[0])


# Weak openers shared by every strategy (pattern -> replacement)
BASE_VERB_REPLACEMENTS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"^Responsible for\s+", re.IGNORECASE), "Led "),
    (re.compile(r"^Helped\s+with\s+", re.IGNORECASE), "Collaborated on "),
    (re.compile(r"^Helped\s+", re.IGNORECASE), "Collaborated to "),
    (re.compile(r"^Assisted(?:\s+(?:with|in))?\s+", re.IGNORECASE), "Supported "),
    (re.compile(r"^Worked on\s+", re.IGNORECASE), "Delivered "),
    (re.compile(r"^Participated in\s+", re.IGNORECASE), "Contributed to "),
    (re.compile(r"^Involved in\s+", re.IGNORECASE), "Drove "),
    (re.compile(r"^Was part of\s+", re.IGNORECASE), "Collaborated on "),
    (re.compile(r"^Made\s+", re.IGNORECASE), "Produced "),
    (re.compile(r"^Used\s+", re.IGNORECASE), "Applied "),
    (re.compile(r"^Utili[sz]ed\s+", re.IGNORECASE), "Applied "),
    (re.compile(r"^Tasked with\s+", re.IGNORECASE), "Executed "),
    (re.compile(r"^Handled\s+", re.IGNORECASE), "Managed "),
    (re.compile(r"^Dealt with\s+", re.IGNORECASE), "Resolved "),
)


def _family_replacements(created: str, built: str, managed: str) -> tuple[tuple[re.Pattern, str], ...]:
    return (
        (re.compile(r"^Created\s+", re.IGNORECASE), f"{created} "),
        (re.compile(r"^Built\s+", re.IGNORECASE), f"{built} "),
        (re.compile(r"^Managed\s+", re.IGNORECASE), f"{managed} "),
    )


def finish_sentence(text: str) -> str:
    """Capitalise the first letter and end with exactly one period."""
    result = text.strip().rstrip(".!?;:, ").strip()
    if not result:
        return ""
    return result[0].upper() + result[1:] + "."


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:] if text else text


class RewriteStrategy(ABC):
    """
    Abstract base class for family-specific rewrite strategies.

    Subclasses supply the verb palette, the domain phrase used in cover
    letters, skill group labels and the summary wording.
    """

    @property
    @abstractmethod
    def key(self) -> StrategyKey:
        """Registry key of this strategy."""

    @property
    @abstractmethod
    def domain_phrase(self) -> str:
        """Field of work named in cover letters (e.g. "software development")."""

    @property
    @abstractmethod
    def family_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        """Family-specific replacements for Created/Built/Managed openers."""

    @property
    def skill_categories(self) -> tuple[tuple[str, re.Pattern], ...]:
        """Ordered (group name, pattern) pairs used by group_skills."""
        return ()

    @property
    def verb_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        return BASE_VERB_REPLACEMENTS + self.family_replacements

    def rewrite_bullet(self, text: str, signals: Optional[BulletSignals] = None) -> str:
        """
        Replace a weak leading phrase with this family's stronger verb.

        Only the opener changes; the rest of the bullet is kept verbatim.

        Args:
            text: Bullet text
            signals: Signals from analyze_bullet (unused openers are left alone)

        Returns:
            Rewritten bullet, capitalised, ending in a single period
        """
        result = (text or "").strip()
        for pattern, replacement in self.verb_replacements:
            if pattern.match(result):
                result = pattern.sub(replacement, result, count=1)
                break
        return finish_sentence(result)

    @abstractmethod
    def draft_summary(self, params: SummaryParams) -> str:
        """Draft a professional summary for this domain."""

    def draft_cover_letter(self, params: CoverLetterParams) -> list[str]:
        """
        Draft a cover letter.

        Returns:
            Exactly four paragraphs: salutation, fit, alignment, closing
        """
        greeting = "Dear Hiring Manager,"

        experience = f"With {params.years}+ years of experience" if params.years > 0 else "With experience"
        background = f" and a strong background in {params.top_skills}" if params.top_skills else ""
        position = f"the {params.title} position" if params.title else "this position"
        at_company = f" at {params.company}" if params.company else ""
        opening = f"{experience} in {self.domain_phrase}{background}, I am applying for {position}{at_company}."

        bullet = params.top_bullet.strip().rstrip(".")
        if params.recent_role and bullet:
            opening += (
                f" In my role as {params.recent_role}, I {_lower_first(bullet)}, which demonstrates "
                f"my ability to deliver meaningful outcomes."
            )

        if params.responsibilities:
            focus = params.responsibilities[0].strip().rstrip(".").lower()
            alignment = (
                f"My experience aligns well with your team's focus on {focus}. I bring a track record "
                f"of delivering results and collaborating effectively to meet organizational goals."
            )
        else:
            alignment = (
                "I bring a track record of delivering results and collaborating effectively with "
                "teams to meet organizational goals."
            )

        closing = f"Thank you for considering my application.\n\nBest regards,\n{params.name or 'Candidate'}"
        return [greeting, opening, alignment, closing]

    def group_skills(self, candidate: CandidateProfile, job: JobProfile) -> list[SkillGroup]:
        """
        Group the candidate's skills and the job's keywords under family labels.

        Every item is copied from the inputs; nothing is added.
        """
        items = dedupe_casefold(list(candidate.skills) + list(job.keywords))
        groups: dict[str, list[str]] = {}
        for item in items:
            name = next(
                (label for label, pattern in self.skill_categories if pattern.search(item)),
                "Additional Skills",
            )
            groups.setdefault(name, []).append(item)

        order = [label for label, _pattern in self.skill_categories] + ["Additional Skills"]
        return [SkillGroup(name=name, skills=tuple(groups[name])) for name in order if name in groups]

    def _summary(self, params: SummaryParams, focus: str, closer: str) -> str:
        headline = params.headline or params.job_title or "Professional"
        experience = f"{params.years}+ years of experience" if params.years > 0 else "hands-on experience"
        parts = [f"{headline} with {experience} {focus}."]
        skills = ", ".join(params.skills[:5])
        if skills:
            parts.append(f"Skilled in {skills}.")
        parts.append(closer)
        return " ".join(parts)


# =============================================================================
# Concrete strategies
# =============================================================================


class EngineeringStrategy(RewriteStrategy):
    """Software and IT roles."""

    @property
    def key(self) -> StrategyKey:
        return StrategyKey.ENGINEERING

    @property
    def domain_phrase(self) -> str:
        return "software development"

    @property
    def family_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        return _ENGINEERING_REPLACEMENTS

    @property
    def skill_categories(self) -> tuple[tuple[str, re.Pattern], ...]:
        return _ENGINEERING_CATEGORIES

    def draft_summary(self, params: SummaryParams) -> str:
        return self._summary(
            params,
            "building scalable applications and leading technical initiatives",
            "Proven track record of delivering high-quality software solutions aligned with business goals.",
        )


class BusinessStrategy(RewriteStrategy):
    """Operations, product, healthcare, education and general roles."""

    @property
    def key(self) -> StrategyKey:
        return StrategyKey.BUSINESS

    @property
    def domain_phrase(self) -> str:
        return "business operations and strategic execution"

    @property
    def family_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        return _BUSINESS_REPLACEMENTS

    @property
    def skill_categories(self) -> tuple[tuple[str, re.Pattern], ...]:
        return _BUSINESS_CATEGORIES

    def draft_summary(self, params: SummaryParams) -> str:
        return self._summary(
            params,
            "driving operational excellence and delivering strategic initiatives",
            "Proven track record of improving processes and achieving organizational goals.",
        )


class SalesStrategy(RewriteStrategy):
    @property
    def key(self) -> StrategyKey:
        return StrategyKey.SALES

    @property
    def domain_phrase(self) -> str:
        return "sales and business development"

    @property
    def family_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        return _SALES_REPLACEMENTS

    @property
    def skill_categories(self) -> tuple[tuple[str, re.Pattern], ...]:
        return _SALES_CATEGORIES

    def draft_summary(self, params: SummaryParams) -> str:
        return self._summary(
            params,
            "in revenue generation and client relationship management",
            "Consistent track record of exceeding targets and building long-term client partnerships.",
        )


class MarketingStrategy(RewriteStrategy):
    @property
    def key(self) -> StrategyKey:
        return StrategyKey.MARKETING

    @property
    def domain_phrase(self) -> str:
        return "marketing and growth strategy"

    @property
    def family_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        return _MARKETING_REPLACEMENTS

    @property
    def skill_categories(self) -> tuple[tuple[str, re.Pattern], ...]:
        return _MARKETING_CATEGORIES

    def draft_summary(self, params: SummaryParams) -> str:
        return self._summary(
            params,
            "in growth marketing and brand development",
            "Proven ability to drive measurable campaign performance and build engaged audiences.",
        )


class FinanceStrategy(RewriteStrategy):
    @property
    def key(self) -> StrategyKey:
        return StrategyKey.FINANCE

    @property
    def domain_phrase(self) -> str:
        return "financial analysis and strategic planning"

    @property
    def family_replacements(self) -> tuple[tuple[re.Pattern, str], ...]:
        return _FINANCE_REPLACEMENTS

    @property
    def skill_categories(self) -> tuple[tuple[str, re.Pattern], ...]:
        return _FINANCE_CATEGORIES

    def draft_summary(self, params: SummaryParams) -> str:
        return self._summary(
            params,
            "in financial analysis and strategic planning",
            "Proven ability to drive accuracy, ensure compliance and deliver actionable financial insights.",
        )


_ENGINEERING_REPLACEMENTS = _family_replacements("Designed and implemented", "Architected and built", "Led and managed")
_BUSINESS_REPLACEMENTS = _family_replacements("Established", "Developed", "Directed")
_SALES_REPLACEMENTS = _family_replacements("Developed", "Grew", "Owned and grew")
_MARKETING_REPLACEMENTS = _family_replacements("Produced", "Developed", "Directed")
_FINANCE_REPLACEMENTS = _family_replacements("Developed", "Constructed", "Oversaw")


def _category(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


_ENGINEERING_CATEGORIES = (
    ("Languages", _category(r"^(?:javascript|typescript|python|java|go|golang|rust|ruby|php|c\+\+|c#|swift|kotlin|scala|sql|r)$")),
    ("Frameworks & Libraries", _category(r"react|angular|vue|svelte|next|node|express|django|flask|fastapi|spring|rails|\.net|graphql")),
    ("Cloud & DevOps", _category(r"aws|gcp|azure|cloud|docker|kubernetes|k8s|terraform|ci/cd|jenkins|github actions|linux|devops")),
    ("Data", _category(r"postgres|mysql|mongo|redis|elastic|dynamo|kafka|spark|snowflake|etl|data|nosql|machine learning|ml\b|ai\b")),
    ("Practices", _category(r"agile|scrum|tdd|testing|microservices|system design|architecture|api|rest|git\b")),
)
_BUSINESS_CATEGORIES = (
    ("Operations", _category(r"operations|process|lean|six sigma|supply chain|logistics|vendor|procurement|erp|sap|inventory")),
    ("Strategy & Planning", _category(r"strategy|strategic|planning|roadmap|okr|kpi|business case|analysis|research")),
    ("Leadership", _category(r"leadership|stakeholder|change management|mentoring|coaching|cross-functional|team")),
    ("Tools", _category(r"excel|jira|confluence|tableau|power bi|salesforce|asana|notion|sql")),
)
_SALES_CATEGORIES = (
    ("Sales Methodology", _category(r"selling|prospecting|cold call|negotiation|closing|quota|pipeline|account|b2b|saas|enterprise")),
    ("CRM & Tools", _category(r"salesforce|hubspot|crm|outreach|gong|linkedin|excel")),
    ("Relationship Management", _category(r"client|customer|relationship|renewal|upsell|retention")),
)
_MARKETING_CATEGORIES = (
    ("Channels", _category(r"seo|sem|ppc|email|social|content|paid|influencer|brand|campaign")),
    ("Analytics & Optimization", _category(r"analytics|a/b|ctr|conversion|attribution|roas|cac|ltv|data|growth")),
    ("Marketing Tools", _category(r"hubspot|marketo|google ads|mailchimp|hootsuite|figma|canva|wordpress")),
)
_FINANCE_CATEGORIES = (
    ("Financial Analysis", _category(r"model|forecast|variance|budget|valuation|p&l|fp&a|analysis|planning")),
    ("Accounting & Compliance", _category(r"gaap|ifrs|sox|audit|compliance|reconciliation|close|tax|accounting")),
    ("Tools", _category(r"excel|tableau|power bi|sql|sap|oracle|netsuite|python|hyperion")),
)


# Registry (one instance per key, shared read-only)
STRATEGY_REGISTRY: dict[StrategyKey, RewriteStrategy] = {
    StrategyKey.ENGINEERING: EngineeringStrategy(),
    StrategyKey.BUSINESS: BusinessStrategy(),
    StrategyKey.SALES: SalesStrategy(),
    StrategyKey.MARKETING: MarketingStrategy(),
    StrategyKey.FINANCE: FinanceStrategy(),
}


def get_strategy_by_key(key: StrategyKey | str) -> RewriteStrategy:
    """
    Look up a strategy by its key.

    Raises:
        UnknownStrategyError: If ``key`` is not a registered strategy key
    """
    try:
        return STRATEGY_REGISTRY[StrategyKey(key)]
    except ValueError:
        raise UnknownStrategyError(key) from None


def get_strategy(family: JobFamily | str) -> RewriteStrategy:
    """Strategy for a job family (via family_to_strategy_key)."""
    return get_strategy_by_key(family_to_strategy_key(family))
