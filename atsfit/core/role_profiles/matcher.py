"""
Role profile matcher.

Matches a candidate against the static role library when no job
description is supplied. The target role comes from the most recent
title, then the headline, then the best-fitting skill cluster. Ranking
blends skill overlap, title similarity and a same-category bonus, and
always leaves room for a couple of aspirational (more senior) roles.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from atsfit.core.matching import estimate_years_experience, score_ats, score_radar
from atsfit.data.models import ATSResult, CandidateProfile, JobProfile, RadarResult, RoleProfile
from atsfit.utils.constants import ROLE_SENIORITY_RANK, RoleSeniority, SeniorityLevel
from atsfit.utils.logger import get_logger, preview

from .library import get_role_profiles

logger = get_logger(__name__)


SKILL_WEIGHT = 0.45
TITLE_WEIGHT = 0.40
CATEGORY_WEIGHT = 0.15
CATEGORY_BONUS = 0.15
MIN_RELEVANCE = 0.03
ASPIRATIONAL_SLOTS = 2

# Required skills and keywords below these weights are too rare to require
REQUIRED_WEIGHT_FLOOR = 0.3
KEYWORD_WEIGHT_FLOOR = 0.2

TITLE_SENIORITY_RULES: tuple[tuple[re.Pattern, RoleSeniority], ...] = (
    (re.compile(r"\b(intern|trainee|apprentice)\b", re.IGNORECASE), RoleSeniority.JUNIOR),
    (re.compile(r"\b(junior|jr\.?|entry[- ]level|associate|graduate)\b", re.IGNORECASE), RoleSeniority.JUNIOR),
    (re.compile(r"\b(mid[- ]?level|intermediate)\b", re.IGNORECASE), RoleSeniority.MID),
    (re.compile(r"\b(senior|sr\.?|principal|staff|lead)\b", re.IGNORECASE), RoleSeniority.SENIOR),
    (re.compile(r"\b(manager|director|head of|vp|chief|executive)\b", re.IGNORECASE), RoleSeniority.LEAD),
)

# Ordered (pattern, category) rules over a normalized title
CATEGORY_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"data scien|machine learn|\bml\b|\bai\b|data analy|\bbi\b|business intel|data engineer|\betl\b"), "data"),
    (re.compile(r"engineer|developer|\bsde\b|\bswe\b|devops|frontend|backend|full ?stack|mobile|programmer"), "engineering"),
    (re.compile(r"product manag|product owner|program manag"), "product"),
    (re.compile(r"\bux\b|\bui\b|design"), "design"),
    (re.compile(r"market|\bseo\b|content|growth"), "marketing"),
    (re.compile(r"sales|account exec|\bcsm\b|customer success"), "sales"),
    (re.compile(r"financ|account|\bfpa\b|controller|invest"), "finance"),
    (re.compile(r"project manag|operations|supply chain|\bhr\b|human resource|consult|business analyst"), "business"),
    (re.compile(r"nurs|clinical|patient"), "healthcare"),
    (re.compile(r"teach|educat|instructor"), "education"),
)

TECH_SKILL = re.compile(r"python|java|react|node|aws|docker|sql|typescript|\bgo\b|rust|kubernetes", re.IGNORECASE)
DATA_SKILL = re.compile(r"pandas|tensorflow|pytorch|tableau|power bi|spark|jupyter|statistics|\br\b", re.IGNORECASE)

# Fallback target roles inferred from skill clusters
SKILL_CLUSTERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Frontend Developer", ("react", "angular", "vue", "css", "html", "javascript", "typescript", "frontend", "next.js", "tailwind")),
    ("Software Engineer", ("python", "java", "go", "rust", "node.js", "api", "microservices", "database", "sql", "backend")),
    ("DevOps Engineer", ("docker", "kubernetes", "terraform", "aws", "azure", "gcp", "ci/cd", "jenkins", "ansible", "devops")),
    ("Data Scientist", ("machine learning", "statistics", "pandas", "jupyter", "modeling", "pytorch", "tensorflow")),
    ("Data Analyst", ("sql", "tableau", "power bi", "excel", "reporting", "analytics", "data analysis", "dashboards")),
    ("Data Engineer", ("spark", "airflow", "etl", "data pipeline", "data warehouse", "snowflake", "redshift", "kafka")),
    ("Product Manager", ("product management", "roadmap", "user stories", "stakeholder", "sprint", "agile", "prd")),
    ("UX Designer", ("figma", "sketch", "user research", "wireframe", "prototype", "usability", "ux")),
    ("Marketing Manager", ("seo", "google ads", "social media", "content marketing", "campaign", "hubspot", "marketing")),
    ("Account Executive", ("salesforce", "crm", "pipeline", "quota", "b2b", "prospecting", "account management")),
    ("Financial Analyst", ("financial modeling", "valuation", "excel", "accounting", "gaap", "ifrs", "forecasting")),
    ("Project Manager", ("project management", "pmp", "gantt", "stakeholder", "risk management", "budget", "jira")),
    ("Registered Nurse", ("nursing", "patient care", "clinical", "medication", "ehr", "vital signs", "bls")),
)

# Role tiers expressed as job-description seniority levels
_JOB_SENIORITY: dict[str, SeniorityLevel] = {
    RoleSeniority.JUNIOR.value: SeniorityLevel.JUNIOR,
    RoleSeniority.MID.value: SeniorityLevel.MID,
    RoleSeniority.SENIOR.value: SeniorityLevel.SENIOR,
    RoleSeniority.LEAD.value: SeniorityLevel.MANAGER,
    RoleSeniority.EXECUTIVE.value: SeniorityLevel.DIRECTOR,
}


@dataclass(frozen=True)
class TargetRole:
    """The role a candidate is most likely aiming for."""

    title: str
    seniority: RoleSeniority
    skills: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RoleMatch:
    """A role profile scored against a candidate."""

    profile: RoleProfile
    score: int
    result: ATSResult
    radar: Optional[RadarResult] = None

    @property
    def missing_keywords(self) -> tuple[str, ...]:
        return self.result.missing_keywords

    @property
    def matched_keywords(self) -> tuple[str, ...]:
        return self.result.matched_keywords


def extract_target_role(candidate: CandidateProfile) -> TargetRole:
    """
    Infer the candidate's target role.

    Args:
        candidate: Parsed résumé

    Returns:
        TargetRole with title, seniority tier and lowercased skills
    """
    skills = tuple(skill.lower() for skill in candidate.skills)

    recent_title = (candidate.experience[0].title or "").strip() if candidate.experience else ""
    headline = (candidate.headline or "").strip()
    if len(recent_title) > 2:
        title = recent_title
    elif len(headline) > 2:
        title = headline
    else:
        title = infer_role_from_skills(skills)

    return TargetRole(title=title, seniority=infer_seniority(title, candidate), skills=skills)


def infer_seniority(title: str, candidate: CandidateProfile) -> RoleSeniority:
    """Seniority tier from title words, else from years of experience."""
    for pattern, level in TITLE_SENIORITY_RULES:
        if pattern.search(title):
            return level

    years = estimate_years_experience(candidate)
    if years >= 8:
        return RoleSeniority.SENIOR
    if years >= 3:
        return RoleSeniority.MID
    return RoleSeniority.JUNIOR


def infer_role_from_skills(skills: tuple[str, ...] | list[str]) -> str:
    """Best-fitting cluster role for a skill set, or "Professional"."""
    lowered = [s.lower() for s in skills]
    best_role, best_overlap = "Professional", 0
    for role, keywords in SKILL_CLUSTERS:
        overlap = sum(1 for k in keywords if any(k in s or s in k for s in lowered if len(s) > 1))
        if overlap > best_overlap:
            best_role, best_overlap = role, overlap
    return best_role


def find_matching_profiles(
    title: str,
    skills: list[str] | tuple[str, ...],
    seniority: str,
    category: Optional[str] = None,
    limit: int = 10,
) -> list[RoleProfile]:
    """
    Rank library profiles by similarity to a target role.

    Args:
        title: Target role title
        skills: Candidate skills
        seniority: Target seniority (free text or RoleSeniority value)
        category: Optional category filter
        limit: Maximum number of profiles

    Returns:
        Closest profiles first, with up to two more senior profiles of
        the leading category appended
    """
    if limit <= 0:
        return []

    normalized = normalize_title(title)
    level = normalize_seniority(seniority)
    skill_set = {s.lower() for s in skills}
    pool = get_role_profiles(category)
    detected = detect_category(normalized, skill_set)

    scored: list[tuple[float, RoleProfile]] = []
    for profile in pool:
        bonus = CATEGORY_BONUS if profile.category == detected else 0.0
        relevance = (
            _skill_score(skill_set, profile) * SKILL_WEIGHT
            + _title_score(normalized, profile) * TITLE_WEIGHT
            + bonus * CATEGORY_WEIGHT
        )
        scored.append((relevance, profile))
    scored.sort(key=lambda item: item[0], reverse=True)

    results = [profile for relevance, profile in scored if relevance >= MIN_RELEVANCE][:limit]
    if not results:
        return []

    primary = results[0].category
    rank = ROLE_SENIORITY_RANK[level.value]
    aspirational = sorted(
        (p for p in pool if p.category == primary and ROLE_SENIORITY_RANK.get(p.seniority, 1) > rank),
        key=lambda p: ROLE_SENIORITY_RANK.get(p.seniority, 1),
    )
    wanted = min(ASPIRATIONAL_SLOTS, len(aspirational), max(0, limit - 1))
    have = sum(1 for p in results if p in aspirational)

    for profile in aspirational:
        if have >= wanted:
            break
        if profile in results:
            continue
        if len(results) >= limit:
            # Make room by dropping the weakest non-aspirational match
            for i in range(len(results) - 1, 0, -1):
                if results[i] not in aspirational:
                    del results[i]
                    break
            else:
                break
        results.append(profile)
        have += 1

    logger.debug(f"Matched {len(results)} role profiles for {preview(title)!r} ({level.value})")
    return results


def role_profile_to_job_profile(profile: RoleProfile) -> JobProfile:
    """Convert a role profile into a JobProfile so it can be scored."""
    return JobProfile(
        title=profile.normalized_title,
        required_skills=tuple(s.value for s in profile.required_skills if s.weight >= REQUIRED_WEIGHT_FLOOR),
        preferred_skills=tuple(s.value for s in profile.preferred_skills),
        responsibilities=profile.typical_responsibilities,
        keywords=tuple(k.value for k in profile.common_keywords if k.weight >= KEYWORD_WEIGHT_FLOOR),
        seniority_level=_JOB_SENIORITY.get(profile.seniority, SeniorityLevel.MID).value,
    )


def find_role_matches(
    candidate: CandidateProfile,
    limit: int = 5,
    category: Optional[str] = None,
) -> list[RoleMatch]:
    """
    Score the candidate against the closest role profiles.

    Returns:
        RoleMatch list, highest ATS score first, each with its radar breakdown
    """
    target = extract_target_role(candidate)
    profiles = find_matching_profiles(target.title, target.skills, target.seniority.value, category, limit)

    matches = []
    for profile in profiles:
        job = role_profile_to_job_profile(profile)
        result = score_ats(candidate, job)
        radar = score_radar(candidate, job)
        matches.append(RoleMatch(profile=profile, score=result.score, result=result, radar=radar))
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


# =============================================================================
# Helpers
# =============================================================================


def normalize_title(title: str) -> str:
    """Lowercase, punctuation to spaces, single-spaced."""
    return re.sub(r"\s+", " ", re.sub(r"[^\w\s]", " ", title.lower())).strip()


def normalize_seniority(seniority: str) -> RoleSeniority:
    """Map free-text seniority ("Sr.", "Director", "entry") to a role tier."""
    s = (seniority or "").lower()
    if any(w in s for w in ("junior", "jr", "entry")):
        return RoleSeniority.JUNIOR
    if any(w in s for w in ("senior", "sr", "principal", "staff")):
        return RoleSeniority.SENIOR
    if any(w in s for w in ("executive", "chief", "vp")):
        return RoleSeniority.EXECUTIVE
    if any(w in s for w in ("lead", "manager", "director", "head")):
        return RoleSeniority.LEAD
    return RoleSeniority.MID


def detect_category(normalized_title: str, skills: set[str]) -> str:
    """Most likely category from the title, else from the skill mix."""
    for pattern, category in CATEGORY_RULES:
        if pattern.search(normalized_title):
            return category
    if sum(1 for s in skills if TECH_SKILL.search(s)) >= 3:
        return "engineering"
    if sum(1 for s in skills if DATA_SKILL.search(s)) >= 2:
        return "data"
    return "business"


def _title_score(normalized: str, profile: RoleProfile) -> float:
    best = 0.0
    input_tokens = {t for t in normalized.split() if len(t) > 1}
    for title in (profile.normalized_title, *profile.aliases):
        candidate_title = normalize_title(title)
        if normalized == candidate_title:
            return 1.0
        title_tokens = {t for t in candidate_title.split() if len(t) > 1}
        union = input_tokens | title_tokens
        jaccard = len(input_tokens & title_tokens) / len(union) if union else 0.0
        contains = 0.3 if normalized and (normalized in candidate_title or candidate_title in normalized) else 0.0
        best = max(best, min(1.0, jaccard + contains))
    return best


def _skill_score(skills: set[str], profile: RoleProfile) -> float:
    if not skills:
        return 0.0
    profile_skills = {s.value.lower() for s in profile.required_skills + profile.preferred_skills}
    union = skills | profile_skills
    return len(skills & profile_skills) / len(union) if union else 0.0
