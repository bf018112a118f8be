"""
Deterministic ATS scoring engine.

Scores a candidate against a job with a four-part breakdown:
- Skill overlap (required terms weigh twice as much as the rest)
- Keyword coverage (job keywords found anywhere in the résumé)
- Seniority match (estimated years and title level against the stated level)
- Impact strength (bullet rhetoric from the bullet analyzer)

Every component has a defined baseline for empty input, so the result is
always a finite integer in [0, 100].
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from atsfit.core.domain.bullet_analyzer import analyze_bullet
from atsfit.core.domain.strategies import RewriteStrategy, get_strategy
from atsfit.data.models import ATSResult, CandidateProfile, JobProfile, RewritePreview, ScoreBreakdown
from atsfit.ml.nlp.jd_parser import JDParser, normalize_keyword
from atsfit.utils.config import ScoringSettings, get_settings
from atsfit.utils.constants import (
    SENIORITY_YEAR_RANGES,
    SKILL_SYNONYMS,
    WEAK_OPENER_PATTERN,
    JobFamily,
    SeniorityLevel,
)
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


# Baselines used when one side has nothing to compare
NEUTRAL_SCORE = 50.0
NO_BULLETS_IMPACT = 20.0

# Job items without a known term are kept whole only when they are this short
MAX_FALLBACK_TERM_WORDS = 4
MAX_FALLBACK_TERM_CHARS = 40

LONG_BULLET_CHARS = 200
METRIC_RATIO_FLOOR = 0.3

WEAK_OPENER = re.compile(WEAK_OPENER_PATTERN, re.IGNORECASE)
RESULT_PHRASE = re.compile(
    r"\b(resulting in|leading to|which|achieving|enabling|saving|reducing|increasing|improving)\b",
    re.IGNORECASE,
)
LEADERSHIP = re.compile(
    r"\b(led|managed|mentored|coached|directed|supervised|coordinated team|headed)\b",
    re.IGNORECASE,
)
OWNERSHIP_VERB = re.compile(r"^(architected|spearheaded|pioneered|transformed|orchestrated|established)\b", re.IGNORECASE)
YEAR = re.compile(r"\b(?:19|20)\d{2}\b")
OPEN_END = re.compile(r"\b(present|current|now|ongoing|today)\b", re.IGNORECASE)

# Component advice, used for the weakest part of the breakdown
COMPONENT_ADVICE: dict[str, str] = {
    "skill_overlap": "Mirror the job's required skills in your Skills section wherever you genuinely have them",
    "keyword_coverage": "Use the job description's exact terminology in your summary and experience bullets",
    "seniority_match": "Make your level visible: state your years of experience and the scope you owned",
    "impact_strength": "Open bullets with strong action verbs and quantify the outcome of your work",
}


@dataclass
class _TermMatch:
    """Job-side terms split by whether the candidate covers them."""

    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    matched_weight: float = 0.0
    total_weight: float = 0.0


class ATSScorer:
    """
    Engine for scoring a candidate profile against a job profile.

    Component weights come from ScoringSettings and are blended as a
    weighted mean, so any non-negative weights keep the score in range.
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        """
        Initialize the scorer.

        Args:
            settings: Optional scoring settings (defaults to global settings)
        """
        self.settings = settings or get_settings().scoring

    def score(self, candidate: CandidateProfile, job: JobProfile) -> ATSResult:
        """
        Score a candidate against a job.

        Args:
            candidate: Parsed résumé
            job: Parsed job description

        Returns:
            ATSResult with score, breakdown, keywords, suggestions and warnings
        """
        text = candidate_text(candidate)
        keywords = candidate_keywords(candidate)

        terms = self._match_terms(job, text, keywords)
        skill_overlap = (
            terms.matched_weight / terms.total_weight * 100 if terms.total_weight > 0 else NEUTRAL_SCORE
        )
        keyword_coverage = self._keyword_coverage(job, text, keywords)
        seniority_match = self._seniority_match(candidate, job)
        impact_strength = self._impact_strength(candidate)

        s = self.settings
        blended = (
            skill_overlap * s.skill_weight
            + keyword_coverage * s.keyword_weight
            + seniority_match * s.seniority_weight
            + impact_strength * s.impact_weight
        ) / s.total_weight
        score = max(0, min(100, round(blended)))

        breakdown = ScoreBreakdown(
            skill_overlap=_bounded(skill_overlap),
            keyword_coverage=_bounded(keyword_coverage),
            seniority_match=_bounded(seniority_match),
            impact_strength=_bounded(impact_strength),
        )

        result = ATSResult(
            score=score,
            breakdown=breakdown,
            matched_keywords=tuple(terms.matched),
            missing_keywords=tuple(terms.missing),
            suggestions=tuple(self._suggestions(candidate, job, terms.missing, breakdown, score)),
            warnings=tuple(generate_warnings(candidate)),
        )
        logger.debug(
            f"ATS score {score}: skills={breakdown.skill_overlap}, keywords={breakdown.keyword_coverage}, "
            f"seniority={breakdown.seniority_match}, impact={breakdown.impact_strength}"
        )
        return result

    def _match_terms(self, job: JobProfile, text: str, keywords: set[str]) -> _TermMatch:
        """Match the job's terms (required x2, preferred, keywords) against the candidate."""
        required = {term.casefold() for item in job.required_skills for term in extract_job_terms(item)}

        # casefold -> job-side spelling, in first-seen order
        terms: dict[str, str] = {}
        for item in list(job.required_skills) + list(job.preferred_skills):
            for term in extract_job_terms(item):
                terms.setdefault(term.casefold(), term)
        for keyword in job.keywords:
            terms.setdefault(keyword.casefold(), keyword)

        result = _TermMatch()
        for key, term in terms.items():
            weight = 2.0 if key in required else 1.0
            result.total_weight += weight
            if term_found(term, text, keywords):
                result.matched_weight += weight
                result.matched.append(term)
            else:
                result.missing.append(term)
        return result

    def _keyword_coverage(self, job: JobProfile, text: str, keywords: set[str]) -> float:
        if not job.keywords:
            return NEUTRAL_SCORE
        found = sum(1 for keyword in job.keywords if term_found(keyword, text, keywords))
        return found / len(job.keywords) * 100

    def _seniority_match(self, candidate: CandidateProfile, job: JobProfile) -> float:
        """Full credit inside the band, partial credit one or two years short."""
        level = job.seniority_level or SeniorityLevel.MID.value
        low, high = SENIORITY_YEAR_RANGES.get(level, SENIORITY_YEAR_RANGES[SeniorityLevel.MID.value])
        years = estimate_years_experience(candidate)

        if low <= years <= high + 3:
            score = 100.0
        elif years >= low - 1:
            score = 75.0
        elif years >= low - 2:
            score = 50.0
        else:
            score = 25.0

        # A title at the stated level counts as a match regardless of years
        recent_title = next((e.title for e in candidate.experience if e.title), None)
        if recent_title and title_level(recent_title) == level:
            score = 100.0
        return score

    def _impact_strength(self, candidate: CandidateProfile) -> float:
        bullets = [b for entry in candidate.experience for b in entry.bullets]
        if not bullets:
            return NO_BULLETS_IMPACT

        total = 0.0
        for bullet in bullets:
            signals = analyze_bullet(bullet)
            points = 0.0
            if signals.has_action_verb:
                points += 25
            if signals.has_metric:
                points += 40
            if signals.has_scope_noun:
                points += 15
            if RESULT_PHRASE.search(bullet) and not signals.has_dangling_ending:
                points += 20
            if signals.is_vague:
                points -= 15
            if signals.has_dangling_ending:
                points -= 10
            total += max(0.0, min(100.0, points))
        return total / len(bullets)

    def _suggestions(
        self,
        candidate: CandidateProfile,
        job: JobProfile,
        missing: list[str],
        breakdown: ScoreBreakdown,
        score: int,
    ) -> list[str]:
        suggestions: list[str] = []

        if score < self.settings.suggestion_ceiling:
            components = breakdown.model_dump()
            weakest = min(COMPONENT_ADVICE, key=lambda name: components[name])
            suggestions.append(COMPONENT_ADVICE[weakest])

        if missing:
            suggestions.append(f"Add these missing keywords to your resume: {', '.join(missing[:5])}")

        if not candidate.summary:
            suggestions.append(
                "Add a professional summary at the top of your resume that includes key terms from the job description"
            )

        if len(candidate.skills) < 5:
            suggestions.append(
                "Expand your skills section with specific technologies, tools, and methodologies "
                "mentioned in the job description"
            )

        bullets = candidate.all_bullets
        if bullets and _metric_ratio(bullets) < METRIC_RATIO_FLOOR:
            suggestions.append(
                "Add more quantifiable metrics to your experience bullets (numbers, percentages, dollar amounts)"
            )

        if job.title and candidate.headline:
            headline = candidate.headline.lower()
            if not any(word in headline for word in job.title.lower().split()):
                suggestions.append(f'Consider aligning your title/headline to match "{job.title}" for better ATS matching')

        if any(WEAK_OPENER.match(b) for b in bullets):
            suggestions.append(
                "Replace weak bullet openings like 'Responsible for' or 'Helped with' with strong action verbs"
            )

        return suggestions[: self.settings.max_suggestions]


# =============================================================================
# Matching helpers
# =============================================================================


def candidate_text(candidate: CandidateProfile) -> str:
    """Lowercased text of every searchable candidate field."""
    parts: list[str] = []
    for value in (candidate.name, candidate.headline, candidate.summary):
        if value:
            parts.append(value)
    parts.extend(candidate.skills)
    for entry in candidate.experience:
        parts.extend(v for v in (entry.title, entry.company) if v)
        parts.extend(entry.bullets)
    for edu in candidate.education:
        parts.extend(v for v in (edu.school, edu.degree) if v)
    for project in candidate.projects:
        if project.name:
            parts.append(project.name)
        parts.extend(project.bullets)
    return " ".join(parts).lower()


def candidate_keywords(candidate: CandidateProfile) -> set[str]:
    """Skills plus known technical terms mentioned in bullets, lowercased."""
    keywords = {skill.lower() for skill in candidate.skills}
    bullets = " ".join(candidate.all_bullets + [b for p in candidate.projects for b in p.bullets])
    for pattern in (JDParser.TECH_PATTERN, JDParser.TECH_EXACT_PATTERN, JDParser.DOMAIN_PATTERN):
        keywords.update(match.group(0).lower() for match in pattern.finditer(bullets))
    return keywords


def extract_job_terms(item: str) -> list[str]:
    """
    Known terms inside one requirement item.

    Short items with no known term are kept whole; longer sentences with
    no known term contribute nothing.
    """
    found: list[tuple[int, str]] = []
    for pattern in (JDParser.TECH_PATTERN, JDParser.TECH_EXACT_PATTERN, JDParser.DOMAIN_PATTERN):
        found.extend((m.start(), normalize_keyword(m.group(0))) for m in pattern.finditer(item))
    if found:
        return [term for _position, term in sorted(found)]

    cleaned = item.strip().rstrip(".")
    if cleaned and len(cleaned.split()) <= MAX_FALLBACK_TERM_WORDS and len(cleaned) <= MAX_FALLBACK_TERM_CHARS:
        return [cleaned]
    return []


def _contains(haystack: str, needle: str) -> bool:
    if not needle:
        return False
    return re.search(rf"(?<!\w){re.escape(needle)}(?!\w)", haystack) is not None


def term_found(term: str, text: str, keywords: set[str]) -> bool:
    """
    Whether a job term is covered by the candidate.

    Exact keyword hit, whole-word containment either way, or a known
    synonym. Case-insensitive.
    """
    lower = term.lower()
    if lower in keywords or _contains(text, lower):
        return True
    if any(len(keyword) >= 2 and _contains(lower, keyword) for keyword in keywords):
        return True
    return any(alt in keywords or _contains(text, alt) for alt in SKILL_SYNONYMS.get(lower, ()))


def title_level(title: str) -> Optional[str]:
    """Seniority level named in a job title, if any."""
    lower = title.lower()
    for level, pattern in JDParser.SENIORITY_RULES:
        if pattern.search(lower):
            return level.value
    return None


def _year_of(period: Optional[str], current_year: int) -> Optional[int]:
    if not period:
        return None
    if OPEN_END.search(period):
        return current_year
    match = YEAR.search(period)
    return int(match.group(0)) if match else None


def estimate_years_experience(candidate: CandidateProfile, current_year: Optional[int] = None) -> int:
    """
    Estimate total years of experience from entry dates.

    The span runs from the earliest start year to the latest end year
    (open-ended entries end this year). Entries without any start year
    count two years each.

    Args:
        candidate: Parsed résumé
        current_year: Year used for open-ended entries (defaults to today)

    Returns:
        Non-negative whole years
    """
    if not candidate.experience:
        return 0
    current_year = current_year or date.today().year

    starts = [y for y in (_year_of(e.start, current_year) for e in candidate.experience) if y]
    if not starts:
        return len(candidate.experience) * 2

    ends = [_year_of(e.end, current_year) or _year_of(e.start, current_year) or 0 for e in candidate.experience]
    return max(0, max(ends + starts) - min(starts))


def _bounded(value: float) -> int:
    return max(0, min(100, round(value)))


def _metric_ratio(bullets: list[str]) -> float:
    return sum(1 for b in bullets if analyze_bullet(b).has_metric) / len(bullets)


# =============================================================================
# Warnings, strengths, gaps and previews
# =============================================================================


def generate_warnings(candidate: CandidateProfile) -> list[str]:
    """Formatting warnings about the résumé itself."""
    warnings: list[str] = []
    if not candidate.summary:
        warnings.append("Missing professional summary section; most ATS systems prioritize the top of the resume")
    if len(candidate.skills) < 3:
        warnings.append(
            "Very few skills detected; ensure your Skills section is clearly formatted with comma-separated items"
        )
    if any(len(b) > LONG_BULLET_CHARS for b in candidate.all_bullets):
        warnings.append(f"Some bullets exceed {LONG_BULLET_CHARS} characters; keep bullets concise for ATS readability")
    if not candidate.experience:
        warnings.append("No experience section detected; ensure your work experience is clearly labeled")
    if not candidate.education:
        warnings.append("No education section detected; include your educational background")
    return warnings


def generate_strengths(candidate: CandidateProfile, job: JobProfile) -> list[str]:
    """
    Strengths of the candidate for this job.

    Returns:
        One to five strings; the first is the experience strength whenever
        the candidate has any experience entry
    """
    strengths: list[str] = []
    positions = len(candidate.experience)

    years = estimate_years_experience(candidate)
    if positions:
        plural = "s" if positions != 1 else ""
        if years > 0:
            strengths.append(f"{years}+ years of relevant experience across {positions} position{plural}")
        else:
            strengths.append(f"Relevant experience across {positions} position{plural}")

    bullets = candidate.all_bullets
    metric_count = sum(1 for b in bullets if analyze_bullet(b).has_metric)
    if metric_count:
        plural = "s" if metric_count != 1 else ""
        strengths.append(f"{metric_count} experience bullet{plural} include quantifiable impact metrics")

    skills = {s.lower() for s in candidate.skills}
    match_count = sum(1 for k in job.keywords if k.lower() in skills)
    if match_count:
        plural = "es" if match_count != 1 else ""
        strengths.append(f"{match_count} direct skill match{plural} with the job requirements")

    if any(LEADERSHIP.search(b) for b in bullets):
        strengths.append("Demonstrates leadership and mentoring experience")

    if any(OWNERSHIP_VERB.match(b) for b in bullets):
        strengths.append("Uses strong action verbs that convey ownership and impact")

    if candidate.education:
        edu = candidate.education[0]
        if edu.degree and edu.school:
            strengths.append(f"{edu.degree} from {edu.school}")

    if not strengths:
        if candidate.skills:
            count = len(candidate.skills)
            strengths.append(f"{count} skill{'s' if count != 1 else ''} clearly listed for ATS parsing")
        else:
            strengths.append("Resume text is machine-readable by applicant tracking systems")

    return strengths[:5]


def generate_gaps(candidate: CandidateProfile, job: JobProfile, missing_keywords: list[str]) -> list[str]:
    """
    Gaps between the candidate and the job.

    Returns an empty list when nothing is missing.
    """
    if not missing_keywords:
        return []

    gaps = [f"Missing key required skills: {', '.join(missing_keywords[:3])}"]

    if not candidate.summary:
        gaps.append("No professional summary; add a targeted 2-3 sentence summary at the top")

    bullets = candidate.all_bullets
    weak_count = sum(1 for b in bullets if WEAK_OPENER.match(b))
    if weak_count:
        plural = "s" if weak_count != 1 else ""
        gaps.append(f"{weak_count} bullet{plural} use weak language; rewrite with action verbs and metrics")

    if bullets and _metric_ratio(bullets) < METRIC_RATIO_FLOOR:
        gaps.append("Less than 30% of bullets include quantifiable results; add numbers to demonstrate impact")

    if job.title:
        title_words = [w for w in job.title.lower().split() if len(w) > 3]
        has_title = any(
            entry.title and any(w in entry.title.lower() for w in title_words) for entry in candidate.experience
        )
        if title_words and not has_title:
            gaps.append(f'Resume title doesn\'t match "{job.title}"; consider adding a matching subtitle')

    if job.seniority_level == SeniorityLevel.SENIOR.value and estimate_years_experience(candidate) < 4:
        gaps.append("Experience may be light for a senior-level role; emphasize scope, ownership, and technical depth")

    preferred = [k for k in missing_keywords if any(k.lower() in s.lower() for s in job.preferred_skills)]
    if len(preferred) > 2:
        gaps.append(f"Missing nice-to-have skills that could differentiate you: {', '.join(preferred[:3])}")

    return gaps[:7]


def generate_rewrite_previews(
    candidate: CandidateProfile,
    strategy: Optional[RewriteStrategy] = None,
    limit: Optional[int] = None,
) -> list[RewritePreview]:
    """
    Rewrite previews sourced only from the candidate's own bullets.

    A bullet is previewed when rewriting changes more than its terminal
    punctuation. No placeholder metrics are inserted.

    Args:
        candidate: Parsed résumé
        strategy: Rewrite strategy (defaults to the general strategy)
        limit: Maximum previews (defaults to ScoringSettings.max_previews)
    """
    strategy = strategy or get_strategy(JobFamily.GENERAL)
    limit = get_settings().scoring.max_previews if limit is None else limit

    previews: list[RewritePreview] = []
    for bullet in candidate.all_bullets:
        if len(previews) >= limit:
            break
        improved = strategy.rewrite_bullet(bullet, analyze_bullet(bullet))
        if improved and improved.rstrip(".") != bullet.strip().rstrip(".!?"):
            previews.append(RewritePreview(original=bullet, improved=improved))
    return previews


# Singleton instance
_ats_scorer: Optional[ATSScorer] = None


def get_ats_scorer() -> ATSScorer:
    """Get the ATS scorer singleton instance."""
    global _ats_scorer
    if _ats_scorer is None:
        _ats_scorer = ATSScorer()
    return _ats_scorer


def score_ats(candidate: CandidateProfile, job: JobProfile) -> ATSResult:
    """Score a candidate against a job."""
    return get_ats_scorer().score(candidate, job)
