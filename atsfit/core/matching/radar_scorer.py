"""
Radar scoring for the résumé-only quick scan.

Breaks a candidate/job pair into five axes (hard skills, soft skills,
measurable results, keyword optimization and formatting best practices),
blends them into a labelled score and explains the weakest axes as
blockers. Also provides the relevance gate that decides whether a résumé
has enough overlap with a job to be tailored at all.
"""

import re
from dataclasses import dataclass
from typing import Optional

from atsfit.core.domain.bullet_analyzer import analyze_bullet
from atsfit.core.domain.strategies import get_strategy
from atsfit.data.models import (
    CandidateProfile,
    JobProfile,
    KeywordCluster,
    RadarBlocker,
    RadarBreakdown,
    RadarDiagnostics,
    RadarResult,
    RewritePreview,
)
from atsfit.utils.config import ScoringSettings, get_settings
from atsfit.utils.constants import JobFamily, RadarLabel
from atsfit.utils.logger import get_logger

from .ats_scorer import (
    NEUTRAL_SCORE,
    NO_BULLETS_IMPACT,
    WEAK_OPENER,
    candidate_keywords,
    candidate_text,
    extract_job_terms,
    generate_warnings,
    term_found,
)

logger = get_logger(__name__)


# Axis weights for the blended radar score
RADAR_WEIGHTS: dict[str, float] = {
    "hard_skills": 0.25,
    "soft_skills": 0.15,
    "measurable_results": 0.25,
    "keyword_optimization": 0.20,
    "formatting_best_practices": 0.15,
}

# Relevance blend: hard skills and keyword optimization
RELEVANCE_SKILL_SHARE = 0.6
RELEVANCE_KEYWORD_SHARE = 0.4

NO_BULLETS_SOFT_SKILLS = 30.0
# Share of bullets showing people skills that earns full marks
SOFT_SKILL_SATURATION = 0.3

# Axes at or above this score never produce a blocker
STRONG_AXIS = 80
MAX_BLOCKERS = 3
MAX_MISSING_METRICS = 5

LONG_BULLET_CHARS = 150
SHORT_BULLET_CHARS = 30
MAX_FOCUSED_SKILLS = 25
FORMATTING_FLOOR = 10

SOFT_SKILL_VERB = re.compile(
    r"\b(led|managed|mentored|coached|directed|supervised|coordinated|headed|oversaw|guided|"
    r"trained|recruited|hired|communicated|collaborated|facilitated|negotiated|presented|"
    r"influenced|motivated|empowered|delegated|resolved|mediated)\b",
    re.IGNORECASE,
)
RESULT_SIGNAL = re.compile(
    r"\b\d+\s*(?:ms|x)\b|\b(?:reduced|increased|improved|grew|saved|cut|boosted)\b",
    re.IGNORECASE,
)

RELEVANCE_REASON = (
    "Your resume doesn't have enough relevant experience or skills for this role. "
    "A tailored CV needs some matching background to work with; experience you don't have "
    "will not be invented."
)


@dataclass(frozen=True)
class RelevanceCheck:
    """Verdict of the relevance gate."""

    relevant: bool
    score: int
    reason: Optional[str] = None


@dataclass(frozen=True)
class _JobTerms:
    """Job-side terms split by the list they came from."""

    required: tuple[str, ...]
    preferred: tuple[str, ...]
    keywords: tuple[str, ...]

    @property
    def combined(self) -> list[str]:
        seen: dict[str, str] = {}
        for term in self.required + self.preferred + self.keywords:
            seen.setdefault(term.casefold(), term)
        return list(seen.values())


def _job_terms(job: JobProfile) -> _JobTerms:
    return _JobTerms(
        required=tuple(t for item in job.required_skills for t in extract_job_terms(item)),
        preferred=tuple(t for item in job.preferred_skills for t in extract_job_terms(item)),
        keywords=tuple(job.keywords),
    )


def has_measurable_result(bullet: str) -> bool:
    """A metric from the bullet analyzer, a multiplier, a latency or an outcome verb."""
    return analyze_bullet(bullet).has_metric or bool(RESULT_SIGNAL.search(bullet))


def radar_bullets(candidate: CandidateProfile) -> list[str]:
    """Experience bullets followed by project bullets."""
    return candidate.all_bullets + [b for project in candidate.projects for b in project.bullets]


class RadarScorer:
    """
    Engine for the five-axis quick-scan score.

    Every axis has a defined baseline for empty input, so the score and
    each axis are always integers in [0, 100].
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or get_settings().scoring

    def score(self, candidate: CandidateProfile, job: JobProfile) -> RadarResult:
        """
        Score a candidate against a job on the five radar axes.

        Args:
            candidate: Parsed résumé
            job: Job profile (parsed posting or converted role profile)

        Returns:
            RadarResult with label, blockers, diagnostics and keyword lists
        """
        text = candidate_text(candidate)
        keywords = candidate_keywords(candidate)
        terms = _job_terms(job)
        bullets = radar_bullets(candidate)

        breakdown = RadarBreakdown(
            hard_skills=_bounded(self._hard_skills(terms, text, keywords)),
            soft_skills=_bounded(self._soft_skills(bullets)),
            measurable_results=_bounded(self._measurable_results(bullets)),
            keyword_optimization=_bounded(self._keyword_optimization(terms, candidate, text, keywords)),
            formatting_best_practices=_bounded(self._formatting(candidate, bullets)),
        )
        axes = breakdown.model_dump()
        score = _bounded(sum(axes[axis] * weight for axis, weight in RADAR_WEIGHTS.items()))

        matched = [t for t in terms.combined if term_found(t, text, keywords)]
        missing = [t for t in terms.combined if not term_found(t, text, keywords)]

        result = RadarResult(
            score=score,
            label=RadarLabel.from_score(score),
            breakdown=breakdown,
            blockers=tuple(self._blockers(breakdown, candidate, terms, bullets, missing)),
            diagnostics=self._diagnostics(terms, bullets, text, keywords),
            matched_keywords=tuple(matched),
            missing_keywords=tuple(missing),
            warnings=tuple(generate_warnings(candidate)),
        )
        logger.debug(f"Radar score {score} ({result.label}): {axes}")
        return result

    def check_relevance(self, candidate: CandidateProfile, job: JobProfile) -> RelevanceCheck:
        """
        Decide whether the candidate overlaps the job enough to tailor.

        Blends hard skills and keyword optimization; below the relevance
        floor any tailored output would have to invent experience.
        """
        text = candidate_text(candidate)
        keywords = candidate_keywords(candidate)
        terms = _job_terms(job)

        hard = self._hard_skills(terms, text, keywords)
        keyword = self._keyword_optimization(terms, candidate, text, keywords)
        score = _bounded(hard * RELEVANCE_SKILL_SHARE + keyword * RELEVANCE_KEYWORD_SHARE)

        if score < self.settings.relevance_floor:
            logger.info(f"Relevance {score} below floor {self.settings.relevance_floor}")
            return RelevanceCheck(relevant=False, score=score, reason=RELEVANCE_REASON)
        return RelevanceCheck(relevant=True, score=score)

    # -------------------------------------------------------------------------
    # Axes
    # -------------------------------------------------------------------------

    def _hard_skills(self, terms: _JobTerms, text: str, keywords: set[str]) -> float:
        """Required terms and job keywords weigh 2, preferred-only terms weigh 1."""
        weights: dict[str, tuple[str, float]] = {}
        for term in terms.required + terms.keywords:
            weights.setdefault(term.casefold(), (term, 2.0))
        for term in terms.preferred:
            weights.setdefault(term.casefold(), (term, 1.0))
        if not weights:
            return NEUTRAL_SCORE

        total = sum(weight for _term, weight in weights.values())
        matched = sum(weight for term, weight in weights.values() if term_found(term, text, keywords))
        return matched / total * 100

    def _soft_skills(self, bullets: list[str]) -> float:
        if not bullets:
            return NO_BULLETS_SOFT_SKILLS
        density = sum(1 for b in bullets if SOFT_SKILL_VERB.search(b)) / len(bullets)
        return min(100.0, density / SOFT_SKILL_SATURATION * 100)

    def _measurable_results(self, bullets: list[str]) -> float:
        if not bullets:
            return NO_BULLETS_IMPACT
        return sum(1 for b in bullets if has_measurable_result(b)) / len(bullets) * 100

    def _keyword_optimization(
        self, terms: _JobTerms, candidate: CandidateProfile, text: str, keywords: set[str]
    ) -> float:
        """Coverage earns up to 80 points, terms also listed under Skills up to 20."""
        all_terms = terms.combined
        if not all_terms:
            return NEUTRAL_SCORE

        skills = {s.casefold() for s in candidate.skills}
        found = [t for t in all_terms if term_found(t, text, keywords)]
        in_skills = sum(1 for t in found if t.casefold() in skills)
        return min(100.0, len(found) / len(all_terms) * 80 + in_skills / len(all_terms) * 20)

    def _formatting(self, candidate: CandidateProfile, bullets: list[str]) -> float:
        score = 100.0
        long_count = sum(1 for b in bullets if len(b) > LONG_BULLET_CHARS)
        score -= min(15, long_count * 3)
        vague_count = sum(1 for b in bullets if WEAK_OPENER.match(b))
        score -= min(15, vague_count * 5)
        if not candidate.summary:
            score -= 15
        if not candidate.education:
            score -= 10
        short_count = sum(1 for b in bullets if 0 < len(b) < SHORT_BULLET_CHARS)
        score -= min(10, short_count * 3)
        if len(candidate.skills) > MAX_FOCUSED_SKILLS:
            score -= 10
        return max(FORMATTING_FLOOR, score)

    # -------------------------------------------------------------------------
    # Explanations
    # -------------------------------------------------------------------------

    def _blockers(
        self,
        breakdown: RadarBreakdown,
        candidate: CandidateProfile,
        terms: _JobTerms,
        bullets: list[str],
        missing: list[str],
    ) -> list[RadarBlocker]:
        """Advice for up to three of the weakest axes, weakest first."""
        axes = breakdown.model_dump()
        weakest = sorted(RADAR_WEIGHTS, key=lambda axis: axes[axis])[:MAX_BLOCKERS]
        return [
            self._blocker(axis, candidate, terms, bullets, missing)
            for axis in weakest
            if axes[axis] < STRONG_AXIS
        ]

    def _blocker(
        self,
        axis: str,
        candidate: CandidateProfile,
        terms: _JobTerms,
        bullets: list[str],
        missing: list[str],
    ) -> RadarBlocker:
        if axis == "hard_skills":
            required = {t.casefold() for t in terms.required}
            top = [t for t in missing if t.casefold() in required][:3] or missing[:3]
            named = ", ".join(top) if top else "several key skills"
            return RadarBlocker(
                axis=axis,
                title="Opportunity to strengthen hard skills",
                why=f"Could further emphasize: {named}. These are highlighted in the job description.",
                how="Add these skills to your Skills section and weave them into experience bullets "
                    "where you've used them.",
            )

        if axis == "soft_skills":
            soft_count = sum(1 for b in bullets if SOFT_SKILL_VERB.search(b))
            return RadarBlocker(
                axis=axis,
                title="Could highlight more soft skills",
                why=f"{soft_count} of {len(bullets)} bullets show leadership, communication, or teamwork.",
                how="Consider adding bullets about mentoring, cross-team collaboration, stakeholder "
                    "communication, or conflict resolution.",
            )

        if axis == "measurable_results":
            with_metrics = sum(1 for b in bullets if has_measurable_result(b))
            return RadarBlocker(
                axis=axis,
                title="Opportunity to add measurable results",
                why=f"{with_metrics} of {len(bullets)} bullets include metrics. Adding more numbers could "
                    "strengthen your impact.",
                how="Add the real %, $, time saved, team size, or user count behind your bullets.",
            )

        if axis == "keyword_optimization":
            return RadarBlocker(
                axis=axis,
                title="Could strengthen keyword alignment",
                why=f"{len(missing)} job description keywords could be better represented. ATS systems and "
                    "recruiters scan for exact matches.",
                how="Mirror the exact phrases from the job description in your skills section and experience bullets.",
            )

        issues: list[str] = []
        long_count = sum(1 for b in bullets if len(b) > LONG_BULLET_CHARS)
        vague = [b for b in bullets if WEAK_OPENER.match(b)]
        if long_count:
            issues.append(f"{long_count} bullets over {LONG_BULLET_CHARS} chars")
        if vague:
            issues.append(f"{len(vague)} vague verb openings")
        if not candidate.summary:
            issues.append("missing professional summary")
        if not candidate.education:
            issues.append("no education section")

        before_after = None
        if vague:
            improved = get_strategy(JobFamily.GENERAL).rewrite_bullet(vague[0])
            before_after = RewritePreview(original=vague[0], improved=improved)

        return RadarBlocker(
            axis=axis,
            title="Optional formatting enhancements",
            why=f"Areas to refine: {', '.join(issues) if issues else 'a few formatting details'}.",
            how="Keep bullets under 150 characters, start with strong verbs, add a professional summary, "
                "and list education.",
            before_after=before_after,
        )

    def _diagnostics(
        self, terms: _JobTerms, bullets: list[str], text: str, keywords: set[str]
    ) -> RadarDiagnostics:
        missing_metrics = [b for b in bullets if len(b) > 20 and not has_measurable_result(b)]

        weak_verbs: dict[str, str] = {}
        for bullet in bullets:
            match = WEAK_OPENER.match(bullet)
            if match:
                weak_verbs.setdefault(match.group(0).lower(), match.group(0))

        clusters: list[KeywordCluster] = []
        seen: set[str] = set()
        for name, group in (
            ("Required Skills", terms.required),
            ("Preferred Skills", terms.preferred),
            ("Additional Keywords", terms.keywords),
        ):
            absent = []
            for term in group:
                key = term.casefold()
                if key in seen:
                    continue
                seen.add(key)
                if not term_found(term, text, keywords):
                    absent.append(term)
            if absent:
                clusters.append(KeywordCluster(cluster=name, keywords=tuple(absent)))

        return RadarDiagnostics(
            missing_metrics=tuple(missing_metrics[:MAX_MISSING_METRICS]),
            weak_verbs=tuple(weak_verbs.values()),
            missing_keyword_clusters=tuple(clusters),
        )


def _bounded(value: float) -> int:
    return max(0, min(100, round(value)))


# Singleton instance
_radar_scorer: Optional[RadarScorer] = None


def get_radar_scorer() -> RadarScorer:
    """Get the radar scorer singleton instance."""
    global _radar_scorer
    if _radar_scorer is None:
        _radar_scorer = RadarScorer()
    return _radar_scorer


def score_radar(candidate: CandidateProfile, job: JobProfile) -> RadarResult:
    """Score a candidate against a job on the five radar axes."""
    return get_radar_scorer().score(candidate, job)


def check_relevance(candidate: CandidateProfile, job: JobProfile) -> RelevanceCheck:
    """Decide whether the candidate has enough overlap with the job to tailor."""
    return get_radar_scorer().check_relevance(candidate, job)
