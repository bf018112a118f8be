"""
Scoring result models for atsfit.
"""

from typing import Optional

from pydantic import Field, field_validator

from atsfit.utils.constants import RadarLabel

from .base import FrozenModel


class ScoreBreakdown(FrozenModel):
    """Per-component scores, each an integer in [0, 100]."""

    skill_overlap: int = 0
    keyword_coverage: int = 0
    seniority_match: int = 0
    impact_strength: int = 0

    @field_validator("skill_overlap", "keyword_coverage", "seniority_match", "impact_strength")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Component scores must be within 0-100."""
        if not 0 <= v <= 100:
            raise ValueError("breakdown components must be between 0 and 100")
        return v


class RewritePreview(FrozenModel):
    """One of the candidate's own bullets next to its rewritten form."""

    original: str
    improved: str


class ATSResult(FrozenModel):
    """Bounded, explainable compatibility score."""

    score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    matched_keywords: tuple[str, ...] = Field(default_factory=tuple)
    missing_keywords: tuple[str, ...] = Field(default_factory=tuple)
    suggestions: tuple[str, ...] = Field(default_factory=tuple)
    warnings: tuple[str, ...] = Field(default_factory=tuple)


class RadarBreakdown(FrozenModel):
    """Five-axis quick-scan breakdown, each axis an integer in [0, 100]."""

    hard_skills: int = 0
    soft_skills: int = 0
    measurable_results: int = 0
    keyword_optimization: int = 0
    formatting_best_practices: int = 0

    @field_validator(
        "hard_skills", "soft_skills", "measurable_results", "keyword_optimization", "formatting_best_practices"
    )
    @classmethod
    def validate_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError("radar axes must be between 0 and 100")
        return v


class RadarBlocker(FrozenModel):
    """Advice for one weak radar axis."""

    axis: str
    title: str
    why: str
    how: str
    before_after: Optional[RewritePreview] = None


class KeywordCluster(FrozenModel):
    """Missing job terms grouped by where the posting lists them."""

    cluster: str
    keywords: tuple[str, ...] = Field(default_factory=tuple)


class RadarDiagnostics(FrozenModel):
    """Bullet-level findings behind the radar axes."""

    missing_metrics: tuple[str, ...] = Field(default_factory=tuple)
    weak_verbs: tuple[str, ...] = Field(default_factory=tuple)
    missing_keyword_clusters: tuple[KeywordCluster, ...] = Field(default_factory=tuple)


class RadarResult(FrozenModel):
    """Quick-scan score with its breakdown, label and blockers."""

    score: int = Field(ge=0, le=100)
    label: RadarLabel = RadarLabel.MODERATE
    breakdown: RadarBreakdown = Field(default_factory=RadarBreakdown)
    blockers: tuple[RadarBlocker, ...] = Field(default_factory=tuple)
    diagnostics: RadarDiagnostics = Field(default_factory=RadarDiagnostics)
    matched_keywords: tuple[str, ...] = Field(default_factory=tuple)
    missing_keywords: tuple[str, ...] = Field(default_factory=tuple)
    warnings: tuple[str, ...] = Field(default_factory=tuple)
