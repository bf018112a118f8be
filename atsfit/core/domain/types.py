"""
Value objects for the job-family, bullet-analysis and rewrite layer.

These never cross the process boundary, so they are plain frozen
dataclasses rather than pydantic models.
"""

from dataclasses import dataclass, field
from typing import Optional

from atsfit.utils.constants import JobFamily, MetricType


@dataclass(frozen=True)
class JobFamilyResult:
    """Classifier verdict; confidence is in [0, 1]."""

    family: JobFamily
    confidence: float


@dataclass(frozen=True)
class BulletSignals:
    """Rhetorical signals extracted from one bullet."""

    has_action_verb: bool = False
    action_verb: Optional[str] = None  # lowercased leading verb
    is_vague: bool = False
    has_metric: bool = False
    metric_type: MetricType = MetricType.NONE
    metric_value: Optional[str] = None
    has_dangling_ending: bool = False
    has_scope_noun: bool = False
    scope_nouns: tuple[str, ...] = field(default_factory=tuple)
    is_too_long: bool = False
    is_too_short: bool = False
    word_count: int = 0


@dataclass(frozen=True)
class SummaryParams:
    headline: str
    years: int
    skills: tuple[str, ...]
    job_title: str = ""
    company: str = ""
    family: JobFamily = JobFamily.GENERAL


@dataclass(frozen=True)
class CoverLetterParams:
    name: str
    title: str
    company: str
    top_skills: str
    recent_role: str
    top_bullet: str
    years: int
    responsibilities: tuple[str, ...] = field(default_factory=tuple)
    family: JobFamily = JobFamily.GENERAL


@dataclass(frozen=True)
class SkillGroup:
    """A labelled group of skills drawn from the candidate and the job."""

    name: str
    skills: tuple[str, ...]
