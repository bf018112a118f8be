"""
Pydantic data models for atsfit.

All models are frozen: parsing and scoring return fresh instances and
nothing is mutated after construction.
"""

# Base models
from .base import FrozenModel, dedupe_casefold

# Candidate models
from .candidate import (
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)

# Job models
from .job import JobProfile

# Result models
from .results import (
    ATSResult,
    KeywordCluster,
    RadarBlocker,
    RadarBreakdown,
    RadarDiagnostics,
    RadarResult,
    RewritePreview,
    ScoreBreakdown,
)

# Role profile models
from .role import RoleProfile, WeightedItem

__all__ = [
    # Base
    "FrozenModel",
    "dedupe_casefold",
    # Candidate
    "CandidateProfile",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    # Job
    "JobProfile",
    # Results
    "ATSResult",
    "KeywordCluster",
    "RadarBlocker",
    "RadarBreakdown",
    "RadarDiagnostics",
    "RadarResult",
    "RewritePreview",
    "ScoreBreakdown",
    # Role profiles
    "RoleProfile",
    "WeightedItem",
]
