"""
Domain heuristics: job family classification, bullet analysis and
family-specific rewrite strategies.
"""

from .bullet_analyzer import analyze_all_bullets, analyze_bullet
from .job_families import (
    FAMILY_LEXICONS,
    JobFamilyClassifier,
    classify_job_family,
    family_to_strategy_key,
)
from .strategies import (
    STRATEGY_REGISTRY,
    BusinessStrategy,
    EngineeringStrategy,
    FinanceStrategy,
    MarketingStrategy,
    RewriteStrategy,
    SalesStrategy,
    UnknownStrategyError,
    get_strategy,
    get_strategy_by_key,
)
from .types import BulletSignals, CoverLetterParams, JobFamilyResult, SkillGroup, SummaryParams

__all__ = [
    # Bullets
    "analyze_all_bullets",
    "analyze_bullet",
    # Job families
    "FAMILY_LEXICONS",
    "JobFamilyClassifier",
    "classify_job_family",
    "family_to_strategy_key",
    # Strategies
    "STRATEGY_REGISTRY",
    "BusinessStrategy",
    "EngineeringStrategy",
    "FinanceStrategy",
    "MarketingStrategy",
    "RewriteStrategy",
    "SalesStrategy",
    "UnknownStrategyError",
    "get_strategy",
    "get_strategy_by_key",
    # Types
    "BulletSignals",
    "CoverLetterParams",
    "JobFamilyResult",
    "SkillGroup",
    "SummaryParams",
]
