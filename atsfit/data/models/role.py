"""
Reference role profile models for atsfit.

Role profiles are static reference data built once per process and only
ever read afterwards.
"""

from typing import Optional

from pydantic import Field, field_validator

from atsfit.utils.constants import RoleSeniority

from .base import FrozenModel


class WeightedItem(FrozenModel):
    """A skill or keyword with its frequency across source postings (0-1)."""

    value: str
    weight: float = Field(ge=0.0, le=1.0)


class RoleProfile(FrozenModel):
    """A precomputed reference job description."""

    id: str
    normalized_title: str
    aliases: tuple[str, ...] = Field(default_factory=tuple)
    category: str
    seniority: RoleSeniority = RoleSeniority.MID
    country_code: str = "GLOBAL"
    required_skills: tuple[WeightedItem, ...] = Field(default_factory=tuple)
    preferred_skills: tuple[WeightedItem, ...] = Field(default_factory=tuple)
    common_keywords: tuple[WeightedItem, ...] = Field(default_factory=tuple)
    typical_responsibilities: tuple[str, ...] = Field(default_factory=tuple)
    salary_median: Optional[int] = None

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return v.strip().lower()
