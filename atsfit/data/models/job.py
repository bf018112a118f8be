"""
Job posting data models for atsfit.
"""

from typing import Optional

from pydantic import Field, field_validator

from .base import FrozenModel, dedupe_casefold


class JobProfile(FrozenModel):
    """Structured job description. Every list defaults to empty."""

    title: Optional[str] = None
    company: Optional[str] = None
    required_skills: tuple[str, ...] = Field(default_factory=tuple)
    preferred_skills: tuple[str, ...] = Field(default_factory=tuple)
    responsibilities: tuple[str, ...] = Field(default_factory=tuple)
    keywords: tuple[str, ...] = Field(default_factory=tuple)
    seniority_level: Optional[str] = None

    @field_validator("keywords", mode="before")
    @classmethod
    def dedupe_keywords(cls, v):
        if v is None:
            return ()
        return dedupe_casefold(v)

    @property
    def all_skills(self) -> list[str]:
        """Required followed by preferred skills."""
        return list(self.required_skills) + list(self.preferred_skills)

    @property
    def is_empty(self) -> bool:
        return not (self.required_skills or self.preferred_skills or self.keywords or self.responsibilities)
