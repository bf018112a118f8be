"""
Candidate data models for atsfit.

Defines the structured résumé profile: contact details, skills, work
experience, education and projects.
"""

from typing import Optional

from pydantic import Field, field_validator

from .base import FrozenModel, dedupe_casefold


class ExperienceEntry(FrozenModel):
    """A single position; bullets keep their source order."""

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start: Optional[str] = None  # free text, e.g. "Jan 2019"
    end: Optional[str] = None  # free text, e.g. "Present"
    bullets: tuple[str, ...] = Field(default_factory=tuple)


class EducationEntry(FrozenModel):
    """A single school / degree line."""

    school: Optional[str] = None
    degree: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


class ProjectEntry(FrozenModel):
    """A named project with its bullets."""

    name: Optional[str] = None
    bullets: tuple[str, ...] = Field(default_factory=tuple)


class CandidateProfile(FrozenModel):
    """
    Structured résumé.

    Skills are unique under case-insensitive comparison. ``links`` is None
    when the résumé has no profile URLs at all, so renderers can tell
    "not present" apart from "present but empty".
    """

    name: Optional[str] = None
    headline: Optional[str] = None
    summary: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    links: Optional[tuple[str, ...]] = None
    skills: tuple[str, ...] = Field(default_factory=tuple)
    experience: tuple[ExperienceEntry, ...] = Field(default_factory=tuple)
    education: tuple[EducationEntry, ...] = Field(default_factory=tuple)
    projects: tuple[ProjectEntry, ...] = Field(default_factory=tuple)
    certifications: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("skills", mode="before")
    @classmethod
    def dedupe_skills(cls, v):
        """Collapse case-insensitive duplicates, keeping the first spelling."""
        if v is None:
            return ()
        return dedupe_casefold(v)

    @field_validator("links", mode="before")
    @classmethod
    def empty_links_to_none(cls, v):
        if v is not None and len(v) == 0:
            return None
        return v

    @property
    def all_bullets(self) -> list[str]:
        """Experience bullets in document order."""
        return [bullet for entry in self.experience for bullet in entry.bullets]

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.skills or self.experience or self.education)
