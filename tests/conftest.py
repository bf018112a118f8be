"""
Shared test fixtures for the atsfit test suite.

Sets the environment before any atsfit imports so settings load in testing
mode, then provides sample texts and factory fixtures for profiles.
"""

import os

# === Set environment BEFORE any atsfit imports ===
os.environ.setdefault("ATSFIT_ENVIRONMENT", "testing")

from typing import Any, Optional

import pytest

from atsfit.data.models import (
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    JobProfile,
    ProjectEntry,
)
from atsfit.utils.config import reload_settings


# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

SAMPLE_RESUME = """SARAH CHEN
Senior Software Engineer
sarah.chen@email.com | (415) 555-0123 | San Francisco, CA
linkedin.com/in/sarahchen | github.com/sarahchen

SUMMARY
Full-stack engineer with 7 years of experience building scalable web applications.

EXPERIENCE
Senior Software Engineer at Acme Corp, San Francisco, CA
Jan 2021 - Present
• Led migration of monolith to microservices, reducing deploy time by 60%
• Mentored 4 engineers and established code review practices
• Responsible for the payments API serving 2M requests per day

Software Engineer at StartupXYZ, Remote
Jun 2018 - Dec 2020
• Built real-time analytics dashboard with React and Node.js
• Helped with database optimization

Junior Developer | WebAgency | 2017 - 2018
• Developed client websites using HTML, CSS and JavaScript

EDUCATION
B.S. Computer Science — UC Berkeley, 2017

SKILLS
Python, JavaScript, TypeScript, React, Node.js, PostgreSQL, AWS, Docker
"""

# Text as extracted from a two-column PDF: sidebar blocks are interleaved
# with the experience column.
MULTI_COLUMN_RESUME = """JORDAN LEE
Product-minded Software Engineer
EXPERIENCE
Senior Engineer at Northwind Labs, Seattle, WA
Mar 2021 - Present
• Reduced checkout latency by 35% across 3 services
SKILLS
Python, Go, Kubernetes
• Shipped self-serve onboarding flow used by 12K customers
CONTACT
(206) 555-0147
jordan.lee@example.com
Company: Contoso Ltd
Title: Software Engineer
Roles and responsibilities:
• Migrated billing jobs to Kubernetes, cutting costs by $40K per year
LINKS
github.com/jordanlee
Sofware Enginer at Fabrikam, Portland, OR
• Automated nightly data exports for 200 clients
EDUCATION
B.S. Computer Science, University of Washington, 2016
"""

SAMPLE_JD = """Senior Backend Engineer — BigCo

About BigCo
BigCo builds payments infrastructure used by thousands of merchants.

Responsibilities
• Design and build scalable backend services and APIs
• Mentor engineers and lead code reviews

Requirements
• 5+ years of experience with Python or Go
• Experience with PostgreSQL and Redis
• Strong understanding of distributed systems

Nice to have
• Kubernetes
• Experience with Kafka
"""


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def multi_column_resume_text() -> str:
    return MULTI_COLUMN_RESUME


@pytest.fixture
def sample_jd_text() -> str:
    return SAMPLE_JD


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def fresh_settings(monkeypatch):
    """
    Reload settings after the test has patched the environment.

    Usage: ``monkeypatch.setenv(...)`` first, then call the fixture's result.
    The global settings are reloaded again on teardown.
    """
    yield reload_settings
    monkeypatch.undo()
    reload_settings()


# ---------------------------------------------------------------------------
# Factory fixtures for profiles
# ---------------------------------------------------------------------------


@pytest.fixture
def make_experience():
    """Factory that returns a callable to build ExperienceEntry models."""

    def _factory(
        title: Optional[str] = "Software Engineer",
        company: Optional[str] = "Acme Corp",
        start: Optional[str] = "2019",
        end: Optional[str] = "Present",
        bullets: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> ExperienceEntry:
        return ExperienceEntry(
            title=title,
            company=company,
            start=start,
            end=end,
            bullets=tuple(bullets or []),
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_candidate(make_experience):
    """Factory that returns a callable to build CandidateProfile models."""

    def _factory(
        skills: Optional[list[str]] = None,
        bullets: Optional[list[str]] = None,
        experience: Optional[list[ExperienceEntry]] = None,
        education: Optional[list[EducationEntry]] = None,
        projects: Optional[list[ProjectEntry]] = None,
        **kwargs: Any,
    ) -> CandidateProfile:
        if experience is None:
            experience = [make_experience(bullets=bullets)] if bullets is not None else []
        return CandidateProfile(
            name=kwargs.pop("name", "Alex Morgan"),
            skills=tuple(skills or []),
            experience=tuple(experience),
            education=tuple(education or []),
            projects=tuple(projects or []),
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_job():
    """Factory that returns a callable to build JobProfile models."""

    def _factory(
        title: Optional[str] = "Software Engineer",
        required: Optional[list[str]] = None,
        preferred: Optional[list[str]] = None,
        keywords: Optional[list[str]] = None,
        responsibilities: Optional[list[str]] = None,
        seniority: Optional[str] = "Mid",
        **kwargs: Any,
    ) -> JobProfile:
        return JobProfile(
            title=title,
            required_skills=tuple(required or []),
            preferred_skills=tuple(preferred or []),
            keywords=tuple(keywords or []),
            responsibilities=tuple(responsibilities or []),
            seniority_level=seniority,
            **kwargs,
        )

    return _factory


@pytest.fixture
def senior_engineer(make_candidate, make_experience):
    """A fully populated engineering candidate."""
    return make_candidate(
        name="Sam Rivera",
        headline="Senior Backend Engineer",
        summary="Backend engineer focused on payments and reliability.",
        skills=["Python", "Go", "PostgreSQL", "Redis", "Docker", "AWS"],
        experience=[
            make_experience(
                title="Senior Backend Engineer",
                company="Payly",
                start="2019",
                end="Present",
                bullets=[
                    "Led migration of the billing platform to Go, reducing p99 latency by 40%",
                    "Mentored 5 engineers across two teams",
                ],
            ),
            make_experience(
                title="Software Engineer",
                company="Shopline",
                start="2015",
                end="2019",
                bullets=["Built order pipeline processing 1M transactions per day"],
            ),
        ],
        education=[EducationEntry(school="University of Texas", degree="B.S. Computer Science", end="2015")],
    )
