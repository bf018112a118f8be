"""
Résumé section parsers.

Each parser extracts one kind of information (contact details, skills,
experience, education, projects, summary, certifications) from résumé lines.
"""

from .contact_parser import ContactParser, ContactInfo, find_phone, match_location
from .skills_parser import SkillsParser
from .experience_parser import ExperienceParser, extract_dates, looks_like_accomplishment
from .education_parser import EducationParser
from .projects_parser import ProjectsParser
from .summary_parser import SummaryParser
from .certifications_parser import CertificationsParser

__all__ = [
    "ContactParser",
    "ContactInfo",
    "find_phone",
    "match_location",
    "SkillsParser",
    "ExperienceParser",
    "extract_dates",
    "looks_like_accomplishment",
    "EducationParser",
    "ProjectsParser",
    "SummaryParser",
    "CertificationsParser",
]
