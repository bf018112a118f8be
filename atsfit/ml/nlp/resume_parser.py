"""
Main résumé parser orchestrator.

Coordinates preprocessing, section detection and the per-section parsers
to turn free-form résumé text into a CandidateProfile. Parsing is
best-effort: any input, including empty or garbled text, yields a valid
profile with empty collections where nothing could be extracted.
"""

from typing import Optional

from atsfit.data.models import CandidateProfile
from atsfit.utils.config import get_settings
from atsfit.utils.logger import get_logger

from .link_extractor import extract_links, find_links_block, is_link_line
from .parsers import (
    CertificationsParser,
    ContactParser,
    EducationParser,
    ExperienceParser,
    ProjectsParser,
    SkillsParser,
    SummaryParser,
)
from .preprocessor import match_section_header, preprocess_resume

logger = get_logger(__name__)


class ResumeParser:
    """
    Main résumé parser that orchestrates the parsing pipeline.

    Pipeline:
    1. Normalize and cap the text
    2. Split it into lines and group them by section header
    3. Extract contact details from the header block
    4. Extract skills, experience, education, projects, summary, certifications
    5. Merge profile links from the text and any explicit link block
    """

    def __init__(self, header_lines: Optional[int] = None):
        """Initialize the résumé parser with all component parsers."""
        self.contact_parser = ContactParser(
            header_lines=header_lines or get_settings().parser.header_scan_lines
        )
        self.skills_parser = SkillsParser()
        self.experience_parser = ExperienceParser()
        self.education_parser = EducationParser()
        self.projects_parser = ProjectsParser()
        self.summary_parser = SummaryParser()
        self.certifications_parser = CertificationsParser()

    def parse(self, text: str) -> CandidateProfile:
        """
        Parse résumé text.

        Args:
            text: Raw résumé text

        Returns:
            CandidateProfile (never raises on user input)
        """
        cleaned = preprocess_resume(text or "")
        if not cleaned:
            logger.debug("Empty résumé text, returning empty profile")
            return CandidateProfile()

        lines = [line for line in cleaned.split("\n") if line.strip()]
        sections = self.group_sections(lines)

        contact = self.contact_parser.parse(lines, sections.get("contact"))
        skills = self.skills_parser.parse(sections.get("skills", []), cleaned)
        experience = self.experience_parser.parse(lines)
        education = self.education_parser.parse(sections.get("education", []))
        projects = self.projects_parser.parse(sections.get("projects", []))
        summary = self.summary_parser.parse(sections.get("summary", []))
        certifications = self.certifications_parser.parse(sections.get("certifications", []))

        explicit_links = find_links_block(text or "")
        explicit_links += [line for line in sections.get("links", []) if is_link_line(line)]
        links = extract_links(cleaned, explicit_links)

        profile = CandidateProfile(
            name=contact.name,
            headline=contact.headline,
            summary=summary,
            email=contact.email,
            phone=contact.phone,
            location=contact.location,
            links=tuple(links) if links else None,
            skills=skills,
            experience=experience,
            education=education,
            projects=projects,
            certifications=certifications,
        )

        logger.debug(
            f"Parsed résumé: {len(profile.skills)} skills, "
            f"{len(profile.experience)} positions, {len(profile.education)} education, "
            f"{len(profile.projects)} projects, contact confidence {contact.confidence:.2f}"
        )
        return profile

    def group_sections(self, lines: list[str]) -> dict[str, list[str]]:
        """
        Group lines under the section header that precedes them.

        Lines before the first header go under ``"header"``. A section
        that appears more than once (common in multi-column layouts)
        accumulates all of its lines.
        """
        sections: dict[str, list[str]] = {}
        current = "header"
        for line in lines:
            section_type = match_section_header(line)
            if section_type:
                current = section_type
                sections.setdefault(current, [])
                continue
            sections.setdefault(current, []).append(line)
        return sections


# Singleton instance
_resume_parser: Optional[ResumeParser] = None


def get_resume_parser() -> ResumeParser:
    """Get the résumé parser singleton instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = ResumeParser()
    return _resume_parser


def parse_resume(text: str) -> CandidateProfile:
    """Parse résumé text into a CandidateProfile."""
    return get_resume_parser().parse(text)
