"""
Skills parser for résumés.

Tokenizes a delimited skills section into discrete skill strings and falls
back to a scan for well-known technologies when no section exists.
"""

import re
from typing import Optional

from atsfit.data.models.base import dedupe_casefold
from atsfit.ml.nlp.parsers.experience_parser import looks_like_accomplishment
from atsfit.utils.constants import BULLET_PREFIX, SKILL_DELIMITERS
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


class SkillsParser:
    """Parser for extracting skills from résumé text."""

    # Well-known skills recognised anywhere in the text (pattern, display name)
    COMMON_SKILLS: tuple[tuple[str, str], ...] = (
        (r"JavaScript", "JavaScript"), (r"TypeScript", "TypeScript"), (r"Python", "Python"),
        (r"Java", "Java"), (r"C\+\+", "C++"), (r"C#", "C#"), (r"Rust", "Rust"),
        (r"Ruby", "Ruby"), (r"PHP", "PHP"), (r"React", "React"), (r"Angular", "Angular"),
        (r"Vue", "Vue"), (r"Next\.js", "Next.js"), (r"Node\.js", "Node.js"),
        (r"Express", "Express"), (r"Django", "Django"), (r"Flask", "Flask"),
        (r"Spring", "Spring"), (r"AWS", "AWS"), (r"GCP", "GCP"), (r"Azure", "Azure"),
        (r"Docker", "Docker"), (r"Kubernetes", "Kubernetes"), (r"Terraform", "Terraform"),
        (r"PostgreSQL", "PostgreSQL"), (r"MongoDB", "MongoDB"), (r"MySQL", "MySQL"),
        (r"Redis", "Redis"), (r"GraphQL", "GraphQL"), (r"REST", "REST"), (r"Git", "Git"),
        (r"CI/CD", "CI/CD"), (r"Agile", "Agile"), (r"Scrum", "Scrum"), (r"HTML", "HTML"),
        (r"CSS", "CSS"), (r"Tailwind", "Tailwind"), (r"SASS", "SASS"),
        (r"Machine Learning", "Machine Learning"), (r"Deep Learning", "Deep Learning"),
        (r"NLP", "NLP"), (r"SQL", "SQL"), (r"NoSQL", "NoSQL"), (r"Firebase", "Firebase"),
        (r"Salesforce", "Salesforce"), (r"HubSpot", "HubSpot"), (r"Excel", "Excel"),
        (r"Tableau", "Tableau"), (r"Power BI", "Power BI"), (r"SEO", "SEO"),
        (r"Google Analytics", "Google Analytics"), (r"Figma", "Figma"),
    )

    # "Skills: Python, Go" on a single line anywhere in the document
    INLINE_SKILLS = re.compile(
        r"^(?:technical\s+)?(?:skills|technologies|tech stack|tools)\s*:\s*(?P<items>.+)$",
        re.IGNORECASE,
    )

    MAX_SKILL_CHARS = 50
    MAX_SKILL_WORDS = 4

    SKIP_WORDS = {
        "and", "or", "the", "with", "using", "including", "etc", "years",
        "experience", "knowledge", "familiar", "proficient", "skills",
    }

    def parse(self, section_lines: list[str], full_text: str = "") -> list[str]:
        """
        Parse skills.

        Args:
            section_lines: Lines from the skills section(s), in order
            full_text: Whole résumé, scanned for inline skill lines and
                well-known skills when the section yields nothing

        Returns:
            Case-insensitively unique skills in first-seen order
        """
        skills: list[str] = []
        for line in section_lines:
            skills.extend(self.parse_line(line))

        if not skills and full_text:
            for line in full_text.splitlines():
                inline = self.INLINE_SKILLS.match(line.strip())
                if inline:
                    skills.extend(self._split_items(inline.group("items")))

        if not skills and full_text:
            skills = self._extract_known_skills(full_text)

        result = list(dedupe_casefold(skills))
        logger.debug(f"Extracted {len(result)} skills")
        return result

    def parse_line(self, line: str) -> list[str]:
        """Split one skills-section line into skill strings."""
        stripped = line.strip()
        if not stripped or looks_like_accomplishment(stripped):
            return []

        stripped = re.sub(BULLET_PREFIX, "", stripped).strip()
        if ":" in stripped:
            # "Category: skill1, skill2"
            stripped = stripped.split(":", 1)[1]
        return self._split_items(stripped)

    def _split_items(self, text: str) -> list[str]:
        items = []
        for candidate in _split_outside_parens(text, SKILL_DELIMITERS):
            cleaned = self._clean_skill_name(candidate)
            if cleaned:
                items.append(cleaned)
        return items

    def _clean_skill_name(self, name: str) -> Optional[str]:
        """Clean and validate a skill name."""
        name = re.sub(r"^[-–—*\s]+", "", name).strip().rstrip(".")
        if not name or len(name) >= self.MAX_SKILL_CHARS:
            return None
        if len(name.split()) > self.MAX_SKILL_WORDS:
            return None
        if name.isdigit() or name.lower() in self.SKIP_WORDS:
            return None
        return name

    def _extract_known_skills(self, text: str) -> list[str]:
        """Extract mentions of well-known skills from free text."""
        found = []
        for pattern, display in self.COMMON_SKILLS:
            if re.search(rf"(?<![\w.+#]){pattern}(?![\w+#])", text, re.IGNORECASE):
                found.append(display)
        return found


def _split_outside_parens(text: str, delimiters: str) -> list[str]:
    """Split on delimiter characters, keeping "AWS (EC2, S3)" in one piece."""
    delimiter = re.compile(delimiters)
    parts: list[str] = []
    depth = 0
    buffer: list[str] = []
    for char in text:
        if char in "([":
            depth += 1
        elif char in ")]" and depth:
            depth -= 1
        if depth == 0 and delimiter.fullmatch(char):
            parts.append("".join(buffer))
            buffer = []
            continue
        buffer.append(char)
    parts.append("".join(buffer))
    return [part.strip() for part in parts if part.strip()]
