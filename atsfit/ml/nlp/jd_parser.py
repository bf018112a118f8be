"""
Job description parser.

Extracts the title, company, requirement blocks, responsibilities,
keywords and seniority from job posting text.
"""

import re
from typing import Optional

from atsfit.data.models import JobProfile
from atsfit.data.models.base import dedupe_casefold
from atsfit.utils.constants import (
    BULLET_PREFIX,
    DOMAIN_TERMS,
    KEYWORD_ALIASES,
    TECH_TERMS,
    TECH_TERMS_EXACT,
    SeniorityLevel,
)
from atsfit.utils.logger import get_logger

from .preprocessor import preprocess_job_description

logger = get_logger(__name__)


def _term_pattern(terms: tuple[str, ...], flags: int = 0) -> re.Pattern:
    """Alternation of terms that must not touch other word characters."""
    return re.compile(rf"(?<![\w.+#/])(?:{'|'.join(terms)})(?![\w+#&/])", flags)


class JDParser:
    """
    Parser for job descriptions.

    Requirement, preferred and responsibility items are read from bullet
    lines under recognised block headers; when a posting has no headed
    requirement blocks every bullet counts as a requirement.
    """

    TITLE_WORDS = re.compile(
        r"\b(engineer|developer|manager|designer|analyst|scientist|architect|lead|director|"
        r"consultant|specialist|coordinator|executive|representative|accountant|administrator|"
        r"officer|associate|strategist|marketer|recruiter|nurse|teacher|intern)\b",
        re.IGNORECASE,
    )

    # Everything after the title on a "Title — Company" line
    TITLE_SUFFIX = re.compile(r"\s*(?:[—–|]|\s-\s|@\s+)\s*.+$")
    TITLE_AT_SUFFIX = re.compile(r"\s+at\s+[A-Z].*$")
    COMPANY_IN_TITLE = re.compile(r"(?:[—–|]|\s-\s|@\s+)\s*(.+?)(?:\s*\(|$)")
    COMPANY_AT = re.compile(r"\bat\s+([A-Z][\w&.\- ]*?)(?:[.,;:!]\s|[.,;:!]?$|\s{2}|\n)", re.MULTILINE)
    COMPANY_ABOUT = re.compile(r"^About\s+([A-Z][\w&.\- ]+?)\s*:?\s*$", re.MULTILINE)

    # Block headers, checked in this order (most specific first)
    BLOCK_HEADERS: tuple[tuple[str, re.Pattern], ...] = (
        ("preferred", re.compile(
            r"\b(nice to have|nice-to-have|preferred|bonus|desired|optional|pluses|ideally)\b", re.IGNORECASE)),
        ("required", re.compile(
            r"\b(requirements?|qualifications?|must[- ]haves?|required|what you.?ll need|"
            r"minimum|what we.?re looking for|who you are|you have|skills)\b", re.IGNORECASE)),
        ("responsibilities", re.compile(
            r"\b(responsibilities|what you.?ll do|duties|the role|your role|in this role|"
            r"day[- ]to[- ]day|you will)\b", re.IGNORECASE)),
        ("other", re.compile(
            r"\b(about|benefits|perks|compensation|we offer|overview|salary|location|"
            r"how to apply|equal opportunity)\b", re.IGNORECASE)),
    )

    MAX_HEADER_CHARS = 80

    TECH_PATTERN = _term_pattern(TECH_TERMS, re.IGNORECASE)
    TECH_EXACT_PATTERN = _term_pattern(TECH_TERMS_EXACT)
    DOMAIN_PATTERN = _term_pattern(DOMAIN_TERMS, re.IGNORECASE)

    # Capitalised multi-word phrases such as "Redis Streams"
    CAPITALIZED_PHRASE = re.compile(r"\b[A-Z][\w.+#-]*(?:\s+[A-Z][\w.+#-]*){1,3}\b")
    PHRASE_STOPWORDS = {"the", "a", "an", "and", "or", "with", "our", "we", "you", "your", "in", "of"}

    SENIORITY_RULES: tuple[tuple[SeniorityLevel, re.Pattern], ...] = (
        (SeniorityLevel.PRINCIPAL, re.compile(r"\b(principal|staff|distinguished|fellow)\b")),
        (SeniorityLevel.DIRECTOR, re.compile(r"\b(director|vp|vice president|head of)\b")),
        (SeniorityLevel.SENIOR, re.compile(r"\b(senior|sr\.?|lead)\b")),
        (SeniorityLevel.MANAGER, re.compile(r"\b(manager|engineering manager)\b")),
        (SeniorityLevel.MID, re.compile(r"\b(mid[- ]?level|intermediate)\b")),
        (SeniorityLevel.JUNIOR, re.compile(r"\b(junior|jr\.?|entry[- ]?level|associate|intern)\b")),
    )
    YEARS_RULES: tuple[tuple[SeniorityLevel, re.Pattern], ...] = (
        (SeniorityLevel.SENIOR, re.compile(r"\b(?:[5-9]|1\d)\+\s*years?\b")),
        (SeniorityLevel.MID, re.compile(r"\b[34]\+\s*years?\b")),
        (SeniorityLevel.JUNIOR, re.compile(r"\b[0-2]\+\s*years?\b")),
    )

    def parse(self, text: str) -> JobProfile:
        """
        Parse job description text.

        Args:
            text: Raw posting text

        Returns:
            JobProfile (never raises on user input)
        """
        cleaned = preprocess_job_description(text or "")
        if not cleaned:
            logger.debug("Empty job description, returning empty profile")
            return JobProfile()

        lines = [line.strip() for line in cleaned.split("\n") if line.strip()]

        title = self._extract_title(lines)
        company = self._extract_company(lines, cleaned)
        blocks = self._extract_blocks(lines)
        keywords = self._extract_keywords(cleaned, blocks["required"], blocks["preferred"])
        seniority = self._detect_seniority(title, cleaned)

        profile = JobProfile(
            title=title,
            company=company,
            required_skills=blocks["required"],
            preferred_skills=blocks["preferred"],
            responsibilities=blocks["responsibilities"],
            keywords=keywords,
            seniority_level=seniority,
        )
        logger.debug(
            f"Parsed job description: title={title!r}, {len(profile.required_skills)} required, "
            f"{len(profile.preferred_skills)} preferred, {len(profile.keywords)} keywords, "
            f"seniority={seniority}"
        )
        return profile

    def _extract_title(self, lines: list[str]) -> Optional[str]:
        for line in lines[:3]:
            if self.TITLE_WORDS.search(line) and not re.match(BULLET_PREFIX, line):
                title = self.TITLE_SUFFIX.sub("", line)
                title = self.TITLE_AT_SUFFIX.sub("", title)
                title = re.sub(r"\s*\(.+\)$", "", title).strip()
                if title and len(title) <= 100:
                    return title
        if lines and len(lines[0]) <= 100:
            return lines[0]
        return None

    def _extract_company(self, lines: list[str], text: str) -> Optional[str]:
        if lines:
            match = self.COMPANY_IN_TITLE.search(lines[0])
            if match and match.group(1).strip():
                return match.group(1).strip()

        about = self.COMPANY_ABOUT.search(text)
        if about and about.group(1).strip().lower() not in {"the role", "us", "the company", "the team", "you"}:
            return about.group(1).strip()

        at_match = self.COMPANY_AT.search(text)
        if at_match:
            return at_match.group(1).strip()
        return None

    def _classify_header(self, line: str) -> Optional[str]:
        if len(line) >= self.MAX_HEADER_CHARS or re.match(BULLET_PREFIX, line):
            return None
        for block, pattern in self.BLOCK_HEADERS:
            if pattern.search(line):
                return block
        return None

    def _extract_blocks(self, lines: list[str]) -> dict[str, list[str]]:
        """Route bullet items to the block whose header precedes them."""
        blocks: dict[str, list[str]] = {"required": [], "preferred": [], "responsibilities": []}
        all_bullets: list[str] = []
        current: Optional[str] = None

        for line in lines:
            if re.match(BULLET_PREFIX, line):
                content = re.sub(BULLET_PREFIX, "", line).strip()
                if len(content) <= 3:
                    continue
                all_bullets.append(content)
                if current in blocks:
                    blocks[current].append(content)
                continue

            # "Requirements: Python, SQL" header with inline items
            inline = re.match(r"^([^:]{2,40}):\s*(.+)$", line)
            header = self._classify_header(inline.group(1) if inline else line)
            if header is None:
                continue
            current = header
            if inline and current in blocks:
                items = [i.strip(" .") for i in re.split(r"[;,]", inline.group(2))]
                blocks[current].extend(i for i in items if len(i) > 3 or i.isupper())

        if not blocks["required"] and not blocks["preferred"]:
            blocks["required"] = [b for b in all_bullets if b not in blocks["responsibilities"]]
        return blocks

    def _extract_keywords(self, text: str, required: list[str], preferred: list[str]) -> list[str]:
        """
        Derive keywords from known terms, capitalised phrases in the
        requirement lists and short requirement items.
        """
        found: list[tuple[int, str]] = []
        for pattern in (self.TECH_PATTERN, self.TECH_EXACT_PATTERN, self.DOMAIN_PATTERN):
            for match in pattern.finditer(text):
                found.append((match.start(), normalize_keyword(match.group(0))))
        found.sort(key=lambda item: item[0])
        keywords = [keyword for _position, keyword in found]

        for item in required + preferred:
            for match in self.CAPITALIZED_PHRASE.finditer(item):
                phrase = match.group(0)
                words = phrase.split()
                if match.start() == 0 and not self._is_term(words[0]):
                    # Sentence-initial capital ("Strong Python") is not part of a name
                    continue
                if any(w.lower() in self.PHRASE_STOPWORDS for w in words):
                    continue
                keywords.append(normalize_keyword(phrase))

        # Short items are kept whole only when they name nothing the patterns know
        for item in required + preferred:
            if len(item.split()) <= 3 and len(item) < 30 and not self._has_term(item):
                keywords.append(item.rstrip("."))

        return list(dedupe_casefold(keywords))

    def _has_term(self, item: str) -> bool:
        return any(
            pattern.search(item)
            for pattern in (self.TECH_PATTERN, self.TECH_EXACT_PATTERN, self.DOMAIN_PATTERN)
        )

    def _is_term(self, word: str) -> bool:
        return bool(
            self.TECH_PATTERN.fullmatch(word)
            or self.TECH_EXACT_PATTERN.fullmatch(word)
            or self.DOMAIN_PATTERN.fullmatch(word)
        )

    def _detect_seniority(self, title: Optional[str], text: str) -> str:
        """Level words in the title first, then the posting, then required years."""
        for source in (title or "", text):
            lower = source.lower()
            for level, pattern in self.SENIORITY_RULES:
                if pattern.search(lower):
                    return level.value
        lower = text.lower()
        for level, pattern in self.YEARS_RULES:
            if pattern.search(lower):
                return level.value
        return SeniorityLevel.MID.value


def normalize_keyword(keyword: str) -> str:
    """Canonical spelling for common keyword variants ("nodejs" -> "Node.js")."""
    return KEYWORD_ALIASES.get(keyword.lower(), keyword)


# Singleton instance
_jd_parser: Optional[JDParser] = None


def get_jd_parser() -> JDParser:
    """Get the job description parser singleton instance."""
    global _jd_parser
    if _jd_parser is None:
        _jd_parser = JDParser()
    return _jd_parser


def parse_job_description(text: str) -> JobProfile:
    """Parse job posting text into a JobProfile."""
    return get_jd_parser().parse(text)
