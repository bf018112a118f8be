"""
Text preprocessing utilities for résumé and job-description parsing.

Handles normalization, boundary-aware truncation and section detection.
Every function here is total: any string in, a string (or structure of
strings) out.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from atsfit.utils.config import get_settings
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


# Common section headers in résumés, by section type
SECTION_HEADERS: dict[str, list[str]] = {
    "summary": [
        "summary", "professional summary", "profile", "professional profile",
        "objective", "career objective", "about", "about me", "overview",
        "executive summary", "career summary",
    ],
    "experience": [
        "experience", "work experience", "professional experience",
        "employment", "employment history", "work history", "career history",
        "relevant experience", "professional background",
    ],
    "education": [
        "education", "academic background", "educational background",
        "education and training", "academic qualifications",
    ],
    "skills": [
        "skills", "technical skills", "core competencies", "competencies",
        "key skills", "areas of expertise", "expertise", "technologies",
        "tools", "tech stack", "skills and tools",
    ],
    "projects": [
        "projects", "personal projects", "key projects", "selected projects",
        "side projects", "notable projects",
    ],
    "certifications": [
        "certifications", "certificates", "licenses", "licenses and certifications",
        "certifications and licenses", "credentials",
    ],
    "links": [
        "links", "online profiles", "profiles", "social", "portfolio",
    ],
    "contact": [
        "contact", "contact information", "contact details", "personal details",
    ],
    "languages": ["languages", "language skills"],
    "interests": ["interests", "hobbies", "hobbies and interests", "activities"],
    "awards": ["awards", "honors", "honours", "achievements", "awards and honors"],
    "publications": ["publications", "research"],
    "volunteer": ["volunteer", "volunteering", "volunteer experience"],
    "references": ["references", "referees"],
}

# Sections a multi-column layout typically places in a sidebar
SIDEBAR_SECTIONS: frozenset[str] = frozenset(
    {"skills", "links", "contact", "languages", "interests", "awards", "references"}
)

# Small words allowed in lowercase inside a title-cased header
_HEADER_SMALL_WORDS = frozenset({"and", "of", "the", "&", "in", "for", "a"})

_HEADER_LOOKUP: dict[str, str] = {
    variant: section_type
    for section_type, variants in SECTION_HEADERS.items()
    for variant in variants
}

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_SENTENCE_END = re.compile(r"[.!?](?=\s)")
_HEADER_DECORATION = re.compile(r"^(?:#{1,3}\s*|[\d]{1,2}[.)]\s+|[=\-*_~]+\s*)|(?:\s*[=\-*_~]+)$")


@dataclass(frozen=True)
class PreprocessedSections:
    """Section map of a normalized résumé."""

    sections: dict[str, str] = field(default_factory=dict)
    raw_text: str = ""

    def get(self, section_type: str) -> Optional[str]:
        return self.sections.get(section_type)


def normalize_text(text: str) -> str:
    """
    Normalize raw text.

    Removes null bytes and other control characters, converts ``\\r\\n``
    and bare ``\\r`` to ``\\n``, collapses runs of horizontal whitespace
    to one space and runs of blank lines to one blank line, and trims the
    ends. Idempotent.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        Normalized text
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _CONTROL_CHARS.sub("", text)
    text = _HORIZONTAL_WS.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _EXCESS_BLANK_LINES.sub("\n\n", text)
    return text.strip()


def smart_truncate(text: str, max_length: int) -> str:
    """
    Truncate text without cutting through a paragraph or sentence when avoidable.

    Searches backward from ``max_length`` for a paragraph break, then a
    sentence end, then a word boundary, and hard-cuts otherwise. The result
    is never longer than ``max_length``.

    Args:
        text: Text to truncate
        max_length: Maximum number of characters to keep

    Returns:
        ``text`` unchanged when it already fits, else a prefix of it
    """
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text

    window = text[:max_length]

    paragraph = window.rfind("\n\n")
    if paragraph > max_length * 0.7:
        return window[:paragraph].rstrip()

    # Keep the terminal punctuation of the last complete sentence
    sentence_ends = [m.start() for m in _SENTENCE_END.finditer(window)]
    if sentence_ends and sentence_ends[-1] > max_length * 0.8:
        return window[: sentence_ends[-1] + 1].rstrip()

    space = window.rfind(" ")
    if space > max_length * 0.9:
        return window[:space].rstrip()

    return window


def preprocess_resume(text: str, max_length: Optional[int] = None) -> str:
    """Normalize résumé text and cap it at the résumé ceiling (50,000 by default)."""
    limit = max_length or get_settings().parser.resume_max_chars
    return smart_truncate(normalize_text(text), limit)


def preprocess_job_description(text: str, max_length: Optional[int] = None) -> str:
    """Normalize job-description text and cap it at the JD ceiling (30,000 by default)."""
    limit = max_length or get_settings().parser.jd_max_chars
    return smart_truncate(normalize_text(text), limit)


def condense_job_description(text: str) -> str:
    """Job description trimmed to the ceiling used for downstream generators."""
    return smart_truncate(normalize_text(text), get_settings().parser.jd_context_chars)


def match_section_header(line: str) -> Optional[str]:
    """
    Identify a résumé section header.

    A header is a short line, written in title case or capitals, whose text
    (minus decoration and one trailing colon) is a known header variant.
    Lines carrying content after a colon ("Skills: Python, Go") and labels
    outside the vocabulary ("Roles and responsibilities:", "Company:")
    are not headers.

    Args:
        line: A single line of text

    Returns:
        The section type, or None
    """
    stripped = line.strip()
    if not stripped or len(stripped) > 40:
        return None

    label = _HEADER_DECORATION.sub("", stripped).strip()
    if label.endswith(":"):
        label = label[:-1].rstrip()
    if not label or ":" in label:
        return None

    if not _is_header_cased(label):
        return None

    normalized = re.sub(r"[^a-z&\s]", "", label.lower())
    normalized = re.sub(r"\s+", " ", normalized).strip()
    if normalized in _HEADER_LOOKUP:
        return _HEADER_LOOKUP[normalized]
    if normalized.endswith("s") and normalized[:-1] in _HEADER_LOOKUP:
        return _HEADER_LOOKUP[normalized[:-1]]
    return None


def _is_header_cased(label: str) -> bool:
    """Check for ALL CAPS or Title Case (small joining words excepted)."""
    letters = [c for c in label if c.isalpha()]
    if not letters:
        return False
    if all(c.isupper() for c in letters):
        return True
    words = [w for w in re.split(r"[\s/]+", label) if w]
    for index, word in enumerate(words):
        if index > 0 and word.lower() in _HEADER_SMALL_WORDS:
            continue
        first = next((c for c in word if c.isalpha()), None)
        if first is not None and not first.isupper():
            return False
    return True


def extract_resume_sections(text: str) -> PreprocessedSections:
    """
    Split a résumé into named sections.

    Lines before the first header are stored under ``"header"``. Repeated
    sections (common in multi-column layouts) are concatenated.

    Args:
        text: Raw résumé text

    Returns:
        PreprocessedSections with section type -> content
    """
    normalized = normalize_text(text)
    collected: dict[str, list[str]] = {}
    current = "header"

    for line in normalized.split("\n"):
        section_type = match_section_header(line)
        if section_type:
            current = section_type
            collected.setdefault(current, [])
            continue
        collected.setdefault(current, []).append(line)

    sections = {
        name: "\n".join(lines).strip()
        for name, lines in collected.items()
        if "\n".join(lines).strip()
    }
    logger.debug(f"Detected résumé sections: {sorted(sections)}")
    return PreprocessedSections(sections=sections, raw_text=normalized)


# Order in which sections are kept when condensing a résumé
_STRUCTURED_PRIORITY = (
    "experience", "skills", "summary", "education",
    "projects", "certifications", "header",
)


def build_structured_resume(text: str, max_length: Optional[int] = None) -> str:
    """
    Condense a résumé into bracket-tagged sections within a character ceiling.

    Experience and skills are kept first; the last section that does not
    fit is truncated at a boundary. Falls back to plain truncation when no
    section is recognised.

    Args:
        text: Raw résumé text
        max_length: Ceiling (defaults to PARSER_RESUME_CONTEXT_CHARS)

    Returns:
        Condensed résumé text no longer than the ceiling
    """
    limit = max_length or get_settings().parser.resume_context_chars
    extracted = extract_resume_sections(text)

    parts: list[str] = []
    total = 0
    for name in _STRUCTURED_PRIORITY:
        content = extracted.get(name)
        if not content:
            continue
        block = f"[{name.upper()}]\n{content}\n"
        separator = 1 if parts else 0
        if total + separator + len(block) > limit:
            tag = f"[{name.upper()}]\n"
            remaining = limit - total - separator - len(tag) - 1
            if remaining > 100:
                parts.append(f"{tag}{smart_truncate(content, remaining)}\n")
            break
        parts.append(block)
        total += separator + len(block)

    if not parts:
        return smart_truncate(extracted.raw_text, limit)
    return smart_truncate("\n".join(parts), limit)
