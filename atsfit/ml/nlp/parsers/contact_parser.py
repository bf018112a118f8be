"""
Contact information parser for résumés.

Extracts the candidate's name, headline, email, phone number and location
from the header block. Phone and location recognizers are declarative
rule tables so new locales can be added without touching the parsing loop.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional

from atsfit.ml.nlp.link_extractor import is_link_line
from atsfit.ml.nlp.preprocessor import match_section_header
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContactInfo:
    """Extracted contact information from a résumé."""

    name: Optional[str] = None
    headline: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    phone_locale: Optional[str] = None
    location: Optional[str] = None
    confidence: float = 0.0


# Locale-specific phone formats, most specific first (locale -> pattern)
PHONE_RULES: tuple[tuple[str, re.Pattern], ...] = (
    # +44 20 7946 0958, +44 (0)7700 900123
    ("UK", re.compile(r"\+44\s?(?:\(0\)\s?)?\d{2,5}[\s-]?\d{3,4}[\s-]?\d{3,4}")),
    # +61 2 9876 5432, +61 412 345 678
    ("AU", re.compile(r"\+61\s?\(?0?[2-478]\)?(?:[\s-]?\d){8}")),
    # +64 21 123 4567, +64 9 123 4567
    ("NZ", re.compile(r"\+64\s?\(?0?[2-9]\)?(?:[\s-]?\d){6,9}")),
    # +1 (415) 555-0100, +1 604 555 0100
    ("US/CA", re.compile(r"\+1[\s.-]?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")),
    # Any other international number
    ("INTL", re.compile(r"\+\d{1,3}[\s.-]?\(?\d{1,4}\)?(?:[\s.-]?\d{2,4}){2,4}")),
    # (415) 555-0100, 415.555.0100
    ("US/CA", re.compile(r"(?<!\d)\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)")),
    # 020 7946 0958, 07700 900123
    ("UK", re.compile(r"(?<!\d)0\d{2,4}[\s-]?\d{3,4}[\s-]?\d{3,4}(?!\d)")),
    # 0412 345 678, (02) 9876 5432
    ("AU", re.compile(r"(?<!\d)\(?0[2-478]\)?(?:[\s-]?\d){8}(?!\d)")),
)

# "City, Region" shapes (locale -> pattern); each must match a whole segment
LOCATION_RULES: tuple[tuple[str, re.Pattern], ...] = (
    # San Francisco, CA 94105 / Toronto, ON
    ("US/CA", re.compile(r"^[A-Z][A-Za-z.'\-]+(?:\s[A-Z][A-Za-z.'\-]+){0,3},\s*[A-Z]{2}(?:\s+\d{5}(?:-\d{4})?)?$")),
    # London, UK / Sydney, NSW, Australia / Auckland, New Zealand
    ("REGION", re.compile(
        r"^[A-Z][A-Za-z.'\-]+(?:\s[A-Z][A-Za-z.'\-]+){0,3},\s*"
        r"(?:[A-Z]{2,3},\s*)?"
        r"(?:UK|U\.K\.|United Kingdom|England|Scotland|Wales|Northern Ireland|Ireland|"
        r"USA|U\.S\.A?\.|United States|Canada|Australia|New Zealand|NZ|"
        r"NSW|VIC|QLD|WA|SA|TAS|ACT|NT|Ontario|Quebec|British Columbia|Alberta|"
        r"India|Germany|France|Netherlands|Spain|Singapore|[A-Z][a-z]+shire)$"
    )),
    # Bare city with a full US state name: Austin, Texas
    ("STATE", re.compile(
        r"^[A-Z][A-Za-z.'\-]+(?:\s[A-Z][A-Za-z.'\-]+){0,3},\s*"
        r"(?:Alabama|Alaska|Arizona|Arkansas|California|Colorado|Connecticut|Delaware|Florida|"
        r"Georgia|Hawaii|Idaho|Illinois|Indiana|Iowa|Kansas|Kentucky|Louisiana|Maine|Maryland|"
        r"Massachusetts|Michigan|Minnesota|Mississippi|Missouri|Montana|Nebraska|Nevada|"
        r"New Hampshire|New Jersey|New Mexico|New York|North Carolina|North Dakota|Ohio|"
        r"Oklahoma|Oregon|Pennsylvania|Rhode Island|South Carolina|South Dakota|Tennessee|"
        r"Texas|Utah|Vermont|Virginia|Washington|West Virginia|Wisconsin|Wyoming)$"
    )),
)

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Splits header lines such as "Engineer | London, UK | jane@x.com"
_SEGMENT_SPLIT = re.compile(r"\s*(?:\||•|·|●|\s[-–—]\s)\s*")

_TITLE_HINT = re.compile(
    r"\b(engineer|developer|manager|designer|analyst|scientist|architect|lead|director|"
    r"consultant|specialist|coordinator|executive|officer|accountant|nurse|teacher|"
    r"representative|administrator|associate|intern|strategist|marketer|recruiter)\b",
    re.IGNORECASE,
)


def find_phone(text: str) -> Optional[tuple[str, str]]:
    """
    Find the first phone number in text.

    Args:
        text: Text to scan

    Returns:
        (number as written, locale tag), or None
    """
    best: Optional[tuple[int, str, str]] = None
    for locale, pattern in PHONE_RULES:
        for match in pattern.finditer(text):
            candidate = match.group(0).strip()
            digits = re.sub(r"\D", "", candidate)
            if not 9 <= len(digits) <= 15:
                continue
            if best is None or match.start() < best[0]:
                best = (match.start(), candidate, locale)
            break
    if best is None:
        return None
    return best[1], best[2]


def is_phone_line(line: str) -> bool:
    """True when the line holds a phone number and little else."""
    stripped = line.strip()
    stripped = re.sub(r"^(?:phone|tel|mobile|cell|m|t)\s*[:.]\s*", "", stripped, flags=re.IGNORECASE)
    found = find_phone(stripped)
    if not found:
        return False
    leftover = stripped.replace(found[0], "").strip(" |,;/")
    return len(leftover) <= 3


def match_location(segment: str) -> Optional[str]:
    """Return the segment when it is a whole "City, Region" token."""
    candidate = segment.strip().strip(",;")
    if not candidate or len(candidate) > 60:
        return None
    for _locale, pattern in LOCATION_RULES:
        if pattern.match(candidate):
            return candidate
    return None


def _is_contact_line(line: str) -> bool:
    return "@" in line or "http" in line.lower() or is_link_line(line) or is_phone_line(line)


def is_location_line(line: str) -> bool:
    return match_location(line) is not None


class ContactParser:
    """Parser for extracting contact information from the résumé header block."""

    NAME_STOPWORDS = {
        "resume", "résumé", "cv", "curriculum", "vitae", "page",
        "phone", "email", "address", "linkedin", "github",
    }

    def __init__(self, header_lines: int = 8):
        self.header_lines = header_lines

    def parse(self, lines: list[str], contact_lines: Optional[list[str]] = None) -> ContactInfo:
        """
        Parse contact information.

        Args:
            lines: All non-empty résumé lines, in order
            contact_lines: Lines from explicit contact sections, if any

        Returns:
            ContactInfo with whatever could be found
        """
        header = lines[: self.header_lines]
        scan = header + list(contact_lines or [])
        scan_text = "\n".join(scan)
        full_text = "\n".join(lines)

        name = self._extract_name(header)
        headline = self._extract_headline(header, name)

        # Header block first, then anywhere (multi-column layouts move contact details)
        email = self._extract_email(scan_text) or self._extract_email(full_text)
        phone = find_phone(scan_text) or find_phone(full_text)
        location = self._extract_location(scan)

        info = ContactInfo(
            name=name,
            headline=headline,
            email=email,
            phone=phone[0] if phone else None,
            phone_locale=phone[1] if phone else None,
            location=location,
        )
        return replace(info, confidence=self._calculate_confidence(info))

    def _extract_email(self, text: str) -> Optional[str]:
        match = EMAIL_PATTERN.search(text)
        return match.group(0) if match else None

    def _extract_name(self, header: list[str]) -> Optional[str]:
        """
        Take the first non-empty, non-contact line as the name.

        Email, link and phone lines are skipped. The first other line is
        the only candidate; a name buried below a title is more likely a
        company.
        """
        for line in header:
            stripped = line.strip()
            if not stripped:
                continue
            if _is_contact_line(stripped):
                continue
            if match_section_header(stripped):
                return None

            first_segment = _SEGMENT_SPLIT.split(stripped)[0].strip(" ,")
            words = [w for w in re.split(r"\s+", first_segment) if w]
            if not 1 <= len(words) <= 5:
                return None
            if any(w.lower().strip(".,") in self.NAME_STOPWORDS for w in words):
                return None
            if not all(re.match(r"^[^\W\d_][\w.'\-]*$", w) for w in words):
                return None
            if _TITLE_HINT.search(first_segment):
                return None
            return first_segment
        return None

    def _extract_headline(self, header: list[str], name: Optional[str]) -> Optional[str]:
        """
        The line right after the name, if it reads like a role.

        Contact and location segments are dropped from the line.
        """
        lines = [line.strip() for line in header if line.strip()]
        if name:
            index = next((i for i, line in enumerate(lines) if line.startswith(name)), 0)
            candidates = lines[index + 1:index + 2]
        else:
            candidates = lines[0:2]

        for line in candidates:
            if match_section_header(line):
                return None
            segments = _SEGMENT_SPLIT.split(line)
            kept = [
                seg for seg in segments
                if seg
                and not EMAIL_PATTERN.search(seg)
                and not is_link_line(seg)
                and not is_phone_line(seg)
                and not match_location(seg)
            ]
            headline = " | ".join(kept).strip()
            if not headline or len(headline) > 120:
                continue
            if _TITLE_HINT.search(headline) or len(segments) > 1:
                return headline
        return None

    def _extract_location(self, lines: list[str]) -> Optional[str]:
        for line in lines:
            for segment in _SEGMENT_SPLIT.split(line.strip()):
                segment = re.sub(r"^(?:location|address|based in)\s*[:\-]?\s*", "", segment, flags=re.IGNORECASE)
                location = match_location(segment)
                if location:
                    return location
        return None

    def _calculate_confidence(self, info: ContactInfo) -> float:
        """Calculate confidence score for extracted contact info."""
        score = 0.0
        max_score = 5.0

        if info.email:
            score += 1.5
        if info.phone:
            score += 1.0
        if info.name:
            score += 1.5
        if info.headline:
            score += 0.5
        if info.location:
            score += 0.5

        return min(score / max_score, 1.0)
