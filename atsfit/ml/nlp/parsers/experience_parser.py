"""
Work experience parser for résumés.

Re-assembles positions from the résumé line stream. Text
extracted from multi-column PDFs interleaves sidebar content (skills,
contact, links) with the experience column, so the parser keeps reading
past sidebar headers: a position line reopens the experience stream and
bullets inside a sidebar stay with the open position. Inside education
and certifications only work-like bullets are borrowed back.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from atsfit.data.models import ExperienceEntry
from atsfit.ml.nlp.link_extractor import is_link_line
from atsfit.ml.nlp.parsers.contact_parser import EMAIL_PATTERN, is_phone_line, match_location
from atsfit.ml.nlp.preprocessor import SIDEBAR_SECTIONS, match_section_header
from atsfit.utils.constants import BULLET_PREFIX, STRONG_ACTION_VERBS
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?|"
    r"sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?|"
    r"spring|summer|fall|autumn|winter)"
)
_DATE_TOKEN = rf"(?:{_MONTH}\.?,?\s*(?:19|20)\d{{2}}|\d{{1,2}}/(?:19|20)\d{{2}}|(?:19|20)\d{{2}})"
_OPEN_END = r"(?:present|current|now|ongoing|today)"

DATE_RANGE_PATTERN = re.compile(
    rf"\b({_DATE_TOKEN})\s*(?:[-–—]+|to|until)\s*({_DATE_TOKEN}|{_OPEN_END})\b",
    re.IGNORECASE,
)
SINGLE_DATE_PATTERN = re.compile(rf"\b({_DATE_TOKEN})\b", re.IGNORECASE)

_ACCOMPLISHMENT_METRIC = re.compile(
    r"\d+\s*%|\$\s?\d|\b\d+[kKmM]?\+?\s+(?:users?|customers?|clients?|people|engineers?|"
    r"projects?|accounts?|teams?|members?|reports?|hires?|deals?|stores?|sites?|"
    r"students?|patients?|events?|transactions?|requests?|records?)\b",
    re.IGNORECASE,
)

_NON_VERB_ING = frozenset({"during", "morning", "evening", "spring", "string", "nothing", "something"})

# Closing sections whose accomplishment bullets are stray experience
# lines from a second column; projects and volunteer keep their own
BORROWING_SECTIONS: frozenset[str] = frozenset({"education", "certifications"})
_ACADEMIC_PATTERN = re.compile(
    r"\b(?:gpa|graduated|dean'?s list|cum laude|honou?rs|thesis|coursework|major|minor|scholarship)\b",
    re.IGNORECASE,
)


def extract_dates(text: str) -> tuple[Optional[str], Optional[str], str]:
    """
    Pull a date range (or a lone date) out of a line.

    Args:
        text: Line to scan

    Returns:
        (start, end, remainder) where remainder is the line without the
        dates and the brackets/commas that wrapped them
    """
    match = DATE_RANGE_PATTERN.search(text)
    if match:
        start, end = match.group(1).strip(), match.group(2).strip()
    else:
        match = SINGLE_DATE_PATTERN.search(text)
        if not match:
            return None, None, text
        start, end = match.group(1).strip(), None

    remainder = text[: match.start()] + " " + text[match.end():]
    remainder = re.sub(r"\(\s*\)|\[\s*\]", " ", remainder)
    remainder = re.sub(r"\s+", " ", remainder).strip(" ,;|—–-()")
    return start, end, remainder


@dataclass
class _Position:
    """A recognised position line (every field optional)."""

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.title and self.company)


@dataclass
class _EntryBuilder:
    """Mutable accumulator frozen into an ExperienceEntry at the end."""

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    bullets: list[str] = field(default_factory=list)

    def absorb(self, position: _Position) -> None:
        self.title = self.title or position.title
        self.company = self.company or position.company
        self.location = self.location or position.location
        if not self.start and position.start:
            self.start, self.end = position.start, position.end

    def build(self) -> ExperienceEntry:
        return ExperienceEntry(
            title=self.title,
            company=self.company,
            location=self.location,
            start=self.start,
            end=self.end,
            bullets=tuple(self.bullets),
        )


def looks_like_accomplishment(line: str) -> bool:
    """
    True when a line reads like an experience bullet.

    The first word must be a strong action verb, a capitalised past
    tense verb or a gerund followed by lowercase text ("Mentoring two
    developers"), or the line must carry a number. It must have at
    least three words.
    """
    text = re.sub(BULLET_PREFIX, "", line).strip()
    words = text.split()
    if len(words) < 3:
        return False
    first = words[0].strip(",.;:")
    if first.lower() in STRONG_ACTION_VERBS:
        return True
    if re.match(r"^[A-Z][a-z]+ed$", first):
        return True
    if (
        re.match(r"^[A-Z][a-z]{2,}ing$", words[0])
        and first.lower() not in _NON_VERB_ING
        and words[1][0].islower()
    ):
        return True
    return bool(_ACCOMPLISHMENT_METRIC.search(text))


def _is_item_list(text: str) -> bool:
    """Comma or pipe separated short items ("Python, Go, Kubernetes")."""
    items = [i for i in re.split(r"\s*[,;|]\s*", text) if i]
    return len(items) >= 3 and all(len(i.split()) <= 3 for i in items)


class ExperienceParser:
    """Parser for extracting work experience entries."""

    TITLE_WORDS = re.compile(
        r"\b(engineer|developer|programmer|manager|designer|analyst|scientist|architect|"
        r"lead|director|consultant|intern|associate|senior|junior|staff|principal|vp|"
        r"vice president|head|chief|cto|ceo|cfo|coo|founder|co-founder|coordinator|"
        r"specialist|administrator|officer|executive|representative|accountant|"
        r"controller|nurse|teacher|instructor|professor|researcher|technician|assistant|"
        r"strategist|marketer|recruiter|owner|partner|advisor|supervisor|editor|writer)\b",
        re.IGNORECASE,
    )

    COMPANY_SUFFIX = re.compile(
        r"\b(inc|llc|ltd|limited|corp|corporation|co|company|gmbh|ag|plc|pty|"
        r"group|holdings|technologies|labs|partners|bank|agency|studio|studios)\b\.?",
        re.IGNORECASE,
    )

    LABEL = re.compile(r"^(?P<label>[A-Za-z][A-Za-z &/]{0,40}?)\s*:\s*(?P<value>.*)$")

    COMPANY_LABELS = {"company", "employer", "organization", "organisation", "client"}
    TITLE_LABELS = {"title", "role", "position", "job title", "designation"}
    LOCATION_LABELS = {"location", "based in", "city"}
    DATE_LABELS = {"date", "dates", "duration", "period", "tenure"}
    FOREIGN_LABELS = {"email", "e-mail", "phone", "mobile", "tel", "linkedin", "github", "website"}

    # "Title at Company[, Location]"
    AT_PATTERN = re.compile(
        r"^(?P<title>[^,|@]+?)\s+(?:at|@)\s+(?P<company>[^,|]+?)(?:,\s*(?P<location>.+))?$"
    )

    SEGMENT_SPLIT = re.compile(r"\s*[|—–]\s*|\s+-\s+")

    MAX_SEGMENT_WORDS = 8

    def parse(self, lines: Iterable[str]) -> list[ExperienceEntry]:
        """
        Parse experience entries.

        Args:
            lines: Résumé lines in document order; parsing starts at
                the first experience header

        Returns:
            Entries in source order (most recent first as written)
        """
        entries: list[_EntryBuilder] = []
        current: Optional[_EntryBuilder] = None
        pending_company: Optional[str] = None
        mode: Optional[str] = None  # None (not started), "experience", "sidebar", "closed"
        closed_by: Optional[str] = None
        last_was_bullet = False

        for raw_line in lines:
            line = raw_line.strip()
            if not line:
                continue

            header = match_section_header(line)
            if header:
                if header == "experience":
                    mode = "experience"
                elif mode is not None:
                    mode = "sidebar" if header in SIDEBAR_SECTIONS else "closed"
                    closed_by = header
                last_was_bullet = False
                continue

            if mode is None:
                continue

            is_bullet = bool(re.match(BULLET_PREFIX, line))
            content = re.sub(BULLET_PREFIX, "", line).strip() if is_bullet else line
            if not content:
                continue

            if self._is_foreign(content):
                last_was_bullet = False
                continue

            position = None if is_bullet else self.parse_position_line(content)
            if position is not None:
                # Inside education and similar sections only a full "Title at Company" reopens experience
                if mode == "closed" and not (position.is_complete and self._is_title_like(position.title)):
                    continue
                mode = "experience"
                current = self._place_position(entries, current, position, pending_company)
                pending_company = None
                last_was_bullet = False
                continue

            if mode == "closed":
                # Second-column bullets that land inside education read like work, not coursework
                if (
                    current is not None
                    and is_bullet
                    and closed_by in BORROWING_SECTIONS
                    and looks_like_accomplishment(content)
                    and not _ACADEMIC_PATTERN.search(content)
                ):
                    current.bullets.append(content)
                    last_was_bullet = True
                continue

            if mode == "sidebar":
                if current is not None and (
                    looks_like_accomplishment(content)
                    or (is_bullet and len(content.split()) >= 3 and not _is_item_list(content))
                ):
                    current.bullets.append(content)
                    last_was_bullet = True
                continue

            # Experience mode
            if not is_bullet:
                field_text = content
                label = self.LABEL.match(content)
                if label:
                    name, value = label.group("label").strip().lower(), label.group("value").strip()
                    if not value:
                        # "Roles and responsibilities:" style sub-headings
                        continue
                    if name in self.LOCATION_LABELS:
                        if current is not None and not current.location:
                            current.location = value
                        continue
                    if name in self.DATE_LABELS:
                        field_text = value

                start, end, remainder = extract_dates(field_text)
                if start and not remainder:
                    if current is not None and not current.start:
                        current.start, current.end = start, end
                    continue

                location = match_location(field_text)
                if location:
                    if current is not None and not current.location and not current.bullets:
                        current.location = location
                    continue

                if last_was_bullet and current is not None and current.bullets and content[0].islower():
                    current.bullets[-1] = f"{current.bullets[-1]} {content}"
                    continue

                if self._is_name_fragment(content):
                    if current is not None and not current.company and not current.bullets:
                        current.company = content
                    else:
                        pending_company = content
                    continue

                if len(content.split()) < 3:
                    continue

            if current is None:
                current = _EntryBuilder()
                entries.append(current)
            current.bullets.append(content)
            last_was_bullet = True

        results = [entry.build() for entry in entries]
        logger.debug(
            f"Parsed {len(results)} experience entries "
            f"({sum(len(e.bullets) for e in results)} bullets)"
        )
        return results

    def parse_position_line(self, line: str) -> Optional[_Position]:
        """
        Recognise a line that opens (or describes) a position.

        Handles labelled fields ("Company: X", "Title: Y"), "Title at
        Company, Location" and separator-delimited title/company/date
        lines in either order.

        Args:
            line: A non-bullet line

        Returns:
            _Position, or None when the line is not a position line
        """
        if len(line) > 150:
            return None

        labelled = self.LABEL.match(line)
        if labelled:
            return self._parse_labelled(labelled.group("label"), labelled.group("value").strip())

        start, end, rest = extract_dates(line)
        if not rest:
            return None

        at_match = self.AT_PATTERN.match(rest)
        if at_match:
            position = self._parse_at_line(at_match)
            if position is not None:
                position.start, position.end = start, end
                return position

        segments = [s.strip(" ,;()") for s in self.SEGMENT_SPLIT.split(rest)]
        segments = [s for s in segments if s]
        if not segments:
            return None
        if any(len(s.split()) > self.MAX_SEGMENT_WORDS for s in segments):
            return None

        position = _Position(start=start, end=end)
        unknown: list[str] = []
        for segment in segments:
            head, location = self._split_location(segment)
            if location and not position.location:
                position.location = location
            if not head:
                continue
            if position.title is None and self._is_title_like(head):
                position.title = head
            elif position.company is None and self.COMPANY_SUFFIX.search(head):
                position.company = head
            else:
                unknown.append(head)

        if len(segments) == 1:
            return self._single_segment(position, unknown)

        if position.title and not position.company and unknown:
            position.company = unknown[0]
        elif position.company and not position.title and unknown:
            position.title = unknown[0]
        elif not position.title and not position.company:
            if not start or not unknown:
                return None
            position.title = unknown[0]
            position.company = unknown[1] if len(unknown) > 1 else None

        return position

    def _parse_labelled(self, label: str, value: str) -> Optional[_Position]:
        key = label.strip().lower()
        if not value:
            return None
        if key in self.COMPANY_LABELS:
            head, location = self._split_location(value)
            return _Position(company=head or value, location=location)
        if key in self.TITLE_LABELS:
            return _Position(title=value)
        return None

    def _parse_at_line(self, match: re.Match) -> Optional[_Position]:
        title = match.group("title").strip()
        company = match.group("company").strip()
        location = (match.group("location") or "").strip() or None
        words = title.split()

        if not 1 <= len(words) <= 6 or re.search(r"\d", title):
            return None
        if words[0].lower() in STRONG_ACTION_VERBS or not words[0][0].isupper():
            return None
        if not company or not company[0].isupper():
            return None

        # A trailing place name vouches for the line even when the title is misspelled
        has_location = bool(location) and (
            match_location(location) is not None
            or re.match(r"^[A-Z][A-Za-z.'\-]+(?:[ ,]+[A-Z][A-Za-z.'\-]+){0,4}$", location) is not None
        )
        if not (self._is_title_like(title) or has_location):
            return None
        return _Position(title=title, company=company, location=location)

    def _single_segment(self, position: _Position, unknown: list[str]) -> Optional[_Position]:
        if position.title:
            if not self._is_title_cased(position.title) or position.title.endswith("."):
                return None
            return position
        if position.company:
            return position
        if unknown and position.start and self._is_name_fragment(unknown[0]):
            position.company = unknown[0]
            return position
        return None

    def _place_position(
        self,
        entries: list[_EntryBuilder],
        current: Optional[_EntryBuilder],
        position: _Position,
        pending_company: Optional[str],
    ) -> _EntryBuilder:
        """Merge a partial position into the open entry, or open a new one."""
        if current is not None and not current.bullets and not position.is_complete:
            fills_title = position.title and not current.title and not position.company
            fills_company = position.company and not current.company and not position.title
            if fills_title or fills_company:
                current.absorb(position)
                return current

        entry = _EntryBuilder()
        entry.absorb(position)
        if entry.company is None and pending_company:
            entry.company = pending_company
        entries.append(entry)
        return entry

    def _split_location(self, segment: str) -> tuple[str, Optional[str]]:
        """Split "Acme Corp, Austin, TX" into ("Acme Corp", "Austin, TX")."""
        if match_location(segment):
            return "", segment.strip()
        parts = [p.strip() for p in segment.split(",")]
        for index in range(1, len(parts)):
            tail = ", ".join(parts[index:])
            if match_location(tail):
                return ", ".join(parts[:index]), tail
        return segment, None

    def _is_title_like(self, text: str) -> bool:
        return bool(self.TITLE_WORDS.search(text)) and len(text.split()) <= 7

    def _is_title_cased(self, text: str) -> bool:
        words = [w for w in text.split() if w[:1].isalpha()]
        small = {"and", "of", "the", "for", "in", "&", "to", "at"}
        return bool(words) and all(w[0].isupper() or w.lower() in small for w in words)

    def _is_name_fragment(self, text: str) -> bool:
        """Short title-cased text with no verb or sentence punctuation (a company name)."""
        words = text.split()
        if not 1 <= len(words) <= 5 or text.endswith((".", ":")):
            return False
        if words[0].lower() in STRONG_ACTION_VERBS or re.search(r"\d", text):
            return False
        return self._is_title_cased(text)

    def _is_foreign(self, content: str) -> bool:
        """Sidebar debris that never belongs to a position."""
        if EMAIL_PATTERN.fullmatch(content) or is_link_line(content) or is_phone_line(content):
            return True
        label = self.LABEL.match(content)
        return bool(label and label.group("label").strip().lower() in self.FOREIGN_LABELS)
