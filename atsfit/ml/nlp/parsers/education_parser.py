"""
Education parser for résumés.

Pairs a school with an optional degree and a trailing year. A school and
its degree written on consecutive lines are merged into one entry.
"""

import re
from dataclasses import dataclass
from typing import Optional

from atsfit.data.models import EducationEntry
from atsfit.ml.nlp.parsers.contact_parser import match_location
from atsfit.ml.nlp.parsers.experience_parser import extract_dates
from atsfit.utils.constants import BULLET_PREFIX
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class _EducationBuilder:
    school: Optional[str] = None
    degree: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    def build(self) -> EducationEntry:
        return EducationEntry(school=self.school, degree=self.degree, start=self.start, end=self.end)


class EducationParser:
    """Parser for extracting education entries."""

    DEGREE_PATTERN = re.compile(
        r"(?<![A-Za-z])(?:"
        r"B\.?\s?S\.?c?|B\.?\s?A|B\.?\s?Eng|B\.?\s?Tech|B\.?\s?Com|"
        r"M\.?\s?S\.?c?|M\.?\s?A|M\.?\s?Eng|M\.?\s?Ed|MBA|LL\.?\s?[BM]|J\.?\s?D|M\.?\s?D|"
        r"Ph\.?\s?D|Bachelor(?:'?s)?|Master(?:'?s)?|Doctor(?:ate)?|Associate(?:'?s)? (?:of|in|degree)|"
        r"Diploma|GED"
        r")\.?(?![A-Za-z])",
    )

    SCHOOL_PATTERN = re.compile(
        r"(?i:\b(?:university|universit[éa]|college|institute|school|academy|polytechnic|conservatory)\b)"
        r"|\bUC\s+[A-Z]|^[A-Z]{2,5}U$|^MIT$",
    )

    SEGMENT_SPLIT = re.compile(r"\s*[|—–]\s*|\s+-\s+|,\s+")

    def parse(self, section_lines: list[str]) -> list[EducationEntry]:
        """
        Parse education entries.

        Args:
            section_lines: Lines from the education section(s), in order

        Returns:
            Entries in source order
        """
        entries: list[_EducationBuilder] = []
        pending: Optional[_EducationBuilder] = None

        for raw_line in section_lines:
            line = re.sub(BULLET_PREFIX, "", raw_line.strip()).strip()
            if not line:
                continue

            parsed = self.parse_line(line)
            if parsed is None:
                # A bare year under the last entry is its graduation date
                start, end, remainder = extract_dates(line)
                if pending is not None and start and not remainder and not pending.end:
                    pending.start, pending.end = (start, end) if end else (None, start)
                continue

            if pending is not None and self._completes(pending, parsed):
                pending.school = pending.school or parsed.school
                pending.degree = pending.degree or parsed.degree
                pending.start = pending.start or parsed.start
                pending.end = pending.end or parsed.end
                continue

            entries.append(parsed)
            pending = parsed

        results = [entry.build() for entry in entries]
        logger.debug(f"Parsed {len(results)} education entries")
        return results

    def parse_line(self, line: str) -> Optional[_EducationBuilder]:
        """Read school, degree and dates from one line; None when it has neither school nor degree."""
        start, end, remainder = extract_dates(line)
        if start and not end:
            # A single year on an education line is the graduation year
            start, end = None, start

        school: Optional[str] = None
        degree: Optional[str] = None
        for segment in self.SEGMENT_SPLIT.split(remainder):
            segment = segment.strip(" ,;()")
            if not segment or match_location(segment):
                continue
            if degree is None and self.DEGREE_PATTERN.search(segment) and not self.SCHOOL_PATTERN.search(segment):
                degree = segment
            elif school is None and self.SCHOOL_PATTERN.search(segment):
                school = self._split_degree_prefix(segment, degree)
                if degree is None and school != segment:
                    prefix = segment[: len(segment) - len(school)]
                    prefix = re.sub(r"\s+(?:from|at)\s*$", "", prefix).strip(" ,-–—")
                    if self.DEGREE_PATTERN.search(prefix):
                        degree = prefix
            elif degree is not None and school is None and segment[:1].isupper() and len(segment.split()) <= 6:
                # "B.S. Computer Science, Stanford" with no school keyword
                school = segment

        if school is None and degree is None:
            return None
        return _EducationBuilder(school=school, degree=degree, start=start, end=end)

    def _split_degree_prefix(self, segment: str, degree: Optional[str]) -> str:
        """Separate "BSc Physics University of Leeds" into its school part."""
        if degree is not None:
            return segment
        match = re.search(r"\b(?:from|at)\s+(.+)$", segment)
        if match and self.SCHOOL_PATTERN.search(match.group(1)):
            return match.group(1).strip()
        return segment

    def _completes(self, pending: _EducationBuilder, parsed: _EducationBuilder) -> bool:
        """A school-only line followed by a degree-only line (or the reverse)."""
        if pending.school and not pending.degree:
            return bool(parsed.degree and not parsed.school)
        if pending.degree and not pending.school:
            return bool(parsed.school and not parsed.degree)
        return False
