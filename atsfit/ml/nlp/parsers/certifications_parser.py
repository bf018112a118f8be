"""
Certifications parser for résumés.

Each line of a certifications section is kept as one certification.
"""

import re

from atsfit.data.models.base import dedupe_casefold
from atsfit.utils.constants import BULLET_PREFIX


class CertificationsParser:
    """Parser for extracting certification lines."""

    MAX_CHARS = 120

    def parse(self, section_lines: list[str]) -> list[str]:
        """Bullet-stripped certification lines, unique and in order."""
        lines = []
        for raw_line in section_lines:
            line = re.sub(BULLET_PREFIX, "", raw_line.strip()).strip()
            if line and len(line) <= self.MAX_CHARS:
                lines.append(line)
        return list(dedupe_casefold(lines))
