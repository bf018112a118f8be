"""
Summary/objective/profile parser for résumés.
"""

import re
from typing import Optional

from atsfit.utils.constants import BULLET_PREFIX


class SummaryParser:
    """Parser for extracting the professional summary."""

    MAX_CHARS = 1500

    def parse(self, section_lines: list[str]) -> Optional[str]:
        """
        Join the summary section into one paragraph.

        Args:
            section_lines: Lines from the summary section(s)

        Returns:
            Summary text, or None when the section is absent or empty
        """
        parts = [re.sub(BULLET_PREFIX, "", line).strip() for line in section_lines]
        text = " ".join(part for part in parts if part)
        if not text:
            return None
        if len(text) > self.MAX_CHARS:
            text = text[: self.MAX_CHARS].rsplit(" ", 1)[0]
        return text
