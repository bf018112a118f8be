"""
Projects parser for résumés.

A short non-bullet line names a project; the bullets below it describe it.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from atsfit.data.models import ProjectEntry
from atsfit.utils.constants import BULLET_PREFIX
from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class _ProjectBuilder:
    name: Optional[str] = None
    bullets: list[str] = field(default_factory=list)

    def build(self) -> ProjectEntry:
        return ProjectEntry(name=self.name, bullets=tuple(self.bullets))


class ProjectsParser:
    """Parser for extracting projects."""

    MAX_NAME_CHARS = 80

    # Drops a trailing " — tech stack" / " | link" from the name line
    NAME_TAIL = re.compile(r"\s*(?:[|—–]|\s-\s).*$")

    def parse(self, section_lines: list[str]) -> list[ProjectEntry]:
        """
        Parse project entries.

        Args:
            section_lines: Lines from the projects section(s), in order

        Returns:
            Projects in source order
        """
        projects: list[_ProjectBuilder] = []
        current: Optional[_ProjectBuilder] = None

        for raw_line in section_lines:
            line = raw_line.strip()
            if not line:
                continue

            is_bullet = bool(re.match(BULLET_PREFIX, line))
            if not is_bullet and len(line) < self.MAX_NAME_CHARS:
                name = self.NAME_TAIL.sub("", line).strip() or line
                current = _ProjectBuilder(name=name)
                projects.append(current)
                continue

            bullet = re.sub(BULLET_PREFIX, "", line).strip()
            if not bullet:
                continue
            if current is None:
                current = _ProjectBuilder()
                projects.append(current)
            current.bullets.append(bullet)

        results = [project.build() for project in projects]
        logger.debug(f"Parsed {len(results)} projects")
        return results
