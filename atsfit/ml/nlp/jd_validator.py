"""
Job description input guard.

Rejects empty, gibberish and placeholder postings before they reach the
generation layer and flags low-structure input with advisory warnings.
Validation never raises; it always returns a JDValidationResult.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from atsfit.utils.constants import BULLET_PREFIX
from atsfit.utils.logger import get_logger, preview

logger = get_logger(__name__)


MIN_LENGTH = 200
MIN_LENGTH_WITH_STRUCTURE = 80
MIN_LENGTH_ABSOLUTE = 50

REPEATED_CHARS = re.compile(r"(.)\1{10,}")
PLACEHOLDER = re.compile(r"lorem\s+ipsum", re.IGNORECASE)
BULLET_LINE = re.compile(BULLET_PREFIX + r".{10,}", re.MULTILINE)
STRUCTURE_WORDS = re.compile(
    r"\b(skills?|requirements?|qualifications?|experience|responsibilities)\b", re.IGNORECASE
)


@dataclass(frozen=True)
class JDValidationResult:
    """Outcome of validating a job description."""

    valid: bool
    reason: Optional[str] = None
    warnings: tuple[str, ...] = field(default_factory=tuple)


def validate_jd(text: str) -> JDValidationResult:
    """
    Validate job description text before generation.

    Args:
        text: Raw posting text

    Returns:
        JDValidationResult; ``reason`` is set only when invalid
    """
    trimmed = (text or "").strip()
    warnings: list[str] = []

    if not trimmed:
        return _reject("Job description is empty. Please paste the full job listing.", trimmed)

    if REPEATED_CHARS.search(trimmed):
        return _reject(
            "Job description appears to contain repeated characters. Please paste a real job listing.",
            trimmed,
        )

    if PLACEHOLDER.search(trimmed):
        return _reject(
            "Job description appears to be placeholder text. Please paste a real job listing.",
            trimmed,
        )

    has_bullets = bool(BULLET_LINE.search(trimmed))
    has_skill_words = bool(STRUCTURE_WORDS.search(trimmed))
    has_structure = has_bullets or has_skill_words

    if len(trimmed) < MIN_LENGTH_WITH_STRUCTURE and has_structure:
        warnings.append("Job description is very short. Results may be limited.")
    elif len(trimmed) < MIN_LENGTH and not has_structure:
        return _reject(
            f"Job description is too short ({len(trimmed)} characters). Please include the "
            f"full job listing with responsibilities and requirements.",
            trimmed,
        )

    if len(trimmed) < MIN_LENGTH_ABSOLUTE:
        return _reject("Job description is too short. Please paste the full job listing.", trimmed)

    if not has_skill_words:
        warnings.append(
            "No clear requirements or qualifications section detected. Results may be less targeted."
        )

    distinct_words = {word for word in trimmed.lower().split() if len(word) > 2}
    if len(distinct_words) < 15 and len(trimmed) > 100:
        warnings.append("Job description has very low word variety. Please check it is a complete listing.")

    return JDValidationResult(valid=True, warnings=tuple(warnings))


def _reject(reason: str, text: str) -> JDValidationResult:
    logger.warning(f"Job description rejected: {reason} (input: {preview(text)!r})")
    return JDValidationResult(valid=False, reason=reason)
