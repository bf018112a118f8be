"""
Heuristic check that uploaded text looks like a résumé.

Counts how many independent résumé signals (section words, contact
patterns, accomplishment verbs, job titles) appear in the text.
"""

import re
from dataclasses import dataclass
from typing import Optional

from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


RESUME_SIGNALS: tuple[re.Pattern, ...] = (
    # Section headers
    re.compile(r"\b(experience|work\s+experience|professional\s+experience|employment)\b", re.IGNORECASE),
    re.compile(r"\b(education|academic|university|college|degree|bachelor|master|phd)\b", re.IGNORECASE),
    re.compile(r"\b(skills|technical\s+skills|core\s+competencies|proficiencies)\b", re.IGNORECASE),
    re.compile(r"\b(summary|objective|profile|about\s+me)\b", re.IGNORECASE),
    re.compile(r"\b(certifications?|licenses?|awards?|honors?)\b", re.IGNORECASE),
    re.compile(r"\b(projects?|portfolio|publications?)\b", re.IGNORECASE),
    # Contact details
    re.compile(r"[\w.-]+@[\w.-]+\.\w{2,}"),
    re.compile(r"\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}"),
    re.compile(r"linkedin\.com", re.IGNORECASE),
    # Accomplishment language and titles
    re.compile(r"\b(managed|developed|implemented|designed|led|created|built|improved|reduced|increased)\b", re.IGNORECASE),
    re.compile(r"\b(responsible\s+for|collaborated|coordinated|delivered|achieved)\b", re.IGNORECASE),
    re.compile(r"\b(intern|engineer|developer|manager|analyst|designer|consultant|director|associate)\b", re.IGNORECASE),
)

MIN_SIGNALS_REQUIRED = 3
HIGH_CONFIDENCE_SIGNALS = 6
MIN_RESUME_CHARS = 50


@dataclass(frozen=True)
class ResumeDetectionResult:
    """Verdict on whether text is a résumé."""

    is_likely_resume: bool
    confidence: str  # "high" | "medium" | "low"
    signals_found: int
    message: Optional[str] = None


def detect_resume(text: str) -> ResumeDetectionResult:
    """Check if text content looks like a résumé."""
    if not text or len(text) < MIN_RESUME_CHARS:
        return ResumeDetectionResult(
            is_likely_resume=False,
            confidence="low",
            signals_found=0,
            message="The uploaded content is too short to be a resume.",
        )

    signals = sum(1 for pattern in RESUME_SIGNALS if pattern.search(text))
    logger.debug(f"Résumé detection: {signals} signal(s)")

    if signals >= HIGH_CONFIDENCE_SIGNALS:
        return ResumeDetectionResult(is_likely_resume=True, confidence="high", signals_found=signals)
    if signals >= MIN_SIGNALS_REQUIRED:
        return ResumeDetectionResult(is_likely_resume=True, confidence="medium", signals_found=signals)
    return ResumeDetectionResult(
        is_likely_resume=False,
        confidence="low",
        signals_found=signals,
        message="This doesn't look like a resume. Please upload your resume (PDF, DOCX, or TXT).",
    )
