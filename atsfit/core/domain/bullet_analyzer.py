"""
Bullet analyzer.

Extracts rhetorical quality signals from a single résumé bullet: the
leading verb, vague openers, quantified results, scope nouns, dangling
endings and length. Pure and stateless, safe for any string.
"""

import re

from atsfit.utils.constants import (
    BULLET_PREFIX,
    SCOPE_NOUNS,
    STRONG_ACTION_VERBS,
    WEAK_OPENER_PATTERN,
    MetricType,
)

from .types import BulletSignals


TOO_LONG_CHARS = 150
TOO_SHORT_CHARS = 20

WEAK_OPENER = re.compile(WEAK_OPENER_PATTERN, re.IGNORECASE)
PAST_TENSE_VERB = re.compile(r"^[A-Z][a-z]+ed$")

# First match wins, so the more specific kinds come first
METRIC_RULES: tuple[tuple[MetricType, re.Pattern], ...] = (
    (MetricType.PERCENTAGE, re.compile(r"\d+(?:\.\d+)?\s*%")),
    (MetricType.CURRENCY, re.compile(
        r"[$€£]\s?\d[\d,.]*\s?(?:[KkMmBb](?![a-z])|million|billion|thousand)?"
        r"|\d[\d,.]*\s*(?:million|billion|thousand)?\s*(?:dollars|usd|eur|gbp)\b",
        re.IGNORECASE,
    )),
    (MetricType.COUNT, re.compile(
        r"\b\d[\d,.]*[KkMm]?\+?\s*(?:users?|customers?|transactions?|requests?|records?|"
        r"views?|visits?|sessions?|people|engineers?|reports?|teams?|projects?|clients?|"
        r"accounts?|hires?|deals?|students?|patients?|members?|stores?|locations?)\b",
        re.IGNORECASE,
    )),
    # "3x" multipliers are ratios, reported as percentages
    (MetricType.PERCENTAGE, re.compile(r"\b\d+(?:\.\d+)?[xX]\b")),
)

DANGLING_ENDINGS: tuple[re.Pattern, ...] = (
    re.compile(r",\s*(?:leading to|resulting in|delivering|achieving|enabling|driving|ensuring)\s*\.?\s*$", re.IGNORECASE),
    re.compile(r",\s*(?:which led to|which resulted in|which enabled|which drove)\s*\.?\s*$", re.IGNORECASE),
    re.compile(r"\b(?:leading to|resulting in|delivering|achieving|contributing to)\s*\.?\s*$", re.IGNORECASE),
)

_SCOPE_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (noun, re.compile(rf"\b{noun}s?\b", re.IGNORECASE)) for noun in SCOPE_NOUNS
)


def analyze_bullet(text: str) -> BulletSignals:
    """
    Analyze a single bullet point.

    Args:
        text: Bullet text (marker already stripped or not)

    Returns:
        BulletSignals; an empty string yields all-false signals
    """
    trimmed = re.sub(BULLET_PREFIX, "", (text or "").strip()).strip()
    if not trimmed:
        return BulletSignals()

    words = trimmed.split()
    first_word = words[0].strip(",.;:")
    first_lower = first_word.lower()

    has_action_verb = first_lower in STRONG_ACTION_VERBS or bool(PAST_TENSE_VERB.match(first_word))
    is_vague = bool(WEAK_OPENER.match(trimmed))
    if is_vague:
        # "Handled", "Used" read as past tense but are weak openers
        has_action_verb = False

    metric_type = MetricType.NONE
    metric_value = None
    for kind, pattern in METRIC_RULES:
        match = pattern.search(trimmed)
        if match:
            metric_type, metric_value = kind, match.group(0).strip()
            break

    scope_nouns = tuple(noun for noun, pattern in _SCOPE_PATTERNS if pattern.search(trimmed))

    return BulletSignals(
        has_action_verb=has_action_verb,
        action_verb=first_lower if has_action_verb else None,
        is_vague=is_vague,
        has_metric=metric_type is not MetricType.NONE,
        metric_type=metric_type,
        metric_value=metric_value,
        has_dangling_ending=any(pattern.search(trimmed) for pattern in DANGLING_ENDINGS),
        has_scope_noun=bool(scope_nouns),
        scope_nouns=scope_nouns,
        is_too_long=len(trimmed) > TOO_LONG_CHARS,
        is_too_short=len(trimmed) < TOO_SHORT_CHARS,
        word_count=len(words),
    )


def analyze_all_bullets(bullets: list[str]) -> list[BulletSignals]:
    """Analyze every bullet; the result is index-aligned with the input."""
    return [analyze_bullet(bullet) for bullet in bullets]
