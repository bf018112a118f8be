"""
Lightweight keyword-overlap score for ranking and display.

Not a substitute for the full ATS score: it compares raw texts with
whole-word and bigram lookups ("java" does not match "javascript",
"machine learning" matches as a phrase).
"""

import re

from atsfit.utils.constants import MatchLabel


# Below this score callers should confirm before generating anything
LOW_MATCH_THRESHOLD = 25

WORD_WEIGHT = 0.8
PHRASE_WEIGHT = 0.2

STOP_WORDS: frozenset[str] = frozenset({
    # Common English
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "has", "have", "been", "will", "with",
    "this", "that", "from", "they", "were", "your", "what", "when", "make",
    "like", "long", "look", "many", "some", "them", "than", "each", "which",
    "about", "would", "there", "their", "other", "could", "after", "should",
    "also", "just", "into", "over", "such", "where", "most", "more", "very",
    "well", "back", "only", "come", "its", "even", "new", "want", "because",
    "any", "these", "give", "day", "good", "how", "him", "own", "then",
    # Job-posting filler
    "work", "experience", "ability", "including", "strong", "required",
    "preferred", "minimum", "years", "team", "role", "position", "company",
    "must", "skills", "knowledge", "working", "responsibilities",
    "qualifications", "requirements", "join", "looking", "opportunity",
    "equal", "employer", "apply", "please", "candidate", "ideal", "offer",
    "competitive", "benefits", "salary", "description", "job", "full",
    "time", "part", "based", "may", "per", "etc", "able", "across",
    "ensure", "support", "using", "need", "provide", "help", "within",
})

TOKEN_SPLIT = re.compile(r"[\s,;:.!?()\[\]{}|/\\\"'`~@#$%^&*+=<>“”‘’]+")


def tokenize(text: str) -> list[str]:
    """Lowercase tokens of two or more characters."""
    return [token for token in TOKEN_SPLIT.split(text.lower()) if len(token) >= 2]


def _significant(token: str) -> bool:
    return len(token) >= 3 and token not in STOP_WORDS


def quick_match_score(resume_text: str, jd_text: str) -> int:
    """
    Keyword-overlap score between résumé and posting text.

    Args:
        resume_text: Raw résumé text
        jd_text: Raw job posting text

    Returns:
        Integer in [0, 100]; 0 when either text is empty, 50 when the
        posting has no significant words
    """
    if not resume_text or not jd_text:
        return 0

    resume_tokens = tokenize(resume_text)
    resume_words = set(resume_tokens)
    resume_bigrams = {f"{a} {b}" for a, b in zip(resume_tokens, resume_tokens[1:])}

    jd_tokens = tokenize(jd_text)
    jd_words = {token for token in jd_tokens if _significant(token)}
    if not jd_words:
        return 50

    word_score = len(jd_words & resume_words) / len(jd_words)

    jd_bigrams = {f"{a} {b}" for a, b in zip(jd_tokens, jd_tokens[1:]) if _significant(a) and _significant(b)}
    phrase_score = len(jd_bigrams & resume_bigrams) / len(jd_bigrams) if jd_bigrams else word_score

    return round((word_score * WORD_WEIGHT + phrase_score * PHRASE_WEIGHT) * 100)


def match_label(score: float) -> MatchLabel:
    """Display band for a quick match score."""
    return MatchLabel.from_score(score)


def is_low_match(score: float) -> bool:
    return score < LOW_MATCH_THRESHOLD
