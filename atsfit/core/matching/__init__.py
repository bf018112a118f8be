"""ATS scoring and quick match module."""

from .ats_scorer import (
    ATSScorer,
    candidate_keywords,
    candidate_text,
    estimate_years_experience,
    extract_job_terms,
    generate_gaps,
    generate_rewrite_previews,
    generate_strengths,
    generate_warnings,
    get_ats_scorer,
    score_ats,
    term_found,
)
from .radar_scorer import (
    RadarScorer,
    RelevanceCheck,
    check_relevance,
    get_radar_scorer,
    score_radar,
)
from .quick_match import (
    LOW_MATCH_THRESHOLD,
    STOP_WORDS,
    is_low_match,
    match_label,
    quick_match_score,
)

__all__ = [
    "ATSScorer",
    "candidate_keywords",
    "candidate_text",
    "estimate_years_experience",
    "extract_job_terms",
    "generate_gaps",
    "generate_rewrite_previews",
    "generate_strengths",
    "generate_warnings",
    "get_ats_scorer",
    "score_ats",
    "term_found",
    "RadarScorer",
    "RelevanceCheck",
    "check_relevance",
    "get_radar_scorer",
    "score_radar",
    "LOW_MATCH_THRESHOLD",
    "STOP_WORDS",
    "is_low_match",
    "match_label",
    "quick_match_score",
]
