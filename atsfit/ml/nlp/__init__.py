"""
NLP pipeline for atsfit.

Provides text normalization, résumé and job-description parsing, input
validation and link extraction.

Main Components:
- ResumeParser: Orchestrates the résumé section parsers
- JDParser: Job description parser
- validate_jd: Job description input guard
- detect_resume: Résumé-or-not heuristic
- normalize_text / smart_truncate: Text preprocessing
- extract_links: Profile link extraction
"""

from .preprocessor import (
    SECTION_HEADERS,
    PreprocessedSections,
    build_structured_resume,
    condense_job_description,
    extract_resume_sections,
    match_section_header,
    normalize_text,
    preprocess_job_description,
    preprocess_resume,
    smart_truncate,
)

from .link_extractor import extract_links, find_links_block

from .resume_parser import (
    ResumeParser,
    get_resume_parser,
    parse_resume,
)

from .jd_parser import (
    JDParser,
    get_jd_parser,
    normalize_keyword,
    parse_job_description,
)

from .jd_validator import JDValidationResult, validate_jd

from .resume_detector import ResumeDetectionResult, detect_resume

__all__ = [
    # Preprocessor
    "SECTION_HEADERS",
    "PreprocessedSections",
    "build_structured_resume",
    "condense_job_description",
    "extract_resume_sections",
    "match_section_header",
    "normalize_text",
    "preprocess_job_description",
    "preprocess_resume",
    "smart_truncate",
    # Links
    "extract_links",
    "find_links_block",
    # Résumé parser
    "ResumeParser",
    "get_resume_parser",
    "parse_resume",
    # JD parser
    "JDParser",
    "get_jd_parser",
    "normalize_keyword",
    "parse_job_description",
    # Validation
    "JDValidationResult",
    "validate_jd",
    "ResumeDetectionResult",
    "detect_resume",
]
