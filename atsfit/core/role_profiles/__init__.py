"""Reference role library and résumé-only role matching."""

from .library import ROLE_PROFILES, get_role_profile, get_role_profiles, role_categories
from .matcher import (
    RoleMatch,
    TargetRole,
    detect_category,
    extract_target_role,
    find_matching_profiles,
    find_role_matches,
    infer_seniority,
    normalize_seniority,
    role_profile_to_job_profile,
)

__all__ = [
    "ROLE_PROFILES",
    "get_role_profile",
    "get_role_profiles",
    "role_categories",
    "RoleMatch",
    "TargetRole",
    "detect_category",
    "extract_target_role",
    "find_matching_profiles",
    "find_role_matches",
    "infer_seniority",
    "normalize_seniority",
    "role_profile_to_job_profile",
]
