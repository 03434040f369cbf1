from .formatting import compute_bullet_score, compute_formatting_ratio, is_bullet_like_description
from .section_flags import (
    build_feature_flags,
    has_contact_info,
    has_education_section,
    has_experience_section,
    has_skills_section,
    has_summary_section,
)

__all__ = [
    "build_feature_flags",
    "has_summary_section",
    "has_skills_section",
    "has_experience_section",
    "has_education_section",
    "has_contact_info",
    "is_bullet_like_description",
    "compute_bullet_score",
    "compute_formatting_ratio",
]
