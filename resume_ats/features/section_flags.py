from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resume_ats.normalize.resume_document import (
    is_present,
    resolve_field,
    resolve_list,
    resolve_personal,
    resolve_summary,
)
from resume_ats.schemas.analysis import FeatureFlags

_SKILL_GROUPS = ("technical", "soft", "primarySkills")
_LOCATION_KEYS = ("phone", "city", "state", "location", "address")


def has_summary_section(document: Mapping[str, Any], min_length: int = 50) -> bool:
    return len(resolve_summary(document).strip()) > min_length


def has_skills_section(document: Mapping[str, Any]) -> bool:
    skills = resolve_field(document, "skills")
    if isinstance(skills, (list, tuple)):
        return len(skills) > 0
    if isinstance(skills, Mapping):
        return any(
            isinstance(skills.get(group), (list, tuple)) and len(skills[group]) > 0 for group in _SKILL_GROUPS
        )
    return False


def has_experience_section(document: Mapping[str, Any]) -> bool:
    return len(resolve_list(document, "experience")) > 0


def has_education_section(document: Mapping[str, Any]) -> bool:
    return len(resolve_list(document, "education")) > 0


def has_contact_info(document: Mapping[str, Any]) -> bool:
    personal = resolve_personal(document)
    if not is_present(personal.get("email")):
        return False
    return any(is_present(personal.get(key)) for key in _LOCATION_KEYS)


def build_feature_flags(document: Mapping[str, Any], summary_min_length: int = 50) -> FeatureFlags:
    return FeatureFlags(
        has_summary=has_summary_section(document, summary_min_length),
        has_skills=has_skills_section(document),
        has_experience=has_experience_section(document),
        has_education=has_education_section(document),
        has_contact_info=has_contact_info(document),
    )
