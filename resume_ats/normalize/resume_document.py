"""Schema-tolerant access to semi-structured resume documents.

Resume documents reach the engine in several historical shapes: builder
output nested under ``resumeData``, imports nested under ``data`` and the
legacy top-level layout. Each logical field therefore has an ordered tuple of
accessors in ``FIELD_ACCESSORS``; the first accessor that yields a non-empty
value wins. A value of the wrong shape is treated as absent by the readers
below, never as an error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from .text import normalize_text

Accessor = Callable[[Mapping[str, Any]], Any]

_CONTAINERS = ("resumeData", "data")
_PERSONAL_KEYS = ("personalInfo", "personalDetails")


def _path(*keys: str) -> Accessor:
    def accessor(document: Mapping[str, Any]) -> Any:
        current: Any = document
        for key in keys:
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
        return current

    accessor.__name__ = ".".join(keys)
    return accessor


def _nested(*keys: str) -> tuple[Accessor, ...]:
    """Accessors for ``keys`` under each container, in container priority order."""
    return tuple(_path(container, key) for container in _CONTAINERS for key in keys)


def _personal_field(key: str) -> Accessor:
    def accessor(document: Mapping[str, Any]) -> Any:
        return resolve_personal(document).get(key)

    accessor.__name__ = f"personal.{key}"
    return accessor


FIELD_ACCESSORS: dict[str, tuple[Accessor, ...]] = {
    "personal": _nested(*_PERSONAL_KEYS) + (_path("personalInfo"),),
    "summary": (
        _path("resumeData", "professionalSummary", "summary"),
        _path("resumeData", "summary"),
        _path("data", "professionalSummary", "summary"),
        _path("data", "summary"),
        _path("summary"),
        _personal_field("profileSummary"),
    ),
    "experience": _nested("workExperience", "experience") + (_path("experience"),),
    "education": _nested("education") + (_path("education"),),
    "skills": _nested("skills") + (_path("skills"),) + _nested("primarySkills"),
    "projects": _nested("projects") + (_path("projects"),),
    "certifications": _nested("certifications") + (_path("certifications"),),
}


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) > 0
    if isinstance(value, bool):
        return value
    return True


def coerce_resume_document(resume: Any) -> Mapping[str, Any]:
    if resume is None:
        return {}
    if isinstance(resume, BaseModel):
        return resume.model_dump(by_alias=True)
    if isinstance(resume, Mapping):
        return resume
    raise TypeError(f"resume document must be a mapping, got {type(resume).__name__}")


def resolve_field(document: Mapping[str, Any], name: str) -> Any:
    """Return the first non-empty value among the accessors registered for ``name``."""
    try:
        accessors = FIELD_ACCESSORS[name]
    except KeyError:
        raise ValueError(f"Unknown resume field '{name}'.") from None
    for accessor in accessors:
        value = accessor(document)
        if is_present(value):
            return value
    return None


def resolve_personal(document: Mapping[str, Any]) -> Mapping[str, Any]:
    value = resolve_field(document, "personal")
    return value if isinstance(value, Mapping) else {}


def resolve_summary(document: Mapping[str, Any]) -> str:
    return text_value(resolve_field(document, "summary"))


def resolve_list(document: Mapping[str, Any], name: str) -> list[Any]:
    value = resolve_field(document, name)
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def resolve_entries(document: Mapping[str, Any], name: str) -> list[Mapping[str, Any]]:
    return [entry for entry in resolve_list(document, name) if isinstance(entry, Mapping)]


def text_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def join_strings(values: Any) -> str:
    if not isinstance(values, (list, tuple)):
        return ""
    return " ".join(part for part in (text_value(item) for item in values) if part)


def _first_text(entry: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = text_value(entry.get(key))
        if value:
            return value
    return ""


def _personal_parts(document: Mapping[str, Any]) -> list[str]:
    personal = resolve_personal(document)
    keys = ("fullName", "title", "email", "phone", "location", "address")
    return [text_value(personal.get(key)) for key in keys]


def _experience_parts(document: Mapping[str, Any]) -> list[str]:
    parts: list[str] = []
    for entry in resolve_entries(document, "experience"):
        parts.extend(
            [
                _first_text(entry, "jobTitle", "role"),
                text_value(entry.get("company")),
                text_value(entry.get("location")),
                text_value(entry.get("description")),
                join_strings(entry.get("achievements")),
            ]
        )
    return parts


def _education_parts(document: Mapping[str, Any]) -> list[str]:
    parts: list[str] = []
    for entry in resolve_entries(document, "education"):
        parts.extend(text_value(entry.get(key)) for key in ("degree", "institution", "location", "description"))
    return parts


def _skills_parts(document: Mapping[str, Any]) -> list[str]:
    skills = resolve_field(document, "skills")
    if isinstance(skills, (list, tuple)):
        return [join_strings(skills)]
    if not isinstance(skills, Mapping):
        return []

    parts = [join_strings(skills.get("technical")), join_strings(skills.get("soft"))]
    languages = skills.get("languages")
    if isinstance(languages, (list, tuple)):
        for language in languages:
            if isinstance(language, Mapping):
                parts.extend([text_value(language.get("language")), text_value(language.get("proficiency"))])
            else:
                parts.append(text_value(language))
    parts.append(join_strings(skills.get("primarySkills")))
    return parts


def _project_parts(document: Mapping[str, Any]) -> list[str]:
    parts: list[str] = []
    for project in resolve_entries(document, "projects"):
        technologies = project.get("technologies")
        tech = join_strings(technologies) if isinstance(technologies, (list, tuple)) else text_value(project.get("tech"))
        parts.extend(
            [
                text_value(project.get("title")),
                text_value(project.get("description")),
                tech,
                join_strings(project.get("highlights")),
            ]
        )
    return parts


def _certification_parts(document: Mapping[str, Any]) -> list[str]:
    parts: list[str] = []
    for certification in resolve_entries(document, "certifications"):
        parts.extend(text_value(certification.get(key)) for key in ("name", "issuer", "description"))
    return parts


def flatten_resume_to_text(resume: Any) -> str:
    """Collapse every known resume section into one normalized text blob."""
    document = coerce_resume_document(resume)
    parts: list[str] = []
    parts.extend(_personal_parts(document))
    parts.append(resolve_summary(document))
    parts.extend(_experience_parts(document))
    parts.extend(_education_parts(document))
    parts.extend(_skills_parts(document))
    parts.extend(_project_parts(document))
    parts.extend(_certification_parts(document))
    return normalize_text(" ".join(part for part in parts if part))
