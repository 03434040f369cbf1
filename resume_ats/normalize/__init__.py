from .resume_document import (
    FIELD_ACCESSORS,
    coerce_resume_document,
    flatten_resume_to_text,
    resolve_entries,
    resolve_field,
    resolve_list,
    resolve_personal,
    resolve_summary,
)
from .text import DEFAULT_STOP_WORDS, extract_keywords, normalize_text, normalize_token

__all__ = [
    "DEFAULT_STOP_WORDS",
    "normalize_text",
    "normalize_token",
    "extract_keywords",
    "FIELD_ACCESSORS",
    "coerce_resume_document",
    "resolve_field",
    "resolve_personal",
    "resolve_summary",
    "resolve_list",
    "resolve_entries",
    "flatten_resume_to_text",
]
