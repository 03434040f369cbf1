from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from resume_ats.core.config.scoring import FormattingRules
from resume_ats.core.scoring_math import clamp
from resume_ats.normalize.resume_document import resolve_list, text_value

_SEGMENT_SPLIT_RE = re.compile(r"\n|•|-")
_DEFAULT_RULES = FormattingRules()


def is_bullet_like_description(description: str, rules: FormattingRules | None = None) -> bool:
    rules = rules or _DEFAULT_RULES
    if not description:
        return False
    segments = [
        segment
        for segment in _SEGMENT_SPLIT_RE.split(description)
        if len(segment.strip()) > rules.min_segment_length
    ]
    return len(segments) >= rules.min_bullet_segments


def compute_bullet_score(document: Mapping[str, Any], rules: FormattingRules | None = None) -> float:
    experience = resolve_list(document, "experience")
    if not experience:
        return 0.0
    bullet_like = sum(
        1
        for entry in experience
        if isinstance(entry, Mapping) and is_bullet_like_description(text_value(entry.get("description")), rules)
    )
    # Entries without a usable description still count toward the total.
    return bullet_like / len(experience)


def compute_formatting_ratio(document: Mapping[str, Any], rules: FormattingRules | None = None) -> float:
    rules = rules or _DEFAULT_RULES
    bullet_score = compute_bullet_score(document, rules)
    # Tables and icons cannot be detected from JSON, so both terms score in full.
    no_tables = 1.0
    no_icons = 1.0
    ratio = (
        rules.bullet_weight * bullet_score
        + rules.no_tables_weight * no_tables
        + rules.no_icons_weight * no_icons
    )
    return clamp(ratio, 0.0, 1.0)
