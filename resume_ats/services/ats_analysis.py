"""ATS analysis over structured resume JSON.

Works on the resume document itself rather than rendered HTML, so layout
signals such as tables and icons are fixed in the feature flags.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from resume_ats.core.config.scoring import ScoringConfig, get_default_scoring_config
from resume_ats.core.scoring_math import clamp, round_half_up
from resume_ats.features.formatting import compute_formatting_ratio
from resume_ats.features.section_flags import build_feature_flags
from resume_ats.normalize.resume_document import coerce_resume_document, flatten_resume_to_text
from resume_ats.schemas.analysis import AnalysisResult, FeatureFlags, ScoreBreakdown
from resume_ats.semantic.keyword_match import compute_keyword_match

logger = logging.getLogger(__name__)


def _display_score(value: float) -> int:
    return int(clamp(round_half_up(value * 100), 0, 100))


class ATSEngine:
    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or get_default_scoring_config()

    def section_score(self, flags: FeatureFlags) -> float:
        weights = self.config.weights
        return sum(
            weight
            for present, weight in (
                (flags.has_summary, weights.summary),
                (flags.has_skills, weights.skills),
                (flags.has_experience, weights.experience),
                (flags.has_education, weights.education),
            )
            if present
        )

    def analyze(self, resume: Mapping[str, Any] | Any, job_description: str | None = "") -> AnalysisResult:
        if job_description is not None and not isinstance(job_description, str):
            raise TypeError(f"job_description must be a string, got {type(job_description).__name__}")

        document = coerce_resume_document(resume)
        weights = self.config.weights

        flags = build_feature_flags(document, self.config.summary_min_length)
        section_score = self.section_score(flags)
        contact_score = weights.contact if flags.has_contact_info else 0.0

        resume_text = flatten_resume_to_text(document)
        keyword_match = compute_keyword_match(resume_text, job_description or "", self.config)
        keyword_score = (keyword_match.match_percentage / 100) * weights.keywords

        formatting_ratio = compute_formatting_ratio(document, self.config.formatting)
        formatting_score = formatting_ratio * weights.formatting

        total = section_score + contact_score + keyword_score + formatting_score
        score = _display_score(clamp(total, 0.0, 1.0))

        logger.info(
            "ats_analysis_complete score=%s keyword_pct=%s jd_keywords=%s",
            score,
            keyword_match.match_percentage,
            len(keyword_match.matched_keywords) + len(keyword_match.missing_keywords),
        )

        # Each breakdown field rounds on its own and may not sum to ``score``.
        return AnalysisResult(
            score=score,
            score_breakdown=ScoreBreakdown(
                sections=_display_score(section_score),
                contact=_display_score(contact_score),
                keywords=_display_score(keyword_score),
                formatting=_display_score(formatting_score),
            ),
            keyword_match=keyword_match,
            feature_flags=flags,
        )


@lru_cache(maxsize=1)
def get_default_engine() -> ATSEngine:
    return ATSEngine()


def analyze_resume_for_ats(resume: Mapping[str, Any] | Any, job_description: str | None = "") -> AnalysisResult:
    return get_default_engine().analyze(resume, job_description)
