from __future__ import annotations

import logging

from resume_ats.core.config.scoring import ScoringConfig, get_default_scoring_config
from resume_ats.core.scoring_math import to_percentage
from resume_ats.normalize.text import extract_keywords
from resume_ats.schemas.analysis import KeywordMatchResult

from .similarity import are_tokens_similar

logger = logging.getLogger(__name__)


def compute_keyword_match(
    resume_text: str | None,
    job_description: str | None,
    config: ScoringConfig | None = None,
) -> KeywordMatchResult:
    """Classify every job-description keyword as matched or missing in the resume text.

    Matching is fuzzy (see ``are_tokens_similar``). Both keyword lists are
    returned sorted; ``match_percentage`` is the matched share of the distinct
    job-description keywords, 0 when the job description yields none.
    """
    config = config or get_default_scoring_config()
    jd_keywords = extract_keywords(job_description, config.min_keyword_length, config.stop_words)
    if not jd_keywords:
        return KeywordMatchResult(matched_keywords=[], missing_keywords=[], match_percentage=0)

    resume_keywords = extract_keywords(resume_text, config.min_keyword_length, config.stop_words)

    matched: list[str] = []
    missing: list[str] = []
    for keyword in sorted(jd_keywords):
        if keyword in resume_keywords or any(
            are_tokens_similar(keyword, candidate, config.similarity) for candidate in resume_keywords
        ):
            matched.append(keyword)
        else:
            missing.append(keyword)

    logger.debug(
        "keyword_match jd_keywords=%s resume_keywords=%s matched=%s",
        len(jd_keywords),
        len(resume_keywords),
        len(matched),
    )
    return KeywordMatchResult(
        matched_keywords=matched,
        missing_keywords=missing,
        match_percentage=to_percentage(len(matched), len(jd_keywords)),
    )
