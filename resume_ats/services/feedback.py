"""Rule-based ATS feedback.

Every message here is produced by a fixed rules table over the analysis
metrics. No language model is called: the output shape matches what a model
integration would return, but swapping one in needs its own contract.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from resume_ats.core.config.scoring import FeedbackRules, get_default_scoring_config
from resume_ats.normalize.resume_document import (
    coerce_resume_document,
    resolve_list,
    resolve_personal,
    text_value,
)
from resume_ats.schemas.analysis import (
    AnalysisResult,
    ATSFeedback,
    ExperienceSuggestion,
    FeedbackResult,
    ImprovementSuggestions,
)

from .ats_analysis import analyze_resume_for_ats

logger = logging.getLogger(__name__)

ACTION_VERBS: tuple[str, ...] = (
    "Led",
    "Owned",
    "Implemented",
    "Optimized",
    "Designed",
    "Delivered",
    "Automated",
    "Improved",
)

FALLBACK_STRENGTH = "Your resume contains enough information for an ATS to parse your background and experience."
FALLBACK_IMPROVEMENT = (
    "Fine-tune wording in your experience bullets to emphasize measurable impact and outcomes."
)

READABILITY_STRONG = (
    "Overall readability is strong. A recruiter can quickly scan your profile, and your keywords "
    "align well with typical ATS filters."
)
READABILITY_GOOD = (
    "The resume reads well, but there is room to tighten sections and add a few more targeted "
    "keywords from the job description."
)
READABILITY_WEAK = (
    "Readability can be improved by simplifying long sentences, using consistent bullet structures, "
    "and surfacing the most important accomplishments at the top of each section."
)

_TARGET_TITLE_RE = re.compile(
    r"(senior|lead|principal|staff)?\s*([a-zA-Z0-9+/#\s]+?(engineer|developer|manager|designer))",
    re.IGNORECASE,
)
_MAX_EXPERIENCE_SUGGESTIONS = 3


@dataclass(frozen=True)
class FeedbackContext:
    analysis: AnalysisResult
    job_description_provided: bool
    rules: FeedbackRules


FeedbackRule = tuple[Callable[[FeedbackContext], bool], str]

STRENGTH_RULES: tuple[FeedbackRule, ...] = (
    (
        lambda ctx: ctx.analysis.feature_flags.has_experience and ctx.analysis.feature_flags.has_education,
        "Your resume includes both work experience and education, which covers the core sections "
        "recruiters expect.",
    ),
    (
        lambda ctx: ctx.analysis.feature_flags.has_skills,
        "A dedicated skills section makes it easier for ATS systems to extract your key competencies.",
    ),
    (
        lambda ctx: ctx.analysis.feature_flags.has_contact_info,
        "Your contact information is clearly present, which prevents ATS parsing failures at the top "
        "of the funnel.",
    ),
)

IMPROVEMENT_RULES: tuple[FeedbackRule, ...] = (
    (
        lambda ctx: not ctx.analysis.feature_flags.has_summary,
        "Add a concise professional summary at the top of your resume to quickly align your profile "
        "with the target role.",
    ),
    (
        lambda ctx: not ctx.analysis.feature_flags.has_skills,
        "Create a structured skills section, grouping tools, technologies, and soft skills that are "
        "relevant to the role.",
    ),
    (
        lambda ctx: ctx.job_description_provided
        and ctx.analysis.keyword_match.match_percentage < ctx.rules.keyword_gap_threshold,
        "Increase the overlap between the job description keywords and your resume content, especially "
        "within the experience and skills sections.",
    ),
    (
        lambda ctx: ctx.analysis.score_breakdown.formatting < ctx.rules.formatting_threshold,
        "Break long paragraphs into concise bullet points to improve readability and ATS parsing quality.",
    ),
)


def is_job_description_provided(job_description: str | None) -> bool:
    return bool(job_description and job_description.strip())


def _apply_rules(rules: tuple[FeedbackRule, ...], context: FeedbackContext, fallback: str) -> list[str]:
    messages = [message for condition, message in rules if condition(context)]
    if not messages:
        messages.append(fallback)
    return messages[: context.rules.max_items]


def build_readability_comment(score: int | None, keyword_pct: int | None, rules: FeedbackRules | None = None) -> str:
    rules = rules or FeedbackRules()
    score = score if isinstance(score, (int, float)) else 0
    keyword_pct = keyword_pct if isinstance(keyword_pct, (int, float)) else 0

    if score >= rules.strong_score and keyword_pct >= rules.strong_keyword_pct:
        return READABILITY_STRONG
    if score >= rules.good_score:
        return READABILITY_GOOD
    return READABILITY_WEAK


def generate_ats_summary(
    analysis: AnalysisResult,
    job_description_provided: bool,
    rules: FeedbackRules | None = None,
) -> FeedbackResult:
    context = FeedbackContext(
        analysis=analysis,
        job_description_provided=job_description_provided,
        rules=rules or get_default_scoring_config().feedback,
    )
    return FeedbackResult(
        strengths=_apply_rules(STRENGTH_RULES, context, FALLBACK_STRENGTH),
        improvements=_apply_rules(IMPROVEMENT_RULES, context, FALLBACK_IMPROVEMENT),
        readability=build_readability_comment(
            analysis.score,
            analysis.keyword_match.match_percentage,
            context.rules,
        ),
    )


def infer_target_title(personal: Mapping[str, Any], job_description: str | None) -> str | None:
    job_title = text_value(personal.get("jobTitle")).strip()
    if job_title:
        return job_title
    if not job_description:
        return None
    first_line = job_description.split("\n")[0]
    match = _TARGET_TITLE_RE.search(first_line)
    return match.group(0).strip() if match else None


def build_summary_suggestion(
    personal: Mapping[str, Any],
    target_title: str | None,
    job_description: str | None,
) -> str:
    name = text_value(personal.get("fullName")).strip() or "this candidate"
    title = target_title or text_value(personal.get("jobTitle")).strip() or "experienced professional"
    years = text_value(personal.get("totalExperience") or personal.get("yearsOfExperience")).strip()

    experience_part = f"{years}+ years of experience" if years else "solid experience"
    jd_hint = " tailored to this role" if is_job_description_provided(job_description) else ""

    return (
        f"{name} is a {title} with {experience_part} delivering high-impact results across multiple "
        f"projects. The resume highlights core strengths, modern tooling, and cross-functional "
        f"collaboration{jd_hint}, but you can further emphasize measurable outcomes and domain-specific "
        f"achievements."
    )


def build_experience_suggestions(
    document: Mapping[str, Any],
    job_description: str | None,
) -> list[ExperienceSuggestion]:
    experience = resolve_list(document, "experience")
    jd_provided = is_job_description_provided(job_description)

    suggestions: list[ExperienceSuggestion] = []
    for index, entry in enumerate(experience[:_MAX_EXPERIENCE_SUGGESTIONS]):
        entry = entry if isinstance(entry, Mapping) else {}
        role = text_value(entry.get("jobTitle") or entry.get("role")).strip() or "your role"
        company = text_value(entry.get("company")).strip() or "the organization"

        bullets = [
            f"Led initiatives as {role} at {company}, focusing on ownership of end-to-end delivery "
            "rather than task-level work.",
            "Rewrote bullets to start with action verbs and end with clear, quantifiable outcomes "
            "(e.g. impact on revenue, latency, conversion, or adoption).",
        ]
        if jd_provided:
            bullets.append(
                "Aligned responsibilities and achievements with the language used in the job description "
                "so ATS keyword matching and recruiter scanning both improve."
            )
        else:
            bullets.append(
                "Grouped related responsibilities under a few concise bullets to avoid overwhelming the "
                "reader with low-signal details."
            )
        suggestions.append(ExperienceSuggestion(index=index, bullets=bullets))
    return suggestions


def generate_ats_improvements(resume: Mapping[str, Any] | Any, job_description: str | None = "") -> ImprovementSuggestions:
    document = coerce_resume_document(resume)
    personal = resolve_personal(document)
    target_title = infer_target_title(personal, job_description)
    return ImprovementSuggestions(
        target_title=target_title,
        summary_suggestion=build_summary_suggestion(personal, target_title, job_description),
        experience_suggestions=build_experience_suggestions(document, job_description),
        action_verbs=list(ACTION_VERBS),
    )


def generate_feedback(
    resume: Mapping[str, Any] | Any,
    job_description: str | None = "",
    analysis: AnalysisResult | None = None,
    rules: FeedbackRules | None = None,
) -> ATSFeedback:
    """Strengths, improvements, readability and templated rewrite suggestions.

    ``analysis`` is computed with the default engine when the caller has not
    already run one.
    """
    if job_description is not None and not isinstance(job_description, str):
        raise TypeError(f"job_description must be a string, got {type(job_description).__name__}")

    if analysis is None:
        analysis = analyze_resume_for_ats(resume, job_description)

    summary = generate_ats_summary(analysis, is_job_description_provided(job_description), rules)
    suggestions = generate_ats_improvements(resume, job_description)
    logger.info(
        "ats_feedback_generated strengths=%s improvements=%s experience_suggestions=%s",
        len(summary.strengths),
        len(summary.improvements),
        len(suggestions.experience_suggestions),
    )
    return ATSFeedback(
        strengths=summary.strengths,
        improvements=summary.improvements,
        readability=summary.readability,
        suggestions=suggestions,
    )
