from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class KeywordMatchResult(CamelModel):
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    match_percentage: int = Field(default=0, ge=0, le=100)


class FeatureFlags(CamelModel):
    has_summary: bool = False
    has_skills: bool = False
    has_experience: bool = False
    has_education: bool = False
    has_contact_info: bool = False
    # Only JSON is inspected, so layout signals stay fixed.
    has_tables: bool = False
    has_icons: bool = False
    has_proper_headings: bool = True


class ScoreBreakdown(CamelModel):
    sections: int = Field(ge=0, le=100)
    contact: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)


class AnalysisResult(CamelModel):
    score: int = Field(ge=0, le=100)
    score_breakdown: ScoreBreakdown
    keyword_match: KeywordMatchResult
    feature_flags: FeatureFlags


class FeedbackResult(CamelModel):
    strengths: list[str] = Field(min_length=1, max_length=3)
    improvements: list[str] = Field(min_length=1, max_length=3)
    readability: str


class ExperienceSuggestion(CamelModel):
    index: int = Field(ge=0)
    bullets: list[str] = Field(default_factory=list)


class ImprovementSuggestions(CamelModel):
    target_title: str | None = None
    summary_suggestion: str
    experience_suggestions: list[ExperienceSuggestion] = Field(default_factory=list)
    action_verbs: list[str] = Field(default_factory=list)


class ATSFeedback(FeedbackResult):
    suggestions: ImprovementSuggestions
