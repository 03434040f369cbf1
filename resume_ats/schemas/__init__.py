from .analysis import (
    AnalysisResult,
    ATSFeedback,
    ExperienceSuggestion,
    FeatureFlags,
    FeedbackResult,
    ImprovementSuggestions,
    KeywordMatchResult,
    ScoreBreakdown,
)
from .requests import AnalyzeRequest, FeedbackRequest

__all__ = [
    "KeywordMatchResult",
    "FeatureFlags",
    "ScoreBreakdown",
    "AnalysisResult",
    "FeedbackResult",
    "ExperienceSuggestion",
    "ImprovementSuggestions",
    "ATSFeedback",
    "AnalyzeRequest",
    "FeedbackRequest",
]
