from .scoring import (
    FeedbackRules,
    FormattingRules,
    ScoringConfig,
    SectionWeights,
    SimilarityRules,
    get_default_scoring_config,
    get_scoring_config,
    get_scoring_value,
    load_scoring_config,
)
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "ScoringConfig",
    "SectionWeights",
    "SimilarityRules",
    "FormattingRules",
    "FeedbackRules",
    "get_scoring_config",
    "get_scoring_value",
    "load_scoring_config",
    "get_default_scoring_config",
]
