from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from resume_ats.normalize.text import DEFAULT_STOP_WORDS

from .settings import settings

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")


def _scoring_config_path() -> Path:
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return _DEFAULT_SCORING_CONFIG_PATH


def _read_scoring_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise RuntimeError(
            f"Scoring config not found at '{path}'. "
            "Set SCORING_CONFIG_PATH or restore resume_ats/core/config/scoring.yaml"
        )

    try:
        import yaml  # type: ignore[import-not-found]
    except Exception as exc:
        raise RuntimeError(
            "Unable to parse scoring config because PyYAML is unavailable. "
            "Install dependency: PyYAML."
        ) from exc

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:  # type: ignore[attr-defined]
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Load the raw scoring mapping from scoring.yaml and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    _SCORING_CONFIG_CACHE = _read_scoring_yaml(_scoring_config_path())
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'weights.keywords'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


@dataclass(frozen=True)
class SectionWeights:
    summary: float = 0.10
    skills: float = 0.10
    experience: float = 0.10
    education: float = 0.10
    contact: float = 0.10
    keywords: float = 0.30
    formatting: float = 0.20

    def total(self) -> float:
        return (
            self.summary
            + self.skills
            + self.experience
            + self.education
            + self.contact
            + self.keywords
            + self.formatting
        )


@dataclass(frozen=True)
class SimilarityRules:
    containment_ratio: float = 0.8
    max_edit_length: int = 10
    edit_distance_short: int = 1
    edit_distance_long: int = 2
    long_token_min_length: int = 6


@dataclass(frozen=True)
class FormattingRules:
    min_segment_length: int = 40
    min_bullet_segments: int = 2
    bullet_weight: float = 0.4
    no_tables_weight: float = 0.3
    no_icons_weight: float = 0.3


@dataclass(frozen=True)
class FeedbackRules:
    max_items: int = 3
    keyword_gap_threshold: int = 60
    formatting_threshold: int = 60
    strong_score: int = 85
    strong_keyword_pct: int = 70
    good_score: int = 70


@dataclass(frozen=True)
class ScoringConfig:
    """Immutable scoring parameters injected into the ATS engine."""

    weights: SectionWeights = field(default_factory=SectionWeights)
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    min_keyword_length: int = 3
    summary_min_length: int = 50
    similarity: SimilarityRules = field(default_factory=SimilarityRules)
    formatting: FormattingRules = field(default_factory=FormattingRules)
    feedback: FeedbackRules = field(default_factory=FeedbackRules)

    def __post_init__(self) -> None:
        weights = self.weights
        for name in ("summary", "skills", "experience", "education", "contact", "keywords", "formatting"):
            if getattr(weights, name) < 0:
                raise RuntimeError(f"Scoring weight '{name}' must not be negative.")
        if not math.isclose(weights.total(), 1.0, abs_tol=1e-6):
            raise RuntimeError(f"Scoring weights must sum to 1.0, got {weights.total():.4f}.")
        if self.min_keyword_length < 1:
            raise RuntimeError("keywords.min_length must be at least 1.")
        if not 1 <= self.feedback.max_items <= 3:
            raise RuntimeError("feedback.max_items must be between 1 and 3.")

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "ScoringConfig":
        """Build a config from the scoring.yaml mapping; absent keys keep their defaults."""
        weights = _section(raw, "weights")
        keywords = _section(raw, "keywords")
        similarity = _section(raw, "similarity")
        summary = _section(raw, "summary")
        formatting = _section(raw, "formatting")
        feedback = _section(raw, "feedback")
        readability = _section(feedback, "readability")

        stop_words = keywords.get("stop_words")
        if stop_words is None:
            stop_word_set = DEFAULT_STOP_WORDS
        elif isinstance(stop_words, list):
            # YAML 1.1 reads bare on/off/yes/no as booleans; those entries must be quoted.
            invalid = [word for word in stop_words if not isinstance(word, str)]
            if invalid:
                raise RuntimeError(f"keywords.stop_words entries must be strings, got {invalid!r}.")
            stop_word_set = frozenset(word.strip().lower() for word in stop_words if word.strip())
        else:
            raise RuntimeError("keywords.stop_words must be a list of strings.")

        defaults_weights = SectionWeights()
        defaults_similarity = SimilarityRules()
        defaults_formatting = FormattingRules()
        defaults_feedback = FeedbackRules()

        return cls(
            weights=SectionWeights(
                **{
                    name: _number(weights, name, getattr(defaults_weights, name), float)
                    for name in (
                        "summary",
                        "skills",
                        "experience",
                        "education",
                        "contact",
                        "keywords",
                        "formatting",
                    )
                }
            ),
            stop_words=stop_word_set,
            min_keyword_length=_number(keywords, "min_length", 3, int),
            summary_min_length=_number(summary, "min_length", 50, int),
            similarity=SimilarityRules(
                containment_ratio=_number(
                    similarity, "containment_ratio", defaults_similarity.containment_ratio, float
                ),
                max_edit_length=_number(similarity, "max_edit_length", defaults_similarity.max_edit_length, int),
                edit_distance_short=_number(
                    similarity, "edit_distance_short", defaults_similarity.edit_distance_short, int
                ),
                edit_distance_long=_number(
                    similarity, "edit_distance_long", defaults_similarity.edit_distance_long, int
                ),
                long_token_min_length=_number(
                    similarity, "long_token_min_length", defaults_similarity.long_token_min_length, int
                ),
            ),
            formatting=FormattingRules(
                min_segment_length=_number(
                    formatting, "min_segment_length", defaults_formatting.min_segment_length, int
                ),
                min_bullet_segments=_number(
                    formatting, "min_bullet_segments", defaults_formatting.min_bullet_segments, int
                ),
                bullet_weight=_number(formatting, "bullet_weight", defaults_formatting.bullet_weight, float),
                no_tables_weight=_number(
                    formatting, "no_tables_weight", defaults_formatting.no_tables_weight, float
                ),
                no_icons_weight=_number(formatting, "no_icons_weight", defaults_formatting.no_icons_weight, float),
            ),
            feedback=FeedbackRules(
                max_items=_number(feedback, "max_items", defaults_feedback.max_items, int),
                keyword_gap_threshold=_number(
                    feedback, "keyword_gap_threshold", defaults_feedback.keyword_gap_threshold, int
                ),
                formatting_threshold=_number(
                    feedback, "formatting_threshold", defaults_feedback.formatting_threshold, int
                ),
                strong_score=_number(readability, "strong_score", defaults_feedback.strong_score, int),
                strong_keyword_pct=_number(
                    readability, "strong_keyword_pct", defaults_feedback.strong_keyword_pct, int
                ),
                good_score=_number(readability, "good_score", defaults_feedback.good_score, int),
            ),
        )


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RuntimeError(f"Scoring config section '{key}' must be a mapping.")
    return value


def _number(section: dict[str, Any], key: str, default: Any, kind: type) -> Any:
    value = section.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RuntimeError(f"Scoring config value '{key}' must be numeric, got {value!r}.")
    return kind(value)


def load_scoring_config(path: str | Path | None = None) -> ScoringConfig:
    """Typed scoring config; reads an explicit path or the cached default mapping."""
    if path is not None:
        return ScoringConfig.from_mapping(_read_scoring_yaml(Path(path)))
    return ScoringConfig.from_mapping(get_scoring_config())


@lru_cache(maxsize=1)
def get_default_scoring_config() -> ScoringConfig:
    return load_scoring_config()
