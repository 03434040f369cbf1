from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but",
        "for", "with", "without", "of", "in", "on", "at", "to", "from",
        "by", "as", "is", "are", "was", "were", "be", "been", "being",
        "this", "that", "these", "those",
        "i", "you", "he", "she", "it", "we", "they",
        "your", "our", "their", "my", "his", "her",
        "will", "would", "can", "could", "should", "may", "might",
        "have", "has", "had", "do", "does", "did",
        "over", "under", "more", "less", "very",
        "years", "year", "experience", "skill", "skills",
        "working", "work", "role", "responsible",
    }
)

# "+", "#" and "." survive so C++, C# and Node.js stay intact.
_DISALLOWED_CHARS_RE = re.compile(r"[^a-z0-9+#.\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_VERB_ENDINGS = ("ing", "ed")


def _require_text(value: object, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def normalize_text(text: str | None) -> str:
    raw = _require_text(text, "text")
    if not raw:
        return ""
    result = _DISALLOWED_CHARS_RE.sub(" ", raw.lower())
    return _WHITESPACE_RE.sub(" ", result).strip()


def normalize_token(token: str) -> str:
    """Strip a plural ``s`` and common verb endings; not a real stemmer."""
    if not token:
        return ""
    value = token.lower()
    if len(value) > 4 and value.endswith("s"):
        value = value[:-1]
    for ending in _VERB_ENDINGS:
        if len(value) > 5 and value.endswith(ending):
            value = value[: -len(ending)]
    return value


def extract_keywords(
    text: str | None,
    min_length: int = 3,
    stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
) -> set[str]:
    normalized = normalize_text(text)
    if not normalized:
        return set()

    stop = stop_words if isinstance(stop_words, (set, frozenset)) else frozenset(stop_words)
    candidates: set[str] = set()
    for raw in normalized.split(" "):
        if not raw or len(raw) < min_length or raw in stop:
            continue
        token = normalize_token(raw)
        if not token or token in stop:
            continue
        candidates.add(token)
    return candidates
