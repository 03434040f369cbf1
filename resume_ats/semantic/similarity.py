from __future__ import annotations

from resume_ats.core.config.scoring import SimilarityRules

_DEFAULT_RULES = SimilarityRules()


def levenshtein_distance(a: str, b: str) -> int:
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current
    return previous[-1]


def are_tokens_similar(a: str, b: str, rules: SimilarityRules | None = None) -> bool:
    """Fuzzy "same concept" check between two keyword tokens.

    Deliberately permissive: short tokens one edit apart (``java``/``jave``)
    count as similar. Containment needs a strong length overlap so that
    ``java`` does not match ``javascript``.
    """
    if not a or not b:
        return False
    if a == b:
        return True

    rules = rules or _DEFAULT_RULES
    shorter, longer = sorted((len(a), len(b)))

    if a in b or b in a:
        if shorter / (longer or 1) >= rules.containment_ratio:
            return True

    if longer <= rules.max_edit_length:
        distance = levenshtein_distance(a, b)
        if distance <= rules.edit_distance_short:
            return True
        if distance <= rules.edit_distance_long and longer >= rules.long_token_min_length:
            return True

    return False
