from .keyword_match import compute_keyword_match
from .similarity import are_tokens_similar, levenshtein_distance

__all__ = ["are_tokens_similar", "levenshtein_distance", "compute_keyword_match"]
