from typing import Iterable
from rapidfuzz.distance import Levenshtein


def jaccard_similarity(tokens_a: Iterable[str], tokens_b: Iterable[str]) -> float:
    """
    Token-set (Jaccard) similarity: |A & B| / |A | B|.

    Args:
        tokens_a (Iterable[str]): First collection of tokens (duplicates collapse).
        tokens_b (Iterable[str]): Second collection of tokens.

    Returns:
        float: Similarity in [0, 1]. Two empty sets yield 0.0.
    """
    set_a, set_b = set(tokens_a), set(tokens_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def edit_distance_similarity(a: str, b: str) -> float:
    """
    Levenshtein distance normalized by the longer string: 1 - dist / max(len).

    Args:
        a (str): First string.
        b (str): Second string.

    Returns:
        float: Similarity in [0, 1]; 1.0 for identical strings (two empty strings included).
    """
    return Levenshtein.normalized_similarity(a, b)
