import math
from typing import Iterable, List, Sequence

import numpy as np
from rapidfuzz.distance import Levenshtein
from sklearn.feature_extraction.text import CountVectorizer

# Two words are treated as the same term at or above this similarity
WORD_SIM_THRESHOLD = 0.7

# Constant IDF factor; every term gets the same weight
IDF_WEIGHT = math.log(2.0)


def safe_float(value: float) -> float:
    """Coerce NaN and infinities to 0.0."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def word_similarity(word1: str, word2: str) -> float:
    """
    Normalized Levenshtein similarity between two strings.

    Returns 1 - distance / max(len(word1), len(word2)). The comparison is
    case-sensitive and two empty strings are identical.
    """
    max_len = max(len(word1), len(word2))
    if max_len == 0:
        return 1.0
    distance = Levenshtein.distance(word1, word2)
    return (max_len - distance) / max_len


def tokenize(text: str) -> List[str]:
    return text.lower().split()


def build_vocabulary(*docs: Iterable[str]) -> List[str]:
    """Sorted union of the lower-cased whitespace tokens of every document."""
    terms = set()
    for doc in docs:
        for text in doc:
            terms.update(tokenize(text))
    return sorted(terms)


def tfidf_vector(doc: Sequence[str], vocabulary: Sequence[str]) -> np.ndarray:
    """
    Term frequency vector of doc over vocabulary, scaled by IDF_WEIGHT.

    Each string in doc is split on whitespace after lower-casing, and the
    counts of all strings are summed into one vector.
    """
    if not vocabulary:
        return np.zeros(0)
    if not doc:
        return np.zeros(len(vocabulary))

    vectorizer = CountVectorizer(
        vocabulary=list(vocabulary),
        tokenizer=str.split,
        token_pattern=None,
        lowercase=True,
    )
    counts = vectorizer.transform(list(doc)).sum(axis=0)
    return np.asarray(counts, dtype=float).ravel() * IDF_WEIGHT


def cosine_similarity(v1: Sequence[float], v2: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Returns 0.0 when the lengths differ, either vector is empty or has a
    zero norm, or the result is not finite.
    """
    a = np.asarray(v1, dtype=float)
    b = np.asarray(v2, dtype=float)
    if a.shape != b.shape or a.size == 0:
        return 0.0

    norm_a = math.sqrt(float(np.dot(a, a)))
    norm_b = math.sqrt(float(np.dot(b, b)))
    if norm_a <= 0 or norm_b <= 0:
        return 0.0

    similarity = safe_float(float(np.dot(a, b)) / (norm_a * norm_b))
    return min(max(similarity, 0.0), 1.0)


def semantic_similarity(doc1: Sequence[str], doc2: Sequence[str]) -> float:
    """Cosine similarity of the two documents over their shared vocabulary."""
    vocabulary = build_vocabulary(doc1, doc2)
    return cosine_similarity(tfidf_vector(doc1, vocabulary), tfidf_vector(doc2, vocabulary))
